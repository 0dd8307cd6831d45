"""Main PyGame loop, route/scene manager, tour engine wiring."""

from __future__ import annotations
import asyncio
import sys
import pygame
from shared.constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, TITLE, AUTOSTART_DELAY, DEFAULT_TOUR,
    ROUTE_DASHBOARD, ROUTE_AGENT_WORKFLOW, ROUTE_IMMERSIVE_WORKFLOW, ROUTE_SETTINGS,
)
from engine.engine import TourEngine
from engine.persistence import JsonFileStorage
from client.assistant_widget import AssistantWidget, BUBBLE_SELECTOR
from client.overlay_renderer import OverlayRenderer
from client.renderer.font_cache import get_font
from client.scenes.pages import DashboardScene, AgentWorkflowScene, ImmersiveWorkflowScene
from client.scenes.settings_scene import SettingsScene
from client.settings import load_settings, save_settings, default_storage_path
from client.ui_tree import UiTree


class App:
    """Main application: owns the routes, the UI tree and the single TourEngine."""

    def __init__(self, storage_path: str | None = None):
        pygame.init()
        settings = load_settings()
        self.fullscreen: bool = settings.get("fullscreen", False)
        self.screen = self._apply_display_mode()
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True
        self.font = get_font(16)
        self.small_font = get_font(14)

        self.route = ROUTE_DASHBOARD
        self.scenes: dict = {}
        self.current_scene = None

        self.ui_tree = UiTree()
        self.assistant_widget: AssistantWidget | None = None
        self.engine = TourEngine(
            navigator=self,
            ui_tree=self.ui_tree,
            storage=JsonFileStorage(storage_path or default_storage_path()),
            message_sink=self,
        )
        self.assistant_widget = AssistantWidget(self.engine.assistant.state)
        self.engine.overlay.add_reveal_hook(BUBBLE_SELECTOR, self.assistant_widget.expand)
        self.overlay_renderer = OverlayRenderer(self.ui_tree, self.engine.overlay.handle_callback)

        self._init_scenes()
        self.navigate(ROUTE_DASHBOARD)
        self._autostart_timer: float | None = AUTOSTART_DELAY

    def _apply_display_mode(self) -> pygame.Surface:
        flags = pygame.SCALED
        if self.fullscreen:
            flags |= pygame.FULLSCREEN
        return pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)

    def toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen
        pygame.display.toggle_fullscreen()
        save_settings({"fullscreen": self.fullscreen})

    def _init_scenes(self):
        self.scenes[ROUTE_DASHBOARD] = DashboardScene(self)
        self.scenes[ROUTE_AGENT_WORKFLOW] = AgentWorkflowScene(self)
        self.scenes[ROUTE_IMMERSIVE_WORKFLOW] = ImmersiveWorkflowScene(self)
        self.scenes[ROUTE_SETTINGS] = SettingsScene(self)

    # ------------------------------------------------------------------ #
    # Navigator (used by the engine's NavigationBridge)
    # ------------------------------------------------------------------ #

    def current_route(self) -> str:
        return self.route

    def navigate(self, route: str):
        scene = self.scenes.get(route)
        if scene is None:
            print(f"[app] Unknown route {route}")
            return
        self.route = route
        self.current_scene = scene

    # ------------------------------------------------------------------ #
    # Assistant message sink
    # ------------------------------------------------------------------ #

    def set_message(self, text: str):
        if self.assistant_widget:
            self.assistant_widget.set_message(text)

    # ------------------------------------------------------------------ #
    # Loop
    # ------------------------------------------------------------------ #

    async def run(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                    continue
                if self.overlay_renderer.handle_event(event):
                    continue
                if self.assistant_widget.handle_event(event):
                    continue
                if self.current_scene:
                    self.current_scene.handle_event(event)

            self._tick_autostart(dt)

            if self.current_scene:
                self.current_scene.update(dt)
            self.assistant_widget.update(dt)

            # Rebuild the UI tree from what this frame shows, then present the step
            self.ui_tree.clear()
            if self.current_scene:
                self.current_scene.expose(self.ui_tree)
            self.assistant_widget.layout(self.ui_tree)
            self.overlay_renderer.update(self.engine.overlay.render_state())

            if self.current_scene:
                self.current_scene.render(self.screen)
            self.assistant_widget.render(self.screen, self.font, self.small_font)
            self.overlay_renderer.render(self.screen, self.font, self.small_font)

            pygame.display.flip()
            await asyncio.sleep(0)

        pygame.quit()

    def _tick_autostart(self, dt: float):
        if self._autostart_timer is None:
            return
        self._autostart_timer -= dt
        if self._autostart_timer <= 0:
            self._autostart_timer = None
            if self.engine.start_if_unseen(DEFAULT_TOUR):
                print(f"[app] Auto-started tour '{DEFAULT_TOUR}'")


def main(storage_path: str | None = None):
    try:
        asyncio.run(App(storage_path).run())
    except KeyboardInterrupt:
        sys.exit(0)
