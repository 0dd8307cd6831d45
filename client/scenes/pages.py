"""Page scenes: one per route, each a few placeholder widgets tours can anchor to."""

import pygame
from shared.constants import (
    SCREEN_WIDTH, ROUTE_DASHBOARD, ROUTE_AGENT_WORKFLOW, ROUTE_IMMERSIVE_WORKFLOW,
    ROUTE_SETTINGS, TourName,
)
from client.renderer.widgets import Button, Placeholder
from client.renderer.font_cache import get_font
import client.theme as theme

NAV_HEIGHT = 48

_NAV_ITEMS = [
    ("Dashboard", ROUTE_DASHBOARD),
    ("Agent Workflow", ROUTE_AGENT_WORKFLOW),
    ("3D Workflow", ROUTE_IMMERSIVE_WORKFLOW),
    ("Settings", ROUTE_SETTINGS),
]


class PageScene:
    """Navigation bar, page title and placeholder widgets.

    Subclasses fill in `title`, `tour_name` and `widgets`.
    """

    title = ""
    tour_name: str | None = None

    def __init__(self, app):
        self.app = app
        self.font = get_font(16)
        self.title_font = get_font(30)
        self.small_font = get_font(14)
        self.widgets: list = []

        self.nav_buttons: list[tuple[Button, str]] = []
        x = 16
        for label, route in _NAV_ITEMS:
            w = self.font.size(label)[0] + 28
            self.nav_buttons.append(
                (Button(pygame.Rect(x, 8, w, 32), label, theme.BG_WIDGET), route))
            x += w + 8
        self.tour_button = Button(pygame.Rect(SCREEN_WIDTH - 104, 8, 88, 32), "Tour",
                                  (60, 80, 130), selector=".tour-button")

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            for button, _ in self.nav_buttons:
                button.update(event.pos)
            self.tour_button.update(event.pos)
            for widget in self.widgets:
                if isinstance(widget, Button):
                    widget.update(event.pos)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for button, route in self.nav_buttons:
                if button.clicked(event.pos):
                    self.app.navigate(route)
                    return
            if self.tour_button.clicked(event.pos):
                self.app.engine.session.start(self.tour_name)
                return
            self.handle_click(event.pos)

    def handle_click(self, pos):
        pass

    def update(self, dt):
        pass

    def expose(self, ui_tree):
        ui_tree.expose(self.tour_button.selector, self.tour_button.rect)
        for widget in self.widgets:
            if widget.selector:
                ui_tree.expose(widget.selector, widget.rect)

    def render(self, screen: pygame.Surface):
        screen.fill(theme.BG_SCREEN)
        pygame.draw.rect(screen, theme.BG_NAV, pygame.Rect(0, 0, SCREEN_WIDTH, NAV_HEIGHT))
        for button, _ in self.nav_buttons:
            button.draw(screen, self.small_font)
        self.tour_button.draw(screen, self.small_font)

        title = self.title_font.render(self.title, True, theme.TITLE_TEXT)
        screen.blit(title, (32, NAV_HEIGHT + 24))
        for widget in self.widgets:
            widget.draw(screen, self.font)


class DashboardScene(PageScene):
    title = "Team Development Hub"
    tour_name = TourName.MAIN.value

    def __init__(self, app):
        super().__init__(app)
        title_w = self.title_font.size(self.title)[0]
        self.widgets = [
            Placeholder(pygame.Rect(24, NAV_HEIGHT + 16, title_w + 16, 48),
                        "", "#dashboard-title"),
            Placeholder(pygame.Rect(32, NAV_HEIGHT + 100, 720, 64),
                        "What do you want to build?", "#ai-prompt-form"),
            Placeholder(pygame.Rect(32, NAV_HEIGHT + 200, 340, 220), "Projects", ".project-list"),
            Placeholder(pygame.Rect(400, NAV_HEIGHT + 200, 352, 220), "Activity", ".activity-feed"),
        ]


class AgentWorkflowScene(PageScene):
    title = "Agent Workflow Builder"
    tour_name = TourName.AGENT_WORKFLOW.value

    def __init__(self, app):
        super().__init__(app)
        top = NAV_HEIGHT + 80
        self.widgets = [
            Button(pygame.Rect(32, top, 140, 36), "+ Add Agent", (60, 110, 80),
                   selector=".add-agent-btn"),
            Placeholder(pygame.Rect(184, top, 460, 36),
                        "Analyst | Developer | QA | DevOps", ".agent-toolbar"),
            Button(pygame.Rect(656, top, 120, 36), "Save", (60, 80, 130),
                   selector=".save-workflow-btn"),
            Button(pygame.Rect(788, top, 120, 36), "Execute", (130, 80, 60),
                   selector=".execute-workflow-btn"),
            Placeholder(pygame.Rect(32, top + 56, 900, 420), "Workflow canvas", ".workflow-canvas"),
            Placeholder(pygame.Rect(944, top + 56, 120, 160), "Zoom / Pan", ".canvas-controls"),
        ]


class ImmersiveWorkflowScene(PageScene):
    title = "3D Immersive Workflow"
    tour_name = TourName.IMMERSIVE_WORKFLOW.value

    def __init__(self, app):
        super().__init__(app)
        top = NAV_HEIGHT + 80
        self.widgets = [
            Placeholder(pygame.Rect(32, top, 300, 36), "Rotate | Zoom | Pan", ".camera-controls"),
            Button(pygame.Rect(344, top, 160, 36), "+ Add 3D Agent", (60, 110, 80),
                   selector=".add-agent-3d-btn"),
            Button(pygame.Rect(516, top, 120, 36), "Save", (60, 80, 130),
                   selector=".save-workflow-3d-btn"),
            Button(pygame.Rect(648, top, 120, 36), "Execute", (130, 80, 60),
                   selector=".execute-workflow-3d-btn"),
            Placeholder(pygame.Rect(240, top + 120, 160, 160), "Robot agent", ".robot-agent"),
        ]
