"""Settings scene: tour history, assistant preferences and fullscreen."""

import pygame
from shared.constants import SCREEN_WIDTH, Personality, TourName
from client.renderer.widgets import Button
from client.scenes.pages import PageScene, NAV_HEIGHT
import client.theme as theme

_PERSONALITY_ORDER = list(Personality)


class SettingsScene(PageScene):
    title = "Settings"

    def __init__(self, app):
        super().__init__(app)
        cx = SCREEN_WIDTH // 2
        top = NAV_HEIGHT + 110
        self.start_button = Button(pygame.Rect(cx - 140, top, 280, 40),
                                   "Start Main Tour", (60, 80, 130), selector=".start-tour-btn")
        self.reset_button = Button(pygame.Rect(cx - 140, top + 56, 280, 40),
                                   "Reset Tours", (130, 80, 60), selector=".reset-tours-btn")
        self.visible_button = Button(pygame.Rect(cx - 140, top + 112, 280, 40),
                                     "", (70, 70, 90), selector=".assistant-visible-btn")
        self.personality_button = Button(pygame.Rect(cx - 140, top + 168, 280, 40),
                                         "", (70, 70, 90), selector=".personality-btn")
        self.fullscreen_button = Button(pygame.Rect(cx - 140, top + 224, 280, 40),
                                        "", (70, 70, 90))
        self.widgets = [self.start_button, self.reset_button, self.visible_button,
                        self.personality_button, self.fullscreen_button]

    def handle_click(self, pos):
        engine = self.app.engine
        if self.start_button.clicked(pos):
            engine.session.start(TourName.MAIN.value)
        elif self.reset_button.clicked(pos):
            engine.reset_tours()
        elif self.visible_button.clicked(pos):
            engine.assistant.toggle_visible()
        elif self.personality_button.clicked(pos):
            current = engine.assistant.state.personality
            nxt = _PERSONALITY_ORDER[(_PERSONALITY_ORDER.index(current) + 1) % len(_PERSONALITY_ORDER)]
            engine.assistant.set_personality(nxt)
        elif self.fullscreen_button.clicked(pos):
            self.app.toggle_fullscreen()

    def update(self, dt):
        state = self.app.engine.assistant.state
        self.visible_button.text = f"Assistant: {'shown' if state.visible else 'hidden'}"
        self.personality_button.text = f"Personality: {state.personality.value}"
        self.fullscreen_button.text = f"Fullscreen: {'on' if self.app.fullscreen else 'off'}"

    def render(self, screen: pygame.Surface):
        super().render(screen)
        seen = self.app.engine.store.seen_tours()
        y = NAV_HEIGHT + 420
        for name in [t.value for t in TourName]:
            mark = "seen" if seen.get(name) else "not seen"
            line = self.small_font.render(f"{name}: {mark}", True, theme.TEXT_DIM)
            screen.blit(line, (SCREEN_WIDTH // 2 - 140, y))
            y += line.get_height() + 4
