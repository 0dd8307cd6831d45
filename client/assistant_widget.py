"""Assistant bubble: the on-screen guide that receives tour messages."""

from __future__ import annotations
import pygame
from shared.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from shared.models import AssistantState
from client.renderer.font_cache import wrap_text
import client.theme as theme

BUBBLE_SELECTOR = ".ai-guide-bubble"


class AssistantWidget:
    """Message sink for the engine plus the bubble that displays it.

    Messages are typed out a few characters per frame.  Clicking the bubble
    toggles between minimized and expanded.
    """

    _W = 300
    _H_EXPANDED = 150
    _H_MINIMIZED = 36
    _CHARS_PER_SEC = 60.0

    def __init__(self, state: AssistantState):
        self.state = state
        self.minimized = False
        self._full_text = state.message
        self._shown_chars = 0.0
        self.rect = pygame.Rect(0, 0, 0, 0)

    def set_message(self, text: str):
        self._full_text = text
        self._shown_chars = 0.0

    def expand(self):
        self.minimized = False

    def handle_event(self, event) -> bool:
        if not self.state.visible:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.minimized = not self.minimized
                return True
        return False

    def update(self, dt: float):
        if self._shown_chars < len(self._full_text):
            self._shown_chars = min(len(self._full_text),
                                    self._shown_chars + dt * self._CHARS_PER_SEC)

    def layout(self, ui_tree):
        """Place the bubble and expose it to tours (only while visible)."""
        if not self.state.visible:
            self.rect = pygame.Rect(0, 0, 0, 0)
            return
        h = self._H_MINIMIZED if self.minimized else self._H_EXPANDED
        self.rect = pygame.Rect(SCREEN_WIDTH - self._W - 16, SCREEN_HEIGHT - h - 16, self._W, h)
        ui_tree.expose(BUBBLE_SELECTOR, self.rect)

    def render(self, screen: pygame.Surface, font: pygame.font.Font,
               small_font: pygame.font.Font):
        if not self.state.visible:
            return
        pygame.draw.rect(screen, theme.BG_BUBBLE, self.rect, border_radius=8)
        pygame.draw.rect(screen, theme.BORDER_BUBBLE, self.rect, 2, border_radius=8)
        name = font.render(self.state.name, True, theme.TEXT_BRIGHT)
        screen.blit(name, (self.rect.x + 12, self.rect.y + 8))
        if self.minimized:
            return

        text = self._full_text[:int(self._shown_chars)]
        y = self.rect.y + 12 + name.get_height()
        line_h = small_font.get_height() + 2
        for line in wrap_text(text, small_font, self._W - 24):
            if y + line_h > self.rect.bottom - 8:
                break
            screen.blit(small_font.render(line, True, theme.TEXT_NORMAL), (self.rect.x + 12, y))
            y += line_h
