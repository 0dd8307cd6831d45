"""Buttons and placeholder widgets for host scenes."""

from __future__ import annotations
import pygame
import client.theme as theme


class Button:
    def __init__(self, rect: pygame.Rect, text: str, color=(80, 80, 120),
                 text_color=(255, 255, 255), hover_color=(100, 100, 150),
                 selector: str | None = None):
        self.rect = rect
        self.text = text
        self.color = color
        self.text_color = text_color
        self.hover_color = hover_color
        self.hovered = False
        self.enabled = True
        self.selector = selector  # UI tree key, if tours may target this button

    def draw(self, surface: pygame.Surface, font: pygame.font.Font):
        color = self.hover_color if self.hovered else self.color
        if not self.enabled:
            color = (60, 60, 60)
        pygame.draw.rect(surface, color, self.rect, border_radius=6)
        pygame.draw.rect(surface, (200, 200, 200), self.rect, 1, border_radius=6)
        text_surf = font.render(self.text, True, self.text_color if self.enabled else (120, 120, 120))
        text_rect = text_surf.get_rect(center=self.rect.center)
        surface.blit(text_surf, text_rect)

    def update(self, mouse_pos):
        self.hovered = self.rect.collidepoint(mouse_pos)

    def clicked(self, mouse_pos) -> bool:
        return self.enabled and self.rect.collidepoint(mouse_pos)


class Placeholder:
    """Labelled box standing in for a product screen element."""

    def __init__(self, rect: pygame.Rect, label: str, selector: str):
        self.rect = rect
        self.label = label
        self.selector = selector

    def draw(self, surface: pygame.Surface, font: pygame.font.Font):
        pygame.draw.rect(surface, theme.BG_WIDGET, self.rect, border_radius=4)
        pygame.draw.rect(surface, theme.BORDER_WIDGET, self.rect, 1, border_radius=4)
        text_surf = font.render(self.label, True, theme.TEXT_NORMAL)
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))
