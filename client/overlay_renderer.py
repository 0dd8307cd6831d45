"""Overlay renderer: spotlight, beacon and tooltip panel for the active tour step.

Consumes the adapter's render state ({steps, stepIndex, run}) each frame and
reports lifecycle events through a callback as renderer payload dicts
(see shared.protocol).  It knows nothing about sessions or registries.
"""

from __future__ import annotations
import math
import time
from typing import Callable
import pygame
from shared.constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, WHOLE_SCREEN,
    RendererAction, RendererStatus, RendererEventType,
)
from shared.protocol import create_renderer_event
from client.renderer.font_cache import wrap_text
import client.theme as theme


class OverlayRenderer:
    _PW = 420
    _PH_MAX = 260
    _PAD = 12
    _MARGIN = 8

    def __init__(self, ui_tree, callback: Callable[[dict], None]):
        self.ui_tree = ui_tree
        self.callback = callback

        self.steps: list[dict] = []
        self.step_index = 0
        self.running = False
        self._presented_index: int | None = None
        self._tooltip_open = False

        self._panel_rect: pygame.Rect | None = None
        self._beacon_rect: pygame.Rect | None = None
        self._next_rect: pygame.Rect | None = None
        self._back_rect: pygame.Rect | None = None
        self._skip_rect: pygame.Rect | None = None
        self._close_rect: pygame.Rect | None = None

    # ------------------------------------------------------------------ #
    # State sync
    # ------------------------------------------------------------------ #

    def update(self, state: dict):
        self.steps = state.get("steps", [])
        self.step_index = state.get("stepIndex", 0)
        self.running = bool(state.get("run")) and 0 <= self.step_index < len(self.steps)

        if not self.running:
            self._presented_index = None
            return
        if self._presented_index == self.step_index:
            return

        self._presented_index = self.step_index
        step = self.steps[self.step_index]
        self._tooltip_open = step.get("disableBeacon", True)
        self._emit(None, RendererEventType.STEP_BEFORE)
        if self._target_rect(step) is None and step.get("target") != WHOLE_SCREEN:
            self._emit(None, RendererEventType.TARGET_NOT_FOUND)

    def _emit(self, action: RendererAction | None,
              event_type: RendererEventType = RendererEventType.STEP_AFTER,
              status: RendererStatus = RendererStatus.RUNNING):
        self.callback(create_renderer_event(action, self.step_index, status, event_type))

    def _target_rect(self, step: dict) -> pygame.Rect | None:
        target = step.get("target", WHOLE_SCREEN)
        if target == WHOLE_SCREEN:
            return None
        try:
            return self.ui_tree.query(target)
        except ValueError:
            return None

    # ------------------------------------------------------------------ #
    # Input handling
    # ------------------------------------------------------------------ #

    def handle_event(self, event) -> bool:
        """Returns True when the overlay consumed the event."""
        if not self.running:
            return False
        step = self.steps[self.step_index]
        is_last = self.step_index == len(self.steps) - 1

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._emit(RendererAction.CLOSE)
                return True
            if self._tooltip_open and event.key in (pygame.K_RIGHT, pygame.K_RETURN):
                self._next(is_last)
                return True
            if self._tooltip_open and event.key == pygame.K_LEFT and self.step_index > 0:
                self._emit(RendererAction.PREV)
                return True
            return False

        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return False
        pos = event.pos

        if not self._tooltip_open:
            if self._beacon_rect and self._beacon_rect.collidepoint(pos):
                self._tooltip_open = True
                return True
            return False

        if self._close_rect and self._close_rect.collidepoint(pos):
            self._emit(RendererAction.CLOSE)
            return True
        if self._next_rect and self._next_rect.collidepoint(pos):
            self._next(is_last)
            return True
        if self._back_rect and self._back_rect.collidepoint(pos):
            self._emit(RendererAction.PREV)
            return True
        if self._skip_rect and self._skip_rect.collidepoint(pos):
            self._emit(RendererAction.SKIP, status=RendererStatus.SKIPPED)
            return True
        if self._panel_rect and self._panel_rect.collidepoint(pos):
            return True

        # The dimmed overlay blocks clicks to the page underneath
        return not step.get("disableOverlay", False)

    def _next(self, is_last: bool):
        status = RendererStatus.FINISHED if is_last else RendererStatus.RUNNING
        self._emit(RendererAction.NEXT, status=status)

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def render(self, screen: pygame.Surface,
               font: pygame.font.Font,
               small_font: pygame.font.Font):
        if not self.running:
            return
        step = self.steps[self.step_index]
        target = self._target_rect(step)
        spotlight = None
        if target is not None:
            pad = step.get("spotlightPadding", 10)
            spotlight = target.inflate(pad * 2, pad * 2)

        if not step.get("disableOverlay", False) and self._tooltip_open:
            self._draw_dim(screen, spotlight)

        if spotlight is not None:
            pulse_alpha = int(150 + 80 * math.sin(time.monotonic() * 3.0))
            self._draw_glow_rect(screen, spotlight, theme.SPOTLIGHT_GLOW, pulse_alpha)

        if not self._tooltip_open:
            self._draw_beacon(screen, spotlight or screen.get_rect())
            return
        self._beacon_rect = None
        self._draw_panel(screen, step, spotlight, font, small_font)

    def _draw_dim(self, screen: pygame.Surface, hole: pygame.Rect | None):
        dim = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        dim.fill(theme.OVERLAY_DIM)
        if hole is not None:
            dim.fill((0, 0, 0, 0), hole)
        screen.blit(dim, (0, 0))

    def _draw_glow_rect(self, screen: pygame.Surface,
                        rect: pygame.Rect, color: tuple, alpha: int):
        surf = pygame.Surface((rect.w + 4, rect.h + 4), pygame.SRCALPHA)
        pygame.draw.rect(surf, (*color, alpha),
                         pygame.Rect(0, 0, rect.w + 4, rect.h + 4), 2)
        screen.blit(surf, (rect.x - 2, rect.y - 2))

    def _draw_beacon(self, screen: pygame.Surface, anchor: pygame.Rect):
        radius = int(9 + 3 * math.sin(time.monotonic() * 4.0))
        center = anchor.center
        pygame.draw.circle(screen, theme.BEACON, center, radius)
        pygame.draw.circle(screen, theme.BTN_TEXT, center, radius, 1)
        self._beacon_rect = pygame.Rect(center[0] - 14, center[1] - 14, 28, 28)

    def _panel_position(self, placement: str, anchor: pygame.Rect | None,
                        pw: int, ph: int) -> tuple[int, int]:
        m = self._MARGIN
        if anchor is None or placement == "center":
            x, y = SCREEN_WIDTH // 2 - pw // 2, SCREEN_HEIGHT // 2 - ph // 2
        elif placement == "top":
            x, y = anchor.centerx - pw // 2, anchor.top - ph - m
        elif placement == "left":
            x, y = anchor.left - pw - m, anchor.centery - ph // 2
        elif placement == "right":
            x, y = anchor.right + m, anchor.centery - ph // 2
        else:
            x, y = anchor.centerx - pw // 2, anchor.bottom + m
        x = max(m, min(x, SCREEN_WIDTH - m - pw))
        y = max(m, min(y, SCREEN_HEIGHT - m - ph))
        return x, y

    def _draw_panel(self, screen: pygame.Surface, step: dict,
                    anchor: pygame.Rect | None,
                    font: pygame.font.Font, small_font: pygame.font.Font):
        pw, pad = self._PW, self._PAD
        inner_w = pw - pad * 2

        title_surf = font.render(step.get("title", ""), True, theme.TEXT_TITLE)
        body_lines = wrap_text(step.get("content", ""), small_font, inner_w)
        line_h = small_font.get_height() + 2
        btn_h, btn_gap = 26, 6

        content_h = title_surf.get_height() + 6 + len(body_lines) * line_h + btn_gap + btn_h
        ph = min(content_h + pad * 2, self._PH_MAX)
        px, py = self._panel_position(step.get("placement", "center"), anchor, pw, ph)

        panel = pygame.Surface((pw, ph), pygame.SRCALPHA)
        panel.fill(theme.BG_TOOLTIP)
        screen.blit(panel, (px, py))
        pygame.draw.rect(screen, theme.BORDER_TOOLTIP, pygame.Rect(px, py, pw, ph), 1)
        self._panel_rect = pygame.Rect(px, py, pw, ph)

        y = py + pad
        screen.blit(title_surf, (px + pad, y))
        close_surf = small_font.render("x", True, theme.TEXT_DIM)
        self._close_rect = pygame.Rect(px + pw - pad - 16, y, 16, 16)
        screen.blit(close_surf, close_surf.get_rect(center=self._close_rect.center))
        y += title_surf.get_height() + 6

        clip_bottom = py + ph - (btn_h + btn_gap + pad)
        old_clip = screen.get_clip()
        screen.set_clip(pygame.Rect(px + pad, py + pad, inner_w, ph - pad * 2))
        for line in body_lines:
            if y + line_h > clip_bottom:
                break
            screen.blit(small_font.render(line, True, theme.TEXT_BRIGHT), (px + pad, y))
            y += line_h
        screen.set_clip(old_clip)

        btn_y = py + ph - btn_h - pad
        progress = small_font.render(f"{self.step_index + 1} of {len(self.steps)}",
                                     True, theme.TEXT_DIM)
        screen.blit(progress, (px + pad, btn_y + (btn_h - progress.get_height()) // 2))

        is_last = self.step_index == len(self.steps) - 1
        x = px + pw - pad
        self._next_rect = self._draw_button(screen, small_font, "Finish" if is_last else "Next",
                                            theme.BTN_FINISH if is_last else theme.BTN_PRIMARY,
                                            x, btn_y, btn_h)
        x = self._next_rect.left - btn_gap
        self._back_rect = None
        if self.step_index > 0:
            self._back_rect = self._draw_button(screen, small_font, "Back",
                                                theme.BTN_SECONDARY, x, btn_y, btn_h)
            x = self._back_rect.left - btn_gap
        self._skip_rect = None
        if step.get("showSkipButton", True) and not is_last:
            self._skip_rect = self._draw_button(screen, small_font, "Skip",
                                                theme.BTN_MUTED, x, btn_y, btn_h)

    def _draw_button(self, screen: pygame.Surface, font: pygame.font.Font,
                     label: str, color: tuple, right: int, y: int, h: int) -> pygame.Rect:
        lbl = font.render(label, True, theme.BTN_TEXT)
        w = max(64, lbl.get_width() + 20)
        rect = pygame.Rect(right - w, y, w, h)
        pygame.draw.rect(screen, color, rect, border_radius=3)
        screen.blit(lbl, (rect.centerx - lbl.get_width() // 2,
                          rect.centery - lbl.get_height() // 2))
        return rect
