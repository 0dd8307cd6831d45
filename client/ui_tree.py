"""UI tree: the host's registry of on-screen widgets, queried by selector.

Scenes re-register their widgets every frame, so the tree always reflects
what was drawn last.  Tour targets resolve against it the way a web page's
selectors resolve against its DOM.
"""

from __future__ import annotations
from typing import Optional
import pygame


class UiTree:
    def __init__(self):
        self._rects: dict[str, pygame.Rect] = {}

    def clear(self):
        self._rects.clear()

    def expose(self, selector: str, rect: pygame.Rect):
        self._rects[selector] = pygame.Rect(rect)

    def query(self, selector: str) -> Optional[pygame.Rect]:
        """Rect registered under selector, or None if not on screen."""
        if not isinstance(selector, str) or not selector.strip():
            raise ValueError(f"Invalid selector: {selector!r}")
        return self._rects.get(selector.strip())

    def selectors(self) -> list[str]:
        return list(self._rects)
