"""Resolve a step's target against the live UI tree, degrading to whole-screen."""

from __future__ import annotations
from typing import Optional
from shared.constants import WHOLE_SCREEN, Placement
from shared.models import ResolvedAnchor

_WHOLE_SCREEN_ANCHOR = ResolvedAnchor(WHOLE_SCREEN)


class TargetResolver:
    """Looks targets up in a UI tree at presentation time.

    The UI tree is any object with ``query(selector) -> element | None``.
    Nothing is cached: every call asks the tree again, since widgets come
    and go between registration and presentation.
    """

    def __init__(self, ui_tree):
        self.ui_tree = ui_tree

    def resolve(self, descriptor: str,
                placement: Optional[Placement] = None) -> ResolvedAnchor:
        if not descriptor or descriptor == WHOLE_SCREEN or placement == Placement.CENTER:
            return _WHOLE_SCREEN_ANCHOR

        try:
            element = self.ui_tree.query(descriptor)
        except Exception as e:
            print(f"[overlay] Query for '{descriptor}' failed: {e}")
            element = None

        if element is None:
            print(f"[overlay] Target '{descriptor}' not found, falling back to {WHOLE_SCREEN}")
            return ResolvedAnchor(WHOLE_SCREEN, degraded=True)
        return ResolvedAnchor(descriptor, element=element)

    def resolve_step(self, step) -> ResolvedAnchor:
        return self.resolve(step.target, step.placement)
