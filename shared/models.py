"""Data classes for tours, steps, anchors and assistant state.

Used by both the engine and the pygame host.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional
from shared.constants import (
    WHOLE_SCREEN, DEFAULT_SPOTLIGHT_PADDING, DEFAULT_ASSISTANT_NAME,
    DEFAULT_ASSISTANT_AVATAR, DEFAULT_ASSISTANT_MESSAGE, Placement, Personality,
)


@dataclass(frozen=True)
class Step:
    target: str
    title: str
    content: str
    placement: Optional[Placement] = None
    disable_beacon: bool = True
    spotlight_padding: int = DEFAULT_SPOTLIGHT_PADDING
    disable_overlay: bool = False
    show_skip_button: bool = True
    required_route: Optional[str] = None
    condition: Optional[Callable[[], bool]] = field(default=None, compare=False)


@dataclass(frozen=True)
class Tour:
    name: str
    steps: tuple[Step, ...] = ()

    def __len__(self) -> int:
        return len(self.steps)


@dataclass(frozen=True)
class ResolvedAnchor:
    """Where a step is presented: a live element, or the whole screen.

    `degraded` is set when a selector was requested but nothing matched,
    so the step lost its spotlight and fell back to a centered tooltip.
    """
    target: str
    element: object = field(default=None, compare=False)
    degraded: bool = False

    @property
    def is_whole_screen(self) -> bool:
        return self.target == WHOLE_SCREEN


@dataclass
class AssistantState:
    visible: bool = True
    message: str = DEFAULT_ASSISTANT_MESSAGE
    name: str = DEFAULT_ASSISTANT_NAME
    avatar: str = DEFAULT_ASSISTANT_AVATAR
    personality: Personality = Personality.FRIENDLY
