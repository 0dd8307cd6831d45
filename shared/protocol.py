"""Overlay renderer callback payloads: creation and one-time classification.

The renderer reports lifecycle events as loosely shaped dicts
({action, index, status, type}).  parse_renderer_event() resolves each
payload once into a tagged event so nothing downstream re-inspects the raw
fields.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union
from shared.constants import (
    RendererAction, RendererStatus, RendererEventType, EndReason,
)


@dataclass(frozen=True)
class Advance:
    index: int


@dataclass(frozen=True)
class Retreat:
    index: int


@dataclass(frozen=True)
class TargetMissing:
    index: int


@dataclass(frozen=True)
class Terminate:
    index: int
    reason: EndReason


@dataclass(frozen=True)
class Ignored:
    index: int


RendererEvent = Union[Advance, Retreat, TargetMissing, Terminate, Ignored]


def create_renderer_event(action: RendererAction | None, index: int,
                          status: RendererStatus = RendererStatus.RUNNING,
                          event_type: RendererEventType = RendererEventType.STEP_AFTER) -> dict:
    """Build a renderer callback payload."""
    return {
        "action": action.value if action is not None else None,
        "index": index,
        "status": status.value,
        "type": event_type.value,
    }


def _coerce(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _coerce_index(value) -> int:
    # bool is an int subclass but never a valid step index
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return -1


def summarize(payload: dict) -> dict:
    """Primitive-only view of a payload, safe to print."""
    if not isinstance(payload, dict):
        return {"action": "none", "index": -1, "status": "unknown", "type": "unknown"}
    return {
        "action": str(payload.get("action") or "none"),
        "index": _coerce_index(payload.get("index")),
        "status": str(payload.get("status") or "unknown"),
        "type": str(payload.get("type") or "unknown"),
    }


def parse_renderer_event(payload: dict) -> RendererEvent:
    """Classify a renderer payload into exactly one tagged event."""
    if not isinstance(payload, dict):
        return Ignored(-1)
    action = _coerce(RendererAction, payload.get("action"))
    status = _coerce(RendererStatus, payload.get("status"))
    event_type = _coerce(RendererEventType, payload.get("type"))
    index = _coerce_index(payload.get("index"))

    if event_type == RendererEventType.TARGET_NOT_FOUND:
        return TargetMissing(index)

    if event_type == RendererEventType.STEP_AFTER:
        if action == RendererAction.NEXT:
            return Advance(index)
        if action == RendererAction.PREV:
            return Retreat(index)

    if action == RendererAction.SKIP or status == RendererStatus.SKIPPED:
        return Terminate(index, EndReason.SKIPPED)
    if status == RendererStatus.FINISHED:
        return Terminate(index, EndReason.FINISHED)
    if action == RendererAction.CLOSE:
        return Terminate(index, EndReason.CLOSED)

    return Ignored(index)
