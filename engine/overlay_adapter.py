"""Overlay adapter: session state -> renderer steps, renderer events -> session.

Outbound, each Step is projected into a plain dict of primitives with the
target replaced by the resolver's anchor, so nothing the renderer (or a log
line) holds can reach back into the session.  Inbound, renderer payloads are
decoded once by shared.protocol and forwarded as session transitions, using
the index carried by the event rather than the session's current index.
"""

from __future__ import annotations
from typing import Callable
from shared.constants import DEFAULT_SPOTLIGHT_PADDING, Placement
from shared.models import Step
from shared.protocol import (
    Advance, Retreat, TargetMissing, Terminate, parse_renderer_event, summarize,
)
from engine.session import TourSession
from engine.target_resolver import TargetResolver


class OverlayAdapter:
    def __init__(self, session: TourSession, resolver: TargetResolver):
        self.session = session
        self.resolver = resolver
        self._reveal_hooks: dict[str, list[Callable[[], None]]] = {}
        session.add_listener(self._on_session_event)

    # ------------------------------------------------------------------ #
    # Outbound: projection
    # ------------------------------------------------------------------ #

    def project_step(self, step: Step) -> dict:
        anchor = self.resolver.resolve_step(step)
        placement = step.placement or Placement.CENTER
        padding = step.spotlight_padding if step.spotlight_padding else DEFAULT_SPOTLIGHT_PADDING
        return {
            "target": anchor.target,
            "content": str(step.content),
            "title": str(step.title),
            "placement": placement.value,
            "disableBeacon": step.disable_beacon is not False,
            "spotlightPadding": int(padding),
            "disableOverlay": bool(step.disable_overlay),
            "showSkipButton": step.show_skip_button is not False,
        }

    def project_steps(self) -> list[dict]:
        return [self.project_step(step) for step in self.session.current_steps]

    def render_state(self) -> dict:
        """Everything the renderer needs for this frame."""
        if not self.session.is_open:
            return {"steps": [], "stepIndex": 0, "run": False}
        steps = self.project_steps()
        return {
            "steps": steps,
            "stepIndex": self.session.step_index,
            "run": bool(steps),
        }

    # ------------------------------------------------------------------ #
    # Inbound: renderer lifecycle events
    # ------------------------------------------------------------------ #

    def handle_callback(self, payload: dict):
        print(f"[overlay] Renderer callback: {summarize(payload)}")
        if not self.session.is_open:
            return
        event = parse_renderer_event(payload)

        if isinstance(event, TargetMissing):
            self.session.target_not_found_at(event.index)

        elif isinstance(event, Advance):
            self.session.advance_from(event.index)

        elif isinstance(event, Retreat):
            self.session.retreat_from(event.index)

        elif isinstance(event, Terminate):
            self.session.close(event.reason)

    # ------------------------------------------------------------------ #
    # Reveal hooks
    # ------------------------------------------------------------------ #

    def add_reveal_hook(self, selector: str, callback: Callable[[], None]):
        """Run callback whenever the session moves onto a step targeting selector."""
        self._reveal_hooks.setdefault(selector, []).append(callback)

    def _on_session_event(self, event: dict):
        if event.get("type") not in ("tour_started", "step_changed"):
            return
        step = self.session.current_step
        if step is None:
            return
        for callback in self._reveal_hooks.get(step.target, []):
            try:
                callback()
            except Exception as e:
                print(f"[overlay] Reveal hook for '{step.target}' failed: {e}")
