"""Tests for step projection and renderer event handling."""

import sys
import os
import json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from shared.constants import (
    WHOLE_SCREEN, Placement, RendererAction, RendererEventType, RendererStatus, TourStatus,
)
from shared.models import Step
from shared.protocol import create_renderer_event
from tests.helpers import make_engine, make_steps


def start(engine, name, steps):
    engine.registry.register(name, steps)
    engine.session.start(name)


def after(action, index, status=RendererStatus.RUNNING):
    return create_renderer_event(action, index, status, RendererEventType.STEP_AFTER)


class TestProjection:
    def test_projected_shape(self):
        engine, _, _, _ = make_engine(selectors=["#title"])
        start(engine, "demo", [Step("#title", "Title", "Hello", placement=Placement.BOTTOM)])
        projected = engine.overlay.project_steps()
        assert projected == [{
            "target": "#title",
            "content": "Hello",
            "title": "Title",
            "placement": "bottom",
            "disableBeacon": True,
            "spotlightPadding": 10,
            "disableOverlay": False,
            "showSkipButton": True,
        }]

    def test_missing_target_projects_whole_screen(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", [Step("#gone", "T", "c", placement=Placement.LEFT)])
        assert engine.overlay.project_steps()[0]["target"] == WHOLE_SCREEN

    def test_defaults_applied(self):
        engine, _, _, _ = make_engine(selectors=["#x"])
        start(engine, "demo", [Step("#x", "T", "c", spotlight_padding=0, disable_beacon=False)])
        projected = engine.overlay.project_steps()[0]
        assert projected["placement"] == "center"
        assert projected["spotlightPadding"] == 10
        assert projected["disableBeacon"] is False

    def test_projection_is_plain_data(self):
        engine, _, _, _ = make_engine(selectors=["#x"])
        start(engine, "demo", [Step("#x", "T", "c", condition=lambda: True)])
        state = engine.overlay.render_state()
        # round-trips through JSON: no callables, no back-references
        assert json.loads(json.dumps(state)) == state

    def test_render_state_idle(self):
        engine, _, _, _ = make_engine()
        assert engine.overlay.render_state() == {"steps": [], "stepIndex": 0, "run": False}

    def test_render_state_active(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(3))
        engine.session.next_step()
        state = engine.overlay.render_state()
        assert state["run"] is True
        assert state["stepIndex"] == 1
        assert len(state["steps"]) == 3

    def test_resolution_happens_at_render_time(self):
        engine, _, ui_tree, _ = make_engine()
        start(engine, "demo", [Step("#late", "T", "c")])
        assert engine.overlay.project_steps()[0]["target"] == WHOLE_SCREEN
        ui_tree.elements["#late"] = "<late>"
        assert engine.overlay.project_steps()[0]["target"] == "#late"


class TestCallbacks:
    def test_next_advances(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(3))
        engine.overlay.handle_callback(after(RendererAction.NEXT, 0))
        assert engine.session.step_index == 1

    def test_prev_retreats(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(3))
        engine.session.go_to_step(2)
        engine.overlay.handle_callback(after(RendererAction.PREV, 2))
        assert engine.session.step_index == 1

    def test_prev_on_first_step_ignored(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(3))
        engine.overlay.handle_callback(after(RendererAction.PREV, 0))
        assert engine.session.step_index == 0
        assert engine.session.is_open

    def test_next_on_last_step_finishes(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(2))
        engine.session.go_to_step(1)
        engine.overlay.handle_callback(after(RendererAction.NEXT, 1, RendererStatus.FINISHED))
        assert engine.session.status == TourStatus.IDLE
        assert engine.session.has_seen("demo")

    def test_stale_index_uses_payload_index(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(4))
        engine.session.go_to_step(2)
        # renderer still thinks it is on step 0
        engine.overlay.handle_callback(after(RendererAction.NEXT, 0))
        assert engine.session.step_index == 1

    def test_next_skips_ineligible_step(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", [
            Step("body", "A", "a"),
            Step("body", "B", "b", condition=lambda: False),
            Step("body", "C", "c"),
        ])
        engine.overlay.handle_callback(after(RendererAction.NEXT, 0))
        assert engine.session.step_index == 2

    def test_back_skips_ineligible_step(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", [
            Step("body", "A", "a"),
            Step("body", "B", "b", condition=lambda: False),
            Step("body", "C", "c"),
        ])
        engine.session.go_to_step(2)
        engine.overlay.handle_callback(after(RendererAction.PREV, 2))
        assert engine.session.step_index == 0

    def test_next_onto_ineligible_final_step_finishes(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", [
            Step("body", "A", "a"),
            Step("body", "B", "b", condition=lambda: False),
        ])
        engine.overlay.handle_callback(after(RendererAction.NEXT, 0))
        assert engine.session.status == TourStatus.IDLE
        assert engine.session.has_seen("demo")

    def test_advance_from_invalid_index_ignored(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(3))
        engine.session.go_to_step(2)
        engine.overlay.handle_callback({"action": "next", "index": "x", "type": "step:after"})
        assert engine.session.step_index == 2

    def test_target_not_found_skips(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(3))
        engine.overlay.handle_callback(create_renderer_event(
            None, 0, event_type=RendererEventType.TARGET_NOT_FOUND))
        assert engine.session.step_index == 1

    def test_target_not_found_on_last_step_completes(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(2))
        engine.overlay.handle_callback(create_renderer_event(
            None, 1, event_type=RendererEventType.TARGET_NOT_FOUND))
        assert engine.session.status == TourStatus.IDLE
        assert engine.store.seen_tours()["demo"] is True

    def test_skip_closes_and_marks_seen(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(3))
        engine.overlay.handle_callback(after(RendererAction.SKIP, 1, RendererStatus.SKIPPED))
        assert engine.session.status == TourStatus.IDLE
        assert engine.session.has_seen("demo")

    def test_close_action(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(3))
        engine.overlay.handle_callback(after(RendererAction.CLOSE, 0))
        assert engine.session.status == TourStatus.IDLE
        assert engine.session.has_seen("demo")

    def test_step_before_changes_nothing(self):
        engine, _, _, _ = make_engine()
        start(engine, "demo", make_steps(3))
        engine.overlay.handle_callback(create_renderer_event(
            None, 0, event_type=RendererEventType.STEP_BEFORE))
        assert engine.session.step_index == 0
        assert engine.session.is_open

    def test_events_ignored_when_idle(self):
        engine, _, _, _ = make_engine()
        engine.registry.register("demo", make_steps(2))
        engine.overlay.handle_callback(after(RendererAction.CLOSE, 0))
        assert engine.store.seen_tours() == {}


class TestRevealHooks:
    def test_hook_runs_when_step_targets_selector(self):
        engine, _, _, _ = make_engine()
        calls = []
        engine.overlay.add_reveal_hook(".bubble", lambda: calls.append("expand"))
        start(engine, "demo", [Step("body", "A", "a"), Step(".bubble", "B", "b")])
        assert calls == []
        engine.session.next_step()
        assert calls == ["expand"]

    def test_failing_hook_does_not_block_step(self):
        engine, _, _, _ = make_engine()

        def boom():
            raise RuntimeError("widget gone")

        engine.overlay.add_reveal_hook(".bubble", boom)
        start(engine, "demo", [Step(".bubble", "A", "a"), Step("body", "B", "b")])
        assert engine.session.step_index == 0
        engine.session.next_step()
        assert engine.session.step_index == 1
