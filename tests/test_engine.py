"""End-to-end tests through the composed TourEngine."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from shared.constants import (
    KEY_SEEN_TOURS, ROUTE_AGENT_WORKFLOW, TourName, TourStatus,
)
from shared.models import Step
from engine.assistant import FIRST_STEP_MESSAGE, RESET_MESSAGE
from engine.engine import TourEngine
from engine.persistence import MemoryStorage
from tests.helpers import BrokenNavigator, FakeUiTree, make_engine, make_steps


class TestBuiltinTours:
    def test_builtin_tours_registered(self):
        engine, _, _, _ = make_engine(register_builtin=True)
        for name in (TourName.MAIN, TourName.AGENT_WORKFLOW, TourName.IMMERSIVE_WORKFLOW):
            assert name.value in engine.registry
        assert len(engine.registry.steps_of("main")) == 5
        assert len(engine.registry.steps_of("agent-workflow")) == 8
        assert len(engine.registry.steps_of("immersive-workflow")) == 7

    def test_workflow_tour_navigates_to_its_page(self):
        engine, navigator, _, _ = make_engine(register_builtin=True, route="/")
        engine.session.start(TourName.AGENT_WORKFLOW.value)
        assert navigator.route == ROUTE_AGENT_WORKFLOW

    def test_start_defaults_to_main(self):
        engine, _, _, _ = make_engine(register_builtin=True)
        assert engine.session.start() is True
        assert engine.session.current_tour == "main"


class TestAutostart:
    def test_starts_unseen_tour(self):
        engine, _, _, sink = make_engine(register_builtin=True)
        assert engine.start_if_unseen() is True
        assert engine.session.is_open
        assert sink.messages == [FIRST_STEP_MESSAGE]

    def test_seen_tour_does_not_start(self):
        storage = MemoryStorage({KEY_SEEN_TOURS: '{"main": true}'})
        engine, _, _, _ = make_engine(register_builtin=True, storage=storage)
        assert engine.start_if_unseen() is False
        assert engine.session.status == TourStatus.IDLE

    def test_corrupted_history_counts_as_unseen(self):
        storage = MemoryStorage({KEY_SEEN_TOURS: "{{{"})
        engine, _, _, _ = make_engine(register_builtin=True, storage=storage)
        assert engine.session.has_seen("main") is False
        assert engine.start_if_unseen() is True

    def test_history_survives_engine_restart(self):
        storage = MemoryStorage()
        first, _, _, _ = make_engine(storage=storage)
        first.registry.register("demo", make_steps(1))
        first.session.start("demo")
        first.session.next_step()

        second, _, _, _ = make_engine(storage=storage)
        assert second.session.has_seen("demo") is True


class TestScenarios:
    def test_three_step_tour_to_completion(self):
        engine, _, _, _ = make_engine()
        engine.registry.register("demo", make_steps(3))
        engine.session.start("demo")
        engine.session.next_step()
        engine.session.next_step()
        assert engine.session.step_index == 2
        engine.session.next_step()
        assert engine.session.status == TourStatus.IDLE
        assert engine.store.seen_tours()["demo"] is True

    def test_missing_target_on_last_step(self):
        engine, _, _, _ = make_engine(selectors=["#present"])
        engine.registry.register("demo", [
            Step("#present", "One", "first"),
            Step("#absent", "Two", "second"),
        ])
        engine.session.start("demo")
        engine.session.next_step()
        assert engine.overlay.render_state()["steps"][1]["target"] == "body"
        engine.session.target_not_found_at(1)
        assert engine.session.status == TourStatus.IDLE
        assert engine.session.has_seen("demo") is True

    def test_broken_navigator_does_not_block_steps(self):
        engine = TourEngine(BrokenNavigator(), FakeUiTree(), storage=MemoryStorage(),
                            register_builtin=False)
        engine.registry.register("demo", [
            Step("body", "A", "a", required_route="/settings"),
            Step("body", "B", "b", required_route="/agent-workflow"),
        ])
        assert engine.session.start("demo") is True
        engine.session.next_step()
        assert engine.session.step_index == 1


class TestReset:
    def test_reset_clears_history_and_announces(self):
        engine, _, _, sink = make_engine(register_builtin=True)
        engine.session.mark_seen("main")
        engine.session.mark_seen("custom")
        engine.reset_tours()
        seen = engine.store.seen_tours()
        assert seen["main"] is False
        assert seen["custom"] is False
        assert seen["agent-workflow"] is False
        assert sink.messages[-1] == RESET_MESSAGE
        assert engine.start_if_unseen() is True
