"""Tests for the tour registry, target resolver and navigation bridge."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from shared.constants import WHOLE_SCREEN, Placement
from shared.models import Step, Tour
from engine.navigation import NavigationBridge
from engine.registry import TourRegistry
from engine.target_resolver import TargetResolver
from tests.helpers import BrokenNavigator, FakeNavigator, FakeUiTree, make_steps


class TestRegistry:
    def test_unknown_tour_has_no_steps(self):
        registry = TourRegistry()
        assert registry.steps_of("nope") == ()
        assert "nope" not in registry
        assert registry.get("nope") is None

    def test_register_and_fetch(self):
        registry = TourRegistry()
        steps = make_steps(3)
        registry.register("demo", steps)
        assert registry.steps_of("demo") == tuple(steps)
        assert "demo" in registry
        assert registry.names() == ["demo"]

    def test_later_registration_wins(self):
        registry = TourRegistry()
        registry.register("demo", make_steps(3))
        registry.register("demo", make_steps(1))
        assert len(registry.steps_of("demo")) == 1
        assert len(registry) == 1

    def test_register_tour_object(self):
        registry = TourRegistry()
        registry.register_tour(Tour("t", tuple(make_steps(2))))
        assert len(registry.get("t")) == 2

    def test_stored_steps_are_immutable_copy(self):
        registry = TourRegistry()
        steps = make_steps(2)
        registry.register("demo", steps)
        steps.append(Step("body", "extra", "extra"))
        assert len(registry.steps_of("demo")) == 2


class TestResolver:
    def test_whole_screen_sentinel(self):
        tree = FakeUiTree()
        anchor = TargetResolver(tree).resolve(WHOLE_SCREEN)
        assert anchor.is_whole_screen
        assert anchor.degraded is False
        assert tree.queries == []

    def test_found_element(self):
        anchor = TargetResolver(FakeUiTree(["#title"])).resolve("#title")
        assert anchor.target == "#title"
        assert anchor.element == "<#title>"
        assert anchor.degraded is False

    def test_missing_element_degrades(self):
        anchor = TargetResolver(FakeUiTree()).resolve("#gone")
        assert anchor.target == WHOLE_SCREEN
        assert anchor.degraded is True

    def test_center_placement_is_whole_screen(self):
        anchor = TargetResolver(FakeUiTree(["#title"])).resolve("#title", Placement.CENTER)
        assert anchor.is_whole_screen

    def test_query_error_degrades(self):
        class Exploding:
            def query(self, selector):
                raise ValueError("bad selector")

        anchor = TargetResolver(Exploding()).resolve("[[")
        assert anchor.target == WHOLE_SCREEN
        assert anchor.degraded is True

    def test_not_cached_between_calls(self):
        tree = FakeUiTree()
        resolver = TargetResolver(tree)
        assert resolver.resolve("#late").degraded is True
        tree.elements["#late"] = "<late>"
        assert resolver.resolve("#late").target == "#late"
        assert tree.queries == ["#late", "#late"]


class TestNavigation:
    def test_navigates_when_route_differs(self):
        nav = FakeNavigator("/")
        assert NavigationBridge(nav).ensure_route("/settings") is True
        assert nav.calls == ["/settings"]

    def test_no_navigation_when_same_route_or_none(self):
        nav = FakeNavigator("/settings")
        bridge = NavigationBridge(nav)
        assert bridge.ensure_route("/settings") is False
        assert bridge.ensure_route(None) is False
        assert nav.calls == []

    def test_broken_navigator_is_swallowed(self):
        bridge = NavigationBridge(BrokenNavigator())
        assert bridge.current_route() is None
        assert bridge.ensure_route("/settings") is False
