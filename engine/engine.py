"""Composition root: one explicitly constructed engine per application.

The host builds a single TourEngine at startup and hands it to whatever
needs tours (scenes, widgets, the overlay renderer).  There is no module
level instance; two engines would mean two independent sessions.
"""

from __future__ import annotations
from shared.constants import DEFAULT_TOUR
from engine.assistant import AssistantNotifier, AssistantSettings, RESET_MESSAGE
from engine.navigation import NavigationBridge
from engine.overlay_adapter import OverlayAdapter
from engine.persistence import PersistenceStore
from engine.registry import TourRegistry
from engine.session import TourSession
from engine.target_resolver import TargetResolver
from engine.tours import builtin_tours


class TourEngine:
    """Wires registry, resolver, navigation, persistence, session, assistant and overlay.

    navigator:    current_route() -> str, navigate(route) -> None
    ui_tree:      query(selector) -> element | None
    storage:      get_item(key) -> str | None, set_item(key, str) -> None
    message_sink: set_message(text) -> None (optional)
    """

    def __init__(self, navigator, ui_tree, storage=None, message_sink=None,
                 register_builtin: bool = True):
        self.store = PersistenceStore(storage)
        self.registry = TourRegistry()
        self.resolver = TargetResolver(ui_tree)
        self.navigation = NavigationBridge(navigator)
        self.session = TourSession(self.registry, self.navigation, self.store)
        self.assistant = AssistantSettings(self.store, message_sink)
        self.notifier = AssistantNotifier(self.assistant)
        self.overlay = OverlayAdapter(self.session, self.resolver)

        self.session.add_listener(self.notifier)

        if register_builtin:
            for tour in builtin_tours():
                self.registry.register_tour(tour)

    def start_if_unseen(self, tour_name: str = DEFAULT_TOUR) -> bool:
        if self.session.has_seen(tour_name):
            return False
        return self.session.start(tour_name)

    def reset_tours(self):
        self.session.reset_history()
        self.assistant.set_message(RESET_MESSAGE)
