"""Fakes for the engine's external collaborators."""

from shared.constants import WHOLE_SCREEN
from shared.models import Step
from engine.engine import TourEngine
from engine.navigation import NavigationBridge
from engine.persistence import MemoryStorage, PersistenceStore
from engine.registry import TourRegistry
from engine.session import TourSession


class FakeNavigator:
    def __init__(self, route="/"):
        self.route = route
        self.calls = []

    def current_route(self):
        return self.route

    def navigate(self, route):
        self.calls.append(route)
        self.route = route


class BrokenNavigator:
    def current_route(self):
        raise RuntimeError("router gone")

    def navigate(self, route):
        raise RuntimeError("router gone")


class FakeUiTree:
    def __init__(self, selectors=()):
        self.elements = {s: f"<{s}>" for s in selectors}
        self.queries = []

    def query(self, selector):
        self.queries.append(selector)
        return self.elements.get(selector)


class FakeSink:
    def __init__(self):
        self.messages = []

    def set_message(self, text):
        self.messages.append(text)


class FailingStorage:
    """Backend whose reads and writes always fail."""

    def get_item(self, key):
        raise OSError("storage unavailable")

    def set_item(self, key, value):
        raise OSError("storage unavailable")


def make_steps(n, target=WHOLE_SCREEN, **kwargs):
    return [Step(target=target, title=f"Step {i}", content=f"Content {i}", **kwargs)
            for i in range(n)]


def make_session(tours=None, route="/", storage=None):
    registry = TourRegistry()
    for name, steps in (tours or {}).items():
        registry.register(name, steps)
    navigator = FakeNavigator(route)
    store = PersistenceStore(storage if storage is not None else MemoryStorage())
    session = TourSession(registry, NavigationBridge(navigator), store)
    return session, navigator, store


def make_engine(selectors=(), route="/", storage=None, register_builtin=False):
    navigator = FakeNavigator(route)
    ui_tree = FakeUiTree(selectors)
    sink = FakeSink()
    engine = TourEngine(navigator, ui_tree,
                        storage=storage if storage is not None else MemoryStorage(),
                        message_sink=sink, register_builtin=register_builtin)
    return engine, navigator, ui_tree, sink
