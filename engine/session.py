"""Tour session: the state machine behind a running tour.

States: IDLE -> ACTIVE (start) -> CLOSED -> IDLE (close).  One session per
engine; starting a tour while another is active replaces it.

Progress is published to listeners as plain event dicts:
    {"type": "tour_started", "tour", "index", "total"}
    {"type": "step_changed", "tour", "index", "total"}
    {"type": "tour_ended",   "tour", "index", "total", "reason"}
"""

from __future__ import annotations
from typing import Callable, Iterable, Optional
from shared.constants import DEFAULT_TOUR, EndReason, TourName, TourStatus
from shared.models import Step
from engine.navigation import NavigationBridge
from engine.persistence import PersistenceStore
from engine.registry import TourRegistry


class TourSession:
    def __init__(self, registry: TourRegistry, navigation: NavigationBridge,
                 store: PersistenceStore):
        self.registry = registry
        self.navigation = navigation
        self.store = store

        self.status = TourStatus.IDLE
        self.current_tour: Optional[str] = None
        self.step_index = 0

        self._listeners: list[Callable[[dict], None]] = []

    # ------------------------------------------------------------------ #
    # Read-only views
    # ------------------------------------------------------------------ #

    @property
    def is_open(self) -> bool:
        return self.status == TourStatus.ACTIVE

    @property
    def current_steps(self) -> tuple[Step, ...]:
        if self.current_tour is None:
            return ()
        return self.registry.steps_of(self.current_tour)

    @property
    def total(self) -> int:
        return len(self.current_steps)

    @property
    def current_step(self) -> Optional[Step]:
        steps = self.current_steps
        if self.is_open and 0 <= self.step_index < len(steps):
            return steps[self.step_index]
        return None

    # ------------------------------------------------------------------ #
    # Listeners
    # ------------------------------------------------------------------ #

    def add_listener(self, callback: Callable[[dict], None]):
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[dict], None]):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _emit(self, event_type: str, tour: str, index: int, total: int, **extra):
        event = {"type": event_type, "tour": tour, "index": index, "total": total}
        event.update(extra)
        for callback in list(self._listeners):
            try:
                callback(event)
            except Exception as e:
                print(f"[tour] Listener failed on {event_type}: {e}")

    # ------------------------------------------------------------------ #
    # Transitions
    # ------------------------------------------------------------------ #

    def start(self, tour_name: Optional[str] = None,
              fallback_name: str = DEFAULT_TOUR) -> bool:
        name = tour_name or fallback_name
        steps = self.registry.steps_of(name)
        if name not in self.registry:
            print(f"[tour] Cannot start unknown tour '{name}'")
            return False
        if not steps:
            print(f"[tour] Cannot start tour '{name}': no steps")
            return False

        if self.is_open:
            print(f"[tour] Replacing active tour '{self.current_tour}' with '{name}'")

        self.navigation.ensure_route(steps[0].required_route)
        self.current_tour = name
        self.step_index = 0
        self.status = TourStatus.ACTIVE
        print(f"[tour] Started '{name}' ({len(steps)} steps)")
        self._emit("tour_started", name, 0, len(steps))
        return True

    def go_to_step(self, index: int) -> bool:
        if not self.is_open:
            return False
        steps = self.current_steps
        if not isinstance(index, int) or not 0 <= index < len(steps):
            print(f"[tour] Ignoring step {index} (tour has {len(steps)} steps)")
            return False

        self.navigation.ensure_route(steps[index].required_route)
        if index == self.step_index:
            return True
        self.step_index = index
        self._emit("step_changed", self.current_tour, index, len(steps))
        return True

    def next_step(self):
        self.advance_from(self.step_index)

    def prev_step(self):
        self.retreat_from(self.step_index)

    def advance_from(self, index: int):
        """Move to the first eligible step after index, or finish the tour."""
        if not self.is_open:
            return
        steps = self.current_steps
        if not isinstance(index, int) or not 0 <= index < len(steps):
            print(f"[tour] Ignoring advance from step {index} (tour has {len(steps)} steps)")
            return
        for idx in range(index + 1, len(steps)):
            if self._eligible(steps[idx]):
                self.go_to_step(idx)
                return
        self.close(EndReason.FINISHED)

    def retreat_from(self, index: int):
        """Move to the last eligible step before index; no-op if there is none."""
        if not self.is_open:
            return
        steps = self.current_steps
        if not isinstance(index, int) or not 0 <= index < len(steps):
            print(f"[tour] Ignoring retreat from step {index} (tour has {len(steps)} steps)")
            return
        for idx in range(index - 1, -1, -1):
            if self._eligible(steps[idx]):
                self.go_to_step(idx)
                return

    def target_not_found_at(self, index: int):
        if not self.is_open:
            return
        total = self.total
        if not isinstance(index, int) or not 0 <= index < total:
            print(f"[tour] Target missing at invalid step {index}, closing tour")
            self.close(EndReason.CLOSED)
            return
        print(f"[tour] Target missing at step {index}, skipping ahead")
        self.advance_from(index)

    def close(self, reason: EndReason = EndReason.CLOSED):
        if not self.is_open:
            return
        tour = self.current_tour
        index = self.step_index
        total = self.total

        self.mark_seen(tour)
        self.status = TourStatus.CLOSED
        self.current_tour = None
        self.step_index = 0
        print(f"[tour] Closed '{tour}' at step {index} ({reason.value})")
        self._emit("tour_ended", tour, index, total, reason=reason.value)
        # A tour_ended listener may already have started another tour
        if self.status == TourStatus.CLOSED:
            self.status = TourStatus.IDLE

    def _eligible(self, step: Step) -> bool:
        if step.condition is None:
            return True
        try:
            return bool(step.condition())
        except Exception as e:
            print(f"[tour] Step condition for '{step.title}' failed: {e}")
            return True

    # ------------------------------------------------------------------ #
    # Seen history and registration
    # ------------------------------------------------------------------ #

    def has_seen(self, tour_name: str) -> bool:
        return self.store.has_seen(tour_name)

    def mark_seen(self, tour_name: str):
        self.store.mark_seen(tour_name)

    def reset_history(self, extra_names: Iterable[str] = ()):
        names = [t.value for t in TourName] + self.registry.names() + list(extra_names)
        self.store.reset_seen(names)
        print("[tour] Tour history reset")

    def register_tour(self, tour_name: str, steps: Iterable[Step]):
        self.registry.register(tour_name, steps)
        if not self.is_open or tour_name != self.current_tour:
            return
        # Re-registered the running tour: keep step_index inside the new list
        total = self.total
        if total == 0:
            self.close(EndReason.CLOSED)
        elif self.step_index >= total:
            self.go_to_step(total - 1)
