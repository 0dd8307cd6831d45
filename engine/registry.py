"""Tour registry: tour name -> ordered, immutable step list."""

from __future__ import annotations
from typing import Iterable, Optional
from shared.models import Step, Tour


class TourRegistry:
    """In-memory tour table.  Later registrations overwrite earlier ones."""

    def __init__(self):
        self._tours: dict[str, Tour] = {}

    def register(self, name: str, steps: Iterable[Step]):
        tour = Tour(name=name, steps=tuple(steps))
        if name in self._tours:
            print(f"[tour] Re-registering tour '{name}' ({len(tour)} steps)")
        self._tours[name] = tour

    def register_tour(self, tour: Tour):
        self.register(tour.name, tour.steps)

    def get(self, name: str) -> Optional[Tour]:
        return self._tours.get(name)

    def steps_of(self, name: str) -> tuple[Step, ...]:
        tour = self._tours.get(name)
        return tour.steps if tour else ()

    def names(self) -> list[str]:
        return list(self._tours)

    def __contains__(self, name) -> bool:
        return name in self._tours

    def __len__(self) -> int:
        return len(self._tours)
