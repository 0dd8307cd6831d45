"""Navigation bridge: put the app on a step's route before it is presented."""

from __future__ import annotations
from typing import Optional


class NavigationBridge:
    """Wraps the host navigator (``current_route()`` / ``navigate(route)``).

    Navigation is fire-and-forget: the route change is requested and the
    step is presented against whatever is on screen.
    """

    def __init__(self, navigator):
        self.navigator = navigator

    def current_route(self) -> Optional[str]:
        try:
            return self.navigator.current_route()
        except Exception as e:
            print(f"[nav] current_route failed: {e}")
            return None

    def ensure_route(self, route: Optional[str]) -> bool:
        """Navigate to route unless already there.  Returns True if requested."""
        if not route:
            return False
        if self.current_route() == route:
            return False
        try:
            self.navigator.navigate(route)
        except Exception as e:
            print(f"[nav] navigate({route}) failed: {e}")
            return False
        print(f"[nav] -> {route}")
        return True
