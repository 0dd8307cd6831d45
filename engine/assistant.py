"""Assistant: persisted guide settings and tour-progress messages.

AssistantSettings owns the guide's state (visibility, name, avatar,
personality, current message) and forwards messages to the external widget.
AssistantNotifier listens to session events and picks canned messages; it
never feeds anything back into the session.
"""

from __future__ import annotations
import random
from shared.constants import (
    KEY_ASSISTANT_VISIBLE, KEY_ASSISTANT_NAME, KEY_ASSISTANT_AVATAR,
    KEY_ASSISTANT_PERSONALITY, DEFAULT_ASSISTANT_NAME, DEFAULT_ASSISTANT_AVATAR,
    EndReason, Personality, TourName,
)
from shared.models import AssistantState
from engine.persistence import PersistenceStore

FIRST_STEP_MESSAGE = "That's a great start! Let me know if you have any questions."
MIDPOINT_MESSAGE = "You're making great progress! Keep going!"
PENULTIMATE_MESSAGE = "Almost there! Just one more step to go."

COMPLETION_MESSAGES = {
    TourName.MAIN.value: (
        "Congratulations! You've completed the main tour. Feel free to explore "
        "the platform now or ask me if you need anything!"
    ),
    TourName.AGENT_WORKFLOW.value: (
        "Great job! You now know the basics of the Agent Workflow Builder. "
        "Try creating your first workflow!"
    ),
    TourName.IMMERSIVE_WORKFLOW.value: (
        "Awesome! You're now familiar with the 3D Immersive Workflow. It's a fun "
        "way to visualize your agents' interactions!"
    ),
}
GENERIC_COMPLETION_MESSAGE = "Tour completed! If you have any questions, feel free to ask."

RESET_MESSAGE = "I've reset all your tour progress. Everything will be new again!"

PERSONALITY_GREETINGS = {
    Personality.FRIENDLY: [
        "Hi there! I'm your friendly guide now!",
        "Hello friend! I'm here to help you out!",
    ],
    Personality.TECHNICAL: [
        "Switching to technical mode. Preparing system diagnostics.",
        "Technical support initialized. Ready to assist with optimal workflows.",
    ],
    Personality.FUNNY: [
        "Well hello there! I hope you brought snacks, because I'm starving for data!",
        "It's joke time! What do you call a robot with good manners? A proper-gram!",
    ],
    Personality.SASSY: [
        "Oh great, you want me to be sassy now? Fine, whatever.",
        "New personality mode: I'm judging everything you do. Looking good so far... I guess.",
    ],
}


def completion_message(tour_name: str) -> str:
    return COMPLETION_MESSAGES.get(tour_name, GENERIC_COMPLETION_MESSAGE)


def progress_message(index: int, total: int) -> str | None:
    """Milestone message for a step index, or None between milestones."""
    if index == 0:
        return FIRST_STEP_MESSAGE
    if index == total // 2:
        return MIDPOINT_MESSAGE
    if index == total - 2:
        return PENULTIMATE_MESSAGE
    return None


class AssistantSettings:
    """Guide state, persisted field by field (the message is not persisted)."""

    def __init__(self, store: PersistenceStore, sink=None):
        self.store = store
        self.sink = sink
        self.state = self._load()

    def _load(self) -> AssistantState:
        state = AssistantState()
        visible = self.store.get(KEY_ASSISTANT_VISIBLE, True)
        state.visible = visible if isinstance(visible, bool) else True
        name = self.store.get(KEY_ASSISTANT_NAME, DEFAULT_ASSISTANT_NAME)
        state.name = name if isinstance(name, str) and name else DEFAULT_ASSISTANT_NAME
        avatar = self.store.get(KEY_ASSISTANT_AVATAR, DEFAULT_ASSISTANT_AVATAR)
        state.avatar = avatar if isinstance(avatar, str) and avatar else DEFAULT_ASSISTANT_AVATAR
        try:
            state.personality = Personality(self.store.get(KEY_ASSISTANT_PERSONALITY,
                                                           Personality.FRIENDLY.value))
        except ValueError:
            state.personality = Personality.FRIENDLY
        return state

    def set_message(self, text: str):
        self.state.message = text
        if self.sink is None:
            return
        try:
            self.sink.set_message(text)
        except Exception as e:
            print(f"[assistant] Message delivery failed: {e}")

    def toggle_visible(self) -> bool:
        self.state.visible = not self.state.visible
        self.store.set(KEY_ASSISTANT_VISIBLE, self.state.visible)
        return self.state.visible

    def set_name(self, name: str):
        self.state.name = name
        self.store.set(KEY_ASSISTANT_NAME, name)
        self.set_message(f"I'm now known as {name}! Nice to meet you!")

    def set_avatar(self, avatar: str):
        self.state.avatar = avatar
        self.store.set(KEY_ASSISTANT_AVATAR, avatar)
        self.set_message("Looking good! I'm ready for my close-up!")

    def set_personality(self, personality: Personality | str):
        personality = Personality(personality)
        self.state.personality = personality
        self.store.set(KEY_ASSISTANT_PERSONALITY, personality.value)
        self.set_message(random.choice(PERSONALITY_GREETINGS[personality]))


class AssistantNotifier:
    """Session listener: milestone and completion messages for the guide."""

    def __init__(self, assistant: AssistantSettings):
        self.assistant = assistant

    def __call__(self, event: dict):
        etype = event.get("type", "")

        if etype in ("tour_started", "step_changed"):
            text = progress_message(event.get("index", -1), event.get("total", 0))
            if text:
                self.assistant.set_message(text)

        elif etype == "tour_ended":
            reason = event.get("reason")
            if reason in (EndReason.FINISHED.value, EndReason.SKIPPED.value):
                print(f"[assistant] Tour {event.get('tour')} completed ({reason})")
                self.assistant.set_message(completion_message(event.get("tour", "")))
