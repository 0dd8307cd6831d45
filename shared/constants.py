"""Tour engine constants shared between the engine and the pygame host."""

from enum import Enum

# Targets
WHOLE_SCREEN = "body"             # sentinel target: centered, no anchor
DEFAULT_SPOTLIGHT_PADDING = 10

# Persisted storage keys (values are JSON-encoded)
KEY_SEEN_TOURS = "seenTours"
KEY_ASSISTANT_VISIBLE = "assistantVisible"
KEY_ASSISTANT_NAME = "assistantName"
KEY_ASSISTANT_AVATAR = "assistantAvatar"
KEY_ASSISTANT_PERSONALITY = "assistantPersonality"

# Assistant defaults
DEFAULT_ASSISTANT_NAME = "Vibe"
DEFAULT_ASSISTANT_AVATAR = "/robot-avatar.svg"
DEFAULT_ASSISTANT_MESSAGE = "Welcome to VibeX! I'm your AI guide. How can I help you today?"

# Display (pygame host)
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 800
FPS = 60
TITLE = "VibeX Tours"

# Host routes
ROUTE_DASHBOARD = "/"
ROUTE_AGENT_WORKFLOW = "/agent-workflow"
ROUTE_IMMERSIVE_WORKFLOW = "/immersive-workflow"
ROUTE_SETTINGS = "/settings"

# Seconds to wait after launch before auto-starting the main tour
AUTOSTART_DELAY = 1.0

DEFAULT_STORAGE_FILENAME = "tour_storage.json"


class TourName(str, Enum):
    MAIN = "main"
    AGENT_WORKFLOW = "agent-workflow"
    IMMERSIVE_WORKFLOW = "immersive-workflow"
    PROJECT_CREATION = "project-creation"
    SETTINGS = "settings"


DEFAULT_TOUR = TourName.MAIN.value


class TourStatus(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    CLOSED = "closed"


class Placement(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Personality(str, Enum):
    FRIENDLY = "friendly"
    TECHNICAL = "technical"
    FUNNY = "funny"
    SASSY = "sassy"


class EndReason(str, Enum):
    CLOSED = "closed"
    SKIPPED = "skipped"
    FINISHED = "finished"


# Overlay renderer callback vocabulary
class RendererAction(str, Enum):
    NEXT = "next"
    PREV = "prev"
    CLOSE = "close"
    SKIP = "skip"


class RendererStatus(str, Enum):
    RUNNING = "running"
    FINISHED = "finished"
    SKIPPED = "skipped"


class RendererEventType(str, Enum):
    STEP_BEFORE = "step:before"
    STEP_AFTER = "step:after"
    TARGET_NOT_FOUND = "error:target_not_found"
