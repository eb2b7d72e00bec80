"""
Quiz answer sheets helpers.

Request-scoped helpers for the quiz answer sheets report:
- summary: attempt summary rows for reviewed/printed answer sheets
- identity: user names with extra identity fields
- eligibility: whether a new attempt may be started
- instructions: per-question-type instruction text
- events: audit events for viewing/printing answer sheets
- reflection: read access to hidden fields of host objects

The database layer (``quiz_answersheets.db``) is imported on demand.
"""

from .attempts import ReviewAttempt
from .collaborators import AttemptsLimitRule, AttemptView, RecordStore, RequestContext
from .eligibility import NumAttemptsRule, can_create_attempt
from .events import EventBus, EventType, emit_event, get_event_bus
from .exceptions import (
    AnswerSheetError,
    EventAlreadyTriggeredError,
    HiddenFieldError,
    RecordNotFoundError,
    StringNotFoundError,
    UnknownEventTypeError,
)
from .identity import format_user_identity, fullname
from .instructions import get_instruction
from .models import (
    ActionLink,
    Attempt,
    AttemptState,
    DisplayOptions,
    FeedbackBand,
    MarkVisibility,
    ModuleContext,
    QuizSettings,
    SummaryItem,
    UserPicture,
    UserRecord,
)
from .reflection import HiddenFieldAdapter, read_hidden_field
from .strings import StringCatalog, get_string_manager
from .summary import build_summary

__all__ = [
    # Operations
    "build_summary",
    "format_user_identity",
    "fullname",
    "can_create_attempt",
    "get_instruction",
    "emit_event",
    "read_hidden_field",
    # Collaborators
    "AttemptView",
    "AttemptsLimitRule",
    "RecordStore",
    "RequestContext",
    "ReviewAttempt",
    "NumAttemptsRule",
    "EventBus",
    "EventType",
    "get_event_bus",
    "HiddenFieldAdapter",
    "StringCatalog",
    "get_string_manager",
    # Models
    "ActionLink",
    "Attempt",
    "AttemptState",
    "DisplayOptions",
    "FeedbackBand",
    "MarkVisibility",
    "ModuleContext",
    "QuizSettings",
    "SummaryItem",
    "UserPicture",
    "UserRecord",
    # Errors
    "AnswerSheetError",
    "EventAlreadyTriggeredError",
    "HiddenFieldError",
    "RecordNotFoundError",
    "StringNotFoundError",
    "UnknownEventTypeError",
]
