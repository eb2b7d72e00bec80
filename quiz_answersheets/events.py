"""
Audit events fired when answer sheets are created, viewed or printed.

Each event kind is a class registered against a closed ``EventType``
enumeration; ``emit_event`` builds the event data, creates the event and
triggers it on an ``EventBus``. Delivery is synchronous and observer errors
propagate to the caller.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import Enum
from typing import ClassVar

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import EventAlreadyTriggeredError, UnknownEventTypeError
from .models import ActionLink, ModuleContext
from .strings import PLUGIN_COMPONENT, StringCatalog, get_string_manager


class EventType(str, Enum):
    """Answer sheet event kinds."""

    ATTEMPT_SHEET_CREATED = "attempt_created"
    ATTEMPT_SHEET_PRINTED = "attempt_printed"
    ATTEMPT_SHEET_VIEWED = "attempt_viewed"
    RIGHT_ANSWER_SHEET_PRINTED = "right_answer_printed"
    RIGHT_ANSWER_SHEET_VIEWED = "right_answer_viewed"
    RESPONSES_SUBMITTED = "responses_submitted"


class EduLevel(str, Enum):
    """Who the event is relevant to in participation reports."""

    PARTICIPATING = "participating"
    TEACHING = "teaching"
    OTHER = "other"


class EventOther(BaseModel):
    model_config = ConfigDict(extra="forbid")

    quizid: int
    attemptid: int


class EventData(BaseModel):
    """Validated parameters of an answer sheet event."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    relateduserid: int
    courseid: int
    context: ModuleContext
    other: EventOther
    userid: int | None = None  # Acting user, when the host supplies it
    timecreated: int = Field(default_factory=lambda: int(time.time()))


def prepare_event_data(attempt_id: int, user_id: int, course_id: int, context: ModuleContext,
                       quiz_id: int) -> dict:
    """Event parameters in the shape the event classes accept."""
    return {
        "relateduserid": user_id,
        "courseid": course_id,
        "context": context,
        "other": {
            "quizid": quiz_id,
            "attemptid": attempt_id,
        },
    }


# ============================================================================
# Event bus
# ============================================================================

Observer = Callable[["AnswerSheetEvent"], None]


class EventBus:
    """Synchronous in-process dispatcher."""

    def __init__(self):
        self._observers: list[tuple[EventType | None, Observer]] = []

    def subscribe(self, observer: Observer, event_type: EventType | None = None) -> None:
        """Register an observer for one event type, or all of them."""
        self._observers.append((event_type, observer))

    def dispatch(self, event: AnswerSheetEvent) -> None:
        for event_type, observer in self._observers:
            if event_type is None or event_type == event.event_type:
                observer(event)


_default_bus = EventBus()


def get_event_bus() -> EventBus:
    return _default_bus


# ============================================================================
# Event classes
# ============================================================================

EVENT_CLASSES: dict[EventType, type[AnswerSheetEvent]] = {}


def register(event_type: EventType):
    """Decorator to register an event class."""
    def decorator(cls):
        cls.event_type = event_type
        EVENT_CLASSES[event_type] = cls
        return cls
    return decorator


class AnswerSheetEvent:
    """Base class of answer sheet events."""

    event_type: ClassVar[EventType]
    crud: ClassVar[str] = "r"
    edulevel: ClassVar[EduLevel] = EduLevel.PARTICIPATING
    action: ClassVar[str] = "viewed"
    sheet_page: ClassVar[str] = "/mod/quiz/report/answersheets/attemptsheet.php"

    def __init__(self, data: EventData):
        self.data = data
        self.triggered = False

    @classmethod
    def create(cls, params: dict) -> AnswerSheetEvent:
        return cls(EventData.model_validate(params))

    @classmethod
    def get_name(cls, strings: StringCatalog | None = None) -> str:
        strings = strings or get_string_manager()
        return strings.get_string(f"event_{cls.event_type.value}", PLUGIN_COMPONENT)

    @property
    def attemptid(self) -> int:
        return self.data.other.attemptid

    def _actor(self) -> str:
        return "unknown" if self.data.userid is None else str(self.data.userid)

    def get_description(self) -> str:
        return (
            f"The user with id '{self._actor()}' has {self.action} the attempt with id "
            f"'{self.attemptid}' belonging to the user with id '{self.data.relateduserid}' "
            f"for the quiz with course module id '{self.data.context.instance_id}'."
        )

    def get_url(self) -> ActionLink:
        return ActionLink(self.sheet_page, {"attempt": self.attemptid})

    def to_record(self) -> dict:
        """The event record handed to observers: identifiers only."""
        return {
            "relateduserid": self.data.relateduserid,
            "courseid": self.data.courseid,
            "context": self.data.context,
            "other": self.data.other.model_dump(),
        }

    def trigger(self, bus: EventBus | None = None) -> None:
        if self.triggered:
            raise EventAlreadyTriggeredError(f"Event {self.event_type.value} was already triggered")
        self.triggered = True
        logger.debug(f"Triggering {self.event_type.value} for attempt {self.attemptid}")
        (bus or get_event_bus()).dispatch(self)


@register(EventType.ATTEMPT_SHEET_CREATED)
class AttemptCreated(AnswerSheetEvent):
    crud = "c"
    action = "created"
    sheet_page = "/mod/quiz/review.php"


@register(EventType.ATTEMPT_SHEET_PRINTED)
class AttemptPrinted(AnswerSheetEvent):
    action = "printed"


@register(EventType.ATTEMPT_SHEET_VIEWED)
class AttemptViewed(AnswerSheetEvent):
    action = "viewed"


class RightAnswerSheetEvent(AnswerSheetEvent):
    edulevel = EduLevel.TEACHING

    def get_description(self) -> str:
        return super().get_description().replace("the attempt", "the right answer sheet of the attempt", 1)

    def get_url(self) -> ActionLink:
        return ActionLink(self.sheet_page, {"attempt": self.attemptid, "rightanswer": 1})


@register(EventType.RIGHT_ANSWER_SHEET_PRINTED)
class RightAnswerPrinted(RightAnswerSheetEvent):
    action = "printed"


@register(EventType.RIGHT_ANSWER_SHEET_VIEWED)
class RightAnswerViewed(RightAnswerSheetEvent):
    action = "viewed"


@register(EventType.RESPONSES_SUBMITTED)
class ResponsesSubmitted(AnswerSheetEvent):
    crud = "c"
    edulevel = EduLevel.TEACHING
    action = "submitted responses for"
    sheet_page = "/mod/quiz/report/answersheets/submitresponses.php"


def get_event_class(event_type: str | EventType) -> type[AnswerSheetEvent]:
    """Resolve an event type name to its class."""
    try:
        event_type = EventType(event_type)
    except ValueError:
        raise UnknownEventTypeError(f"Unknown answer sheet event type: {event_type!r}") from None
    return EVENT_CLASSES[event_type]


def emit_event(
    event_type: str | EventType,
    attempt_id: int,
    user_id: int,
    course_id: int,
    context: ModuleContext,
    quiz_id: int,
    bus: EventBus | None = None,
    actor_id: int | None = None,
) -> None:
    """
    Fire an answer sheet event.

    Args:
        event_type: One of the EventType values
        attempt_id: Attempt id
        user_id: Owner of the attempt (related user)
        course_id: Course id
        context: Quiz module context
        quiz_id: Quiz id
        bus: Bus to deliver to (defaults to the shared bus)
        actor_id: User performing the action, for descriptions
    """
    event_class = get_event_class(event_type)
    params = prepare_event_data(attempt_id, user_id, course_id, context, quiz_id)
    if actor_id is not None:
        params["userid"] = actor_id
    event = event_class.create(params)
    event.trigger(bus)
