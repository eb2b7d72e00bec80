"""
Value objects consumed and produced by the answer sheet helpers.

Design:
- AttemptState / MarkVisibility: closed enumerations mirrored from the host quiz
- Attempt, QuizSettings, DisplayOptions, UserRecord, ModuleContext: read-only
  request-scoped data handed in by the host
- SummaryItem, ActionLink, UserPicture: renderable pieces of a summary record
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any
from urllib.parse import urlencode


class AttemptState(str, Enum):
    """Lifecycle state of a quiz attempt."""

    IN_PROGRESS = "inprogress"
    OVERDUE = "overdue"
    FINISHED = "finished"
    ABANDONED = "abandoned"

    @property
    def string_key(self) -> str:
        """Key of the localized state name in the quiz string table."""
        return f"state{self.value}"


class MarkVisibility(IntEnum):
    """How much of the marks a viewer may see."""

    HIDDEN = 0
    MAX_ONLY = 1
    MARK_AND_MAX = 2


@dataclass(frozen=True)
class FeedbackBand:
    """Overall feedback text shown for grades in [min_grade, max_grade)."""

    min_grade: float
    max_grade: float
    text: str


@dataclass
class QuizSettings:
    """Grading configuration of a quiz."""

    id: int
    course_id: int
    name: str = ""
    grade: float = 10.0  # Maximum scaled grade
    sumgrades: float = 10.0  # Maximum raw marks
    attempts: int = 0  # 0 = unlimited
    decimalpoints: int = 2
    showuserpicture: bool = False
    feedback: list[FeedbackBand] = field(default_factory=list)

    def feedback_for_grade(self, grade: float | None) -> str:
        """Overall feedback text for a scaled grade, or '' when none applies."""
        if grade is None:
            return ""
        grade = max(grade, 0.0)
        for band in self.feedback:
            if band.min_grade <= grade < band.max_grade:
                return band.text
        return ""


@dataclass
class Attempt:
    """One instance of a user taking a quiz."""

    id: int
    quiz_id: int
    user_id: int
    attempt_number: int = 1
    state: AttemptState = AttemptState.IN_PROGRESS
    time_start: int = 0
    time_finish: int = 0
    sumgrades: float | None = None

    @property
    def is_finished(self) -> bool:
        return self.state == AttemptState.FINISHED


@dataclass
class DisplayOptions:
    """Per-viewer visibility flags for attempt review data."""

    marks: MarkVisibility = MarkVisibility.MARK_AND_MAX
    overallfeedback: bool = True


@dataclass
class UserRecord:
    """A user row as returned by the record store."""

    id: int
    firstname: str = ""
    lastname: str = ""
    username: str = ""
    email: str = ""
    idnumber: str = ""
    institution: str = ""
    department: str = ""
    phone1: str = ""
    phone2: str = ""
    city: str = ""
    country: str = ""


@dataclass(frozen=True)
class ModuleContext:
    """Context of a quiz course module."""

    id: int
    instance_id: int


@dataclass(frozen=True)
class ActionLink:
    """A link rendered with visible text. Params are stored as (name, value) pairs so links hash."""

    path: str
    params: tuple[tuple[str, Any], ...] = ()
    text: str = ""

    def __post_init__(self):
        params = self.params.items() if isinstance(self.params, dict) else self.params
        object.__setattr__(self, "params", tuple(params))

    @property
    def url(self) -> str:
        if not self.params:
            return self.path
        return f"{self.path}?{urlencode(self.params)}"


@dataclass(frozen=True)
class UserPicture:
    """Reference to a user's profile picture in a course."""

    user: UserRecord
    course_id: int


SummaryContent = str | ActionLink | UserPicture


@dataclass
class SummaryItem:
    """One row of an attempt summary."""

    title: SummaryContent
    content: SummaryContent | list[SummaryContent]
