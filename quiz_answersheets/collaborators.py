"""
Interfaces of the host services the helpers call into.

The host passes its own implementations in; nothing here reads ambient globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from .models import Attempt, DisplayOptions, QuizSettings, SummaryItem, UserRecord
from .strings import StringCatalog, get_string_manager

VIEW_REPORTS_CAPABILITY = "mod/quiz:viewreports"


class RecordStore(Protocol):
    """Read access to user records."""

    def get_user(self, user_id: int) -> UserRecord:
        """Return the user or raise RecordNotFoundError."""
        ...


class AttemptView(Protocol):
    """An attempt as seen by the current viewer."""

    def get_attempt(self) -> Attempt: ...

    def get_quiz(self) -> QuizSettings: ...

    def get_display_options(self, reviewing: bool) -> DisplayOptions: ...

    def get_userid(self) -> int: ...

    def get_courseid(self) -> int: ...

    def has_capability(self, capability: str) -> bool: ...

    def links_to_other_attempts(self, base_url: str) -> Any:
        """Renderable links to the user's other attempts, or a falsy value."""
        ...

    def get_additional_summary_data(self, options: DisplayOptions) -> dict[str, SummaryItem]:
        """Extra summary rows contributed by the grading behaviour."""
        ...

    def get_overall_feedback(self, grade: float | None) -> str: ...


class AttemptsLimitRule(Protocol):
    """Access rule deciding whether the attempts limit has been reached."""

    def prevent_new_attempt(self, numprevattempts: int, lastattempt: Attempt) -> str | bool: ...


@dataclass
class RequestContext:
    """Request-scoped dependencies: who is looking, and how to reach the host."""

    viewer_id: int
    records: RecordStore
    strings: StringCatalog = field(default_factory=get_string_manager)
