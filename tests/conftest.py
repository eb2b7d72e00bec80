"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import Settings  # noqa: E402
from quiz_answersheets.attempts import ReviewAttempt  # noqa: E402
from quiz_answersheets.collaborators import RequestContext  # noqa: E402
from quiz_answersheets.exceptions import RecordNotFoundError  # noqa: E402
from quiz_answersheets.models import (  # noqa: E402
    Attempt,
    AttemptState,
    DisplayOptions,
    FeedbackBand,
    ModuleContext,
    QuizSettings,
    UserRecord,
)
from quiz_answersheets.strings import StringCatalog  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


class FakeRecordStore:
    """In-memory record store keyed by user id."""

    def __init__(self, *users: UserRecord):
        self.users = {u.id: u for u in users}
        self.lookups: list[int] = []

    def get_user(self, user_id: int) -> UserRecord:
        self.lookups.append(user_id)
        if user_id not in self.users:
            raise RecordNotFoundError("user", {"id": user_id})
        return self.users[user_id]


@pytest.fixture
def settings():
    """Settings pinned to UTC and a fixed date format."""
    return Settings(timezone="UTC", date_format="%d %B %Y, %H:%M", show_user_identity="email,idnumber")


@pytest.fixture
def strings():
    """A fresh copy of the bundled English strings."""
    return StringCatalog.default()


@pytest.fixture
def student():
    return UserRecord(id=7, firstname="Ann", lastname="Smith", email="ann@example.com", idnumber="S123")


@pytest.fixture
def grader():
    return UserRecord(id=2, firstname="Tom", lastname="Jones", email="tom@example.com")


@pytest.fixture
def records(student, grader):
    return FakeRecordStore(student, grader)


@pytest.fixture
def module_context():
    return ModuleContext(id=40, instance_id=12)


@pytest.fixture
def quiz():
    """Quiz out of 100 with 50 raw marks."""
    return QuizSettings(
        id=3,
        course_id=5,
        name="Week 1 quiz",
        grade=100.0,
        sumgrades=50.0,
        attempts=2,
        decimalpoints=2,
        showuserpicture=False,
        feedback=[
            FeedbackBand(0.0, 50.0, "Keep practising."),
            FeedbackBand(50.0, 101.0, "Well done."),
        ],
    )


@pytest.fixture
def finished_attempt(student, quiz):
    return Attempt(
        id=11,
        quiz_id=quiz.id,
        user_id=student.id,
        attempt_number=1,
        state=AttemptState.FINISHED,
        time_start=1_700_000_000,
        time_finish=1_700_000_600,
        sumgrades=45.0,
    )


@pytest.fixture
def review(finished_attempt, quiz):
    return ReviewAttempt(attempt=finished_attempt, quiz=quiz, options=DisplayOptions())


@pytest.fixture
def grader_ctx(grader, records, strings):
    """Context of a grader reviewing someone else's attempt."""
    return RequestContext(viewer_id=grader.id, records=records, strings=strings)


@pytest.fixture
def student_ctx(student, records, strings):
    """Context of the student reviewing their own attempt."""
    return RequestContext(viewer_id=student.id, records=records, strings=strings)
