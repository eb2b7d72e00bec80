"""
Grade and date formatting.

Number policy: values are rounded half-up with ``decimal.Decimal`` and always
printed with '.' as the decimal separator and no thousands separator, so the
output does not depend on the process locale.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from zoneinfo import ZoneInfo

from config import Settings, get_settings

from .models import QuizSettings
from .strings import StringCatalog

# Anything below this counts as zero when deciding if a quiz is graded
GRADE_EPSILON = 0.000005


def format_float(value: float | None, decimals: int = 1) -> str:
    """Format a number with a fixed number of decimals, half-up rounding."""
    if value is None:
        return ""
    quantum = Decimal(1).scaleb(-decimals) if decimals > 0 else Decimal(1)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def quiz_has_grades(quiz: QuizSettings) -> bool:
    """Whether the quiz is graded at all."""
    return quiz.grade >= GRADE_EPSILON and quiz.sumgrades >= GRADE_EPSILON


def rescale_grade(rawgrade: float | None, quiz: QuizSettings) -> float | None:
    """Convert raw marks to the quiz's scaled grade."""
    if rawgrade is None:
        return None
    if quiz.sumgrades >= GRADE_EPSILON:
        return rawgrade * quiz.grade / quiz.sumgrades
    return 0.0


def format_grade(quiz: QuizSettings, grade: float | None, strings: StringCatalog) -> str:
    """Format a grade using the quiz's decimal places."""
    if grade is None:
        return strings.get_string("notyetgraded", "quiz")
    return format_float(grade, quiz.decimalpoints)


def userdate(timestamp: int, settings: Settings | None = None) -> str:
    """Format an epoch timestamp in the configured timezone."""
    settings = settings or get_settings()
    moment = datetime.fromtimestamp(timestamp, tz=ZoneInfo(settings.timezone))
    return moment.strftime(settings.date_format)


def bold(text: str) -> str:
    return f"<b>{text}</b>"
