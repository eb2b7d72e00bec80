"""
Unit tests for string tables and number/date formatting.

Run: pytest tests/unit/test_strings_formatting.py -v
"""

from types import SimpleNamespace

import pytest

from quiz_answersheets.exceptions import StringNotFoundError
from quiz_answersheets.formatting import (
    format_float,
    format_grade,
    quiz_has_grades,
    rescale_grade,
    userdate,
)
from quiz_answersheets.strings import StringCatalog, format_placeholders


class TestPlaceholders:
    """Tests for {$a} substitution."""

    def test_scalar(self):
        assert format_placeholders("Attempts allowed: {$a}", 3) == "Attempts allowed: 3"

    def test_dict_properties(self):
        assert format_placeholders("{$a->grade}/{$a->maxgrade}", {"grade": 4, "maxgrade": 5}) == "4/5"

    def test_object_properties(self):
        a = SimpleNamespace(grade="4.00", maxgrade="5.00")
        assert format_placeholders("{$a->grade} out of {$a->maxgrade}", a) == "4.00 out of 5.00"

    def test_unknown_property_left_alone(self):
        assert format_placeholders("{$a->grade} ({$a->percent}%)", {"grade": 1}) == "1 ({$a->percent}%)"

    def test_no_argument(self):
        assert format_placeholders("{$a} stays", None) == "{$a} stays"

    def test_zero_argument(self):
        assert format_placeholders("{$a} left", 0) == "0 left"


class TestStringCatalog:
    """Tests for StringCatalog lookups."""

    def test_exists(self, strings):
        assert strings.string_exists("ddwtos_instruction", "quiz_answersheets")
        assert not strings.string_exists("numerical_instruction", "quiz_answersheets")
        assert not strings.string_exists("grade", "quiz_answersheets")

    def test_missing_string_raises(self, strings):
        with pytest.raises(StringNotFoundError):
            strings.get_string("nosuchstring", "quiz")

    def test_override_does_not_leak(self):
        first = StringCatalog.default().override("quiz", {"grade": "Note"})
        second = StringCatalog.default()
        assert first.get_string("grade", "quiz") == "Note"
        assert second.get_string("grade", "quiz") == "Grade"

    def test_language_pack_falls_back(self):
        fr = StringCatalog({"quiz": {"grade": "Note"}}, lang="fr", parent=StringCatalog.default())
        assert fr.get_string("grade", "quiz") == "Note"
        assert fr.get_string("marks", "quiz") == "Marks"


class TestFormatFloat:
    """Tests for format_float rounding policy."""

    @pytest.mark.parametrize("value,decimals,expected", [
        (45, 2, "45.00"),
        (90.0, 0, "90"),
        (2.5, 0, "3"),
        (0.125, 2, "0.13"),
        (66.666, 0, "67"),
        (1234567.891, 2, "1234567.89"),
        (-1.5, 0, "-2"),
    ])
    def test_half_up(self, value, decimals, expected):
        assert format_float(value, decimals) == expected

    def test_none(self):
        assert format_float(None, 2) == ""


class TestGrades:
    """Tests for grade helpers."""

    def test_rescale(self, quiz):
        assert rescale_grade(45.0, quiz) == pytest.approx(90.0)
        assert rescale_grade(None, quiz) is None

    def test_rescale_without_marks(self, quiz):
        quiz.sumgrades = 0.0
        assert rescale_grade(3.0, quiz) == 0.0

    def test_has_grades(self, quiz):
        assert quiz_has_grades(quiz)
        quiz.grade = 0.0
        assert not quiz_has_grades(quiz)

    def test_negative_grade_gets_lowest_feedback(self, quiz):
        """Negative grades count as zero when picking feedback."""
        assert quiz.feedback_for_grade(-1.0) == "Keep practising."
        assert quiz.feedback_for_grade(None) == ""

    def test_format_grade(self, quiz, strings):
        assert format_grade(quiz, 7.456, strings) == "7.46"
        assert format_grade(quiz, None, strings) == "Not yet graded"


class TestUserdate:
    """Tests for userdate."""

    def test_utc(self, settings):
        assert userdate(1_700_000_000, settings) == "14 November 2023, 22:13"

    def test_timezone(self, settings):
        settings.timezone = "Australia/Perth"
        assert userdate(1_700_000_000, settings) == "15 November 2023, 06:13"
