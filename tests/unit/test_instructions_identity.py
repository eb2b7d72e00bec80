"""
Unit tests for question instructions and user identity strings.

Run: pytest tests/unit/test_instructions_identity.py -v
"""

import pytest

from quiz_answersheets.identity import format_user_identity, fullname
from quiz_answersheets.instructions import get_instruction
from quiz_answersheets.models import UserRecord
from quiz_answersheets.strings import PLUGIN_COMPONENT


class TestGetInstruction:
    """Tests for get_instruction."""

    def test_missing_instruction_is_empty(self, strings):
        """Question types without an instruction string get ''."""
        assert get_instruction("numerical", "", strings) == ""
        assert get_instruction("numerical", "Question 3", strings) == ""

    def test_raw_instruction(self, strings):
        strings.override(PLUGIN_COMPONENT, {"numerical_instruction": "Answer using numerals."})
        assert get_instruction("numerical", "", strings) == "Answer using numerals."

    def test_prefixed_instruction(self, strings):
        """A question name is combined through the prefix template."""
        strings.override(PLUGIN_COMPONENT, {"numerical_instruction": "answer using numerals."})
        assert get_instruction("numerical", "Question 3", strings) == "Question 3: answer using numerals."

    def test_prefix_template_is_localized(self, strings):
        strings.override(PLUGIN_COMPONENT, {
            "instruction_prefix": "[{$a->questionname}] {$a->instruction}",
        })
        assert get_instruction("ddwtos", "Q1", strings) == (
            "[Q1] Drag and drop the words into the correct gaps in the text."
        )

    @pytest.mark.parametrize("qtype", ["ddwtos", "gapselect", "match", "essay"])
    def test_bundled_instructions(self, strings, qtype):
        assert get_instruction(qtype, strings=strings) != ""


class TestFullname:
    """Tests for fullname."""

    def test_default_format(self, student):
        assert fullname(student, "{firstname} {lastname}") == "Ann Smith"

    def test_custom_format(self, student):
        assert fullname(student, "{lastname}, {firstname}") == "Smith, Ann"

    def test_strips_missing_parts(self):
        assert fullname(UserRecord(id=1, firstname="Ann"), "{firstname} {lastname}") == "Ann"


class TestFormatUserIdentity:
    """Tests for format_user_identity."""

    def test_fields_in_configured_order(self, student, module_context, strings):
        result = format_user_identity(student, module_context, ["idnumber", "email"], strings)
        assert result == "Ann Smith (S123, ann@example.com)"

    def test_empty_fields_skipped(self, grader, module_context, strings):
        result = format_user_identity(grader, module_context, ["idnumber", "email"], strings)
        assert result == "Tom Jones (tom@example.com)"

    def test_no_values_gives_plain_name(self, module_context, strings):
        user = UserRecord(id=3, firstname="Sam", lastname="Lee")
        assert format_user_identity(user, module_context, ["email", "idnumber"], strings) == "Sam Lee"

    def test_no_fields_configured(self, student, module_context, strings):
        assert format_user_identity(student, module_context, [], strings) == "Ann Smith"

    def test_unknown_field_skipped(self, module_context, strings):
        """Fields the user record does not carry, e.g. custom profile fields, are skipped."""
        user = UserRecord(id=1, firstname="Ann", lastname="Smith", email="a@x")
        result = format_user_identity(user, module_context, ["email", "profile_field_studentno"], strings)
        assert result == "Ann Smith (a@x)"
