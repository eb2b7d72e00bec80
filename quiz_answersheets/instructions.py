"""Instruction text shown above questions on printed answer sheets."""

from __future__ import annotations

from .strings import PLUGIN_COMPONENT, StringCatalog, get_string_manager


def get_instruction(question_type: str, name_prefix: str = "", strings: StringCatalog | None = None) -> str:
    """
    Get instruction text for a question type.

    Args:
        question_type: Question type name, e.g. "ddwtos"
        name_prefix: Question name to put in front of the instruction
        strings: String catalog (defaults to the shared catalog)

    Returns:
        The instruction, the prefixed instruction, or '' when the type has none
    """
    strings = strings or get_string_manager()
    identifier = f"{question_type}_instruction"

    if not strings.string_exists(identifier, PLUGIN_COMPONENT):
        return ""

    instruction = strings.get_string(identifier, PLUGIN_COMPONENT)
    if not name_prefix:
        return instruction

    return strings.get_string(
        "instruction_prefix",
        PLUGIN_COMPONENT,
        {"questionname": name_prefix, "instruction": instruction},
    )
