"""
Localized string tables.

Strings are grouped by component ('quiz', 'quiz_answersheets') and may contain
placeholders: ``{$a}`` is replaced by the whole argument, ``{$a->name}`` by a
key of a dict argument or an attribute of an object argument.
"""

from __future__ import annotations

import re
from typing import Any

from loguru import logger

from config import get_settings

from .exceptions import StringNotFoundError

PLUGIN_COMPONENT = "quiz_answersheets"

_PLACEHOLDER = re.compile(r"\{\$a(?:->(\w+))?\}")

# English tables bundled with the plugin. Host language packs override these.
EN_STRINGS: dict[str, dict[str, str]] = {
    "quiz": {
        "attempts": "Attempts",
        "attemptsallowedn": "Attempts allowed: {$a}",
        "attemptstate": "State",
        "feedback": "Feedback",
        "grade": "Grade",
        "marks": "Marks",
        "nomoreattempts": "No more attempts are allowed",
        "notyetgraded": "Not yet graded",
        "outof": "{$a->grade} out of {$a->maxgrade}",
        "outofpercent": "{$a->grade} out of {$a->maxgrade} ({$a->percent}%)",
        "outofshort": "{$a->grade}/{$a->maxgrade}",
        "startedon": "Started on",
        "stateabandoned": "Never submitted",
        "statefinished": "Finished",
        "stateinprogress": "In progress",
        "stateoverdue": "Overdue",
    },
    PLUGIN_COMPONENT: {
        "pluginname": "Export attempts",
        "user_identity_fields": " ({$a})",
        "instruction_prefix": "{$a->questionname}: {$a->instruction}",
        "ddimageortext_instruction": "Drag and drop the items onto the correct places in the image.",
        "ddmarker_instruction": "Place the markers on the correct places in the image.",
        "ddwtos_instruction": "Drag and drop the words into the correct gaps in the text.",
        "essay_instruction": "Write your answer in the space provided.",
        "gapselect_instruction": "Select the correct word for each gap.",
        "match_instruction": "Match each item with the correct answer.",
        "multianswer_instruction": "Answer each part of the question.",
        "shortanswer_instruction": "Write a short answer.",
        "truefalse_instruction": "Select True or False.",
        "event_attempt_created": "Attempt created",
        "event_attempt_printed": "Attempt printed",
        "event_attempt_viewed": "Attempt viewed",
        "event_right_answer_printed": "Right answer sheet printed",
        "event_right_answer_viewed": "Right answer sheet viewed",
        "event_responses_submitted": "Responses submitted",
    },
}


def _resolve(a: Any, name: str) -> Any:
    if isinstance(a, dict):
        return a.get(name)
    return getattr(a, name, None)


def format_placeholders(template: str, a: Any = None) -> str:
    """Substitute ``{$a}`` placeholders in a template."""
    if a is None:
        return template

    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name is None:
            return str(a)
        value = _resolve(a, name)
        # Unknown properties are left in place, like the host does
        return match.group(0) if value is None else str(value)

    return _PLACEHOLDER.sub(replace, template)


class StringCatalog:
    """Lookup of localized strings by key and component."""

    def __init__(self, tables: dict[str, dict[str, str]] | None = None, lang: str = "en",
                 parent: StringCatalog | None = None):
        self.lang = lang
        self.parent = parent
        self._tables: dict[str, dict[str, str]] = {
            component: dict(strings) for component, strings in (tables or {}).items()
        }

    @classmethod
    def default(cls) -> StringCatalog:
        """The bundled English catalog."""
        return cls(EN_STRINGS, lang="en")

    def override(self, component: str, strings: dict[str, str]) -> StringCatalog:
        """Add or replace strings of one component. Returns self for chaining."""
        self._tables.setdefault(component, {}).update(strings)
        return self

    def _lookup(self, identifier: str, component: str) -> str | None:
        template = self._tables.get(component, {}).get(identifier)
        if template is None and self.parent is not None:
            return self.parent._lookup(identifier, component)
        return template

    def string_exists(self, identifier: str, component: str) -> bool:
        return self._lookup(identifier, component) is not None

    def get_string(self, identifier: str, component: str, a: Any = None) -> str:
        template = self._lookup(identifier, component)
        if template is None:
            logger.warning(f"Missing string [[{identifier}]] in {component} ({self.lang})")
            raise StringNotFoundError(identifier, component)
        return format_placeholders(template, a)


_default_catalog: StringCatalog | None = None


def get_string_manager() -> StringCatalog:
    """Shared catalog for the configured language."""
    global _default_catalog
    if _default_catalog is None:
        lang = get_settings().lang
        _default_catalog = StringCatalog.default()
        if lang != "en":
            # Host language packs are layered on top by the caller via override()
            _default_catalog = StringCatalog(lang=lang, parent=_default_catalog)
    return _default_catalog
