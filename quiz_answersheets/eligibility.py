"""
Whether a new quiz attempt may be started.

The decision only looks at the most recent attempt: an unfinished attempt
blocks a new one, a finished one defers to the attempts-limit rule.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence

from loguru import logger

from .collaborators import AttemptsLimitRule
from .models import Attempt, QuizSettings
from .strings import StringCatalog, get_string_manager


class NumAttemptsRule:
    """Access rule enforcing the quiz's maximum number of attempts."""

    def __init__(self, quiz: QuizSettings, timenow: int, strings: StringCatalog | None = None):
        self.quiz = quiz
        self.timenow = timenow
        self.strings = strings or get_string_manager()

    def description(self) -> str:
        return self.strings.get_string("attemptsallowedn", "quiz", self.quiz.attempts)

    def prevent_new_attempt(self, numprevattempts: int, lastattempt: Attempt | None) -> str | bool:
        """Reason a new attempt is refused, or False when it is allowed."""
        if numprevattempts >= self.quiz.attempts:
            return self.strings.get_string("nomoreattempts", "quiz")
        return False

    def is_finished(self, numprevattempts: int, lastattempt: Attempt | None) -> bool:
        return numprevattempts >= self.quiz.attempts


RuleFactory = Callable[[QuizSettings, int], AttemptsLimitRule]


def can_create_attempt(
    quiz: QuizSettings,
    attempts: Sequence[Attempt],
    rule_factory: RuleFactory = NumAttemptsRule,
    timenow: int | None = None,
) -> bool:
    """
    Check if the user may start a new attempt.

    Args:
        quiz: Quiz settings (attempts = 0 means unlimited)
        attempts: The user's previous attempts, oldest first
        rule_factory: Builds the attempts-limit rule for the quiz
        timenow: Current epoch time passed to the rule (defaults to now)

    Returns:
        True if a new attempt can be created
    """
    if not quiz.attempts:
        return True

    numprevattempts = len(attempts)
    if numprevattempts == 0:
        return True

    lastattempt = attempts[-1]
    if lastattempt.state and lastattempt.is_finished:
        rule = rule_factory(quiz, int(time.time()) if timenow is None else timenow)
        if not rule.prevent_new_attempt(numprevattempts, lastattempt):
            return True
        logger.debug(f"Quiz {quiz.id}: attempts limit {quiz.attempts} reached")
    else:
        logger.debug(f"Quiz {quiz.id}: attempt {lastattempt.id} still {lastattempt.state}")

    return False
