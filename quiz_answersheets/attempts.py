"""
Plain attempt view used when the host hands over raw records.

Hosts that already have a richer attempt object pass that instead; anything
satisfying ``AttemptView`` works with the summary builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import ActionLink, Attempt, DisplayOptions, QuizSettings, SummaryContent, SummaryItem


@dataclass
class ReviewAttempt:
    """An attempt together with everything the viewer is allowed to see."""

    attempt: Attempt
    quiz: QuizSettings
    options: DisplayOptions = field(default_factory=DisplayOptions)
    capabilities: frozenset[str] = frozenset()
    all_attempts: list[Attempt] = field(default_factory=list)
    behaviour_summary: dict[str, SummaryItem] = field(default_factory=dict)

    def get_attempt(self) -> Attempt:
        return self.attempt

    def get_quiz(self) -> QuizSettings:
        return self.quiz

    def get_display_options(self, reviewing: bool) -> DisplayOptions:
        return self.options

    def get_userid(self) -> int:
        return self.attempt.user_id

    def get_courseid(self) -> int:
        return self.quiz.course_id

    def has_capability(self, capability: str) -> bool:
        return capability in self.capabilities

    def links_to_other_attempts(self, base_url: str) -> list[SummaryContent] | None:
        """Attempt numbers, linked except for the current one. None for a single attempt."""
        if len(self.all_attempts) <= 1:
            return None
        links: list[SummaryContent] = []
        for other in self.all_attempts:
            if other.id == self.attempt.id:
                links.append(str(other.attempt_number))
            else:
                links.append(ActionLink(base_url, {"attempt": other.id}, str(other.attempt_number)))
        return links

    def get_additional_summary_data(self, options: DisplayOptions) -> dict[str, SummaryItem]:
        return dict(self.behaviour_summary)

    def get_overall_feedback(self, grade: float | None) -> str:
        return self.quiz.feedback_for_grade(grade)
