"""
Attempt summary for answer sheets.

Builds the ordered key -> SummaryItem mapping shown above a reviewed or
printed attempt (who, when, state, marks, grade, feedback).
"""

from __future__ import annotations

from loguru import logger

from config import Settings

from .collaborators import VIEW_REPORTS_CAPABILITY, AttemptView, RequestContext
from .formatting import bold, format_float, format_grade, quiz_has_grades, rescale_grade, userdate
from .identity import fullname
from .models import ActionLink, AttemptState, MarkVisibility, SummaryItem, UserPicture


def state_name(state: AttemptState, ctx: RequestContext) -> str:
    """Human-readable name of an attempt state."""
    return ctx.strings.get_string(state.string_key, "quiz")


def build_summary(
    attemptobj: AttemptView,
    ctx: RequestContext,
    base_url: str,
    minimal: bool = True,
    settings: Settings | None = None,
) -> dict[str, SummaryItem]:
    """
    Calculate summary information of a quiz attempt.

    Args:
        attemptobj: Attempt as seen by the viewer
        ctx: Request context (viewer, record store, strings)
        base_url: Page URL used for links to the user's other attempts
        minimal: True to only return the student identity row
        settings: Overrides the configured settings (date formatting)

    Returns:
        Ordered mapping of summary keys to rows
    """
    strings = ctx.strings
    sumdata: dict[str, SummaryItem] = {}
    attempt = attemptobj.get_attempt()
    quiz = attemptobj.get_quiz()
    options = attemptobj.get_display_options(True)

    if not quiz.showuserpicture and attemptobj.get_userid() != ctx.viewer_id:
        student = ctx.records.get_user(attemptobj.get_userid())
        courseid = attemptobj.get_courseid()
        sumdata["user"] = SummaryItem(
            title=UserPicture(user=student, course_id=courseid),
            content=ActionLink(
                "/user/view.php",
                {"id": student.id, "course": courseid},
                fullname(student),
            ),
        )

    if minimal:
        return sumdata

    if attemptobj.has_capability(VIEW_REPORTS_CAPABILITY):
        attemptlist = attemptobj.links_to_other_attempts(base_url)
        if attemptlist:
            sumdata["attemptlist"] = SummaryItem(
                title=strings.get_string("attempts", "quiz"),
                content=attemptlist,
            )

    sumdata["startedon"] = SummaryItem(
        title=strings.get_string("startedon", "quiz"),
        content=userdate(attempt.time_start, settings),
    )

    sumdata["state"] = SummaryItem(
        title=strings.get_string("attemptstate", "quiz"),
        content=state_name(attempt.state, ctx),
    )

    grade = rescale_grade(attempt.sumgrades, quiz)

    if options.marks >= MarkVisibility.MARK_AND_MAX and quiz_has_grades(quiz):
        if attempt.state != AttemptState.FINISHED:
            pass  # Cannot display grade
        elif grade is None:
            sumdata["grade"] = SummaryItem(
                title=strings.get_string("grade", "quiz"),
                content=format_grade(quiz, grade, strings),
            )
        else:
            # Raw marks only when they differ from the grade
            if quiz.grade != quiz.sumgrades:
                marks = {
                    "grade": format_grade(quiz, attempt.sumgrades, strings),
                    "maxgrade": format_grade(quiz, quiz.sumgrades, strings),
                }
                sumdata["marks"] = SummaryItem(
                    title=strings.get_string("marks", "quiz"),
                    content=strings.get_string("outofshort", "quiz", marks),
                )

            scaled = {
                "grade": bold(format_grade(quiz, grade, strings)),
                "maxgrade": format_grade(quiz, quiz.grade, strings),
            }
            if quiz.grade != 100:
                scaled["percent"] = bold(format_float(attempt.sumgrades * 100 / quiz.sumgrades, 0))
                formattedgrade = strings.get_string("outofpercent", "quiz", scaled)
            else:
                formattedgrade = strings.get_string("outof", "quiz", scaled)
            sumdata["grade"] = SummaryItem(
                title=strings.get_string("grade", "quiz"),
                content=formattedgrade,
            )

    # Behaviour rows win on key collision
    sumdata.update(attemptobj.get_additional_summary_data(options))

    feedback = attemptobj.get_overall_feedback(grade)
    if options.overallfeedback and feedback:
        sumdata["feedback"] = SummaryItem(
            title=strings.get_string("feedback", "quiz"),
            content=feedback,
        )

    logger.debug(f"Summary for attempt {attempt.id}: {list(sumdata)}")
    return sumdata
