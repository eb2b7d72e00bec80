"""
Terminal rendering of attempt summaries for answer sheet printouts.
"""

from __future__ import annotations

import re

from rich import box
from rich.table import Table
from rich.text import Text

from .identity import fullname
from .models import ActionLink, SummaryItem, UserPicture

_TAG = re.compile(r"<[^>]+>")


def summary_to_text(value) -> str:
    """Plain text for one summary title or content value."""
    if isinstance(value, ActionLink):
        return value.text or value.url
    if isinstance(value, UserPicture):
        return fullname(value.user)
    if isinstance(value, (list, tuple)):
        return ", ".join(summary_to_text(v) for v in value)
    return _TAG.sub("", str(value))


def render_summary(summary: dict[str, SummaryItem], title: str | None = None) -> Table:
    """Two-column table of a summary, in summary order."""
    table = Table(title=title, box=box.SIMPLE, show_header=False)
    table.add_column("Title", style="bold")
    table.add_column("Content")

    for item in summary.values():
        table.add_row(Text(summary_to_text(item.title)), Text(summary_to_text(item.content)))

    return table
