# src/creative_report/report/render.py
from collections.abc import Iterable

from creative_report.dates import MonthSpec, last_day_of_month
from creative_report.models.review import ReviewEntry, ReviewState
from .template import TEMPLATE


def review_url(domain: str, project: str, number: int) -> str:
    return f"https://{domain}/p/{project}/reviews/{number}"


def status_label(state: ReviewState) -> str | None:
    """Display status for a review state. Deleted reviews have none."""
    match state:
        case ReviewState.OPENED:
            return "Unfinished"
        case ReviewState.CLOSED:
            return "Finished"
        case ReviewState.DELETED:
            return None
        case _:
            raise ValueError(f"Unhandled review state: {state!r}")


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


def render_row(index: int, entry: ReviewEntry, domain: str, author: str) -> str | None:
    """Render one table row, or None when the review is not reported."""
    status = status_label(entry.state)
    if status is None:
        return None

    url = review_url(domain, entry.project.key, entry.number)
    link = f"[{url}]({url})"
    creation_date = entry.created_at.strftime("%d.%m.%Y")
    return (
        f"| {index} | {_escape_cell(entry.title)} | {author} | {link} "
        f"| {status} | {creation_date} |"
    )


def render_rows(entries: Iterable[ReviewEntry], domain: str, author: str) -> list[str]:
    """Render rows in response order, numbering only reported reviews from 1."""
    rows = []
    for entry in entries:
        row = render_row(len(rows) + 1, entry, domain, author)
        if row is not None:
            rows.append(row)
    return rows


def render_document(
    entries: Iterable[ReviewEntry],
    month: MonthSpec,
    percent_creative: int,
    domain: str,
    author: str,
) -> str:
    """Fill the declaration template for the given month."""
    prs = "\n".join(render_rows(entries, domain, author))
    last_day = last_day_of_month(month.year, month.month).strftime("%d.%m.%Y")

    return (
        TEMPLATE
        .replace("{prs}", prs)
        .replace("{month}", month.label)
        .replace("{percent_creative}", str(percent_creative))
        .replace("{last_day_of_month}", last_day)
    )
