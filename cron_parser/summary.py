"""Human-readable summaries of parsed cron expressions."""

from typing import List, Optional, Sequence

from .expression import CronExpression

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# (title, attribute, number of distinct values, labels, unit)
SUMMARY_FIELDS = (
    ("Minutes", "minutes", 60, None, "minute"),
    ("Hours", "hours", 24, None, "hour"),
    ("Days of Month", "days_of_month", 31, None, "day"),
    ("Months", "months", 12, MONTH_LABELS, "month"),
    ("Days of Week", "days_of_week", 7, WEEKDAY_LABELS, "weekday"),
)

MAX_LISTED_VALUES = 10


def _label(value: int, labels: Optional[Sequence[str]]) -> str:
    if labels is None:
        return str(value)
    # Months are 1-based, weekdays 0-based
    offset = 0 if len(labels) == len(WEEKDAY_LABELS) else 1
    return labels[value - offset]


def format_values(
    values: Sequence[int],
    size: int,
    labels: Optional[Sequence[str]] = None,
    unit: str = "value",
) -> str:
    """
    Render a field's values compactly.

    A field covering its whole domain reads "Every <unit>". Long lists are
    abbreviated to their first five and last two entries plus a count.
    """
    if len(values) == size:
        return f"Every {unit}"

    rendered = [_label(value, labels) for value in values]
    if len(rendered) > MAX_LISTED_VALUES:
        return (
            f"{', '.join(rendered[:5])}, ... {', '.join(rendered[-2:])} "
            f"({len(rendered)} total)"
        )
    return ", ".join(rendered)


def summarize(expression: CronExpression) -> List[str]:
    """Return one summary line per schedule field plus the command."""
    lines = [
        f"{title}: {format_values(getattr(expression, attr), size, labels, unit)}"
        for title, attr, size, labels, unit in SUMMARY_FIELDS
    ]
    lines.append(f"Command: {expression.command}")
    return lines
