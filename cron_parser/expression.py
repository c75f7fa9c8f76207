"""
Cron expression parser.

Parses the classic crontab line format: five schedule fields followed by
the command to run.

    minute hour day-of-month month day-of-week command...

Each field is expanded into the explicit, ascending list of values it
matches. Day-of-week accepts 7 as an alias for Sunday (0).
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from colored_logger import get_colored_logger

from .errors import CronExpressionError, EmptyCommand, MalformedExpression
from .field_parser import parse_field
from .fields import DAY_OF_WEEK, FIELDS, FieldSpec

logger = get_colored_logger(__name__)

SCHEDULE_FIELD_COUNT = len(FIELDS)

# Domain of day-of-week once the Sunday alias has been folded
_NORMALIZED_DAY_OF_WEEK = FieldSpec(DAY_OF_WEEK.name, 0, 6)


@dataclass(frozen=True)
class CronExpression:
    """A fully expanded cron expression."""

    minutes: Tuple[int, ...]
    hours: Tuple[int, ...]
    days_of_month: Tuple[int, ...]
    months: Tuple[int, ...]
    days_of_week: Tuple[int, ...]
    command: str

    def __post_init__(self):
        """Validate parsed values are ascending and within valid ranges."""
        for spec in FIELDS[:-1] + (_NORMALIZED_DAY_OF_WEEK,):
            self._validate_field(spec, getattr(self, spec.name))

    def _validate_field(self, spec: FieldSpec, values: Tuple[int, ...]):
        previous = None
        for value in values:
            if not spec.contains(value):
                raise ValueError(
                    f"Invalid {spec.name} value: {value} "
                    f"(must be {spec.minimum}-{spec.maximum})"
                )
            if previous is not None and value <= previous:
                raise ValueError(
                    f"Invalid {spec.name} values: {list(values)} "
                    "(must be strictly ascending)"
                )
            previous = value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minutes": list(self.minutes),
            "hours": list(self.hours),
            "days_of_month": list(self.days_of_month),
            "months": list(self.months),
            "days_of_week": list(self.days_of_week),
            "command": self.command,
        }


def split_expression(expression: str) -> Tuple[List[str], str]:
    """
    Split a cron line into its five schedule fields and the command.

    Args:
        expression: The raw cron line

    Returns:
        Tuple of (schedule fields, command)

    Raises:
        MalformedExpression: If fewer than six tokens are present
        EmptyCommand: If the command is blank
    """
    parts = expression.split()
    if len(parts) < SCHEDULE_FIELD_COUNT + 1:
        raise MalformedExpression(expression)

    fields = parts[:SCHEDULE_FIELD_COUNT]
    command = " ".join(parts[SCHEDULE_FIELD_COUNT:])
    if not command.strip():
        raise EmptyCommand(command)

    return fields, command


def normalize_days_of_week(days: Iterable[int]) -> List[int]:
    """Fold the Sunday alias 7 into 0, then dedupe and sort."""
    return sorted({0 if day == 7 else day for day in days})


def parse_cron_expression(expression: str) -> CronExpression:
    """
    Parse a cron line into a CronExpression.

    Fields are evaluated in order (minute, hour, day-of-month, month,
    day-of-week), so the first invalid field is the one reported.

    Raises:
        CronExpressionError: If any part of the expression is invalid
    """
    fields, command = split_expression(expression)

    parsed = [
        parse_field(text, spec.minimum, spec.maximum)
        for text, spec in zip(fields, FIELDS)
    ]
    parsed[-1] = normalize_days_of_week(parsed[-1])

    return CronExpression(*(tuple(values) for values in parsed), command=command)


class CronParser:
    """
    Stateless front-end over parse_cron_expression.

    Supports:
    - Wildcards: *
    - Lists: 1,3,5
    - Ranges: 1-5
    - Steps: */15, 1-10/2, 10/5
    """

    def parse(self, expression: str) -> CronExpression:
        """
        Parse a cron line into a CronExpression object.

        Args:
            expression: The cron line, schedule fields followed by a command

        Returns:
            CronExpression object with expanded fields

        Raises:
            CronExpressionError: If the expression is invalid
        """
        result = parse_cron_expression(expression)
        logger.debug("Parsed cron expression %r", expression)
        return result

    def validate_expression(self, expression: str) -> bool:
        """
        Check whether a cron line parses.

        Args:
            expression: The cron line to validate

        Returns:
            True if valid, False otherwise
        """
        try:
            self.parse(expression)
            return True
        except CronExpressionError as e:
            logger.debug("Rejected cron expression %r: %s", expression, e)
            return False
