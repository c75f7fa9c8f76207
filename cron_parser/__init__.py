"""
Cron expression parsing.

This package provides:
- Expansion of cron schedule fields into explicit value lists
- Validation with precise, typed errors
- Human-readable schedule summaries
"""

from .errors import (
    CronExpressionError,
    EmptyCommand,
    InvalidRange,
    InvalidStep,
    MalformedExpression,
    ValueOutOfBounds,
)
from .expression import (
    CronExpression,
    CronParser,
    normalize_days_of_week,
    parse_cron_expression,
    split_expression,
)
from .field_parser import parse_field
from .fields import FIELDS, FieldSpec
from .summary import format_values, summarize

__all__ = [
    "CronExpression",
    "CronExpressionError",
    "CronParser",
    "EmptyCommand",
    "FIELDS",
    "FieldSpec",
    "InvalidRange",
    "InvalidStep",
    "MalformedExpression",
    "ValueOutOfBounds",
    "format_values",
    "normalize_days_of_week",
    "parse_cron_expression",
    "parse_field",
    "split_expression",
    "summarize",
]
