"""Field domains for the five schedule positions."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class FieldSpec:
    """A schedule field and its inclusive integer domain."""

    name: str
    minimum: int
    maximum: int

    def values(self) -> List[int]:
        return list(range(self.minimum, self.maximum + 1))

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


MINUTE = FieldSpec("minutes", 0, 59)
HOUR = FieldSpec("hours", 0, 23)
DAY_OF_MONTH = FieldSpec("days_of_month", 1, 31)
MONTH = FieldSpec("months", 1, 12)
# 7 is accepted as Sunday and folded to 0 after evaluation
DAY_OF_WEEK = FieldSpec("days_of_week", 0, 7)

FIELDS: Tuple[FieldSpec, ...] = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)
