from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from gpacalc.core.grades import Grade, grade_point_of, label_of, parse_grade


def parse_credits(value: object) -> Optional[float]:
    """
    Return credits as a finite positive float, or None when the value is not one.
    Text is parsed the way the entry form reads it ("3", " 1.5 ").
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


@dataclass(frozen=True)
class Course:
    name: str
    credits: float
    grade: Grade

    @property
    def grade_point(self) -> float:
        return grade_point_of(self.grade)

    @property
    def grade_label(self) -> str:
        return label_of(self.grade)

    @property
    def points(self) -> float:
        return self.credits * self.grade_point

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "credits": self.credits,
            "grade": parse_grade(self.grade).value,
        }
