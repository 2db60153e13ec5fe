from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List

from gpacalc.core.courses import Course, parse_credits
from gpacalc.core.errors import ValidationError
from gpacalc.core.grades import is_grade_token, parse_grade

NAME_REQUIRED = "Course name is required"
CREDITS_INVALID = "Credits must be a positive number"
GRADE_INVALID = "Invalid grade selected"


@dataclass(frozen=True)
class GpaSummary:
    gpa: float
    total_credits: float
    total_points: float
    course_count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


EMPTY_SUMMARY = GpaSummary(gpa=0.0, total_credits=0, total_points=0.0, course_count=0)


class GpaBand(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"


def calculate(courses: Iterable[Course], *, round_to: int = 2) -> GpaSummary:
    """
    GPA = Σ(credits * grade_point) / Σ(credits)
    gpa and total_points are rounded to `round_to` places, total_credits is not.
    """
    total_credits = 0.0
    total_points = 0.0
    count = 0

    for course in courses:
        total_credits += course.credits
        total_points += course.points
        count += 1

    if count == 0:
        return EMPTY_SUMMARY

    gpa = total_points / total_credits if total_credits > 0 else 0.0
    return GpaSummary(
        gpa=round(gpa, round_to),
        total_credits=total_credits,
        total_points=round(total_points, round_to),
        course_count=count,
    )


def validate(name: object, credits: object, grade: object) -> List[str]:
    errors: List[str] = []

    if not isinstance(name, str) or not name.strip():
        errors.append(NAME_REQUIRED)

    if parse_credits(credits) is None:
        errors.append(CREDITS_INVALID)

    if not is_grade_token(grade):
        errors.append(GRADE_INVALID)

    return errors


def make_course(name: object, credits: object, grade: object) -> Course:
    errors = validate(name, credits, grade)
    if errors:
        raise ValidationError(errors)
    return Course(
        name=str(name).strip(),
        credits=parse_credits(credits),  # type: ignore[arg-type]
        grade=parse_grade(grade),
    )


def gpa_band(gpa: float) -> GpaBand:
    if gpa >= 3.7:
        return GpaBand.EXCELLENT
    if gpa >= 3.0:
        return GpaBand.GOOD
    if gpa >= 2.0:
        return GpaBand.AVERAGE
    return GpaBand.POOR
