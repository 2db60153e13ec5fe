from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from gpacalc.core.errors import UnknownGrade

UNKNOWN_LABEL = "Unknown"


class Grade(str, Enum):
    A = "4.0"
    A_MINUS = "3.7"
    B_PLUS = "3.3"
    B = "3.0"
    B_MINUS = "2.7"
    C_PLUS = "2.3"
    C = "2.0"
    C_MINUS = "1.7"
    D_PLUS = "1.3"
    D = "1.0"
    F = "0.0"


@dataclass(frozen=True)
class GradeRule:
    points: float
    label: str


GRADE_SCALE: Dict[Grade, GradeRule] = {
    Grade.A: GradeRule(4.0, "A"),
    Grade.A_MINUS: GradeRule(3.7, "A-"),
    Grade.B_PLUS: GradeRule(3.3, "B+"),
    Grade.B: GradeRule(3.0, "B"),
    Grade.B_MINUS: GradeRule(2.7, "B-"),
    Grade.C_PLUS: GradeRule(2.3, "C+"),
    Grade.C: GradeRule(2.0, "C"),
    Grade.C_MINUS: GradeRule(1.7, "C-"),
    Grade.D_PLUS: GradeRule(1.3, "D+"),
    Grade.D: GradeRule(1.0, "D"),
    Grade.F: GradeRule(0.0, "F"),
}


def parse_grade(token: object) -> Grade:
    """
    Turn a grade token into a Grade member.
    Only the exact token strings (or Grade members) are accepted: 4.0 as a
    float, " 4.0" or "a" are all unknown.
    """
    if isinstance(token, Grade):
        return token
    if isinstance(token, str):
        try:
            return Grade(token)
        except ValueError as exc:
            raise UnknownGrade(token) from exc
    raise UnknownGrade(token)


def is_grade_token(token: object) -> bool:
    try:
        parse_grade(token)
    except UnknownGrade:
        return False
    return True


def grade_point_of(token: object) -> float:
    return GRADE_SCALE[parse_grade(token)].points


def label_of(token: object) -> str:
    try:
        return GRADE_SCALE[parse_grade(token)].label
    except UnknownGrade:
        return UNKNOWN_LABEL


def grade_tokens() -> List[str]:
    return [grade.value for grade in GRADE_SCALE]


def grade_options() -> List[Tuple[str, str]]:
    # (token, "A- (3.7)") pairs for a selection control
    return [(grade.value, f"{rule.label} ({grade.value})") for grade, rule in GRADE_SCALE.items()]
