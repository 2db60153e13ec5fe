from gpacalc.core.courses import Course
from gpacalc.core.gpa import GpaSummary

EMPTY_STATE = "No courses added yet. Add your first course above!"
CLEAR_CONFIRMATION = "Are you sure you want to clear all courses?"
SAVED_MESSAGE = "Data saved successfully!"


def format_number(value: float) -> str:
    # full precision, 3.0 -> "3", 1234.625 -> "1234.625"
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_course_details(course: Course) -> str:
    return f"{format_number(course.credits)} credits • Grade: {course.grade_label}"


def format_summary(summary: GpaSummary) -> dict:
    return {
        "gpa": f"{summary.gpa:.2f}",
        "total_credits": format_number(summary.total_credits),
        "total_points": f"{summary.total_points:.2f}",
        "course_count": str(summary.course_count),
    }


def format_errors(errors: list) -> str:
    return "Please fix the following errors:\n" + "\n".join(errors)
