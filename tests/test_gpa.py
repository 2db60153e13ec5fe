import math
import unittest

from gpacalc.core.courses import Course
from gpacalc.core.errors import UnknownGrade, ValidationError
from gpacalc.core.gpa import (
    CREDITS_INVALID,
    GRADE_INVALID,
    NAME_REQUIRED,
    GpaBand,
    calculate,
    gpa_band,
    make_course,
    validate,
)
from gpacalc.core.grades import Grade


class CalculateTests(unittest.TestCase):
    def test_empty(self):
        summary = calculate([])
        self.assertEqual(summary.gpa, 0)
        self.assertEqual(summary.total_credits, 0)
        self.assertEqual(summary.total_points, 0)
        self.assertEqual(summary.course_count, 0)

    def test_two_courses(self):
        courses = [Course("CS101", 3, Grade.A), Course("MA101", 3, Grade.B)]
        summary = calculate(courses)
        self.assertEqual(summary.total_credits, 6)
        self.assertAlmostEqual(summary.total_points, 21.00, places=2)
        self.assertAlmostEqual(summary.gpa, 3.50, places=2)
        self.assertEqual(summary.course_count, 2)

    def test_rounds_gpa_and_points_only(self):
        courses = [Course("X", 1.5, Grade.A_MINUS), Course("Y", 2.25, Grade.C_PLUS)]
        summary = calculate(courses)
        self.assertEqual(summary.total_credits, 3.75)
        self.assertEqual(summary.total_points, round(1.5 * 3.7 + 2.25 * 2.3, 2))
        self.assertEqual(summary.gpa, round((1.5 * 3.7 + 2.25 * 2.3) / 3.75, 2))

    def test_order_does_not_matter(self):
        courses = [
            Course("A", 4, Grade.A),
            Course("B", 3, Grade.C_MINUS),
            Course("C", 1, Grade.F),
            Course("D", 2.5, Grade.B_PLUS),
        ]
        self.assertEqual(calculate(courses), calculate(list(reversed(courses))))
        self.assertEqual(calculate(courses), calculate(sorted(courses, key=lambda c: c.name, reverse=True)))

    def test_zero_total_credits_gives_zero_gpa(self):
        summary = calculate([Course("Audit", 0, Grade.A)])
        self.assertEqual(summary.gpa, 0)
        self.assertEqual(summary.course_count, 1)

    def test_unknown_grade_in_data_fails(self):
        with self.assertRaises(UnknownGrade):
            calculate([Course("Bad", 3, "9.9")])

    def test_summary_to_dict(self):
        data = calculate([Course("CS101", 4, Grade.B)]).to_dict()
        self.assertEqual(data, {"gpa": 3.0, "total_credits": 4, "total_points": 12.0, "course_count": 1})


class CourseTests(unittest.TestCase):
    def test_grade_properties(self):
        course = Course("CS101", 2.5, Grade.B_PLUS)
        self.assertEqual(course.grade_point, 3.3)
        self.assertEqual(course.grade_label, "B+")
        self.assertAlmostEqual(course.points, 8.25, places=9)

    def test_unknown_grade_label_degrades(self):
        course = Course("Odd", 3, "5.0")
        self.assertEqual(course.grade_label, "Unknown")
        with self.assertRaises(UnknownGrade):
            course.points

    def test_to_dict(self):
        self.assertEqual(
            Course("CS101", 3.0, Grade.A).to_dict(),
            {"name": "CS101", "credits": 3.0, "grade": "4.0"},
        )

    def test_to_dict_with_bad_grade_raises_unknown_grade(self):
        with self.assertRaises(UnknownGrade):
            Course("Odd", 3, "5.0").to_dict()


class ValidateTests(unittest.TestCase):
    def test_valid_input(self):
        self.assertEqual(validate("CS101", 3, "4.0"), [])
        self.assertEqual(validate("CS101", "0.5", Grade.F), [])

    def test_missing_name(self):
        self.assertEqual(validate("", 3, "4.0"), [NAME_REQUIRED])
        self.assertEqual(validate("   ", 3, "4.0"), [NAME_REQUIRED])

    def test_bad_credits(self):
        for credits in [-1, 0, math.nan, math.inf, "abc", "", None, True]:
            with self.subTest(credits=credits):
                self.assertEqual(validate("CS101", credits, "4.0"), [CREDITS_INVALID])

    def test_bad_grade(self):
        self.assertEqual(validate("CS101", 3, "9.9"), [GRADE_INVALID])
        self.assertEqual(validate("CS101", 3, 4.0), [GRADE_INVALID])

    def test_all_errors_reported_together(self):
        self.assertEqual(validate("", -1, "9.9"), [NAME_REQUIRED, CREDITS_INVALID, GRADE_INVALID])

    def test_messages_mention_their_field(self):
        self.assertIn("name", NAME_REQUIRED.lower())
        self.assertIn("credits", CREDITS_INVALID.lower())
        self.assertIn("grade", GRADE_INVALID.lower())


class MakeCourseTests(unittest.TestCase):
    def test_normalizes_input(self):
        course = make_course("  CS101 ", " 3 ", "3.7")
        self.assertEqual(course, Course("CS101", 3.0, Grade.A_MINUS))
        self.assertIsInstance(course.credits, float)

    def test_raises_with_every_message(self):
        with self.assertRaises(ValidationError) as ctx:
            make_course("", 0, "B")
        self.assertEqual(ctx.exception.messages, [NAME_REQUIRED, CREDITS_INVALID, GRADE_INVALID])


class BandTests(unittest.TestCase):
    def test_bands(self):
        self.assertEqual(gpa_band(4.0), GpaBand.EXCELLENT)
        self.assertEqual(gpa_band(3.7), GpaBand.EXCELLENT)
        self.assertEqual(gpa_band(3.69), GpaBand.GOOD)
        self.assertEqual(gpa_band(3.0), GpaBand.GOOD)
        self.assertEqual(gpa_band(2.0), GpaBand.AVERAGE)
        self.assertEqual(gpa_band(1.99), GpaBand.POOR)
        self.assertEqual(gpa_band(0), GpaBand.POOR)


if __name__ == "__main__":
    unittest.main()
