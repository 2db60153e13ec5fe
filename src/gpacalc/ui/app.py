from __future__ import annotations

import threading

import flet as ft

from gpacalc.core.courses import Course
from gpacalc.core.errors import GpaCalcError, PersistenceFailure, ValidationError
from gpacalc.core.gpa import GpaBand, gpa_band, make_course
from gpacalc.core.grades import Grade, grade_options
from gpacalc.services.course_store import CourseStore
from gpacalc.ui.formatters import (
    CLEAR_CONFIRMATION,
    EMPTY_STATE,
    SAVED_MESSAGE,
    format_course_details,
    format_errors,
    format_summary,
)

BAND_COLORS = {
    GpaBand.EXCELLENT: "#48bb78",
    GpaBand.GOOD: "#68d391",
    GpaBand.AVERAGE: "#f6e05e",
    GpaBand.POOR: "#fc8181",
}

DEFAULT_CREDITS = "3"


class GpaCalculatorApp:
    def __init__(self, page: ft.Page, store: CourseStore) -> None:
        self.page = page
        self.page.title = "GPA Calculator"
        self.page.scroll = ft.ScrollMode.AUTO
        self.store = store
        # flet runs sync handlers on worker threads
        self.lock = threading.Lock()

        self.name = ft.TextField(label="Course Name", width=300, on_submit=self.handle_add)
        self.credits = ft.TextField(
            label="Credits",
            width=120,
            value=DEFAULT_CREDITS,
            keyboard_type=ft.KeyboardType.NUMBER,
            on_submit=self.handle_add,
        )
        self.grade = ft.Dropdown(
            label="Grade",
            width=160,
            options=[ft.dropdown.Option(token, text) for token, text in grade_options()],
            value=Grade.A.value,
        )
        self.error = ft.Text(color=ft.Colors.RED)

        self.courses_list = ft.Column(spacing=8)
        self.gpa_value = ft.Text("0.00", size=40, weight=ft.FontWeight.BOLD)
        self.total_credits = ft.Text("0")
        self.total_points = ft.Text("0.00")
        self.course_count = ft.Text("0")

    def run(self) -> None:
        self.page.add(
            ft.Column(
                [
                    ft.Text("GPA Calculator", size=32, weight=ft.FontWeight.BOLD),
                    ft.Row([self.name, self.credits, self.grade]),
                    ft.Row(
                        [
                            ft.ElevatedButton("Add Course", on_click=self.handle_add),
                            ft.OutlinedButton("Clear All", on_click=self.handle_clear_all),
                            ft.TextButton("Save", on_click=self.handle_save),
                        ]
                    ),
                    self.error,
                    ft.Divider(),
                    self.courses_list,
                    ft.Divider(),
                    self.gpa_value,
                    ft.Row([ft.Text("Total Credits:"), self.total_credits]),
                    ft.Row([ft.Text("Total Points:"), self.total_points]),
                    ft.Row([ft.Text("Courses:"), self.course_count]),
                ],
                width=640,
            )
        )
        self.refresh()

    def refresh(self) -> None:
        self.render_courses()
        self.update_results()
        self.page.update()

    def set_error(self, message: str) -> None:
        self.error.value = message
        self.page.update()

    def handle_add(self, _: ft.ControlEvent) -> None:
        try:
            with self.lock:
                self.store.add(make_course(self.name.value or "", self.credits.value, self.grade.value))
        except ValidationError as exc:
            self.set_error(format_errors(exc.messages))
            return
        except PersistenceFailure as exc:
            # the course is kept in memory even though the write failed
            self.render_courses()
            self.update_results()
            self.set_error(str(exc))
            return

        self.error.value = ""
        self.name.value = ""
        self.credits.value = DEFAULT_CREDITS
        self.refresh()
        self.name.focus()

    def handle_remove(self, index: int) -> None:
        try:
            with self.lock:
                self.store.remove_at(index)
        except GpaCalcError as exc:
            self.set_error(str(exc))
            return
        self.refresh()

    def handle_clear_all(self, _: ft.ControlEvent) -> None:
        def confirm(_: ft.ControlEvent) -> None:
            self.page.close(dialog)
            try:
                with self.lock:
                    self.store.clear()
            except PersistenceFailure as exc:
                self.set_error(str(exc))
                return
            self.refresh()

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Clear all courses"),
            content=ft.Text(CLEAR_CONFIRMATION),
            actions=[
                ft.TextButton("Cancel", on_click=lambda _: self.page.close(dialog)),
                ft.TextButton("Clear", on_click=confirm),
            ],
        )
        self.page.open(dialog)

    def handle_save(self, _: ft.ControlEvent) -> None:
        try:
            with self.lock:
                self.store.save()
        except PersistenceFailure as exc:
            self.set_error(str(exc))
            return
        self.page.open(ft.SnackBar(ft.Text(SAVED_MESSAGE)))

    def course_row(self, index: int, course: Course) -> ft.Control:
        return ft.Row(
            [
                ft.Column(
                    [
                        ft.Text(course.name, weight=ft.FontWeight.BOLD),
                        ft.Text(format_course_details(course), color=ft.Colors.GREY_600),
                    ],
                    spacing=2,
                ),
                ft.IconButton(icon=ft.Icons.DELETE, tooltip="Remove", on_click=lambda _, i=index: self.handle_remove(i)),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

    def render_courses(self) -> None:
        courses = self.store.all()
        if not courses:
            self.courses_list.controls = [ft.Text(EMPTY_STATE, italic=True)]
            return
        self.courses_list.controls = [self.course_row(i, c) for i, c in enumerate(courses)]

    def update_results(self) -> None:
        summary = self.store.summary()
        shown = format_summary(summary)
        self.gpa_value.value = shown["gpa"]
        self.gpa_value.color = BAND_COLORS[gpa_band(summary.gpa)]
        self.total_credits.value = shown["total_credits"]
        self.total_points.value = shown["total_points"]
        self.course_count.value = shown["course_count"]
