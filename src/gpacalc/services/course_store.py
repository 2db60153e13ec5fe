from __future__ import annotations

import json
import logging
from typing import Iterator, List, Sequence, Tuple, Union

from pydantic import BaseModel, Field
from pydantic import ValidationError as SchemaError

from gpacalc.core.courses import Course
from gpacalc.core.errors import IndexOutOfRange, PersistenceFailure, ValidationError
from gpacalc.core.gpa import GpaSummary, calculate, make_course
from gpacalc.services.storage import Storage

logger = logging.getLogger(__name__)

STORAGE_KEY = "gpaCalculatorCourses"
LEGACY_VERSION = 0
SCHEMA_VERSION = 1


class StoredCourse(BaseModel):
    name: str
    credits: Union[float, str]
    grade: str


class CourseBlob(BaseModel):
    version: int = Field(ge=0)
    courses: List[StoredCourse] = Field(default_factory=list)


def encode_courses(courses: Sequence[Course]) -> str:
    blob = CourseBlob(
        version=SCHEMA_VERSION,
        courses=[StoredCourse(**course.to_dict()) for course in courses],
    )
    return blob.model_dump_json()


def decode_courses(raw: str) -> List[Course]:
    """
    Read a stored blob. A bare JSON array is the unversioned legacy layout
    and is read as version 0; anything else must be a versioned envelope.
    """
    try:
        payload = json.loads(raw)
        if isinstance(payload, list):
            blob = CourseBlob(version=LEGACY_VERSION, courses=payload)
        else:
            blob = CourseBlob.model_validate(payload)
    except (ValueError, RecursionError, SchemaError) as exc:
        raise PersistenceFailure(f"Stored courses are unreadable: {exc}") from exc

    if blob.version > SCHEMA_VERSION:
        raise PersistenceFailure(
            f"Stored courses use format version {blob.version}, newest supported is {SCHEMA_VERSION}"
        )

    courses: List[Course] = []
    for position, record in enumerate(blob.courses):
        try:
            courses.append(make_course(record.name, record.credits, record.grade))
        except ValidationError as exc:
            raise PersistenceFailure(f"Stored course #{position} is invalid: {exc}") from exc
    return courses


class CourseStore:
    """
    Ordered course list kept in sync with one storage key.

    Every mutation rewrites the whole blob before returning. If that write
    fails the in-memory list keeps the change and PersistenceFailure propagates.
    """

    def __init__(self, storage: Storage, key: str = STORAGE_KEY, *, strict: bool = True) -> None:
        self.storage = storage
        self.key = key
        self.strict = strict
        self._courses: List[Course] = []
        self.load()

    def load(self) -> Tuple[Course, ...]:
        raw = self.storage.get_item(self.key)
        if raw is None:
            courses: List[Course] = []
        else:
            try:
                courses = decode_courses(raw)
            except PersistenceFailure:
                if self.strict:
                    raise
                logger.warning("stored courses under %r are unreadable, starting empty", self.key)
                courses = []
        self._courses = courses
        logger.debug("loaded %d course(s) from %r", len(courses), self.key)
        return self.all()

    def all(self) -> Tuple[Course, ...]:
        return tuple(self._courses)

    def add(self, course: Course) -> None:
        course = make_course(course.name, course.credits, course.grade)
        self._courses.append(course)
        self._persist()
        logger.info("added course %r (%s credits, grade %s)", course.name, course.credits, course.grade.value)

    def remove_at(self, index: int) -> Course:
        size = len(self._courses)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < size:
            raise IndexOutOfRange(index, size)
        removed = self._courses.pop(index)
        self._persist()
        logger.info("removed course %r at position %d", removed.name, index)
        return removed

    def clear(self) -> None:
        self._courses = []
        self._persist()
        logger.info("cleared all courses")

    def save(self) -> None:
        self._persist()

    def summary(self) -> GpaSummary:
        return calculate(self._courses)

    def _persist(self) -> None:
        self.storage.set_item(self.key, encode_courses(self._courses))

    def __len__(self) -> int:
        return len(self._courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(self.all())
