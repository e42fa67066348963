import logging
from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from coursekit import sanitize, validator
from coursekit.attributes import (
    AttributesBuilder,
    EntityAttributes,
    add_non_empty_error,
    lookup,
    require_fields,
    set_default,
)
from coursekit.const import (
    COURSE_BACKUP_LOG_MSG,
    DEFAULT_SECTION,
    DEFAULT_TIMESTAMP,
    ENROLLMENT_SEPARATOR,
    STUDENT_COURSE_STATUS_JOINED,
    STUDENT_COURSE_STATUS_YET_TO_JOIN,
)
from coursekit.enums import StudentUpdateStatus
from coursekit.models import CourseStudent
from coursekit.util import get_indent, split_name

logger = logging.getLogger(__name__)

# Fields that make up a row of an enrollment list
ENROLLMENT_FIELDS = {"email", "course", "name", "comments", "team", "section"}

# Fields an enrollment update may leave out to keep the stored value
MERGEABLE_FIELDS = ("email", "name", "google_id", "team", "comments", "section")


class StudentAttributes(EntityAttributes):
    """A student enrolled in a course."""

    course: str
    name: str
    email: str

    google_id: str = ""
    last_name: str = ""
    comments: Optional[str] = None
    team: Optional[str] = None
    section: str = DEFAULT_SECTION
    key: Optional[str] = None

    # Not serialized
    update_status: StudentUpdateStatus = Field(default=StudentUpdateStatus.UNKNOWN, exclude=True)
    created_at: datetime = Field(default=DEFAULT_TIMESTAMP, exclude=True)
    updated_at: datetime = Field(default=DEFAULT_TIMESTAMP, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _derive_last_name(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            _, last_name = split_name(sanitize.sanitize_name(lookup(data, "name")))
            set_default(data, "last_name", sanitize.sanitize_name(last_name))
        return data

    @field_validator("name", mode="before")
    @classmethod
    def _sanitize_name(cls, value):
        return sanitize.sanitize_name(value)

    @field_validator("google_id", mode="before")
    @classmethod
    def _sanitize_google_id(cls, value):
        return sanitize.sanitize_google_id(value)

    @field_validator("comments", mode="before")
    @classmethod
    def _sanitize_comments(cls, value):
        return sanitize.sanitize_text_field(value)

    @classmethod
    def builder(cls, course_id: str, name: str, email: str) -> "StudentBuilder":
        """
        Start building a student.

        Optional fields that are never set (or set to None) take these values:
        google_id "", section DEFAULT_SECTION, update_status UNKNOWN,
        created_at and updated_at DEFAULT_TIMESTAMP, and last_name the last
        part of the name.
        """
        require_fields(course_id=course_id, name=name, email=email)
        return StudentBuilder(course=course_id, name=name, email=email)

    @classmethod
    def value_of(cls, student: CourseStudent) -> "StudentAttributes":
        return (
            cls.builder(student.course_id, student.name, student.email)
            .with_last_name(student.last_name)
            .with_comments(student.comments)
            .with_team(student.team_name)
            .with_section(student.section_name)
            .with_google_id(student.google_id)
            .with_key(student.registration_key)
            .with_created_at(student.created_at)
            .with_updated_at(student.updated_at)
            .build()
        )

    def to_entity(self) -> CourseStudent:
        return CourseStudent(
            email=self.email,
            name=self.name,
            google_id=self.google_id,
            comments=self.comments,
            course_id=self.course,
            team_name=self.team,
            section_name=self.section,
            last_name=self.last_name,
            registration_key=self.key,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def to_enrollment_string(self) -> str:
        return ENROLLMENT_SEPARATOR.join(
            value or "" for value in (self.section, self.team, self.name, self.email, self.comments)
        )

    def is_registered(self) -> bool:
        return bool(self.google_id)

    def get_id(self) -> str:
        """Format: email%courseId e.g., adam@gmail.com%cs1101."""
        return f"{self.email}%{self.course}"

    def get_student_status(self) -> str:
        if self.is_registered():
            return STUDENT_COURSE_STATUS_JOINED
        return STUDENT_COURSE_STATUS_YET_TO_JOIN

    def is_enroll_info_same_as(self, other: Optional["StudentAttributes"]) -> bool:
        if other is None:
            return False
        return self.model_dump(include=ENROLLMENT_FIELDS) == other.model_dump(include=ENROLLMENT_FIELDS)

    def get_invalidity_info(self) -> list[str]:
        errors = []

        if self.is_registered():
            add_non_empty_error(validator.get_invalidity_info_for_google_id(self.google_id), errors)

        add_non_empty_error(validator.get_invalidity_info_for_course_id(self.course), errors)
        add_non_empty_error(validator.get_invalidity_info_for_email(self.email), errors)
        add_non_empty_error(validator.get_invalidity_info_for_team_name(self.team or ""), errors)
        add_non_empty_error(validator.get_invalidity_info_for_section_name(self.section), errors)
        add_non_empty_error(
            validator.get_invalidity_info_for_student_role_comments(self.comments or ""), errors
        )
        add_non_empty_error(validator.get_invalidity_info_for_person_name(self.name), errors)

        return errors

    @staticmethod
    def sort_by_section_name(students: list["StudentAttributes"]) -> list["StudentAttributes"]:
        return sorted(students, key=lambda s: (s.section, s.team or "", s.name))

    @staticmethod
    def sort_by_team_name(students: list["StudentAttributes"]) -> list["StudentAttributes"]:
        return sorted(students, key=lambda s: (s.team or "", s.name))

    @staticmethod
    def sort_by_name_and_then_by_email(
        students: list["StudentAttributes"],
    ) -> list["StudentAttributes"]:
        return sorted(students, key=lambda s: (s.name, s.email))

    def update_with_existing_record(self, original: "StudentAttributes") -> "StudentAttributes":
        """
        Fill in the fields this record leaves out from the stored record.

        A field is left out when it is None or was never given to the builder.
        """
        updates = {}
        for name in MERGEABLE_FIELDS:
            if name not in self.model_fields_set or getattr(self, name) is None:
                updates[name] = getattr(original, name)
        if updates:
            logger.debug("Filling %s of %s from stored record", sorted(updates), self.get_id())
        return self.model_copy(update=updates)

    def is_section_changed(self, original: "StudentAttributes") -> bool:
        return self.section is not None and self.section != original.section

    def is_team_changed(self, original: "StudentAttributes") -> bool:
        return self.team is not None and self.team != original.team

    def is_email_changed(self, original: "StudentAttributes") -> bool:
        return self.email is not None and self.email != original.email

    def with_update_status(self, update_status: StudentUpdateStatus) -> "StudentAttributes":
        return self.model_copy(update={"update_status": update_status})

    def sanitize_for_saving(self) -> "StudentAttributes":
        return self.model_copy(
            update={
                "course": sanitize.sanitize_title(self.course),
                "email": sanitize.sanitize_email(self.email),
                "google_id": sanitize.sanitize_google_id(self.google_id),
                "name": sanitize.sanitize_name(self.name),
                "comments": sanitize.sanitize_text_field(self.comments),
            }
        )

    def get_identification_string(self) -> str:
        return f"{self.course}/{self.email}"

    def get_entity_type_as_string(self) -> str:
        return "Student"

    def get_backup_identifier(self) -> str:
        return COURSE_BACKUP_LOG_MSG + self.course

    def to_string(self, indent: int = 0) -> str:
        return f"{get_indent(indent)}Student:{self.name}[{self.email}]\n"

    def __str__(self) -> str:
        return self.to_string()


class StudentBuilder(AttributesBuilder[StudentAttributes]):
    attributes_class = StudentAttributes

    def with_google_id(self, google_id: Optional[str]) -> "StudentBuilder":
        return self._with(google_id=google_id)

    def with_last_name(self, last_name: Optional[str]) -> "StudentBuilder":
        return self._with(last_name=last_name)

    def with_comments(self, comments: Optional[str]) -> "StudentBuilder":
        return self._with(comments=comments)

    def with_team(self, team: Optional[str]) -> "StudentBuilder":
        return self._with(team=team)

    def with_section(self, section: Optional[str]) -> "StudentBuilder":
        return self._with(section=section)

    def with_key(self, key: Optional[str]) -> "StudentBuilder":
        return self._with(key=key)

    def with_update_status(self, update_status: Optional[StudentUpdateStatus]) -> "StudentBuilder":
        return self._with(update_status=update_status)

    def with_created_at(self, created_at: Optional[datetime]) -> "StudentBuilder":
        return self._with(created_at=created_at)

    def with_updated_at(self, updated_at: Optional[datetime]) -> "StudentBuilder":
        return self._with(updated_at=updated_at)
