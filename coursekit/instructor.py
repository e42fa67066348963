from typing import Any, Optional

from pydantic import field_validator, model_validator

from coursekit import sanitize, validator
from coursekit.attributes import (
    AttributesBuilder,
    EntityAttributes,
    add_non_empty_error,
    lookup,
    require_fields,
    set_default,
)
from coursekit.const import COURSE_BACKUP_LOG_MSG, InstructorRoles
from coursekit.models import Instructor
from coursekit.privileges import InstructorPrivileges

DEFAULT_DISPLAY_NAME = "Instructor"


class InstructorAttributes(EntityAttributes):
    """An instructor of a course together with their permissions."""

    course_id: str
    name: str
    email: str

    google_id: Optional[str] = None
    key: Optional[str] = None
    role: str = InstructorRoles.COOWNER
    displayed_name: str = DEFAULT_DISPLAY_NAME
    is_archived: bool = False
    is_displayed_to_students: bool = True
    privileges: InstructorPrivileges

    @model_validator(mode="before")
    @classmethod
    def _default_privileges(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            role = lookup(data, "role") or InstructorRoles.COOWNER
            set_default(data, "privileges", InstructorPrivileges.for_role(sanitize.sanitize_name(role)))
        return data

    @field_validator("google_id", mode="before")
    @classmethod
    def _sanitize_google_id(cls, value):
        return sanitize.sanitize_google_id(value)

    @field_validator("course_id", mode="before")
    @classmethod
    def _sanitize_course_id(cls, value):
        return sanitize.sanitize_title(value)

    @field_validator("name", "role", "displayed_name", mode="before")
    @classmethod
    def _sanitize_names(cls, value):
        return sanitize.sanitize_name(value)

    @field_validator("privileges", mode="before")
    @classmethod
    def _parse_privileges_text(cls, value):
        if isinstance(value, str):
            return InstructorPrivileges.from_text(value)
        return value

    @classmethod
    def builder(cls, course_id: str, name: str, email: str) -> "InstructorBuilder":
        """
        Start building an instructor.

        Unset optional fields default to: role Co-owner, displayed_name
        "Instructor", is_archived False, is_displayed_to_students True and the
        default privileges of the role.
        """
        require_fields(course_id=course_id, name=name, email=email)
        return InstructorBuilder(course_id=course_id, name=name, email=email)

    @classmethod
    def value_of(cls, instructor: Instructor) -> "InstructorAttributes":
        return (
            cls.builder(instructor.course_id, instructor.name, instructor.email)
            .with_google_id(instructor.google_id)
            .with_key(instructor.registration_key)
            .with_role(instructor.role)
            .with_displayed_name(instructor.displayed_name)
            .with_privileges(instructor.instructor_privileges_as_text)
            .with_is_displayed_to_students(instructor.is_displayed_to_students)
            .with_is_archived(instructor.is_archived)
            .build()
        )

    def to_entity(self) -> Instructor:
        return Instructor(
            google_id=self.google_id,
            course_id=self.course_id,
            is_archived=self.is_archived,
            name=self.name,
            email=self.email,
            registration_key=self.key,
            role=self.role,
            is_displayed_to_students=self.is_displayed_to_students,
            displayed_name=self.displayed_name,
            instructor_privileges_as_text=self.get_text_from_instructor_privileges(),
        )

    def get_text_from_instructor_privileges(self) -> str:
        return self.privileges.to_text()

    def is_registered(self) -> bool:
        return self.google_id is not None

    def is_custom_role(self) -> bool:
        return self.role == InstructorRoles.CUSTOM

    def get_invalidity_info(self) -> list[str]:
        errors = []

        if self.google_id is not None:
            add_non_empty_error(validator.get_invalidity_info_for_google_id(self.google_id), errors)

        add_non_empty_error(validator.get_invalidity_info_for_course_id(self.course_id), errors)
        add_non_empty_error(validator.get_invalidity_info_for_person_name(self.name), errors)
        add_non_empty_error(validator.get_invalidity_info_for_email(self.email), errors)
        add_non_empty_error(validator.get_invalidity_info_for_person_name(self.displayed_name), errors)

        return errors

    def sanitize_for_saving(self) -> "InstructorAttributes":
        return self.model_copy(
            update={
                "google_id": sanitize.sanitize_google_id(self.google_id),
                "name": sanitize.sanitize_for_html(sanitize.sanitize_name(self.name)),
                "email": sanitize.sanitize_email(self.email),
                "course_id": sanitize.sanitize_title(self.course_id),
                "role": sanitize.sanitize_for_html(sanitize.sanitize_name(self.role)),
                "displayed_name": sanitize.sanitize_for_html(
                    sanitize.sanitize_name(self.displayed_name)
                ),
            }
        )

    def is_allowed_for_privilege(
        self,
        privilege_name: str,
        section_name: Optional[str] = None,
        session_name: Optional[str] = None,
    ) -> bool:
        return self.privileges.is_allowed_for_privilege(privilege_name, section_name, session_name)

    def is_allowed_for_privilege_any_section(self, session_name: str, privilege_name: str) -> bool:
        """Whether the privilege is granted for the session in at least one section."""
        return self.privileges.is_allowed_for_privilege_any_section(session_name, privilege_name)

    def has_coowner_privileges(self) -> bool:
        return self.privileges.has_coowner_privileges()

    def has_manager_privileges(self) -> bool:
        return self.privileges.has_manager_privileges()

    def has_observer_privileges(self) -> bool:
        return self.privileges.has_observer_privileges()

    def has_tutor_privileges(self) -> bool:
        return self.privileges.has_tutor_privileges()

    def is_equal_to_another_instructor(self, instructor: "InstructorAttributes") -> bool:
        return self.business_equals(instructor)

    def get_identification_string(self) -> str:
        return f"{self.course_id}/{self.email}"

    def get_entity_type_as_string(self) -> str:
        return "Instructor"

    def get_backup_identifier(self) -> str:
        return COURSE_BACKUP_LOG_MSG + self.course_id

    def __str__(self) -> str:
        return self.get_json_string()


class InstructorBuilder(AttributesBuilder[InstructorAttributes]):
    attributes_class = InstructorAttributes

    def with_google_id(self, google_id: Optional[str]) -> "InstructorBuilder":
        return self._with(google_id=google_id)

    def with_key(self, key: Optional[str]) -> "InstructorBuilder":
        return self._with(key=key)

    def with_role(self, role: Optional[str]) -> "InstructorBuilder":
        return self._with(role=role)

    def with_displayed_name(self, displayed_name: Optional[str]) -> "InstructorBuilder":
        return self._with(displayed_name=displayed_name)

    def with_is_archived(self, is_archived: Optional[bool]) -> "InstructorBuilder":
        return self._with(is_archived=is_archived)

    def with_is_displayed_to_students(
        self, is_displayed_to_students: Optional[bool]
    ) -> "InstructorBuilder":
        return self._with(is_displayed_to_students=is_displayed_to_students)

    def with_privileges(
        self, privileges: InstructorPrivileges | str | None
    ) -> "InstructorBuilder":
        """Accepts privileges as an object or as their JSON text."""
        return self._with(privileges=privileges)
