"""
Instructor permissions.

Privileges are granted at three levels. Course level privileges apply
everywhere; section level privileges override them for one section and
session level privileges override those for one feedback session within a
section. Each instructor role comes with a default set of course level
privileges.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from coursekit.const import InstructorRoles, Privileges

logger = logging.getLogger(__name__)

ROLE_DEFAULTS = {
    InstructorRoles.COOWNER: set(Privileges.COURSE_LEVEL),
    InstructorRoles.MANAGER: set(Privileges.COURSE_LEVEL) - {Privileges.CAN_MODIFY_COURSE},
    InstructorRoles.OBSERVER: {
        Privileges.CAN_VIEW_STUDENT_IN_SECTIONS,
        Privileges.CAN_VIEW_SESSION_IN_SECTIONS,
    },
    InstructorRoles.TUTOR: {
        Privileges.CAN_VIEW_STUDENT_IN_SECTIONS,
        Privileges.CAN_VIEW_SESSION_IN_SECTIONS,
        Privileges.CAN_SUBMIT_SESSION_IN_SECTIONS,
    },
    InstructorRoles.CUSTOM: set(),
}


def default_course_level(role: Optional[str]) -> dict[str, bool]:
    granted = ROLE_DEFAULTS.get(role, ROLE_DEFAULTS[InstructorRoles.CUSTOM])
    return {name: name in granted for name in Privileges.COURSE_LEVEL}


class InstructorPrivileges(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    course_level: dict[str, bool] = Field(
        default_factory=lambda: default_course_level(InstructorRoles.COOWNER)
    )
    section_level: dict[str, dict[str, bool]] = Field(default_factory=dict)
    session_level: dict[str, dict[str, dict[str, bool]]] = Field(default_factory=dict)

    @classmethod
    def for_role(cls, role: Optional[str]) -> "InstructorPrivileges":
        """Default privileges of a role; unknown roles get none."""
        return cls(course_level=default_course_level(role))

    @classmethod
    def from_text(cls, text: str) -> "InstructorPrivileges":
        return cls.model_validate_json(text)

    def to_text(self) -> str:
        return self.model_dump_json(by_alias=True)

    def is_allowed_for_privilege(
        self,
        privilege_name: str,
        section_name: Optional[str] = None,
        session_name: Optional[str] = None,
    ) -> bool:
        if section_name is not None and session_name is not None:
            session_privileges = self.session_level.get(section_name, {}).get(session_name, {})
            if privilege_name in session_privileges:
                return session_privileges[privilege_name]
        if section_name is not None:
            section_privileges = self.section_level.get(section_name, {})
            if privilege_name in section_privileges:
                return section_privileges[privilege_name]
        return self.course_level.get(privilege_name, False)

    def is_allowed_for_privilege_any_section(self, session_name: str, privilege_name: str) -> bool:
        if self.course_level.get(privilege_name, False):
            return True
        for section_privileges in self.section_level.values():
            if section_privileges.get(privilege_name, False):
                return True
        for sessions in self.session_level.values():
            if sessions.get(session_name, {}).get(privilege_name, False):
                return True
        return False

    def with_privilege(
        self,
        privilege_name: str,
        allowed: bool,
        section_name: Optional[str] = None,
        session_name: Optional[str] = None,
    ) -> "InstructorPrivileges":
        """Return a copy with one privilege granted or revoked at the given level."""
        if section_name is None:
            valid_names = Privileges.COURSE_LEVEL
        elif session_name is None:
            valid_names = Privileges.SECTION_LEVEL
        else:
            valid_names = Privileges.SESSION_LEVEL
        if privilege_name not in valid_names:
            logger.debug(
                "Ignoring privilege %s, not valid at section=%s session=%s",
                privilege_name,
                section_name,
                session_name,
            )
            return self

        privileges = self.model_copy(deep=True)
        if section_name is None:
            privileges.course_level[privilege_name] = allowed
        elif session_name is None:
            privileges.section_level.setdefault(section_name, {})[privilege_name] = allowed
        else:
            sessions = privileges.session_level.setdefault(section_name, {})
            sessions.setdefault(session_name, {})[privilege_name] = allowed
        return privileges

    def has_same_privileges_as_role(self, role: str) -> bool:
        return self == InstructorPrivileges.for_role(role)

    def has_coowner_privileges(self) -> bool:
        return self.has_same_privileges_as_role(InstructorRoles.COOWNER)

    def has_manager_privileges(self) -> bool:
        return self.has_same_privileges_as_role(InstructorRoles.MANAGER)

    def has_observer_privileges(self) -> bool:
        return self.has_same_privileges_as_role(InstructorRoles.OBSERVER)

    def has_tutor_privileges(self) -> bool:
        return self.has_same_privileges_as_role(InstructorRoles.TUTOR)
