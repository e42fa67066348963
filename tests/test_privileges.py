from coursekit.const import InstructorRoles, Privileges
from coursekit.privileges import InstructorPrivileges


def test_role_defaults():
    coowner = InstructorPrivileges.for_role(InstructorRoles.COOWNER)
    manager = InstructorPrivileges.for_role(InstructorRoles.MANAGER)
    observer = InstructorPrivileges.for_role(InstructorRoles.OBSERVER)

    assert all(coowner.course_level.values())
    assert not manager.is_allowed_for_privilege(Privileges.CAN_MODIFY_COURSE)
    assert manager.is_allowed_for_privilege(Privileges.CAN_MODIFY_STUDENT)
    assert observer.is_allowed_for_privilege(Privileges.CAN_VIEW_SESSION_IN_SECTIONS)
    assert not observer.is_allowed_for_privilege(Privileges.CAN_SUBMIT_SESSION_IN_SECTIONS)


def test_unknown_role_has_no_privileges():
    privileges = InstructorPrivileges.for_role("Teaching Assistant")

    assert not any(privileges.course_level.values())
    assert privileges == InstructorPrivileges.for_role(InstructorRoles.CUSTOM)


def test_section_level_overrides_course_level():
    coowner = InstructorPrivileges.for_role(InstructorRoles.COOWNER)

    privileges = coowner.with_privilege(Privileges.CAN_VIEW_STUDENT_IN_SECTIONS, False, "S1")

    assert not privileges.is_allowed_for_privilege(Privileges.CAN_VIEW_STUDENT_IN_SECTIONS, "S1")
    assert privileges.is_allowed_for_privilege(Privileges.CAN_VIEW_STUDENT_IN_SECTIONS, "S2")
    assert privileges.is_allowed_for_privilege(Privileges.CAN_VIEW_STUDENT_IN_SECTIONS)
    assert coowner.is_allowed_for_privilege(Privileges.CAN_VIEW_STUDENT_IN_SECTIONS, "S1")
    assert coowner.has_coowner_privileges()
    assert not privileges.has_coowner_privileges()


def test_session_level_overrides_section_level():
    privileges = InstructorPrivileges.for_role(InstructorRoles.OBSERVER).with_privilege(
        Privileges.CAN_SUBMIT_SESSION_IN_SECTIONS, True, "S1", "Session 1"
    )

    assert privileges.is_allowed_for_privilege(
        Privileges.CAN_SUBMIT_SESSION_IN_SECTIONS, "S1", "Session 1"
    )
    assert not privileges.is_allowed_for_privilege(
        Privileges.CAN_SUBMIT_SESSION_IN_SECTIONS, "S1", "Session 2"
    )
    assert privileges.is_allowed_for_privilege_any_section(
        "Session 1", Privileges.CAN_SUBMIT_SESSION_IN_SECTIONS
    )
    assert not privileges.is_allowed_for_privilege_any_section(
        "Session 2", Privileges.CAN_SUBMIT_SESSION_IN_SECTIONS
    )


def test_privilege_not_valid_at_level_is_ignored():
    privileges = InstructorPrivileges.for_role(InstructorRoles.COOWNER)

    assert privileges.with_privilege(Privileges.CAN_MODIFY_COURSE, False, "S1") is privileges
    assert privileges.with_privilege("canfly", True) is privileges


def test_text_round_trip():
    privileges = InstructorPrivileges.for_role(InstructorRoles.TUTOR).with_privilege(
        Privileges.CAN_VIEW_STUDENT_IN_SECTIONS, False, "S2"
    )

    assert InstructorPrivileges.from_text(privileges.to_text()) == privileges
    assert '"sectionLevel"' in privileges.to_text()
