import logging

from coursekit.enrollment import write_roster_csv
from coursekit.exceptions import InvalidParametersError
from coursekit.student import StudentAttributes

logger = logging.getLogger(__name__)


def getSection(user) -> str | None:
    for enrollment in user.enrollments:
        if "sis_section_id" in enrollment and enrollment["sis_section_id"] is not None:
            section_id = enrollment["sis_section_id"].replace(
                enrollment["sis_course_id"] + "-", ""
            )
            if not section_id.endswith("_all") and not section_id.isdigit():
                return section_id
    return None


def getLogin(user) -> str | None:
    if hasattr(user, "login_id"):
        return user.login_id
    return None


def getGroup(user, groups) -> str | None:
    for group in groups:
        for guser in group.users:
            if user.id == guser["id"]:
                return group.name
    return None


def getCourseId(course) -> str:
    sis_course_id = getattr(course, "sis_course_id", None)
    if sis_course_id:
        return sis_course_id
    return str(course.id)


def getStudents(course) -> list[StudentAttributes]:
    users = course.get_users(enrollment_type=["student"], include=["enrollments"])
    groups = list(course.get_groups(include=["users"]))
    course_id = getCourseId(course)
    students = []
    for user in users:
        try:
            builder = StudentAttributes.builder(course_id, user.name, getattr(user, "email", None))
        except InvalidParametersError as e:
            logger.warning("Skipping Canvas user %s: %s", user.id, e.message)
            continue
        students.append(
            builder.with_section(getSection(user))
            .with_team(getGroup(user, groups))
            .with_google_id(getLogin(user))
            .build()
        )
    return students


def downloadRoster(course, path):
    students = StudentAttributes.sort_by_section_name(getStudents(course))
    write_roster_csv(students, path)
    logger.info("Wrote %d students to %s", len(students), path)
