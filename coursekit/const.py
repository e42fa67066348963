from datetime import datetime, timezone

DEFAULT_SECTION = "None"

# Placeholder for timestamps of records created before timestamps were tracked
DEFAULT_TIMESTAMP = datetime(2011, 1, 1, tzinfo=timezone.utc)

STUDENT_COURSE_STATUS_JOINED = "Joined"
STUDENT_COURSE_STATUS_YET_TO_JOIN = "Yet to join"

COURSE_BACKUP_LOG_MSG = "Recovery for the course "

ENROLLMENT_SEPARATOR = "|"


class InstructorRoles:
    COOWNER = "Co-owner"
    MANAGER = "Manager"
    OBSERVER = "Observer"
    TUTOR = "Tutor"
    CUSTOM = "Custom"


class Privileges:
    CAN_MODIFY_COURSE = "canmodifycourse"
    CAN_MODIFY_INSTRUCTOR = "canmodifyinstructor"
    CAN_MODIFY_SESSION = "canmodifysession"
    CAN_MODIFY_STUDENT = "canmodifystudent"
    CAN_VIEW_STUDENT_IN_SECTIONS = "canviewstudentinsection"
    CAN_VIEW_SESSION_IN_SECTIONS = "canviewsessioninsection"
    CAN_SUBMIT_SESSION_IN_SECTIONS = "cansubmitsessioninsection"
    CAN_MODIFY_SESSION_COMMENT_IN_SECTIONS = "canmodifysessioncommentinsection"

    COURSE_LEVEL = (
        CAN_MODIFY_COURSE,
        CAN_MODIFY_INSTRUCTOR,
        CAN_MODIFY_SESSION,
        CAN_MODIFY_STUDENT,
        CAN_VIEW_STUDENT_IN_SECTIONS,
        CAN_VIEW_SESSION_IN_SECTIONS,
        CAN_SUBMIT_SESSION_IN_SECTIONS,
        CAN_MODIFY_SESSION_COMMENT_IN_SECTIONS,
    )
    SECTION_LEVEL = (
        CAN_VIEW_STUDENT_IN_SECTIONS,
        CAN_VIEW_SESSION_IN_SECTIONS,
        CAN_SUBMIT_SESSION_IN_SECTIONS,
        CAN_MODIFY_SESSION_COMMENT_IN_SECTIONS,
    )
    SESSION_LEVEL = (
        CAN_VIEW_SESSION_IN_SECTIONS,
        CAN_SUBMIT_SESSION_IN_SECTIONS,
        CAN_MODIFY_SESSION_COMMENT_IN_SECTIONS,
    )
