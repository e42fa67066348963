from enum import Enum


class StudentUpdateStatus(Enum):
    """Outcome of a student row in a bulk enrollment."""

    ERROR = 0
    NEW = 1
    MODIFIED = 2
    UNMODIFIED = 3
    NOT_IN_ENROLL_LIST = 4
    UNKNOWN = 5


class FeedbackParticipantType(str, Enum):
    SELF = "SELF"
    STUDENTS = "STUDENTS"
    INSTRUCTORS = "INSTRUCTORS"
    TEAMS = "TEAMS"
    OWN_TEAM = "OWN_TEAM"
    OWN_TEAM_MEMBERS = "OWN_TEAM_MEMBERS"
    OWN_TEAM_MEMBERS_INCLUDING_SELF = "OWN_TEAM_MEMBERS_INCLUDING_SELF"
    RECEIVER = "RECEIVER"
    RECEIVER_TEAM_MEMBERS = "RECEIVER_TEAM_MEMBERS"
    GIVER = "GIVER"
    NONE = "NONE"
