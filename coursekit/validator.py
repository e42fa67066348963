"""
Field format rules.

Each ``get_invalidity_info_for_*`` function returns an empty string when the
value is acceptable and a human readable explanation otherwise.
"""

import re

COURSE_ID_FIELD_NAME = "course ID"
COURSE_ID_MAX_LENGTH = 40

EMAIL_FIELD_NAME = "email"
EMAIL_MAX_LENGTH = 254

PERSON_NAME_FIELD_NAME = "person name"
PERSON_NAME_MAX_LENGTH = 100

TEAM_NAME_FIELD_NAME = "team name"
TEAM_NAME_MAX_LENGTH = 60

SECTION_NAME_FIELD_NAME = "section name"
SECTION_NAME_MAX_LENGTH = 60

STUDENT_ROLE_COMMENTS_FIELD_NAME = "comments about a student enrolled in a course"
STUDENT_ROLE_COMMENTS_MAX_LENGTH = 500

GOOGLE_ID_FIELD_NAME = "Google ID"
GOOGLE_ID_MAX_LENGTH = 254

FEEDBACK_SESSION_NAME_FIELD_NAME = "feedback session name"
FEEDBACK_SESSION_NAME_MAX_LENGTH = 38

REASON_EMPTY = "is empty"
REASON_TOO_LONG = "is too long"
REASON_INCORRECT_FORMAT = "is not in the correct format"
REASON_START_WITH_NON_ALPHANUMERIC_CHAR = "starts with a non-alphanumeric character"
REASON_CONTAINS_INVALID_CHAR = "contains invalid characters"

SIZE_CAPPED_NON_EMPTY_STRING_ERROR_MESSAGE = (
    '"{value}" is not acceptable to coursekit as a/an {field} because it {reason}. '
    "The value of a/an {field} should be no longer than {max_length} characters. "
    "It should not be empty."
)
SIZE_CAPPED_POSSIBLY_EMPTY_STRING_ERROR_MESSAGE = (
    '"{value}" is not acceptable to coursekit as a/an {field} because it {reason}. '
    "The value of a/an {field} should be no longer than {max_length} characters."
)
INVALID_NAME_ERROR_MESSAGE = (
    '"{value}" is not acceptable to coursekit as a/an {field} because it {reason}. '
    "All {field} must start with an alphanumeric character, "
    "and cannot contain any vertical bar (|) or percent sign (%)."
)
EMAIL_ERROR_MESSAGE = (
    '"{value}" is not acceptable to coursekit as a/an {field} because it {reason}. '
    "An email address contains some text followed by one '@' sign followed by "
    "some more text. It cannot be longer than {max_length} characters, "
    "cannot be empty and cannot contain spaces."
)
COURSE_ID_ERROR_MESSAGE = (
    '"{value}" is not acceptable to coursekit as a/an {field} because it {reason}. '
    "A course ID can contain letters, numbers, fullstops, hyphens, underscores, "
    "and dollar signs. It cannot be longer than {max_length} characters, "
    "cannot be empty and cannot contain spaces."
)
GOOGLE_ID_ERROR_MESSAGE = (
    '"{value}" is not acceptable to coursekit as a/an {field} because it {reason}. '
    "A Google ID must be a valid id already registered with Google. "
    "It cannot be longer than {max_length} characters, cannot be empty "
    "and cannot contain spaces."
)

REGEX_COURSE_ID = re.compile(r"[a-zA-Z0-9_.$-]+")
REGEX_EMAIL = re.compile(
    r"[\w+-][\w+!#$%&'*/=?^_`{}~-]*(\.[\w+!#$%&'*/=?^_`{}~-]+)*"
    r"@([A-Za-z0-9-]+\.)*[A-Za-z]+"
)
REGEX_GOOGLE_ID_NON_EMAIL = re.compile(r"[\w-]+(\.[\w-]+)*")
REGEX_NAME_START = re.compile(r"[^\W_]")
NAME_FORBIDDEN_CHARS = ("|", "%")


def _size_capped(value: str, field: str, max_length: int, template: str) -> str:
    if value == "":
        return template.format(value=value, field=field, reason=REASON_EMPTY, max_length=max_length)
    if len(value) > max_length:
        return template.format(value=value, field=field, reason=REASON_TOO_LONG, max_length=max_length)
    return ""


def get_invalidity_info_for_size_capped_non_empty_string(
    field: str, max_length: int, value: str
) -> str:
    return _size_capped(value, field, max_length, SIZE_CAPPED_NON_EMPTY_STRING_ERROR_MESSAGE)


def get_invalidity_info_for_size_capped_possibly_empty_string(
    field: str, max_length: int, value: str
) -> str:
    if len(value) > max_length:
        return SIZE_CAPPED_POSSIBLY_EMPTY_STRING_ERROR_MESSAGE.format(
            value=value, field=field, reason=REASON_TOO_LONG, max_length=max_length
        )
    return ""


def get_invalidity_info_for_valid_name(field: str, max_length: int, value: str) -> str:
    size_error = get_invalidity_info_for_size_capped_non_empty_string(field, max_length, value)
    if size_error:
        return size_error
    if not REGEX_NAME_START.match(value):
        return INVALID_NAME_ERROR_MESSAGE.format(
            value=value, field=field, reason=REASON_START_WITH_NON_ALPHANUMERIC_CHAR
        )
    if any(char in value for char in NAME_FORBIDDEN_CHARS):
        return INVALID_NAME_ERROR_MESSAGE.format(
            value=value, field=field, reason=REASON_CONTAINS_INVALID_CHAR
        )
    return ""


def get_invalidity_info_for_course_id(course_id: str) -> str:
    size_error = _size_capped(
        course_id, COURSE_ID_FIELD_NAME, COURSE_ID_MAX_LENGTH, COURSE_ID_ERROR_MESSAGE
    )
    if size_error:
        return size_error
    if not REGEX_COURSE_ID.fullmatch(course_id):
        return COURSE_ID_ERROR_MESSAGE.format(
            value=course_id,
            field=COURSE_ID_FIELD_NAME,
            reason=REASON_INCORRECT_FORMAT,
            max_length=COURSE_ID_MAX_LENGTH,
        )
    return ""


def get_invalidity_info_for_email(email: str) -> str:
    size_error = _size_capped(email, EMAIL_FIELD_NAME, EMAIL_MAX_LENGTH, EMAIL_ERROR_MESSAGE)
    if size_error:
        return size_error
    if not REGEX_EMAIL.fullmatch(email):
        return EMAIL_ERROR_MESSAGE.format(
            value=email,
            field=EMAIL_FIELD_NAME,
            reason=REASON_INCORRECT_FORMAT,
            max_length=EMAIL_MAX_LENGTH,
        )
    return ""


def get_invalidity_info_for_google_id(google_id: str) -> str:
    size_error = _size_capped(
        google_id, GOOGLE_ID_FIELD_NAME, GOOGLE_ID_MAX_LENGTH, GOOGLE_ID_ERROR_MESSAGE
    )
    if size_error:
        return size_error
    if REGEX_GOOGLE_ID_NON_EMAIL.fullmatch(google_id) or REGEX_EMAIL.fullmatch(google_id):
        return ""
    return GOOGLE_ID_ERROR_MESSAGE.format(
        value=google_id,
        field=GOOGLE_ID_FIELD_NAME,
        reason=REASON_INCORRECT_FORMAT,
        max_length=GOOGLE_ID_MAX_LENGTH,
    )


def get_invalidity_info_for_person_name(name: str) -> str:
    return get_invalidity_info_for_valid_name(PERSON_NAME_FIELD_NAME, PERSON_NAME_MAX_LENGTH, name)


def get_invalidity_info_for_team_name(team_name: str) -> str:
    return get_invalidity_info_for_size_capped_non_empty_string(
        TEAM_NAME_FIELD_NAME, TEAM_NAME_MAX_LENGTH, team_name
    )


def get_invalidity_info_for_section_name(section_name: str) -> str:
    return get_invalidity_info_for_size_capped_non_empty_string(
        SECTION_NAME_FIELD_NAME, SECTION_NAME_MAX_LENGTH, section_name
    )


def get_invalidity_info_for_student_role_comments(comments: str) -> str:
    return get_invalidity_info_for_size_capped_possibly_empty_string(
        STUDENT_ROLE_COMMENTS_FIELD_NAME, STUDENT_ROLE_COMMENTS_MAX_LENGTH, comments
    )


def get_invalidity_info_for_feedback_session_name(session_name: str) -> str:
    return get_invalidity_info_for_valid_name(
        FEEDBACK_SESSION_NAME_FIELD_NAME, FEEDBACK_SESSION_NAME_MAX_LENGTH, session_name
    )
