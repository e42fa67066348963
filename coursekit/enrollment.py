"""
Bulk enrollment of students.

An enrollment list has one student per row with the columns
section, team, name, email and comments. Rows may leave columns empty to keep
the values already stored for that student.
"""

import logging
from collections import Counter
from pathlib import Path

import pandas as pd

from coursekit.const import ENROLLMENT_SEPARATOR
from coursekit.enums import StudentUpdateStatus
from coursekit.exceptions import EnrollmentError, InvalidParametersError
from coursekit.student import StudentAttributes

logger = logging.getLogger(__name__)

ENROLLMENT_COLUMNS = ["section", "team", "name", "email", "comments"]
OPTIONAL_COLUMNS = ["google_id", "key"]
COLUMN_ALIASES = {
    "googleid": "google_id",
    "google id": "google_id",
    "team name": "team",
    "section name": "section",
    "student name": "name",
    "full name": "name",
    "e-mail": "email",
    "comment": "comments",
}


def _normalize_column(column) -> str:
    name = str(column).strip().lower()
    return COLUMN_ALIASES.get(name, name)


def _is_header(cells: list[str]) -> bool:
    columns = {_normalize_column(cell) for cell in cells}
    return {"name", "email"} <= columns


def _cell(row: dict, column: str):
    value = row.get(column)
    if value is None or pd.isna(value):
        return None
    value = str(value).strip()
    return value or None


def student_from_row(row: dict, course_id: str, line: int | None = None) -> StudentAttributes:
    """Build an incoming student from a row keyed by normalized column name."""
    try:
        builder = StudentAttributes.builder(course_id, _cell(row, "name"), _cell(row, "email"))
    except InvalidParametersError as e:
        raise EnrollmentError(f"Row is missing {', '.join(e.details['missing_fields'])}", line)
    return (
        builder.with_section(_cell(row, "section"))
        .with_team(_cell(row, "team"))
        .with_comments(_cell(row, "comments"))
        .with_google_id(_cell(row, "google_id"))
        .with_key(_cell(row, "key"))
        .build()
    )


def parse_enrollment_lines(text: str, course_id: str) -> list[StudentAttributes]:
    """
    Parse pasted enrollment text, e.g. "Section 1|Team A|Jean Wong|jean@uni.edu|".

    Columns are separated by "|" or tabs. A header row naming the columns is
    optional; without one the columns are section, team, name, email, comments.
    """
    columns = ENROLLMENT_COLUMNS
    students = []
    first_line = True
    for number, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        separator = ENROLLMENT_SEPARATOR if ENROLLMENT_SEPARATOR in line or "\t" not in line else "\t"
        cells = [cell.strip() for cell in line.split(separator)]
        if first_line:
            first_line = False
            if _is_header(cells):
                columns = [_normalize_column(cell) for cell in cells]
                continue
        if len(cells) > len(columns):
            raise EnrollmentError(
                f"Expected at most {len(columns)} columns but found {len(cells)}", number
            )
        students.append(student_from_row(dict(zip(columns, cells)), course_id, number))
    return students


def read_enrollment_csv(path, course_id: str) -> list[StudentAttributes]:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [_normalize_column(column) for column in df.columns]
    missing = [column for column in ("name", "email") if column not in df.columns]
    if missing:
        raise EnrollmentError(f"{path} has no {' or '.join(missing)} column")
    # Header is line 1
    return [
        student_from_row(row, course_id, index + 2)
        for index, row in enumerate(df.to_dict("records"))
    ]


def read_enrollment(path: Path, course_id: str) -> list[StudentAttributes]:
    if path.suffix.lower() == ".csv":
        return read_enrollment_csv(path, course_id)
    return parse_enrollment_lines(path.read_text(encoding="utf-8"), course_id)


def enroll_students(
    incoming: list[StudentAttributes], existing: list[StudentAttributes]
) -> list[StudentAttributes]:
    """
    Merge an enrollment list into the stored students of a course.

    Each incoming student is completed from the stored student with the same
    email and tagged NEW, MODIFIED, UNMODIFIED or ERROR. Stored students
    missing from the list are appended as NOT_IN_ENROLL_LIST.
    """
    stored = {student.email: student for student in existing}
    enrolled = []
    seen = set()

    for student in incoming:
        original = stored.get(student.email)
        if original is None:
            merged = student
            status = StudentUpdateStatus.NEW
        else:
            merged = student.update_with_existing_record(original)
            if merged.is_enroll_info_same_as(original):
                status = StudentUpdateStatus.UNMODIFIED
            else:
                status = StudentUpdateStatus.MODIFIED

        errors = merged.get_invalidity_info()
        if merged.email in seen:
            errors.append(f"{merged.email} appears more than once in the enrollment list")
        if errors:
            logger.warning("Cannot enroll %s: %s", merged.get_identification_string(), " ".join(errors))
            status = StudentUpdateStatus.ERROR

        seen.add(merged.email)
        enrolled.append(merged.with_update_status(status))

    for student in existing:
        if student.email not in seen:
            enrolled.append(student.with_update_status(StudentUpdateStatus.NOT_IN_ENROLL_LIST))

    counts = Counter(student.update_status.name for student in enrolled)
    logger.info("Enrollment summary: %s", dict(counts))
    return enrolled


def students_to_frame(students: list[StudentAttributes]) -> pd.DataFrame:
    rows = [
        {
            "section": student.section,
            "team": student.team,
            "name": student.name,
            "email": student.email,
            "comments": student.comments,
            "google_id": student.google_id,
            "status": student.get_student_status(),
            "update_status": student.update_status.name,
        }
        for student in students
    ]
    return pd.DataFrame(rows, columns=ENROLLMENT_COLUMNS + ["google_id", "status", "update_status"])


def write_roster_csv(students: list[StudentAttributes], path):
    students_to_frame(students).to_csv(path, index=False)
