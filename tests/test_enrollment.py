import logging

import pandas as pd
import pytest

from coursekit.enrollment import (
    enroll_students,
    parse_enrollment_lines,
    read_enrollment,
    students_to_frame,
    write_roster_csv,
)
from coursekit.enums import StudentUpdateStatus
from coursekit.exceptions import EnrollmentError


def test_parse_enrollment_lines():
    text = "S1|T1|Jean Wong|jean@uni.edu|Transferred\n\nS2\t\tTom Lee\ttom@uni.edu\n"

    jean, tom = parse_enrollment_lines(text, "CS101")

    assert jean.section == "S1"
    assert jean.team == "T1"
    assert jean.comments == "Transferred"
    assert tom.section == "S2"
    assert tom.team is None
    assert tom.comments is None
    assert tom.course == "CS101"


def test_parse_enrollment_lines_with_header():
    text = "Name|Email|Team Name\nJean Wong|jean@uni.edu|T1\n"

    (jean,) = parse_enrollment_lines(text, "CS101")

    assert jean.name == "Jean Wong"
    assert jean.team == "T1"
    assert "section" not in jean.model_fields_set


def test_parse_enrollment_lines_rejects_bad_rows():
    with pytest.raises(EnrollmentError) as excinfo:
        parse_enrollment_lines("S1|T1|Jean Wong|jean@uni.edu||extra\n", "CS101")
    assert excinfo.value.details["line"] == 1

    with pytest.raises(EnrollmentError) as excinfo:
        parse_enrollment_lines("S1|T1|Jean Wong|jean@uni.edu\nS1|T1||\n", "CS101")
    assert excinfo.value.details["line"] == 2
    assert "name" in excinfo.value.message


def test_read_enrollment_csv(tmp_path):
    path = tmp_path / "enrollment.csv"
    path.write_text("Section,Team,Full Name,E-mail,Comments\nS1,T1,Jean Wong,jean@uni.edu,\n")

    (jean,) = read_enrollment(path, "CS101")

    assert jean.name == "Jean Wong"
    assert jean.email == "jean@uni.edu"
    assert jean.comments is None


def test_read_enrollment_csv_requires_columns(tmp_path):
    path = tmp_path / "enrollment.csv"
    path.write_text("section,team\nS1,T1\n")

    with pytest.raises(EnrollmentError):
        read_enrollment(path, "CS101")


def test_enroll_students(stored_students, caplog):
    incoming = parse_enrollment_lines(
        "S2||Jean Wong|jean@uni.edu|\n"
        "S1|T2|Tom Lee|tom@uni.edu|\n"
        "S3||New Person|new@uni.edu|\n"
        "S3|T4|Kim Park|kim@uni.edu|\n",
        "CS101",
    )

    with caplog.at_level(logging.WARNING, logger="coursekit.enrollment"):
        enrolled = enroll_students(incoming, stored_students)

    statuses = {student.email: student.update_status for student in enrolled}
    assert statuses == {
        "jean@uni.edu": StudentUpdateStatus.MODIFIED,
        "tom@uni.edu": StudentUpdateStatus.UNMODIFIED,
        "new@uni.edu": StudentUpdateStatus.ERROR,
        "kim@uni.edu": StudentUpdateStatus.NEW,
        "ann@uni.edu": StudentUpdateStatus.NOT_IN_ENROLL_LIST,
    }
    assert enrolled[-1].email == "ann@uni.edu"

    jean = enrolled[0]
    assert jean.section == "S2"
    assert jean.team == "T1"
    assert jean.google_id == "jwong"

    assert "new@uni.edu" in caplog.text


def test_enroll_students_rejects_duplicates(stored_students):
    incoming = parse_enrollment_lines(
        "S1|T2|Tom Lee|tom@uni.edu|\nS1|T5|Tom Lee|tom@uni.edu|\n", "CS101"
    )

    enrolled = enroll_students(incoming, stored_students)

    assert [student.update_status for student in enrolled[:2]] == [
        StudentUpdateStatus.UNMODIFIED,
        StudentUpdateStatus.ERROR,
    ]
    assert len(enrolled) == 4


def test_write_roster_csv(stored_students, tmp_path):
    path = tmp_path / "roster.csv"

    write_roster_csv(stored_students, path)

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    assert list(df.columns) == [
        "section", "team", "name", "email", "comments", "google_id", "status", "update_status",
    ]
    assert df.loc[0, "status"] == "Joined"
    assert df.loc[1, "status"] == "Yet to join"
    assert read_enrollment(path, "CS101")[0].google_id == "jwong"


def test_students_to_frame_empty():
    assert students_to_frame([]).empty
