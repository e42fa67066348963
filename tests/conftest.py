from datetime import datetime, timezone

import pytest

from coursekit.comment import FeedbackResponseCommentAttributes
from coursekit.instructor import InstructorAttributes
from coursekit.student import StudentAttributes


@pytest.fixture
def created_at():
    return datetime(2024, 3, 4, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def student_builder():
    return StudentAttributes.builder("CS101", "Jean  Wong", "jean@uni.edu")


@pytest.fixture
def instructor_builder():
    return InstructorAttributes.builder("CS101", "Ann  Lee", "ann@uni.edu")


@pytest.fixture
def comment_builder(created_at):
    return FeedbackResponseCommentAttributes.builder(
        "CS101", "Session 1", "question-1", "response-1", "giver@uni.edu"
    ).with_created_at(created_at)


@pytest.fixture
def stored_students():
    """Students already enrolled in CS101"""
    return [
        StudentAttributes.builder("CS101", "Jean Wong", "jean@uni.edu")
        .with_section("S1")
        .with_team("T1")
        .with_google_id("jwong")
        .build(),
        StudentAttributes.builder("CS101", "Tom Lee", "tom@uni.edu")
        .with_section("S1")
        .with_team("T2")
        .build(),
        StudentAttributes.builder("CS101", "Ann Smith", "ann@uni.edu")
        .with_section("S2")
        .with_team("T3")
        .build(),
    ]
