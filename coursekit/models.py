from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class CourseStudent(BaseModel):
    email: str
    name: str
    google_id: Optional[str]
    comments: Optional[str]
    course_id: str
    team_name: Optional[str]
    section_name: Optional[str]
    last_name: Optional[str] = None
    registration_key: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def id(self) -> str:
        return f"{self.email}%{self.course_id}"


class Instructor(BaseModel):
    google_id: Optional[str]
    course_id: str
    is_archived: Optional[bool]
    name: str
    email: str
    registration_key: Optional[str] = None
    role: Optional[str]
    is_displayed_to_students: bool
    displayed_name: Optional[str]
    instructor_privileges_as_text: Optional[str]

    @property
    def id(self) -> str:
        return f"{self.email}%{self.course_id}"


class FeedbackResponseComment(BaseModel):
    course_id: str
    feedback_session_name: str
    feedback_question_id: str
    giver_email: str
    feedback_response_id: str
    created_at: Optional[datetime]
    comment_text: Optional[str]
    giver_section: Optional[str]
    receiver_section: Optional[str]
    show_comment_to: Optional[list[str]]
    show_giver_name_to: Optional[list[str]]
    last_editor_email: Optional[str]
    last_edited_at: Optional[datetime]
    is_visibility_following_feedback_question: Optional[bool] = None
    feedback_response_comment_id: Optional[int] = None
