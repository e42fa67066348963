from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import Field, model_validator

from coursekit import sanitize, validator
from coursekit.attributes import (
    AttributesBuilder,
    EntityAttributes,
    add_non_empty_error,
    lookup,
    require_fields,
    set_default,
)
from coursekit.const import COURSE_BACKUP_LOG_MSG, DEFAULT_SECTION
from coursekit.enums import FeedbackParticipantType
from coursekit.models import FeedbackResponseComment


class FeedbackResponseCommentAttributes(EntityAttributes):
    """A comment attached to a response in a feedback session."""

    course_id: str
    feedback_session_name: str
    feedback_question_id: str
    feedback_response_id: str
    giver_email: str

    show_comment_to: list[FeedbackParticipantType] = Field(default_factory=list)
    show_giver_name_to: list[FeedbackParticipantType] = Field(default_factory=list)
    is_visibility_following_feedback_question: bool = True
    created_at: datetime
    comment_text: str = ""
    last_editor_email: str
    last_edited_at: datetime
    feedback_response_comment_id: Optional[int] = None
    giver_section: str = DEFAULT_SECTION
    receiver_section: str = DEFAULT_SECTION

    @model_validator(mode="before")
    @classmethod
    def _default_edit_fields(cls, data: Any) -> Any:
        # The last edit defaults to the creation of the comment by its giver
        if isinstance(data, dict):
            data = dict(data)
            set_default(data, "created_at", datetime.now(timezone.utc))
            set_default(data, "last_editor_email", lookup(data, "giver_email"))
            set_default(data, "last_edited_at", lookup(data, "created_at"))
        return data

    @classmethod
    def builder(
        cls,
        course_id: str,
        feedback_session_name: str,
        feedback_question_id: str,
        feedback_response_id: str,
        giver_email: str,
    ) -> "FeedbackResponseCommentBuilder":
        """
        Start building a comment.

        Unset optional fields default to: giver_section and receiver_section
        DEFAULT_SECTION, empty visibility lists, visibility following the
        question, empty comment text, created_at now, last_editor_email the
        giver and last_edited_at the creation time.
        """
        require_fields(
            course_id=course_id,
            feedback_session_name=feedback_session_name,
            feedback_question_id=feedback_question_id,
            feedback_response_id=feedback_response_id,
            giver_email=giver_email,
        )
        return FeedbackResponseCommentBuilder(
            course_id=course_id,
            feedback_session_name=feedback_session_name,
            feedback_question_id=feedback_question_id,
            feedback_response_id=feedback_response_id,
            giver_email=giver_email,
        )

    @classmethod
    def value_of(cls, comment: FeedbackResponseComment) -> "FeedbackResponseCommentAttributes":
        return (
            cls.builder(
                comment.course_id,
                comment.feedback_session_name,
                comment.feedback_question_id,
                comment.feedback_response_id,
                comment.giver_email,
            )
            .with_feedback_response_comment_id(comment.feedback_response_comment_id)
            .with_created_at(comment.created_at)
            .with_comment_text(comment.comment_text)
            .with_giver_section(comment.giver_section)
            .with_receiver_section(comment.receiver_section)
            .with_last_editor_email(comment.last_editor_email)
            .with_last_edited_at(comment.last_edited_at)
            .with_visibility_following_feedback_question(
                comment.is_visibility_following_feedback_question
            )
            .with_show_comment_to(comment.show_comment_to)
            .with_show_giver_name_to(comment.show_giver_name_to)
            .build()
        )

    def to_entity(self) -> FeedbackResponseComment:
        return FeedbackResponseComment(
            course_id=self.course_id,
            feedback_session_name=self.feedback_session_name,
            feedback_question_id=self.feedback_question_id,
            giver_email=self.giver_email,
            feedback_response_id=self.feedback_response_id,
            created_at=self.created_at,
            comment_text=self.comment_text,
            giver_section=self.giver_section,
            receiver_section=self.receiver_section,
            show_comment_to=[participant.value for participant in self.show_comment_to],
            show_giver_name_to=[participant.value for participant in self.show_giver_name_to],
            last_editor_email=self.last_editor_email,
            last_edited_at=self.last_edited_at,
            is_visibility_following_feedback_question=self.is_visibility_following_feedback_question,
            feedback_response_comment_id=self.feedback_response_comment_id,
        )

    def is_visible_to(self, viewer_type: FeedbackParticipantType) -> bool:
        return viewer_type in self.show_comment_to

    def get_id(self) -> Optional[int]:
        return self.feedback_response_comment_id

    def with_id(self, comment_id: int) -> "FeedbackResponseCommentAttributes":
        """Use only to match an existing, known comment."""
        return self.model_copy(update={"feedback_response_comment_id": comment_id})

    def get_invalidity_info(self) -> list[str]:
        errors = []

        add_non_empty_error(validator.get_invalidity_info_for_course_id(self.course_id), errors)
        add_non_empty_error(
            validator.get_invalidity_info_for_feedback_session_name(self.feedback_session_name),
            errors,
        )
        add_non_empty_error(validator.get_invalidity_info_for_email(self.giver_email), errors)

        return errors

    def sanitize_for_saving(self) -> "FeedbackResponseCommentAttributes":
        return self.model_copy(
            update={"comment_text": sanitize.sanitize_for_rich_text(self.comment_text)}
        )

    @staticmethod
    def sort_by_creation_time(
        comments: list["FeedbackResponseCommentAttributes"],
    ) -> list["FeedbackResponseCommentAttributes"]:
        return sorted(comments, key=lambda c: c.created_at)

    def get_identification_string(self) -> str:
        return str(self)

    def get_entity_type_as_string(self) -> str:
        return "FeedbackResponseComment"

    def get_backup_identifier(self) -> str:
        return COURSE_BACKUP_LOG_MSG + self.course_id

    def __str__(self) -> str:
        return (
            "FeedbackResponseCommentAttributes ["
            f"feedbackResponseCommentId = {self.feedback_response_comment_id}"
            f", courseId = {self.course_id}"
            f", feedbackSessionName = {self.feedback_session_name}"
            f", feedbackQuestionId = {self.feedback_question_id}"
            f", giverEmail = {self.giver_email}"
            f", feedbackResponseId = {self.feedback_response_id}"
            f", commentText = {self.comment_text}"
            f", createdAt = {self.created_at}"
            f", lastEditorEmail = {self.last_editor_email}"
            f", lastEditedAt = {self.last_edited_at}]"
        )


class FeedbackResponseCommentBuilder(AttributesBuilder[FeedbackResponseCommentAttributes]):
    attributes_class = FeedbackResponseCommentAttributes

    def with_show_comment_to(
        self, show_comment_to: Optional[list[FeedbackParticipantType]]
    ) -> "FeedbackResponseCommentBuilder":
        return self._with(show_comment_to=show_comment_to)

    def with_show_giver_name_to(
        self, show_giver_name_to: Optional[list[FeedbackParticipantType]]
    ) -> "FeedbackResponseCommentBuilder":
        return self._with(show_giver_name_to=show_giver_name_to)

    def with_visibility_following_feedback_question(
        self, is_following: Optional[bool]
    ) -> "FeedbackResponseCommentBuilder":
        return self._with(is_visibility_following_feedback_question=is_following)

    def with_created_at(self, created_at: Optional[datetime]) -> "FeedbackResponseCommentBuilder":
        return self._with(created_at=created_at)

    def with_comment_text(self, comment_text: Optional[str]) -> "FeedbackResponseCommentBuilder":
        return self._with(comment_text=comment_text)

    def with_last_editor_email(
        self, last_editor_email: Optional[str]
    ) -> "FeedbackResponseCommentBuilder":
        return self._with(last_editor_email=last_editor_email)

    def with_last_edited_at(
        self, last_edited_at: Optional[datetime]
    ) -> "FeedbackResponseCommentBuilder":
        return self._with(last_edited_at=last_edited_at)

    def with_feedback_response_comment_id(
        self, comment_id: Optional[int]
    ) -> "FeedbackResponseCommentBuilder":
        return self._with(feedback_response_comment_id=comment_id)

    def with_giver_section(self, giver_section: Optional[str]) -> "FeedbackResponseCommentBuilder":
        return self._with(giver_section=giver_section)

    def with_receiver_section(
        self, receiver_section: Optional[str]
    ) -> "FeedbackResponseCommentBuilder":
        return self._with(receiver_section=receiver_section)
