from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

class Question(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    id: str
    text: str
    type: str
    options: list[str] | None = None
    required: bool = False

    def to_document(self) -> dict:
        doc = self.model_dump(exclude_none=True)
        # options only kept for closed-choice questions
        if not doc.get("options"):
            doc.pop("options", None)
        return doc

class SurveyFormIn(BaseModel):
    """Request body of an update.

    ``id`` may be empty or null at decode time; such an id is rejected afterwards
    with its own error rather than as a malformed body.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    id: str | None = None
    title: str
    description: str
    questions: list[Question]
    created_by: str | None = Field(default=None, validation_alias=AliasChoices("created_by", "createdBy"))
    created_at: datetime | None = Field(default=None, validation_alias=AliasChoices("created_at", "createdAt"))
    is_active: bool = Field(validation_alias=AliasChoices("is_active", "isActive"))

    def update_fields(self) -> dict:
        """Fields written by an update; id, created_by and created_at never are."""
        return {
            "title": self.title,
            "description": self.description,
            "questions": [q.to_document() for q in self.questions],
            "is_active": self.is_active,
        }

class QuestionOut(BaseModel):
    id: str
    text: str
    type: str
    options: list[str] | None = None
    required: bool = False

class SurveyFormOut(BaseModel):
    id: str
    title: str
    description: str
    questions: list[QuestionOut]
    created_by: str
    created_at: datetime | None
    is_active: bool

    class Config:
        from_attributes = True

class SurveyUpdateOut(BaseModel):
    id: str
    message: str = "Survey updated successfully"
