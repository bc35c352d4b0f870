"""Question schemas."""

from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

from papergen.core.constants import (
    QuestionType,
    Difficulty,
    BloomsLevel,
    MCQ_OPTION_COUNT,
)


class Question(BaseModel):
    """Canonical question record produced by the pipeline."""
    text: str = Field(..., min_length=1)
    type: QuestionType
    difficulty: Difficulty
    marks: int = Field(..., gt=0)
    topic: str

    # MCQ only
    options: Optional[List[str]] = None
    correctAnswer: Optional[str] = None

    bloomsTaxonomy: Optional[BloomsLevel] = None
    explanation: Optional[str] = None
    subject: Optional[str] = None

    model_config = {"use_enum_values": True}

    @model_validator(mode="after")
    def check_mcq_fields(self) -> "Question":
        if self.type == QuestionType.MCQ.value:
            if self.options is None or len(self.options) != MCQ_OPTION_COUNT:
                raise ValueError(f"mcq questions need exactly {MCQ_OPTION_COUNT} options")
            if self.correctAnswer not in self.options:
                raise ValueError("correctAnswer must be one of the options")
        elif self.options is not None or self.correctAnswer is not None:
            raise ValueError(f"{self.type} questions cannot carry options or correctAnswer")
        return self

    def to_dict(self) -> dict:
        """Serialize without the fields that are absent."""
        return self.model_dump(exclude_none=True)
