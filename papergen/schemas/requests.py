"""Request schemas."""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from papergen.core.constants import (
    QuestionType,
    Difficulty,
    BloomsLevel,
    MAX_BUCKET_COUNT,
    MAX_LEGACY_COUNT,
)


class DistributionItem(BaseModel):
    """One (type, difficulty) bucket of the requested paper shape."""
    type: QuestionType
    difficulty: Difficulty
    count: int = Field(..., ge=1, le=MAX_BUCKET_COUNT, description="Questions in this bucket")
    marks: Optional[int] = Field(None, gt=0, description="Exact marks per question")

    model_config = {"use_enum_values": True}


class GenerationRequest(BaseModel):
    """Parameters describing the exam to generate questions for."""
    topic: str = Field(..., min_length=1, description="Topic the questions should test")
    subject: Optional[str] = Field(None, description="Subject name, drives subject specific rules")
    educationalLevel: Optional[str] = Field(None, description="Target level, e.g. 'Class 10'")
    description: Optional[str] = Field(None, description="Paper description")
    syllabus: Optional[str] = Field(None, description="Syllabus text to adhere to")
    totalMarks: Optional[float] = Field(None, gt=0)
    duration: Optional[float] = Field(None, gt=0, description="Duration in minutes")

    # Legacy shape, used only when questionDistribution is empty
    count: int = Field(5, ge=1, le=MAX_LEGACY_COUNT)
    type: QuestionType = QuestionType.MCQ
    difficulty: Difficulty = Difficulty.MEDIUM
    questionTypes: Optional[List[QuestionType]] = None

    bloomsLevel: Optional[BloomsLevel] = None
    model: Optional[str] = Field(None, description="Model name; defaults to settings.DEFAULT_MODEL")
    questionDistribution: List[DistributionItem] = Field(default_factory=list)

    model_config = {
        "use_enum_values": True,
        "validate_default": True,
        "json_schema_extra": {
            "example": {
                "topic": "Thermodynamics",
                "subject": "Physics",
                "questionDistribution": [
                    {"type": "mcq", "difficulty": "easy", "count": 3, "marks": 2},
                    {"type": "long", "difficulty": "hard", "count": 1, "marks": 10}
                ]
            }
        },
    }

    @field_validator("questionDistribution")
    @classmethod
    def check_unique_buckets(cls, items: List[DistributionItem]) -> List[DistributionItem]:
        seen = set()
        for item in items:
            key = (item.type, item.difficulty)
            if key in seen:
                raise ValueError(f"duplicate distribution bucket: {item.type}/{item.difficulty}")
            seen.add(key)
        return items

    @property
    def total_count(self) -> int:
        """Number of questions the model is asked for."""
        if self.questionDistribution:
            return sum(item.count for item in self.questionDistribution)
        return self.count

    @property
    def question_types(self) -> List[str]:
        """Legacy type list, falling back to the single legacy type."""
        return list(self.questionTypes) if self.questionTypes else [self.type]


class SolveRequest(BaseModel):
    """Solve a single question."""
    question: str = Field(..., min_length=1, max_length=5000)
    subject: Optional[str] = None
    model: Optional[str] = None


class SolvePaperRequest(BaseModel):
    """Solve every question of a paper."""
    questions: List[str] = Field(..., min_length=1)
    subject: Optional[str] = None
    model: Optional[str] = None
