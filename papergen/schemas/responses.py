"""Response schemas."""

from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any


class PaperSection(BaseModel):
    """One part of the printed paper (Part A, Part B, ...)."""
    part: str
    title: str
    question_types: List[str]
    questions: List[Dict[str, Any]] = Field(default_factory=list)
    marks_per_question: Optional[int] = None  # None when the part mixes marks
    total_marks: int
    heading: str


class GeneratedQuestions(BaseModel):
    questions: List[Dict[str, Any]]
    sections: List[PaperSection] = Field(default_factory=list)


class GenerateQuestionsResponse(BaseModel):
    status: str = "success"
    data: GeneratedQuestions


class Solution(BaseModel):
    question: str
    solution: str


class SolveResponse(BaseModel):
    status: str = "success"
    data: Solution


class PaperSolutions(BaseModel):
    solutions: List[str]


class SolvePaperResponse(BaseModel):
    status: str = "success"
    data: PaperSolutions


class ErrorResponse(BaseModel):
    """Error response identifying the pipeline stage that failed."""
    status: str = Field(default="error")
    stage: str
    message: str
    detail: Optional[Dict[str, Any]] = None
