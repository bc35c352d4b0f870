"""Schemas package."""

from .question import Question
from .requests import DistributionItem, GenerationRequest, SolveRequest, SolvePaperRequest
from .responses import (
    PaperSection,
    GeneratedQuestions,
    GenerateQuestionsResponse,
    Solution,
    SolveResponse,
    PaperSolutions,
    SolvePaperResponse,
    ErrorResponse,
)

__all__ = [
    # Questions
    "Question",
    # Requests
    "DistributionItem",
    "GenerationRequest",
    "SolveRequest",
    "SolvePaperRequest",
    # Responses
    "PaperSection",
    "GeneratedQuestions",
    "GenerateQuestionsResponse",
    "Solution",
    "SolveResponse",
    "PaperSolutions",
    "SolvePaperResponse",
    "ErrorResponse",
]
