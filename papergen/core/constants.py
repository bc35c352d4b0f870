"""
Centralized constants and enums for PaperGen.

This module provides a single source of truth for question types,
difficulty levels, Bloom's taxonomy levels and the marks tables used
throughout the pipeline. Adding a new question type only requires
editing this file (and the prompt/template banks that describe it).
"""

from enum import Enum
from typing import List, Dict, Optional


# ============================================================================
# Question Types
# ============================================================================

class QuestionType(str, Enum):
    """Question types supported in a paper."""
    MCQ = "mcq"
    SHORT = "short"
    LONG = "long"
    DIAGRAM = "diagram"
    CODE = "code"
    HOTS = "hots"
    CASE_STUDY = "case_study"


# Order in which types are emitted in the final paper
TYPE_ORDER: List[str] = [
    QuestionType.MCQ.value,
    QuestionType.SHORT.value,
    QuestionType.LONG.value,
    QuestionType.DIAGRAM.value,
    QuestionType.CODE.value,
    QuestionType.HOTS.value,
    QuestionType.CASE_STUDY.value,
]


def get_question_types() -> List[str]:
    """Get all question type values."""
    return [qtype.value for qtype in QuestionType]


def normalize_question_type(value: Optional[str]) -> Optional[str]:
    """
    Map the various spellings models use to a canonical type value.

    Returns None when the value cannot be recognised.
    """
    if not isinstance(value, str):
        return None
    value = value.lower().strip().replace("-", "_")

    if value in get_question_types():
        return value

    mapping = {
        "multiple choice": QuestionType.MCQ.value,
        "multiple_choice": QuestionType.MCQ.value,
        "mcqs": QuestionType.MCQ.value,
        "objective": QuestionType.MCQ.value,
        "short answer": QuestionType.SHORT.value,
        "short_answer": QuestionType.SHORT.value,
        "long answer": QuestionType.LONG.value,
        "long_answer": QuestionType.LONG.value,
        "essay": QuestionType.LONG.value,
        "coding": QuestionType.CODE.value,
        "programming": QuestionType.CODE.value,
        "higher order thinking": QuestionType.HOTS.value,
        "case study": QuestionType.CASE_STUDY.value,
        "casestudy": QuestionType.CASE_STUDY.value,
    }

    return mapping.get(value)


# ============================================================================
# Difficulty
# ============================================================================

class Difficulty(str, Enum):
    """Question difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


def get_difficulties() -> List[str]:
    """Get all difficulty values."""
    return [level.value for level in Difficulty]


def normalize_difficulty(value: Optional[str]) -> Optional[str]:
    """Map a difficulty string to a canonical value, or None."""
    if not isinstance(value, str):
        return None
    value = value.lower().strip()
    if value in get_difficulties():
        return value

    mapping = {
        "simple": Difficulty.EASY.value,
        "basic": Difficulty.EASY.value,
        "moderate": Difficulty.MEDIUM.value,
        "intermediate": Difficulty.MEDIUM.value,
        "difficult": Difficulty.HARD.value,
        "advanced": Difficulty.HARD.value,
    }
    return mapping.get(value)


# ============================================================================
# Bloom's Taxonomy
# ============================================================================

class BloomsLevel(str, Enum):
    """Cognitive levels of Bloom's taxonomy."""
    REMEMBER = "remember"
    UNDERSTAND = "understand"
    APPLY = "apply"
    ANALYZE = "analyze"
    EVALUATE = "evaluate"
    CREATE = "create"


def get_blooms_levels() -> List[str]:
    """Get all Bloom's level values."""
    return [level.value for level in BloomsLevel]


def normalize_blooms_level(value: Optional[str]) -> Optional[str]:
    """Map a Bloom's level string to a canonical value, or None."""
    if not isinstance(value, str):
        return None
    value = value.lower().strip()
    if value == "analyse":
        value = BloomsLevel.ANALYZE.value
    return value if value in get_blooms_levels() else None


# ============================================================================
# Marks
# ============================================================================

BASE_MARKS: Dict[str, int] = {
    QuestionType.MCQ.value: 2,
    QuestionType.SHORT.value: 4,
    QuestionType.LONG.value: 8,
    QuestionType.DIAGRAM.value: 6,
    QuestionType.CODE.value: 7,
    QuestionType.HOTS.value: 10,
    QuestionType.CASE_STUDY.value: 12,
}

DIFFICULTY_MULTIPLIER: Dict[str, float] = {
    Difficulty.EASY.value: 1,
    Difficulty.MEDIUM.value: 1.5,
    Difficulty.HARD.value: 2,
}


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; marks tables expect 4.5 -> 5
    return int(value + 0.5)


def get_default_marks(question_type: str, difficulty: str) -> int:
    """
    Derive marks for a question that arrived without any.

    Base marks by type scaled by the difficulty multiplier
    (easy x1, medium x1.5, hard x2), rounded to the nearest integer.
    """
    base = BASE_MARKS.get(question_type, BASE_MARKS[QuestionType.MCQ.value])
    multiplier = DIFFICULTY_MULTIPLIER.get(difficulty, 1)
    return _round_half_up(base * multiplier)


# ============================================================================
# Limits and Defaults
# ============================================================================

MCQ_OPTION_COUNT = 4
MAX_BUCKET_COUNT = 25
MAX_LEGACY_COUNT = 100

DEFAULT_QUESTION_TYPE = QuestionType.MCQ.value
DEFAULT_DIFFICULTY = Difficulty.MEDIUM.value
PLACEHOLDER_TEXT = "No question text provided"
