"""
Question normalization.

Coerces loosely-typed question records recovered from model output into
canonical Question objects. Defects are repaired rather than rejected:
a partially wrong question is more useful to the caller than a missing one.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Union

from papergen.core.constants import (
    QuestionType,
    MCQ_OPTION_COUNT,
    DEFAULT_QUESTION_TYPE,
    DEFAULT_DIFFICULTY,
    PLACEHOLDER_TEXT,
    get_default_marks,
    normalize_question_type,
    normalize_difficulty,
    normalize_blooms_level,
)
from papergen.schemas.question import Question

logger = logging.getLogger(__name__)

QuestionLike = Union[Question, Dict[str, Any]]


def _coerce_marks(value: Any) -> Optional[int]:
    """Positive integer marks from ints, floats or numeric strings, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # inf and nan come through json.loads and float("inf")
    if not math.isfinite(number):
        return None
    marks = int(round(number))
    return marks if marks > 0 else None


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def validate_mcq_options(options: Any) -> List[str]:
    """
    Coerce an options value to exactly four strings.

    Pads with "Option A".."Option D" labels by position when fewer are
    given and truncates when there are more.
    """
    if not isinstance(options, list):
        options = []
    valid = [str(option) for option in options if option is not None]

    if len(valid) < MCQ_OPTION_COUNT:
        logger.warning("MCQ question has fewer than 4 options, adding generic options")
        while len(valid) < MCQ_OPTION_COUNT:
            valid.append(f"Option {chr(65 + len(valid))}")
    elif len(valid) > MCQ_OPTION_COUNT:
        logger.warning("MCQ question has more than 4 options, truncating to 4")
        valid = valid[:MCQ_OPTION_COUNT]

    return valid


def normalize_question(record: QuestionLike, topic: str) -> Question:
    """Normalize a single question record into the canonical schema."""
    if isinstance(record, Question):
        record = record.to_dict()

    text = _optional_text(record.get("text"))
    if text is None:
        logger.warning("Question without text, substituting placeholder")
        text = PLACEHOLDER_TEXT

    question_type = normalize_question_type(record.get("type")) or DEFAULT_QUESTION_TYPE
    difficulty = normalize_difficulty(record.get("difficulty")) or DEFAULT_DIFFICULTY
    marks = _coerce_marks(record.get("marks")) or get_default_marks(question_type, difficulty)

    fields: Dict[str, Any] = {
        "text": text,
        "type": question_type,
        "difficulty": difficulty,
        "marks": marks,
        "topic": _optional_text(record.get("topic")) or topic,
        "bloomsTaxonomy": normalize_blooms_level(record.get("bloomsTaxonomy")),
        "explanation": _optional_text(record.get("explanation")),
        "subject": _optional_text(record.get("subject")),
    }

    if question_type == QuestionType.MCQ.value:
        options = validate_mcq_options(record.get("options"))
        answer = record.get("correctAnswer")
        answer = str(answer) if answer is not None else None
        fields["options"] = options
        fields["correctAnswer"] = answer if answer in options else options[0]

    return Question(**fields)


def normalize_questions(records: Iterable[Any], topic: str) -> List[Question]:
    """
    Normalize every question record returned by the model.

    Args:
        records: Raw question dicts (or already canonical Questions)
        topic: Topic of the request, used when a record has none

    Returns:
        Canonical questions, in input order
    """
    questions = []
    for i, record in enumerate(records):
        if not isinstance(record, (dict, Question)):
            logger.warning(f"Skipping question {i}: expected an object, got {type(record).__name__}")
            continue
        questions.append(normalize_question(record, topic))
    return questions
