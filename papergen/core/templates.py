"""
Template based fallback question generation.

Used by the reconciler to fill buckets the model under-delivered on.
Questions come from the subject profile banks, so they are always
syntactically valid (an mcq always gets four plausible looking options)
but semantically shallow.
"""

from typing import Optional

from papergen.core.constants import QuestionType, get_default_marks
from papergen.core.subjects import DEFAULT_PROFILE, get_subject_profile
from papergen.schemas.question import Question

FALLBACK_TEXT = "Answer the following question about this concept."


def select_template(question_type: str, difficulty: str, subject: Optional[str], index: int = 0) -> str:
    """Pick question text from the subject bank, the generic bank, or the fixed fallback."""
    profile = get_subject_profile(subject)
    bank = profile.templates_for(question_type, difficulty) or DEFAULT_PROFILE.templates_for(question_type, difficulty)
    if not bank:
        return FALLBACK_TEXT
    return bank[index % len(bank)]


def select_options(question_text: str, subject: Optional[str], index: int = 0) -> list:
    """Pick four mcq options matching the question text."""
    options = get_subject_profile(subject).options_for(question_text, index)
    if options is None:
        options = DEFAULT_PROFILE.options_for(question_text, index)
    return options


def generate_fallback_question(
    topic: str,
    question_type: str,
    difficulty: str,
    marks: Optional[int] = None,
    subject: Optional[str] = None,
    index: int = 0,
) -> Question:
    """
    Build one synthetic question from the template banks.

    Args:
        topic: Topic recorded on the question
        question_type: Canonical question type
        difficulty: Canonical difficulty
        marks: Marks for the question (derived from type/difficulty if None)
        subject: Subject used to select the template bank
        index: Variation index; selects template (and option set) modulo bank size

    Returns:
        A canonical Question. For mcq the correct answer is the last option.
    """
    text = select_template(question_type, difficulty, subject, index)
    fields = {
        "text": text,
        "type": question_type,
        "difficulty": difficulty,
        "marks": marks or get_default_marks(question_type, difficulty),
        "topic": topic,
    }

    if question_type == QuestionType.MCQ.value:
        options = select_options(text, subject, index)
        fields["options"] = options
        fields["correctAnswer"] = options[-1]

    return Question(**fields)
