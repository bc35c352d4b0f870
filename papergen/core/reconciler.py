"""
Distribution reconciliation.

Forces normalized model output to match the caller's requested
distribution exactly: surplus questions in a bucket are trimmed, missing
ones are synthesized from templates, and the result is ordered by type.
Paper assembly needs a fixed question count per part, so a bucket that
still does not match is reported but never raises.
"""

import logging
import warnings
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple, Union

from papergen.core.constants import TYPE_ORDER
from papergen.core.exceptions import DistributionMismatchWarning
from papergen.core.templates import generate_fallback_question
from papergen.schemas.question import Question
from papergen.schemas.requests import DistributionItem

logger = logging.getLogger(__name__)

BucketKey = Tuple[str, str]
QuestionGenerator = Callable[..., Question]

# Regenerations tried before a "(Variant N)" marker is appended
MAX_REGENERATION_ATTEMPTS = 3


def _bucket_key(item: Union[Question, DistributionItem]) -> BucketKey:
    return (item.type, item.difficulty)


def _as_items(distribution: Iterable[Union[DistributionItem, dict]]) -> List[DistributionItem]:
    return [
        item if isinstance(item, DistributionItem) else DistributionItem.model_validate(item)
        for item in distribution
    ]


def synthesize_questions(
    item: DistributionItem,
    missing: int,
    seen_texts: Set[str],
    topic: str,
    subject: Optional[str] = None,
    generator: QuestionGenerator = generate_fallback_question,
) -> List[Question]:
    """
    Create `missing` template questions for one bucket with unique texts.

    Each question is seeded with an increasing variation index. If its text
    still collides after MAX_REGENERATION_ATTEMPTS regenerations, a
    "(Variant N)" suffix is appended. seen_texts is updated in place.
    """
    created = []
    for i in range(missing):
        attempt = 0
        candidate = generator(topic, item.type, item.difficulty, item.marks, subject, i)
        while candidate.text in seen_texts and attempt < MAX_REGENERATION_ATTEMPTS:
            attempt += 1
            candidate = generator(topic, item.type, item.difficulty, item.marks, subject, i + attempt)

        text = candidate.text
        variant = attempt + 1
        while text in seen_texts:
            text = f"{candidate.text} (Variant {variant})"
            variant += 1

        update = {"text": text}
        if item.marks:
            update["marks"] = item.marks
        if subject:
            update["subject"] = subject
        candidate = candidate.model_copy(update=update)

        seen_texts.add(candidate.text)
        created.append(candidate)
        logger.debug(f"Generated {item.type} question: {candidate.text[:60]}...")

    return created


def verify_distribution(
    questions: List[Question],
    distribution: Iterable[Union[DistributionItem, dict]],
) -> List[str]:
    """
    Compare questions against the requested distribution.

    Returns:
        One message per bucket whose count or marks do not match; empty if all match
    """
    problems = []
    for item in _as_items(distribution):
        bucket = [q for q in questions if _bucket_key(q) == _bucket_key(item)]
        if len(bucket) != item.count:
            problems.append(
                f"Expected {item.count} {item.type} questions with {item.difficulty} "
                f"difficulty, but got {len(bucket)}"
            )
        if item.marks and any(q.marks != item.marks for q in bucket):
            problems.append(
                f"Expected every {item.type}/{item.difficulty} question to be worth "
                f"{item.marks} marks"
            )
    return problems


def reconcile_distribution(
    questions: List[Question],
    distribution: Iterable[Union[DistributionItem, dict]],
    topic: str,
    subject: Optional[str] = None,
    generator: QuestionGenerator = generate_fallback_question,
) -> List[Question]:
    """
    Make the question list match the requested distribution exactly.

    Args:
        questions: Normalized questions, in model output order
        distribution: Requested (type, difficulty, count, marks) buckets
        topic: Topic for synthesized questions
        subject: Subject for template selection; attached to synthesized questions
        generator: Fallback question factory (template generator by default)

    Returns:
        Questions grouped by type in TYPE_ORDER. Within a type, kept model
        questions keep their relative order and synthesized ones follow.
    """
    items = _as_items(distribution)
    subject_name = subject or "general"

    # Positions of each bucket's questions, in input order
    positions: Dict[BucketKey, List[int]] = {}
    for pos, question in enumerate(questions):
        positions.setdefault(_bucket_key(question), []).append(pos)

    requested = {_bucket_key(item) for item in items}
    for key, bucket in positions.items():
        if key not in requested:
            logger.warning(f"Dropping {len(bucket)} {key[0]}/{key[1]} questions not in the requested distribution")

    total_missing = sum(max(item.count - len(positions.get(_bucket_key(item), [])), 0) for item in items)
    if total_missing:
        logger.info(
            f"Need to generate {total_missing} additional {subject_name} questions "
            f"to meet the distribution requirements (topic: {topic})"
        )

    kept: Dict[int, Question] = {}
    synthesized: Dict[str, List[Question]] = {}

    for item in items:
        bucket = positions.get(_bucket_key(item), [])

        if len(bucket) > item.count:
            logger.info(
                f"Trimming excess {item.type} questions for {subject_name} "
                f"(have {len(bucket)}, need {item.count})."
            )
            bucket = bucket[:item.count]

        for pos in bucket:
            question = questions[pos]
            if item.marks and question.marks != item.marks:
                question = question.model_copy(update={"marks": item.marks})
            kept[pos] = question

        missing = item.count - len(bucket)
        if missing > 0:
            logger.info(f"Generating {missing} {item.difficulty} {item.type} questions for {subject_name}.")
            seen_texts = {questions[pos].text for pos in bucket}
            synthesized.setdefault(item.type, []).extend(
                synthesize_questions(item, missing, seen_texts, topic, subject, generator)
            )

    by_type: Dict[str, List[Question]] = {question_type: [] for question_type in TYPE_ORDER}
    for pos in sorted(kept):
        by_type[kept[pos].type].append(kept[pos])
    for question_type, created in synthesized.items():
        by_type[question_type].extend(created)

    final = [question for question_type in TYPE_ORDER for question in by_type[question_type]]

    problems = verify_distribution(final, items)
    for problem in problems:
        logger.warning(f"Warning: {problem}")
        warnings.warn(problem, DistributionMismatchWarning, stacklevel=2)

    if not problems:
        logger.info(
            f"Successfully generated all {len(final)} {subject_name} questions "
            f"according to the specified distribution."
        )

    return final
