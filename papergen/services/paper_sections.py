"""
Groups final questions into the parts of a printed paper.

Each part heading states "count × marks = total", which is what the PDF
renderer prints above the part. A part mixing different marks (Part B can
hold short, diagram, code and case_study questions) states its summed total
instead.
"""

from typing import List, Optional, Sequence, Tuple

from papergen.schemas.question import Question
from papergen.schemas.responses import PaperSection

# (part, title, question types), in print order
PAPER_PARTS: Sequence[Tuple[str, str, Tuple[str, ...]]] = (
    ("A", "Multiple Choice Questions", ("mcq",)),
    ("B", "Short Answer Questions", ("short", "diagram", "code", "case_study")),
    ("C", "Long Answer Questions", ("long",)),
    ("D", "Higher Order Thinking Skills", ("hots",)),
)


def format_heading(part: str, count: int, marks_per_question: Optional[int], total: int) -> str:
    if marks_per_question is None:
        return f"PART {part} ({count} Questions = {total} Marks)"
    return f"PART {part} ({count} × {marks_per_question} = {total} Marks)"


def build_paper_sections(questions: List[Question]) -> List[PaperSection]:
    """
    Split questions into paper parts, omitting parts with no questions.

    marks_per_question is None when the part mixes different marks.
    """
    sections = []
    for part, title, types in PAPER_PARTS:
        members = [q for q in questions if q.type in types]
        if not members:
            continue

        distinct_marks = {q.marks for q in members}
        marks = distinct_marks.pop() if len(distinct_marks) == 1 else None
        total = sum(q.marks for q in members)

        sections.append(PaperSection(
            part=part,
            title=title,
            question_types=list(types),
            questions=[q.to_dict() for q in members],
            marks_per_question=marks,
            total_marks=total,
            heading=format_heading(part, len(members), marks, total),
        ))
    return sections
