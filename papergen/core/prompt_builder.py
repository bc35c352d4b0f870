"""
Prompt construction for question generation and solving.

Turns a GenerationRequest into the single instruction string sent to the
model. Pure and deterministic: the same request always yields the same
prompt.
"""

from typing import List, Optional

from papergen.core.prompt_manager import PromptManager, get_prompt_manager
from papergen.core.subjects import get_subject_profile
from papergen.schemas.requests import GenerationRequest


def _introduction(request: GenerationRequest) -> str:
    intro = (
        f"Generate {request.total_count} high-quality, meaningful, "
        f"educational questions on {request.topic}"
    )
    if request.subject:
        intro += f" for the subject {request.subject}"
    if request.educationalLevel:
        intro += f" appropriate for {request.educationalLevel} level students"

    if request.description:
        intro += f'\n\nPaper description: "{request.description}"'
    if request.syllabus:
        intro += f'\n\nSyllabus: "{request.syllabus}"'
    if request.totalMarks:
        intro += f"\n\nThis is for a {request.totalMarks:g} mark exam"
        if request.duration:
            intro += f" with a duration of {request.duration:g} minutes"
    elif request.duration:
        intro += f"\n\nThe exam has a duration of {request.duration:g} minutes"
    return intro


def _content_requirements(request: GenerationRequest) -> str:
    rules: List[str] = [
        "All questions MUST be well-formed and appropriate for academic assessment.",
        "Questions MUST be meaningful and contain actual subject matter content.",
        'Never generate generic placeholders like "Additional question on this topic."',
        "Each question should be precisely worded and unambiguous.",
        "IMPORTANT: Do NOT mention the topic directly in the question text. "
        "Create natural questions that test the topic without explicitly naming it.",
    ]

    if request.subject:
        profile = get_subject_profile(request.subject)
        rules.append(
            f"All questions must accurately represent {request.subject} concepts and terminology."
        )
        heading = profile.prompt_heading.format(subject=request.subject)
        sub_rules = "".join(
            f"\n   {chr(97 + i)}. {rule.format(subject=request.subject)}"
            for i, rule in enumerate(profile.prompt_rules)
        )
        rules.append(heading + sub_rules)

    if request.syllabus:
        rules.append("STRICTLY adhere to the provided syllabus content.")
        rules.append("Questions should only cover topics mentioned in the syllabus.")

    if request.educationalLevel:
        rules.append(
            f"Ensure questions are at an appropriate difficulty for {request.educationalLevel} level."
        )

    rules.extend([
        "For MCQ questions: Provide exactly 4 options with one correct answer. All options should be plausible.",
        "For short answer questions: Create concise, focused questions requiring brief explanations.",
        "For long answer questions: Design questions that test deep understanding and analytical skills.",
        "Group similar question types together in the generated output.",
    ])

    return "\n".join(f"{i}. {rule}" for i, rule in enumerate(rules, 1))


def _shape_instructions(request: GenerationRequest) -> str:
    """Distribution block, or the legacy count/type instruction."""
    if request.questionDistribution:
        lines = [
            "",
            "=== CRITICAL DISTRIBUTION AND MARKS REQUIREMENTS ===",
            "Create EXACTLY these questions with the EXACT marks specified:",
        ]
        for item in request.questionDistribution:
            marks = f" with EXACTLY {item.marks} marks per question" if item.marks else ""
            lines.append(f"- {item.count} {item.difficulty} {item.type} questions{marks}")

        lines.append("")
        lines.append(f"Total number of questions: {request.total_count}")

        fixed = [item for item in request.questionDistribution if item.marks]
        if fixed:
            lines.append("")
            lines.append("IMPORTANT: The marks for each question type are fixed and non-negotiable:")
            for item in fixed:
                lines.append(
                    f'- ALL {item.type} questions with "{item.difficulty}" difficulty '
                    f"MUST be worth EXACTLY {item.marks} marks each."
                )
        lines.append("=== END OF DISTRIBUTION REQUIREMENTS ===")
        text = "\n".join(lines)
    else:
        types = request.question_types
        if len(types) > 1:
            per_type = -(-request.count // len(types))
            text = (
                f"\nDistribute the questions among these types: {', '.join(types)}. "
                f"Approximately {per_type} questions per type."
            )
        else:
            text = f'\nQuestions should be of type "{types[0]}" with "{request.difficulty}" difficulty.'

    if request.bloomsLevel:
        text += f' Questions should target the "{request.bloomsLevel}" level of Bloom\'s Taxonomy.'
    return text


def _examples(subject: Optional[str]) -> str:
    if not subject:
        return ""
    profile = get_subject_profile(subject)
    lines = [f"\n\nExamples of good {subject} questions:"]
    for i, example in enumerate(profile.prompt_examples, 1):
        lines.append(f"{i}. {example.format(subject=subject)}")
    return "\n".join(lines)


def build_generation_prompt(
    request: GenerationRequest,
    manager: Optional[PromptManager] = None,
) -> str:
    """
    Build the question generation prompt for a request.

    Args:
        request: Validated generation request
        manager: Prompt manager to load templates from (global one by default)

    Returns:
        The full instruction string
    """
    manager = manager or get_prompt_manager()
    schema = manager.load_prompt("response_schema", TOPIC=request.topic)
    return manager.load_prompt(
        "question_generation",
        INTRODUCTION=_introduction(request),
        CONTENT_REQUIREMENTS=_content_requirements(request),
        SHAPE_INSTRUCTIONS=_shape_instructions(request),
        EXAMPLES=_examples(request.subject),
        RESPONSE_SCHEMA=schema,
    )


def build_solve_prompt(
    question_text: str,
    subject: Optional[str] = None,
    manager: Optional[PromptManager] = None,
) -> str:
    """Build the tutor prompt used to solve a single question."""
    manager = manager or get_prompt_manager()
    subject_line = f" The question is from the subject area of {subject}." if subject else ""
    return manager.load_prompt(
        "solve_question",
        QUESTION=question_text,
        SUBJECT_LINE=subject_line,
    )
