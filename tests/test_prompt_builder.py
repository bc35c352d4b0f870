import pytest

from papergen.core.exceptions import PromptTemplateError
from papergen.core.prompt_builder import build_generation_prompt, build_solve_prompt
from papergen.core.prompt_manager import PromptManager
from papergen.schemas.requests import GenerationRequest


@pytest.fixture
def distribution_request():
    return GenerationRequest(
        topic="Thermodynamics",
        subject="Physics",
        educationalLevel="Class 11",
        questionDistribution=[
            {"type": "mcq", "difficulty": "easy", "count": 3, "marks": 2},
            {"type": "long", "difficulty": "hard", "count": 1, "marks": 10},
        ],
    )


def test_prompt_is_deterministic(distribution_request):
    assert build_generation_prompt(distribution_request) == build_generation_prompt(distribution_request)


def test_introduction(distribution_request):
    prompt = build_generation_prompt(distribution_request)
    assert prompt.startswith(
        "Generate 4 high-quality, meaningful, educational questions on Thermodynamics "
        "for the subject Physics appropriate for Class 11 level students"
    )


def test_distribution_block(distribution_request):
    prompt = build_generation_prompt(distribution_request)
    assert "=== CRITICAL DISTRIBUTION AND MARKS REQUIREMENTS ===" in prompt
    assert "- 3 easy mcq questions with EXACTLY 2 marks per question" in prompt
    assert "- 1 hard long questions with EXACTLY 10 marks per question" in prompt
    assert "Total number of questions: 4" in prompt
    assert '- ALL long questions with "hard" difficulty MUST be worth EXACTLY 10 marks each.' in prompt


def test_subject_rules_and_examples(distribution_request):
    prompt = build_generation_prompt(distribution_request)
    assert "All questions must accurately represent Physics concepts and terminology." in prompt
    assert "For Physics questions:\n   a. Include precise scientific terminology and concepts." in prompt
    assert "Examples of good Physics questions:" in prompt
    assert "Ensure questions are at an appropriate difficulty for Class 11 level." in prompt


def test_anti_pattern_rules_and_schema(distribution_request):
    prompt = build_generation_prompt(distribution_request)
    assert "Do NOT mention the topic directly in the question text" in prompt
    assert 'Never generate generic placeholders like "Additional question on this topic."' in prompt
    assert '"topic": "Thermodynamics"' in prompt
    assert "you MUST provide exactly 4 options" in prompt
    assert "NO line breaks" in prompt
    assert "{{" not in prompt


def test_legacy_multiple_types():
    request = GenerationRequest(topic="Cells", count=5, questionTypes=["mcq", "short"])
    prompt = build_generation_prompt(request)
    assert "Distribute the questions among these types: mcq, short. Approximately 3 questions per type." in prompt
    assert "CRITICAL DISTRIBUTION" not in prompt


def test_legacy_single_type_and_blooms():
    request = GenerationRequest(topic="Cells", type="short", difficulty="hard", bloomsLevel="apply")
    prompt = build_generation_prompt(request)
    assert 'Questions should be of type "short" with "hard" difficulty.' in prompt
    assert 'target the "apply" level of Bloom\'s Taxonomy' in prompt


def test_no_subject_means_no_examples():
    prompt = build_generation_prompt(GenerationRequest(topic="Cells"))
    assert "Examples of good" not in prompt
    assert "accurately represent" not in prompt


def test_syllabus_and_exam_details():
    request = GenerationRequest(topic="Cells", syllabus="Cell structure", totalMarks=50, duration=90)
    prompt = build_generation_prompt(request)
    assert 'Syllabus: "Cell structure"' in prompt
    assert "This is for a 50 mark exam with a duration of 90 minutes" in prompt
    assert "STRICTLY adhere to the provided syllabus content." in prompt


def test_solve_prompt():
    prompt = build_solve_prompt("What is entropy?", subject="Physics")
    assert '"What is entropy?" The question is from the subject area of Physics.' in prompt
    assert "3. The final answer clearly marked" in prompt


def test_solve_prompt_without_subject():
    prompt = build_solve_prompt("What is entropy?")
    assert "subject area" not in prompt


def test_prompt_manager_substitutes_variables(tmp_path):
    (tmp_path / "greeting.txt").write_text("Hello {{NAME}}!\n", encoding="utf-8")
    manager = PromptManager(tmp_path)
    assert manager.load_prompt("greeting", NAME="World") == "Hello World!"
    assert manager.list_templates() == ["greeting"]


def test_prompt_manager_missing_template(tmp_path):
    with pytest.raises(PromptTemplateError):
        PromptManager(tmp_path).load_prompt("missing")


def test_prompt_manager_does_not_expand_placeholders_in_values(tmp_path):
    (tmp_path / "pair.txt").write_text("{{A}} {{B}}", encoding="utf-8")
    manager = PromptManager(tmp_path)
    assert manager.load_prompt("pair", A="{{B}}", B="x") == "{{B}} x"


def test_user_text_with_placeholder_is_kept_literally():
    request = GenerationRequest(
        topic="Thermodynamics",
        count=2,
        type="short",
        description="Mention {{RESPONSE_SCHEMA}} verbatim",
        syllabus="Laws of {{TOPIC}}",
    )
    prompt = build_generation_prompt(request)
    assert 'Paper description: "Mention {{RESPONSE_SCHEMA}} verbatim"' in prompt
    assert 'Syllabus: "Laws of {{TOPIC}}"' in prompt
    assert prompt.count("{{RESPONSE_SCHEMA}}") == 1
