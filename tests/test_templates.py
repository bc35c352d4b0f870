from papergen.core.subjects import DEFAULT_PROFILE, get_subject_profile
from papergen.core.templates import (
    FALLBACK_TEXT,
    generate_fallback_question,
    select_options,
    select_template,
)


def test_physics_mcq_uses_keyword_option_set():
    question = generate_fallback_question("Mechanics", "mcq", "easy", subject="Physics", index=0)
    assert question.text == "What is the SI unit of force?"
    assert question.options == ["Newton", "Joule", "Watt", "Pascal"]
    # synthesized mcq answers are always the last option
    assert question.correctAnswer == "Pascal"
    assert question.marks == 2
    assert question.topic == "Mechanics"


def test_index_wraps_around_bank():
    first = generate_fallback_question("T", "mcq", "easy", subject="Physics", index=0)
    wrapped = generate_fallback_question("T", "mcq", "easy", subject="Physics", index=4)
    assert first.text == wrapped.text


def test_option_keywords_are_case_sensitive():
    question = generate_fallback_question("Acids", "mcq", "easy", subject="Chemistry", index=3)
    assert question.text == "What is the pH of a neutral solution at 25°C?"
    assert question.options == ["0", "7", "14", "1"]
    assert select_options("Describe the phase change of water", "Chemistry") == [
        "First chemistry concept", "Second chemistry concept", "Third chemistry concept", "Correct chemistry answer"
    ]


def test_profile_without_options_uses_generic_options():
    question = generate_fallback_question("Revolutions", "mcq", "easy", subject="History", index=1)
    assert question.options == list(DEFAULT_PROFILE.default_options[1])
    assert question.correctAnswer == question.options[-1]


def test_missing_subject_bank_falls_back_to_generic_bank():
    text = select_template("hots", "hard", "Physics", index=1)
    assert text == DEFAULT_PROFILE.templates_for("hots", "hard")[1]


def test_unknown_subject_uses_default_profile():
    assert get_subject_profile("Economics") is DEFAULT_PROFILE
    assert get_subject_profile(None) is DEFAULT_PROFILE
    assert select_template("short", "easy", "Economics") == "Explain this principle in your own words."


def test_subject_lookup_is_case_insensitive_substring():
    assert get_subject_profile("Applied MATHEMATICS").key == "mathematics"
    assert get_subject_profile("Computer Programming").key == "computer_science"


def test_unknown_type_uses_fixed_text():
    assert select_template("oral", "easy", "Physics") == FALLBACK_TEXT


def test_non_mcq_has_no_options():
    question = generate_fallback_question("Cells", "long", "hard", subject="Biology")
    assert question.options is None
    assert question.correctAnswer is None
    assert question.marks == 16


def test_explicit_marks_are_used():
    question = generate_fallback_question("Heat", "hots", "hard", marks=10, subject="Physics")
    assert question.marks == 10
    assert question.type == "hots"
    assert question.difficulty == "hard"
