import warnings

import pytest

from papergen.core.exceptions import DistributionMismatchWarning
from papergen.core.reconciler import reconcile_distribution, verify_distribution
from papergen.core.subjects import DEFAULT_PROFILE
from papergen.core.templates import generate_fallback_question
from papergen.schemas.question import Question
from papergen.schemas.requests import DistributionItem


def make_question(text, type="mcq", difficulty="easy", marks=2, topic="Thermodynamics"):
    fields = {"text": text, "type": type, "difficulty": difficulty, "marks": marks, "topic": topic}
    if type == "mcq":
        fields["options"] = ["A", "B", "C", "D"]
        fields["correctAnswer"] = "A"
    return Question(**fields)


def counts(questions):
    result = {}
    for q in questions:
        result[(q.type, q.difficulty)] = result.get((q.type, q.difficulty), 0) + 1
    return result


def test_surplus_keeps_first_in_order():
    questions = [make_question(f"Q{i}") for i in range(6)]
    result = reconcile_distribution(questions, [DistributionItem(type="mcq", difficulty="easy", count=4)], "T")
    assert [q.text for q in result] == ["Q0", "Q1", "Q2", "Q3"]


def test_deficit_is_synthesized_with_marks_and_subject():
    distribution = [DistributionItem(type="hots", difficulty="hard", count=2, marks=10)]
    result = reconcile_distribution([], distribution, "Thermodynamics", subject="Physics")

    assert len(result) == 2
    assert {q.marks for q in result} == {10}
    assert {q.subject for q in result} == {"Physics"}
    assert {q.topic for q in result} == {"Thermodynamics"}
    assert len({q.text for q in result}) == 2


def test_kept_questions_get_requested_marks():
    questions = [make_question("Q1", marks=5), make_question("Q2", marks=2)]
    result = reconcile_distribution(questions, [{"type": "mcq", "difficulty": "easy", "count": 2, "marks": 2}], "T")
    assert [q.marks for q in result] == [2, 2]
    assert [q.text for q in result] == ["Q1", "Q2"]


def test_marks_untouched_without_requested_marks():
    questions = [make_question("Q1", marks=5)]
    result = reconcile_distribution(questions, [{"type": "mcq", "difficulty": "easy", "count": 1}], "T")
    assert result[0].marks == 5


def test_unrequested_buckets_are_dropped():
    questions = [
        make_question("Keep me"),
        make_question("Drop me", type="long", difficulty="hard", marks=16),
    ]
    result = reconcile_distribution(questions, [{"type": "mcq", "difficulty": "easy", "count": 1}], "T")
    assert [q.text for q in result] == ["Keep me"]


def test_output_follows_type_order():
    questions = [
        make_question("Case", type="case_study", difficulty="medium", marks=18),
        make_question("Long", type="long", difficulty="easy", marks=8),
        make_question("Short", type="short", difficulty="easy", marks=4),
        make_question("Mcq"),
    ]
    distribution = [
        {"type": "case_study", "difficulty": "medium", "count": 1},
        {"type": "long", "difficulty": "easy", "count": 1},
        {"type": "short", "difficulty": "easy", "count": 1},
        {"type": "mcq", "difficulty": "easy", "count": 1},
    ]
    result = reconcile_distribution(questions, distribution, "T")
    assert [q.type for q in result] == ["mcq", "short", "long", "case_study"]


def test_within_type_input_order_is_kept():
    questions = [
        make_question("Hard 1", difficulty="hard", marks=4),
        make_question("Easy 1"),
        make_question("Hard 2", difficulty="hard", marks=4),
    ]
    distribution = [
        {"type": "mcq", "difficulty": "easy", "count": 2},
        {"type": "mcq", "difficulty": "hard", "count": 2},
    ]
    result = reconcile_distribution(questions, distribution, "T", subject="Physics")
    texts = [q.text for q in result]
    assert texts[:3] == ["Hard 1", "Easy 1", "Hard 2"]
    assert len(texts) == 4
    assert counts(result) == {("mcq", "easy"): 2, ("mcq", "hard"): 2}


def test_synthesized_mcq_are_well_formed():
    result = reconcile_distribution([], [{"type": "mcq", "difficulty": "medium", "count": 5}], "T", subject="Physics")
    assert len(result) == 5
    for q in result:
        assert len(q.options) == 4
        assert q.correctAnswer in q.options


def test_synthesized_text_avoids_kept_text():
    first_template = DEFAULT_PROFILE.templates_for("short", "easy")[0]
    questions = [make_question(first_template, type="short", difficulty="easy", marks=4)]
    result = reconcile_distribution(questions, [{"type": "short", "difficulty": "easy", "count": 2}], "T")
    assert result[0].text == first_template
    assert result[1].text != first_template


def test_exhausted_bank_gets_variant_marker():
    # the generic hots/hard bank has two templates
    result = reconcile_distribution([], [{"type": "hots", "difficulty": "hard", "count": 3}], "T")
    texts = [q.text for q in result]
    assert len(set(texts)) == 3
    assert texts[2].endswith("(Variant 4)")


def test_custom_generator_is_used():
    calls = []

    def generator(topic, question_type, difficulty, marks=None, subject=None, index=0):
        calls.append(index)
        return generate_fallback_question(topic, question_type, difficulty, marks, subject, index)

    reconcile_distribution([], [{"type": "long", "difficulty": "medium", "count": 3}], "T", generator=generator)
    assert calls == [0, 1, 2]


def test_matching_distribution_emits_no_warning():
    questions = [make_question("Q1"), make_question("Q2")]
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = reconcile_distribution(questions, [{"type": "mcq", "difficulty": "easy", "count": 2}], "T")
    assert len(result) == 2


def test_duplicate_buckets_warn_instead_of_raising():
    distribution = [
        {"type": "mcq", "difficulty": "easy", "count": 2},
        {"type": "mcq", "difficulty": "easy", "count": 2},
    ]
    with pytest.warns(DistributionMismatchWarning):
        result = reconcile_distribution([], distribution, "T")
    assert len(result) == 4


def test_verify_distribution_reports_mismatches():
    questions = [make_question("Q1", marks=3)]
    problems = verify_distribution(questions, [
        {"type": "mcq", "difficulty": "easy", "count": 2, "marks": 2},
        {"type": "long", "difficulty": "hard", "count": 1},
    ])
    assert "Expected 2 mcq questions with easy difficulty, but got 1" in problems
    assert "Expected 1 long questions with hard difficulty, but got 0" in problems
    assert any("worth 2 marks" in problem for problem in problems)


def test_verify_distribution_empty_when_matching():
    questions = [make_question("Q1")]
    assert verify_distribution(questions, [{"type": "mcq", "difficulty": "easy", "count": 1, "marks": 2}]) == []
