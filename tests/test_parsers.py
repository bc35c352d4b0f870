import json

import pytest

from papergen.core.exceptions import ExtractionError, SchemaError
from papergen.core.parsers import (
    QuestionOutputParser,
    clean_response,
    escape_inner_quotes,
    extract_json,
    parse_questions,
    parse_questions_fragment,
    parse_questions_payload,
    repair_json,
    run_stages,
    strip_trailing_commas,
)


class TestCleanResponse:
    def test_takes_fenced_block_interior(self):
        text = 'Here you go:\n```json\n{"questions": []}\n```\nGood luck!'
        assert clean_response(text) == '{"questions": []}'

    def test_takes_bare_fence(self):
        assert clean_response('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_strips_emphasis_and_trims_to_braces(self):
        text = '**Answer:** {"questions": [] } thanks'
        assert clean_response(text) == '{"questions": [] }'

    def test_collapses_newlines_inside_strings(self):
        text = '{"text": "Line one\nline two"}'
        assert clean_response(text) == '{"text": "Line one line two"}'

    def test_no_braces_gives_empty_string(self):
        assert clean_response("I cannot help with that.") == ""

    def test_strips_byte_order_mark(self):
        assert clean_response('\ufeff{"a": 1}') == '{"a": 1}'


class TestRepairs:
    def test_strip_trailing_commas(self):
        assert strip_trailing_commas('{"a": [1, 2,], }') == '{"a": [1, 2] }'

    def test_escape_inner_quotes(self):
        fixed = escape_inner_quotes('{"text": "What is "heat" in physics?"}')
        assert json.loads(fixed) == {"text": 'What is "heat" in physics?'}

    def test_escape_inner_quotes_leaves_valid_json_alone(self):
        text = '{"a": "b", "c": ["d", "e"]}'
        assert escape_inner_quotes(text) == text

    def test_repair_json_fixes_stray_backslash(self):
        fixed = repair_json(r'{"text": "Evaluate \int x dx"}')
        assert json.loads(fixed) == {"text": r"Evaluate \int x dx"}


class TestStages:
    def test_direct_parse(self):
        attempt = run_stages('{"questions": [{"text": "What is work?"}]}')
        assert attempt.stage == "direct"
        assert attempt.value == {"questions": [{"text": "What is work?"}]}

    def test_repaired_parse(self):
        attempt = run_stages('{"questions": [{"text": "Define "entropy".", "type": "short",},]}')
        assert attempt.stage == "repaired"
        assert attempt.value["questions"][0]["text"] == 'Define "entropy".'

    def test_questions_fragment(self):
        attempt = parse_questions_fragment('garbage "questions": [{"text": "Q1"}, {"text": "Q2"}] }')
        assert attempt.ok
        assert attempt.value == {"questions": [{"text": "Q1"}, {"text": "Q2"}]}

    def test_bare_array_of_objects(self):
        attempt = run_stages('Questions:\n[{"text": "Q1"}, {"text": "Q2"}]')
        assert attempt.stage == "object_array"
        assert attempt.value == {"questions": [{"text": "Q1"}, {"text": "Q2"}]}

    def test_all_stages_fail(self):
        with pytest.raises(ExtractionError) as exc_info:
            run_stages("I cannot help with that.")
        assert str(exc_info.value) == "could not recover JSON from model response"
        assert exc_info.value.raw_text == "I cannot help with that."

    def test_extract_json_returns_parseable_text(self):
        text = "```json\n{\"questions\": [{\"text\": \"Broken\nline\"}]}\n```"
        recovered = extract_json(text)
        assert json.loads(recovered) == {"questions": [{"text": "Broken line"}]}

    def test_parse_questions_payload(self):
        assert parse_questions_payload('**{"questions": []}**') == {"questions": []}


class TestQuestionOutputParser:
    def test_returns_question_list(self):
        questions = parse_questions('{"questions": [{"text": "Q1"}]}')
        assert questions == [{"text": "Q1"}]

    def test_unwraps_nested_object(self):
        questions = parse_questions('{"paper": {"questions": [{"text": "Q1"}]}}')
        assert questions == [{"text": "Q1"}]

    def test_accepts_capitalized_key(self):
        assert parse_questions('{"Questions": [{"text": "Q1"}]}') == [{"text": "Q1"}]

    def test_missing_questions_array(self):
        with pytest.raises(SchemaError):
            parse_questions('{"items": [{"text": "Q1"}]}')

    def test_questions_not_a_list(self):
        with pytest.raises(SchemaError):
            parse_questions('{"questions": "none"}')

    def test_extraction_failure_propagates(self):
        with pytest.raises(ExtractionError):
            QuestionOutputParser().parse("no json here")

    def test_parser_type(self):
        assert QuestionOutputParser()._type == "question_json"
