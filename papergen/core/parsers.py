# parsers.py
"""
Output parsing for question generation responses.

The model is asked for strict JSON but routinely wraps it in markdown,
breaks lines inside strings, leaves trailing commas or forgets to escape
quotes. Recovery is an ordered list of pure stages, each taking the text
and returning an ExtractionAttempt; the first successful attempt wins.
A successful parse means "likely correct", not verified.
"""

import json
import re
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from langchain_core.output_parsers import BaseOutputParser

from papergen.core.exceptions import ExtractionError, SchemaError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionAttempt:
    """Outcome of one recovery stage: a parsed object or the reason it failed."""
    stage: str
    value: Optional[Dict[str, Any]] = None
    json_text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


Stage = Callable[[str], ExtractionAttempt]


# ============================================================================
# Text helpers
# ============================================================================

FENCE_PATTERN = re.compile(r'```(?:json|javascript|js)?\s*([\s\S]*?)```', re.IGNORECASE)


def _collapse_string_newlines(text: str) -> str:
    """Replace line breaks that sit inside quoted strings with a single space."""
    out: List[str] = []
    in_string = False
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if in_string and ch == '\\' and i + 1 < n:
            out.append(text[i:i + 2])
            i += 2
            continue
        if ch == '"':
            in_string = not in_string
        elif in_string and ch in '\r\n':
            while i + 1 < n and text[i + 1] in '\r\n':
                i += 1
            ch = ' '
        out.append(ch)
        i += 1
    return ''.join(out)


def clean_response(text: str) -> str:
    """
    Prepare raw model output for parsing.

    Takes the interior of a fenced code block when there is one. Otherwise
    strips markdown emphasis, joins broken string lines, collapses
    whitespace and trims everything outside the outermost braces.
    """
    text = text.strip()
    if text.startswith('\ufeff'):
        text = text[1:]

    match = FENCE_PATTERN.search(text)
    if match:
        logger.debug("Extracted from markdown")
        return match.group(1).strip()

    cleaned = text.replace('**', '')
    cleaned = _collapse_string_newlines(cleaned)
    cleaned = re.sub(r'\s+', ' ', cleaned)

    start = cleaned.find('{')
    end = cleaned.rfind('}')
    if start == -1 or end < start:
        return ''
    return cleaned[start:end + 1]


# ============================================================================
# Repairs
# ============================================================================

def escape_stray_backslashes(text: str) -> str:
    """Double every backslash that does not start a valid JSON escape."""
    return re.sub(
        r'\\(["\\/bfnrtu])|\\',
        lambda m: m.group(0) if m.group(1) else '\\\\',
        text,
    )


def escape_inner_quotes(text: str) -> str:
    """
    Escape quotes that appear inside string values.

    A quote inside a string only closes it when the next non-blank
    character is a JSON delimiter (, : } ]) or the end of input.
    """
    out: List[str] = []
    in_string = False
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if not in_string:
            out.append(ch)
            if ch == '"':
                in_string = True
        elif ch == '\\' and i + 1 < n:
            out.append(text[i:i + 2])
            i += 2
            continue
        elif ch == '"':
            j = i + 1
            while j < n and text[j] in ' \t\r\n':
                j += 1
            if j >= n or text[j] in ',:}]':
                out.append(ch)
                in_string = False
            else:
                out.append('\\"')
        else:
            out.append(ch)
        i += 1
    return ''.join(out)


def strip_trailing_commas(text: str) -> str:
    return re.sub(r',(\s*[}\]])', r'\1', text)


def strip_control_characters(text: str) -> str:
    # Newlines and tabs are kept; the next repair handles them
    return re.sub(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]', '', text)


REPAIRS: Sequence[Callable[[str], str]] = (
    escape_stray_backslashes,
    escape_inner_quotes,
    strip_trailing_commas,
    strip_control_characters,
    _collapse_string_newlines,
)


def repair_json(text: str) -> str:
    """Apply every textual repair in order."""
    for repair in REPAIRS:
        text = repair(text)
    return text


# ============================================================================
# Stages
# ============================================================================

def _parse_object(stage: str, text: str) -> ExtractionAttempt:
    if not text:
        return ExtractionAttempt(stage, error="empty input")
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        return ExtractionAttempt(stage, error=str(e))
    if not isinstance(value, dict):
        return ExtractionAttempt(stage, error=f"expected a JSON object, got {type(value).__name__}")
    return ExtractionAttempt(stage, value=value, json_text=text)


def parse_direct(text: str) -> ExtractionAttempt:
    return _parse_object("direct", text)


def parse_repaired(text: str) -> ExtractionAttempt:
    return _parse_object("repaired", repair_json(text))


QUESTIONS_FRAGMENT_PATTERNS = (
    re.compile(r'"questions"\s*:\s*\[([\s\S]*?)\](?=\s*\})'),
    re.compile(r'"questions"\s*:\s*\[([\s\S]*)\]\s*\}'),
)


def parse_questions_fragment(text: str) -> ExtractionAttempt:
    """Find a "questions": [...] fragment and wrap it in a minimal object."""
    for pattern in QUESTIONS_FRAGMENT_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        wrapped = '{"questions":[' + match.group(1) + ']}'
        for candidate in (wrapped, repair_json(wrapped)):
            attempt = _parse_object("questions_fragment", candidate)
            if attempt.ok:
                return attempt
    return ExtractionAttempt("questions_fragment", error="no questions fragment found")


def parse_object_array(text: str) -> ExtractionAttempt:
    """Find any array of objects and wrap it as {"questions": <array>}."""
    match = re.search(r'\[\s*\{[\s\S]*\}\s*\]', text)
    if not match:
        return ExtractionAttempt("object_array", error="no array of objects found")
    for candidate in (match.group(0), repair_json(match.group(0))):
        try:
            array = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(array, list):
            payload = {"questions": array}
            return ExtractionAttempt("object_array", value=payload, json_text=json.dumps(payload))
    return ExtractionAttempt("object_array", error="array of objects is not valid JSON")


STAGES: Sequence[Stage] = (
    parse_direct,
    parse_repaired,
    parse_questions_fragment,
    parse_object_array,
)


def run_stages(text: str, stages: Sequence[Stage] = STAGES) -> ExtractionAttempt:
    """
    Run the recovery cascade over a model response.

    Each stage sees the cleaned text first and then the raw text, so
    fragments lost by brace trimming (e.g. a bare top-level array) can
    still be found.

    Raises:
        ExtractionError: if every stage fails
    """
    cleaned = clean_response(text)
    candidates = [cleaned] if cleaned == text else [cleaned, text]

    for stage in stages:
        for candidate in candidates:
            attempt = stage(candidate)
            if attempt.ok:
                if attempt.stage != "direct":
                    logger.info(f"Recovered JSON via '{attempt.stage}' stage")
                return attempt
            logger.debug(f"Stage '{attempt.stage}' failed: {attempt.error}")

    logger.error(f"All parsing attempts failed. Response text: {text[:200]}...")
    raise ExtractionError("could not recover JSON from model response", raw_text=text)


def extract_json(text: str) -> str:
    """Return a JSON-parseable string recovered from the model response."""
    return run_stages(text).json_text


def parse_questions_payload(text: str) -> Dict[str, Any]:
    """Return the JSON object recovered from the model response."""
    return run_stages(text).value


# ============================================================================
# LangChain parser
# ============================================================================

class QuestionOutputParser(BaseOutputParser):
    """
    Parser for question generation responses.

    Features:
    - Recovers JSON through the staged repair cascade
    - Unwraps nested wrappers like {"paper": {"questions": [...]}}
    - Validates that a questions array is present
    """

    def parse(self, text: str) -> List[Dict[str, Any]]:
        """Parse LLM output into a list of raw question records."""
        data = parse_questions_payload(text)
        data = self._normalize_structure(data)

        questions = data.get("questions")
        if not isinstance(questions, list):
            logger.error(f"Missing 'questions'. Available keys: {list(data.keys())}")
            raise SchemaError("Invalid response format - missing questions array")

        logger.debug(f"✅ Parsed {len(questions)} questions")
        return questions

    def _normalize_structure(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Normalize structure by unwrapping nested keys."""
        if "questions" not in data and "Questions" not in data:
            for value in data.values():
                if isinstance(value, dict) and ("questions" in value or "Questions" in value):
                    data = value
                    break

        if "Questions" in data and "questions" not in data:
            data = {**data, "questions": data["Questions"]}

        return data

    def get_format_instructions(self) -> str:
        """Return format instructions for the LLM."""
        return (
            'Return a JSON object of the form {"questions": [...]} and nothing else. '
            "Do not use line breaks inside string values."
        )

    @property
    def _type(self) -> str:
        return "question_json"


def parse_questions(text: str) -> List[Dict[str, Any]]:
    """Parse raw question records from LLM output."""
    return QuestionOutputParser().parse(text)
