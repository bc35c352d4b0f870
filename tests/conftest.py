import json
import sys
from pathlib import Path
from typing import List, Union

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from papergen.core.config import Settings
from papergen.core.llm import CompletionClient


class FakeCompletionClient(CompletionClient):
    """
    Completion client returning canned responses in order.

    A response that is an Exception instance is raised instead of returned.
    The last response is repeated once the list is exhausted.
    """

    provider = "fake"

    def __init__(self, responses: List[Union[str, Exception]], timeout: float = 5.0):
        super().__init__(timeout=timeout)
        self.responses = list(responses)
        self.calls = []

    async def _create(self, messages, model, temperature, max_tokens, top_p):
        self.calls.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "top_p": top_p,
        })
        index = min(len(self.calls) - 1, len(self.responses) - 1)
        response = self.responses[index]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def test_settings():
    """Settings isolated from any local .env file"""
    return Settings(_env_file=None, LLM_PROVIDER="groq", GROQ_API_KEY="test-key")


@pytest.fixture
def fake_client_factory():
    """Build a FakeCompletionClient from canned responses"""
    return FakeCompletionClient


@pytest.fixture
def thermodynamics_response():
    """Physics model output: 5 easy mcq (2 marks), 2 short, no hots, wrapped in a markdown fence"""
    questions = [
        {
            "text": f"Thermodynamics MCQ number {i}?",
            "type": "mcq",
            "difficulty": "easy",
            "marks": 2,
            "options": ["A", "B", "C", "D"],
            "correctAnswer": "B",
        }
        for i in range(1, 6)
    ]
    questions += [
        {"text": "State the first law of thermodynamics.", "type": "short", "difficulty": "medium", "marks": 4},
        {"text": "Explain why heat engines cannot be 100% efficient.", "type": "short", "difficulty": "medium", "marks": 4},
    ]
    return "Here are your questions:\n```json\n" + json.dumps({"questions": questions}, indent=2) + "\n```"


@pytest.fixture
def thermodynamics_distribution():
    return [
        {"type": "mcq", "difficulty": "easy", "count": 3, "marks": 2},
        {"type": "short", "difficulty": "medium", "count": 2, "marks": 4},
        {"type": "hots", "difficulty": "hard", "count": 2, "marks": 10},
    ]
