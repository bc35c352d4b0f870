import logging
from typing import Any, Dict, List, Optional

from papergen.core.config import Settings, settings as default_settings
from papergen.core.exceptions import ExtractionError, GenerationError, LLMError, SchemaError
from papergen.core.llm import CompletionClient
from papergen.core.normalizer import normalize_questions
from papergen.core.parsers import QuestionOutputParser
from papergen.core.prompt_builder import build_generation_prompt, build_solve_prompt
from papergen.core.reconciler import reconcile_distribution
from papergen.schemas.question import Question
from papergen.schemas.requests import GenerationRequest

logger = logging.getLogger(__name__)

# Keys of `additional_params` forwarded to the request
ADDITIONAL_PARAM_KEYS = (
    "questionDistribution",
    "questionTypes",
    "description",
    "syllabus",
    "totalMarks",
    "duration",
    "educationalLevel",
)


class QuestionGenerationService:
    """
    Runs the question generation pipeline:
    prompt -> completion -> JSON recovery -> normalization -> reconciliation.

    One completion call per request, no retries. Fatal failures surface as
    GenerationError tagged with the stage that failed.
    """

    def __init__(self, client: CompletionClient, settings: Optional[Settings] = None):
        self.client = client
        self.settings = settings or default_settings
        self.parser = QuestionOutputParser()

    async def _complete(self, prompt: str, model: Optional[str]) -> str:
        model = model or self.settings.DEFAULT_MODEL
        try:
            return await self.client.complete(
                [{"role": "user", "content": prompt}],
                model=model,
                temperature=self.settings.LLM_TEMPERATURE,
                max_tokens=self.settings.LLM_MAX_TOKENS,
                top_p=self.settings.LLM_TOP_P,
            )
        except LLMError as e:
            raise GenerationError(str(e), stage="llm") from e

    async def generate(
        self,
        topic: str,
        count: int = 5,
        difficulty: str = "medium",
        type: str = "mcq",
        blooms_level: Optional[str] = None,
        subject: Optional[str] = None,
        model: Optional[str] = None,
        additional_params: Optional[Dict[str, Any]] = None,
    ) -> List[Question]:
        """
        Generate questions from loose parameters.

        Args:
            topic: Topic to test
            count: Legacy question count (ignored when a distribution is given)
            difficulty: Legacy difficulty
            type: Legacy question type
            blooms_level: Optional Bloom's taxonomy level
            subject: Subject name
            model: Model name (settings.DEFAULT_MODEL if None)
            additional_params: May carry questionDistribution, questionTypes,
                description, syllabus, totalMarks, duration, educationalLevel

        Returns:
            Canonical questions
        """
        fields: Dict[str, Any] = {
            "topic": topic,
            "count": count,
            "difficulty": difficulty,
            "type": type,
            "bloomsLevel": blooms_level,
            "subject": subject,
            "model": model,
        }
        for key in ADDITIONAL_PARAM_KEYS:
            value = (additional_params or {}).get(key)
            if value is not None:
                fields[key] = value

        request = GenerationRequest(**fields)
        return await self.generate_from_request(request)

    async def generate_from_request(self, request: GenerationRequest) -> List[Question]:
        """Generate questions for a validated request."""
        logger.info(
            f"Generating {request.total_count} questions on '{request.topic}' "
            f"(subject: {request.subject or 'general'})"
        )
        prompt = build_generation_prompt(request)
        response_text = await self._complete(prompt, request.model)

        try:
            records = self.parser.parse(response_text)
        except ExtractionError as e:
            raise GenerationError(str(e), stage="extraction") from e
        except SchemaError as e:
            raise GenerationError(str(e), stage="schema") from e

        questions = normalize_questions(records, request.topic)
        logger.info(f"Model returned {len(questions)} usable questions")

        if not request.questionDistribution:
            return questions

        return reconcile_distribution(
            questions,
            request.questionDistribution,
            topic=request.topic,
            subject=request.subject,
        )

    async def solve(
        self,
        question_text: str,
        subject: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        """Ask the model for a step-by-step solution and return its raw text."""
        prompt = build_solve_prompt(question_text, subject)
        return await self._complete(prompt, model)

    async def solve_paper(
        self,
        questions: List[str],
        subject: Optional[str] = None,
        model: Optional[str] = None,
    ) -> List[str]:
        """
        Solve each question in order.

        A question that fails yields an "Error: <message>" entry in its
        position instead of failing the paper.

        Raises:
            GenerationError: if every question failed
        """
        solutions = []
        for question_text in questions:
            try:
                solutions.append(await self.solve(question_text, subject, model))
            except GenerationError as e:
                logger.error(f"Error solving question \"{question_text[:60]}\": {e}")
                solutions.append(f"Error: {e}")

        if all(solution.startswith("Error:") for solution in solutions):
            raise GenerationError("Failed to solve any questions in the paper", stage="llm")

        return solutions
