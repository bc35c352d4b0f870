import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from papergen.core.config import settings
from papergen.core.exceptions import GenerationError, LLMError
from papergen.core.llm import CompletionClient, create_completion_client
from papergen.core.logging_config import setup_logging
from papergen.schemas import (
    ErrorResponse,
    GenerateQuestionsResponse,
    GeneratedQuestions,
    GenerationRequest,
    PaperSolutions,
    Solution,
    SolvePaperRequest,
    SolvePaperResponse,
    SolveRequest,
    SolveResponse,
)
from papergen.services.paper_sections import build_paper_sections
from papergen.services.question_service import QuestionGenerationService

logger = logging.getLogger(__name__)


# Global state
class AppState:
    client: CompletionClient = None
    question_service: QuestionGenerationService = None

state = AppState()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.ENVIRONMENT, settings.LOG_LEVEL, settings.LOG_DIR)
    logger.info(f"🚀 Starting {settings.APP_NAME} v{settings.VERSION}...")

    try:
        state.client = create_completion_client(settings)
        state.question_service = QuestionGenerationService(client=state.client, settings=settings)
    except LLMError as e:
        # Keep serving /health; generation endpoints report 503
        logger.error(f"Completion client not available: {e}")

    yield
    # Shutdown
    logger.info(f"🛑 Shutting down {settings.APP_NAME}...")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan
)


def get_question_service() -> QuestionGenerationService:
    if not state.question_service:
        raise HTTPException(status_code=503, detail="Question service not initialized")
    return state.question_service


@app.exception_handler(GenerationError)
async def generation_error_handler(request: Request, exc: GenerationError):
    logger.error(f"Generation failed at {exc.stage} stage: {exc}", extra={"stage": exc.stage})
    body = ErrorResponse(stage=exc.stage, message=str(exc))
    return JSONResponse(status_code=502, content=body.model_dump(exclude_none=True))


@app.get("/health")
async def health_check():
    return {"status": "ok", "version": settings.VERSION}


@app.post(f"{settings.API_V1_STR}/questions/generate", response_model=GenerateQuestionsResponse)
async def generate_questions(
    request: GenerationRequest,
    service: QuestionGenerationService = Depends(get_question_service),
):
    """
    Generate exam questions.

    When questionDistribution is given, the response matches it exactly
    (model output is trimmed or topped up with template questions).
    """
    questions = await service.generate_from_request(request)
    return GenerateQuestionsResponse(
        data=GeneratedQuestions(
            questions=[q.to_dict() for q in questions],
            sections=build_paper_sections(questions),
        )
    )


@app.post(f"{settings.API_V1_STR}/questions/solve", response_model=SolveResponse)
async def solve_question(
    request: SolveRequest,
    service: QuestionGenerationService = Depends(get_question_service),
):
    """Return a step-by-step solution for a single question."""
    solution = await service.solve(request.question, request.subject, request.model)
    return SolveResponse(data=Solution(question=request.question, solution=solution))


@app.post(f"{settings.API_V1_STR}/questions/solve-paper", response_model=SolvePaperResponse)
async def solve_paper(
    request: SolvePaperRequest,
    service: QuestionGenerationService = Depends(get_question_service),
):
    """Solve every question of a paper; failed questions come back as "Error: ..." entries."""
    solutions = await service.solve_paper(request.questions, request.subject, request.model)
    return SolvePaperResponse(data=PaperSolutions(solutions=solutions))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("papergen.main:app", host="0.0.0.0", port=8000, reload=settings.ENVIRONMENT == "development")
