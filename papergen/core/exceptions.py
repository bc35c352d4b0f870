"""
Custom exceptions for PaperGen.

Provides specific exception types for each stage of the question
generation pipeline so callers can tell which stage failed.
"""


class PaperGenException(Exception):
    """Base exception for all PaperGen errors."""
    pass


class LLMError(PaperGenException):
    """Raised when the completion service call fails, times out or returns nothing."""
    pass


class ExtractionError(PaperGenException):
    """Raised when no valid JSON can be recovered from a model response."""

    def __init__(self, message: str = "could not recover JSON from model response", raw_text: str = None):
        self.raw_text = raw_text
        super().__init__(message)


class SchemaError(PaperGenException):
    """Raised when recovered JSON lacks a 'questions' array."""
    pass


class PromptTemplateError(PaperGenException):
    """Raised when prompt template loading or formatting fails."""
    pass


class GenerationError(PaperGenException):
    """
    Raised by the question service when a request fails fatally.

    Carries the pipeline stage that failed ("llm", "extraction", "schema")
    so the HTTP layer can report it.
    """

    def __init__(self, message: str, stage: str):
        self.stage = stage
        super().__init__(message)


class DistributionMismatchWarning(UserWarning):
    """Emitted when reconciled output still differs from the requested distribution."""
    pass
