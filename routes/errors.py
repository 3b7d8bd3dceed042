# routes/errors.py


class QuizServiceError(Exception):
    """Base class for errors raised by the quiz pipeline."""


class InvalidInput(QuizServiceError):
    """Missing or malformed request fields."""


class NotFound(QuizServiceError):
    """Unknown quiz identifier."""


class UpstreamFailure(QuizServiceError):
    """The text-generation provider was unreachable or returned nothing usable."""


class ParseFailure(QuizServiceError):
    """A block of free-form provider text could not be turned into a question."""


class PdfExtractionError(QuizServiceError):
    """The PDF extraction service failed to return text."""
