from resumi.exceptions import ResumiError


class AnalysisError(ResumiError):
    """Base exception for resume analysis errors."""


class InferenceUnavailableError(AnalysisError):
    """Raised when the inference provider cannot be reached or refuses the call."""

    user_message = "AI service is temporarily unavailable. Please try again later."


class PersistenceError(AnalysisError):
    """Raised when an analysis cannot be stored or read back."""

    user_message = "Failed to save analysis. Please try again."


class DuplicateUniqueIdError(PersistenceError):
    """Raised when a generated identifier already exists in storage."""


class AnalysisNotFoundError(AnalysisError):
    """Raised when no analysis exists for a valid identifier."""

    user_message = "Analysis not found"


class AnalysisFailedError(AnalysisError):
    """Generic failure surfaced to callers. The original error is chained."""

    user_message = "Failed to analyze resume. Please try again."
