from collections.abc import Callable

from resumi.analysis.exceptions import DuplicateUniqueIdError
from resumi.analysis.identifiers import generate_unique_id
from resumi.analysis.models import AnalysisRecord
from resumi.analysis.normalizer import normalize_analysis
from resumi.analysis.pipeline import AnalysisContext, AnalysisStep
from resumi.analysis.reviewer import ResumeReviewer
from resumi.database.repositories.analysis_repository import AnalysisRepository
from resumi.exceptions import InvalidInputError
from resumi.logging.logger import Log


class ValidateInputStep(AnalysisStep):
    def __init__(self, min_length: int) -> None:
        self._min_length = min_length

    def run(self, context: AnalysisContext) -> AnalysisContext:
        text = context.request.resume_text
        if not isinstance(text, str) or len(text.strip()) < self._min_length:
            raise InvalidInputError(
                "Resume text is required and must be substantial enough for analysis."
            )
        return context


class TruncateStep(AnalysisStep):
    def __init__(self, max_length: int) -> None:
        self._max_length = max_length

    def run(self, context: AnalysisContext) -> AnalysisContext:
        context.text_to_analyze = context.request.resume_text[: self._max_length]
        Log.info(f"Analyzing resume text ({len(context.text_to_analyze)} characters)...")
        return context


class ReviewStep(AnalysisStep):
    def __init__(self, reviewer: ResumeReviewer) -> None:
        self._reviewer = reviewer

    def run(self, context: AnalysisContext) -> AnalysisContext:
        context.raw_completion = self._reviewer.request_review(context.text_to_analyze)
        return context


class NormalizeStep(AnalysisStep):
    def run(self, context: AnalysisContext) -> AnalysisContext:
        context.analysis = normalize_analysis(context.raw_completion)
        Log.info(f"Normalized analysis: overall score {context.analysis.overall_score}")
        return context


class PersistStep(AnalysisStep):
    """Stores the analysis under a fresh identifier.

    A generated identifier that already exists is replaced by a new one, up
    to ``max_attempts`` times.
    """

    def __init__(
        self,
        repository: AnalysisRepository,
        *,
        store_full_text: bool,
        preview_length: int,
        max_attempts: int = 3,
        id_generator: Callable[[], str] = generate_unique_id,
    ) -> None:
        self._repository = repository
        self._store_full_text = store_full_text
        self._preview_length = preview_length
        self._max_attempts = max(1, max_attempts)
        self._id_generator = id_generator

    def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.analysis is None:
            raise ValueError("AnalysisContext.analysis must be set before persist")

        stored_text = self._stored_text(context.text_to_analyze)
        for attempt in range(1, self._max_attempts + 1):
            record = AnalysisRecord(
                unique_id=self._id_generator(),
                resume_text=stored_text,
                analysis=context.analysis,
                metadata=context.request.metadata,
            )
            try:
                context.record = self._repository.create(record)
                break
            except DuplicateUniqueIdError:
                if attempt == self._max_attempts:
                    raise
                Log.warning(
                    f"Analysis ID {record.unique_id} already taken, "
                    f"regenerating (attempt {attempt})"
                )

        Log.info(f"Analysis saved with ID: {context.record.unique_id}")
        return context

    def _stored_text(self, text: str) -> str:
        if self._store_full_text:
            return text
        return text[: self._preview_length] + "..."


class ShareLinkStep(AnalysisStep):
    def __init__(self, frontend_url: str) -> None:
        self._frontend_url = frontend_url

    def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.record is None:
            raise ValueError("AnalysisContext.record must be set before building a link")
        context.shareable_link = share_link(self._frontend_url, context.record.unique_id)
        return context


def share_link(frontend_url: str, unique_id: str) -> str:
    return f"{frontend_url.rstrip('/')}/analysis/{unique_id}"
