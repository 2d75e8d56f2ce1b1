from resumi.analysis.exceptions import AnalysisFailedError, AnalysisNotFoundError
from resumi.analysis.factory import build_reviewer
from resumi.analysis.identifiers import require_valid_unique_id
from resumi.analysis.models import AnalysisOutcome, AnalysisRequest, SharedAnalysis
from resumi.analysis.pipeline import AnalysisContext, AnalysisStep
from resumi.analysis.steps import (
    NormalizeStep,
    PersistStep,
    ReviewStep,
    ShareLinkStep,
    TruncateStep,
    ValidateInputStep,
)
from resumi.config.settings import Settings
from resumi.database.repositories.analysis_repository import AnalysisRepository
from resumi.exceptions import InvalidInputError
from resumi.logging.logger import Log


class AnalysisService:
    """Runs the analysis pipeline and serves stored analyses.

    Pipeline: validate -> truncate -> review -> normalize -> persist -> link.
    """

    def __init__(self, steps: list[AnalysisStep], repository: AnalysisRepository) -> None:
        self._steps = steps
        self._repository = repository

    def analyze(self, request: AnalysisRequest) -> AnalysisOutcome:
        """Review a resume and store the result.

        Raises:
            InvalidInputError: if the resume text is too short.
            AnalysisFailedError: on any later failure; the cause is chained.
        """
        context = AnalysisContext(request=request)
        for step in self._steps:
            try:
                context = step.run(context)
            except InvalidInputError:
                raise
            except Exception as exc:
                Log.error(
                    f"Resume analysis failed in {type(step).__name__}: "
                    f"{type(exc).__name__}: {exc}"
                )
                raise AnalysisFailedError(str(exc)) from exc

        if context.record is None:
            raise AnalysisFailedError("Pipeline finished without a stored record")
        return AnalysisOutcome(record=context.record, shareable_link=context.shareable_link)

    def get_shared(self, unique_id: str) -> SharedAnalysis:
        """Fetch a stored analysis for its shareable link.

        Raises:
            InvalidInputError: if ``unique_id`` is malformed. Storage is not touched.
            AnalysisNotFoundError: if nothing is stored under ``unique_id``.
            PersistenceError: on a database failure.
        """
        unique_id = require_valid_unique_id(unique_id)
        shared = self._repository.find_by_unique_id(unique_id)
        if shared is None:
            raise AnalysisNotFoundError(f"Analysis {unique_id} not found")
        return shared


def build_analysis_service(
    settings: Settings,
    repository: AnalysisRepository | None = None,
) -> AnalysisService:
    """Build an AnalysisService with all steps wired from settings."""
    repository = repository if repository is not None else AnalysisRepository()
    steps: list[AnalysisStep] = [
        ValidateInputStep(settings.min_resume_text_length),
        TruncateStep(settings.max_analyzed_length),
        ReviewStep(build_reviewer(settings)),
        NormalizeStep(),
        PersistStep(
            repository,
            store_full_text=not settings.is_production,
            preview_length=settings.stored_text_preview_length,
            max_attempts=settings.max_id_attempts,
        ),
        ShareLinkStep(settings.frontend_url),
    ]
    return AnalysisService(steps, repository)
