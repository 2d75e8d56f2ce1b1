from abc import ABC, abstractmethod
from dataclasses import dataclass

from resumi.analysis.models import AnalysisRecord, AnalysisRequest, NormalizedAnalysis


@dataclass(slots=True)
class AnalysisContext:
    request: AnalysisRequest
    text_to_analyze: str = ""
    raw_completion: str = ""
    analysis: NormalizedAnalysis | None = None
    record: AnalysisRecord | None = None
    shareable_link: str = ""


class AnalysisStep(ABC):
    @abstractmethod
    def run(self, context: AnalysisContext) -> AnalysisContext:
        raise NotImplementedError
