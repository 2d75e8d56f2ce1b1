from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

CATEGORY_KEYS = ("formatting", "content", "skills", "experience", "achievements")


@dataclass(frozen=True)
class CategoryScores:
    """Per-category scores, each in [0, 10]."""

    formatting: int = 7
    content: int = 7
    skills: int = 7
    experience: int = 7
    achievements: int = 7

    def to_dict(self) -> dict[str, int]:
        return {key: getattr(self, key) for key in CATEGORY_KEYS}


@dataclass(frozen=True)
class NormalizedAnalysis:
    """Validated resume feedback. Always fully populated and within bounds."""

    overall_score: int
    summary: str
    strengths: list[str]
    weaknesses: list[str]
    improvements: list[str]
    keyword_suggestions: list[str]
    categories: CategoryScores

    def to_dict(self) -> dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "summary": self.summary,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "improvements": list(self.improvements),
            "categories": self.categories.to_dict(),
            "keywordSuggestions": list(self.keyword_suggestions),
        }


@dataclass(frozen=True)
class AnalysisMetadata:
    """Opaque details about the source file, passed through untouched."""

    filename: str | None = None
    file_size: int | None = None
    processing_method: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.filename,
            "fileSize": self.file_size,
            "processingMethod": self.processing_method,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "AnalysisMetadata":
        data = data or {}
        return cls(
            filename=data.get("filename"),
            file_size=data.get("fileSize"),
            processing_method=data.get("processingMethod"),
        )


@dataclass(frozen=True)
class AnalysisRequest:
    resume_text: str
    metadata: AnalysisMetadata = field(default_factory=AnalysisMetadata)


@dataclass(frozen=True)
class AnalysisRecord:
    """A persisted analysis. Created once, never updated."""

    unique_id: str
    resume_text: str
    analysis: NormalizedAnalysis
    metadata: AnalysisMetadata
    created_at: datetime | None = None


@dataclass(frozen=True)
class SharedAnalysis:
    """Read-only view of a stored analysis, without the resume text."""

    unique_id: str
    analysis: NormalizedAnalysis
    metadata: AnalysisMetadata
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "analysisData": self.analysis.to_dict(),
            "metadata": self.metadata.to_dict(),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class AnalysisOutcome:
    record: AnalysisRecord
    shareable_link: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "message": "Resume analysis completed",
            "data": self.record.analysis.to_dict(),
            "shareableLink": self.shareable_link,
            "uniqueId": self.record.unique_id,
        }
