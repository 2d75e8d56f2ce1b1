from resumi.analysis.models import CategoryScores, NormalizedAnalysis
from resumi.analysis.normalizer import DEFAULT_ANALYSIS, normalize_analysis

__all__ = ["DEFAULT_ANALYSIS", "CategoryScores", "NormalizedAnalysis", "normalize_analysis"]
