"""Turns an untrusted model completion into a bounded NormalizedAnalysis.

``normalize_analysis`` never raises. A completion that cannot be parsed as a
JSON object yields ``DEFAULT_ANALYSIS``; a parsed object has every field
coerced on its own, so one bad field never discards the others.
"""

import json
import math
import re
from dataclasses import replace
from typing import Any

from resumi.analysis.models import CATEGORY_KEYS, CategoryScores, NormalizedAnalysis
from resumi.logging.logger import Log

MIN_SCORE = 0
MAX_SCORE = 10
DEFAULT_SCORE = 7
MAX_SUMMARY_LENGTH = 500
MAX_STRENGTHS = 5
MAX_WEAKNESSES = 5
MAX_IMPROVEMENTS = 5
MAX_KEYWORD_SUGGESTIONS = 10
DEFAULT_SUMMARY = "Resume analysis completed."

_CODE_FENCE = re.compile(r"```[\w+-]*")
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

DEFAULT_ANALYSIS = NormalizedAnalysis(
    overall_score=7,
    summary=(
        "Resume shows professional experience but detailed AI analysis "
        "format unavailable."
    ),
    strengths=["Professional content", "Relevant experience", "Technical skills listed"],
    weaknesses=[
        "Could improve quantifiable achievements",
        "Limited project details",
        "Missing keywords",
    ],
    improvements=[
        "Add metrics to achievements",
        "Include project examples",
        "Expand skill descriptions",
    ],
    keyword_suggestions=["Industry terms", "Technical skills", "Soft skills"],
    categories=CategoryScores(achievements=6),
)


def normalize_analysis(raw: str) -> NormalizedAnalysis:
    """Build a NormalizedAnalysis from a raw completion. Total: never raises."""
    data = parse_completion(raw)
    if data is None:
        Log.warning("AI response could not be parsed, using default analysis")
        return default_analysis()
    return normalize_payload(data)


def default_analysis() -> NormalizedAnalysis:
    """A copy of DEFAULT_ANALYSIS whose lists the caller owns."""
    return replace(
        DEFAULT_ANALYSIS,
        strengths=list(DEFAULT_ANALYSIS.strengths),
        weaknesses=list(DEFAULT_ANALYSIS.weaknesses),
        improvements=list(DEFAULT_ANALYSIS.improvements),
        keyword_suggestions=list(DEFAULT_ANALYSIS.keyword_suggestions),
    )


def normalize_payload(data: dict[str, Any]) -> NormalizedAnalysis:
    """Coerce every field of an already-parsed object independently."""
    return NormalizedAnalysis(
        overall_score=coerce_score(data.get("overallScore")),
        summary=coerce_summary(data.get("summary")),
        strengths=coerce_string_list(data.get("strengths"), MAX_STRENGTHS),
        weaknesses=coerce_string_list(data.get("weaknesses"), MAX_WEAKNESSES),
        improvements=coerce_string_list(data.get("improvements"), MAX_IMPROVEMENTS),
        keyword_suggestions=coerce_string_list(
            data.get("keywordSuggestions"), MAX_KEYWORD_SUGGESTIONS
        ),
        categories=coerce_categories(data.get("categories")),
    )


def parse_completion(raw: Any) -> dict[str, Any] | None:
    """Extract the JSON object embedded in a completion, or None."""
    if not isinstance(raw, str):
        return None
    cleaned = raw.strip()
    if "```" in cleaned:
        cleaned = _CODE_FENCE.sub("", cleaned).strip()

    match = _JSON_OBJECT.search(cleaned)
    candidate = match.group(0) if match else cleaned
    try:
        parsed = json.loads(candidate)
    except (ValueError, RecursionError) as exc:
        Log.debug(f"Invalid JSON in AI response: {exc}")
        return None

    if not isinstance(parsed, dict):
        return None
    return parsed


def coerce_number(raw: Any) -> float | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    return value if math.isfinite(value) else None


def coerce_score(raw: Any, default: int = DEFAULT_SCORE) -> int:
    """Numeric coercion then clamp to [0, 10]; non-numbers become ``default``."""
    value = coerce_number(raw)
    if value is None:
        return default
    return max(MIN_SCORE, min(MAX_SCORE, round(value)))


def coerce_summary(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        return DEFAULT_SUMMARY
    return raw.strip()[:MAX_SUMMARY_LENGTH].rstrip()


def coerce_string_list(raw: Any, max_items: int) -> list[str]:
    """Keep at most ``max_items`` leading entries, then drop non-strings and blanks."""
    if not isinstance(raw, list):
        return []
    return [
        item.strip()
        for item in raw[:max_items]
        if isinstance(item, str) and item.strip()
    ]


def coerce_categories(raw: Any) -> CategoryScores:
    """Merge over the default map of 7s, then clamp each of the fixed keys."""
    merged: dict[str, Any] = dict.fromkeys(CATEGORY_KEYS, DEFAULT_SCORE)
    if isinstance(raw, dict):
        merged.update({key: raw[key] for key in CATEGORY_KEYS if key in raw})
    return CategoryScores(**{key: coerce_score(merged[key]) for key in CATEGORY_KEYS})
