"""Offline inference client.

Returns a fixed, well-formed review without any network call. Useful for
local development and as a template for new provider adapters: implement
BaseInferenceClient and register the provider in InferenceClientFactory.
"""

import json
from typing import ClassVar

from resumi.analysis.client_base import BaseInferenceClient


class ExampleClientAdapter(BaseInferenceClient):
    """Adapter that always answers with the same review JSON."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "overallScore": 7,
        "summary": "Solid resume with clear structure. Quantified results would strengthen it.",
        "strengths": ["Clear layout", "Relevant experience", "Focused skills section"],
        "weaknesses": ["Few measurable results", "Generic summary"],
        "improvements": ["Quantify achievements", "Tailor the summary to the role"],
        "categories": {
            "formatting": 8,
            "content": 7,
            "skills": 7,
            "experience": 7,
            "achievements": 6,
        },
        "keywordSuggestions": ["Leadership", "Stakeholder management", "CI/CD"],
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, user_prompt
        return json.dumps(self.DEFAULT_RESPONSE)
