from typing import ClassVar

from resumi.analysis.client_base import BaseInferenceClient
from resumi.analysis.example_client_adapter import ExampleClientAdapter
from resumi.analysis.openai_client_adapter import OpenAIClientAdapter
from resumi.analysis.reviewer import ResumeReviewer
from resumi.config.settings import Settings


class InferenceClientFactory:
    """Creates the inference client for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "huggingface": "https://router.huggingface.co/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    # local servers accept any key
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseInferenceClient:
        provider = settings.inference_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        api_key = settings.inference_api_key
        if not api_key and provider in cls.KEYLESS_PROVIDERS:
            api_key = provider
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.inference_timeout_seconds,
            base_url=base_url,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.inference_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "inference_base_url is required for "
                    "inference_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown inference provider '{provider}'. Choose from: {supported}"
        )


def build_reviewer(settings: Settings) -> ResumeReviewer:
    """Build a ResumeReviewer wired to the configured provider and model."""
    return ResumeReviewer(
        client=InferenceClientFactory.create(settings),
        model=settings.inference_model_name,
        max_tokens=settings.inference_max_tokens,
        temperature=settings.inference_temperature,
    )
