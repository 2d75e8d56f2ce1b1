from unittest.mock import patch

import pytest

from resumi.analysis.example_client_adapter import ExampleClientAdapter
from resumi.analysis.factory import InferenceClientFactory, build_reviewer
from resumi.analysis.openai_client_adapter import OpenAIClientAdapter
from resumi.analysis.reviewer import ResumeReviewer
from resumi.config.settings import Settings

_OPENAI = "resumi.analysis.openai_client_adapter.openai.OpenAI"


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]


class TestInferenceClientFactory:
    def test_example_provider_needs_no_network(self) -> None:
        client = InferenceClientFactory.create(_settings(inference_provider="example"))
        assert isinstance(client, ExampleClientAdapter)

    def test_huggingface_uses_router_base_url(self) -> None:
        with patch(_OPENAI) as mock_openai:
            client = InferenceClientFactory.create(
                _settings(inference_provider="huggingface", inference_api_key="hf_x")
            )
        assert isinstance(client, OpenAIClientAdapter)
        kwargs = mock_openai.call_args.kwargs
        assert kwargs["base_url"] == "https://router.huggingface.co/v1"
        assert kwargs["api_key"] == "hf_x"

    def test_openai_uses_sdk_default_url(self) -> None:
        with patch(_OPENAI) as mock_openai:
            InferenceClientFactory.create(_settings(inference_provider="openai"))
        assert mock_openai.call_args.kwargs["base_url"] is None

    def test_base_url_override(self) -> None:
        with patch(_OPENAI) as mock_openai:
            InferenceClientFactory.create(
                _settings(inference_provider="groq", inference_base_url="http://proxy/v1")
            )
        assert mock_openai.call_args.kwargs["base_url"] == "http://proxy/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="inference_base_url is required"):
            InferenceClientFactory.create(_settings(inference_provider="openai_compatible"))

    def test_ollama_gets_placeholder_key(self) -> None:
        with patch(_OPENAI) as mock_openai:
            InferenceClientFactory.create(_settings(inference_provider="ollama"))
        assert mock_openai.call_args.kwargs["api_key"] == "ollama"

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown inference provider"):
            InferenceClientFactory.create(_settings(inference_provider="mystery"))


class TestBuildReviewer:
    def test_builds_reviewer_from_settings(self) -> None:
        reviewer = build_reviewer(_settings(inference_provider="example"))
        assert isinstance(reviewer, ResumeReviewer)
        assert '"overallScore": 7' in reviewer.request_review("resume text")
