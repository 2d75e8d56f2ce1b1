"""Asks a hosted text-generation model to review a resume."""

from pathlib import Path

from resumi.analysis.client_base import BaseInferenceClient
from resumi.analysis.prompt_loader import load_output_format, load_prompt_template
from resumi.logging.logger import Log


class ResumeReviewer:
    """Builds the review prompt and returns the model's raw completion."""

    def __init__(
        self,
        *,
        client: BaseInferenceClient,
        model: str,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        prompt_template_path: Path | None = None,
        output_format_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = max(0.0, min(2.0, temperature))
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._output_format = load_output_format(output_format_path)

    def request_review(self, resume_text: str) -> str:
        """Send the resume to the model and return its unparsed answer.

        Raises:
            InferenceUnavailableError: if the provider call fails.
        """
        prompt = self.build_prompt(resume_text)
        Log.debug(f"Review prompt:\n{prompt}")

        Log.info(f"Calling inference provider with model {self._model}...")
        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            user_prompt=prompt,
        )
        Log.info("Inference response received")
        Log.debug(f"AI raw response:\n{raw_response}")
        return raw_response

    def build_prompt(self, resume_text: str) -> str:
        return self._prompt_template.format(
            resume_text=resume_text,
            output_format=self._output_format,
        )
