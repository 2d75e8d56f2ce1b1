from abc import ABC, abstractmethod


class BaseInferenceClient(ABC):
    """Contract for provider-specific text-generation clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        user_prompt: str,
    ) -> str:
        """Return the provider's completion as plain text.

        Raises:
            InferenceUnavailableError: on transport, auth or quota failures.
        """
