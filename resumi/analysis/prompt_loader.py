from pathlib import Path

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the review prompt template.

    The template holds two placeholders: ``{resume_text}`` and
    ``{output_format}``.

    Raises:
        OSError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_prompt.txt"
    return path.read_text(encoding="utf-8")


def load_output_format(path: Path | None = None) -> str:
    """Load the example JSON shown to the model as the required output shape."""
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_format.json"
    return path.read_text(encoding="utf-8")
