from pathlib import Path

from pdfnamer.llm.exceptions import ModelInvocationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a prompt template by name.

    Args:
        name: Template stem inside the bundled ``prompts`` directory,
              e.g. ``"date"`` for ``prompts/date_prompt.txt``.
        path: Explicit template file; overrides *name* when given.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        ModelInvocationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{name}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ModelInvocationError(f"Failed to load prompt template '{name}': {exc}") from exc
