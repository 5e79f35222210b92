import re
from typing import NamedTuple

_LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")


class NormalizedText(NamedTuple):
    """Lowercased CV text plus its non-blank lines."""

    content: str
    lines: tuple[str, ...]


def normalize_text(text: str) -> str:
    """Normalize text by standardizing line breaks and whitespace.

    Converts different line break formats to standard newlines,
    collapses multiple spaces/tabs into single spaces, and reduces
    excessive blank lines.

    Args:
        text: Raw text to normalize.

    Returns:
        str: Normalized and trimmed text.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def normalize_cv_text(text: str) -> NormalizedText:
    """Lowercase and trim CV text and split it into non-blank lines.

    Args:
        text: Raw CV text (may be empty).

    Returns:
        NormalizedText with the lowercased content and the lines that contain
        something other than whitespace.
    """
    content = (text or "").strip().lower()
    if not content:
        return NormalizedText("", ())
    lines = tuple(line for line in _LINE_SPLIT_RE.split(content) if line.strip())
    return NormalizedText(content, lines)
