"""Text clean-up helpers shared by the extractors."""

import re

_NON_ASCII = re.compile(r"[^\x00-\x7F]")


def remove_non_ascii(text: str) -> str:
    """
    Drop every character outside the ASCII range.

    Some locales (Turkish in particular) leave stray bytes such as no-break
    spaces around runtimes, ratings and times once the page has been decoded.
    """
    return _NON_ASCII.sub("", text)


def split_tokens(text: str, separator: str) -> list[str]:
    """Split on ``separator``, trim each piece and drop empty ones."""
    return [part.strip() for part in text.split(separator) if part.strip()]
