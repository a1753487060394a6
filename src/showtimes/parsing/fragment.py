"""Queryable view over a piece of parsed markup.

Extractors only talk to ``Fragment``; BeautifulSoup stays behind this module.
"""

import copy
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag


class Fragment:
    """A markup element that can be queried with CSS selectors."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @classmethod
    def parse(cls, markup: str | bytes) -> "Fragment":
        """Parse a whole document and return its root."""
        return cls(BeautifulSoup(markup, "html.parser"))

    def __repr__(self) -> str:
        return f"Fragment(<{self._tag.name}>)"

    def select(self, pattern: str) -> list["Fragment"]:
        """All descendants matching ``pattern``, in document order."""
        return [Fragment(tag) for tag in self._tag.select(pattern)]

    def select_one(self, pattern: str) -> "Fragment | None":
        tag = self._tag.select_one(pattern)
        return Fragment(tag) if tag is not None else None

    def exists(self, pattern: str) -> bool:
        return self._tag.select_one(pattern) is not None

    def iter(self, pattern: str) -> Iterator["Fragment"]:
        for tag in self._tag.select(pattern):
            yield Fragment(tag)

    def text(self) -> str:
        return self._tag.get_text()

    def select_text(self, pattern: str) -> str:
        """Concatenated text of every match, empty when nothing matches."""
        return "".join(tag.get_text() for tag in self._tag.select(pattern))

    def attr(self, name: str) -> str | None:
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def select_attr(self, pattern: str, name: str) -> str | None:
        """Attribute of the first match of ``pattern``."""
        found = self.select_one(pattern)
        return found.attr(name) if found is not None else None

    def text_with_first_break_as(self, replacement: str) -> str:
        """Text with the first ``<br>`` rendered as ``replacement``.

        Works on a copy; this fragment is left untouched.
        """
        clone = copy.copy(self._tag)
        br = clone.find("br")
        if br is not None:
            br.replace_with(replacement)
        return clone.get_text()

    def text_without_last_child(self) -> str:
        """Text with the last child element dropped. Works on a copy."""
        clone = copy.copy(self._tag)
        children = clone.find_all(True, recursive=False)
        if children:
            children[-1].decompose()
        return clone.get_text()
