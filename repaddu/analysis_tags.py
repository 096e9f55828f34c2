"""Extraction of TODO-style tags from text."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

_SPACE = " \t\n\v\f\r"
DEFAULT_TAGS = ("TODO", "FIXME", "BUG", "HACK")


@dataclass
class TagMatch:
    """One tag occurrence on one line."""

    tag: str
    content: str
    line_number: int
    file_path: str = ""


def _split_lines(content: str) -> list[str]:
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class TagExtractor:
    """Finds configured tags in text, one match per tag per line."""

    def __init__(self) -> None:
        self._tags: list[str] = list(DEFAULT_TAGS)

    @property
    def tags(self) -> tuple[str, ...]:
        """The tags searched for, in order."""
        return tuple(self._tags)

    def add_tag_pattern(self, tag: str) -> None:
        """Add a tag unless it is already present."""
        if tag not in self._tags:
            self._tags.append(tag)

    def load_tag_patterns(self, path: str | PathLike[str], replace_existing: bool = False) -> None:
        """Load tags from a file, one per line; blank lines and '#' comments are skipped."""
        text = Path(path).read_text(encoding="utf-8", errors="replace")
        loaded: list[str] = []
        for line in _split_lines(text):
            trimmed = line.strip(_SPACE)
            if not trimmed or trimmed.startswith("#"):
                continue
            if trimmed not in loaded:
                loaded.append(trimmed)
        if replace_existing:
            self._tags.clear()
        for tag in loaded:
            self.add_tag_pattern(tag)

    def extract(self, content: str, file_path: str = "") -> list[TagMatch]:
        """Return all tag matches in the content, in line then tag order."""
        return [
            match
            for number, line in enumerate(_split_lines(content), start=1)
            for match in self._matches_for_line(line, number, file_path)
        ]

    def extract_from_file(self, path: str | PathLike[str], file_path: str = "") -> list[TagMatch]:
        """Return tag matches from a file; an unreadable file yields no matches."""
        try:
            data = Path(path).read_bytes()
        except OSError:
            return []
        return self.extract(data.decode("utf-8", errors="replace"), file_path)

    def _matches_for_line(self, line: str, number: int, file_path: str):
        for tag in self._tags:
            pos = line.find(tag)
            if pos < 0:
                continue
            rest = line[pos + len(tag):].lstrip(":" + _SPACE)
            yield TagMatch(
                tag=tag,
                content=rest.rstrip(" \t\n\r"),
                line_number=number,
                file_path=file_path,
            )