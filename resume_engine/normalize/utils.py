from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_NUMBERED_PREFIX_RE = re.compile(r"^\d+\.\s*")
_NUMBERED_START_RE = re.compile(r"^\d+\.\s")
_NUMBERED_SPLIT_RE = re.compile(r"\n(?=\d+\.\s)")


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line).strip()


def is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def split_nonempty(text: str, separator: str) -> list[str]:
    return [item.strip() for item in text.split(separator) if item.strip()]


def starts_numbered(text: str) -> bool:
    return bool(_NUMBERED_START_RE.match(text))


def split_numbered(text: str) -> list[str]:
    return [chunk for chunk in _NUMBERED_SPLIT_RE.split(text) if chunk.strip()]


def strip_numbered_prefix(text: str) -> str:
    return _NUMBERED_PREFIX_RE.sub("", text, count=1)
