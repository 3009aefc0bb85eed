"""Coercion of heterogeneously encoded profile fields into canonical records.

A logical list field may arrive as a list of mappings, a JSON array serialized
to text, or garbage. ``parse_list_field`` never raises: it returns ``ParseOk``
with the records, or ``ParseFallback`` naming why the caller should use its
fallback content instead.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .utils import is_blank, normalize_line, split_nonempty, split_numbered, starts_numbered, strip_numbered_prefix

Accessor = Callable[[Mapping[str, Any]], Any]
AliasTable = Mapping[str, tuple[Accessor, ...]]

_PROJECT_SEPARATORS = ("\n\n", "\n---", "\n===")
_MAX_PROJECT_NAME_LENGTH = 100
_TRUE_STRINGS = {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class ParseOk:
    records: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ParseFallback:
    reason: str


ParseResult = ParseOk | ParseFallback


def key(name: str) -> Accessor:
    """Accessor reading one spelling of a field from a raw record."""

    def _read(record: Mapping[str, Any]) -> Any:
        return record.get(name)

    _read.__name__ = f"key_{name}"
    return _read


def aliases(*names: str) -> tuple[Accessor, ...]:
    return tuple(key(name) for name in names)


EXPERIENCE_ALIASES: dict[str, tuple[Accessor, ...]] = {
    "company": aliases("company", "employer"),
    "position": aliases("position", "title", "role"),
    "location": aliases("location"),
    "start_date": aliases("start_date", "startDate"),
    "end_date": aliases("end_date", "endDate"),
    "current": aliases("current", "is_current"),
    "description": aliases("description", "summary"),
    "highlights": aliases("highlights", "achievements"),
}

EDUCATION_ALIASES: dict[str, tuple[Accessor, ...]] = {
    "institution": aliases("institution", "school", "university"),
    "degree": aliases("degree", "degree_type"),
    "field": aliases("field", "field_of_study", "major"),
    "location": aliases("location"),
    "start_date": aliases("start_date", "startDate"),
    "end_date": aliases("end_date", "endDate"),
    "current": aliases("current", "is_current", "in_progress"),
    "gpa": aliases("gpa", "grade"),
    "honors": aliases("honors", "achievements", "awards"),
    "description": aliases("description", "notes"),
}

PROJECT_ALIASES: dict[str, tuple[Accessor, ...]] = {
    "name": aliases("name", "title", "project_name"),
    "description": aliases("description", "summary"),
    "technologies": aliases("technologies", "tech_stack", "tools"),
    "url": aliases("url", "link", "demo_url"),
    "github": aliases("github", "github_url", "repo", "repository"),
    "start_date": aliases("start_date", "startDate"),
    "end_date": aliases("end_date", "endDate"),
    "highlights": aliases("highlights", "achievements", "features"),
}


def resolve_alias(record: Mapping[str, Any], accessors: tuple[Accessor, ...]) -> Any:
    """Return the first accessor value that is neither None nor a blank string."""
    for accessor in accessors:
        value = accessor(record)
        if not is_blank(value):
            return value
    return None


def _decode_list(raw: Any) -> list[Any] | ParseFallback:
    if raw is None:
        return ParseFallback("missing")
    if isinstance(raw, list):
        return raw
    if not isinstance(raw, str):
        return ParseFallback("unsupported_type")
    stripped = raw.strip()
    if not stripped:
        return ParseFallback("empty")
    try:
        decoded = json.loads(stripped)
    except json.JSONDecodeError:
        return ParseFallback("malformed")
    if not isinstance(decoded, list):
        return ParseFallback("not_a_list")
    return decoded


def parse_list_field(raw: Any, alias_table: AliasTable) -> ParseResult:
    decoded = _decode_list(raw)
    if isinstance(decoded, ParseFallback):
        return decoded

    records = [
        {name: resolve_alias(item, accessors) for name, accessors in alias_table.items()}
        for item in decoded
        if isinstance(item, Mapping)
    ]
    if not records:
        return ParseFallback("empty")
    return ParseOk(records=records)


def has_list_data(raw: Any) -> bool:
    decoded = _decode_list(raw)
    if isinstance(decoded, ParseFallback):
        return False
    return any(isinstance(item, Mapping) for item in decoded)


def parse_string_list(text: str) -> list[str]:
    if "\n" in text:
        return split_nonempty(text, "\n")
    if "," in text:
        return split_nonempty(text, ",")
    stripped = text.strip()
    return [stripped] if stripped else []


def split_skill_string(text: str | None) -> list[str]:
    if not text:
        return []
    return [item.strip() for line in text.splitlines() for item in line.split(",") if item.strip()]


def coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item).strip() for item in value if not is_blank(item))
    return str(value).strip()


def coerce_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    if isinstance(value, (int, float)):
        return bool(value)
    return False


def coerce_string_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]
    if isinstance(value, str):
        return parse_string_list(value)
    return []


def parse_free_text_projects(text: str | None, default_name: str) -> list[dict[str, str]]:
    """Split a narrative block into project records with ``name`` and ``description``."""
    trimmed = (text or "").strip()
    if not trimmed:
        return []

    chunks = [trimmed]
    for separator in _PROJECT_SEPARATORS:
        if separator in trimmed:
            chunks = [chunk for chunk in trimmed.split(separator) if chunk.strip()]
            break
    if len(chunks) == 1 and starts_numbered(trimmed):
        chunks = split_numbered(trimmed)

    projects: list[dict[str, str]] = []
    for index, chunk in enumerate(chunks):
        clean = strip_numbered_prefix(chunk.strip())
        lines = clean.split("\n")
        first_line = lines[0].strip()
        if len(lines) > 1 and 0 < len(first_line) < _MAX_PROJECT_NAME_LENGTH:
            name = normalize_line(first_line)
            description = "\n".join(lines[1:]).strip()
        else:
            name = f"{default_name} {index + 1}" if len(chunks) > 1 else default_name
            description = clean
        projects.append({"name": name, "description": description})
    return projects
