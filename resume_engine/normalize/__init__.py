from .fields import (
    EDUCATION_ALIASES,
    EXPERIENCE_ALIASES,
    PROJECT_ALIASES,
    ParseFallback,
    ParseOk,
    ParseResult,
    aliases,
    coerce_flag,
    coerce_string_list,
    coerce_text,
    has_list_data,
    key,
    parse_free_text_projects,
    parse_list_field,
    parse_string_list,
    resolve_alias,
    split_skill_string,
)

__all__ = [
    "EDUCATION_ALIASES",
    "EXPERIENCE_ALIASES",
    "PROJECT_ALIASES",
    "ParseFallback",
    "ParseOk",
    "ParseResult",
    "aliases",
    "coerce_flag",
    "coerce_string_list",
    "coerce_text",
    "has_list_data",
    "key",
    "parse_free_text_projects",
    "parse_list_field",
    "parse_string_list",
    "resolve_alias",
    "split_skill_string",
]
