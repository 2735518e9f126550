"""Configuration merging for editor settings documents."""

from .merging import (
    ensure_well_formed,
    merge_settings,
    merge_settings_text,
    parse_json_object,
)

__all__ = [
    "ensure_well_formed",
    "merge_settings",
    "merge_settings_text",
    "parse_json_object",
]
