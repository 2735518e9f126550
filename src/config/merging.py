"""Shared configuration merging utilities."""

import json
from typing import Any, Dict, Mapping, Optional

from workspace.errors import (
    InvalidTargetJSON,
    InvalidTemplateJSON,
    MergeProducedInvalidJSON,
    TemplateUnavailable,
)

__all__ = [
    "merge_settings",
    "merge_settings_text",
    "parse_json_object",
    "ensure_well_formed",
    "TemplateUnavailable",
    "InvalidTargetJSON",
    "InvalidTemplateJSON",
    "MergeProducedInvalidJSON",
]


def merge_settings(
    target: Optional[Mapping[str, Any]],
    template: Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Merge a template settings document into an existing target document.

    This is a shallow, key-wise union where the target takes precedence:
    values the user already set are never replaced by template defaults.
    Nested objects are not merged recursively; when both documents define a
    key, the target's whole value is kept.

    Args:
        target: Existing workspace document, or None if there is none.
        template: Template document with tool defaults.

    Returns:
        A new dictionary. Neither input is mutated.

    Examples:
        >>> merge_settings({"a": 1, "b": 2}, {"b": 3, "c": 4})
        {'a': 1, 'b': 2, 'c': 4}
        >>> merge_settings(None, {"x": True})
        {'x': True}
    """
    if target is None:
        return dict(template)

    result = dict(target)
    for key, value in template.items():
        result.setdefault(key, value)
    return result


def parse_json_object(text: str, source: str, error_cls: type) -> Dict[str, Any]:
    """
    Parse JSON text that must hold an object at the top level.

    Args:
        text: Raw JSON text.
        source: Description of the input for error messages (usually a path).
        error_cls: Exception class raised on failure.

    Returns:
        Parsed dictionary.
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise error_cls(f"{source} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise error_cls(
            f"{source} must contain a JSON object at the top level, "
            f"got {type(data).__name__}"
        )
    return data


def ensure_well_formed(document: Any) -> str:
    """
    Serialize a merged document and check it parses back to the same value.

    Returns:
        The serialized JSON text.

    Raises:
        MergeProducedInvalidJSON: If serialization fails or does not round-trip.
    """
    try:
        text = json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False)
        reparsed = json.loads(text)
    except (TypeError, ValueError) as e:
        raise MergeProducedInvalidJSON(f"Merged settings are not valid JSON: {e}") from e
    if reparsed != document:
        raise MergeProducedInvalidJSON("Merged settings do not survive a JSON round-trip")
    return text + "\n"


def merge_settings_text(
    target_text: Optional[str],
    template_text: str,
    target_source: str = "target",
    template_source: str = "template",
) -> Dict[str, Any]:
    """
    Parse raw target and template JSON text, then merge them.

    Args:
        target_text: Existing file content, or None when the target is absent.
        template_text: Template file content.
        target_source: Label for the target in error messages.
        template_source: Label for the template in error messages.

    Returns:
        The merged document.

    Raises:
        InvalidTemplateJSON: If the template is not a JSON object.
        InvalidTargetJSON: If the target is present but not a JSON object.
    """
    template = parse_json_object(template_text, template_source, InvalidTemplateJSON)
    target = None
    if target_text is not None:
        target = parse_json_object(target_text, target_source, InvalidTargetJSON)
    return merge_settings(target, template)
