"""Config merging helpers."""

from __future__ import annotations

from typing import Any, Dict


def merge_sections(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay per-section values onto the defaults.

    Sections are flat, so a key present in an override section replaces the
    default outright (a ``flags`` list is not appended to).
    """
    merged = dict(base)
    for section, values in overrides.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged
