"""Input normalization helpers."""

from __future__ import annotations

from typing import Optional


def optional_text(value: Optional[str]) -> Optional[str]:
    """Map an empty text field to the absent marker `None`."""

    if value is None or not value.strip():
        return None
    return value


def lower_text(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower()
    return value
