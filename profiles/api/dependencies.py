from __future__ import annotations

from profiles.registry import PersonRegistry, registry


def get_registry() -> PersonRegistry:
    return registry
