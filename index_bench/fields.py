"""Field-name synthesis for generated collections."""

from __future__ import annotations

from .errors import ConfigurationError

FIELD_PREFIX = "field-"
SUB_OBJECT_PREFIX = "subObj-"


def parse_field_path(path: str) -> tuple[str, ...]:
    """Split a dotted field path into its segments.

    Raises:
        ConfigurationError: If the path has an empty segment
    """
    segments = tuple(path.split("."))
    if any(not segment for segment in segments):
        raise ConfigurationError(f"Invalid field path: {path!r}")
    return segments


def names_flat(n: int) -> list[str]:
    """Return ``n`` top-level names: ``field-0`` ... ``field-(n-1)``."""
    return names_at_depth(n, 0)


def names_at_depth(n: int, depth: int) -> list[str]:
    """Return ``n`` field names nested ``depth`` sub-objects deep.

    Example:
        names_at_depth(2, 2) == ["subObj-0.subObj-1.field-0", "subObj-0.subObj-1.field-1"]
    """
    if n < 0:
        raise ConfigurationError(f"Field count must be non-negative, got {n}")
    if depth < 0:
        raise ConfigurationError(f"Depth must be non-negative, got {depth}")

    prefix = "".join(f"{SUB_OBJECT_PREFIX}{level}." for level in range(depth))
    return [f"{prefix}{FIELD_PREFIX}{i}" for i in range(n)]
