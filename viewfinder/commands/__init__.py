"""CLI command groups for viewfinder."""

__all__ = [
    "extension",
    "find",
    "location",
    "namespace",
    "options",
]
