"""Reading pipe-delimited profile files."""

from .loader import (
    LoadResult,
    parse_label,
    parse_line,
    read_profiles,
    load_profiles,
    profiles_to_frame,
)

__all__ = [
    "LoadResult",
    "parse_label",
    "parse_line",
    "read_profiles",
    "load_profiles",
    "profiles_to_frame",
]
