"""Record loader for pipe-delimited profile files.

Rows carry no header. Labeled (train/test) and unlabeled (inference)
files use different column layouts, see ``ColumnLayout``.

Malformed rows are reported per line and skipped; a missing or
unreadable file is not recoverable and propagates to the caller.
"""

from dataclasses import dataclass, field
from pathlib import Path

import polars as pl
from loguru import logger

from outreach.domain.entities import ColumnLayout, Profile
from outreach.domain.errors import ParseError


_TRUE_TOKENS = frozenset({"1", "true", "yes"})
_FALSE_TOKENS = frozenset({"0", "false", "no"})

PROFILE_SCHEMA = {
    "person_id": pl.Utf8,
    "current_role": pl.Utf8,
    "country": pl.Utf8,
    "industry": pl.Utf8,
    "label": pl.Boolean,
}


@dataclass
class LoadResult:
    """Outcome of reading a profile file: parsed rows plus rejected ones."""
    profiles: list[Profile] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)

    @property
    def n_loaded(self) -> int:
        return len(self.profiles)

    @property
    def n_skipped(self) -> int:
        return len(self.errors)


def parse_label(token: str) -> bool:
    """Parse a boolean label token such as ``1``, ``0``, ``true`` or ``no``."""
    value = token.strip().lower()
    if value in _TRUE_TOKENS:
        return True
    if value in _FALSE_TOKENS:
        return False
    raise ParseError(f"invalid label {token!r}")


def parse_line(line: str, layout: ColumnLayout, line_number: int | None = None) -> Profile:
    """Parse one row into a Profile.

    Raises:
        ParseError: If the row has too few fields or an unreadable label
    """
    fields = line.rstrip("\r\n").split(layout.separator)
    if len(fields) < layout.required_fields:
        raise ParseError(
            f"expected at least {layout.required_fields} fields, got {len(fields)}",
            line_number=line_number,
            line=line,
        )

    label = None
    if layout.label is not None:
        try:
            label = parse_label(fields[layout.label])
        except ParseError as e:
            raise ParseError(str(e), line_number=line_number, line=line) from e

    return Profile(
        person_id=fields[layout.person_id],
        current_role=fields[layout.current_role],
        country=fields[layout.country],
        industry=fields[layout.industry],
        label=label,
    )


def read_profiles(path: Path | str, layout: ColumnLayout) -> LoadResult:
    """Read every non-blank row of ``path``, collecting successes and failures."""
    path = Path(path)
    result = LoadResult()

    with open(path, "rb") as f:
        for line_number, raw in enumerate(f, 1):
            if not raw.strip():
                continue
            try:
                line = _decode_line(raw, line_number)
                result.profiles.append(parse_line(line, layout, line_number))
            except ParseError as e:
                logger.warning("Skipping malformed row in {}: {}", path.name, e)
                result.errors.append(e)

    logger.info(
        "Loaded {} profiles from {} ({} skipped)",
        result.n_loaded, path, result.n_skipped,
    )
    return result


def _decode_line(raw: bytes, line_number: int) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"invalid UTF-8: {e}", line_number=line_number) from e


def load_profiles(path: Path | str, layout: ColumnLayout) -> list[Profile]:
    """Load profiles from ``path``, dropping malformed rows."""
    return read_profiles(path, layout).profiles


def profiles_to_frame(profiles: list[Profile]) -> pl.DataFrame:
    """Convert profiles into a DataFrame with one row per profile."""
    return pl.DataFrame(
        {
            "person_id": [p.person_id for p in profiles],
            "current_role": [p.current_role for p in profiles],
            "country": [p.country for p in profiles],
            "industry": [p.industry for p in profiles],
            "label": [p.label for p in profiles],
        },
        schema=PROFILE_SCHEMA,
    )
