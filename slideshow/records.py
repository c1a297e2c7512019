"""Input adapter: parse photo records and map tag strings to dense ids."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from slideshow.config import DEFAULTS

logger = logging.getLogger("slideshow")

ORIENTATIONS = frozenset({DEFAULTS.horizontal, DEFAULTS.vertical})


class ParseError(ValueError):
    """Raised when the input file does not follow the record format."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(f"Malformed input, {message}")


@dataclass(frozen=True)
class RawRecord:
    orientation: str
    tags: frozenset[int]
    index: int


@dataclass(frozen=True)
class ParsedInput:
    records: list[RawRecord]
    tag_ids: dict[str, int] = field(default_factory=dict)

    @property
    def n_tags(self) -> int:
        return len(self.tag_ids)


def _parse_int(token: str, what: str, line_number: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ParseError(f"{what} is not an integer: {token!r}", line_number) from None
    if value < 0:
        raise ParseError(f"{what} must be >= 0, got {value}", line_number)
    return value


def parse_records(lines: Iterable[str]) -> ParsedInput:
    """Parse a record count header followed by one photo record per line.

    Each record reads ``<H|V> <k> <tag_1> ... <tag_k>``. Tag strings are
    case-sensitive and numbered in first-seen order. Blank lines are ignored.
    """
    tag_ids: dict[str, int] = {}
    records: list[RawRecord] = []
    expected: int | None = None

    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue

        if expected is None:
            if len(tokens) != 1:
                raise ParseError("header must hold only the record count", line_number)
            expected = _parse_int(tokens[0], "record count", line_number)
            continue

        orientation = tokens[0]
        if orientation not in ORIENTATIONS:
            raise ParseError(
                f"orientation must be one of {sorted(ORIENTATIONS)}, got {orientation!r}",
                line_number,
            )
        if len(tokens) < 2:
            raise ParseError("missing tag count", line_number)
        n_tags = _parse_int(tokens[1], "tag count", line_number)
        labels = tokens[2:]
        if len(labels) != n_tags:
            raise ParseError(
                f"expected {n_tags} tags, found {len(labels)}", line_number,
            )

        tags = frozenset(tag_ids.setdefault(label, len(tag_ids)) for label in labels)
        records.append(RawRecord(orientation=orientation, tags=tags, index=len(records)))

    if expected is None:
        raise ParseError("missing record count header")
    if len(records) != expected:
        raise ParseError(f"header announces {expected} records, found {len(records)}")

    return ParsedInput(records=records, tag_ids=tag_ids)


def _decode_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    for line_number, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"not valid UTF-8 ({exc.reason})", line_number) from exc


def read_records(input_path: Path) -> ParsedInput:
    """Read and parse an input file."""
    if not input_path.is_file():
        raise FileNotFoundError(f"Input file does not exist: {input_path}")
    with input_path.open("rb") as fh:
        parsed = parse_records(_decode_lines(fh))
    logger.info(
        "Read %d records with %d distinct tags from %s",
        len(parsed.records), parsed.n_tags, input_path,
    )
    return parsed
