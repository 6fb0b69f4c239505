"""Restricted semantic versions: ``MAJOR.MINOR.PATCH`` or ``MAJOR.MINOR.PATCH-TAG``.

Only the fact that a tag is present is kept, so every pre-release of the same
numeric triple ranks equal. Build metadata and multi-part pre-release
identifiers are not supported.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto

PREVIEW_MARKER = "-"
SEGMENT_COUNT = 3


class VersionParseCause(StrEnum):
    @staticmethod
    def _generate_next_value_(
        name: str, start: int, count: int, last_values: list[str]
    ) -> str:
        return name.lower()

    INVALID_FORMAT = auto()
    INVALID_SEGMENT = auto()


class VersionParseError(ValueError):
    def __init__(self, raw: str, *, cause: VersionParseCause) -> None:
        self.raw = raw
        self.cause = cause
        super().__init__(f"Invalid version string {raw!r} ({cause})")


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    segments: tuple[int, int, int]
    is_preview: bool
    original: str

    def __str__(self) -> str:
        return self.original

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is Ordering.EQUAL

    def __hash__(self) -> int:
        return hash((self.segments, self.is_preview))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is not Ordering.LESS

    def older_than(self, other: Version) -> bool:
        return compare_versions(self, other) is Ordering.LESS

    def newer_than(self, other: Version) -> bool:
        return compare_versions(self, other) is Ordering.GREATER


def _parse_segment(raw: str, segment: str) -> int:
    # int() would also accept signs, whitespace and underscores
    if not segment.isascii() or not segment.isdigit():
        raise VersionParseError(raw, cause=VersionParseCause.INVALID_SEGMENT)
    return int(segment)


def parse_version(raw: str) -> Version:
    raw_segments = raw.split(".")
    if len(raw_segments) != SEGMENT_COUNT:
        raise VersionParseError(raw, cause=VersionParseCause.INVALID_FORMAT)

    major, minor, patch = raw_segments
    if PREVIEW_MARKER in major or PREVIEW_MARKER in minor:
        raise VersionParseError(raw, cause=VersionParseCause.INVALID_FORMAT)

    patch, marker, _ = patch.partition(PREVIEW_MARKER)

    return Version(
        segments=(
            _parse_segment(raw, major),
            _parse_segment(raw, minor),
            _parse_segment(raw, patch),
        ),
        is_preview=bool(marker),
        original=raw,
    )


def compare_versions(a: Version, b: Version) -> Ordering:
    if a.original == b.original:
        return Ordering.EQUAL

    for left, right in zip(a.segments, b.segments, strict=True):
        if left > right:
            return Ordering.GREATER
        if left < right:
            return Ordering.LESS

    # pre-releases of the same triple are not ordered between themselves
    if a.is_preview == b.is_preview:
        return Ordering.EQUAL
    return Ordering.LESS if a.is_preview else Ordering.GREATER
