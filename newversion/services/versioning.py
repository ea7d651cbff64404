from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

_SEGMENT_RE = re.compile(r"[0-9]+")


class VersionParseError(ValueError):
    def __init__(self, text: str, segment: str | None = None):
        self.text = text
        self.segment = segment
        if segment is None:
            message = f"Invalid version string: {text!r}"
        else:
            message = f"Invalid segment {segment!r} in version string {text!r}"
        super().__init__(message)


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class VersionNumber:
    """Dotted numeric version such as ``1.10.2``.

    Ordering is decided over the segments both versions have. When that
    shared prefix is equal the versions compare equal, so ``1.2`` and
    ``1.2.5`` are neither newer nor older than each other.
    """

    segments: tuple[int, ...]
    source: str = field(default="", compare=False)

    @classmethod
    def parse(cls, text: str) -> VersionNumber:
        if not text:
            raise VersionParseError(text)
        segments: list[int] = []
        for token in text.split("."):
            if not _SEGMENT_RE.fullmatch(token):
                raise VersionParseError(text, token)
            try:
                segments.append(int(token))
            except ValueError as exc:
                raise VersionParseError(text, token) from exc
        return cls(segments=tuple(segments), source=text)

    def __str__(self) -> str:
        return self.source or ".".join(str(part) for part in self.segments)

    def __lt__(self, other: VersionNumber) -> bool:
        return compare(self, other) is Ordering.LESS

    def __gt__(self, other: VersionNumber) -> bool:
        return compare(self, other) is Ordering.GREATER

    def __le__(self, other: VersionNumber) -> bool:
        return compare(self, other) is not Ordering.GREATER

    def __ge__(self, other: VersionNumber) -> bool:
        return compare(self, other) is not Ordering.LESS


def compare(a: VersionNumber, b: VersionNumber) -> Ordering:
    for left, right in zip(a.segments, b.segments):
        if left > right:
            return Ordering.GREATER
        if left < right:
            return Ordering.LESS
    return Ordering.EQUAL


def compare_strings(a: str, b: str) -> Ordering:
    return compare(VersionNumber.parse(a), VersionNumber.parse(b))
