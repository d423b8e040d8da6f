"""Test status enumeration with display glyphs and colors."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class TestStatus(str, Enum):
    """Closed set of outcomes a test run can have.

    Declaration order is significant: it is the iteration order for stat
    cards, the status selector and pie-chart segments.
    """

    __test__ = False  # keep pytest from collecting this as a test class

    PASS = "Pass"
    FAIL = "Fail"
    WARN = "Warn"
    SKIP = "Skip"
    CRASH = "Crash"
    TIMEOUT = "Timeout"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    @classmethod
    def parse(cls, text: str) -> Optional["TestStatus"]:
        """Return the status named exactly by ``text``, or None if unknown."""
        return _BY_NAME.get(text)

    def __str__(self) -> str:
        return self.value


_GLYPHS = {
    TestStatus.PASS: "✅",
    TestStatus.FAIL: "❌",
    TestStatus.WARN: "⚠️",
    TestStatus.SKIP: "❎",
    TestStatus.CRASH: "\U0001f4a5",
    TestStatus.TIMEOUT: "⏱️",
}

_COLORS = {
    TestStatus.PASS: "#22c55e",
    TestStatus.FAIL: "#ff6467",
    TestStatus.WARN: "#ffdf20",
    TestStatus.SKIP: "#38bdf8",
    TestStatus.CRASH: "#e7000b",
    TestStatus.TIMEOUT: "#F77600",
}

_BY_NAME = {s.value: s for s in TestStatus}

UNRECOGNIZED_LABEL = "Unrecognized"
UNRECOGNIZED_COLOR = "#FFF"
