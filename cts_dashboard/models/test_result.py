"""Test-run records and the result set they are loaded into."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from cts_dashboard.models.status import TestStatus


class TestRecord(BaseModel):
    """A single test-run row: name, raw status and raw duration."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    name: str
    status_raw: str
    duration_raw: str = ""
    extra: tuple[str, ...] = ()  # trailing columns, carried but unused

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "TestRecord":
        """Build a record from positional fields (name, status, duration, ...)."""
        if len(row) < 3:
            raise ValueError(f"Expected at least 3 fields, got {len(row)}")
        return cls(
            name=row[0],
            status_raw=row[1],
            duration_raw=str(row[2]),
            extra=tuple(row[3:]),
        )

    @property
    def status(self) -> Optional[TestStatus]:
        return TestStatus.parse(self.status_raw)

    @property
    def duration_seconds(self) -> Optional[float]:
        """Parsed duration, or None when the raw value is not a valid duration."""
        try:
            value = float(self.duration_raw)
        except ValueError:
            return None
        if not math.isfinite(value) or value < 0:
            return None
        return value


class ResultSet(BaseModel):
    """An immutable, ordered generation of test records."""

    model_config = ConfigDict(frozen=True)

    generation: int = 0
    records: tuple[TestRecord, ...] = Field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.records)
