"""Derived dashboard state handed to the rendering layer."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cts_dashboard.models.status import TestStatus
from cts_dashboard.models.test_result import TestRecord


class Histogram(BaseModel):
    """Per-status counts; every status is present, zero included."""

    model_config = ConfigDict(frozen=True)

    counts: dict[TestStatus, int] = Field(
        default_factory=lambda: {s: 0 for s in TestStatus}
    )

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def percentage(self, status: TestStatus) -> float:
        total = self.total
        if total == 0:
            return 0.0
        return self.counts.get(status, 0) * 100.0 / total


class FilterState(BaseModel):
    """Status filter plus settled search term that parameterize matching."""

    model_config = ConfigDict(frozen=True)

    status_filter: Optional[TestStatus] = None
    settled_search: Optional[str] = None

    @field_validator("settled_search", mode="before")
    @classmethod
    def empty_search_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v == "":
            return None
        return v

    def matches(self, record: TestRecord) -> bool:
        if self.status_filter is not None and record.status != self.status_filter:
            return False
        if self.settled_search is not None and self.settled_search not in record.name:
            return False
        return True


class PieSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: TestStatus
    fraction_start: float
    fraction_end: float
    color: str

    @property
    def percentage(self) -> float:
        return (self.fraction_end - self.fraction_start) * 100.0


class PageView(BaseModel):
    """Filtered count, last page index and the records of the current page."""

    model_config = ConfigDict(frozen=True)

    filtered_count: int = 0
    page_count: int = 0  # highest valid zero-based page index
    current_page: int = 0
    page_records: list[TestRecord] = Field(default_factory=list)


class PaginationLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    show_left_ellipsis: bool = False
    page_buttons: list[int] = Field(default_factory=list)
    show_right_ellipsis: bool = False
    first_disabled: bool = True
    prev_disabled: bool = True
    next_disabled: bool = True
    last_disabled: bool = True


class DashboardSnapshot(BaseModel):
    """Everything one recomputation exposes, consistent with one generation."""

    model_config = ConfigDict(frozen=True)

    generation: int = 0
    histogram: Histogram = Field(default_factory=Histogram)
    filter_state: FilterState = Field(default_factory=FilterState)
    view: PageView = Field(default_factory=PageView)
    segments: list[PieSegment] = Field(default_factory=list)
    page_size: int = 100

    @property
    def total(self) -> int:
        return self.histogram.total
