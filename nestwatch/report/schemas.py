"""Pydantic models for JSON reports."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel

from ..core.units import TimeUnit

if TYPE_CHECKING:  # pragma: no cover
    from ..core.event import EventRecord


class EventModel(BaseModel):
    path: str
    name: str
    count: int
    time: int
    average: int
    unit: str

    @classmethod
    def from_record(cls, record: "EventRecord", unit: Optional[TimeUnit] = None) -> "EventModel":
        unit = unit or record.resolution
        return cls(
            path=record.path,
            name=record.name,
            count=record.count,
            time=record.get_time(unit),
            average=record.average(unit),
            unit=unit.suffix,
        )


class ReportModel(BaseModel):
    resolution: str
    events: List[EventModel]
    running: List[str]


__all__ = ["EventModel", "ReportModel"]
