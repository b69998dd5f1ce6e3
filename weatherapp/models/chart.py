"""Chart layout models produced by the forecast projector."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChartPoint:
    x: float
    y: float
    temperature_label: str
    label_x: float
    label_y: float
    date_label: str
    date_label_y: float


@dataclass(frozen=True)
class ChartSegment:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class GridLine:
    x1: float
    y: float
    x2: float


@dataclass(frozen=True)
class ChartLayout:
    width: int
    height: int
    points: tuple[ChartPoint, ...] = ()
    segments: tuple[ChartSegment, ...] = ()
    grid_lines: tuple[GridLine, ...] = ()
