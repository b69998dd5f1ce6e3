"""Forecast chart projector: forecast series -> line chart coordinates.

Pure geometry. The logical canvas is 1000x300 with the origin at the top
left, so warmer days sit higher on the chart (smaller y).
"""

from collections.abc import Sequence

from weatherapp.models.chart import ChartLayout, ChartPoint, ChartSegment, GridLine
from weatherapp.models.weather import ForecastDay

CANVAS_WIDTH = 1000
CANVAS_HEIGHT = 300

X_LEFT = 100
X_SPAN = 850
X_MID = X_LEFT + X_SPAN / 2  # 525, used when there is a single point

Y_BOTTOM = 250
Y_SPAN = 180
TEMP_LABEL_OFFSET = 20
DATE_LABEL_Y = 280

GRID_X1 = 50
GRID_X2 = 950
GRID_Y_TOP = 50
GRID_Y_STEP = 50
GRID_LINES = 5


def project_forecast(series: Sequence[ForecastDay]) -> ChartLayout:
    """Map a chronological forecast series onto the chart canvas.

    Produces one point per day, a segment between each consecutive pair, and
    the fixed background grid. An empty series yields only the grid.
    """
    grid = _grid_lines()
    n = len(series)
    if n == 0:
        return ChartLayout(CANVAS_WIDTH, CANVAS_HEIGHT, grid_lines=grid)

    temps = [day.temperature for day in series]
    min_t = min(temps)
    temp_range = (max(temps) - min_t) or 1

    points = tuple(
        _point(_x_at(i, n), _y_at(day.temperature, min_t, temp_range), day)
        for i, day in enumerate(series)
    )
    segments = tuple(
        ChartSegment(a.x, a.y, b.x, b.y) for a, b in zip(points, points[1:])
    )
    return ChartLayout(CANVAS_WIDTH, CANVAS_HEIGHT, points, segments, grid)


def _x_at(index: int, count: int) -> float:
    if count == 1:
        return X_MID
    return X_LEFT + index * X_SPAN / (count - 1)


def _y_at(temperature: float, min_t: float, temp_range: float) -> float:
    return Y_BOTTOM - ((temperature - min_t) / temp_range) * Y_SPAN


def _point(x: float, y: float, day: ForecastDay) -> ChartPoint:
    return ChartPoint(
        x=x,
        y=y,
        temperature_label=f"{format_temperature(day.temperature)}°",
        label_x=x,
        label_y=y - TEMP_LABEL_OFFSET,
        date_label=short_date(day.date),
        date_label_y=DATE_LABEL_Y,
    )


def _grid_lines() -> tuple[GridLine, ...]:
    return tuple(
        GridLine(GRID_X1, GRID_Y_TOP + i * GRID_Y_STEP, GRID_X2)
        for i in range(GRID_LINES)
    )


def format_temperature(value: float) -> str:
    """Render a temperature at the precision it arrived with (30.0 -> "30")."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def short_date(date: object) -> str:
    """Keep the first two '/'-separated parts of a date: "1/6/2024" -> "1/6"."""
    return "/".join(str(date).split("/")[:2])
