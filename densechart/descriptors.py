from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
import re
from typing import Any

from densechart.errors import ChartDataError


@dataclass(frozen=True)
class Chart:
    title: str
    data: tuple[Any, ...]

    @property
    def slug(self) -> str:
        slug = re.sub(r"[^a-z0-9]+", "-", self.title.lower()).strip("-")
        return slug or "chart"


def parse_charts(payload: Any) -> list[Chart]:
    if not isinstance(payload, list):
        raise ChartDataError("chart descriptors must be a JSON array")
    charts: list[Chart] = []
    for i, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ChartDataError(f"descriptor {i} must be an object")
        title = item.get("title", "")
        data = item.get("data")
        if not isinstance(title, str):
            raise ChartDataError(f"descriptor {i} title must be a string")
        if data is None:
            data = []
        if not isinstance(data, list):
            raise ChartDataError(f"descriptor {i} data must be an array")
        charts.append(Chart(title=title, data=tuple(data)))
    return charts


def load_charts(path: Path) -> list[Chart]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ChartDataError(f"{path}: invalid JSON ({exc})") from exc
    return parse_charts(payload)
