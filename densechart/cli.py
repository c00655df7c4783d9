from __future__ import annotations

import argparse
import logging
from pathlib import Path

from densechart.descriptors import load_charts
from densechart.surfaces import RasterSurface, SvgSurface
from densechart.view import ChartView, FixedContainer


LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="densechart")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("render", help="Render every chart descriptor in a JSON file.")
    run.add_argument("charts", type=Path, help="JSON array of {title, data} descriptors.")
    run.add_argument("--out", type=Path, default=Path("charts"))
    run.add_argument("--width", type=int, default=960, help="Container width.")
    run.add_argument("--height", type=int, default=400, help="Container height; 0 uses the fallback height.")
    run.add_argument("--format", choices=["svg", "png"], default="svg")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        if args.width <= 0:
            raise ValueError("width must be > 0")
        if args.height < 0:
            raise ValueError("height must be >= 0")
        written = _render_all(args.charts, args.out, args.width, args.height, args.format)
        for path in written:
            print(path)
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


def _render_all(source: Path, out_dir: Path, width: int, height: int, fmt: str) -> list[Path]:
    charts = load_charts(source)
    written: list[Path] = []
    for index, chart in enumerate(charts):
        path = out_dir / f"{index:02d}-{chart.slug}.{fmt}"
        container = FixedContainer(width, height)
        if fmt == "svg":
            surface = SvgSurface(title=chart.title)
        else:
            surface = RasterSurface()
        view = ChartView(container, surface, name=chart.slug)
        try:
            drawing = view.mount(chart.data)
        finally:
            view.dispose()
        if drawing.is_blank:
            LOGGER.info("%s: no data, writing blank chart", chart.title)
        if isinstance(surface, SvgSurface):
            surface.write(path)
        else:
            surface.save(path)
        written.append(path)
    return written


if __name__ == "__main__":
    raise SystemExit(main())
