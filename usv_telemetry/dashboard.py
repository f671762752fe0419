"""Dashboard page assembly, mock telemetry feed and command-line entry point."""

from __future__ import annotations

import argparse
import random
import sys
import time
from html import escape
from pathlib import Path
from typing import Iterator, Optional, Protocol, Sequence

from usv_telemetry.models import TelemetryData
from usv_telemetry.views import (
    render_camera,
    render_map,
    render_status_panel,
    render_telemetry_panel,
)

__all__ = [
    "TelemetryFeed",
    "generate_mock_data",
    "render_dashboard",
    "render_page",
    "main",
]

UPDATE_INTERVAL = 1.0
STYLESHEET = "assets/styles.css"


class _RandomSource(Protocol):
    def random(self) -> float: ...


_shared_rng = random.Random()


def generate_mock_data(rng: Optional[_RandomSource] = None) -> TelemetryData:
    """Return a fresh sample with randomised position, motion, battery, engine and water data."""
    rng = rng if rng is not None else _shared_rng
    data = TelemetryData()
    data.position.latitude += (rng.random() - 0.5) * 0.001
    data.position.longitude += (rng.random() - 0.5) * 0.001
    data.velocity.speed = rng.random() * 20.0
    data.velocity.heading = rng.random() * 360.0
    data.battery.level = int(rng.random() * 100.0)
    data.engine.rpm = int(rng.random() * 3000.0)
    data.sensors.water_temperature = 15.0 + rng.random() * 15.0
    return data


def _card(header: str, content: str) -> str:
    return (
        '<div class="card">'
        f'<div class="card-header">{escape(header, quote=False)}</div>'
        f'<div class="card-content">{content}</div>'
        "</div>"
    )


def render_dashboard(data: TelemetryData) -> str:
    """Render the dashboard: map and camera in the main view, panels in the sidebar."""
    main_view = (
        '<div class="main-view">'
        + _card("USV Tracking Map", render_map(data))
        + _card("Camera Feed", render_camera())
        + "</div>"
    )
    sidebar = (
        '<div class="sidebar">'
        + _card("Telemetry Data", render_telemetry_panel(data))
        + _card("System Status", render_status_panel(data))
        + "</div>"
    )
    return f'<div class="dashboard">{main_view}{sidebar}</div>'


def render_page(data: TelemetryData) -> str:
    """Render a complete HTML document holding the dashboard."""
    return (
        "<!DOCTYPE html>"
        '<html><head><meta charset="utf-8">'
        "<title>USV Telemetry</title>"
        f'<link rel="stylesheet" href="{STYLESHEET}">'
        "</head><body>"
        f"{render_dashboard(data)}"
        "</body></html>"
    )


class TelemetryFeed:
    """Source of successive mock samples; starts from the default sample."""

    def __init__(self, rng: Optional[_RandomSource] = None) -> None:
        self.rng = rng
        self.current = TelemetryData()

    def tick(self) -> TelemetryData:
        """Replace the current sample with a new mock one and return it."""
        self.current = generate_mock_data(self.rng)
        return self.current

    def __iter__(self) -> Iterator[TelemetryData]:
        while True:
            yield self.tick()


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must be zero or greater")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must be zero or greater")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="usv-telemetry",
        description="Render the USV telemetry dashboard from a mock telemetry feed.",
    )
    parser.add_argument(
        "-n", "--count", type=_non_negative_int, default=1,
        help="number of updates to render; 0 runs until interrupted (default: 1)",
    )
    parser.add_argument(
        "-i", "--interval", type=_non_negative_float, default=UPDATE_INTERVAL,
        help="seconds between updates (default: 1)",
    )
    parser.add_argument(
        "-o", "--output", type=Path,
        help="file to rewrite with the page on each update (default: standard output)",
    )
    parser.add_argument("--seed", type=int, help="seed for the mock data generator")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the mock feed and emit the rendered page on every update."""
    args = _parser().parse_args(argv)
    feed = TelemetryFeed(random.Random(args.seed) if args.seed is not None else None)
    try:
        for number, sample in enumerate(feed, start=1):
            page = render_page(sample)
            if args.output is not None:
                args.output.write_text(page, encoding="utf-8")
            else:
                sys.stdout.write(page + "\n")
                sys.stdout.flush()
            if args.count and number >= args.count:
                break
            time.sleep(args.interval)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())