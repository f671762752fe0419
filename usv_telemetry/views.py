"""HTML fragments for the telemetry dashboard widgets."""

from __future__ import annotations

import math
from decimal import Decimal
from html import escape
from typing import Optional

from usv_telemetry.models import TelemetryData

__all__ = [
    "render_camera",
    "render_map",
    "render_telemetry_panel",
    "render_status_panel",
]


class _Html(str):
    """Markup that is already safe to embed."""


def _el(
    tag: str,
    *children: str,
    cls: Optional[str] = None,
    style: Optional[str] = None,
    title: Optional[str] = None,
) -> _Html:
    attrs = "".join(
        f' {name}="{escape(value, quote=True)}"'
        for name, value in (("class", cls), ("style", style), ("title", title))
        if value is not None
    )
    body = "".join(c if isinstance(c, _Html) else escape(c, quote=False) for c in children)
    return _Html(f"<{tag}{attrs}>{body}</{tag}>")


def _display(value: float) -> str:
    """Plain shortest decimal form of a float, without exponent or trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def render_camera() -> str:
    """Render the camera feed placeholder with its controls."""
    return _el(
        "div",
        _el("div", cls="camera-grid"),
        _el("div", "HD • 30fps", cls="camera-status"),
        _el("div", cls="record-indicator"),
        _el(
            "div",
            _el("div", "📹", style="font-size: 48px; margin-bottom: 10px;"),
            _el("div", "Camera Feed"),
            _el(
                "div",
                "Waiting for video stream...",
                style="font-size: 12px; color: #999; margin-top: 10px;",
            ),
            cls="camera-placeholder",
        ),
        _el(
            "div",
            _el("button", "◀", cls="control-btn", title="Pan Left"),
            _el("button", "+", cls="control-btn", title="Zoom In"),
            _el("button", "-", cls="control-btn", title="Zoom Out"),
            _el("button", "▶", cls="control-btn", title="Pan Right"),
            cls="camera-controls",
        ),
        cls="camera-container",
    )


def render_map(data: TelemetryData) -> str:
    """Render the tracking map with the vessel marker and readouts."""
    position, velocity = data.position, data.velocity
    marker_style = (
        "left: 50%; top: 50%; transform: translate(-50%, -50%) "
        f"rotate({_display(velocity.heading)}deg);"
    )
    return _el(
        "div",
        _el("div", cls="map-grid"),
        _el("div", cls="usv-marker", style=marker_style),
        _el("div", cls="usv-trail"),
        _el(
            "div",
            _el("div", f"Lat: {position.latitude:.6f}"),
            _el("div", f"Lon: {position.longitude:.6f}"),
            _el("div", f"Alt: {position.altitude:.1f}m"),
            cls="coordinates",
        ),
        _el("div", f"{velocity.heading:.0f}°", cls="compass"),
        _el("div", f"Speed: {velocity.speed:.1f} kn", cls="speed-indicator"),
        cls="map-container",
    )


def _metric(label: str, value: str) -> _Html:
    return _el(
        "div",
        _el("span", label, cls="metric-label"),
        _el("span", value, cls="metric-value"),
        cls="metric-row",
    )


def render_telemetry_panel(data: TelemetryData) -> str:
    """Render position, velocity and battery readings."""
    position, velocity, battery = data.position, data.velocity, data.battery
    return _el(
        "div",
        _el(
            "div",
            _el("h3", "Position"),
            _metric("Latitude", f"{position.latitude:.6f}°"),
            _metric("Longitude", f"{position.longitude:.6f}°"),
            _metric("Altitude", f"{position.altitude:.1f}m"),
            cls="metric-group",
        ),
        _el(
            "div",
            _el("h3", "Velocity"),
            _metric("Speed", f"{velocity.speed:.1f} kn"),
            _metric("Heading", f"{velocity.heading:.0f}°"),
            cls="metric-group",
        ),
        _el(
            "div",
            _el("h3", "Battery"),
            _metric("Level", f"{battery.level}%"),
            _metric("Voltage", f"{battery.voltage:.1f}V"),
            cls="metric-group",
        ),
        cls="telemetry-panel",
    )


def _indicator(severity: Optional[str], title: str, detail: str) -> _Html:
    suffix = f" {severity}" if severity else ""
    return _el(
        "div",
        _el("div", cls=f"status-dot{suffix}"),
        _el(
            "div",
            _el("div", title, cls="status-title"),
            _el("div", detail, cls="status-detail"),
            cls="status-text",
        ),
        cls=f"status-indicator{suffix}",
    )


def render_status_panel(data: TelemetryData) -> str:
    """Render the system status indicators."""
    engine, battery, comms = data.engine, data.battery, data.communication

    engine_row = _indicator(
        None if engine.running else "warning",
        "Engine Status",
        "Running normally" if engine.running else "Engine stopped",
    )
    power_row = _indicator(
        None if battery.level > 20 else "critical",
        "Power System",
        f"Charging ({battery.level}%)" if battery.charging else f"On battery ({battery.level}%)",
    )
    comms_row = _indicator(
        None if comms.connected else "critical",
        "Communication",
        f"{comms.network_type} Connected" if comms.connected else "Connection lost",
    )
    signal = _el(
        "div",
        _el(
            "div",
            *(
                _el("div", cls="signal-bar", style=f"height: {height}px;")
                for height in (4, 6, 8, 10)
            ),
            cls="signal-bars",
        ),
        _el("span", f"Signal: {comms.signal_strength} dBm"),
        cls="communication-status",
    )
    navigation_row = _indicator(None, "Navigation", f"GPS Lock - {data.status}")
    environment_row = _indicator(
        "warning" if data.sensors.water_temperature > 30.0 else None,
        "Environmental",
        "All sensors nominal",
    )
    return _el(
        "div",
        _el(
            "div",
            _el("div", "98%", cls="health-score"),
            _el("div", "System Health"),
            cls="system-health",
        ),
        engine_row,
        power_row,
        comms_row,
        signal,
        navigation_row,
        environment_row,
        cls="status-panel",
    )