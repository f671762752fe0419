"""Telemetry records reported by an unmanned surface vehicle."""

from __future__ import annotations

import json
import re
import uuid
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

__all__ = [
    "Position",
    "Velocity",
    "BatteryStatus",
    "EngineStatus",
    "SensorData",
    "CommunicationStatus",
    "TelemetryData",
]

_INT_RANGES = {
    "u8": (0, 0xFF),
    "u16": (0, 0xFFFF),
    "i8": (-0x80, 0x7F),
    "u64": (0, 0xFFFF_FFFF_FFFF_FFFF),
}

_TIMESTAMP = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


def _spec(kind: Any, default: Any = None, factory: Any = None) -> Any:
    """Declare a field together with the kind of value it accepts."""
    if factory is not None:
        return field(default_factory=factory, metadata={"kind": kind})
    return field(default=default, metadata={"kind": kind})


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _coerce(owner: str, name: str, kind: Any, value: Any) -> Any:
    where = f"{owner}.{name}"
    if is_dataclass(kind):
        if not isinstance(value, kind):
            raise TypeError(f"{where} must be a {kind.__name__}")
        return value
    if kind in ("f32", "f64"):
        if not _is_number(value):
            raise TypeError(f"{where} must be a number")
        return float(value)
    if kind in _INT_RANGES:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{where} must be an integer")
        low, high = _INT_RANGES[kind]
        if not low <= value <= high:
            raise ValueError(f"{where} must be between {low} and {high}, got {value}")
        return value
    if kind == "bool":
        if not isinstance(value, bool):
            raise TypeError(f"{where} must be a boolean")
        return value
    if kind == "str":
        if not isinstance(value, str):
            raise TypeError(f"{where} must be a string")
        return value
    if kind == "uuid":
        if not isinstance(value, uuid.UUID):
            raise TypeError(f"{where} must be a UUID")
        return value
    if kind == "datetime":
        if not isinstance(value, datetime):
            raise TypeError(f"{where} must be a datetime")
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError(f"{where} must be timezone-aware")
        return value.astimezone(timezone.utc)
    raise TypeError(f"{where} has an unknown kind {kind!r}")


def _format_timestamp(moment: datetime) -> str:
    moment = moment.astimezone(timezone.utc)
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    micro = moment.microsecond
    if micro:
        if micro % 1000 == 0:
            text += f".{micro // 1000:03d}"
        else:
            text += f".{micro:06d}"
    return text + "Z"


def _parse_timestamp(text: Any) -> datetime:
    if not isinstance(text, str):
        raise ValueError("timestamp must be a string")
    match = _TIMESTAMP.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    day, clock, fraction, offset = match.groups()
    micro = (fraction or "")[:6].ljust(6, "0")
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        moment = datetime.fromisoformat(f"{day}T{clock}.{micro}{offset}")
    except ValueError as exc:
        raise ValueError(f"invalid timestamp: {text!r}") from exc
    return moment.astimezone(timezone.utc)


class _Record:
    """Shared validation and mapping conversion for telemetry records."""

    def __post_init__(self) -> None:
        owner = type(self).__name__
        for spec in fields(self):  # type: ignore[arg-type]
            kind = spec.metadata["kind"]
            setattr(self, spec.name, _coerce(owner, spec.name, kind, getattr(self, spec.name)))

    def _to_mapping(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for spec in fields(self):  # type: ignore[arg-type]
            kind = spec.metadata["kind"]
            value = getattr(self, spec.name)
            if is_dataclass(kind):
                result[spec.name] = value._to_mapping()
            elif kind == "uuid":
                result[spec.name] = str(value)
            elif kind == "datetime":
                result[spec.name] = _format_timestamp(value)
            else:
                result[spec.name] = value
        return result

    @classmethod
    def _from_mapping(cls, data: Any, path: str = "") -> Any:
        label = path or cls.__name__
        if not isinstance(data, Mapping):
            raise ValueError(f"{label} must be an object")
        kwargs: dict[str, Any] = {}
        for spec in fields(cls):  # type: ignore[arg-type]
            if spec.name not in data:
                raise ValueError(f"{label}: missing field {spec.name!r}")
            kind = spec.metadata["kind"]
            value = data[spec.name]
            if is_dataclass(kind):
                value = kind._from_mapping(value, f"{label}.{spec.name}")
            elif kind == "uuid":
                if not isinstance(value, str):
                    raise ValueError(f"{label}.id must be a string")
                value = uuid.UUID(value)
            elif kind == "datetime":
                value = _parse_timestamp(value)
            kwargs[spec.name] = value
        try:
            return cls(**kwargs)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc


@dataclass
class Position(_Record):
    """Geographic position in degrees and metres."""

    latitude: float = _spec("f64", 0.0)
    longitude: float = _spec("f64", 0.0)
    altitude: float = _spec("f64", 0.0)


@dataclass
class Velocity(_Record):
    """Speed in knots and heading in degrees."""

    speed: float = _spec("f64", 0.0)
    heading: float = _spec("f64", 0.0)
    vertical_speed: float = _spec("f64", 0.0)


@dataclass
class BatteryStatus(_Record):
    """State of the main battery."""

    level: int = _spec("u8", 100)
    voltage: float = _spec("f32", 12.0)
    current: float = _spec("f32", 0.0)
    temperature: float = _spec("f32", 25.0)
    charging: bool = _spec("bool", False)


@dataclass
class EngineStatus(_Record):
    """State of the propulsion engine."""

    throttle: int = _spec("u8", 0)
    rpm: int = _spec("u16", 0)
    temperature: float = _spec("f32", 25.0)
    fuel_level: float = _spec("f32", 100.0)
    running: bool = _spec("bool", False)


@dataclass
class SensorData(_Record):
    """Attitude and environmental sensor readings."""

    compass_heading: float = _spec("f64", 0.0)
    pitch: float = _spec("f64", 0.0)
    roll: float = _spec("f64", 0.0)
    yaw: float = _spec("f64", 0.0)
    water_temperature: float = _spec("f32", 20.0)
    air_temperature: float = _spec("f32", 25.0)
    humidity: float = _spec("f32", 60.0)
    pressure: float = _spec("f32", 1013.25)


@dataclass
class CommunicationStatus(_Record):
    """State of the radio link."""

    signal_strength: int = _spec("i8", -60)
    network_type: str = _spec("str", "4G")
    connected: bool = _spec("bool", True)
    data_usage: int = _spec("u64", 0)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TelemetryData(_Record):
    """One complete telemetry sample; defaults describe an idle, healthy vessel."""

    id: uuid.UUID = _spec("uuid", factory=uuid.uuid4)
    timestamp: datetime = _spec("datetime", factory=_utc_now)
    position: Position = _spec(Position, factory=Position)
    velocity: Velocity = _spec(Velocity, factory=Velocity)
    battery: BatteryStatus = _spec(BatteryStatus, factory=BatteryStatus)
    engine: EngineStatus = _spec(EngineStatus, factory=EngineStatus)
    sensors: SensorData = _spec(SensorData, factory=SensorData)
    communication: CommunicationStatus = _spec(CommunicationStatus, factory=CommunicationStatus)
    status: str = _spec("str", "Operational")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of this sample."""
        return self._to_mapping()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TelemetryData":
        """Build a sample from a mapping; raise ValueError if it is malformed."""
        return cls._from_mapping(data)

    def to_json(self) -> str:
        """Serialize this sample to a JSON document."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "TelemetryData":
        """Parse a sample from a JSON document; raise ValueError if it is malformed."""
        return cls.from_dict(json.loads(text))