"""Typed widget specifications.

Each widget variant is a frozen dataclass built fresh from one parsed config
item. Clamping and defaulting happen in ``__post_init__`` so a spec built
directly in code obeys the same limits as one parsed from JSON.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type

from .errors import ConfigError
from .theme import ROLE_ALIASES

DEFAULT_FONT = "Inter, Segoe UI, Roboto, Arial"
SAMPLE_SERIES: Tuple[float, ...] = (3, 5, 4, 6, 8, 7, 9, 12, 10, 13)


class WidgetType(str, Enum):
    """Closed set of widget kinds; one generator per member."""

    TYPEWRITER = "typewriter"
    PROGRESS = "progress"
    BADGE = "badge"
    COUNTER = "counter"
    SPARKLINE = "sparkline"
    TICKER = "ticker"

    @classmethod
    def lookup(cls, value: Any) -> Optional["WidgetType"]:
        try:
            return cls(value)
        except ValueError:
            return None


def _number(item: Mapping[str, Any], key: str, default: Any) -> Any:
    value = item.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        try:
            value = float(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"'{key}' must be a number, got {value!r}") from exc
    if not math.isfinite(value):
        raise ConfigError(f"'{key}' must be a finite number, got {value!r}")
    return value


def _text(item: Mapping[str, Any], key: str, default: str) -> str:
    value = item.get(key)
    return default if value is None else str(value)


def _color_overrides(item: Mapping[str, Any]) -> Dict[str, Any]:
    keys = {alias for aliases in ROLE_ALIASES.values() for alias in aliases}
    return {k: item[k] for k in sorted(keys) if item.get(k) is not None}


@dataclass(frozen=True)
class WidgetSpec:
    """Fields shared by every widget."""

    kind: ClassVar[WidgetType]

    file: Optional[str] = None
    width: float = 600
    height: float = 60
    theme: Optional[str] = None
    colors: Mapping[str, Any] = field(default_factory=dict)

    @property
    def filename(self) -> str:
        return self.file or f"{self.kind.value}.svg"

    @classmethod
    def _common(cls, item: Mapping[str, Any]) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "file": item.get("file"),
            "theme": item.get("theme"),
            "colors": _color_overrides(item),
        }
        for key in ("width", "height"):
            if item.get(key) is not None:
                out[key] = _number(item, key, None)
        return out

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "WidgetSpec":
        raise NotImplementedError


@dataclass(frozen=True)
class TypewriterSpec(WidgetSpec):
    kind: ClassVar[WidgetType] = WidgetType.TYPEWRITER

    lines: Tuple[str, ...] = ("readme-motion",)
    speed_ms: float = 60
    pause_ms: float = 1200
    font_family: str = DEFAULT_FONT
    font_size: float = 26

    def __post_init__(self) -> None:
        lines = tuple(str(line) for line in self.lines or ())
        object.__setattr__(self, "lines", lines or ("readme-motion",))
        object.__setattr__(self, "speed_ms", max(10, self.speed_ms))
        object.__setattr__(self, "pause_ms", max(200, self.pause_ms))

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "TypewriterSpec":
        lines = item.get("lines")
        if lines is not None and not isinstance(lines, (list, tuple)):
            raise ConfigError("'lines' must be a list of strings")
        return cls(
            lines=tuple(lines or ()),
            speed_ms=_number(item, "speedMs", 60),
            pause_ms=_number(item, "pauseMs", 1200),
            font_family=_text(item, "fontFamily", DEFAULT_FONT),
            font_size=_number(item, "fontSize", 26),
            **cls._common(item),
        )


@dataclass(frozen=True)
class ProgressSpec(WidgetSpec):
    kind: ClassVar[WidgetType] = WidgetType.PROGRESS

    percent: float = 0
    label: str = "Progress"

    def __post_init__(self) -> None:
        object.__setattr__(self, "percent", max(0, min(100, self.percent)))

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "ProgressSpec":
        return cls(
            percent=_number(item, "percent", 0),
            label=_text(item, "label", "Progress"),
            **cls._common(item),
        )


@dataclass(frozen=True)
class BadgeSpec(WidgetSpec):
    kind: ClassVar[WidgetType] = WidgetType.BADGE

    # None means "estimate from the label and value text".
    width: Optional[float] = None
    height: float = 28
    label: str = "status"
    value: str = "passing"
    tone: str = "good"
    pulse: bool = False

    def __post_init__(self) -> None:
        if self.tone not in ("good", "warn", "bad"):
            object.__setattr__(self, "tone", "good")

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "BadgeSpec":
        return cls(
            label=_text(item, "label", "status"),
            value=_text(item, "value", "passing"),
            tone=_text(item, "tone", "good"),
            pulse=bool(item.get("pulse", False)),
            **cls._common(item),
        )


@dataclass(frozen=True)
class CounterSpec(WidgetSpec):
    kind: ClassVar[WidgetType] = WidgetType.COUNTER

    width: float = 320
    height: float = 80
    from_value: int = 0
    to_value: int = 0
    digits: Optional[int] = None
    duration_ms: float = 1200
    label: str = "Count"

    def __post_init__(self) -> None:
        start = max(0, int(math.floor(self.from_value)))
        end = max(0, int(math.floor(self.to_value)))
        needed = len(str(max(start, end)))
        digits = needed if self.digits is None else max(needed, int(self.digits))
        object.__setattr__(self, "from_value", start)
        object.__setattr__(self, "to_value", end)
        object.__setattr__(self, "digits", digits)
        object.__setattr__(self, "duration_ms", max(200, self.duration_ms))

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "CounterSpec":
        digits = _number(item, "digits", None)
        return cls(
            from_value=_number(item, "from", 0),
            to_value=_number(item, "to", 0),
            digits=None if digits is None else int(digits),
            duration_ms=_number(item, "durationMs", 1200),
            label=_text(item, "label", "Count"),
            **cls._common(item),
        )


@dataclass(frozen=True)
class SparklineSpec(WidgetSpec):
    kind: ClassVar[WidgetType] = WidgetType.SPARKLINE

    width: float = 320
    height: float = 80
    data: Tuple[Any, ...] = SAMPLE_SERIES
    label: str = "Trend"

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(self.data or ()) or SAMPLE_SERIES)

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "SparklineSpec":
        data = item.get("data")
        if data is not None and not isinstance(data, (list, tuple)):
            raise ConfigError("'data' must be a list of numbers")
        return cls(
            data=tuple(data or ()),
            label=_text(item, "label", "Trend"),
            **cls._common(item),
        )


@dataclass(frozen=True)
class TickerSpec(WidgetSpec):
    kind: ClassVar[WidgetType] = WidgetType.TICKER

    height: float = 40
    text: str = "readme-motion"
    speed: float = 60

    def __post_init__(self) -> None:
        object.__setattr__(self, "speed", max(20, self.speed))

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "TickerSpec":
        return cls(
            text=_text(item, "text", "readme-motion"),
            speed=_number(item, "speed", 60),
            **cls._common(item),
        )


SPEC_TYPES: Dict[WidgetType, Type[WidgetSpec]] = {
    WidgetType.TYPEWRITER: TypewriterSpec,
    WidgetType.PROGRESS: ProgressSpec,
    WidgetType.BADGE: BadgeSpec,
    WidgetType.COUNTER: CounterSpec,
    WidgetType.SPARKLINE: SparklineSpec,
    WidgetType.TICKER: TickerSpec,
}


def parse_widget(item: Mapping[str, Any]) -> WidgetSpec:
    """Build the spec for one config item; unknown types raise ConfigError."""
    kind = WidgetType.lookup(item.get("type"))
    if kind is None:
        raise ConfigError(f"Unknown widget type: {item.get('type')!r}")
    return SPEC_TYPES[kind].from_item(item)
