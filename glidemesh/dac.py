"""DAC descriptions and environment settings read from a board's ini file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

from .registers import REGISTER_MASK

MAX_ENV_NAME_LENGTH = 100
MAX_ENV_VALUE_LENGTH = 256
MAX_DAC_NAME_LENGTH = 100
DACRDWR_MAX_PUSH = 16


class DacOperation(IntEnum):
    """Kind of a single DAC register access."""

    WRITE = 0
    READ_MODIFY_WRITE = 1
    READ_NO_CHECK = 2
    READ_CHECK = 3
    READ_PUSH = 4
    WRITE_MODIFY_POP = 5


def _check_text(what: str, text: str, limit: int) -> None:
    # The fixed-size buffers hold limit - 1 characters plus a terminator.
    if len(text) >= limit:
        raise ValueError(f"{what} {text!r} is longer than {limit - 1} characters")


def _check_word(what: str, value: int) -> None:
    if not 0 <= value <= REGISTER_MASK:
        raise ValueError(f"{what} {value:#x} is not a 32-bit unsigned value")


@dataclass(frozen=True)
class DacRdWr:
    """One DAC register access: operation, register address, data and mask."""

    operation: DacOperation
    address: int
    data: int = 0
    mask: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "operation", DacOperation(self.operation))
        if not 0 <= self.address <= 0xFF:
            raise ValueError(f"DAC address {self.address} outside 0..255")
        _check_word("data", self.data)
        _check_word("mask", self.mask)


@dataclass
class DacSetVideo:
    """Accesses that program the DAC for one video mode."""

    width: int
    height: int
    refresh: int
    video16bpp: bool
    operations: list[DacRdWr] = field(default_factory=list)

    def matches(self, width: int, height: int, refresh: int, video16bpp: bool) -> bool:
        return (
            self.width == width
            and self.height == height
            and self.refresh == refresh
            and bool(self.video16bpp) == bool(video16bpp)
        )


@dataclass
class DacSetMemClk:
    """Accesses that program the DAC's memory clock to one frequency."""

    frequency: int
    operations: list[DacRdWr] = field(default_factory=list)


@dataclass
class DacSetVideoMode:
    """Accesses that select 16 or 24 bits per pixel on the DAC."""

    video16bpp: bool
    operations: list[DacRdWr] = field(default_factory=list)


@dataclass
class DacDescription:
    """Everything known about driving one make of DAC."""

    manufacturer: str
    device: str
    detect: list[DacRdWr] = field(default_factory=list)
    set_video: list[DacSetVideo] = field(default_factory=list)
    set_mem_clock: list[DacSetMemClk] = field(default_factory=list)
    set_video_mode: list[DacSetVideoMode] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_text("DAC manufacturer", self.manufacturer, MAX_DAC_NAME_LENGTH)
        _check_text("DAC device", self.device, MAX_DAC_NAME_LENGTH)

    def find_video(
        self, width: int, height: int, refresh: int, video16bpp: bool
    ) -> DacSetVideo | None:
        """Return the first video setting for this mode, or None."""
        return next(
            (entry for entry in self.set_video if entry.matches(width, height, refresh, video16bpp)),
            None,
        )

    def find_mem_clock(self, frequency: int) -> DacSetMemClk | None:
        """Return the first memory clock setting for this frequency, or None."""
        return next((entry for entry in self.set_mem_clock if entry.frequency == frequency), None)

    def find_video_mode(self, video16bpp: bool) -> DacSetVideoMode | None:
        """Return the first pixel depth setting matching ``video16bpp``, or None."""
        return next(
            (entry for entry in self.set_video_mode if bool(entry.video16bpp) == bool(video16bpp)),
            None,
        )


class EnvironmentTable:
    """Name/value settings, as given in the environment section of an ini file."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, name: str, value: str) -> None:
        """Store ``value`` under ``name``, replacing any earlier value."""
        if not name:
            raise ValueError("environment variable name must not be empty")
        _check_text("environment variable name", name, MAX_ENV_NAME_LENGTH)
        _check_text("environment value", value, MAX_ENV_VALUE_LENGTH)
        self._values[name] = value

    def get(self, name: str) -> str | None:
        """Return the value stored under ``name``, or None."""
        return self._values.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)