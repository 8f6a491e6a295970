"""Clock synthesiser parameters for the graphics and video clocks.

The synthesiser produces

    frequency (MHz) = REFERENCE * (M + 2) / ((N + 2) * 2 ** P)

where REFERENCE * (M + 2) / (N + 2), the oscillator frequency, must lie
between 120 and 240 MHz.
"""

from __future__ import annotations

from dataclasses import dataclass

REFERENCE_MHZ = 14.318
VCO_MIN_MHZ = 120.0
VCO_MAX_MHZ = 240.0
MAX_M = 127
MAX_N = 31
MAX_P = 3
MAX_L = 15
MAX_IB = 15


def _check_range(name: str, value: int, limit: int) -> None:
    if not 0 <= value <= limit:
        raise ValueError(f"{name} {value} outside 0..{limit}")


def clock_frequency(m: int, n: int, p: int) -> float:
    """Return the frequency in MHz that the synthesiser makes from M, N and P."""
    _check_range("M", m, MAX_M)
    _check_range("N", n, MAX_N)
    _check_range("P", p, MAX_P)
    return REFERENCE_MHZ * (m + 2) / ((n + 2) * (1 << p))


def _vco_frequency(m: int, n: int) -> float:
    return REFERENCE_MHZ * (m + 2) / (n + 2)


@dataclass(frozen=True)
class ClockTiming:
    """Synthesiser settings for one requested clock frequency."""

    freq: float
    m: int
    p: int
    n: int
    l: int = 0  # noqa: E741
    ib: int = 0

    def __post_init__(self) -> None:
        _check_range("M", self.m, MAX_M)
        _check_range("P", self.p, MAX_P)
        _check_range("N", self.n, MAX_N)
        _check_range("L", self.l, MAX_L)
        _check_range("IB", self.ib, MAX_IB)

    def frequency(self) -> float:
        """Return the frequency in MHz these settings actually produce."""
        return clock_frequency(self.m, self.n, self.p)


def compute_clock_params(frequency: float) -> ClockTiming:
    """Find the M, N, P settings whose output comes closest to ``frequency`` MHz."""
    if frequency <= 0:
        raise ValueError(f"clock frequency must be positive, got {frequency}")

    best: tuple[float, int, int, int] | None = None
    for p in range(MAX_P + 1):
        for n in range(MAX_N + 1):
            ideal_m = frequency * (n + 2) * (1 << p) / REFERENCE_MHZ - 2
            for m in {int(ideal_m), int(ideal_m) + 1}:
                if not 0 <= m <= MAX_M:
                    continue
                if not VCO_MIN_MHZ <= _vco_frequency(m, n) <= VCO_MAX_MHZ:
                    continue
                error = abs(clock_frequency(m, n, p) - frequency)
                if best is None or error < best[0]:
                    best = (error, m, n, p)

    if best is None:
        raise ValueError(f"no synthesiser settings produce {frequency} MHz")
    _, m, n, p = best
    return ClockTiming(freq=frequency, m=m, p=p, n=n)