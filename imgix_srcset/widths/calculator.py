"""
Breakpoint width computation for srcset generation.

Combines physical widths of known devices with a uniform step sequence,
bounded by the widest physical display we expect to serve.
"""

from typing import Iterable, List, Optional, Sequence

from imgix_srcset.catalog import device_catalog
from imgix_srcset.models import DeviceProfile, round_half_away_from_zero


MAXIMUM_SCREEN_WIDTH = 2560 * 2  # Physical resolution of 27" iMac (2016)
SCREEN_STEP = 100

__all__ = [
    "MAXIMUM_SCREEN_WIDTH",
    "SCREEN_STEP",
    "WidthCalculator",
    "compute_breakpoints",
    "round_half_away_from_zero",
]


class WidthCalculator:
    """Derives the ordered set of widths to request from the CDN."""

    def __init__(
        self,
        devices: Optional[Iterable[DeviceProfile]] = None,
        step: int = SCREEN_STEP,
        max_width: int = MAXIMUM_SCREEN_WIDTH
    ):
        """
        Initialize the calculator.

        Args:
            devices: Device profiles to derive widths from (default: full catalog).
            step: Spacing of the uniform width sequence; also the minimum width.
            max_width: Largest width that may be requested.
        """
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        if max_width < step:
            raise ValueError(f"max_width ({max_width}) must be at least step ({step})")

        self.devices: Sequence[DeviceProfile] = tuple(
            devices if devices is not None else device_catalog.devices()
        )
        self.step = step
        self.max_width = max_width

    def device_widths(self) -> List[int]:
        """Physical pixel width of every catalog profile, in catalog order."""
        return [device.physical_width() for device in self.devices]

    def screen_widths(self) -> List[int]:
        """
        Uniform widths from 0 to the ceiling, stepping by `step`.

        The ceiling itself is always appended, whether or not it is a multiple
        of the step; duplicates are removed later.
        """
        return list(range(0, self.max_width + 1, self.step)) + [self.max_width]

    def compute_breakpoints(self) -> List[int]:
        """
        Compute the widths to generate srcset URLs for.

        Returns:
            Strictly ascending list of unique widths within [step, max_width].
        """
        candidates = self.device_widths() + self.screen_widths()
        in_range = {w for w in candidates if self.step <= w <= self.max_width}
        return sorted(in_range)


def compute_breakpoints() -> List[int]:
    """Breakpoint widths for the default device catalog."""
    return WidthCalculator().compute_breakpoints()
