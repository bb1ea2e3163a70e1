"""Band and linear scales mapping chart data to pixel coordinates."""

from __future__ import annotations

from collections.abc import Sequence


class BandScale:
    """Map an ordered list of categories to evenly sized vertical bands.

    Bands are positional: a category that appears twice gets two bands, one
    per occurrence index. The bands and the inner gaps between them span the
    whole range, with no outer padding.
    """

    def __init__(
        self,
        domain: Sequence[str],
        range_: tuple[float, float],
        padding_inner: float = 0.25,
    ):
        if not 0 <= padding_inner < 1:
            raise ValueError(f"padding_inner must be in [0, 1), got {padding_inner}")
        self.domain = list(domain)
        self.range = range_
        self.padding_inner = padding_inner

        start, stop = range_
        count = len(self.domain)
        if count:
            self.step = (stop - start) / (count - padding_inner)
        else:
            self.step = 0.0
        self.bandwidth = self.step * (1 - padding_inner)

    def __len__(self) -> int:
        return len(self.domain)

    def offset(self, index: int) -> float:
        """Start of the band at ``index``."""
        if not 0 <= index < len(self.domain):
            raise IndexError(f"band index {index} out of range")
        return self.range[0] + self.step * index

    def center(self, index: int) -> float:
        return self.offset(index) + self.bandwidth / 2


class LinearScale:
    """Proportional mapping from a numeric domain to a pixel range.

    Inputs are clamped to the domain. A degenerate domain (all values equal,
    e.g. ``[0, 0]`` for an empty chart) maps everything to the range start.
    """

    def __init__(self, domain: tuple[float, float], range_: tuple[float, float]):
        self.domain = domain
        self.range = range_

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return r0
        lo, hi = min(d0, d1), max(d0, d1)
        clamped = min(max(value, lo), hi)
        return r0 + (clamped - d0) / (d1 - d0) * (r1 - r0)
