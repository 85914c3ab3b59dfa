"""Proportional share pool."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SharePool:
    """Pool of ``size`` value units divided into ``shares`` claims.

    All conversions round down. An empty pool values shares 1:1.
    """

    size: int = 0
    shares: int = 0

    def __post_init__(self) -> None:
        if self.size < 0 or self.shares < 0:
            raise ValueError(f"SharePool amounts must be non-negative: {self}")

    def ownership(self, shares: int) -> int:
        if self.shares == 0:
            return shares
        return shares * self.size // self.shares
