"""Pool valuation protocol.

Any object with a matching ``ownership`` method can value shares; the ledger
never inspects the pool beyond this call.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PoolValuation(Protocol):
    """Contract for the pool that issued the borrowed shares."""

    def ownership(self, shares: int) -> int:
        """Value of ``shares`` in the pool's valuation units.

        Must be pure and deterministic: the ledger compares the result
        against a borrower's limit and assumes nothing else changes.
        """
        ...
