"""Pool valuation: the protocol the ledger consumes and a proportional implementation."""

from borrower_ledger.pool.protocol import PoolValuation
from borrower_ledger.pool.share_pool import SharePool

__all__ = ["PoolValuation", "SharePool"]
