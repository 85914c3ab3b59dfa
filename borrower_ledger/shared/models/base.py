from typing import Any

from sqlalchemy import String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

UINT128_MAX = 2**128 - 1


class Uint128(TypeDecorator[int]):
    """Unsigned 128-bit integer stored as its exact decimal string.

    Keeps full precision on every backend (SQLite has no 128-bit integer type).
    """

    impl = String(39)
    cache_ok = True

    def process_bind_param(self, value: int | None, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Uint128 expects int, got {type(value).__name__}")
        if value < 0 or value > UINT128_MAX:
            raise ValueError(f"Uint128 out of range: {value}")
        return str(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> int | None:
        if value is None:
            return None
        return int(value)
