"""Logging setup helpers for borrower ledger startup."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure base logging and quiet the storage driver loggers."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


def configure_ledger_debug_logging(components_spec: str | None) -> None:
    """Enable DEBUG logs for selected coordinator loggers (e.g. "borrowers,migration")."""
    components = _parse_csv(components_spec)
    for component in components:
        logging.getLogger(f"borrower_ledger.coordinators.{component}").setLevel(logging.DEBUG)
    if components:
        logger.info("Enabling DEBUG logging for ledger components: %s", components)


def _parse_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]
