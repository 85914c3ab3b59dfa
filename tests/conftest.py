import asyncio
from collections.abc import Callable, Coroutine, Iterator
from typing import Any

import pytest

from borrower_ledger import BorrowerLedger
from borrower_ledger.unit_of_work import UOWFactoryType, create_schema, create_uow_factory
from tests.helpers import IDENTITY_POOL, sqlite_url

Runner = Callable[[Coroutine[Any, Any, Any]], Any]


@pytest.fixture
def run() -> Iterator[Runner]:
    """Drive coroutines to completion on one event loop for the whole test."""
    loop = asyncio.new_event_loop()
    yield loop.run_until_complete
    loop.close()


@pytest.fixture
def uow_factory(tmp_path, run: Runner) -> Iterator[UOWFactoryType]:
    factory = create_uow_factory(sqlite_url(tmp_path / "ledger.db"))
    engine = factory().engine
    run(create_schema(engine))
    yield factory
    run(engine.dispose())


@pytest.fixture
def ledger(uow_factory: UOWFactoryType) -> BorrowerLedger:
    return BorrowerLedger(uow_factory, IDENTITY_POOL)
