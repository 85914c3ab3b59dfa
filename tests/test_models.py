"""
Uint128 column type.
"""

import pytest

from borrower_ledger.shared.models import UINT128_MAX, Uint128


@pytest.fixture
def column_type():
    return Uint128()


def test_bind_stores_exact_decimal_string(column_type):
    assert column_type.process_bind_param(UINT128_MAX, None) == str(UINT128_MAX)


def test_result_parses_back_to_int(column_type):
    assert column_type.process_result_value("340282366920938463463374607431768211455", None) == (
        UINT128_MAX
    )


def test_none_passes_through(column_type):
    assert column_type.process_bind_param(None, None) is None
    assert column_type.process_result_value(None, None) is None


@pytest.mark.parametrize("value", [-1, UINT128_MAX + 1])
def test_out_of_range_is_rejected(column_type, value):
    with pytest.raises(ValueError):
        column_type.process_bind_param(value, None)


@pytest.mark.parametrize("value", [True, 1.0, "1"])
def test_non_int_is_rejected(column_type, value):
    with pytest.raises(ValueError):
        column_type.process_bind_param(value, None)


def test_full_range_round_trips_through_ledger(run, ledger):
    run(ledger.set("whale", UINT128_MAX))
    run(ledger.borrow("whale", UINT128_MAX))

    loaded = run(ledger.load("whale"))
    assert loaded.shares == UINT128_MAX

    with pytest.raises(OverflowError):
        run(ledger.borrow("whale", 1))
