"""Unit tests for the StockLedger domain service."""

import pytest

from backoffice.domain.exceptions import InternalError, StockInsufficient, ValidationError
from backoffice.domain.service.stock_ledger import StockLedger
from tests.fakes import FakeStockRepository, FaultyStockRepository, RacingStockRepository


class TestGetOrCreate:

    def test_creates_missing_record_with_zero_qty(self):
        repo = FakeStockRepository()
        record = StockLedger(repo).get_or_create(1, 10)
        assert record.qty == 0
        assert record.id is not None
        assert repo.find(1, 10) is not None

    def test_returns_existing_record(self):
        repo = FakeStockRepository({(1, 10): 5})
        record = StockLedger(repo).get_or_create(1, 10)
        assert record.qty == 5
        assert len(repo.list()) == 1

    def test_duplicate_insert_race_resolves_to_existing(self):
        repo = RacingStockRepository()
        record = StockLedger(repo).get_or_create(1, 10)
        assert record.qty == 7
        assert len(repo.list()) == 1


class TestAdjust:

    def test_positive_delta(self):
        repo = FakeStockRepository({(1, 10): 5})
        record = StockLedger(repo).adjust(1, 10, 3)
        assert record.qty == 8

    def test_positive_delta_on_new_pair(self):
        repo = FakeStockRepository()
        assert StockLedger(repo).adjust(1, 10, 4).qty == 4

    def test_negative_delta_within_stock(self):
        repo = FakeStockRepository({(1, 10): 5})
        assert StockLedger(repo).adjust(1, 10, -5).qty == 0

    def test_insufficient_leaves_qty_unchanged(self):
        repo = FakeStockRepository({(1, 10): 5})
        with pytest.raises(StockInsufficient) as exc_info:
            StockLedger(repo).adjust(1, 10, -6)
        assert exc_info.value.requested == 6
        assert exc_info.value.available == 5
        assert repo.qty(1, 10) == 5

    def test_non_integer_delta_rejected(self):
        with pytest.raises(ValidationError):
            StockLedger(FakeStockRepository()).adjust(1, 10, 1.5)

    def test_qty_never_negative_over_a_sequence(self):
        repo = FakeStockRepository({(1, 10): 3})
        ledger = StockLedger(repo)
        for delta in (-2, -2, 4, -5, -1, 1, -3):
            try:
                ledger.adjust(1, 10, delta)
            except StockInsufficient:
                pass
            assert repo.qty(1, 10) >= 0
        assert repo.qty(1, 10) == 1


class TestMove:

    def test_successful_move_conserves_total(self):
        repo = FakeStockRepository({(1, 10): 10, (2, 10): 1})
        move = StockLedger(repo).move(1, 2, 10, 4)
        assert move.source.qty == 6
        assert move.destination.qty == 5
        assert repo.qty(1, 10) + repo.qty(2, 10) == 11

    def test_insufficient_origin_changes_nothing(self):
        repo = FakeStockRepository({(1, 10): 2})
        with pytest.raises(StockInsufficient):
            StockLedger(repo).move(1, 2, 10, 3)
        assert repo.qty(1, 10) == 2
        assert repo.qty(2, 10) == 0

    def test_failed_credit_recredits_origin(self):
        repo = FaultyStockRepository({(1, 10): 10, (2, 10): 0}, fail_on={(2, 10): 0})
        with pytest.raises(InternalError):
            StockLedger(repo).move(1, 2, 10, 4)
        assert repo.qty(1, 10) == 10
        assert repo.qty(2, 10) == 0

    def test_failed_recredit_surfaces_the_credit_failure(self):
        repo = FaultyStockRepository(
            {(1, 10): 10, (2, 10): 0}, fail_on={(1, 10): 1, (2, 10): 0}
        )
        with pytest.raises(InternalError, match=r"\(2, 10\)"):
            StockLedger(repo).move(1, 2, 10, 4)
        assert repo.qty(1, 10) == 6

    def test_same_warehouse_move_reports_current_qty(self):
        repo = FakeStockRepository({(1, 10): 5})
        move = StockLedger(repo).move(1, 1, 10, 2)
        assert move.source.qty == 5
        assert move.destination.qty == 5
        assert repo.qty(1, 10) == 5

    @pytest.mark.parametrize("qty", [0, -1, 2.5])
    def test_qty_must_be_positive_integer(self, qty):
        with pytest.raises(ValidationError):
            StockLedger(FakeStockRepository()).move(1, 2, 10, qty)


class TestList:

    def test_filters(self):
        repo = FakeStockRepository({(1, 10): 1, (1, 11): 2, (2, 10): 3})
        ledger = StockLedger(repo)
        assert {r.product_id for r in ledger.list(warehouse_id=1)} == {10, 11}
        assert {r.warehouse_id for r in ledger.list(product_id=10)} == {1, 2}
        assert len(ledger.list()) == 3
