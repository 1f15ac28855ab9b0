"""Tests for the JSON document store and its repositories."""

import json
import threading

import pytest

from backoffice.domain.exceptions import DuplicateRecordError, InternalError, StockInsufficient
from backoffice.domain.model.customer import Customer
from backoffice.domain.model.invoice import Invoice, InvoiceStatus
from backoffice.domain.model.order import Order, OrderLineItem, OrderStatus
from backoffice.domain.model.product import Product
from backoffice.domain.model.shipment import Destination, Shipment, ShipmentStatus
from backoffice.domain.model.stock import StockRecord
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)
from backoffice.domain.service.stock_ledger import StockLedger
from backoffice.infrastructure.bootstrap import json_repositories
from backoffice.infrastructure.persistence.json_database import TABLES, JsonDatabase


def _setup(tmp_path):
    db = JsonDatabase(tmp_path / "db.json")
    return db, json_repositories(db)


def _fail_write_on(monkeypatch, db: JsonDatabase, call_number: int) -> None:
    """Make the ``call_number``-th file write from now on raise OSError."""
    real_write = db._write
    calls = {"count": 0}

    def write(data):
        calls["count"] += 1
        if calls["count"] == call_number:
            raise OSError("disk full")
        real_write(data)

    monkeypatch.setattr(db, "_write", write)


def _order(customer_id: int = 1) -> Order:
    return Order.create(
        customer_id=customer_id,
        warehouse_id=1,
        items=[OrderLineItem(product_id=1, quantity=Quantity(2))],
        total=Money(3000),
    )


class TestJsonDatabase:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "db.json"
        JsonDatabase(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert set(TABLES) <= set(data)
        assert data["counters"]["orders"] == 1

    def test_memory_store_writes_nothing(self, tmp_path):
        db = JsonDatabase()
        json_repositories(db).customers.save(Customer(None, "Alice", "a@example.com"))
        assert db.file_path is None
        assert list(tmp_path.iterdir()) == []

    def test_data_survives_reopen(self, tmp_path):
        _, repos = _setup(tmp_path)
        repos.customers.save(Customer(None, "Alice", "a@example.com"))

        _, reopened = _setup(tmp_path)
        assert reopened.customers.get_by_id(1).name == "Alice"

    def test_counters_never_reuse_ids(self, tmp_path):
        db, repos = _setup(tmp_path)
        repos.orders.save(_order())
        repos.orders.save(_order())
        db.reload()
        order = _order()
        repos.orders.save(order)
        assert order.id == 3

    def test_missing_tables_are_backfilled(self, tmp_path):
        path = tmp_path / "db.json"
        path.write_text(json.dumps({"orders": [{"id": 4}]}), encoding="utf-8")
        db = JsonDatabase(path)
        assert db.snapshot("invoices") == []
        assert db.next_id("orders") == 5


class TestJsonStockRepository:

    def test_insert_rejects_duplicate_pair(self, tmp_path):
        _, repos = _setup(tmp_path)
        repos.stock.insert(StockRecord(None, 1, 1, 0))
        with pytest.raises(DuplicateRecordError):
            repos.stock.insert(StockRecord(None, 1, 1, 5))

    def test_increment_is_conditional(self, tmp_path):
        _, repos = _setup(tmp_path)
        repos.stock.insert(StockRecord(None, 1, 1, 3))
        assert repos.stock.increment(1, 1, -4) is None
        assert repos.stock.find(1, 1).qty == 3
        assert repos.stock.increment(1, 1, -3).qty == 0

    def test_increment_missing_record(self, tmp_path):
        _, repos = _setup(tmp_path)
        assert repos.stock.increment(9, 9, 1) is None

    def test_list_filters(self, tmp_path):
        _, repos = _setup(tmp_path)
        repos.stock.insert(StockRecord(None, 1, 1, 3))
        repos.stock.insert(StockRecord(None, 2, 1, 4))
        repos.stock.insert(StockRecord(None, 2, 2, 5))
        assert [r.qty for r in repos.stock.list(warehouse_id=2)] == [4, 5]
        assert [r.qty for r in repos.stock.list(product_id=1)] == [3, 4]


class TestJsonRepositories:

    def test_order_round_trip(self, tmp_path):
        _, repos = _setup(tmp_path)
        order = _order()
        repos.orders.save(order)
        loaded = repos.orders.get_by_id(order.id)
        assert loaded.items[0].qty == 2
        assert loaded.total == Money(3000)
        assert loaded.status == OrderStatus.ALLOCATED

    def test_order_list_newest_first(self, tmp_path):
        _, repos = _setup(tmp_path)
        for customer_id in (1, 2, 1):
            repos.orders.save(_order(customer_id))
        page = repos.orders.list(customer_id=1, skip=0, limit=10)
        assert page.total == 2
        assert [o.id for o in page.items] == [3, 1]

    def test_product_sku_lookup_skips_deleted(self, tmp_path):
        _, repos = _setup(tmp_path)
        product = Product(None, "SKU-1", "Widget", Money(100))
        repos.products.save(product)
        product.soft_delete()
        repos.products.save(product)
        assert repos.products.get_by_sku("SKU-1") is None
        assert repos.products.get_by_id(product.id).deleted_at is not None

    def test_shipment_round_trip(self, tmp_path):
        _, repos = _setup(tmp_path)
        shipment = Shipment.create(1, 1, Destination("1 Main St", lat=1.5, lng=-2.0))
        shipment.advance(ShipmentStatus.OUT_FOR_DELIVERY, note="picked up")
        repos.shipments.save(shipment)
        loaded = repos.shipments.get_by_id(shipment.id)
        assert loaded.destination == Destination("1 Main St", lat=1.5, lng=-2.0)
        assert [e.status for e in loaded.tracking] == [
            ShipmentStatus.CREATED,
            ShipmentStatus.OUT_FOR_DELIVERY,
        ]
        assert loaded.tracking[-1].note == "picked up"

    def test_one_invoice_per_order(self, tmp_path):
        _, repos = _setup(tmp_path)
        invoice = Invoice.for_order(1, 1, Money(10000))
        repos.invoices.save(invoice)
        invoice.transition_to(InvoiceStatus.PAID)
        repos.invoices.save(invoice)
        with pytest.raises(DuplicateRecordError):
            repos.invoices.save(Invoice.for_order(1, 1, Money(10000)))
        assert repos.invoices.get_by_order_id(1).status == InvoiceStatus.PAID


class TestFailedWrites:

    def test_failed_write_leaves_store_unchanged(self, tmp_path, monkeypatch):
        db, repos = _setup(tmp_path)
        repos.stock.insert(StockRecord(None, 1, 1, 10))
        _fail_write_on(monkeypatch, db, 1)
        with pytest.raises(OSError):
            repos.stock.increment(1, 1, -4)
        assert repos.stock.find(1, 1).qty == 10
        db.reload()
        assert repos.stock.find(1, 1).qty == 10

    def test_failed_insert_takes_back_the_id(self, tmp_path, monkeypatch):
        db, repos = _setup(tmp_path)
        _fail_write_on(monkeypatch, db, 1)
        customer = Customer(None, "Alice", "a@example.com")
        with pytest.raises(OSError):
            repos.customers.save(customer)
        assert customer.id is None
        assert repos.customers.list_all() == []
        repos.customers.save(customer)
        assert customer.id == 1

    def test_failed_move_credit_conserves_total(self, tmp_path, monkeypatch):
        db, repos = _setup(tmp_path)
        repos.stock.insert(StockRecord(None, 1, 1, 10))
        repos.stock.insert(StockRecord(None, 2, 1, 0))
        # Write 1 is the debit, write 2 the credit.
        _fail_write_on(monkeypatch, db, 2)
        with pytest.raises(OSError):
            StockLedger(repos.stock).move(1, 2, 1, 4)
        assert repos.stock.find(1, 1).qty == 10
        assert repos.stock.find(2, 1).qty == 0

    def test_failed_reservation_step_is_compensated(self, tmp_path, monkeypatch):
        db, repos = _setup(tmp_path)
        repos.stock.insert(StockRecord(None, 1, 1, 10))
        repos.stock.insert(StockRecord(None, 1, 2, 10))
        _fail_write_on(monkeypatch, db, 2)
        service = InventoryReservationService(StockLedger(repos.stock))
        with pytest.raises(InternalError):
            service.reserve(1, {1: 3, 2: 3})
        assert repos.stock.find(1, 1).qty == 10
        assert repos.stock.find(1, 2).qty == 10


class TestConcurrentAdjustments:

    def test_concurrent_debits_never_oversell(self, tmp_path):
        _, repos = _setup(tmp_path)
        ledger = StockLedger(repos.stock)
        ledger.adjust(1, 1, 10)
        barrier = threading.Barrier(40)
        outcomes: list[bool] = []

        def debit():
            barrier.wait()
            try:
                ledger.adjust(1, 1, -1)
            except StockInsufficient:
                outcomes.append(False)
            else:
                outcomes.append(True)

        threads = [threading.Thread(target=debit) for _ in range(40)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert outcomes.count(True) == 10
        assert outcomes.count(False) == 30
        assert repos.stock.find(1, 1).qty == 0
