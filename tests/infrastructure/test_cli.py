"""CLI tests through click's CliRunner, against an in-memory container."""

from click.testing import CliRunner

from backoffice.infrastructure.cli.main import cli
from tests.fakes import seeded_container


def _invoke(container, *args):
    return CliRunner().invoke(cli, list(args), obj=container)


class TestOrderCommands:

    def test_create_and_show(self):
        container = seeded_container()
        result = _invoke(container, "order", "create", "--customer", "1", "--warehouse", "1", "--items", "1:2,2:1")
        assert result.exit_code == 0, result.output
        assert "Order #1 created  (status=allocated, total=$55.00)" in result.output

        result = _invoke(container, "order", "show", "--id", "1")
        assert "Widget" in result.output
        assert "$55.00" in result.output

    def test_domain_error_exits_non_zero(self):
        result = _invoke(seeded_container(), "order", "create", "--customer", "2", "--warehouse", "1", "--items", "1:1")
        assert result.exit_code == 1
        assert "not found or inactive" in result.output

    def test_bad_items_format(self):
        result = _invoke(seeded_container(), "order", "create", "--customer", "1", "--warehouse", "1", "--items", "1-2")
        assert result.exit_code == 2
        assert "ProductId:Quantity" in result.output

    def test_validation_details_are_listed(self):
        result = _invoke(seeded_container(), "order", "create", "--customer", "1", "--warehouse", "1", "--items", "1:0")
        assert "VALIDATION_ERROR: items[0].qty must be an integer > 0" in result.output

    def test_list_and_cancel(self):
        container = seeded_container()
        _invoke(container, "order", "create", "--customer", "1", "--warehouse", "1", "--items", "1:1")
        result = _invoke(container, "order", "cancel", "--id", "1")
        assert "Order #1 cancelled." in result.output
        result = _invoke(container, "order", "list", "--status", "cancelled")
        assert "-- page 1, 1 of 1 --" in result.output


class TestStockCommands:

    def test_adjust(self):
        result = _invoke(seeded_container(), "stock", "adjust", "--warehouse", "2", "--product", "1", "--delta", "3")
        assert "Stock for product #1 in warehouse #2 is now 3" in result.output

    def test_move(self):
        container = seeded_container()
        result = _invoke(container, "stock", "move", "--from", "1", "--to", "2", "--product", "1", "--qty", "4")
        assert result.exit_code == 0, result.output
        assert container.repos.stock.qty(2, 1) == 4

    def test_show_empty(self):
        result = _invoke(seeded_container(), "stock", "show", "--warehouse", "2")
        assert "No stock records found." in result.output


class TestShipmentAndInvoiceCommands:

    def test_ship_deliver_invoice(self):
        container = seeded_container()
        _invoke(container, "order", "create", "--customer", "1", "--warehouse", "1", "--items", "1:2")
        result = _invoke(container, "shipment", "create", "--order", "1", "--address", "1 Main St")
        assert "Shipment #1 created for order #1" in result.output
        _invoke(container, "shipment", "status", "--id", "1", "--status", "out_for_delivery")
        result = _invoke(container, "shipment", "status", "--id", "1", "--status", "delivered")
        assert "Shipment #1 is now delivered" in result.output

        result = _invoke(container, "invoice", "create", "--order", "1")
        assert "Invoice #1 issued for order #1: $53.00" in result.output
        result = _invoke(container, "invoice", "status", "--id", "1", "--status", "paid")
        assert "Invoice #1 is now paid" in result.output


class TestCatalogCommands:

    def test_product_add_and_update(self):
        container = seeded_container()
        result = _invoke(container, "product", "add", "--sku", "NEW-1", "--name", "Sprocket", "--price-cents", "350")
        assert "Product #5 'Sprocket' (NEW-1) added at $3.50" in result.output
        result = _invoke(container, "product", "update", "--id", "5")
        assert result.exit_code == 2

    def test_customer_and_warehouse(self):
        container = seeded_container()
        result = _invoke(container, "customer", "add", "--name", "Dana", "--email", "d@example.com")
        assert "Customer #4 'Dana' added (active)" in result.output
        result = _invoke(container, "warehouse", "delete", "--id", "2")
        assert "Warehouse #2 deleted." in result.output
