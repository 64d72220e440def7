"""End-to-end tests for the click command-line interface."""

import pytest
from click.testing import CliRunner

from gng.infrastructure.cli.main import cli


@pytest.fixture
def invoke(tmp_path):
    runner = CliRunner()
    data_file = tmp_path / "store.json"

    def _invoke(*args: str):
        return runner.invoke(cli, ["--data-file", str(data_file), *args])

    _invoke.data_file = data_file
    return _invoke


class TestDashboard:

    def test_fresh_dashboard(self, invoke):
        result = invoke("dashboard")
        assert result.exit_code == 0
        assert "₹5,000.00" in result.output
        assert "No orders yet." in result.output

    def test_reads_do_not_create_file(self, invoke):
        invoke("dashboard")
        assert not invoke.data_file.exists()


class TestSaleCommands:

    def test_record_then_dashboard(self, invoke):
        result = invoke("sale", "record", "--items", "Laddoo Candle:5")
        assert result.exit_code == 0
        assert "Sale recorded." in result.output
        assert "Revenue ₹75.00  Cost ₹30.00  Profit ₹45.00" in result.output

        dashboard = invoke("dashboard")
        assert "₹75.00" in dashboard.output
        assert "₹4,925.00" in dashboard.output

    def test_oversell_reports_error(self, invoke):
        result = invoke("sale", "record", "--items", "laddoo:100")
        assert result.exit_code == 1
        assert "Insufficient stock for Laddoo Candle" in result.output
        assert not invoke.data_file.exists()

    def test_bad_item_format(self, invoke):
        result = invoke("sale", "record", "--items", "laddoo")
        assert result.exit_code == 2
        assert "Expected 'Product:Quantity'" in result.output

    def test_quote(self, invoke):
        result = invoke("sale", "quote", "--items", "laddoo:2,modak:1")
        assert result.exit_code == 0
        assert "Revenue: ₹48.00  Cost: ₹19.00  Profit: ₹29.00" in result.output

    def test_list_and_trend(self, invoke):
        invoke("sale", "record", "--items", "modak:1")
        listing = invoke("sale", "list")
        assert "Modak Candle x1" in listing.output
        trend = invoke("sale", "trend")
        assert "₹18.00" in trend.output


class TestCatalogueCommands:

    def test_product_add_and_list(self, invoke):
        added = invoke(
            "product", "add", "--name", "Rose Candle", "--price", "20",
            "--sku", "ROS-001", "--stock", "5",
        )
        assert added.exit_code == 0
        assert "saved as 'rose-candle'" in added.output

        listing = invoke("product", "list")
        assert "rose-candle" in listing.output

    def test_inventory_write_off_clamps(self, invoke):
        result = invoke("inventory", "add", "--product", "modak", "--quantity", "-40")
        assert result.exit_code == 0
        assert "Inventory for 'Modak Candle' is now 0" in result.output

    def test_inventory_unknown_product(self, invoke):
        result = invoke("inventory", "add", "--product", "Rose", "--quantity", "1")
        assert result.exit_code == 1
        assert "Product not found" in result.output

    def test_inventory_show(self, invoke):
        result = invoke("inventory", "show")
        assert "LAD-001" in result.output


class TestTargetCommand:

    def test_negative_target_clamps(self, invoke):
        result = invoke("target", "set", "--", "-500")
        assert result.exit_code == 0
        assert "₹0.00" in result.output

    def test_data_file_from_environment(self, tmp_path):
        data_file = tmp_path / "env-store.json"
        result = CliRunner().invoke(
            cli, ["target", "set", "900"], env={"GNG_DATA_FILE": str(data_file)}
        )
        assert result.exit_code == 0
        assert data_file.exists()
