"""Tests for the catalog application service and the CLI."""

import json

import pytest

from voyage_catalog.cli.catalog_cli import main
from voyage_catalog.exceptions import CsvUploadError
from voyage_catalog.main import CatalogApp, summarize_families


@pytest.fixture
def app(tmp_path):
    catalog_app = CatalogApp(store_root=str(tmp_path / "blobs"))
    yield catalog_app
    catalog_app.close()


class TestImportUpload:
    """Tests for the admin upload flow."""

    def test_upload_replaces_catalog(self, app, sample_csv, tmp_path):
        summary = app.import_upload("catalog.csv", sample_csv.encode("utf-8"))

        assert summary.product_count == 4
        assert summary.total_rows == 4
        assert summary.categories == ["coffee", "equipment"]
        assert summary.processing_errors == []
        assert summary.message == "Successfully processed 4 products"

        stored = sorted(path.name for path in (tmp_path / "blobs").iterdir())
        assert "products.csv" in stored
        assert "products.json" in stored
        assert any(name.startswith("products_") for name in stored)
        assert [p.sku for p in app.product_repository.get_all()][:2] == ["ETH-12OZ-WB", "ETH-12OZ-GR"]

    def test_partial_upload_reports_rows(self, app, csv_factory):
        text = csv_factory(["SKU", "PRODUCTNAME", "CATEGORY", "PRICE"], [["A", "A", "coffee", "1"], ["", "B", "coffee", "1"]])
        summary = app.import_upload("catalog.csv", text)
        assert summary.product_count == 1
        assert summary.processing_errors == ["Row 2: Missing required fields: SKU"]

    def test_no_valid_rows(self, app, csv_factory):
        text = csv_factory(["SKU", "PRODUCTNAME", "CATEGORY", "PRICE"], [["", "B", "coffee", "1"]])
        with pytest.raises(CsvUploadError) as excinfo:
            app.import_upload("catalog.csv", text)
        assert excinfo.value.processing_errors == ["Row 1: Missing required fields: SKU"]
        assert app.product_repository.get_all() == []

    def test_rejects_non_csv(self, app):
        with pytest.raises(CsvUploadError):
            app.import_upload("catalog.txt", b"SKU\n")


class TestCatalogViews:
    """Tests for grouped catalog views."""

    def test_storefront_catalog(self, app, sample_csv):
        app.import_upload("catalog.csv", sample_csv)
        grouped, standalone = app.storefront_catalog()

        assert [g.product_name for g in grouped] == ["Ethiopian Yirgacheffe"]
        assert grouped[0].default_variant.sku == "ETH-12OZ-WB"
        assert [p.sku for p in standalone] == ["HB-1LB-WB", "MUG-01"]

    def test_admin_grouping(self, app, sample_csv):
        app.import_upload("catalog.csv", sample_csv)
        rows = summarize_families(app.group_catalog("admin"))
        assert [row["skus"] for row in rows] == [["ETH-12OZ-WB", "ETH-12OZ-GR"], ["HB-1LB-WB"], ["MUG-01"]]

    def test_unknown_mode(self, app):
        with pytest.raises(ValueError):
            app.group_catalog("bogus")


class TestCli:
    """Tests for the catalog-cli entry point."""

    def test_import_export_families(self, tmp_path, sample_csv, capsys):
        store = str(tmp_path / "blobs")
        csv_path = tmp_path / "catalog.csv"
        csv_path.write_text(sample_csv, encoding="utf-8")

        assert main(["--store", store, "import", str(csv_path)]) == 0
        assert "Successfully processed 4 products" in capsys.readouterr().out

        assert main(["--store", store, "export"]) == 0
        assert capsys.readouterr().out.startswith("SKU,PRODUCTNAME,CATEGORY,PRICE")

        output = tmp_path / "export.csv"
        assert main(["--store", store, "export", "--output", str(output)]) == 0
        assert output.exists()

        assert main(["--store", store, "families"]) == 0
        out = capsys.readouterr().out
        assert "Ethiopian Yirgacheffe [$16.99]" in out

    def test_import_failure(self, tmp_path, capsys):
        csv_path = tmp_path / "bad.csv"
        csv_path.write_text("SKU,PRODUCTNAME,CATEGORY,PRICE\n,B,coffee,1\n", encoding="utf-8")

        assert main(["--store", str(tmp_path / "blobs"), "import", str(csv_path)]) == 1
        out = capsys.readouterr().out
        assert "No valid products" in out
        assert "Row 1:" in out

    def test_missing_file(self, tmp_path):
        assert main(["--store", str(tmp_path / "blobs"), "import", str(tmp_path / "nope.csv")]) == 1

    def test_validate_json(self, tmp_path, capsys):
        good = tmp_path / "good.json"
        good.write_text(json.dumps({"products": [{"sku": "A", "productName": "A", "price": 1}]}), encoding="utf-8")
        bad = tmp_path / "bad.json"
        bad.write_text("[]", encoding="utf-8")

        assert main(["--store", str(tmp_path / "blobs"), "validate-json", str(good)]) == 0
        assert "1 valid products: A" in capsys.readouterr().out
        assert main(["--store", str(tmp_path / "blobs"), "validate-json", str(bad)]) == 1
