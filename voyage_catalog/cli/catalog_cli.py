"""
Command-line interface for catalog administration.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional
from voyage_catalog.analysis.families.view_models import build_grouped_product, format_price_display
from voyage_catalog.config.app_config import GROUPING_MODES
from voyage_catalog.exceptions import CatalogError, CsvUploadError
from voyage_catalog.main import CatalogApp, summarize_families


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Voyage Catalog - Import, export and group storefront products"
    )

    parser.add_argument(
        "--store",
        type=str,
        help="Blob store directory (default: CATALOG_BLOB_ROOT or ./blob_store)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    import_parser = subparsers.add_parser("import", help="Replace the catalog with a CSV upload")
    import_parser.add_argument("file", type=str, help="CSV file to import")

    export_parser = subparsers.add_parser("export", help="Export the catalog as canonical CSV")
    export_parser.add_argument(
        "--output",
        type=str,
        help="Output file (default: print to stdout)"
    )

    families_parser = subparsers.add_parser("families", help="Show product families")
    families_parser.add_argument(
        "--mode",
        choices=GROUPING_MODES,
        default="storefront",
        help="Grouping mode (default: storefront)"
    )

    validate_parser = subparsers.add_parser("validate-json", help="Validate a JSON product payload")
    validate_parser.add_argument("file", type=str, help="JSON file to validate")

    # Parse arguments
    return parser.parse_args(args)


def _run_import(app: CatalogApp, file_path: str) -> int:
    path = Path(file_path)
    try:
        summary = app.import_upload(path.name, path.read_bytes())
    except CsvUploadError as e:
        print(f"Error: {str(e)}")
        for message in e.processing_errors:
            print(f"  {message}")
        return 1

    print(f"{summary.message} ({summary.total_rows} rows). Categories: {', '.join(summary.categories)}")
    print(f"Catalog CSV: {summary.main_csv_url}")
    print(f"Catalog JSON: {summary.json_url}")
    print(f"Archived upload: {summary.csv_url}")
    if summary.processing_errors:
        print("Rows skipped:")
        for message in summary.processing_errors:
            print(f"  {message}")
    return 0


def _run_families(app: CatalogApp, mode: str) -> int:
    families = app.group_catalog(mode)
    if not families:
        print("No product families found.")
        return 0

    for family, row in zip(families, summarize_families(families)):
        grouped = build_grouped_product(family)
        formats = ", ".join(grouped.format_labels.values()) or "-"
        print(f"{row['family']} [{format_price_display(grouped.price_range)}] base={row['base_sku']}")
        print(f"  SKUs: {', '.join(row['skus'])}  Formats: {formats}")
        if row["shared"]:
            print(f"  Shared: {', '.join(row['shared'])}")
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        int: Exit code (0 for success, non-zero for errors)
    """
    # Parse arguments
    parsed_args = parse_args(args)

    # Set log level based on verbosity
    log_level = logging.DEBUG if parsed_args.verbose else logging.INFO

    app = CatalogApp(store_root=parsed_args.store, log_level=log_level)
    try:
        if parsed_args.command == "import":
            return _run_import(app, parsed_args.file)

        if parsed_args.command == "export":
            csv_text = app.export_catalog(parsed_args.output)
            if parsed_args.output:
                print(f"Catalog exported to {parsed_args.output}")
            else:
                print(csv_text, end="")
            return 0

        if parsed_args.command == "families":
            return _run_families(app, parsed_args.mode)

        if parsed_args.command == "validate-json":
            products = app.validate_json_file(parsed_args.file)
            print(f"{len(products)} valid products: {', '.join(p.sku for p in products)}")
            return 0

        return 1

    except (CatalogError, OSError) as e:
        print(f"Error: {str(e)}")
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1
    finally:
        app.close()


if __name__ == "__main__":
    sys.exit(main())
