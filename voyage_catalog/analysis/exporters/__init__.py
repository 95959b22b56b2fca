"""
Catalog exporters package.
"""
from voyage_catalog.analysis.exporters.base_exporter import BaseExporter
from voyage_catalog.analysis.exporters.csv_exporter import CSVExporter, export_products_to_csv
from voyage_catalog.analysis.exporters.json_exporter import JSONExporter
