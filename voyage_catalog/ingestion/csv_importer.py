"""
Bulk CSV import of catalog products.
"""
import io
from typing import List, Set
import pandas as pd
from voyage_catalog.config.app_config import MAX_REPORTED_ERRORS
from voyage_catalog.data.models.imports import ImportResult
from voyage_catalog.data.models.product import Product
from voyage_catalog.exceptions import CsvUploadError, RowMappingError
from voyage_catalog.ingestion.header_normalizer import normalize_header
from voyage_catalog.ingestion.row_mapper import map_csv_row_to_product
from voyage_catalog.utils.logging_config import get_logger
from voyage_catalog.utils.validation import missing_required_columns

# Set up logging
logger = get_logger(__name__)

# Column holding the diagnostic of rows that had more fields than the header
MALFORMED_ROW_COLUMN = "__MALFORMED_ROW__"
_MALFORMED_MARKER = "\x00malformed:"


def read_catalog_frame(csv_text: str) -> pd.DataFrame:
    """
    Parse CSV text into a string-typed DataFrame with canonical headers.

    Cells are kept as text (no NA or number coercion) and blank lines are
    skipped. When two headers normalize to the same canonical name the first
    one wins. Rows with more fields than the header stay in place with empty
    cells, and their diagnostic is stored in ``MALFORMED_ROW_COLUMN``; the
    column only exists when such rows were found.

    Args:
        csv_text (str): Raw CSV text

    Returns:
        pd.DataFrame: Rows keyed by canonical headers

    Raises:
        CsvUploadError: If the text cannot be parsed as CSV
    """
    if csv_text.startswith("\ufeff"):
        csv_text = csv_text[1:]

    try:
        expected = len(pd.read_csv(io.StringIO(csv_text), header=None, nrows=1, dtype=str, engine="python").columns)

        def keep_bad_line(bad_line: List[str]) -> List[str]:
            marker = f"{_MALFORMED_MARKER}expected {expected} fields, saw {len(bad_line)}"
            return [marker] + [""] * (expected - 1)

        df = pd.read_csv(
            io.StringIO(csv_text),
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=keep_bad_line,
        )
    except pd.errors.EmptyDataError as e:
        raise CsvUploadError("CSV file has no header row") from e
    except pd.errors.ParserError as e:
        raise CsvUploadError(f"CSV could not be parsed: {e}") from e

    # The header row is read as data so a long first row cannot turn into an index
    df.columns = [str(name) for name in df.iloc[0]]
    df = df.iloc[1:].reset_index(drop=True)

    # Short rows leave NaN in trailing cells even with keep_default_na=False
    df = df.fillna("")
    df = df.rename(columns=normalize_header)
    duplicated = df.columns.duplicated()
    if duplicated.any():
        logger.warning(f"Ignoring duplicate columns after header normalization: {df.columns[duplicated].tolist()}")
        df = df.loc[:, ~duplicated]

    if len(df.columns):
        first = df.columns[0]
        malformed = df[first].str.startswith(_MALFORMED_MARKER)
        if malformed.any():
            logger.warning(f"Found {int(malformed.sum())} rows with more fields than the header")
            df[MALFORMED_ROW_COLUMN] = df[first].where(malformed, "").str.slice(len(_MALFORMED_MARKER))
            df.loc[malformed, first] = ""

    return df


def import_products_csv(csv_text: str, max_reported_errors: int = MAX_REPORTED_ERRORS) -> ImportResult:
    """
    Import every row of a catalog CSV, isolating bad rows.

    Rows that have too many fields, fail mapping or repeat an earlier SKU
    are logged with their 1-based row index and excluded; they never abort
    the import.

    Args:
        csv_text (str): Raw CSV text
        max_reported_errors (int): Cap on the per-row messages returned

    Returns:
        ImportResult: Mapped products, row totals and capped diagnostics

    Raises:
        CsvUploadError: If the CSV is empty, unparseable or lacks required columns
    """
    if not csv_text or not csv_text.strip():
        raise CsvUploadError("File is empty")

    df = read_catalog_frame(csv_text)

    missing = missing_required_columns(df)
    if missing:
        raise CsvUploadError(f"CSV must contain required columns: {', '.join(missing)}")

    logger.info(f"Parsed CSV with {len(df)} data rows and columns: {df.columns.tolist()}")

    result = ImportResult(total_rows=len(df))
    products: List[Product] = []
    seen_skus: Set[str] = set()

    for row_number, row in enumerate(df.to_dict(orient="records"), start=1):
        row_warnings: List[str] = []
        try:
            malformed = row.pop(MALFORMED_ROW_COLUMN, "")
            if malformed:
                raise RowMappingError(malformed)
            product = map_csv_row_to_product(row, warnings=row_warnings)
            if product.sku in seen_skus:
                raise RowMappingError(f"Duplicate SKU {product.sku}")
        except RowMappingError as e:
            message = f"Row {row_number}: {e}"
            logger.error(message)
            result.error_count += 1
            if len(result.errors) < max_reported_errors:
                result.errors.append(message)
            continue

        result.warnings.extend(row_warnings)
        seen_skus.add(product.sku)
        products.append(product)

    for warning in result.warnings:
        logger.warning(warning)

    result.products = products

    if products:
        categories = pd.Series([p.category for p in products]).value_counts().to_dict()
        logger.info(f"Imported {len(products)} of {result.total_rows} rows. Products by category: {categories}")
    else:
        logger.warning(f"No valid products in {result.total_rows} rows")

    return result
