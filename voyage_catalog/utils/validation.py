"""
Validation utilities for catalog uploads.
"""
from typing import List, Union
import pandas as pd
from voyage_catalog.config.app_config import (
    ALLOWED_UPLOAD_EXTENSION,
    MAX_UPLOAD_BYTES,
    MAX_UPLOAD_MB,
    REQUIRED_COLUMNS,
)
from voyage_catalog.exceptions import CsvUploadError


def validate_upload(file_name: str, content: Union[str, bytes]) -> str:
    """
    Validate an uploaded catalog file and return its text.

    Args:
        file_name (str): Name of the uploaded file
        content (Union[str, bytes]): Raw file content

    Returns:
        str: The decoded file content

    Raises:
        CsvUploadError: If the file is not a CSV, too large or empty
    """
    if not file_name or not file_name.lower().endswith(ALLOWED_UPLOAD_EXTENSION):
        raise CsvUploadError("Invalid file type. Please upload a CSV file.")

    size = len(content) if isinstance(content, bytes) else len(content.encode("utf-8"))
    if size > MAX_UPLOAD_BYTES:
        raise CsvUploadError(f"File too large. Maximum size is {MAX_UPLOAD_MB}MB.")

    if isinstance(content, bytes):
        try:
            # utf-8-sig drops the BOM spreadsheet exports tend to add
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise CsvUploadError(f"File is not valid UTF-8 text: {e}") from e
    else:
        text = content

    if not text.strip():
        raise CsvUploadError("File is empty")

    return text


def missing_required_columns(df: pd.DataFrame, required_columns: List[str] = REQUIRED_COLUMNS) -> List[str]:
    """
    List the required columns a DataFrame lacks.

    Args:
        df (pd.DataFrame): The DataFrame to check
        required_columns (List[str]): List of required column names

    Returns:
        List[str]: Missing column names, in required order
    """
    return [col for col in required_columns if col not in df.columns]
