"""CSV header row extraction.

Only the first line of the CSV text is read. Tokens are split on commas
and trimmed; empty tokens are kept because they still occupy a column
position. Quoted headers containing commas are not supported.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

CSV_DELIMITER = ","


class NoHeadersFound(Exception):
    """Raised when the CSV text has no usable header row."""


def extract_headers(raw_text: str) -> list[str]:
    """Extract the trimmed column headers from the first line of CSV text.

    Args:
        raw_text: Full content of a CSV file.

    Returns:
        Headers in column order. Duplicates and empty strings are preserved.

    Raises:
        NoHeadersFound: If the text is empty or the first line is blank.
    """
    first_line = raw_text.split("\n", 1)[0]
    if not first_line.strip():
        raise NoHeadersFound("Keine Header gefunden: die erste Zeile ist leer")

    headers = [token.strip() for token in first_line.split(CSV_DELIMITER)]
    logger.debug("Extracted {} headers: {}", len(headers), headers)
    return headers


def read_csv_text(filepath: str | Path) -> str:
    """Read a CSV file as UTF-8 text, dropping a leading byte order mark.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    logger.info("Reading CSV file: {}", filepath.name)
    return filepath.read_text(encoding="utf-8-sig")
