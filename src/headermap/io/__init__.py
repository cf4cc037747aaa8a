"""CSV header reading."""

from headermap.io.csv_headers import NoHeadersFound, extract_headers, read_csv_text

__all__ = [
    "extract_headers",
    "read_csv_text",
    "NoHeadersFound",
]
