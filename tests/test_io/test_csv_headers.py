"""Tests for CSV header extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from headermap.io.csv_headers import NoHeadersFound, extract_headers, read_csv_text


class TestExtractHeaders:
    """Tests for extract_headers()."""

    def test_splits_first_line_on_commas(self) -> None:
        text = "E-Mail-Adresse,Vorname,Nachname\nmax@example.de,Max,Muster\n"
        assert extract_headers(text) == ["E-Mail-Adresse", "Vorname", "Nachname"]

    def test_trims_whitespace(self) -> None:
        headers = extract_headers("  Mail ,\tName  , Vorname\r\nx,y,z")
        assert headers == ["Mail", "Name", "Vorname"]
        assert all(h == h.strip() for h in headers)

    def test_length_matches_token_count(self) -> None:
        line = "a,b,c,d,e,f"
        assert len(extract_headers(line)) == line.count(",") + 1

    def test_keeps_empty_tokens(self) -> None:
        """Empty columns still occupy a position."""
        assert extract_headers("Mail,,Name,") == ["Mail", "", "Name", ""]

    def test_keeps_duplicates_in_order(self) -> None:
        assert extract_headers("Name,Mail,Name") == ["Name", "Mail", "Name"]

    def test_single_header(self) -> None:
        assert extract_headers("Kontakt") == ["Kontakt"]

    def test_only_first_line_is_read(self) -> None:
        assert extract_headers("Mail\nVorname,Nachname") == ["Mail"]

    def test_preserves_casing_and_umlauts(self) -> None:
        assert extract_headers("E-MAIL,Straße,Größe") == ["E-MAIL", "Straße", "Größe"]

    def test_empty_text_raises(self) -> None:
        with pytest.raises(NoHeadersFound):
            extract_headers("")

    def test_blank_first_line_raises(self) -> None:
        with pytest.raises(NoHeadersFound):
            extract_headers("   \nMail,Name")

    def test_newline_only_raises(self) -> None:
        with pytest.raises(NoHeadersFound):
            extract_headers("\n")


class TestReadCsvText:
    """Tests for read_csv_text()."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "kontakte.csv"
        path.write_text("E-Mail,Vorname,Nachname\n", encoding="utf-8")
        assert read_csv_text(path) == "E-Mail,Vorname,Nachname\n"

    def test_drops_byte_order_mark(self, tmp_path: Path) -> None:
        path = tmp_path / "excel.csv"
        path.write_bytes("\ufeffMail,Name\n".encode())
        assert extract_headers(read_csv_text(path)) == ["Mail", "Name"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="CSV file not found"):
            read_csv_text(tmp_path / "missing.csv")
