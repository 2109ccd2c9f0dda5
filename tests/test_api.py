"""
Тесты функций верхнего уровня пакета parsekit
"""
import pytest

import parsekit
from parsekit.errors import EmptyInput, SizeLimitExceeded


class TestModuleFunctions:

    def test_parse(self):
        assert parsekit.parse("  text  ") == "text"
        assert parsekit.parse("  text  ", strict_mode=True) == "text strict=true"

    def test_parse_empty(self):
        with pytest.raises(EmptyInput):
            parsekit.parse("")

    def test_parse_bytes(self):
        assert parsekit.parse_bytes(b"plain text", "notes.txt") == "plain text"

    def test_parse_bytes_with_options(self):
        with pytest.raises(SizeLimitExceeded):
            parsekit.parse_bytes(b"plain text", max_size=3)

    def test_parse_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_bytes(b"[1]")
        assert parsekit.parse_file(path) == "[\n  1\n]"

    def test_supported_formats(self):
        assert "docx" in parsekit.supported_formats()

    def test_supports_file(self):
        assert parsekit.supports_file("scan.TIFF")
        assert not parsekit.supports_file("binary.exe")

    @pytest.mark.parametrize("filename, tag", [
        ("report.pdf", "pdf"),
        ("page.htm", "xml"),
        ("photo.JPG", "jpeg"),
        ("archive.zip", "unknown"),
        ("", "unknown"),
        (None, "unknown"),
    ])
    def test_detect_format(self, filename, tag):
        assert parsekit.detect_format(filename) == tag

    def test_version(self):
        assert parsekit.__version__
