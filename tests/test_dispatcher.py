"""
Тесты диспетчера Parser: лимит размера, маршрутизация, ошибки
"""
import threading
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from parsekit import Parser, STRICT_MARKER
from parsekit.decoders import DecoderRegistry
from parsekit.errors import DecodeFailure, EmptyInput, ErrorKind, IoFailure, SizeLimitExceeded

MIB = 1024 * 1024


class TestParseString:
    """parse_string / parse"""

    def test_trims_whitespace(self):
        assert Parser().parse_string("  hello world  ") == "hello world"

    def test_strict_mode_appends_marker(self):
        assert Parser.strict().parse("  hi  ") == "hi strict=true"
        assert STRICT_MARKER == "strict=true"

    def test_whitespace_only_is_not_empty(self):
        assert Parser().parse_string("   ") == ""
        assert Parser.strict().parse_string("   ") == " strict=true"

    def test_empty_string_rejected(self):
        with pytest.raises(EmptyInput) as exc_info:
            Parser().parse_string("")
        assert str(exc_info.value) == "Input cannot be empty"
        assert exc_info.value.kind is ErrorKind.EMPTY_INPUT

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            Parser().parse_string(b"bytes")


class TestSizeLimit:
    """max_size проверяется до детекции и декодирования"""

    def test_default_limit_rejects_101_mib(self, recording_registry):
        registry, decoders = recording_registry()
        data = b"%PDF" + b"\x00" * (101 * MIB - 4)

        with pytest.raises(SizeLimitExceeded) as exc_info:
            Parser(registry=registry).parse_bytes(data, "big.pdf")

        assert exc_info.value.actual == 105906176
        assert exc_info.value.limit == 104857600
        assert str(exc_info.value) == "File size 105906176 exceeds maximum allowed size 104857600"
        assert decoders["pdf"].calls == []

    def test_limit_checked_before_detection(self, recording_registry):
        registry, _ = recording_registry()
        parser = Parser(registry=registry, max_size=10)

        with patch("parsekit.dispatcher.FormatDetector.detect") as detect:
            with pytest.raises(SizeLimitExceeded):
                parser.parse_bytes(b"x" * 11)
            detect.assert_not_called()

    def test_exact_limit_accepted(self, recording_registry):
        registry, decoders = recording_registry()
        parser = Parser(registry=registry, max_size=11)

        assert parser.parse_bytes(b"Hello World") == "text-text"
        assert decoders["text"].calls == [("text", b"Hello World")]

    def test_zero_limit_rejects_everything(self, recording_registry):
        registry, _ = recording_registry()
        with pytest.raises(SizeLimitExceeded):
            Parser(registry=registry, max_size=0).parse_bytes(b"a")

    def test_shortcuts_enforce_limit(self, recording_registry):
        registry, decoders = recording_registry()
        parser = Parser(registry=registry, max_size=3)

        with pytest.raises(SizeLimitExceeded):
            parser.parse_pdf(b"%PDF-1.4")
        assert decoders["pdf"].calls == []

    def test_parse_path_rejects_before_reading(self, tmp_path, recording_registry):
        registry, _ = recording_registry()
        path = tmp_path / "large.txt"
        path.write_bytes(b"x" * 100)

        with patch("pathlib.Path.read_bytes") as read_bytes:
            with pytest.raises(SizeLimitExceeded) as exc_info:
                Parser(registry=registry, max_size=50).parse_path(path)
            read_bytes.assert_not_called()

        assert exc_info.value.actual == 100
        assert exc_info.value.limit == 50


class TestParseBytes:
    """Маршрутизация буфера к декодеру по тегу"""

    @pytest.mark.parametrize("data, filename, tag", [
        (b"%PDF-1.4 body", None, "pdf"),
        (b"\x89PNG\r\n\x1a\n....", None, "png"),
        (b"\xff\xd8\xff\xe0", None, "jpeg"),
        (b"PK\x03\x04 word/document.xml", None, "docx"),
        (b"PK\x03\x04 ppt/slides", None, "pptx"),
        (b"\xd0\xcf\x11\xe0 legacy", None, "xls"),
        (b'{"key": "value"}', None, "json"),
        (b"<html><body>Hi</body></html>", None, "xml"),
        (b"Hello World", None, "text"),
        (b"Hello World", "notes.xyz", "text"),
        (b"a,b\n1,2", "data.pdf", "pdf"),
    ])
    def test_routes_by_tag(self, recording_registry, data, filename, tag):
        registry, decoders = recording_registry()

        result = Parser(registry=registry).parse_bytes(data, filename)

        assert result == f"{tag}-text"
        assert decoders[tag].calls == [(tag, data)]

    def test_empty_data_rejected(self, recording_registry):
        registry, decoders = recording_registry()

        with pytest.raises(EmptyInput) as exc_info:
            Parser(registry=registry).parse_bytes(b"")

        assert str(exc_info.value) == "Data cannot be empty"
        assert all(not d.calls for d in decoders.values())

    def test_dispatch_accepts_empty_buffer(self, recording_registry):
        registry, decoders = recording_registry()
        assert Parser(registry=registry).dispatch(b"") == "text-text"
        assert decoders["text"].calls == [("text", b"")]

    def test_bytearray_and_memoryview(self, recording_registry):
        registry, decoders = recording_registry()
        parser = Parser(registry=registry)

        parser.parse_bytes(bytearray(b"%PDF-1.4"))
        parser.parse_bytes(memoryview(b"%PDF-1.4"))

        assert [data for _, data in decoders["pdf"].calls] == [b"%PDF-1.4", b"%PDF-1.4"]

    def test_rejects_str(self):
        with pytest.raises(TypeError):
            Parser().parse_bytes("text")

    def test_decoder_failure_is_wrapped(self, recording_registry):
        registry, _ = recording_registry(pdf="Failed to parse PDF: broken xref")

        with pytest.raises(DecodeFailure) as exc_info:
            Parser(registry=registry).parse_bytes(b"%PDF-broken")

        error = exc_info.value
        assert error.format == "pdf"
        assert error.message == "Failed to parse PDF: broken xref"
        assert str(error) == "Failed to parse PDF: broken xref"
        assert error.kind is ErrorKind.DECODE_FAILURE

    def test_missing_decoder(self):
        registry = DecoderRegistry({})
        with pytest.raises(DecodeFailure) as exc_info:
            Parser(registry=registry).parse_bytes(b"%PDF-1.4")
        assert exc_info.value.format == "pdf"

    def test_fallback_decoder(self, recording_registry):
        _, decoders = recording_registry()
        registry = DecoderRegistry({}, fallback=decoders["text"])

        assert Parser(registry=registry).parse_bytes(b"%PDF-1.4") == "text-text"
        assert decoders["text"].calls == [("pdf", b"%PDF-1.4")]

    def test_foreign_exception_is_wrapped(self):
        class BrokenDecoder:
            def decode(self, tag, data):
                raise KeyError("missing table")

        registry = DecoderRegistry({("pdf",): BrokenDecoder()})

        with pytest.raises(DecodeFailure) as exc_info:
            Parser(registry=registry).parse_bytes(b"%PDF-1.4")

        assert exc_info.value.format == "pdf"
        assert "missing table" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_foreign_exception_without_message(self):
        class SilentDecoder:
            def decode(self, tag, data):
                raise RuntimeError()

        with pytest.raises(DecodeFailure) as exc_info:
            Parser(registry=DecoderRegistry({("json",): SilentDecoder()})).parse_bytes(b"{}")
        assert exc_info.value.message == "RuntimeError"


class TestParsePath:
    """Чтение файла и ошибки ввода-вывода"""

    def test_reads_and_dispatches(self, tmp_path, recording_registry):
        registry, decoders = recording_registry()
        path = tmp_path / "doc.json"
        path.write_bytes(b"not json")

        assert Parser(registry=registry).parse_path(path) == "json-text"
        assert decoders["json"].calls == [("json", b"not json")]

    def test_accepts_str_path(self, tmp_path, recording_registry):
        registry, _ = recording_registry()
        path = tmp_path / "notes.txt"
        path.write_text("hello", encoding="utf-8")

        assert Parser(registry=registry).parse_file(str(path)) == "text-text"

    def test_empty_file_goes_to_text_decoder(self, tmp_path, recording_registry):
        registry, decoders = recording_registry()
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")

        assert Parser(registry=registry).parse_path(path) == "text-text"
        assert decoders["text"].calls == [("text", b"")]

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.pdf"

        with pytest.raises(IoFailure) as exc_info:
            Parser().parse_path(path)

        assert str(exc_info.value).startswith("Failed to read file: ")
        assert str(path) in exc_info.value.context
        assert isinstance(exc_info.value, OSError)

    def test_directory(self, tmp_path):
        with pytest.raises(IoFailure):
            Parser().parse_path(tmp_path)

    def test_detect_path(self, tmp_path):
        path = tmp_path / "scan.txt"
        path.write_bytes(b"\x89PNG\r\n\x1a\n")
        assert Parser().detect_path(path) == "png"

    def test_detect_path_rejects_before_reading(self, tmp_path):
        path = tmp_path / "big.pdf"
        path.write_bytes(b"%PDF-1.4" + b"x" * 100)

        with patch("pathlib.Path.read_bytes") as read_bytes, patch("parsekit.dispatcher.FormatDetector.detect") as detect:
            with pytest.raises(SizeLimitExceeded) as exc_info:
                Parser(max_size=10).detect_path(path)
            read_bytes.assert_not_called()
            detect.assert_not_called()
        assert exc_info.value.actual == 108

    def test_detect_path_missing_file(self, tmp_path):
        with pytest.raises(IoFailure):
            Parser().detect_path(tmp_path / "missing.pdf")


class TestParserConfig:
    """Опции, strict-режим и неизменяемость"""

    def test_defaults(self):
        assert Parser().config == {
            "strict_mode": False,
            "max_depth": 100,
            "encoding": "UTF-8",
            "max_size": 100 * MIB,
        }

    def test_options_merge_over_defaults(self):
        parser = Parser({"max_size": 1024}, strict_mode=True)
        assert parser.config["max_size"] == 1024
        assert parser.config["max_depth"] == 100
        assert parser.strict_mode is True

    def test_strict_constructor_keeps_options(self):
        parser = Parser.strict(max_size=10)
        assert parser.strict_mode is True
        assert parser.config["max_size"] == 10

    def test_unknown_options_ignored(self):
        assert "verbose" not in Parser(verbose=True).config

    def test_invalid_option_type(self):
        with pytest.raises(ValidationError):
            Parser(max_size="big")

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            Parser(max_size=-1)

    def test_config_is_frozen(self):
        parser = Parser()
        with pytest.raises(ValidationError):
            parser.parser_config.max_size = 1

    def test_config_dict_is_a_copy(self):
        parser = Parser()
        parser.config["max_size"] = 1
        assert parser.config["max_size"] == 100 * MIB

    def test_repr(self):
        assert "max_size=10" in repr(Parser(max_size=10))


class TestHelpers:
    """Детекция и проверки без декодирования"""

    def test_supported_formats(self):
        formats = Parser.supported_formats()
        assert "pdf" in formats and "htm" in formats and "csv" in formats

    def test_supports_file(self):
        parser = Parser()
        assert parser.supports_file("report.PDF")
        assert not parser.supports_file("archive.zip")
        assert not parser.supports_file("Makefile")

    def test_detect_format(self):
        parser = Parser()
        assert parser.detect_format("page.html") == "xml"
        assert parser.detect_format("photo.jpg") == "jpeg"
        assert parser.detect_format("archive.zip") == "unknown"
        assert parser.detect_format("") == "unknown"
        assert parser.detect_format(None) == "unknown"

    def test_detect_format_from_bytes(self):
        assert Parser().detect_format_from_bytes(b"%PDF-1.4") == "pdf"
        assert Parser().detect_format_from_bytes(b"hello") == "text"

    def test_valid_input(self):
        assert Parser.valid_input("text")
        assert not Parser.valid_input("")
        assert not Parser.valid_input(None)
        assert not Parser.valid_input(b"bytes")

    def test_valid_file(self, tmp_path):
        existing = tmp_path / "notes.txt"
        existing.write_text("hi", encoding="utf-8")
        unsupported = tmp_path / "archive.zip"
        unsupported.write_bytes(b"PK")

        parser = Parser()
        assert parser.valid_file(existing)
        assert not parser.valid_file(unsupported)
        assert not parser.valid_file(tmp_path / "missing.txt")
        assert not parser.valid_file(None)

    def test_file_extension(self):
        assert Parser.file_extension("/data/Report.DOCX") == "docx"
        assert Parser.file_extension("Makefile") is None
        assert Parser.file_extension(None) is None


class TestShortcuts:
    """Прямой вызов декодеров без детекции"""

    @pytest.mark.parametrize("method, tag", [
        ("parse_pdf", "pdf"),
        ("parse_docx", "docx"),
        ("parse_pptx", "pptx"),
        ("parse_xlsx", "xlsx"),
        ("parse_json", "json"),
        ("parse_xml", "xml"),
        ("parse_text", "text"),
    ])
    def test_shortcut_skips_detection(self, recording_registry, method, tag):
        registry, decoders = recording_registry()
        data = b"Hello World"

        assert getattr(Parser(registry=registry), method)(data) == f"{tag}-text"
        assert decoders[tag].calls == [(tag, data)]

    def test_ocr_image_uses_detected_image_tag(self, recording_registry):
        registry, decoders = recording_registry()
        parser = Parser(registry=registry)

        parser.ocr_image(b"\xff\xd8\xff\xe0 jpeg")
        parser.ocr_image(b"not an image")

        assert decoders["jpeg"].calls == [("jpeg", b"\xff\xd8\xff\xe0 jpeg")]
        assert decoders["png"].calls == [("png", b"not an image")]


class TestConcurrency:
    """Один Parser из нескольких потоков"""

    def test_shared_parser(self, recording_registry):
        registry, _ = recording_registry()
        parser = Parser(registry=registry)
        inputs = [b"%PDF-1.4", b'{"a": 1}', b"hello", b"\x89PNG\r\n\x1a\n"] * 25
        results = [None] * len(inputs)

        def worker(i):
            results[i] = parser.parse_bytes(inputs[i])

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(len(inputs))]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        expected = {b"%PDF-1.4": "pdf-text", b'{"a": 1}': "json-text", b"hello": "text-text", b"\x89PNG\r\n\x1a\n": "png-text"}
        assert results == [expected[data] for data in inputs]
