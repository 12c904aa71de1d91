from __future__ import annotations

import sys
import threading
import time
import types

import pytest

from docsim.data import extraction
from docsim.data.extraction import ExtractionError, FileType, extract_text


@pytest.fixture
def fresh_converter(monkeypatch):
    monkeypatch.setattr(extraction, "_converter", None)


def fake_module(monkeypatch, name, **attrs):
    module = types.ModuleType(name)
    for key, value in attrs.items():
        setattr(module, key, value)
    monkeypatch.setitem(sys.modules, name, module)
    return module


class FakeStream:
    def __init__(self, name, stream):
        self.name = name
        self.stream = stream


class TestFileType:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("report.pdf", FileType.PDF),
            ("REPORT.PDF", FileType.PDF),
            ("notes.docx", FileType.DOCX),
            ("notes.txt", FileType.TXT),
            ("archive.tar.txt", FileType.TXT),
            ("image.png", None),
            ("README", None),
            ("", None),
        ],
    )
    def test_from_filename(self, name, expected):
        assert FileType.from_filename(name) is expected

    def test_from_extension(self):
        assert FileType.from_extension("DocX") is FileType.DOCX
        assert FileType.from_extension(".txt") is FileType.TXT
        assert FileType.from_extension("doc") is None


class TestTxtExtraction:
    def test_decodes_and_strips(self):
        assert extract_text("  Hello world.\n".encode("utf-8"), FileType.TXT) == "Hello world."

    def test_unicode(self):
        text = "Dia senang. Ünïcode!"
        assert extract_text(text.encode("utf-8"), FileType.TXT) == text

    def test_invalid_utf8(self):
        with pytest.raises(ExtractionError):
            extract_text(b"\xff\xfe\xfa", FileType.TXT)


class TestDoclingExtraction:
    def test_missing_docling(self, fresh_converter, monkeypatch):
        monkeypatch.setitem(sys.modules, "docling.document_converter", None)
        with pytest.raises(ExtractionError, match="requires 'docling'"):
            extract_text(b"%PDF-1.4", FileType.PDF)

    def test_converter_failure_is_wrapped(self, monkeypatch):
        calls = []

        class BrokenConverter:
            def convert(self, stream):
                calls.append(stream.name)
                raise RuntimeError("corrupt file")

        fake_module(monkeypatch, "docling.datamodel.base_models", DocumentStream=FakeStream)
        monkeypatch.setattr(extraction, "_converter", BrokenConverter())
        with pytest.raises(ExtractionError, match="Failed to extract DOCX: corrupt file"):
            extract_text(b"PK\x03\x04", FileType.DOCX)
        assert calls == ["upload.docx"]

    def test_exports_document_text(self, monkeypatch):
        class Converter:
            def convert(self, stream):
                document = types.SimpleNamespace(export_to_text=lambda: "  First one. Second one.\n")
                return types.SimpleNamespace(document=document)

        fake_module(monkeypatch, "docling.datamodel.base_models", DocumentStream=FakeStream)
        monkeypatch.setattr(extraction, "_converter", Converter())
        assert extract_text(b"%PDF-1.4", FileType.PDF) == "First one. Second one."

    def test_converter_built_once_across_threads(self, fresh_converter, monkeypatch):
        built = []

        class SlowConverter:
            def __init__(self):
                time.sleep(0.05)
                built.append(self)

        fake_module(monkeypatch, "docling.document_converter", DocumentConverter=SlowConverter)
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(extraction._get_converter()))
            for _ in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(built) == 1
        assert all(r is built[0] for r in results)

    def test_docx_round_trip(self, fresh_converter, tmp_path):
        pytest.importorskip("docling")
        docx = pytest.importorskip("docx")
        document = docx.Document()
        document.add_paragraph("Cats sleep all day. Dogs bark at night.")
        path = tmp_path / "sample.docx"
        document.save(str(path))

        text = extract_text(path.read_bytes(), FileType.DOCX)
        assert "Cats sleep all day." in text
        assert "Dogs bark at night." in text
