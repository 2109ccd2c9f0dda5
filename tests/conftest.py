"""
Pytest fixtures для тестирования ParseKit
"""
import io
import logging
from datetime import datetime
from typing import Callable, Dict, List, Tuple

import pytest

from parsekit.decoders import DecoderRegistry
from parsekit.errors import DecodeError


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Настройка логирования для тестов - показываем только ошибки"""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s - %(message)s'))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.ERROR)

    yield


class RecordingDecoder:
    """Декодер-заглушка: запоминает вызовы и возвращает заданный ответ"""

    def __init__(self, result: str = "decoded", error: str = None):
        self.result = result
        self.error = error
        self.calls: List[Tuple[str, bytes]] = []

    def decode(self, tag: str, data: bytes) -> str:
        self.calls.append((tag, data))
        if self.error is not None:
            raise DecodeError(self.error)
        return self.result


@pytest.fixture
def recording_registry() -> Callable[..., Tuple[DecoderRegistry, Dict[str, RecordingDecoder]]]:
    """Реестр, где каждый тег обслуживает свой RecordingDecoder"""
    def _create(**errors: str):
        tags = ["pdf", "docx", "xlsx", "xls", "pptx", "png", "jpeg", "tiff", "bmp", "json", "xml", "text", "unknown"]
        decoders = {tag: RecordingDecoder(result=f"{tag}-text", error=errors.get(tag)) for tag in tags}
        registry = DecoderRegistry({(tag,): decoder for tag, decoder in decoders.items()})
        return registry, decoders
    return _create


@pytest.fixture
def docx_bytes() -> bytes:
    """DOCX с абзацами и таблицей"""
    from docx import Document

    doc = Document()
    doc.add_paragraph("Заголовок тестового документа")
    doc.add_paragraph("Это первый параграф с тестовым содержимым.")
    doc.add_paragraph("Это второй параграф.")

    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Колонка A"
    table.cell(0, 1).text = "Колонка B"
    table.cell(1, 0).text = "Значение 1"
    table.cell(1, 1).text = "Значение 2"

    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def pptx_bytes() -> bytes:
    """PPTX: слайд со списком, слайд с таблицей и заметками"""
    from pptx import Presentation
    from pptx.util import Inches

    prs = Presentation()

    slide = prs.slides.add_slide(prs.slide_layouts[1])
    slide.shapes.title.text = "Тестовая презентация"
    text_frame = slide.shapes.placeholders[1].text_frame
    text_frame.text = "Первый пункт"
    paragraph = text_frame.add_paragraph()
    paragraph.text = "Вложенный пункт"
    paragraph.level = 1

    slide2 = prs.slides.add_slide(prs.slide_layouts[5])
    slide2.shapes.title.text = "Таблица"
    table = slide2.shapes.add_table(2, 2, Inches(0.5), Inches(1.5), Inches(9), Inches(2.5)).table
    table.cell(0, 0).text = "Колонка A"
    table.cell(0, 1).text = "Колонка B"
    table.cell(1, 0).text = "Значение 1"
    table.cell(1, 1).text = "Значение 2"
    slide2.notes_slide.notes_text_frame.text = "Заметка докладчика"

    buffer = io.BytesIO()
    prs.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def xlsx_bytes() -> bytes:
    """XLSX с двумя листами, числами, датами и пустыми ячейками"""
    from openpyxl import Workbook

    wb = Workbook()

    sheet = wb.active
    sheet.title = "Сводка"
    sheet.append(["Раздел", "Значение", "Комментарий"])
    sheet.append(["Доход", 1250000.75, "рост 12%"])
    sheet.append(["План", None, None])

    sheet2 = wb.create_sheet("Детализация")
    sheet2.append(["Код", "Описание", "Дата"])
    sheet2.append([101, "Бурение", datetime(2025, 11, 1)])
    sheet2.append([205, "Логистика", datetime(2025, 11, 5, 12, 0)])

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def pdf_bytes() -> bytes:
    """PDF из двух страниц с текстовым слоем"""
    import fitz

    doc = fitz.open()
    doc.new_page().insert_text((72, 72), "Hello from page one")
    doc.new_page().insert_text((72, 72), "Second page text")
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def blank_pdf_bytes() -> bytes:
    """PDF без текстового слоя (как скан)"""
    import fitz

    doc = fitz.open()
    doc.new_page()
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def png_bytes() -> bytes:
    """Небольшое белое PNG изображение"""
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (40, 20), "white").save(buffer, format="PNG")
    return buffer.getvalue()
