#!/usr/bin/env python3
"""Excel decoder for OOXML workbooks (openpyxl) and legacy OLE .xls (xlrd)."""

from __future__ import annotations

import io
import re
from datetime import date, datetime, time
from typing import Any, Iterable, List

import xlrd  # type: ignore
from openpyxl import load_workbook

from ..base_decoder import BaseDecoder
from ...errors import DecodeError
from ...format_detector import OLE_MAGIC


class ExcelDecoder(BaseDecoder):
    """Декодер таблиц: "Sheet: <имя>", затем строки с ячейками через табуляцию."""

    failure_prefix = "Failed to parse Excel file"

    def __init__(self, max_rows_per_sheet: int = 0):
        super().__init__("excel")
        self.max_rows_per_sheet = max_rows_per_sheet

    def _decode(self, tag: str, data: bytes) -> str:
        # Тег "xls" приходит и для любого OLE-контейнера, и для .xls с ZIP внутри
        if data.startswith(OLE_MAGIC):
            return self._decode_xls(data)
        return self._decode_xlsx(data)

    def _decode_xlsx(self, data: bytes) -> str:
        try:
            workbook = load_workbook(io.BytesIO(data), data_only=True, read_only=True)
        except Exception as exc:
            self.logger.error(f"Failed to load workbook | error={type(exc).__name__}: {exc}")
            raise DecodeError(f"Failed to parse Excel file: {exc}") from exc

        try:
            blocks: List[str] = []
            for sheet in workbook.worksheets:
                rows = (
                    [self._format_cell(value) for value in row]
                    for row in sheet.iter_rows(values_only=True)
                )
                blocks.append(self._render_sheet(sheet.title, rows))
        finally:
            workbook.close()

        self.logger.info(f"Excel parsing complete | sheets={len(blocks)}")
        return "\n".join(blocks)

    def _decode_xls(self, data: bytes) -> str:
        try:
            workbook = xlrd.open_workbook(file_contents=data, formatting_info=False)
        except Exception as exc:
            self.logger.error(f"Failed to open .xls with xlrd | error={type(exc).__name__}: {exc}")
            raise DecodeError(f"Failed to parse Excel file: {exc}") from exc

        try:
            blocks: List[str] = []
            for sheet in workbook.sheets():
                rows = (
                    [
                        self._format_xlrd_cell(sheet.cell_value(r, c), sheet.cell_type(r, c), workbook)
                        for c in range(sheet.ncols)
                    ]
                    for r in range(sheet.nrows)
                )
                blocks.append(self._render_sheet(sheet.name, rows))
        finally:
            workbook.release_resources()

        self.logger.info(f"Excel parsing via xlrd complete | sheets={len(blocks)}")
        return "\n".join(blocks)

    def _render_sheet(self, title: str, rows: Iterable[List[str]]) -> str:
        lines = [f"Sheet: {title or 'Sheet'}"]
        for idx, row in enumerate(rows):
            if self.max_rows_per_sheet and idx >= self.max_rows_per_sheet:
                self.logger.warning(f"Sheet truncated | sheet={title} max_rows={self.max_rows_per_sheet}")
                break
            while row and not row[-1]:
                row.pop()
            lines.append("\t".join(row))
        return "\n".join(lines) + "\n"

    def _format_cell(self, value: object) -> str:
        if value is None:
            return ""
        if isinstance(value, datetime):
            if value.time() == time(0, 0):
                return value.strftime("%Y-%m-%d")
            return value.strftime("%Y-%m-%d %H:%M:%S")
        if isinstance(value, date):
            return value.strftime("%Y-%m-%d")
        if isinstance(value, time):
            return value.strftime("%H:%M:%S")
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, float):
            return ("%.6f" % value).rstrip("0").rstrip(".")
        return self._normalize_cell_text(str(value))

    def _normalize_cell_text(self, text: str) -> str:
        if not text:
            return ""
        return re.sub(r"\s+", " ", text).strip()

    def _format_xlrd_cell(self, value: object, cell_type: int, workbook: Any) -> str:
        if cell_type == xlrd.XL_CELL_EMPTY:
            return ""
        if cell_type == xlrd.XL_CELL_BOOLEAN:
            return "TRUE" if bool(value) else "FALSE"
        if cell_type == xlrd.XL_CELL_ERROR:
            return "#ERROR"
        if cell_type == xlrd.XL_CELL_DATE:
            try:
                y, m, d, hh, mm, ss = xlrd.xldate_as_tuple(value, workbook.datemode)
            except Exception:
                return self._format_cell(value)
            if (y, m, d) == (0, 0, 0):
                return self._format_cell(time(hh, mm, ss))
            return self._format_cell(datetime(y, m, d, hh, mm, ss))
        return self._format_cell(value)
