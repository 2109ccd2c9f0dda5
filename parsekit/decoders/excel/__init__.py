"""
Excel Decoder — модуль для обработки таблиц.

=== НАЗНАЧЕНИЕ ===
Извлечение текста из .xlsx и .xls:
- Данные из всех листов
- Строки в виде ячеек через табуляцию

=== СТЕК ТЕХНОЛОГИЙ ===
- openpyxl — парсинг .xlsx
- xlrd — парсинг старых .xls (OLE)

=== ЭКСПОРТЫ ===
- ExcelDecoder — основной декодер

=== РЕЗУЛЬТАТ ===

    Sheet: Data
    Column1<TAB>Column2
    value1<TAB>value2
"""

from .excel_decoder import ExcelDecoder

__all__ = ["ExcelDecoder"]
