"""
Тесты для ParseKit.

=== НАЗНАЧЕНИЕ ===
Pytest-набор тестов для проверки компонентов библиотеки:
- test_format_detector.py — сигнатуры и таблица расширений
- test_dispatcher.py — Parser: лимит размера, маршрутизация, ошибки
- test_decoders.py — декодеры на реальных документах (OCR подменён)
- test_text_normalizer.py — UTF-8 / Windows-1252
- test_errors.py, test_config.py, test_cli.py, test_api.py

=== ЗАПУСК ===

    # Все тесты
    pytest

    # Конкретный файл
    pytest tests/test_dispatcher.py -v

=== КОНФИГУРАЦИЯ ===
См. [tool.pytest.ini_options] в pyproject.toml и conftest.py для fixtures.
Tesseract для тестов не нужен: pytesseract подменяется через unittest.mock.
"""
