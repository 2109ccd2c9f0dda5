"""
Настройки ParseKit

Значения по умолчанию для ParserConfig и внешних декодеров.
Любое значение можно переопределить через переменные окружения
с префиксом PARSEKIT_ (например PARSEKIT_DEFAULT_MAX_SIZE) или через .env.
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки библиотеки

    Примечание: настройки процесса задают только значения по умолчанию.
    Конкретный Parser всегда получает собственный неизменяемый ParserConfig.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARSEKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    ENVIRONMENT: str = "development"  # "development" или "production" (JSON логи)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"

    # ParserConfig defaults
    DEFAULT_STRICT_MODE: bool = False
    DEFAULT_MAX_DEPTH: int = 100  # Зарезервировано, не используется при детекции
    DEFAULT_ENCODING: str = "UTF-8"  # Информационное поле
    DEFAULT_MAX_SIZE: int = 100 * 1024 * 1024  # 100 MiB

    # OCR (Tesseract)
    TESSERACT_CMD: Optional[str] = None  # None = искать в PATH
    TESSDATA_PREFIX: Optional[str] = None
    OCR_LANGUAGES: str = "eng"  # "eng+rus" или "eng,rus"
    OCR_TIMEOUT: int = 120  # секунды

    # Excel
    EXCEL_MAX_ROWS_PER_TABLE: int = 0  # 0 = без ограничения

    @field_validator("OCR_LANGUAGES")
    @classmethod
    def normalize_languages(cls, v: str) -> str:
        """Приводит "eng, rus" к синтаксису tesseract: "eng+rus"."""
        languages = [x.strip() for x in v.replace(",", "+").split("+") if x.strip()]
        return "+".join(languages) or "eng"


settings = Settings()
