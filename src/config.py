"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.item.testable import StackPolicy


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # TestableStack 수량 비교: at_least | exact
    STACK_MATCH_POLICY: StackPolicy = StackPolicy.AT_LEAST

    # 시작 시 기본 arg parser 5종 등록 여부
    REGISTER_DEFAULT_ARG_PARSERS: bool = True


settings = Settings()
