"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # 인벤토리 규격
    DEFAULT_MAX_STACK: int = 55
    HOTBAR_SIZE: int = 10
    MAIN_GRID_WIDTH: int = 40
    MAIN_GRID_HEIGHT: int = 12

    # 정적 데이터
    STACK_LIMITS_PATH: str = "src/data/stack_limits.json"
    CORE_BLOCKS_PATH: str = "src/data/core_blocks.json"


settings = Settings()
