"""
Release tool configuration
"""
from pydantic_settings import BaseSettings

from npm_release.core.compiler import DEFAULT_DNT_MODULE


class Settings(BaseSettings):
    """Toolchain settings (read by the CLI only)"""

    # Deno toolchain
    DENO_BIN: str = "deno"
    DNT_MODULE: str = DEFAULT_DNT_MODULE

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
