"""Runtime configuration. Filled in from the command line (see src/cli/console.py)."""

import logging

from pydantic import BaseModel, field_validator

# Scoreboard lives only as long as the process does
IN_MEMORY_DATABASE_URL = "sqlite:///:memory:"


class Settings(BaseModel):
    database_url: str = IN_MEMORY_DATABASE_URL
    echo_sql: bool = False
    show_scoreboard: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
