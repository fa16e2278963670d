from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, Field
import logging


class Settings(BaseSettings):
    """Settings for the cube move finder, read from CUBESEARCH_* variables"""
    
    model_config = SettingsConfigDict(
        env_prefix="CUBESEARCH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from environment
    )
    
    # Logging
    log_level: str = Field(default="WARNING")
    log_json: bool = Field(default=False)  # JSON lines instead of console output
    
    # Output
    color: bool = Field(default=True)
    results_per_line: int = Field(default=4, ge=1)
    
    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if v is None or v == "":
            return "WARNING"
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level


# Create settings instance
settings = Settings()
