import codecs
import logging
import os

from pydantic import field_validator
from pydantic_settings import BaseSettings

from ecies.constants import SUPPORTED_CURVES


class Settings(BaseSettings):
    PROJECT_NAME: str = "ECIES"

    # Environment mode
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Encoding used by encrypt_text / decrypt_text
    TEXT_ENCODING: str = os.getenv("TEXT_ENCODING", "utf-8")

    # Curve used by key-generation tooling (tests, vector scripts).
    # The library itself accepts keys on any supported curve.
    DEFAULT_CURVE: str = os.getenv("DEFAULT_CURVE", "x25519")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @field_validator("TEXT_ENCODING")
    @classmethod
    def validate_text_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown TEXT_ENCODING: {v}")
        return v

    @field_validator("DEFAULT_CURVE")
    @classmethod
    def validate_default_curve(cls, v: str) -> str:
        curve = v.strip().lower()
        if curve not in SUPPORTED_CURVES:
            raise ValueError(f"DEFAULT_CURVE must be one of {', '.join(SUPPORTED_CURVES)}")
        return curve

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
