"""Decoder configuration using pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class DecodeSettings(BaseSettings):
    """Settings shared by parsers and the file registry."""

    model_config = {"env_prefix": "TABLECAST_"}

    log_level: str = "INFO"
    strict: bool = False  # raise DecodeFailedError when any diagnostic is recorded
    encoding: str = "utf-8"
