from __future__ import annotations

import os
import logging

import dotenv
from pydantic import BaseModel, ConfigDict, field_validator

class Settings(BaseModel):
    tick_seconds: float = 1.0
    seed: int | None = None
    log_level: str = 'INFO'

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('tick_seconds')
    @classmethod
    def validate_tick_seconds(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f'tick_seconds must be positive, got {v}')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f'Unknown log level: {v}')
        return v

def loadSettings(load_dotenv: bool = True) -> Settings:
    '''
    Reads `MAGIC_NUMBER_*` environment variables, optionally from a `.env` file.  
    Raises `ValueError` (a pydantic `ValidationError`) on bad values.  
    '''
    if load_dotenv:
        dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
    raw: dict[str, str] = {}
    for field, env in (
        ('tick_seconds', 'MAGIC_NUMBER_TICK_SECONDS'), 
        ('seed',         'MAGIC_NUMBER_SEED'), 
        ('log_level',    'MAGIC_NUMBER_LOG_LEVEL'), 
    ):
        value = os.getenv(env)
        if value:
            raw[field] = value
    return Settings.model_validate(raw)
