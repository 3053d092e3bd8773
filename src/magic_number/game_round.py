from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .shared import (
    SECRET_LOW, SECRET_HIGH, GUESS_MIN, GUESS_MAX, RoundStatus, Hint, 
)
from .secret_source_interface import SecretSourceInterface

GUESS_PATTERN = re.compile(r'[+-]?[0-9]+')

def parseGuess(raw_input: str) -> int | None:
    '''
    Strict base-10 parse. No whitespace, underscores, or non-ASCII digits.  
    Returns `None` when `raw_input` is not an integer that fits 64 bits.  
    '''
    if GUESS_PATTERN.fullmatch(raw_input) is None:
        return None
    guess = int(raw_input)
    if not GUESS_MIN <= guess <= GUESS_MAX:
        return None
    return guess

class GameRound(BaseModel):
    secret: int
    elapsed_seconds: int = 0
    status: RoundStatus = RoundStatus.Active
    last_hint: Hint = Hint.Initial

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('secret')
    @classmethod
    def validate_secret(cls, v: int) -> int:
        if not SECRET_LOW <= v <= SECRET_HIGH:
            raise ValueError(
                f'secret must be within [{SECRET_LOW}, {SECRET_HIGH}], got {v}'
            )
        return v

    @field_validator('elapsed_seconds')
    @classmethod
    def validate_elapsed_seconds(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f'elapsed_seconds must be non-negative, got {v}')
        return v

    @model_validator(mode='after')
    def validate_win_consistency(self) -> GameRound:
        if (self.last_hint == Hint.Win) != (self.status == RoundStatus.Won):
            raise ValueError(
                f'last_hint {self.last_hint.value} contradicts status {self.status.value}'
            )
        return self

    @classmethod
    def create(cls, source: SecretSourceInterface) -> GameRound:
        return cls(secret=source.draw(SECRET_LOW, SECRET_HIGH))

    @property
    def is_won(self) -> bool:
        return self.status == RoundStatus.Won

    def advanceTime(self) -> GameRound:
        if self.is_won:
            return self
        return GameRound(
            secret=self.secret,
            elapsed_seconds=self.elapsed_seconds + 1,
            status=self.status,
            last_hint=self.last_hint,
        )

    def submitGuess(self, raw_input: str) -> GameRound:
        if self.is_won:
            return self
        guess = parseGuess(raw_input)
        if guess is None:
            return self.withHint(Hint.Initial)
        if guess == self.secret:
            return GameRound(
                secret=self.secret,
                elapsed_seconds=self.elapsed_seconds,
                status=RoundStatus.Won,
                last_hint=Hint.Win,
            )
        if guess < self.secret:
            return self.withHint(Hint.TooSmall)
        return self.withHint(Hint.TooBig)

    def withHint(self, hint: Hint) -> GameRound:
        return GameRound(
            secret=self.secret,
            elapsed_seconds=self.elapsed_seconds,
            status=self.status,
            last_hint=hint,
        )
