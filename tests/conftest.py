import pytest

from magic_number.game_round import GameRound
from magic_number.secret_source_fixed import SecretSourceFixed

@pytest.fixture()
def source_50():
    return SecretSourceFixed(50)

@pytest.fixture()
def round_50(source_50):
    return GameRound.create(source_50)
