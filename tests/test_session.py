import logging

import pytest

from magic_number.secret_source_fixed import SecretSourceFixed
from magic_number.session import GameSession
from magic_number.shared import Hint, RoundStatus


def test_round_before_start_is_an_error():
    session = GameSession(SecretSourceFixed(50))
    assert not session.isAcceptingEvents()
    with pytest.raises(AssertionError):
        session.round


def test_start_round_counts_rounds():
    session = GameSession(SecretSourceFixed(50, 20))
    first = session.startRound()
    assert first.secret == 50
    assert session.round_number == 1
    second = session.startRound()
    assert second.secret == 20
    assert session.round_number == 2
    assert session.round is second


def test_events_update_current_round():
    session = GameSession(SecretSourceFixed(50))
    session.startRound()
    session.tick()
    session.tick()
    assert session.guessChanged('10').last_hint == Hint.TooSmall
    assert session.round.elapsed_seconds == 2
    assert session.isAcceptingEvents()


def test_stale_events_after_win_are_ignored(caplog):
    session = GameSession(SecretSourceFixed(50))
    session.startRound()
    session.tick()
    with caplog.at_level(logging.INFO, logger='magic_number.session'):
        won = session.guessChanged('50')
    assert won.status == RoundStatus.Won
    assert 'won in 1 seconds' in caplog.text
    assert not session.isAcceptingEvents()
    assert session.tick() is won
    assert session.guessChanged('3') is won


def test_replay_after_win_accepts_events_again():
    session = GameSession(SecretSourceFixed(50, 60))
    session.startRound()
    session.guessChanged('50')
    fresh = session.startRound()
    assert session.isAcceptingEvents()
    assert fresh.elapsed_seconds == 0
    assert fresh.last_hint == Hint.Initial
    assert session.guessChanged('50').last_hint == Hint.TooSmall
