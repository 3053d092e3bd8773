import logging

from .game_round import GameRound
from .secret_source_interface import SecretSourceInterface

log = logging.getLogger(__name__)

class GameSession:
    '''
    Owns the current round on the event-loop thread.  
    The UI shell forwards `tick` and `guessChanged` here. Events that 
    arrive after a win are stale and get ignored.  
    '''
    def __init__(self, /, source: SecretSourceInterface) -> None:
        self.source = source
        self.round_number = 0
        self.__round: GameRound | None = None
    
    @property
    def round(self) -> GameRound:
        assert self.__round is not None, 'startRound() has not been called'
        return self.__round
    
    def startRound(self) -> GameRound:
        self.__round = GameRound.create(self.source)
        self.round_number += 1
        log.info('Round %d started.', self.round_number)
        log.debug('Round %d secret: %d', self.round_number, self.__round.secret)
        return self.__round
    
    def isAcceptingEvents(self) -> bool:
        return self.__round is not None and not self.__round.is_won
    
    def tick(self) -> GameRound:
        if not self.isAcceptingEvents():
            log.debug('Ignoring stale tick.')
            return self.round
        self.__round = self.round.advanceTime()
        return self.__round
    
    def guessChanged(self, raw_text: str) -> GameRound:
        if not self.isAcceptingEvents():
            log.debug('Ignoring stale guess %r.', raw_text)
            return self.round
        self.__round = self.round.submitGuess(raw_text)
        if self.__round.is_won:
            log.info(
                'Round %d won in %d seconds.', 
                self.round_number, self.__round.elapsed_seconds, 
            )
        return self.__round
