import itertools

from .secret_source_interface import SecretSourceInterface

class SecretSourceFixed(SecretSourceInterface):
    def __init__(self, *secrets: int):
        '''
        Hands out `secrets` in order, starting over after the last one.
        '''
        if not secrets:
            raise ValueError('SecretSourceFixed needs at least one secret')
        self.__cycle = itertools.cycle(secrets)
    
    def draw(self, low: int, high: int) -> int:
        secret = next(self.__cycle)
        if not low <= secret <= high:
            raise ValueError(f'Fixed secret {secret} is outside [{low}, {high}]')
        return secret
