from abc import ABC, abstractmethod

class SecretSourceInterface(ABC):
    @abstractmethod
    def draw(self, low: int, high: int) -> int:
        '''
        Returns an integer drawn uniformly from the inclusive range [`low`, `high`].
        '''
        raise NotImplementedError
