import numpy as np

from .secret_source_interface import SecretSourceInterface

class SecretSourceNumpy(SecretSourceInterface):
    def __init__(self, seed: int | None = None):
        '''
        `seed` makes the drawn secrets reproducible. `None` seeds from the OS.
        '''
        self.rng = np.random.default_rng(seed)
    
    def draw(self, low: int, high: int) -> int:
        return int(self.rng.integers(low, high, endpoint=True))
