from enum import Enum

SECRET_LOW = 1
SECRET_HIGH = 100

# the original platform parses guesses into a signed 64-bit integer
GUESS_MIN = -2 ** 63
GUESS_MAX = 2 ** 63 - 1

class RoundStatus(str, Enum):
    Active = 'Active'
    Won = 'Won'

class Hint(str, Enum):
    Initial = 'Initial'
    TooSmall = 'TooSmall'
    TooBig = 'TooBig'
    Win = 'Win'
