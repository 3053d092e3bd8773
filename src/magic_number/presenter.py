from dataclasses import dataclass
from enum import Enum

from .shared import Hint, SECRET_LOW, SECRET_HIGH

class Tone(str, Enum):
    Neutral = 'neutral'
    Positive = 'positive'
    Attention = 'attention'

    @property
    def css_class(self) -> str:
        return f'hint-{self.value}'

@dataclass(frozen=True)
class HintPresentation:
    text: str
    tone: Tone

    @property
    def css_class(self) -> str:
        return self.tone.css_class

def hintPresentation(hint: Hint) -> HintPresentation:
    match hint:
        case Hint.Initial:
            return HintPresentation(
                f'Try to guess the magic number\nFrom {SECRET_LOW} to {SECRET_HIGH}', 
                Tone.Neutral, 
            )
        case Hint.Win:
            return HintPresentation(
                'You win! Tap the replay button to play again!', 
                Tone.Positive, 
            )
        case Hint.TooSmall:
            return HintPresentation('Try to set a bigger number', Tone.Attention)
        case Hint.TooBig:
            return HintPresentation('Try to set a smaller number', Tone.Attention)
        case _:
            raise ValueError(f'Unknown hint: {hint}')

def renderElapsed(elapsed_seconds: float) -> str:
    return f'Seconds remains:\n{elapsed_seconds:.0f} '
