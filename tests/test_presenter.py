from magic_number.presenter import Tone, hintPresentation, renderElapsed
from magic_number.shared import Hint


def test_hint_texts_and_tones():
    initial = hintPresentation(Hint.Initial)
    assert initial.text == 'Try to guess the magic number\nFrom 1 to 100'
    assert initial.tone == Tone.Neutral

    win = hintPresentation(Hint.Win)
    assert win.text == 'You win! Tap the replay button to play again!'
    assert win.tone == Tone.Positive

    assert hintPresentation(Hint.TooSmall).text == 'Try to set a bigger number'
    assert hintPresentation(Hint.TooBig).text == 'Try to set a smaller number'
    assert hintPresentation(Hint.TooSmall).tone == Tone.Attention
    assert hintPresentation(Hint.TooBig).css_class == 'hint-attention'


def test_render_elapsed():
    assert renderElapsed(0) == 'Seconds remains:\n0 '
    assert renderElapsed(42) == 'Seconds remains:\n42 '
    assert renderElapsed(3.0) == 'Seconds remains:\n3 '
