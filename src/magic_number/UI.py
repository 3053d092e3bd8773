from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Button, Footer, Header, Input, Static

from .presenter import Tone, hintPresentation, renderElapsed
from .secret_source_interface import SecretSourceInterface
from .session import GameSession

def titled(
    w: Widget, /, title: str, skip_bottom: bool = False,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("ctrl+r", "replay", "Replay.", priority=True),
        Binding("escape", "dismiss_keyboard", "Done typing.", priority=True),
    ]

    def __init__(
        self, 
        source: SecretSourceInterface,
        tick_seconds: float = 1.0,
    ) -> None:
        super().__init__()

        self.session = GameSession(source)
        self.tick_seconds = tick_seconds
        self.tick_timer: Timer | None = None

        self.title = "Magic Number"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)

        with Vertical(id="board"):
            yield Static("", id="time-to-win")
            yield titled(Static("", id="hint"), 'Hint')
            yield Input(
                placeholder="?", type="integer", 
                id="answer-input", 
            )
            with Center():
                yield Button("⟳ Replay", id="replay-btn")

        yield Footer(compact=True)
    
    def on_mount(self) -> None:
        self.startRound()
    
    def startRound(self) -> None:
        self.stopTimer()
        self.session.startRound()
        answerInput = self.query_one('#answer-input', Input)
        with self.prevent(Input.Changed):
            answerInput.value = ''
        self.updateTimerLabel()
        self.updateHint()
        self.tick_timer = self.set_interval(self.tick_seconds, self.onTick)
        answerInput.focus()
        self.log(f'Round {self.session.round_number} started.')
    
    def stopTimer(self) -> None:
        if self.tick_timer is not None:
            self.tick_timer.stop()
            self.tick_timer = None
    
    def onTick(self) -> None:
        if not self.session.isAcceptingEvents():
            self.stopTimer()
            return
        self.session.tick()
        self.updateTimerLabel()
    
    @on(Input.Changed, '#answer-input')
    def onAnswerChanged(self, event: Input.Changed) -> None:
        if not self.session.isAcceptingEvents():
            return
        if event.value != event.input.value:
            # queued before a replay cleared the input
            return
        self.session.guessChanged(event.value)
        self.updateHint()
        if self.session.round.is_won:
            self.stopTimer()
            self.log(f'Won in {self.session.round.elapsed_seconds} s.')
    
    @on(Button.Pressed, '#replay-btn')
    def action_replay(self) -> None:
        self.startRound()
    
    def action_dismiss_keyboard(self) -> None:
        self.set_focus(None)
    
    def updateTimerLabel(self) -> None:
        sTime: Static = self.query_one('#time-to-win', Static)
        sTime.update(renderElapsed(self.session.round.elapsed_seconds))
    
    def updateHint(self) -> None:
        presentation = hintPresentation(self.session.round.last_hint)
        sHint: Static = self.query_one('#hint', Static)
        sHint.update(presentation.text)
        sHint.remove_class(*(tone.css_class for tone in Tone))
        sHint.add_class(presentation.css_class)
    
    def exit(self, result=None, return_code=0, message=None) -> None:
        self.stopTimer()
        return super().exit(result, return_code, message)
