from __future__ import annotations

from statemachine import State, StateMachine

from guessing_game.models import GamePhase


class GameFSM(StateMachine):
    """Playing -> Won | Lost. Both end states are terminal.

    The driver owns the attempt countdown; the FSM only guards transitions.
    """

    playing = State(GamePhase.playing.value, value=GamePhase.playing.value, initial=True)
    won = State(GamePhase.won.value, value=GamePhase.won.value, final=True)
    lost = State(GamePhase.lost.value, value=GamePhase.lost.value, final=True)

    win = playing.to(won)
    lose = playing.to(lost)

    @property
    def phase(self) -> GamePhase:
        return GamePhase(str(self.current_state.value))
