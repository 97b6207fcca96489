"""
State pattern.
"""

# pylint: disable=too-few-public-methods

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Stopped:
    name = "stopped"

    def press_play(self, player: "Player") -> str:
        player.state = Playing()
        return "starting playback"


class Playing:
    name = "playing"

    def press_play(self, player: "Player") -> str:
        player.state = Paused()
        return "pausing"


class Paused:
    name = "paused"

    def press_play(self, player: "Player") -> str:
        player.state = Playing()
        return "resuming"


class Player:
    """Delegates the play button to whatever state object it currently holds."""

    def __init__(self) -> None:
        self.state = Stopped()

    def press_play(self) -> str:
        return self.state.press_play(self)

    def stop(self) -> str:
        self.state = Stopped()
        return "stopping"


@pattern()
class StateDemo(PatternDemo):
    name = "State"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Allow an object to alter its behavior when its internal state "
        "changes; the object will appear to change its class."
    )
    summary = """
        The player's one button means different things depending on what
        the player is doing. Instead of a conditional on a status flag,
        each state is an object that handles the button itself and installs
        the next state.
    """
    applicability = (
        "an object's behaviour depends on its state and changes at run time",
        "operations have large conditionals that branch on the object's state",
    )
    consequences = (
        "state-specific behaviour is localized, one class per state",
        "state transitions become explicit",
        "the number of classes grows with the number of states",
    )
    participants = (Stopped, Playing, Paused, Player)

    def run(self) -> None:
        player = Player()
        for action in (player.press_play, player.press_play, player.press_play, player.stop):
            message = action()
            self.emit(f"{message} -> {player.state.name}")
