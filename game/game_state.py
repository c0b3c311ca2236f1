"""
Game State Machine - running / paused / stopped
"""

from enum import Enum, auto


class GameState(Enum):
    """Game states"""
    PLAYING = auto()
    PAUSED = auto()
    STOPPED = auto()


class GameStateManager:
    """
    Manages game state transitions

    STOPPED is terminal: once the loop stops nothing brings it back.
    """
    def __init__(self, verbose=True):
        self.current_state = GameState.PLAYING
        self.previous_state = None
        self.verbose = verbose

    def transition_to(self, new_state):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value

        Returns:
            True if the state changed
        """
        if self.current_state == GameState.STOPPED or new_state == self.current_state:
            return False

        self.previous_state = self.current_state
        self.current_state = new_state

        if self.verbose:
            print(f"State: {self.previous_state.name} -> {new_state.name}")
        return True

    def toggle_pause(self):
        """Flip between PLAYING and PAUSED"""
        if self.current_state == GameState.PLAYING:
            return self.transition_to(GameState.PAUSED)
        if self.current_state == GameState.PAUSED:
            return self.transition_to(GameState.PLAYING)
        return False

    def stop(self):
        """Stop the game for good"""
        return self.transition_to(GameState.STOPPED)

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def is_paused(self):
        return self.current_state == GameState.PAUSED

    def is_running(self):
        return self.current_state != GameState.STOPPED

    def get_state_name(self):
        """Get current state name"""
        return self.current_state.name

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"
