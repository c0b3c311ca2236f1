"""
Input - per-tick snapshot of held directions and one-shot commands
"""

from collections import namedtuple

import pygame


_InputFields = ['up', 'down', 'left', 'right', 'toggle_pause', 'quit']


class InputState(namedtuple('InputState', _InputFields)):
    """
    Immutable snapshot of the player's input for one tick

    up/down/left/right: movement keys currently held
    toggle_pause/quit: one-shot events seen since the last poll
    """
    __slots__ = ()

    @classmethod
    def from_directions(cls, *directions, toggle_pause=False, quit=False):
        """
        Build a snapshot from direction names

        Example:
            InputState.from_directions('up', 'left')
        """
        held = {name: False for name in ('up', 'down', 'left', 'right')}
        for name in directions:
            if name not in held:
                raise ValueError(f"Unknown direction {name!r}")
            held[name] = True
        return cls(toggle_pause=toggle_pause, quit=quit, **held)

    def has_movement(self):
        return self.up or self.down or self.left or self.right


NO_INPUT = InputState(False, False, False, False, False, False)


# WASD and arrow keys
KEY_BINDINGS = {
    'up': (pygame.K_w, pygame.K_UP),
    'down': (pygame.K_s, pygame.K_DOWN),
    'left': (pygame.K_a, pygame.K_LEFT),
    'right': (pygame.K_d, pygame.K_RIGHT),
}
PAUSE_KEY = pygame.K_p
QUIT_KEY = pygame.K_ESCAPE


class KeyboardInput:
    """
    Polls pygame once per tick and turns it into an InputState
    """
    def __init__(self, key_bindings=None):
        self.key_bindings = key_bindings or KEY_BINDINGS

    def poll(self):
        """Drain the event queue and read held keys"""
        toggle_pause = False
        quit_requested = False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN:
                if event.key == QUIT_KEY:
                    quit_requested = True
                elif event.key == PAUSE_KEY:
                    # Two presses in one frame cancel out
                    toggle_pause = not toggle_pause

        keys = pygame.key.get_pressed()
        held = {
            name: any(keys[k] for k in bound)
            for name, bound in self.key_bindings.items()
        }

        return InputState(toggle_pause=toggle_pause, quit=quit_requested, **held)


class ScriptedInput:
    """
    Replays a fixed list of InputState snapshots, then NO_INPUT forever
    Used by tests and headless runs
    """
    def __init__(self, states):
        self.states = list(states)
        self.index = 0

    def poll(self):
        if self.index >= len(self.states):
            return NO_INPUT
        state = self.states[self.index]
        self.index += 1
        return state
