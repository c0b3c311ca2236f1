"""
Game loop - polls input, advances the session and renders, once per frame
"""


class GameLoop:
    """
    Drives a GameSession frame by frame
    """
    def __init__(self, session, input_source, renderer, timer, display_flip=None, pace=None):
        """
        Args:
            session: GameSession
            input_source: Object with poll() -> InputState
            renderer: Object with draw_frame(...)
            timer: FrameTimer
            display_flip: Called after drawing (pygame.display.flip), optional
            pace: Called at the end of each frame to cap the frame rate, optional
        """
        self.session = session
        self.input_source = input_source
        self.renderer = renderer
        self.timer = timer
        self.display_flip = display_flip
        self.pace = pace

        self.frames = 0
        self._announced_defeat = False
        self._announced_victory = False

    @property
    def state_manager(self):
        return self.session.state_manager

    def is_running(self):
        return self.state_manager.is_running()

    def run_frame(self):
        """
        One frame: input, update, draw

        Returns:
            Collision result from the session update, or None if nothing ran
        """
        if not self.is_running():
            return None

        input_state = self.input_source.poll()

        if input_state.quit:
            self.state_manager.stop()
            return None
        if input_state.toggle_pause:
            self.state_manager.toggle_pause()

        dt = self.timer.tick()
        result = self.session.update(dt, input_state)

        self._announce_outcome()

        self.session.draw(self.renderer)
        if self.display_flip is not None:
            self.display_flip()

        self.frames += 1
        return result

    def _announce_outcome(self):
        """Log defeat / victory the first time they show up"""
        if not self._announced_defeat and self.session.is_defeated():
            self._announced_defeat = True
            print(f"Defeated! Score: {self.session.player.score}")
        if not self._announced_victory and self.session.is_victorious():
            self._announced_victory = True
            print(f"All treasure collected! Score: {self.session.player.score} "
                  f"in {self.session.time_elapsed:.1f}s")

    def run(self, max_frames=None):
        """
        Loop until stopped (or max_frames reached)

        Returns:
            Number of frames run
        """
        self.timer.start()
        start_frames = self.frames

        while self.is_running():
            if max_frames is not None and self.frames - start_frames >= max_frames:
                break
            self.run_frame()
            if self.pace is not None:
                self.pace()

        return self.frames - start_frames

    def __repr__(self):
        return f"GameLoop(frames={self.frames}, state={self.state_manager.get_state_name()})"
