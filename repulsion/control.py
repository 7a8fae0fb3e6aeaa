import logging
import threading

logger = logging.getLogger(__name__)


class EngineControl:
    """
    Pause/exit flags shared between the stepping loop and an input handler.
    Changes are observed by the loop at its next iteration boundary.
    """

    def __init__(self, paused=True):
        self._lock = threading.Lock()
        self._paused = bool(paused)
        self._exit = threading.Event()

    @property
    def paused(self):
        with self._lock:
            return self._paused

    def toggle_pause(self):
        with self._lock:
            self._paused = not self._paused
            paused = self._paused
        logger.debug(f"Simulation {'paused' if paused else 'resumed'}.")
        return paused

    def pause(self):
        with self._lock:
            self._paused = True

    def resume(self):
        with self._lock:
            self._paused = False

    def request_exit(self):
        self._exit.set()

    @property
    def exit_requested(self):
        return self._exit.is_set()

    def wait(self, timeout):
        """Sleep up to `timeout` seconds; returns True early once exit is requested."""
        return self._exit.wait(timeout)

    def __repr__(self):
        return f"<{self.__class__.__name__} paused={self.paused} exit={self.exit_requested}>"
