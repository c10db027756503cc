"""Paced AI turns: announce, wait the tier's delay on a timer, then search and play."""

import logging
import threading
from typing import Callable, Optional

from othello.ai import Decision
from othello.commentary import THINKING
from othello.game import GameEngine, MoveOutcome

logger = logging.getLogger(__name__)

DoneCallback = Callable[[Optional[Decision], Optional[MoveOutcome]], None]


class AiTurn:
    def __init__(self, game: GameEngine, on_thinking: Optional[Callable[[str], None]] = None,
                 on_done: Optional[DoneCallback] = None, delay_ms: Optional[int] = None):
        self.game = game
        self.on_thinking = on_thinking
        self.on_done = on_done
        profile = game.profile
        if delay_ms is None:
            delay_ms = profile.thinking_delay_ms if profile else 0
        self.delay_ms = delay_ms
        self.decision: Optional[Decision] = None
        self.outcome: Optional[MoveOutcome] = None
        self._timer: Optional[threading.Timer] = None
        self._done = threading.Event()
        self._state_lock = threading.Lock()
        self._started = False
        self._cancelled = False

    def start(self):
        """Returns immediately; the move is played when the timer fires."""
        if self._timer is not None:
            return
        if self.on_thinking:
            self.on_thinking(THINKING)
        self._timer = threading.Timer(self.delay_ms / 1000, self._run)
        self._timer.daemon = True
        self._timer.start()

    def cancel(self):
        """Drop a turn whose delay has not elapsed yet. A running search is not interrupted
        and wait() keeps blocking until its move has been played.
        """
        with self._state_lock:
            if self._started:
                return
            self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
        self._done.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._done.wait(timeout)

    def _run(self):
        with self._state_lock:
            if self._cancelled:
                return
            self._started = True
        try:
            with self.game.lock:
                if not self.game.is_ai_turn:
                    logger.debug("AI turn skipped: not the AI's move")
                    return
                self.decision, self.outcome = self.game.play_ai_move()
            if self.decision:
                logger.info("AI plays %s", self.decision.move.coords)
            if self.on_done:
                self.on_done(self.decision, self.outcome)
        finally:
            self._done.set()
