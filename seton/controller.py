"""Round state machine of the memory game.

A round goes ``RESULTS -> MEMORIZING -> SOLVING -> RESULTS``.  The controller
owns the session: configuration, both boards, the countdown start time, the
last score and the number of finished rounds.  The window shell feeds it input
events through :meth:`RoundController.handle_input` and reads back a
:class:`~seton.view.View`.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import replace
from typing import Callable, Optional, Tuple

from . import events
from .config import clamp_field, default_config
from .layout import BoardLayout, Point, compute_layout
from .models import Cell, Coord, RoundState, Score, SessionConfig
from .placement import generate_truth
from .pointer import map_cursor
from .render import render_grid, render_pair
from .scoring import evaluate
from .stones import Board, apply_toggle, empty_grid
from .view import View


logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class RoundController:
    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        *,
        clock: Clock = time.monotonic,
        rng: Optional[random.Random] = None,
    ) -> None:
        # private copy; edits between rounds never leak back to the caller
        self.config = replace(config) if config is not None else default_config()
        self.state = RoundState.RESULTS
        self.board = Board(
            truth=empty_grid(self.config.board_size),
            solution=empty_grid(self.config.board_size),
        )
        self.score = Score.initial(self.config)
        self.games_played = 0
        self.time_started = 0.0
        self.cursor: Point = (0.0, 0.0)
        self.layout: Optional[BoardLayout] = None
        self._viewport: Optional[Tuple[float, float]] = None
        self._clock = clock
        self._rng = rng

    # ------------------------------------------------------------------
    # transitions
    # ------------------------------------------------------------------

    def _set_state(self, new_state: RoundState) -> None:
        logger.info("Round state %s -> %s", self.state.value, new_state.value)
        self.state = new_state

    def _ignore(self, action: str) -> RoundState:
        logger.debug("Ignoring %s while %s", action, self.state.value)
        return self.state

    def start(self) -> RoundState:
        """Generate a new board and begin the memorizing countdown."""
        if self.state is not RoundState.RESULTS:
            return self._ignore("start")
        cfg = self.config
        self.board.truth = generate_truth(
            cfg.board_size, cfg.n_black_stones, cfg.n_white_stones, rng=self._rng
        )
        self.board.clear_solution(cfg.board_size)
        self.time_started = self._clock()
        self._relayout()
        logger.info(
            "Round started | size=%s black=%s white=%s time=%ss",
            cfg.board_size,
            cfg.n_black_stones,
            cfg.n_white_stones,
            cfg.time_seconds,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Board to memorize:\n%s", render_grid(self.board.truth))
        self._set_state(RoundState.MEMORIZING)
        return self.state

    def _raw_progress(self) -> float:
        if self.config.time_seconds <= 0:
            return 0.0
        elapsed = self._clock() - self.time_started
        return 1.0 - elapsed / self.config.time_seconds

    def progress_left(self) -> float:
        """Remaining share of the memorizing time, from 1.0 down to 0.0."""
        if self.state is not RoundState.MEMORIZING:
            return 1.0
        return max(0.0, min(1.0, self._raw_progress()))

    def tick(self) -> RoundState:
        if self.state is RoundState.MEMORIZING and self._raw_progress() <= 0.0:
            logger.debug("Memorizing time is up")
            self._set_state(RoundState.SOLVING)
        return self.state

    def know_it(self) -> RoundState:
        """End memorizing early."""
        if self.state is not RoundState.MEMORIZING:
            return self._ignore("know-it")
        self._set_state(RoundState.SOLVING)
        return self.state

    def done(self) -> RoundState:
        """Score the player's board and show the results."""
        if self.state is not RoundState.SOLVING:
            return self._ignore("done")
        cfg = self.config
        self.score = evaluate(
            self.board.truth,
            self.board.solution,
            cfg.n_black_stones,
            cfg.n_white_stones,
        )
        self.games_played += 1
        logger.info(
            "Round finished | rating=%s%% correct=%s wrong_color=%s wrong_position=%s games=%s",
            self.score.percent,
            self.score.correct,
            self.score.wrong_color,
            self.score.wrong_position,
            self.games_played,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Boards (truth | solution):\n%s",
                render_pair(self.board.truth, self.board.solution),
            )
        self._set_state(RoundState.RESULTS)
        return self.state

    # ------------------------------------------------------------------
    # settings and board edits
    # ------------------------------------------------------------------

    def set_config(self, field: str, value: int) -> bool:
        """Change one setting for the next round.

        Only allowed between rounds.  Values are clamped to the slider range.
        Returns ``True`` if the setting was applied.
        """
        if self.state is not RoundState.RESULTS:
            self._ignore(f"config change {field}={value}")
            return False
        clamped = clamp_field(field, value)
        setattr(self.config, field, clamped)
        logger.debug("Config %s set to %s", field, clamped)
        return True

    def toggle(self, coord: Coord, color: Cell) -> Optional[Cell]:
        """Toggle a stone on the player's board; ``None`` if not solving."""
        if self.state is not RoundState.SOLVING:
            self._ignore(f"toggle at {coord}")
            return None
        return apply_toggle(
            self.board,
            coord,
            color,
            self.config.n_black_stones,
            self.config.n_white_stones,
        )

    def press(self, color: Cell) -> Optional[Cell]:
        """Toggle the cell under the last known pointer position."""
        if self.state is not RoundState.SOLVING:
            self._ignore("button press")
            return None
        if self.layout is None:
            logger.debug("Button press before the viewport size is known")
            return None
        coord = map_cursor(self.cursor, self.layout, self.board.size)
        if coord is None:
            return None
        return self.toggle(coord, color)

    def move_pointer(self, x: float, y: float) -> None:
        self.cursor = (float(x), float(y))

    def resize(self, width: float, height: float) -> Optional[BoardLayout]:
        self._viewport = (float(width), float(height))
        self._relayout()
        return self.layout

    def _relayout(self) -> None:
        if self._viewport is None:
            return
        self.layout = compute_layout(*self._viewport, self.board.size)

    # ------------------------------------------------------------------
    # shell interface
    # ------------------------------------------------------------------

    def handle_input(self, event: events.InputEvent) -> RoundState:
        """Apply one input event and return the resulting state."""
        # the countdown is derived from the clock, so any event can expire it
        self.tick()
        if isinstance(event, events.Tick):
            pass
        elif isinstance(event, events.PointerMoved):
            self.move_pointer(event.x, event.y)
        elif isinstance(event, events.PrimaryPressed):
            self.press(Cell.BLACK)
        elif isinstance(event, events.SecondaryPressed):
            self.press(Cell.WHITE)
        elif isinstance(event, events.Start):
            self.start()
        elif isinstance(event, events.KnowIt):
            self.know_it()
        elif isinstance(event, events.Done):
            self.done()
        elif isinstance(event, events.ConfigChanged):
            self.set_config(event.field, event.value)
        elif isinstance(event, events.ViewportResized):
            self.resize(event.width, event.height)
        else:
            raise TypeError(f"Unsupported input event: {event!r}")
        return self.state

    def snapshot(self) -> View:
        show_results = self.state is RoundState.RESULTS and self.games_played > 0
        show_truth = self.state is RoundState.MEMORIZING or show_results
        show_solution = self.state is RoundState.SOLVING or show_results
        return View(
            state=self.state,
            config=replace(self.config),
            games_played=self.games_played,
            truth=self.board.truth.copy() if show_truth else None,
            solution=self.board.solution.copy() if show_solution else None,
            progress_left=(
                self.progress_left() if self.state is RoundState.MEMORIZING else None
            ),
            score=self.score if show_results else None,
            layout=self.layout,
        )


__all__ = ["Clock", "RoundController"]
