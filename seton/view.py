"""Read-only picture of a session handed to the rendering shell."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .layout import BoardLayout
from .models import Grid, RoundState, Score, SessionConfig
from .render import render_grid, render_pair


@dataclass(frozen=True)
class View:
    """What the renderer may show for the current state.

    Memorizing shows only the truth board and the countdown.  Solving shows
    only the player's board.  Results shows both boards and the score once at
    least one round has been played.  The grids are copies, so editing them
    does not affect the session.
    """

    state: RoundState
    config: SessionConfig
    games_played: int
    truth: Optional[Grid] = None
    solution: Optional[Grid] = None
    progress_left: Optional[float] = None
    score: Optional[Score] = None
    layout: Optional[BoardLayout] = None

    def status_lines(self) -> List[str]:
        if self.state is RoundState.MEMORIZING:
            return ["Memorize..."]
        if self.state is RoundState.SOLVING:
            return ["Place the stones..."]
        if self.score is None:
            return []
        return [
            f"Rating: {self.score.percent} %",
            f"Correct: {self.score.correct}",
            f"Wrong colour: {self.score.wrong_color}",
            f"Wrong position: {self.score.wrong_position}",
        ]

    def as_text(self) -> str:
        lines = [f"[{self.state.value}] games played: {self.games_played}"]
        if self.truth is not None and self.solution is not None:
            lines.append(render_pair(self.truth, self.solution))
        elif self.truth is not None:
            lines.append(render_grid(self.truth))
        elif self.solution is not None:
            lines.append(render_grid(self.solution))
        if self.progress_left is not None:
            lines.append(f"time left: {self.progress_left:.0%}")
        lines.extend(self.status_lines())
        return "\n".join(lines)


__all__ = ["View"]
