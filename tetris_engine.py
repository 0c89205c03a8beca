
"""
Game session: state machine, drop timer, commands and read-only snapshots.

The engine never draws and never schedules itself. A host calls tick(now_ms)
once per frame while the loop is scheduled; tick() returns False when the
host should stop calling it (paused, game over, reset). start_game() and
pause_game() return True when the host has to (re)schedule the loop.
"""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from tetris_config import CONFIG
from tetris_piece import Piece, rotate_cw
from tetris_board import Board, empty_board, is_valid_move, place_piece, clear_lines
from tetris_rng import PieceGenerator

log = logging.getLogger(__name__)


class GameState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class Command(enum.Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    PAUSE = "pause"


@dataclass(frozen=True)
class Stats:
    score: int = 0
    level: int = 1
    lines: int = 0


@dataclass(frozen=True)
class Controls:
    start_enabled: bool
    pause_enabled: bool
    reset_enabled: bool
    pause_label: str


@dataclass(frozen=True)
class Snapshot:
    board: Tuple[Tuple[Optional[str], ...], ...]
    current: Optional[Piece]
    next: Optional[Piece]
    stats: Stats
    state: GameState


def drop_interval(level: int) -> int:
    """Milliseconds between automatic descents at the given level (1-based)."""
    ms = CONFIG["BASE_DROP_MS"] - (level - 1) * CONFIG["DROP_STEP_MS"]
    return max(CONFIG["MIN_DROP_MS"], ms)


def level_for(lines: int) -> int:
    return lines // CONFIG["LINES_PER_LEVEL"] + 1


Listener = Callable[[str, "Engine"], None]


class Engine:
    def __init__(self, generator=None):
        self.generator = generator if generator is not None else PieceGenerator(CONFIG["SEED"])
        self.board: Board = empty_board()
        self.current: Optional[Piece] = None
        self.next: Optional[Piece] = None
        self.stats = Stats()
        self.state = GameState.IDLE
        self.final_score = 0
        self.drop_acc = 0.0
        self.last_time: Optional[float] = None
        self._listeners: List[Listener] = []

    # ---------- collaborators ----------
    def add_listener(self, fn: Listener):
        self._listeners.append(fn)

    def _emit(self, event: str):
        for fn in self._listeners:
            fn(event, self)

    def _set_state(self, state: GameState):
        if state is self.state:
            return
        log.debug("state %s -> %s", self.state.value, state.value)
        self.state = state
        self._emit("state")

    # ---------- lifecycle ----------
    def _clear_session(self):
        self.board = empty_board()
        self.current = self.next = None
        self.stats = Stats()
        self.drop_acc = 0.0
        self.last_time = None

    def start_game(self) -> bool:
        if self.state not in (GameState.IDLE, GameState.OVER):
            log.debug("start ignored in state %s", self.state.value)
            return False
        self._clear_session()
        self.final_score = 0
        self._emit("stats")
        self._set_state(GameState.RUNNING)
        return self.new_piece()

    def pause_game(self) -> bool:
        if self.state is GameState.RUNNING:
            self._set_state(GameState.PAUSED)
            return False
        if self.state is GameState.PAUSED:
            # paused wall time must not reach the accumulator
            self.last_time = None
            self._set_state(GameState.RUNNING)
            return True
        return False

    def reset_game(self):
        self._clear_session()
        self.final_score = 0
        self._emit("stats")
        self._set_state(GameState.IDLE)

    def _game_over(self):
        self.final_score = self.stats.score
        log.info("game over: score=%d level=%d lines=%d",
                 self.stats.score, self.stats.level, self.stats.lines)
        self._set_state(GameState.OVER)

    # ---------- pieces ----------
    def is_game_over(self) -> bool:
        return self.current is not None and not is_valid_move(self.board, self.current, 0, 0)

    def new_piece(self) -> bool:
        """Promote the look-ahead piece; False (and game over) if it cannot spawn."""
        if self.next is None:
            self.next = self.generator.next_piece()
        self.current = self.next
        self.next = self.generator.next_piece()
        if self.is_game_over():
            self._game_over()
            return False
        return True

    def lock(self):
        place_piece(self.board, self.current)
        log.debug("locked %s at (%d, %d)", self.current.name, self.current.x, self.current.y)
        cleared = clear_lines(self.board)
        if cleared:
            s = self.stats
            lines = s.lines + cleared
            self.stats = Stats(score=s.score + cleared * CONFIG["LINE_SCORE"] * s.level,
                               level=level_for(lines), lines=lines)
            log.debug("cleared %d line(s): %s", cleared, self.stats)
            self._emit("stats")
        return cleared

    def drop_step(self):
        """One automatic descent: move down, or lock + clear + next piece."""
        if is_valid_move(self.board, self.current, 0, 1):
            self.current.y += 1
            return
        self.lock()
        self.new_piece()

    # ---------- frame loop ----------
    def tick(self, now_ms: float) -> bool:
        if self.state is not GameState.RUNNING:
            return False
        dt = 0.0 if self.last_time is None else now_ms - self.last_time
        self.last_time = now_ms
        self.drop_acc += dt
        if self.drop_acc > drop_interval(self.stats.level):
            self.drop_step()
            self.drop_acc = 0.0
        return self.state is GameState.RUNNING

    # ---------- input ----------
    def handle_command(self, cmd) -> bool:
        """Apply a command; returns True when it changed the session."""
        if not isinstance(cmd, Command):
            try:
                cmd = Command(cmd)
            except ValueError:
                log.debug("ignoring unknown command %r", cmd)
                return False
        if self.state is not GameState.RUNNING or self.current is None:
            return False
        if cmd is Command.MOVE_LEFT:
            return self._shift(-1)
        if cmd is Command.MOVE_RIGHT:
            return self._shift(1)
        if cmd is Command.SOFT_DROP:
            # never locks; locking is left to the timed descent
            if is_valid_move(self.board, self.current, 0, 1):
                self.current.y += 1
                return True
            return False
        if cmd is Command.ROTATE:
            rotated = rotate_cw(self.current.shape)
            if is_valid_move(self.board, self.current, 0, 0, rotated):
                self.current.shape = rotated
                return True
            return False
        self.pause_game()
        return True

    def _shift(self, dx: int) -> bool:
        if is_valid_move(self.board, self.current, dx, 0):
            self.current.x += dx
            return True
        return False

    # ---------- read-only views ----------
    def controls(self) -> Controls:
        live = self.state in (GameState.RUNNING, GameState.PAUSED)
        label = "Resume" if self.state is GameState.PAUSED else "Pause"
        return Controls(start_enabled=not live, pause_enabled=live,
                        reset_enabled=live, pause_label=label)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=tuple(tuple(row) for row in self.board),
            current=self.current.copy() if self.current else None,
            next=self.next.copy() if self.next else None,
            stats=self.stats,
            state=self.state,
        )
