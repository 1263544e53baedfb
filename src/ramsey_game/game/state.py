"""Game state — edge coloring, move history, turn index and result."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from ramsey_game.core.clique import CliqueDetector
from ramsey_game.core.enums import Color, GameStatus
from ramsey_game.core.graph import CompleteGraph
from ramsey_game.core.turns import TurnManager
from ramsey_game.core.types import Edge, Vertex, edge_key
from ramsey_game.game.interfaces import GameConfig


@dataclass(frozen=True, slots=True)
class GameResult:
    """Either in progress, or won by ``winner`` through ``clique``."""

    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Color | None = None
    clique: tuple[Vertex, ...] | None = None

    @classmethod
    def in_progress(cls) -> GameResult:
        return cls()

    @classmethod
    def won(cls, winner: Color, clique: tuple[Vertex, ...]) -> GameResult:
        return cls(GameStatus.WON, winner, clique)

    @property
    def is_won(self) -> bool:
        return self.status == GameStatus.WON


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    edge: Edge
    color: Color
    ply: int

    @property
    def key(self) -> str:
        return edge_key(self.edge)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game for rendering.

    Hashable: the coloring is left out of the hash since the history
    determines it.
    """

    config: GameConfig
    coloring: MappingProxyType[Edge, Color | None] = field(hash=False)
    current_player: int
    result: GameResult
    history: tuple[Edge, ...]

    @property
    def n(self) -> int:
        return self.config.n

    @property
    def k(self) -> int:
        return self.config.k

    @property
    def num_players(self) -> int:
        return self.config.num_players

    @property
    def current_color(self) -> Color:
        return TurnManager.current(self.current_player, self.num_players)

    @property
    def history_length(self) -> int:
        return len(self.history)

    @property
    def is_won(self) -> bool:
        return self.result.is_won

    @property
    def winner(self) -> Color | None:
        return self.result.winner

    @property
    def winning_clique(self) -> tuple[Vertex, ...] | None:
        return self.result.clique

    @property
    def winning_edges(self) -> list[Edge]:
        """Edges of the winning clique, empty while in progress."""
        if self.result.clique is None:
            return []
        return CliqueDetector.clique_edges(self.result.clique)

    @property
    def can_undo(self) -> bool:
        return bool(self.history) and not self.is_won

    @property
    def status_text(self) -> str:
        if self.result.winner is not None:
            return f"{self.result.winner.name} WINS!"
        return f"Current turn: {self.current_color.name}"


@dataclass
class GameState:
    """Owns everything a game mutates.

    Pure data/logic with no validation beyond its invariants; the
    caller checks legality before :meth:`apply_move`.
    """

    config: GameConfig = field(default_factory=GameConfig)
    graph: CompleteGraph = field(init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    turn_index: int = field(default=0, init=False)
    result: GameResult = field(default_factory=GameResult.in_progress, init=False)

    def __post_init__(self) -> None:
        self.setup(self.config)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, config: GameConfig | None = None) -> None:
        """Initialise (or reset) the game."""
        if config is not None:
            self.config = config
        self.graph = CompleteGraph(self.config.n)
        self.move_history = []
        self.turn_index = 0
        self.result = GameResult.in_progress()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, edge: Edge) -> MoveRecord:
        """Color a validated, uncolored *edge* and check for a win."""
        color = self.current_color
        self.graph[edge] = color
        record = MoveRecord(edge=edge, color=color, ply=len(self.move_history) + 1)
        self.move_history.append(record)

        clique = CliqueDetector.find_monochromatic_clique(
            self.graph, color, self.config.k
        )
        if clique is not None:
            # The winner keeps the turn; the win is the last action.
            self.result = GameResult.won(color, clique)
        else:
            self.turn_index = TurnManager.advance(
                self.turn_index, self.config.num_players
            )
        return record

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last move. Returns the undone record, or None if empty."""
        if not self.move_history:
            return None
        record = self.move_history.pop()
        self.graph[record.edge] = None
        self.turn_index = TurnManager.retreat(self.turn_index, self.config.num_players)
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def current_color(self) -> Color:
        return TurnManager.current(self.turn_index, self.config.num_players)

    @property
    def is_game_over(self) -> bool:
        return self.result.is_won

    @property
    def ply_count(self) -> int:
        """Number of edges colored so far."""
        return len(self.move_history)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            config=self.config,
            coloring=MappingProxyType(self.graph.coloring()),
            current_player=self.turn_index,
            result=self.result,
            history=tuple(r.edge for r in self.move_history),
        )
