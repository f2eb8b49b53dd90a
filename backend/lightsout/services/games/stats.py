import math
import threading
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GameStatistics:
    total_games: int = 0
    total_moves: int = 0
    best_score: Optional[int] = None
    average_moves: int = 0

    def to_dict(self):
        return {
            'totalGames': self.total_games,
            'totalMoves': self.total_moves,
            'bestScore': self.best_score,
            'averageMoves': self.average_moves,
        }


def _average(total_moves: int, total_games: int) -> int:
    if total_games <= 0:
        return 0
    # Half-up, matching what the game client displays
    return int(math.floor(total_moves / total_games + 0.5))


class StatsTracker:
    """Cumulative play statistics for one application.

    Only ``record_completion`` mutates the aggregate. Counters only grow and
    the best score only drops, so nothing here ever needs a reset path.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._total_games = 0
        self._total_moves = 0
        self._best_score: Optional[int] = None

    def record_completion(self, moves: int) -> GameStatistics:
        """Add one completed game and return the updated snapshot.

        ``moves`` is trusted; request parsing rejects bad values first.
        """
        with self._lock:
            self._total_games += 1
            self._total_moves += moves
            if self._best_score is None or moves < self._best_score:
                self._best_score = moves
            return self._snapshot()

    def get_statistics(self) -> GameStatistics:
        with self._lock:
            return self._snapshot()

    def _snapshot(self) -> GameStatistics:
        return GameStatistics(
            total_games=self._total_games,
            total_moves=self._total_moves,
            best_score=self._best_score,
            average_moves=_average(self._total_moves, self._total_games),
        )
