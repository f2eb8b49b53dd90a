from dataclasses import dataclass
from typing import Any, List


class InvalidRequest(ValueError):
    """Raised when a request body does not have the shape a route needs."""


def _field(data: Any, name: str) -> Any:
    if not isinstance(data, dict):
        return None
    return data.get(name)


@dataclass(frozen=True)
class CompletionRequest:
    moves: int

    @classmethod
    def from_json(cls, data: Any) -> 'CompletionRequest':
        moves = _field(data, 'moves')
        # bool is an int subclass; JSON true/false is not a move count
        if isinstance(moves, bool) or not isinstance(moves, (int, float)):
            raise InvalidRequest('Invalid moves count')
        if isinstance(moves, float):
            if not moves.is_integer():
                raise InvalidRequest('Invalid moves count')
            moves = int(moves)
        if moves < 0:
            raise InvalidRequest('Invalid moves count')
        return cls(moves=moves)


@dataclass(frozen=True)
class GridRequest:
    grid: List[Any]

    @classmethod
    def from_json(cls, data: Any) -> 'GridRequest':
        grid = _field(data, 'gridState')
        if not isinstance(grid, list):
            raise InvalidRequest('Invalid grid state')
        return cls(grid=grid)
