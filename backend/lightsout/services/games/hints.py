from typing import List, NamedTuple, Sequence

Grid = Sequence[Sequence[bool]]

SOLVED = "Puzzle already solved!"
ONE_LEFT = "Just one light left! Look for the isolated light."
ALMOST_THERE = "Almost there! Focus on the remaining lit cells."
CORNER_TEMPLATE = "Try starting with a corner at position ({row}, {col})"
EDGES_FIRST = "Try working from the edges toward the center."


class Corner(NamedTuple):
    row: int
    col: int

    def to_dict(self):
        return {'row': self.row, 'col': self.col}


def count_lit(grid: Grid) -> int:
    return sum(1 for row in grid for cell in row if cell)


def find_lit_corners(grid: Grid) -> List[Corner]:
    """Return the lit corners in scan order: top-left, top-right, bottom-left, bottom-right.

    Assumes a square, non-empty grid (see ``is_square_grid``).
    """
    last = len(grid) - 1
    positions = [Corner(0, 0), Corner(0, last), Corner(last, 0), Corner(last, last)]
    return [pos for pos in positions if grid[pos.row][pos.col]]


def generate_hint(grid: Grid) -> str:
    """Pick a hint from a fixed ladder; the first matching rule wins.

    This is a static heuristic over the light count and corners. It does not
    search the puzzle's solution space.
    """
    lit = count_lit(grid)
    if lit == 0:
        return SOLVED
    if lit == 1:
        return ONE_LEFT
    if lit <= 3:
        return ALMOST_THERE

    corners = find_lit_corners(grid)
    if corners:
        first = corners[0]
        return CORNER_TEMPLATE.format(row=first.row, col=first.col)

    return EDGES_FIRST


def is_square_grid(grid) -> bool:
    """True when ``grid`` is a non-empty list of equally sized row lists forming a square.

    Only guarantees the grid can be indexed safely. Reachability and
    solvability are not checked.
    """
    if not isinstance(grid, list) or len(grid) == 0:
        return False
    size = len(grid)
    for row in grid:
        if not isinstance(row, list) or len(row) != size:
            return False
    return True
