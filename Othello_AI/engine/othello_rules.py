"""Othello rule enforcement: legal moves, flip resolution, game end."""

from ..Board import BLACK, EMPTY, WHITE, Board


DIRECTIONS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class InvalidMoveError(ValueError):
    """Raised when a move is applied to a cell that captures nothing."""


def _captures_in_direction(board: Board, x: int, y: int, dx: int, dy: int, color: int) -> list[tuple[int, int]]:
    """Return opponent discs bracketed from (x, y) along (dx, dy), or [] if the line is open."""
    opp = -color
    run = []
    cx, cy = x + dx, y + dy
    while board.in_bounds(cx, cy) and board.cells[cy][cx] == opp:
        run.append((cx, cy))
        cx += dx
        cy += dy
    if run and board.in_bounds(cx, cy) and board.cells[cy][cx] == color:
        return run
    return []


def flips_for_move(board: Board, x: int, y: int, color: int) -> list[tuple[int, int]]:
    """Discs that would change colour if `color` played at (x, y). Empty for illegal moves."""
    if not board.is_empty(x, y):
        return []
    flipped = []
    for dx, dy in DIRECTIONS:
        flipped.extend(_captures_in_direction(board, x, y, dx, dy, color))
    return flipped


def is_legal_move(board: Board, x: int, y: int, color: int) -> bool:
    if not board.is_empty(x, y):
        return False
    return any(_captures_in_direction(board, x, y, dx, dy, color) for dx, dy in DIRECTIONS)


def apply_move(board: Board, x: int, y: int, color: int, strict: bool = True) -> Board:
    """
    Return a new board with `color` played at (x, y) and all bracketed discs flipped.
    strict=True raises InvalidMoveError for illegal moves; strict=False places the
    disc anyway with no flips (legacy permissive behaviour).
    """
    if color not in (BLACK, WHITE):
        raise ValueError("color must be -1 (black) or 1 (white)")
    if not board.in_bounds(x, y):
        raise InvalidMoveError(f"move {(x, y)} out of bounds")

    flipped = flips_for_move(board, x, y, color)
    if not flipped and strict:
        if board.cells[y][x] != EMPTY:
            raise InvalidMoveError(f"cell {(x, y)} already occupied")
        raise InvalidMoveError(f"move {(x, y)} flips no discs")

    new_board = board.clone()
    new_board.cells[y][x] = color
    for fx, fy in flipped:
        new_board.cells[fy][fx] = color
    return new_board


def get_valid_moves(board: Board, color: int) -> list[tuple[int, int]]:
    """All legal moves for `color`, row-major (y outer, x inner)."""
    return [
        (x, y)
        for y in range(board.size)
        for x in range(board.size)
        if is_legal_move(board, x, y, color)
    ]


def has_any_move(board: Board, color: int) -> bool:
    for y in range(board.size):
        for x in range(board.size):
            if is_legal_move(board, x, y, color):
                return True
    return False


def score(board: Board) -> tuple[int, int]:
    """Return (black, white) disc counts."""
    return board.count(BLACK), board.count(WHITE)


def is_game_over(board: Board) -> bool:
    """Neither side has a legal move (a full board is a special case)."""
    return not has_any_move(board, BLACK) and not has_any_move(board, WHITE)


def winner(board: Board) -> int:
    """Return -1 (black), 1 (white) or 0 (draw) by disc count."""
    black, white = score(board)
    if black > white:
        return BLACK
    if white > black:
        return WHITE
    return EMPTY
