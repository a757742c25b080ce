"""Board state container and the standard Othello starting position."""

EMPTY = 0
BLACK = -1
WHITE = 1

CHAR_MAP = {EMPTY: ".", BLACK: "B", WHITE: "W"}


class Board:
    def __init__(self, size=8):
        # Store cells as -1 (black), 0 (empty), 1 (white); indexed cells[y][x]
        if size < 4 or size % 2:
            raise ValueError("board size must be an even number >= 4")
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]

    @classmethod
    def initial(cls, size=8):
        """Return a board with the four-disc centre cross."""
        board = cls(size)
        lo, hi = size // 2 - 1, size // 2
        board.cells[lo][lo] = WHITE
        board.cells[hi][hi] = WHITE
        board.cells[lo][hi] = BLACK
        board.cells[hi][lo] = BLACK
        return board

    @classmethod
    def from_rows(cls, rows):
        """Build a board from strings of '.', 'B', 'W' (one string per row, top first)."""
        lookup = {ch: val for val, ch in CHAR_MAP.items()}
        board = cls(len(rows))
        for y, row in enumerate(rows):
            row = row.replace(" ", "")
            if len(row) != board.size:
                raise ValueError(f"row {y} has {len(row)} cells, expected {board.size}")
            for x, ch in enumerate(row):
                try:
                    board.cells[y][x] = lookup[ch]
                except KeyError:
                    raise ValueError(f"unknown cell character {ch!r}") from None
        return board

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and self.cells[y][x] == EMPTY

    def get(self, x, y):
        return self.cells[y][x]

    def place(self, x, y, color):
        """Place a disc; raise if out of bounds or occupied."""
        if color not in (BLACK, WHITE):
            raise ValueError("color must be -1 (black) or 1 (white)")
        if not self.in_bounds(x, y):
            raise ValueError("move out of bounds")
        if self.cells[y][x] != EMPTY:
            raise ValueError("cell already occupied")
        self.cells[y][x] = color

    def count(self, color):
        return sum(row.count(color) for row in self.cells)

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        return new_board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __str__(self):
        lines = ["  " + " ".join(str(x) for x in range(self.size))]
        for y, row in enumerate(self.cells):
            lines.append(f"{y} " + " ".join(CHAR_MAP[v] for v in row))
        return "\n".join(lines)
