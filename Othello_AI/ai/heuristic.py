"""Material-difference evaluation for Othello positions."""


def count_discs(board, color):
    return board.count(color)


def evaluate_board(board, color):
    """
    Disc count of `color` minus disc count of its opponent.
    Positive favors `color`, negative favors opponent.
    """
    return count_discs(board, color) - count_discs(board, -color)
