"""Giant squid: play bingo against boards."""

from dataclasses import dataclass, field

BOARD_SIZE = 5


@dataclass
class Board:
    """The unmarked numbers of each row and each column."""

    rows: list[set[int]] = field(default_factory=lambda: [set() for _ in range(BOARD_SIZE)])
    columns: list[set[int]] = field(
        default_factory=lambda: [set() for _ in range(BOARD_SIZE)]
    )

    def mark(self, number: int) -> bool:
        """Mark a number; return whether a row or column is complete."""
        winner = False
        for line in (*self.rows, *self.columns):
            line.discard(number)
            if not line:
                winner = True
        return winner

    def score(self, final_number: int) -> int:
        """Sum of unmarked numbers times the last number called."""
        return sum(map(sum, self.rows)) * final_number


def parse_board(text: str) -> Board:
    """Parse five lines of five whitespace-separated numbers."""
    board = Board()
    lines = text.splitlines()
    if len(lines) > BOARD_SIZE:
        raise ValueError("a board has at most five rows")
    for row_id, line in enumerate(lines):
        cells = line.split()
        if len(cells) > BOARD_SIZE:
            raise ValueError("a board has at most five columns")
        for col_id, cell in enumerate(cells):
            number = int(cell)
            board.rows[row_id].add(number)
            board.columns[col_id].add(number)
    return board


def parse_input(text: str) -> tuple[list[int], list[Board]]:
    """Split the input into the numbers called and the boards."""
    raw_sequence, separator, raw_boards = text.partition("\n\n")
    if not separator:
        raise ValueError("expected numbers and boards separated by a blank line")
    sequence = [int(number) for number in raw_sequence.split(",")]
    boards = [parse_board(block) for block in raw_boards.split("\n\n")]
    return sequence, boards


def part1(text: str) -> int:
    """Score of the first board to win."""
    sequence, boards = parse_input(text)
    for number in sequence:
        for board in boards:
            if board.mark(number):
                return board.score(number)
    raise ValueError("no board wins")


def part2(text: str) -> int:
    """Score of the last board to win."""
    sequence, active = parse_input(text)
    for number in sequence:
        if len(active) == 1 and active[0].mark(number):
            return active[0].score(number)
        active = [board for board in active if not board.mark(number)]
    raise ValueError("no last board wins")