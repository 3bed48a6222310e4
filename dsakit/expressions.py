"""Stack-based expression conversion and the Tower of Hanoi."""

from __future__ import annotations

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def _convert(expression: str, opening: str, closing: str, pops_equal: bool) -> str:
    """Run the operator-stack scan shared by postfix and prefix conversion."""
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char in _PRECEDENCE:
            rank = _PRECEDENCE[char]
            while stack and stack[-1] in _PRECEDENCE:
                top_rank = _PRECEDENCE[stack[-1]]
                if top_rank > rank or (pops_equal and top_rank == rank):
                    output.append(stack.pop())
                else:
                    break
            stack.append(char)
        elif char == opening:
            stack.append(char)
        elif char == closing:
            while stack and stack[-1] != opening:
                output.append(stack.pop())
            if not stack:
                raise ValueError(f"unbalanced parentheses in {expression!r}")
            stack.pop()
        else:
            output.append(char)
    while stack:
        top = stack.pop()
        if top == opening:
            raise ValueError(f"unbalanced parentheses in {expression!r}")
        output.append(top)
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators are ``+ - * / ^``; all of them, ``^`` included, associate to
    the left. Every other character is copied through as an operand.
    Raises ValueError for unbalanced parentheses.
    """
    return _convert(expression, "(", ")", pops_equal=True)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression of single-character operands to prefix.

    The expression is scanned from the right, so parentheses swap roles.
    Raises ValueError for unbalanced parentheses.
    """
    reversed_output = _convert(expression[::-1], ")", "(", pops_equal=False)
    return reversed_output[::-1]


def hanoi_moves(
    disks: int, source: str = "A", via: str = "B", target: str = "C"
) -> list[tuple[int, str, str]]:
    """Return the moves that carry ``disks`` disks from source to target.

    Each move is (disk, from_peg, to_peg); disk 1 is the smallest.
    No disks, or a negative count, gives no moves.
    """
    moves: list[tuple[int, str, str]] = []

    def solve(count: int, start: str, spare: str, end: str) -> None:
        if count <= 0:
            return
        solve(count - 1, start, end, spare)
        moves.append((count, start, end))
        solve(count - 1, spare, start, end)

    solve(disks, source, via, target)
    return moves