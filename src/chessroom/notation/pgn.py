"""PGN export of finished or running games."""

from __future__ import annotations

from chessroom.core.enums import Color
from chessroom.core.outcome import Outcome


def pgn_result_token(outcome: Outcome, resigned: Color | None = None) -> str:
    """PGN result token; *resigned* names the side that gave up, if any."""
    winner = resigned.opposite if resigned is not None else outcome.winner
    if winner == Color.WHITE:
        return "1-0"
    if winner == Color.BLACK:
        return "0-1"
    if outcome.is_draw:
        return "1/2-1/2"
    return "*"


def pgn_movetext(
    sans: list[str],
    result_token: str,
    *,
    first_move_number: int = 1,
    black_first: bool = False,
) -> str:
    """Numbered movetext, e.g. ``1. e4 e5 2. Nf3 *``.

    A game that starts with black to move opens with ``N...``.
    """
    parts: list[str] = []
    offset = 1 if black_first else 0
    for index, san in enumerate(sans):
        ply = index + offset
        number = first_move_number + ply // 2
        if ply % 2 == 0:
            parts.append(f"{number}.")
        elif index == 0:
            parts.append(f"{number}...")
        parts.append(san)
    parts.append(result_token)
    return " ".join(parts)


def build_pgn(
    headers: dict[str, str],
    sans: list[str],
    result_token: str,
    *,
    first_move_number: int = 1,
    black_first: bool = False,
) -> str:
    """Build a single-game PGN document."""
    lines: list[str] = []
    for key, value in headers.items():
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(
        pgn_movetext(
            sans,
            result_token,
            first_move_number=first_move_number,
            black_first=black_first,
        )
    )
    lines.append("")
    return "\n".join(lines)
