"""Terminal detection: check, checkmate, stalemate and draw rules."""

from __future__ import annotations

from collections.abc import Sequence

from chessroom.core.attacks import is_in_check
from chessroom.core.enums import OutcomeKind, PieceType
from chessroom.core.move_generator import MoveGenerator
from chessroom.core.outcome import Outcome
from chessroom.core.position import Position
from chessroom.core.types import square_color

FIFTY_MOVE_HALFMOVES = 100
REPETITION_LIMIT = 3

_MINOR_PIECES = (PieceType.KNIGHT, PieceType.BISHOP)


class Rules:
    """Static rule checks over a :class:`Position`.

    Draws are automatic: a position meeting the fifty-move, repetition or
    material condition ends the game without a claim.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position.board, position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).generate_legal_moves()

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).generate_legal_moves()

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K v K, K+minor v K, and K+B v K+B with bishops on one square color."""
        others = [
            (sq, piece)
            for sq, piece in position.board.items()
            if piece.piece_type != PieceType.KING
        ]
        if not others:
            return True
        if len(others) == 1:
            return others[0][1].piece_type in _MINOR_PIECES
        if len(others) == 2:
            (sq_a, a), (sq_b, b) = others
            return (
                a.piece_type == PieceType.BISHOP
                and b.piece_type == PieceType.BISHOP
                and a.color != b.color
                and square_color(sq_a) == square_color(sq_b)
            )
        return False

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= FIFTY_MOVE_HALFMOVES

    @staticmethod
    def repetition_count(position: Position, position_hashes: Sequence[int]) -> int:
        """Occurrences of the current position among *position_hashes*."""
        return position_hashes.count(position.position_hash())

    @staticmethod
    def is_threefold_repetition(
        position: Position, position_hashes: Sequence[int]
    ) -> bool:
        return Rules.repetition_count(position, position_hashes) >= REPETITION_LIMIT

    @staticmethod
    def evaluate(position: Position, position_hashes: Sequence[int] = ()) -> Outcome:
        """Judge *position* for the side to move.

        *position_hashes* is the game's hash history including the current
        position. Having no legal move outranks every draw counter.
        """
        side = position.side_to_move
        checked = Rules.is_in_check(position)
        has_moves = bool(MoveGenerator(position).generate_legal_moves())

        if not has_moves:
            if checked:
                return Outcome.checkmate(side.opposite)
            return Outcome.stalemate()
        if checked:
            return Outcome.check(side)
        if Rules.is_fifty_move_rule(position):
            return Outcome(OutcomeKind.DRAW_FIFTY_MOVE)
        if Rules.is_threefold_repetition(position, position_hashes):
            return Outcome(OutcomeKind.DRAW_REPETITION)
        if Rules.is_insufficient_material(position):
            return Outcome(OutcomeKind.DRAW_INSUFFICIENT_MATERIAL)
        return Outcome.ongoing()
