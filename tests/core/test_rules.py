"""Tests for Rules: check, checkmate, stalemate and the automatic draws."""

import pytest

from chessroom.core.enums import Color, OutcomeKind
from chessroom.core.move import Move
from chessroom.core.move_generator import legal_moves
from chessroom.core.outcome import Outcome
from chessroom.core.rules import Rules
from chessroom.core.types import parse_square
from chessroom.notation.fen import STARTING_FEN, position_from_fen

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
BACK_RANK_MATE = "R2k4/8/3K4/8/8/8/8/8 b - - 0 1"
STALEMATE = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"
ROOK_CHECK = "4k3/8/8/8/8/8/8/r3K3 w - - 0 1"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(position_from_fen(STARTING_FEN))

    def test_rook_check(self) -> None:
        pos = position_from_fen(ROOK_CHECK)
        assert Rules.is_in_check(pos)
        assert Rules.evaluate(pos) == Outcome.check(Color.WHITE)


class TestCheckmate:
    def test_fools_mate(self) -> None:
        pos = position_from_fen(FOOLS_MATE)
        assert Rules.is_checkmate(pos)
        assert Rules.evaluate(pos) == Outcome.checkmate(Color.BLACK)

    def test_back_rank_mate(self) -> None:
        pos = position_from_fen(BACK_RANK_MATE)
        assert Rules.is_checkmate(pos)
        assert Rules.evaluate(pos) == Outcome.checkmate(Color.WHITE)

    def test_not_checkmate_when_king_can_escape(self) -> None:
        assert not Rules.is_checkmate(position_from_fen(ROOK_CHECK))


class TestStalemate:
    def test_king_trapped(self) -> None:
        pos = position_from_fen(STALEMATE)
        assert Rules.is_stalemate(pos)
        assert not Rules.is_checkmate(pos)
        assert Rules.evaluate(pos) == Outcome.stalemate()

    def test_not_stalemate_with_moves(self) -> None:
        assert not Rules.is_stalemate(position_from_fen("7k/8/5K2/8/8/8/8/8 b - - 0 1"))


class TestInsufficientMaterial:
    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/4k3/8/8/4K3/8/8 w - - 0 1",
            "8/8/4k3/8/8/4K3/3B4/8 w - - 0 1",
            "8/8/4k3/8/8/4K3/3N4/8 w - - 0 1",
            "5b2/8/4k3/8/8/4K3/8/2B5 w - - 0 1",
        ],
        ids=["k-k", "kb-k", "kn-k", "kb-kb-same-color"],
    )
    def test_dead_positions(self, fen: str) -> None:
        pos = position_from_fen(fen)
        assert Rules.is_insufficient_material(pos)
        assert Rules.evaluate(pos).kind == OutcomeKind.DRAW_INSUFFICIENT_MATERIAL

    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/4k3/8/8/4K3/3R4/8 w - - 0 1",
            "8/8/4k3/8/4P3/4K3/8/8 w - - 0 1",
            "2b5/8/4k3/8/8/4K3/8/2B5 w - - 0 1",
            "2n5/8/4k3/8/8/4K3/8/2B5 w - - 0 1",
            "8/8/4k3/8/8/4K3/3NN3/8 w - - 0 1",
        ],
        ids=["kr-k", "kp-k", "kb-kb-opposite-color", "kb-kn", "knn-k"],
    )
    def test_mating_material(self, fen: str) -> None:
        assert not Rules.is_insufficient_material(position_from_fen(fen))


class TestFiftyMoveRule:
    def test_below_threshold(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4K2R/7r w - - 99 50")
        assert not Rules.is_fifty_move_rule(pos)
        assert Rules.evaluate(pos) == Outcome.ongoing()

    def test_draw_is_automatic(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4K2R/7r w - - 100 51")
        assert Rules.is_fifty_move_rule(pos)
        assert Rules.evaluate(pos).kind == OutcomeKind.DRAW_FIFTY_MOVE

    def test_checkmate_outranks_counter(self) -> None:
        pos = position_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 100 80")
        assert Rules.evaluate(pos) == Outcome.checkmate(Color.WHITE)

    def test_check_reported_before_draw(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 100 60")
        assert Rules.evaluate(pos) == Outcome.check(Color.WHITE)


class TestRepetition:
    def test_knight_shuffle(self) -> None:
        pos = position_from_fen("4k2n/8/8/8/8/8/8/4K2N w - - 0 1")
        hashes = [pos.position_hash()]
        for _ in range(2):
            for text in ("h1f2", "h8f7", "f2h1", "f7h8"):
                wanted = Move(parse_square(text[:2]), parse_square(text[2:]))
                pos.push(next(m for m in legal_moves(pos) if m == wanted))
                hashes.append(pos.position_hash())

        assert Rules.repetition_count(pos, hashes) == 3
        assert Rules.is_threefold_repetition(pos, hashes)
        assert Rules.evaluate(pos, hashes).kind == OutcomeKind.DRAW_REPETITION

    def test_two_occurrences_not_enough(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        hashes = [pos.position_hash()] * 2
        assert not Rules.is_threefold_repetition(pos, hashes)
        assert Rules.evaluate(pos, hashes) == Outcome.ongoing()


class TestEvaluate:
    def test_starting_position_ongoing(self) -> None:
        assert Rules.evaluate(position_from_fen(STARTING_FEN)) == Outcome.ongoing()
