"""Tests for FEN and SAN notation."""

import pytest

from fency.core.castling import CastlingRights
from fency.core.enums import CastleSide, Color, PieceType
from fency.core.errors import (
    InvalidCastlingLetter,
    InvalidColorChar,
    InvalidCoordinate,
    MalformedPositionString,
    UnparsableMoveToken,
)
from fency.core.notation import (
    STARTING_FEN,
    parse_castling,
    parse_san,
    position_fields,
    position_from_fen,
    position_to_fen,
)
from fency.core.piece import Figure
from fency.core.position import new_game
from fency.core.settings import EngineSettings
from fency.core.types import C3, C6, D1, E1, E3, E8, parse_square


class TestFenParsing:
    def test_starting_side(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.side_to_move == Color.WHITE

    def test_starting_castling(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.castling == CastlingRights()

    def test_starting_en_passant(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.en_passant is None

    def test_starting_clocks(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    def test_starting_kings(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board[E1] == Figure(Color.WHITE, E1, PieceType.KING)
        assert pos.board[E8] == Figure(Color.BLACK, E8, PieceType.KING)

    def test_equals_new_game(self) -> None:
        assert position_from_fen(STARTING_FEN) == new_game()

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        pos = position_from_fen(fen)
        assert pos.en_passant == E3

    def test_no_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"
        pos = position_from_fen(fen)
        assert pos.castling == CastlingRights.none()

    def test_partial_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1"
        pos = position_from_fen(fen)
        assert pos.castling == CastlingRights(True, False, False, True)

    def test_endgame_position(self) -> None:
        pos = position_from_fen("5rk1/1b2n1pp/4R3/1p3pN1/2pP4/r5PP/P4P2/2RQ2Kq w - - 1 24")
        assert pos.board[D1] == Figure.from_string("Qd1")
        assert pos.board[parse_square("h1")] == Figure.from_string("qh1")
        assert len(pos.board) == 21
        assert pos.halfmove_clock == 1
        assert pos.fullmove_number == 24

    def test_lenient_castling_letters(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w KZ - 0 1")
        assert str(pos.castling) == "K"

    def test_strict_castling_letters(self) -> None:
        settings = EngineSettings(strict_castling_field=True)
        with pytest.raises(InvalidCastlingLetter):
            position_from_fen("4k3/8/8/8/8/8/8/4K3 w KZ - 0 1", settings)

    def test_settings_travel_with_position(self) -> None:
        settings = EngineSettings(strict_legality=True)
        assert position_from_fen(STARTING_FEN, settings).settings is settings


class TestFenErrors:
    def test_invalid_fen_raises(self) -> None:
        with pytest.raises(MalformedPositionString) as excinfo:
            position_from_fen("invalid")
        assert excinfo.value.field == "fields"
        assert excinfo.value.text == "invalid"

    def test_four_fields_rejected(self) -> None:
        with pytest.raises(MalformedPositionString, match="6 fields"):
            position_from_fen("8/8/8/8/8/8/8/8 w - -")

    def test_invalid_side_to_move_raises(self) -> None:
        with pytest.raises(InvalidColorChar):
            position_from_fen("8/8/8/8/8/8/8/8 x - - 0 1")

    def test_invalid_board_rank_count_raises(self) -> None:
        with pytest.raises(MalformedPositionString, match="8 ranks"):
            position_from_fen("8/8/8/8/8/8/8 w - - 0 1")

    @pytest.mark.parametrize(
        "placement",
        ["9/8/8/8/8/8/8/8", "7/8/8/8/8/8/8/8", "ppppppppp/8/8/8/8/8/8/8", "0p7/8/8/8/8/8/8/8"],
    )
    def test_invalid_board_rank_width_raises(self, placement: str) -> None:
        with pytest.raises(MalformedPositionString) as excinfo:
            position_from_fen(f"{placement} w - - 0 1")
        assert excinfo.value.field == "placement"

    def test_invalid_piece_letter(self) -> None:
        with pytest.raises(MalformedPositionString, match="piece"):
            position_from_fen("4k3/8/8/8/8/8/8/4X3 w - - 0 1")

    def test_invalid_en_passant_square(self) -> None:
        with pytest.raises(InvalidCoordinate):
            position_from_fen("4k3/8/8/8/8/8/8/4K3 w - z9 0 1")

    def test_en_passant_rank_must_match_side(self) -> None:
        with pytest.raises(MalformedPositionString, match="en-passant"):
            position_from_fen("4k3/8/8/8/8/8/8/4K3 w - e3 0 1")

    @pytest.mark.parametrize("clocks", ["x 1", "0 y", "-1 1", "0 0"])
    def test_invalid_clocks(self, clocks: str) -> None:
        with pytest.raises(MalformedPositionString):
            position_from_fen(f"4k3/8/8/8/8/8/8/4K3 w - - {clocks}")


class TestFenSerialisation:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
            "5rk1/1b2n1pp/4R3/1p3pN1/2pP4/r5PP/P4P2/2RQ2Kq w - - 1 24",
            "r3k2r/8/8/8/8/8/8/R3K2R b Kq - 12 40",
            "8/8/8/8/8/8/8/8 w - - 0 1",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_position_fields(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/pppp1ppp/8/4p3/3P4/8/PPP1PPPP/RNBQKBNR b KQkq d3 0 6"
        )
        fields = position_fields(pos)
        assert fields["FEN"] == "rnbqkbnr/pppp1ppp/8/4p3/3P4/8/PPP1PPPP/RNBQKBNR"
        assert fields["Color"] == "b"
        assert fields["Castling"] == "KQkq"
        assert fields["EnPassant"] == "d3"
        assert fields["HalfMoveClock"] == "0"
        assert fields["FullMoveClock"] == "6"


class TestSanParsing:
    def test_pawn_push(self) -> None:
        d = parse_san("a3")
        assert d.target == parse_square("a3")
        assert d.piece == PieceType.PAWN
        assert not (d.is_check or d.is_checkmate or d.is_capture or d.is_promotion)
        assert d.promotion is None
        assert d.from_file is None and d.from_rank is None

    def test_pawn_capture_promotion_mate(self) -> None:
        d = parse_san("exd1=Q#")
        assert d.target == D1
        assert d.piece == PieceType.PAWN
        assert d.is_check and d.is_checkmate
        assert d.is_capture and d.is_promotion
        assert d.promotion == PieceType.QUEEN
        assert d.from_file == "e"
        assert d.from_rank is None

    def test_rook_file_disambiguation(self) -> None:
        d = parse_san("Raxc6+")
        assert d.target == C6
        assert d.piece == PieceType.ROOK
        assert d.is_check and not d.is_checkmate
        assert d.is_capture
        assert d.from_file == "a"
        assert d.from_rank is None

    def test_knight_rank_disambiguation(self) -> None:
        d = parse_san("N1c3")
        assert d.target == C3
        assert d.piece == PieceType.KNIGHT
        assert not d.is_capture
        assert d.from_file is None
        assert d.from_rank == "1"

    def test_full_square_disambiguation(self) -> None:
        d = parse_san("Rd1d2")
        assert d.from_file == "d" and d.from_rank == "1"
        assert d.matches_origin(D1)
        assert not d.matches_origin(parse_square("d3"))

    def test_promotion_without_equals(self) -> None:
        assert parse_san("e8N").promotion == PieceType.KNIGHT

    def test_annotations_ignored(self) -> None:
        d = parse_san("Nf3!?")
        assert d.piece == PieceType.KNIGHT
        assert not d.is_check

    def test_keeps_original_token(self) -> None:
        assert parse_san("Qh4#").token == "Qh4#"

    @pytest.mark.parametrize(
        "token",
        [
            "",
            "Z4",
            "e9",
            "Nf",
            "xx",
            "Nf3x",
            "e8=",
            "e8=K",
            "Nxe8=Q",
            "Nbb1c3",
            "pe4",
            "Ke1e2e3",
            "nf3",
            "O-O",
            "x=e4",
        ],
    )
    def test_unparsable(self, token: str) -> None:
        with pytest.raises(UnparsableMoveToken) as excinfo:
            parse_san(token)
        assert excinfo.value.text == token

    def test_stray_marker_does_not_set_flag(self) -> None:
        with pytest.raises(UnparsableMoveToken):
            parse_san("Nf3x+")


class TestCastlingTokens:
    @pytest.mark.parametrize(
        "token, side",
        [
            ("O-O", CastleSide.KINGSIDE),
            ("O-O+", CastleSide.KINGSIDE),
            ("0-0", CastleSide.KINGSIDE),
            ("O-O-O", CastleSide.QUEENSIDE),
            ("O-O-O#", CastleSide.QUEENSIDE),
        ],
    )
    def test_castling(self, token: str, side: CastleSide) -> None:
        assert parse_castling(token) == side

    @pytest.mark.parametrize("token", ["e4", "O-", "O-O-O-O", "Kg1"])
    def test_not_castling(self, token: str) -> None:
        assert parse_castling(token) is None
