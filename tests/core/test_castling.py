"""Tests for CastlingRights."""

import pytest

from fency.core.castling import CastlingRights
from fency.core.enums import Color
from fency.core.errors import InvalidCastlingLetter
from fency.core.piece import Figure


class TestCastlingRights:
    def test_default_all(self) -> None:
        assert str(CastlingRights()) == "KQkq"

    def test_none_renders_dash(self) -> None:
        assert str(CastlingRights.none()) == "-"

    def test_castle_clears_only_own_color(self) -> None:
        rights = CastlingRights()
        rights.castle(Color.WHITE)
        assert str(rights) == "kq"
        rights.castle(Color.BLACK)
        assert str(rights) == "-"

    def test_king_move_clears_pair(self) -> None:
        rights = CastlingRights()
        rights.update(Figure.from_string("ke8"))
        assert str(rights) == "KQ"

    @pytest.mark.parametrize(
        "figure, expected",
        [
            ("Ra1", "Kkq"),
            ("Rh1", "Qkq"),
            ("ra8", "KQk"),
            ("rh8", "KQq"),
            ("Rd1", "KQkq"),
            ("Ra8", "KQkq"),  # white rook on a black corner
            ("Na1", "KQkq"),
        ],
    )
    def test_rook_leaving_corner(self, figure: str, expected: str) -> None:
        rights = CastlingRights()
        rights.update(Figure.from_string(figure))
        assert str(rights) == expected

    def test_order_is_fixed(self) -> None:
        assert str(CastlingRights.from_string("qkQK")) == "KQkq"

    def test_from_string_is_lenient(self) -> None:
        rights = CastlingRights.from_string("Kxq")
        assert rights.white_kingside and rights.black_queenside
        assert not rights.white_queenside and not rights.black_kingside

    def test_from_string_strict(self) -> None:
        with pytest.raises(InvalidCastlingLetter):
            CastlingRights.from_string("Kxq", strict=True)

    def test_has(self) -> None:
        rights = CastlingRights.from_string("Kq")
        assert rights.has(Color.WHITE, kingside=True)
        assert not rights.has(Color.WHITE, kingside=False)
        assert rights.has(Color.BLACK, kingside=False)

    def test_copy_is_independent(self) -> None:
        rights = CastlingRights()
        clone = rights.copy()
        clone.castle(Color.WHITE)
        assert str(rights) == "KQkq"
        assert clone != rights
