"""
棋子单元测试
"""

import dataclasses

import pytest

from janggi.piece import Piece, create_initial_pieces
from janggi.types import PieceKind, Position, Side


class TestInitialPieces:
    """开局布局测试"""

    def test_piece_count(self):
        """每方 16 个棋子，共 32 个"""
        pieces = create_initial_pieces()
        assert len(pieces) == 32
        assert len([p for p in pieces if p.side == Side.CHO]) == 16
        assert len([p for p in pieces if p.side == Side.HAN]) == 16

    def test_unique_positions_and_ids(self):
        """一格一子，身份唯一"""
        pieces = create_initial_pieces()
        assert len({p.position for p in pieces}) == 32
        assert len({p.piece_id for p in pieces}) == 32

    def test_kings(self):
        """将的位置"""
        kings = {p.side: p.position for p in create_initial_pieces() if p.kind == PieceKind.KING}
        assert kings == {Side.CHO: Position(2, 5), Side.HAN: Position(9, 5)}

    def test_han_is_mirrored(self):
        """汉方布局为楚方的镜像"""
        pieces = create_initial_pieces()
        cho = {(p.kind, p.position.row, p.position.col) for p in pieces if p.side == Side.CHO}
        han = {(p.kind, 11 - p.position.row, p.position.col) for p in pieces if p.side == Side.HAN}
        assert cho == han

    def test_back_rank(self):
        """楚方底线"""
        back = {
            p.position.col: p.kind
            for p in create_initial_pieces()
            if p.side == Side.CHO and p.position.row == 1
        }
        assert back == {
            1: PieceKind.CAR,
            2: PieceKind.ELEPHANT,
            3: PieceKind.HORSE,
            4: PieceKind.SCHOLAR,
            6: PieceKind.SCHOLAR,
            7: PieceKind.ELEPHANT,
            8: PieceKind.HORSE,
            9: PieceKind.CAR,
        }


class TestPieceIdentity:
    """棋子身份测试"""

    def test_same_piece_after_move(self):
        """移动后仍是同一枚棋子"""
        car = Piece(PieceKind.CAR, Side.CHO, Position(1, 1), "cho-car-1")
        moved = car.with_position(Position(5, 1))
        assert moved.is_same_piece(car)
        assert moved.position == Position(5, 1)
        assert car.position == Position(1, 1)

    def test_equal_attributes_different_identity(self):
        """属性相同但身份不同"""
        a = Piece(PieceKind.SOLDIER, Side.CHO, Position(4, 1), "cho-soldier-1")
        b = Piece(PieceKind.SOLDIER, Side.CHO, Position(4, 1), "cho-soldier-2")
        assert not a.is_same_piece(b)
        assert not a.is_same_piece(None)

    def test_is_opponent(self):
        """测试对方判断"""
        cho = Piece(PieceKind.CAR, Side.CHO, Position(1, 1), "cho-car-1")
        han = Piece(PieceKind.CAR, Side.HAN, Position(10, 1), "han-car-1")
        other_cho = Piece(PieceKind.HORSE, Side.CHO, Position(1, 3), "cho-horse-1")
        assert cho.is_opponent(han)
        assert not cho.is_opponent(other_cho)
        assert not cho.is_opponent(None)

    def test_piece_is_immutable(self):
        """棋子不可原地修改"""
        car = Piece(PieceKind.CAR, Side.CHO, Position(1, 1), "cho-car-1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            car.position = Position(2, 1)

    def test_image_path(self):
        """资源命名 images/{side}_{kind}.png"""
        car = Piece(PieceKind.CAR, Side.HAN, Position(10, 1), "han-car-1")
        assert car.image_path == "images/han_car.png"

    def test_to_dict(self):
        """测试序列化"""
        king = Piece(PieceKind.KING, Side.CHO, Position(2, 5), "cho-king-1")
        assert king.to_dict() == {
            "id": "cho-king-1",
            "kind": "king",
            "side": "cho",
            "position": {"row": 2, "col": 5},
        }
