"""
裁判

组合各棋子的走法规则与越界、己方占位检查，给出走法是否合法的判断。
Referee 不持有状态，也不修改棋盘。
"""

from __future__ import annotations

from janggi.board import COLUMNS, Board
from janggi.piece import Piece
from janggi.rules import get_rule
from janggi.types import ROW_LEN, Position


class Referee:
    """走法合法性判断"""

    def is_valid_move(self, destination: Position, piece: Piece, board: Board) -> bool:
        """检查 piece 能否走到 destination

        依次检查：目标在棋盘内、目标不是原地、目标不被己方占据、棋子自身的走法与阻挡。
        """
        if not destination.is_valid() or not piece.position.is_valid():
            return False

        if destination == piece.position:
            return False

        target = board.get_piece(destination)
        if target is not None and target.side == piece.side:
            return False

        return get_rule(piece.kind)(piece, destination, board)

    def legal_destinations(self, piece: Piece, board: Board) -> list[Position]:
        """获取棋子所有合法的目标位置"""
        return [
            pos
            for pos in (Position(row, col) for row in range(1, ROW_LEN + 1) for col in COLUMNS)
            if self.is_valid_move(pos, piece, board)
        ]
