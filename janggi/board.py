"""
棋盘快照

Board 是由当前棋子集合推导出的只读快照，每次棋子集合变化后由调用方重新构建。
"""

from __future__ import annotations

from typing import Iterable, Iterator

from janggi.fen import to_fen
from janggi.logging import logger
from janggi.piece import Piece
from janggi.types import COL_LEN, ROW_LEN, PieceKind, Position, Side

# 显示顺序：第 10 行在上
DISPLAY_ROWS = range(ROW_LEN, 0, -1)
COLUMNS = range(1, COL_LEN + 1)

# 终端显示用的汉字
PIECE_CHARS = {
    (PieceKind.KING, Side.CHO): "楚",
    (PieceKind.KING, Side.HAN): "漢",
    (PieceKind.SCHOLAR, Side.CHO): "士",
    (PieceKind.SCHOLAR, Side.HAN): "仕",
    (PieceKind.ELEPHANT, Side.CHO): "象",
    (PieceKind.ELEPHANT, Side.HAN): "相",
    (PieceKind.HORSE, Side.CHO): "馬",
    (PieceKind.HORSE, Side.HAN): "傌",
    (PieceKind.CAR, Side.CHO): "車",
    (PieceKind.CAR, Side.HAN): "俥",
    (PieceKind.CANNON, Side.CHO): "包",
    (PieceKind.CANNON, Side.HAN): "砲",
    (PieceKind.SOLDIER, Side.CHO): "卒",
    (PieceKind.SOLDIER, Side.HAN): "兵",
}


def find_conflicts(pieces: Iterable[Piece]) -> dict[Position, list[Piece]]:
    """找出被多枚棋子同时占据的位置

    正常对局中应始终为空；非空说明上游的走子/吃子逻辑破坏了一格一子。
    """
    occupants: dict[Position, list[Piece]] = {}
    for piece in pieces:
        occupants.setdefault(piece.position, []).append(piece)
    return {pos: ps for pos, ps in occupants.items() if len(ps) > 1}


class Board:
    """长棋棋盘快照

    坐标系统：
    - row 1-10: 1 是楚方底线，10 是汉方底线
    - col 1-9: 从左到右
    """

    def __init__(self, cells: dict[Position, Piece] | None = None):
        self._cells: dict[Position, Piece] = dict(cells or {})

    @classmethod
    def build(cls, pieces: Iterable[Piece]) -> Board:
        """由棋子集合构建快照

        同一格出现多枚棋子时取迭代顺序中最后一枚，并记录警告。
        """
        cells: dict[Position, Piece] = {}
        for piece in pieces:
            if not piece.position.is_valid():
                logger.warning("Piece {} is off the board, ignored", piece)
                continue
            previous = cells.get(piece.position)
            if previous is not None:
                logger.warning(
                    "Inconsistent board: {} and {} share {}", previous, piece, piece.position
                )
            cells[piece.position] = piece
        return cls(cells)

    def get_piece(self, pos: Position) -> Piece | None:
        """获取指定位置的棋子"""
        return self._cells.get(pos)

    def is_empty(self, pos: Position) -> bool:
        return pos not in self._cells

    def get_all_pieces(self, side: Side | None = None) -> list[Piece]:
        """获取所有棋子，可按阵营过滤"""
        if side is None:
            return list(self._cells.values())
        return [p for p in self._cells.values() if p.side == side]

    def find_piece(self, piece_id: str) -> Piece | None:
        """按 piece_id 查找棋子"""
        for piece in self._cells.values():
            if piece.piece_id == piece_id:
                return piece
        return None

    def tiles(self) -> list[list[tuple[Position, Piece | None]]]:
        """按显示顺序返回全部 90 个交叉点"""
        return [
            [(Position(row, col), self._cells.get(Position(row, col))) for col in COLUMNS]
            for row in DISPLAY_ROWS
        ]

    def to_fen(self, turn: Side = Side.CHO) -> str:
        """转换为 FEN 格式"""
        return to_fen(self._cells.values(), turn)

    def to_dict(self) -> dict:
        """序列化为字典"""
        return {"pieces": [piece.to_dict() for piece in self._cells.values()]}

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._cells.values())

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Board({len(self._cells)} pieces)"

    def display(self) -> str:
        """返回棋盘的文本表示"""
        lines = []
        for row in DISPLAY_ROWS:
            line = f"{row:>2} "
            for col in COLUMNS:
                piece = self.get_piece(Position(row, col))
                if piece is None:
                    line += "十 "
                else:
                    line += PIECE_CHARS[(piece.kind, piece.side)] + " "
            lines.append(line.rstrip())
        lines.append("   " + "  ".join(str(col) for col in COLUMNS))
        return "\n".join(lines)
