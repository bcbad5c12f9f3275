"""
核心类型定义

定义长棋（Janggi）中所有基础数据类型
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

# 棋盘尺寸：10 行 9 列交叉点
ROW_LEN = 10
COL_LEN = 9

# 九宫格列范围
PALACE_COLS = (4, 5, 6)


class InvalidCoordinateError(ValueError):
    """坐标超出 10x9 棋盘"""

    def __init__(self, row: int, col: int):
        super().__init__(f"Position ({row}, {col}) is outside the {ROW_LEN}x{COL_LEN} board")
        self.row = row
        self.col = col


class Side(Enum):
    """阵营：楚（CHO）/ 汉（HAN）"""

    CHO = "cho"
    HAN = "han"

    @property
    def opposite(self) -> Side:
        """获取对方阵营"""
        return Side.HAN if self == Side.CHO else Side.CHO

    @property
    def forward(self) -> int:
        """前进方向的行增量（楚在下方向上走）"""
        return 1 if self == Side.CHO else -1

    @property
    def palace_rows(self) -> tuple[int, int, int]:
        """己方九宫格所在的行"""
        if self == Side.CHO:
            return (1, 2, 3)
        return (ROW_LEN - 2, ROW_LEN - 1, ROW_LEN)


class PieceKind(Enum):
    """棋子类型"""

    # 卒/兵
    SOLDIER = "soldier"
    # 包
    CANNON = "cannon"
    # 将（楚/汉）
    KING = "king"
    # 车
    CAR = "car"
    # 象
    ELEPHANT = "elephant"
    # 马
    HORSE = "horse"
    # 士
    SCHOLAR = "scholar"


class Position(NamedTuple):
    """棋盘位置 (row, col)

    row: 1-10 (1 是楚方底线，10 是汉方底线)
    col: 1-9 (从左到右)

    直接构造不做检查，便于规则代码计算偏移后再用 is_valid() 判断；
    外部输入请用 Position.of()。
    """

    row: int
    col: int

    @classmethod
    def of(cls, row: int, col: int) -> Position:
        """带边界检查的构造"""
        pos = cls(row, col)
        if not pos.is_valid():
            raise InvalidCoordinateError(row, col)
        return pos

    @classmethod
    def parse(cls, text: str) -> Position:
        """从 "row,col" 字符串解析"""
        parts = text.replace(" ", "").split(",")
        if len(parts) != 2:
            raise ValueError(f"Invalid position: expected 'row,col', got: {text!r}")
        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError as e:
            raise ValueError(f"Invalid position: {text!r}") from e
        return cls.of(row, col)

    def is_valid(self) -> bool:
        """检查位置是否在棋盘范围内"""
        return 1 <= self.row <= ROW_LEN and 1 <= self.col <= COL_LEN

    def is_in_palace(self, side: Side) -> bool:
        """检查位置是否在指定阵营的九宫格内"""
        return self.col in PALACE_COLS and self.row in side.palace_rows

    def palace_side(self) -> Side | None:
        """位置所在九宫格的归属，不在九宫格内返回 None"""
        for side in Side:
            if self.is_in_palace(side):
                return side
        return None

    def is_palace_point(self) -> bool:
        """是否位于九宫格斜线上（四角或中心）"""
        side = self.palace_side()
        if side is None:
            return False
        rows = side.palace_rows
        if self.row == rows[1]:
            return self.col == PALACE_COLS[1]
        return self.col != PALACE_COLS[1]

    def __add__(self, other: tuple[int, int]) -> Position:
        """位置加偏移量"""
        return Position(self.row + other[0], self.col + other[1])

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


class Move(NamedTuple):
    """走棋动作"""

    from_pos: Position
    to_pos: Position

    def to_notation(self) -> str:
        """转换为记谱法：r1c1-r2c2，行用两位数字

        例如 "041-051" 表示 (4,1) 到 (5,1)
        """
        return (
            f"{self.from_pos.row:02d}{self.from_pos.col}-{self.to_pos.row:02d}{self.to_pos.col}"
        )

    @classmethod
    def from_notation(cls, notation: str) -> Move:
        """从记谱法解析"""
        parts = notation.split("-")
        if len(parts) != 2 or any(len(p) != 3 or not p.isdigit() for p in parts):
            raise ValueError(f"Invalid move notation: {notation!r}")
        from_pos = Position.of(int(parts[0][:2]), int(parts[0][2]))
        to_pos = Position.of(int(parts[1][:2]), int(parts[1][2]))
        return cls(from_pos, to_pos)
