"""
棋子定义

棋子是不可变值：走棋时由持有方用 with_position() 生成新值并按 piece_id 替换。
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from janggi.types import ROW_LEN, PieceKind, Position, Side

# 初始布局（以楚方视角给出行号，汉方按 ROW_LEN + 1 - row 镜像）
INITIAL_LAYOUT: list[tuple[PieceKind, int, tuple[int, ...]]] = [
    (PieceKind.SOLDIER, 4, (1, 3, 5, 7, 9)),
    (PieceKind.CANNON, 3, (2, 8)),
    (PieceKind.KING, 2, (5,)),
    (PieceKind.CAR, 1, (1, 9)),
    (PieceKind.ELEPHANT, 1, (2, 7)),
    (PieceKind.HORSE, 1, (3, 8)),
    (PieceKind.SCHOLAR, 1, (4, 6)),
]


@dataclass(frozen=True)
class Piece:
    """棋子

    piece_id 在整局中保持不变，用于区分"同一枚棋子"与"属性相同的另一枚棋子"。
    """

    kind: PieceKind
    side: Side
    position: Position
    piece_id: str

    def is_same_piece(self, other: Piece | None) -> bool:
        """是否为同一枚棋子（与当前位置无关）"""
        return other is not None and self.piece_id == other.piece_id

    def is_opponent(self, other: Piece | None) -> bool:
        """是否为对方棋子"""
        return other is not None and self.side != other.side

    def with_position(self, position: Position) -> Piece:
        """返回移动到新位置后的棋子，身份不变"""
        return replace(self, position=position)

    @property
    def image_path(self) -> str:
        return f"images/{self.side.value}_{self.kind.value}.png"

    def __repr__(self) -> str:
        return f"{self.kind.value}({self.side.value})@{self.position}"

    def to_dict(self) -> dict:
        """序列化为字典"""
        return {
            "id": self.piece_id,
            "kind": self.kind.value,
            "side": self.side.value,
            "position": {"row": self.position.row, "col": self.position.col},
        }


def make_piece_id(side: Side, kind: PieceKind, index: int) -> str:
    return f"{side.value}-{kind.value}-{index}"


def create_initial_pieces() -> list[Piece]:
    """创建开局的 32 枚棋子"""
    pieces: list[Piece] = []
    for side in (Side.CHO, Side.HAN):
        for kind, row, cols in INITIAL_LAYOUT:
            actual_row = row if side == Side.CHO else ROW_LEN + 1 - row
            for index, col in enumerate(cols, start=1):
                pieces.append(
                    Piece(
                        kind=kind,
                        side=side,
                        position=Position(actual_row, col),
                        piece_id=make_piece_id(side, kind, index),
                    )
                )
    return pieces
