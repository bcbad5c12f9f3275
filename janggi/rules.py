"""
走法规则

每种棋子一个纯函数 (piece, destination, board) -> bool，只判断几何与阻挡。
目标格是否越界、是否被己方占据由 Referee 统一检查。
"""

from __future__ import annotations

from typing import Callable

from janggi.board import Board
from janggi.piece import Piece
from janggi.types import PieceKind, Position

RuleFn = Callable[[Piece, Position, Board], bool]

# 马：先直走一步（马腿），再斜出一步
# 格式: (马腿偏移, 目标位置偏移列表)
HORSE_LEGS: list[tuple[tuple[int, int], list[tuple[int, int]]]] = [
    ((1, 0), [(2, -1), (2, 1)]),
    ((-1, 0), [(-2, -1), (-2, 1)]),
    ((0, -1), [(-1, -2), (1, -2)]),
    ((0, 1), [(-1, 2), (1, 2)]),
]

# 象：先直走一步，再沿同一方向斜出两步
# 格式: (直走偏移, 斜走单步偏移)
ELEPHANT_PATHS: list[tuple[tuple[int, int], tuple[int, int]]] = [
    ((1, 0), (1, -1)),
    ((1, 0), (1, 1)),
    ((-1, 0), (-1, -1)),
    ((-1, 0), (-1, 1)),
    ((0, -1), (-1, -1)),
    ((0, -1), (1, -1)),
    ((0, 1), (-1, 1)),
    ((0, 1), (1, 1)),
]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_palace_diagonal(origin: Position, destination: Position) -> bool:
    """两点是否在同一九宫格的同一条斜线上"""
    dr = destination.row - origin.row
    dc = destination.col - origin.col
    if dr == 0 or abs(dr) != abs(dc):
        return False
    if not (origin.is_palace_point() and destination.is_palace_point()):
        return False
    return origin.palace_side() == destination.palace_side()


def line_between(origin: Position, destination: Position) -> list[Position] | None:
    """直线（横竖或九宫斜线）上起点与终点之间的格子

    不构成直线时返回 None；相邻格返回空列表。
    """
    dr = destination.row - origin.row
    dc = destination.col - origin.col
    if dr == 0 and dc == 0:
        return None
    if dr != 0 and dc != 0 and not is_palace_diagonal(origin, destination):
        return None

    step = (_sign(dr), _sign(dc))
    cells = []
    pos = origin + step
    while pos != destination:
        cells.append(pos)
        pos = pos + step
    return cells


def soldier_can_move(piece: Piece, destination: Position, board: Board) -> bool:
    """卒/兵：向前或左右一步，不能后退；在敌方九宫斜线上可斜向前一步"""
    origin = piece.position
    forward = (destination.row - origin.row) * piece.side.forward
    dc = destination.col - origin.col

    if forward == 1 and dc == 0:
        return True
    if forward == 0 and abs(dc) == 1:
        return True
    if forward == 1 and abs(dc) == 1:
        enemy = piece.side.opposite
        return (
            origin.is_in_palace(enemy)
            and destination.is_in_palace(enemy)
            and is_palace_diagonal(origin, destination)
        )
    return False


def cannon_can_move(piece: Piece, destination: Position, board: Board) -> bool:
    """包：必须恰好越过一枚非包的棋子，且不能吃包"""
    cells = line_between(piece.position, destination)
    if cells is None:
        return False

    screens = [p for p in (board.get_piece(pos) for pos in cells) if p is not None]
    if len(screens) != 1 or screens[0].kind == PieceKind.CANNON:
        return False

    target = board.get_piece(destination)
    return target is None or target.kind != PieceKind.CANNON


def palace_step_can_move(piece: Piece, destination: Position, board: Board) -> bool:
    """将/士：九宫内走一步，斜走只能沿九宫斜线"""
    origin = piece.position
    if not destination.is_in_palace(piece.side):
        return False

    dr = abs(destination.row - origin.row)
    dc = abs(destination.col - origin.col)
    if max(dr, dc) != 1:
        return False
    if dr == 1 and dc == 1:
        return is_palace_diagonal(origin, destination)
    return True


def car_can_move(piece: Piece, destination: Position, board: Board) -> bool:
    """车：横竖或九宫斜线任意距离，途中不能有子"""
    cells = line_between(piece.position, destination)
    if cells is None:
        return False
    return all(board.is_empty(pos) for pos in cells)


def elephant_can_move(piece: Piece, destination: Position, board: Board) -> bool:
    """象：直一步再斜两步，途经的两个格子都必须为空"""
    origin = piece.position
    for straight, diagonal in ELEPHANT_PATHS:
        first = origin + straight
        second = first + diagonal
        if second + diagonal != destination:
            continue
        return board.is_empty(first) and board.is_empty(second)
    return False


def horse_can_move(piece: Piece, destination: Position, board: Board) -> bool:
    """马：直一步再斜一步，需检查马腿"""
    origin = piece.position
    for leg_offset, move_offsets in HORSE_LEGS:
        for move_offset in move_offsets:
            if origin + move_offset == destination:
                return board.is_empty(origin + leg_offset)
    return False


MOVE_RULES: dict[PieceKind, RuleFn] = {
    PieceKind.SOLDIER: soldier_can_move,
    PieceKind.CANNON: cannon_can_move,
    PieceKind.KING: palace_step_can_move,
    PieceKind.CAR: car_can_move,
    PieceKind.ELEPHANT: elephant_can_move,
    PieceKind.HORSE: horse_can_move,
    PieceKind.SCHOLAR: palace_step_can_move,
}


def get_rule(kind: PieceKind) -> RuleFn:
    """取棋子类型对应的规则函数"""
    return MOVE_RULES[kind]
