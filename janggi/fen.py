"""FEN 格式的局面编码与解析

格式: "<board> [turn]"
- board: 从第 10 行到第 1 行，用 / 分隔；数字表示连续空位
- 棋子字母: k 将, s 士, e 象, h 马, r 车, c 包, p 卒；大写为楚，小写为汉
- turn: c（楚走）或 h（汉走），省略时为 c
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from janggi.piece import Piece, make_piece_id
from janggi.types import COL_LEN, ROW_LEN, PieceKind, Position, Side

# 棋子类型 -> 字符
PIECE_TO_CHAR: dict[PieceKind, str] = {
    PieceKind.KING: "k",
    PieceKind.SCHOLAR: "s",
    PieceKind.ELEPHANT: "e",
    PieceKind.HORSE: "h",
    PieceKind.CAR: "r",
    PieceKind.CANNON: "c",
    PieceKind.SOLDIER: "p",
}

# 字符 -> 棋子类型
CHAR_TO_PIECE: dict[str, PieceKind] = {v: k for k, v in PIECE_TO_CHAR.items()}

TURN_TO_CHAR = {Side.CHO: "c", Side.HAN: "h"}
CHAR_TO_TURN = {v: k for k, v in TURN_TO_CHAR.items()}

INITIAL_FEN = "rehs1sehr/4k4/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/4K4/REHS1SEHR c"


@dataclass
class FenState:
    """FEN 解析结果"""

    pieces: list[Piece]
    turn: Side


def piece_to_char(piece: Piece) -> str:
    char = PIECE_TO_CHAR[piece.kind]
    return char.upper() if piece.side == Side.CHO else char


def to_fen(pieces: Iterable[Piece], turn: Side = Side.CHO) -> str:
    """棋子集合转换为 FEN 字符串"""
    cells = {p.position: p for p in pieces}
    rows = []
    for row in range(ROW_LEN, 0, -1):
        row_str = ""
        empty_count = 0
        for col in range(1, COL_LEN + 1):
            piece = cells.get(Position(row, col))
            if piece is None:
                empty_count += 1
            else:
                if empty_count > 0:
                    row_str += str(empty_count)
                    empty_count = 0
                row_str += piece_to_char(piece)
        if empty_count > 0:
            row_str += str(empty_count)
        rows.append(row_str)
    return "/".join(rows) + " " + TURN_TO_CHAR[turn]


def parse_fen(fen: str) -> FenState:
    """解析 FEN 字符串

    Raises:
        ValueError: 格式错误
    """
    parts = fen.strip().split()
    if not parts or len(parts) > 2:
        raise ValueError(f"Invalid FEN format: expected '<board> [turn]', got: {fen!r}")

    turn = Side.CHO
    if len(parts) == 2:
        turn_str = parts[1].lower()
        if turn_str not in CHAR_TO_TURN:
            raise ValueError(f"Invalid turn: expected 'c' or 'h', got: {parts[1]!r}")
        turn = CHAR_TO_TURN[turn_str]

    return FenState(pieces=_parse_board(parts[0]), turn=turn)


def _parse_board(board_str: str) -> list[Piece]:
    """解析棋盘字符串"""
    rows = board_str.split("/")
    if len(rows) != ROW_LEN:
        raise ValueError(f"Invalid board: expected {ROW_LEN} rows, got {len(rows)}")

    pieces: list[Piece] = []
    counters: dict[tuple[Side, PieceKind], int] = {}

    for row_idx, row_str in enumerate(rows):
        # FEN 从上往下是第 10 行到第 1 行
        row = ROW_LEN - row_idx
        col = 1

        for ch in row_str:
            if ch.isdigit():
                col += int(ch)
                continue

            kind = CHAR_TO_PIECE.get(ch.lower())
            if kind is None:
                raise ValueError(f"Invalid piece character {ch!r} in row {row}")
            if col > COL_LEN:
                raise ValueError(f"Row {row} has more than {COL_LEN} columns")

            side = Side.CHO if ch.isupper() else Side.HAN
            index = counters.get((side, kind), 0) + 1
            counters[(side, kind)] = index
            pieces.append(
                Piece(
                    kind=kind,
                    side=side,
                    position=Position(row, col),
                    piece_id=make_piece_id(side, kind, index),
                )
            )
            col += 1

        if col != COL_LEN + 1:
            raise ValueError(f"Row {row} has {col - 1} columns, expected {COL_LEN}")

    return pieces
