"""
日志配置测试
"""

from janggi.board import Board
from janggi.logging import configure_logging, logger
from janggi.piece import Piece
from janggi.types import PieceKind, Position, Side


def test_board_conflict_is_logged(tmp_path):
    """一格多子时写入警告日志"""
    log_file = tmp_path / "logs" / "janggi.log"
    configure_logging("WARNING", log_file)
    try:
        Board.build(
            [
                Piece(PieceKind.CAR, Side.CHO, Position(5, 5), "cho-car-1"),
                Piece(PieceKind.HORSE, Side.HAN, Position(5, 5), "han-horse-1"),
            ]
        )
    finally:
        logger.remove()

    assert "Inconsistent board" in log_file.read_text(encoding="utf-8")
