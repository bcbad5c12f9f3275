"""
长棋（Janggi）规则引擎
"""

from janggi.board import Board, find_conflicts
from janggi.game import ClickOutcome, GameConfig, JanggiGame, MoveRecord
from janggi.piece import Piece, create_initial_pieces
from janggi.referee import Referee
from janggi.types import InvalidCoordinateError, Move, PieceKind, Position, Side

__all__ = [
    "Board",
    "ClickOutcome",
    "GameConfig",
    "InvalidCoordinateError",
    "JanggiGame",
    "Move",
    "MoveRecord",
    "Piece",
    "PieceKind",
    "Position",
    "Referee",
    "Side",
    "create_initial_pieces",
    "find_conflicts",
]
