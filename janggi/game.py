"""
游戏管理类

持有棋子集合、选子状态、回合与历史记录；走子前询问 Referee，合法后由这里执行移动或吃子。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

from janggi.board import Board
from janggi.fen import parse_fen, to_fen
from janggi.logging import logger
from janggi.piece import Piece, create_initial_pieces
from janggi.referee import Referee
from janggi.types import InvalidCoordinateError, Move, Position, Side


class ClickOutcome(Enum):
    """点击棋盘的结果"""

    IGNORED = "ignored"
    SELECTED = "selected"
    DESELECTED = "deselected"
    RESELECTED = "reselected"
    MOVED = "moved"
    CAPTURED = "captured"
    REJECTED = "rejected"


@dataclass
class MoveRecord:
    """走棋记录"""

    move: Move
    piece: Piece  # 走之前的棋子
    captured: Piece | None
    notation: str


@dataclass
class GameConfig:
    """游戏配置"""

    enforce_turns: bool = True  # 是否轮流走子
    first_turn: Side = Side.CHO


class JanggiGame:
    """长棋对局"""

    def __init__(
        self,
        game_id: str | None = None,
        config: GameConfig | None = None,
        pieces: list[Piece] | None = None,
        current_turn: Side | None = None,
    ):
        self.game_id = game_id or str(uuid4())
        self.config = config or GameConfig()
        self.referee = Referee()
        self.pieces: list[Piece] = []
        self.board = Board()
        self._set_pieces(list(pieces) if pieces is not None else create_initial_pieces())
        self.current_turn = current_turn or self.config.first_turn
        self.selected: Piece | None = None
        self.move_history: list[MoveRecord] = []

    @classmethod
    def from_fen(
        cls, fen: str, game_id: str | None = None, config: GameConfig | None = None
    ) -> JanggiGame:
        """从 FEN 创建对局"""
        state = parse_fen(fen)
        return cls(game_id=game_id, config=config, pieces=state.pieces, current_turn=state.turn)

    def _set_pieces(self, pieces: list[Piece]) -> None:
        """替换棋子集合并重建棋盘快照"""
        self.pieces = pieces
        self.board = Board.build(pieces)

    def get_piece(self, piece_id: str) -> Piece | None:
        """按 piece_id 获取当前的棋子"""
        for piece in self.pieces:
            if piece.piece_id == piece_id:
                return piece
        return None

    def can_select(self, piece: Piece) -> bool:
        """当前回合是否可以操作该棋子"""
        return not self.config.enforce_turns or piece.side == self.current_turn

    def is_valid_move(self, destination: Position, piece: Piece) -> bool:
        """回合检查 + 裁判判断"""
        return self.can_select(piece) and self.referee.is_valid_move(
            destination, piece, self.board
        )

    def click(self, position: Position) -> ClickOutcome:
        """处理一次点击

        - 未选子：点到可操作的棋子则选中
        - 再次点击已选中的棋子：取消选中
        - 点到己方其他棋子：改选该棋子
        - 其他情况按走子处理，不合法则取消选中
        """
        if not position.is_valid():
            raise InvalidCoordinateError(position.row, position.col)

        clicked = self.board.get_piece(position)

        if self.selected is None:
            if clicked is None or not self.can_select(clicked):
                return ClickOutcome.IGNORED
            self.selected = clicked
            return ClickOutcome.SELECTED

        selected = self.selected
        if selected.is_same_piece(clicked):
            self.selected = None
            return ClickOutcome.DESELECTED

        if clicked is not None and not selected.is_opponent(clicked):
            self.selected = clicked
            return ClickOutcome.RESELECTED

        self.selected = None
        record = self._apply(selected, position)
        if record is None:
            return ClickOutcome.REJECTED
        return ClickOutcome.CAPTURED if record.captured else ClickOutcome.MOVED

    def make_move(self, move: Move) -> bool:
        """执行走棋

        返回：是否成功
        """
        piece = self.board.get_piece(move.from_pos)
        if piece is None:
            logger.debug("No piece at {}", move.from_pos)
            return False

        self.selected = None
        return self._apply(piece, move.to_pos) is not None

    def _apply(self, piece: Piece, destination: Position) -> MoveRecord | None:
        """判断合法后执行移动或吃子"""
        if not self.is_valid_move(destination, piece):
            logger.debug("Illegal move: {} -> {}", piece, destination)
            return None

        move = Move(piece.position, destination)
        captured = self.board.get_piece(destination)
        if captured is not None:
            self.take_piece(piece, captured)
        else:
            self.move_piece(piece, destination)

        record = MoveRecord(move, piece, captured, self._generate_notation(piece, move, captured))
        self.move_history.append(record)
        logger.info("{} plays {}", piece.side.value, record.notation)

        if self.config.enforce_turns:
            self.current_turn = self.current_turn.opposite
        return record

    def move_piece(self, piece: Piece, position: Position) -> None:
        """把棋子移到新位置（按 piece_id 替换）"""
        self._set_pieces(
            [p.with_position(position) if p.is_same_piece(piece) else p for p in self.pieces]
        )

    def remove_piece(self, piece: Piece) -> None:
        """从棋子集合中移除棋子"""
        self._set_pieces([p for p in self.pieces if not p.is_same_piece(piece)])

    def take_piece(self, piece: Piece, target: Piece) -> None:
        """吃子：移除目标，再把棋子移到目标所在位置"""
        self.remove_piece(target)
        self.move_piece(piece, target.position)

    def undo_move(self) -> bool:
        """撤销上一步"""
        if not self.move_history:
            return False

        record = self.move_history.pop()
        self.move_piece(record.piece, record.move.from_pos)
        if record.captured is not None:
            self._set_pieces(self.pieces + [record.captured])

        if self.config.enforce_turns:
            self.current_turn = self.current_turn.opposite
        self.selected = None
        return True

    def get_legal_moves(self, side: Side | None = None) -> list[Move]:
        """获取指定阵营（默认当前方）的所有合法走法"""
        side = side or self.current_turn
        moves = []
        for piece in self.board.get_all_pieces(side):
            for to_pos in self.referee.legal_destinations(piece, self.board):
                moves.append(Move(piece.position, to_pos))
        return moves

    def _generate_notation(self, piece: Piece, move: Move, captured: Piece | None) -> str:
        """生成走棋记谱"""
        notation = piece.kind.value
        if captured:
            notation += "x"
        return notation + move.to_notation()

    def to_fen(self) -> str:
        return to_fen(self.pieces, self.current_turn)

    def to_dict(self) -> dict:
        """序列化为字典"""
        return {
            "game_id": self.game_id,
            "board": self.board.to_dict(),
            "current_turn": self.current_turn.value,
            "selected": self.selected.piece_id if self.selected else None,
            "move_count": len(self.move_history),
            "legal_moves": [
                {
                    "from": {"row": m.from_pos.row, "col": m.from_pos.col},
                    "to": {"row": m.to_pos.row, "col": m.to_pos.col},
                }
                for m in self.get_legal_moves()
            ],
        }

    def get_move_history(self) -> list[dict]:
        """获取走棋历史"""
        return [
            {
                "move": {
                    "from": {"row": r.move.from_pos.row, "col": r.move.from_pos.col},
                    "to": {"row": r.move.to_pos.row, "col": r.move.to_pos.col},
                },
                "notation": r.notation,
                "captured": r.captured.to_dict() if r.captured else None,
            }
            for r in self.move_history
        ]

    def __repr__(self) -> str:
        return (
            f"JanggiGame({self.game_id}, turn={self.current_turn.value}, "
            f"moves={len(self.move_history)})"
        )
