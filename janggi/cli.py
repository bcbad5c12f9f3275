"""
长棋命令行工具

- show: 显示局面
- check: 判断一步走法是否合法
- moves: 列出某枚棋子的所有合法目标
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from janggi.board import COLUMNS, PIECE_CHARS, Board
from janggi.fen import INITIAL_FEN, parse_fen
from janggi.logging import RUNTIME_LOGS_DIR, configure_logging
from janggi.referee import Referee
from janggi.types import Position, Side

app = typer.Typer(help="Janggi rules engine")
console = Console()

SIDE_STYLES = {Side.CHO: "bold green", Side.HAN: "bold red"}


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="日志级别"),
    log_to_file: bool = typer.Option(False, "--log-to-file", help="同时写入 logs/janggi.log"),
) -> None:
    """长棋规则引擎"""
    configure_logging(log_level.upper(), RUNTIME_LOGS_DIR / "janggi.log" if log_to_file else None)


def _load(fen: str) -> tuple[Board, Side]:
    try:
        state = parse_fen(fen)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    return Board.build(state.pieces), state.turn


def _parse_position(text: str) -> Position:
    try:
        return Position.parse(text)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def render_board(board: Board, highlights: set[Position] | None = None) -> Table:
    """生成棋盘表格"""
    highlights = highlights or set()
    table = Table(show_header=True, show_lines=False, box=None, pad_edge=False)
    table.add_column("", justify="right", style="dim")
    for col in COLUMNS:
        table.add_column(str(col), justify="center")

    for row in board.tiles():
        cells = [str(row[0][0].row)]
        for pos, piece in row:
            if piece is not None:
                text = f"[{SIDE_STYLES[piece.side]}]{PIECE_CHARS[(piece.kind, piece.side)]}[/]"
            elif pos in highlights:
                text = "[yellow]◎[/yellow]"
            else:
                text = "[dim]·[/dim]"
            cells.append(text)
        table.add_row(*cells)
    return table


@app.command()
def show(
    fen: str = typer.Option(INITIAL_FEN, "--fen", "-f", help="FEN 字符串"),
) -> None:
    """显示局面"""
    board, turn = _load(fen)
    console.print(render_board(board))
    console.print(f"Turn: [{SIDE_STYLES[turn]}]{turn.value}[/]")


@app.command()
def check(
    from_pos: str = typer.Option(..., "--from", help="起点 row,col"),
    to_pos: str = typer.Option(..., "--to", help="终点 row,col"),
    fen: str = typer.Option(INITIAL_FEN, "--fen", "-f", help="FEN 字符串"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """判断走法是否合法"""
    board, _ = _load(fen)
    origin = _parse_position(from_pos)
    destination = _parse_position(to_pos)

    piece = board.get_piece(origin)
    if piece is None:
        console.print(f"[red]Error: no piece at {origin}[/red]")
        raise typer.Exit(1)

    legal = Referee().is_valid_move(destination, piece, board)
    if output_json:
        print(json.dumps({"piece": piece.to_dict(), "to": list(destination), "legal": legal}))
    else:
        verdict = "[green]legal[/green]" if legal else "[red]illegal[/red]"
        console.print(f"{piece.kind.value} {origin} -> {destination}: {verdict}")


@app.command()
def moves(
    at: str = typer.Option(..., "--at", help="棋子位置 row,col"),
    fen: str = typer.Option(INITIAL_FEN, "--fen", "-f", help="FEN 字符串"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """列出棋子的所有合法目标"""
    board, _ = _load(fen)
    origin = _parse_position(at)

    piece = board.get_piece(origin)
    if piece is None:
        console.print(f"[red]Error: no piece at {origin}[/red]")
        raise typer.Exit(1)

    destinations = Referee().legal_destinations(piece, board)
    if output_json:
        response = {
            "piece": piece.to_dict(),
            "moves": [{"row": p.row, "col": p.col} for p in destinations],
            "total": len(destinations),
        }
        print(json.dumps(response, indent=2))
    else:
        console.print(render_board(board, set(destinations)))
        console.print(f"Legal moves for {piece.kind.value} at {origin} ({len(destinations)}):")
        for pos in destinations:
            console.print(f"  {pos}")


if __name__ == "__main__":
    app()
