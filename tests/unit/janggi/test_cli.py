"""
命令行工具测试
"""

import json

from typer.testing import CliRunner

from janggi.cli import app

runner = CliRunner()

CANNON_FEN = "4k4/9/9/9/9/9/9/1C2h3r/4K4/9 c"


class TestShow:
    def test_initial(self):
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 0
        assert "Turn" in result.stdout

    def test_bad_fen(self):
        result = runner.invoke(app, ["show", "--fen", "9/9"])
        assert result.exit_code == 1


class TestCheck:
    def test_legal(self):
        result = runner.invoke(app, ["check", "--from", "4,1", "--to", "5,1", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["legal"] is True
        assert data["piece"]["kind"] == "soldier"

    def test_illegal(self):
        result = runner.invoke(app, ["check", "--from", "4,1", "--to", "3,1", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["legal"] is False

    def test_cannon_capture(self):
        """包越过 (3,5) 的马吃 (3,9) 的车"""
        result = runner.invoke(
            app, ["check", "--fen", CANNON_FEN, "--from", "3,2", "--to", "3,9", "--json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["legal"] is True

    def test_text_output(self):
        result = runner.invoke(app, ["check", "--from", "4,1", "--to", "5,1"])
        assert result.exit_code == 0
        assert "legal" in result.stdout

    def test_no_piece(self):
        result = runner.invoke(app, ["check", "--from", "5,5", "--to", "6,5"])
        assert result.exit_code == 1

    def test_off_board(self):
        result = runner.invoke(app, ["check", "--from", "0,1", "--to", "5,1"])
        assert result.exit_code == 1


class TestMoves:
    def test_json(self):
        result = runner.invoke(app, ["moves", "--at", "4,1", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["total"] == 2
        assert {"row": 5, "col": 1} in data["moves"]

    def test_table(self):
        result = runner.invoke(app, ["moves", "--at", "1,3"])
        assert result.exit_code == 0
        assert "Legal moves" in result.stdout
