from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from ttt_reducer.cli import main

SRC = Path(__file__).resolve().parents[1] / "src"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("TTT_HISTORY", raising=False)
    monkeypatch.delenv("TTT_LOG_LEVEL", raising=False)


def _run_cli(args: list[str], cwd: Path, stdin: str | None = None) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    exe = [sys.executable, "-m", "ttt_reducer.cli"]
    return subprocess.run(exe + args, cwd=cwd, capture_output=True, text=True, input=stdin, env=env)


def test_play_prints_final_state(capsys):
    assert main(["play", "--actions", "0,3,1,4,2"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["game_over"] == [0, 1, 2]
    assert out["moves"] == [0, 3, 1, 4, 2]
    assert out["turn"] == "O"


def test_play_with_undo_and_skip(capsys):
    assert main(["play", "--actions", "0 3 undo skip"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["moves"] == [0]
    assert out["turn"] == "X"


def test_play_core_ignores_history_actions(capsys):
    assert main(["play", "--core", "--actions", "0,undo,skip"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert "moves" not in out
    assert out["board"][0] == "X"
    assert out["turn"] == "O"


def test_history_can_be_disabled_from_env(capsys, monkeypatch):
    monkeypatch.setenv("TTT_HISTORY", "0")
    assert main(["play", "--actions", "4"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert "moves" not in out


def test_play_rejects_bad_tokens(capsys):
    assert main(["play", "--actions", "0,jump"]) == 2
    assert capsys.readouterr().out == ""


def test_lines(capsys):
    assert main(["lines"]) == 0
    rows = capsys.readouterr().out.strip().splitlines()
    assert rows[0] == "0 1 2"
    assert rows[-1] == "2 4 6"
    assert len(rows) == 8


def test_cli_subprocess_play_and_stdin(tmp_path: Path):
    r = _run_cli(["play", "--actions", "0,3,1,4,2"], cwd=tmp_path)
    assert r.returncode == 0
    assert "status=won" in r.stderr
    assert json.loads(r.stdout)["game_over"] == [0, 1, 2]

    r = _run_cli(["play", "--stdin"], cwd=tmp_path, stdin="0,1\n\nbogus\n4,4,undo\n")
    assert r.returncode == 0
    lines = [json.loads(x) for x in r.stdout.splitlines()]
    assert [x["moves"] for x in lines] == [[0, 1], []]


@pytest.mark.parametrize("bad", ["abc", "0,,x", "move 3"])
def test_cli_subprocess_error_on_bad_actions(tmp_path: Path, bad: str):
    r = _run_cli(["play", "--actions", bad], cwd=tmp_path)
    assert r.returncode == 2
    assert "[ERROR]" in r.stderr
