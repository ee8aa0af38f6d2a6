import json
import logging

import pytest

import argsift.__main__ as cli
from argsift.__main__ import main
from argsift.parsers import get_root_parser
from argsift.utils import setup_logging


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


def test_root_parser_defaults():
    args = get_root_parser().parse_args(["--", "-v", "x"])
    assert args.tokens == ["-v", "x"]
    assert args.mode == "prefer_flag"
    assert args.param == []
    assert not args.json


def test_main_json(capsys):
    code = main(["--json", "-p", "out", "--", "build", "--out", "dist", "-v"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["positionals"] == ["build"]
    assert data["params"] == {"out": "dist"}
    assert data["flags"] == {"v": 1}
    assert data["registered"] == ["out"]
    assert data["mode"] == "prefer_flag"


def test_main_json_mode(capsys):
    code = main(["--json", "--mode", "param|multiflag", "--", "-ab", "1"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["flags"] == {"a": 1, "b": 1}
    assert data["positionals"] == ["1"]


def test_main_table(capsys):
    code = main(["--", "src", "--k=v", "-x"])
    assert code == 0
    out = capsys.readouterr().out
    assert "positional" in out
    assert "src" in out
    assert "param" in out
    assert "flag" in out


def test_main_mode_conflict(capsys):
    code = main(["--mode", "flag|param", "--", "-x", "1"])
    assert code == 2
    assert "mutually exclusive" in capsys.readouterr().out


def test_main_bad_mode(capsys):
    assert main(["--mode", "sideways", "--", "a"]) == 2


def test_main_empty_token(capsys):
    assert main(["--", "a", ""]) == 2
    assert "Empty token" in capsys.readouterr().out


def test_setup_logging_modes(restore_root_logging):
    setup_logging(mode="json")
    assert len(restore_root_logging.handlers) == 1
    setup_logging(mode="cli", console_log_level=logging.DEBUG)
    assert restore_root_logging.handlers[0].level == logging.DEBUG
    with pytest.raises(ValueError):
        setup_logging(mode="xml")


def test_setup_logging_env(monkeypatch, restore_root_logging):
    monkeypatch.setenv("ARGSIFT_LOG_MODE", "json")
    setup_logging()
    handler = restore_root_logging.handlers[0]
    assert type(handler) is logging.StreamHandler


def test_setup_logging_file(tmp_path, restore_root_logging):
    log_file = tmp_path / "argsift.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("argsift").debug("hello")
    for handler in restore_root_logging.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
