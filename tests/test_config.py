import importlib
import logging

from memo2txt import config


def _reload():
    return importlib.reload(config)


def test_defaults(monkeypatch) -> None:
    for name in ("MEMO_INPUT_FILE", "MEMO_OUTPUT_FILE", "MEMO_ENCODING", "MEMO_UNPARSED_POLICY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    cfg = _reload()
    assert cfg.INPUT_FILE == "memos.html"
    assert cfg.OUTPUT_FILE == "output.txt"
    assert cfg.ENCODING == "utf-8"
    assert cfg.UNPARSED_POLICY == "oldest"
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.CONFIG_WARNINGS == []
    monkeypatch.undo()
    _reload()


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("MEMO_INPUT_FILE", "export.html")
    monkeypatch.setenv("MEMO_OUTPUT_FILE", "notes.txt")
    monkeypatch.setenv("MEMO_UNPARSED_POLICY", " Last ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = _reload()
    assert cfg.INPUT_FILE == "export.html"
    assert cfg.OUTPUT_FILE == "notes.txt"
    assert cfg.UNPARSED_POLICY == "last"
    assert cfg.LOG_LEVEL == "DEBUG"
    monkeypatch.undo()
    _reload()


def test_unknown_values_fall_back_without_logging(monkeypatch, caplog) -> None:
    monkeypatch.setenv("MEMO_UNPARSED_POLICY", "sideways")
    monkeypatch.setenv("LOG_LEVEL", "loud")
    with caplog.at_level(logging.DEBUG):
        cfg = _reload()
    assert cfg.UNPARSED_POLICY == "oldest"
    assert cfg.LOG_LEVEL == "INFO"
    assert len(cfg.CONFIG_WARNINGS) == 2
    assert "sideways" in cfg.CONFIG_WARNINGS[0]
    assert "LOUD" in cfg.CONFIG_WARNINGS[1]
    # importing config must not touch logging
    assert caplog.records == []
    monkeypatch.undo()
    _reload()
