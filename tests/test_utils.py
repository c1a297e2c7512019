"""Tests for slideshow.utils."""

from slideshow import utils as utils_mod


class _FakeLogger:
    def __init__(self, handlers):
        self.handlers = list(handlers)

    def addHandler(self, handler):
        self.handlers.append(handler)

    def removeHandler(self, handler):
        if handler in self.handlers:
            self.handlers.remove(handler)


def _patch_loggers(monkeypatch, slideshow_logger, root_logger):
    real_get_logger = utils_mod.logging.getLogger

    def fake_get_logger(name=None):
        if name == "slideshow":
            return slideshow_logger
        if name is None:
            return root_logger
        return real_get_logger(name)

    monkeypatch.setattr(utils_mod.logging, "getLogger", fake_get_logger)


def test_setup_logging_configures_and_returns_slideshow_logger(monkeypatch):
    called = {}

    def fake_basic_config(**kwargs):
        called.update(kwargs)

    monkeypatch.setattr(utils_mod.logging, "basicConfig", fake_basic_config)
    logger = utils_mod.setup_logging()

    assert logger.name == "slideshow"
    assert called["level"] == utils_mod.logging.INFO
    assert called["datefmt"] == "%H:%M:%S"
    assert "%(levelname)" in called["format"]


def test_ensure_logging_calls_setup_when_no_handlers(monkeypatch):
    calls = {"n": 0}
    _patch_loggers(monkeypatch, _FakeLogger([]), _FakeLogger([]))
    monkeypatch.setattr(utils_mod, "setup_logging", lambda: calls.__setitem__("n", calls["n"] + 1))

    utils_mod.ensure_logging()
    assert calls["n"] == 1


def test_ensure_logging_noop_when_root_has_handler(monkeypatch):
    calls = {"n": 0}
    _patch_loggers(monkeypatch, _FakeLogger([]), _FakeLogger([object()]))
    monkeypatch.setattr(utils_mod, "setup_logging", lambda: calls.__setitem__("n", calls["n"] + 1))

    utils_mod.ensure_logging()
    assert calls["n"] == 0


def test_ensure_logging_noop_when_slideshow_logger_has_handler(monkeypatch):
    calls = {"n": 0}
    _patch_loggers(monkeypatch, _FakeLogger([object()]), _FakeLogger([]))
    monkeypatch.setattr(utils_mod, "setup_logging", lambda: calls.__setitem__("n", calls["n"] + 1))

    utils_mod.ensure_logging()
    assert calls["n"] == 0
