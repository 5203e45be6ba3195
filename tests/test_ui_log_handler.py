"""
Tests for the handler that mirrors log records into the Logs panel (no Tk window needed).
"""

import logging
from types import SimpleNamespace

from clientes_app.ui import _LogPanelHandler


class _Root:
    def __init__(self, fail=False):
        self.fail = fail
        self.posted = []

    def after(self, delay_ms, fn):
        if self.fail:
            raise RuntimeError("main thread is not in main loop")
        self.posted.append(fn)


def _record(msg):
    return logging.LogRecord("clientes_app.controller", logging.INFO, __file__, 1, msg, None, None)


def test_emit_posts_formatted_line_to_main_loop():
    lines = []
    handler = _LogPanelHandler(SimpleNamespace(root=_Root(), _append_log=lines.append))
    handler.handle(_record("Loaded 2 clientes"))

    handler.ui.root.posted[0]()
    assert lines[0].endswith("Loaded 2 clientes\n")
    assert "INFO clientes_app.controller" in lines[0]


def test_emit_failure_does_not_reach_caller(monkeypatch):
    handled = []
    handler = _LogPanelHandler(SimpleNamespace(root=_Root(fail=True), _append_log=lambda _l: None))
    monkeypatch.setattr(handler, "handleError", handled.append)

    record = _record("request sent during shutdown")
    handler.handle(record)  # must not raise
    assert handled == [record]
