import itertools

import pytest

from clientes_app.controller import ListEditController
from clientes_app.gateway import GatewayError
from clientes_app.models import Cliente
from clientes_app.repository import Repo


class FakeGateway:
    def __init__(self, rows=None):
        self.rows = [Cliente(**r) for r in (rows or [])]
        self.fetch_error = None
        self.update_error = None
        self.updates = []
        self.payloads = []

    def fetch_all(self):
        if self.fetch_error is not None:
            raise self.fetch_error
        return list(self.rows)

    def update_record(self, cliente_id, payload):
        self.payloads.append(payload)
        self.updates.append((cliente_id, payload["nome"], payload["email"]))
        if self.update_error is not None:
            raise self.update_error


class FakeRunner:
    """Synchronous stand-in for TkTaskRunner: tasks wait until run, timers use a manual clock."""

    def __init__(self):
        self.pending = []
        self.timers = {}
        self.now = 0
        self._ids = itertools.count(1)

    def submit(self, fn, on_success, on_error):
        self.pending.append((fn, on_success, on_error))

    def run(self, index=0):
        fn, on_success, on_error = self.pending.pop(index)
        try:
            result = fn()
        except Exception as exc:
            on_error(exc)
            return
        on_success(result)

    def run_all(self):
        while self.pending:
            self.run()

    def call_later(self, delay_ms, fn):
        handle = f"timer#{next(self._ids)}"
        self.timers[handle] = (self.now + delay_ms, fn)
        return handle

    def cancel(self, handle):
        self.timers.pop(handle, None)

    def advance(self, ms):
        self.now += ms
        for handle, (due, fn) in sorted(self.timers.items(), key=lambda item: item[1][0]):
            if due <= self.now and handle in self.timers:
                del self.timers[handle]
                fn()


ROWS = [
    {"id": 1, "nome": "Ana", "email": "a@x.com"},
    {"id": 2, "nome": "Bo", "email": "b@x.com"},
]


@pytest.fixture()
def gateway():
    return FakeGateway(ROWS)


@pytest.fixture()
def runner():
    return FakeRunner()


@pytest.fixture()
def controller(gateway, runner):
    ctl = ListEditController(gateway, Repo(), runner)
    ctl.changes = 0

    def _count():
        ctl.changes += 1

    ctl.on_change = _count
    return ctl


@pytest.fixture()
def loaded(controller, runner):
    controller.load()
    runner.run_all()
    return controller


@pytest.fixture()
def network_timeout():
    return GatewayError("network timeout")
