from __future__ import annotations

import logging
from typing import Dict, List

import pytest

from wolsend import wol


class FakeSocket:
    instances: List["FakeSocket"] = []
    failures: Dict[str, OSError] = {}

    def __init__(self, family, kind):
        if "socket" in self.failures:
            raise self.failures["socket"]
        self.family = family
        self.kind = kind
        self.bound = None
        self.options = []
        self.sent = []
        self.closed = False
        type(self).instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _check(self, op: str) -> None:
        if op in self.failures:
            raise self.failures[op]

    def bind(self, address):
        self._check("bind")
        self.bound = address

    def setsockopt(self, level, option, value):
        self._check("setsockopt")
        self.options.append((level, option, value))

    def sendto(self, data, address):
        self._check("sendto")
        self.sent.append((data, address))
        return len(data)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_socket(monkeypatch):
    class _Socket(FakeSocket):
        instances = []
        failures = {}

    monkeypatch.setattr(wol.socket, "socket", _Socket)
    return _Socket


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("wolsend")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
