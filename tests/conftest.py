from __future__ import annotations

import pytest

from dialectcss.compiler import Compiler
from dialectcss.config import CompilerConfig
from dialectcss.decoration import InMemoryPage
from dialectcss.dictionary import default_dictionary
from dialectcss.events import EventBus
from dialectcss.parser import LocalizedParser
from dialectcss.translate import ValueTranslator

USER_BLOCK = '.mes[is_user="true"] .mes_block'
AI_AVATAR = '.mes[is_user="false"] .avatar'
USER_AVATAR = '.mes[is_user="true"] .avatar'


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def dictionary():
    return default_dictionary()


@pytest.fixture
def translator(dictionary):
    return ValueTranslator(dictionary)


@pytest.fixture
def parser(dictionary, translator):
    return LocalizedParser(dictionary, translator)


@pytest.fixture
def page():
    """An in-memory page with two user messages and one AI message."""
    p = InMemoryPage()
    p.add("u1", USER_BLOCK)
    p.add("u2", USER_BLOCK)
    p.add("a1", '.mes[is_user="false"] .mes_block')
    return p


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def compiler(page, bus):
    return Compiler(CompilerConfig(), page=page, bus=bus)


@pytest.fixture
def clock():
    return FakeClock()
