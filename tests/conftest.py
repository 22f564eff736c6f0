import datetime
import random

import pytest

from chatbot import ChatBot
from content import ContentStore


class FakeClock:
    def __init__(self, now=None, start=100.0):
        self.current = now or datetime.datetime(2026, 10, 19, 14, 5, 9)
        self.ticks = start

    def now(self):
        return self.current

    def monotonic(self):
        return self.ticks

    def advance(self, seconds):
        self.ticks += seconds
        self.current += datetime.timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def overlapping_content():
    # "joke" and "bye" are also command phrases, "calc" an entry phrase
    return ContentStore(
        responses_table={
            "joke": "table joke",
            "bye": "table bye",
            "calc": "table calc",
            "hello": "Hi there!",
            "how are you?": "Great, thanks.",
            "hello there": "General Kenobi!",
        },
        aliases_table={"howdy": "hello", "hru": "how are you?"},
        joke_list=["joke one", "joke two"],
        fact_list=["fact one"],
    )


@pytest.fixture
def bot(rng, clock):
    return ChatBot(rng=rng, clock=clock)


@pytest.fixture
def session(bot):
    return bot.start_session()


@pytest.fixture
def make_reader():
    """Builds a line source that returns None once the script runs out."""
    def build(lines):
        it = iter(lines)
        return lambda *args: next(it, None)
    return build
