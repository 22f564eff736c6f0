# chatbot.py
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import responses
from calculator import CalculatorSession
from content import ContentStore
from session import SessionState, SystemClock, format_duration

logger = logging.getLogger(__name__)

ACTION_EXIT = "exit"
ACTION_HELP = "help"
ACTION_HISTORY = "history"
ACTION_CLEAR = "clear"
ACTION_CALCULATOR = "calculator"


def normalize(raw: Optional[str]) -> str:
    return (raw or "").strip().lower()


@dataclass
class Reply:
    """Lines to show the user, plus an optional hint for the presenter."""
    lines: List[str] = field(default_factory=list)
    action: Optional[str] = None
    rule: Optional[str] = None

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def to_dict(self):
        result = {"reply": self.text, "lines": list(self.lines)}
        if self.action:
            result["action"] = self.action
        return result


def help_lines() -> List[str]:
    lines = [f"{command:<20} {description}" for command, description in responses.help_rows]
    return lines + list(responses.help_footer)


def render_history(history: List[str], limit: int = 20) -> List[str]:
    if not history:
        return [responses.history_empty]
    start = max(0, len(history) - limit)
    lines = [f"{i + 1:>3}. {entry}" for i, entry in enumerate(history[start:], start)]
    lines.append(f"Showing last {len(history) - start} of {len(history)} messages.")
    return lines


def _one_of(phrases) -> Callable[[str], Optional[str]]:
    return lambda text: text if text in phrases else None


def _prefixed(prefix: str) -> Callable[[str], Optional[str]]:
    # the prefix must be followed by at least one more character
    return lambda text: text[len(prefix):] if text.startswith(prefix) and len(text) > len(prefix) else None


class ChatBot:
    """Classifies normalized input lines and produces replies.

    Rules are checked in order and the first match wins. Each rule is
    (name, matcher(text) -> match or None, handler(match, session) -> Reply).
    The order is part of the behaviour: an exit word never reaches the
    response table, and "calc" is never matched as a substring.
    """

    def __init__(self, content: Optional[ContentStore] = None, rng: Optional[random.Random] = None,
                 clock=None, history_view_limit: int = 20):
        self.content = content or ContentStore()
        self.rng = rng or random.Random()
        self.clock = clock or SystemClock()
        self.history_view_limit = history_view_limit
        self._build_rules()

    def _build_rules(self):
        content = self.content
        self.rules = [
            ("exit", _one_of(responses.exit_commands), self._exit),
            ("help", _one_of(responses.help_commands), self._help),
            ("joke", _one_of(responses.joke_commands), self._tell_joke),
            ("fact", _one_of(responses.fact_commands), self._tell_fact),
            ("time", _one_of(responses.time_commands), self._tell_time),
            ("flip", _one_of(responses.flip_commands), self._flip_coin),
            ("roll", _one_of(responses.roll_commands), self._roll_dice),
            ("uptime", _one_of(responses.uptime_commands), self._uptime),
            ("history", _one_of(responses.history_commands), self._history),
            ("clear", _one_of(responses.clear_commands), self._clear),
            ("reverse", _prefixed("reverse "), self._reverse),
            ("count", _prefixed("count "), self._count_words),
            ("calculator", _one_of(responses.calculator_commands), self._enter_calculator),
            ("alias", content.resolve_alias, self._canned),
            ("exact", content.lookup, self._canned),
            ("substring", content.find_embedded, self._canned),
        ]

    def start_session(self) -> SessionState:
        session = SessionState.start(self.clock)
        logger.info("session started")
        return session

    def goodbye(self, session: SessionState) -> List[str]:
        logger.info("session ended after %d messages", len(session.history))
        return [responses.farewell, session.summary(self.clock)]

    def dispatch(self, text: str, session: SessionState) -> Reply:
        """Handle one normalized, non-empty line. Always records it in history."""
        session.record(text)
        for name, matcher, handler in self.rules:
            match = matcher(text)
            if match is None:
                continue
            logger.debug("rule %s matched %r", name, text)
            reply = handler(match, session)
            reply.rule = name
            return reply
        logger.debug("no rule matched %r", text)
        return Reply(list(responses.default_response), rule="default")

    def respond(self, raw: Optional[str], session: SessionState) -> Optional[Reply]:
        """Route a raw line: to the active calculator if there is one, else dispatch.

        Returns None for a blank line outside calculator mode.
        """
        if session.in_calculator:
            lines = session.calculator.feed(raw or "")
            if session.calculator.active:
                return Reply(lines, action=ACTION_CALCULATOR, rule="calculator")
            session.calculator = None
            return Reply(lines, rule="calculator")
        text = normalize(raw)
        if not text:
            return None
        return self.dispatch(text, session)

    # handlers

    def _exit(self, match, session):
        session.running = False
        return Reply(action=ACTION_EXIT)

    def _help(self, match, session):
        return Reply(help_lines(), action=ACTION_HELP)

    def _tell_joke(self, match, session):
        return Reply([self.rng.choice(self.content.jokes)])

    def _tell_fact(self, match, session):
        return Reply([self.rng.choice(self.content.facts)])

    def _tell_time(self, match, session):
        now = self.clock.now()
        return Reply([f"🕐 {now.strftime('%A, %B %d, %Y  %I:%M:%S %p')}"])

    def _flip_coin(self, match, session):
        return Reply(["Heads! 🪙" if self.rng.randint(0, 1) else "Tails! 🪙"])

    def _roll_dice(self, match, session):
        return Reply([f"🎲 You rolled a {self.rng.randint(1, 6)}!"])

    def _uptime(self, match, session):
        elapsed = format_duration(session.elapsed(self.clock))
        return Reply([f"⏱️  Session uptime: {elapsed} | Messages: {len(session.history)}"])

    def _history(self, match, session):
        return Reply(render_history(session.history, self.history_view_limit), action=ACTION_HISTORY)

    def _clear(self, match, session):
        return Reply([responses.screen_cleared], action=ACTION_CLEAR)

    def _reverse(self, argument, session):
        return Reply([f'🔄 "{argument[::-1]}"'])

    def _count_words(self, argument, session):
        return Reply([f"📝 Word count: {len(argument.split())}"])

    def _enter_calculator(self, match, session):
        session.calculator = CalculatorSession()
        logger.info("calculator mode entered")
        return Reply(session.calculator.intro(), action=ACTION_CALCULATOR)

    def _canned(self, reply_text, session):
        return Reply([reply_text])
