# console.py
"""Terminal front end: banner, welcome questions, read/print loop and goodbye."""
import logging
import os
import sys
from typing import Callable, List, Optional

from colorama import Fore, Style, init

import responses
from calculator import run_calculator
from chatbot import (ACTION_CALCULATOR, ACTION_CLEAR, ACTION_HELP, ACTION_HISTORY,
                     ChatBot, help_lines, normalize)

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"
SEPARATOR_WIDTH = 58
YES = ("y", "yes")

BANNER = [
    "╔══════════════════════════════════════════════════════╗",
    "║                                                      ║",
    "║     ██████╗██╗  ██╗ █████╗ ████████╗                 ║",
    "║    ██╔════╝██║  ██║██╔══██╗╚══██╔══╝                 ║",
    "║    ██║     ███████║███████║   ██║                    ║",
    "║    ██║     ██╔══██║██╔══██║   ██║                    ║",
    "║    ╚██████╗██║  ██║██║  ██║   ██║                    ║",
    "║     ╚═════╝╚═╝  ╚═╝╚═╝  ╚═╝   ╚═╝                    ║",
    "║                                                      ║",
    "║    Console Chat Bot                          v2.0    ║",
    "║                                                      ║",
    "╚══════════════════════════════════════════════════════╝",
]


def read_stdin(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


class Console:
    def __init__(self, bot: Optional[ChatBot] = None,
                 read_line: Callable[[str], Optional[str]] = read_stdin,
                 write: Callable[[str], None] = print,
                 color: bool = True):
        self.bot = bot or ChatBot()
        self.read_line = read_line
        self.write = write
        self.color = color

    def _paint(self, text: str, *codes: str) -> str:
        if not self.color:
            return text
        return "".join(codes) + text + Style.RESET_ALL

    def _prompt(self, label: str, color: str) -> Optional[str]:
        return self.read_line(self._paint(f"  {label} ▸ ", color, Style.BRIGHT))

    # output helpers

    def separator(self):
        self.write(self._paint("─" * SEPARATOR_WIDTH, Style.DIM))

    def show_banner(self):
        self.write("")
        for line in BANNER:
            self.write(self._paint("  " + line, Fore.CYAN, Style.BRIGHT))
        self.write("")

    def bot_say(self, lines: List[str]):
        for i, line in enumerate(lines):
            label = self._paint("  Bot ◂ ", Fore.CYAN, Style.BRIGHT) if i == 0 else " " * 9
            self.write(label + self._paint(line, Fore.WHITE))

    def show_help(self, lines: List[str]):
        self.write("")
        self.write(self._paint("  📋  AVAILABLE COMMANDS", Fore.YELLOW, Style.BRIGHT))
        self.separator()
        for line in lines:
            self.write(self._paint("  " + line, Fore.YELLOW))
        self.separator()

    def show_history(self, lines: List[str]):
        if len(lines) == 1:
            self.bot_say(lines)
            return
        self.write("")
        self.write(self._paint("  📜  CONVERSATION HISTORY", Fore.YELLOW, Style.BRIGHT))
        self.separator()
        for line in lines[:-1]:
            self.write("  " + line)
        self.write("")
        self.write(self._paint("  " + lines[-1], Style.DIM))

    def present(self, reply):
        if reply.action == ACTION_HELP:
            self.show_help(reply.lines)
        elif reply.action == ACTION_HISTORY:
            self.show_history(reply.lines)
        elif reply.action == ACTION_CLEAR:
            self.write(CLEAR_SCREEN)
            self.show_banner()
            self.bot_say(reply.lines)
        elif reply.action == ACTION_CALCULATOR:
            self.write("")
            self.separator()
            self.bot_say(reply.lines)
            self.separator()
        elif reply.lines:
            self.bot_say(reply.lines)

    # flow

    def welcome(self) -> bool:
        self.bot_say(["Welcome! Would you like to start chatting? (y/n)"])
        answer = self._prompt("You", Fore.GREEN)
        if answer is None:
            return False
        if normalize(answer) not in YES:
            self.bot_say([responses.welcome_decline])
            return False

        self.bot_say(["Would you like to see what I can do? (y/n)"])
        answer = self._prompt("You", Fore.GREEN)
        if answer is None:
            return False
        if normalize(answer) in YES:
            self.show_help(help_lines())

        self.write("")
        self.separator()
        self.bot_say(["Let's chat! Type anything or 'help' for commands. Type 'bye' to exit."])
        self.separator()
        return True

    def run(self) -> int:
        self.show_banner()
        if not self.welcome():
            return 0

        session = self.bot.start_session()
        while session.running:
            self.write("")
            raw = self._prompt("You", Fore.GREEN)
            if raw is None:
                logger.info("input closed")
                break
            reply = self.bot.respond(raw, session)
            if reply is None:
                continue
            self.present(reply)
            if session.in_calculator:
                run_calculator(lambda: self._prompt("Calc", Fore.MAGENTA), self.bot_say, session.calculator)
                session.calculator = None

        self.write("")
        self.separator()
        farewell, summary = self.bot.goodbye(session)
        self.bot_say([farewell])
        self.write(self._paint("  " + summary, Style.DIM))
        self.separator()
        self.write("")
        return 0


def main():
    level_name = os.environ.get("CHATBOT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.WARNING), stream=sys.stderr,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    init()
    sys.exit(Console().run())


if __name__ == "__main__":
    main()
