import pytest

import responses
from console import Console


@pytest.fixture
def run_console(bot, make_reader):
    def run(lines):
        output = []
        console = Console(bot=bot, read_line=make_reader(lines), write=output.append, color=False)
        code = console.run()
        return code, "\n".join(output)
    return run


def test_declining_to_chat_ends_without_summary(run_console):
    code, output = run_console(["n"])
    assert code == 0
    assert responses.welcome_decline in output
    assert responses.farewell not in output


def test_end_of_input_during_welcome(run_console):
    code, output = run_console([])
    assert code == 0
    assert responses.farewell not in output


def test_conversation_with_calculator(run_console):
    code, output = run_console(["y", "n", "hello", "calc", "5 + 3", "10 / 0", "done", "bye"])
    assert code == 0
    assert "Bot ◂ " + responses.responses["hello"] in output
    assert "🧮 Calculator Mode!" in output
    assert "5 + 3 = 8" in output
    assert responses.calculator_zero_division in output
    assert responses.calculator_outro in output
    assert responses.farewell in output
    assert "Messages: 3" in output


def test_end_of_input_inside_calculator_still_says_goodbye(run_console):
    code, output = run_console(["yes", "no", "calculate", "7 x 6"])
    assert code == 0
    assert "7 x 6 = 42" in output
    assert responses.calculator_outro not in output
    assert responses.farewell in output
    assert "Messages: 1" in output


def test_help_on_request_and_history_box(run_console):
    code, output = run_console(["y", "y", "hi", "", "history", "quit"])
    assert "AVAILABLE COMMANDS" in output
    assert "CONVERSATION HISTORY" in output
    assert "  1. hi" in output
    assert "Showing last 2 of 2 messages." in output
    assert "Messages: 3" in output


def test_clear_redraws_banner(run_console):
    code, output = run_console(["y", "n", "clear", "q"])
    assert "\033[2J\033[H" in output
    assert responses.screen_cleared in output
