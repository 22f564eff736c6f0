# calculator.py
"""Calculator sub-mode.

A CalculatorSession is a two-state machine: it starts Active and moves to
Terminated when it sees one of the exit phrases or when its line source runs
dry. Every line is evaluated on its own; there is no running total.
"""
import logging
import re
from typing import Callable, List, Optional, Tuple

import responses

logger = logging.getLogger(__name__)

_NUMBER = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
# <number> <operator> <number>; spacing is optional around an operator that cannot be read as
# part of a number, and required around any other single character (`5 3 4` reads `3` as the operator)
EXPRESSION = re.compile(rf"^\s*({_NUMBER})\s*([^\s\d.])\s*({_NUMBER})\s*$")
SPACED_EXPRESSION = re.compile(rf"^\s*({_NUMBER})\s+(\S)\s+({_NUMBER})\s*$")

OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "x": lambda a, b: a * b,
    "/": lambda a, b: a / b,
}


class CalculatorError(Exception):
    message = responses.calculator_parse_error


class ExpressionParseError(CalculatorError):
    pass


class UnknownOperatorError(CalculatorError):
    def __init__(self, op: str):
        super().__init__(op)
        self.op = op
        self.message = responses.calculator_unknown_operator.format(op=op)


class DivisionByZeroError(CalculatorError):
    message = responses.calculator_zero_division


def format_number(value: float) -> str:
    text = f"{value:.4f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def parse_expression(line: str) -> Tuple[float, str, float]:
    match = EXPRESSION.match(line) or SPACED_EXPRESSION.match(line)
    if not match:
        raise ExpressionParseError(line)
    left, op, right = match.groups()
    return float(left), op, float(right)


def evaluate(line: str) -> str:
    """Evaluate one expression line and return `<a> <op> <b> = <result>`.

    Raises a CalculatorError subclass for malformed input, an unknown
    operator or division by zero.
    """
    a, op, b = parse_expression(line)
    func = OPERATORS.get(op)
    if func is None:
        raise UnknownOperatorError(op)
    if op == "/" and b == 0:
        raise DivisionByZeroError(line)
    result = func(a, b)
    return f"{format_number(a)} {op} {format_number(b)} = {format_number(result)}"


class CalculatorSession:
    ACTIVE = "active"
    TERMINATED = "terminated"

    def __init__(self):
        self.state = self.ACTIVE

    @property
    def active(self) -> bool:
        return self.state == self.ACTIVE

    def intro(self) -> List[str]:
        return list(responses.calculator_intro)

    def feed(self, line: str) -> List[str]:
        if not self.active:
            return []
        if line.strip().lower() in responses.calculator_exit_commands:
            self.state = self.TERMINATED
            logger.info("calculator mode exited")
            return [responses.calculator_outro]
        try:
            return [evaluate(line)]
        except CalculatorError as e:
            logger.debug("calculator rejected %r: %s", line, type(e).__name__)
            return [e.message]

    def close(self):
        """End of input: terminate without a farewell line."""
        if self.active:
            logger.info("calculator input ended")
        self.state = self.TERMINATED


def run_calculator(read_line: Callable[[], Optional[str]],
                   emit: Callable[[List[str]], None],
                   calculator: Optional[CalculatorSession] = None) -> CalculatorSession:
    """Drive a calculator session from a line source until it terminates.

    read_line returns None when input is exhausted.
    """
    calculator = calculator or CalculatorSession()
    while calculator.active:
        line = read_line()
        if line is None:
            calculator.close()
            break
        emit(calculator.feed(line))
    return calculator
