"""Failure kinds raised while recovering a secret.

Every class carries a distinct ``exit_code`` so the command line can map
failures to process status without inspecting messages.
"""


class RecoveryError(Exception):
    """Base class for all recovery failures."""

    exit_code = 1


class InputFormatError(RecoveryError, ValueError):
    """Input document is missing, unreadable, or structurally invalid."""

    exit_code = 2


class UnsupportedBase(RecoveryError, ValueError):
    exit_code = 3

    def __init__(self, base):
        self.base = base
        super().__init__(f"Unsupported base: {base}")


class InvalidDigit(RecoveryError, ValueError):
    exit_code = 4

    def __init__(self, char: str):
        self.char = char
        if char:
            super().__init__(f"Invalid digit in value: {char!r}")
        else:
            super().__init__("Invalid digit in value: empty value")


class DigitOutOfRange(RecoveryError, ValueError):
    exit_code = 5

    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        super().__init__(f"Digit {char!r} not valid for base {base}")


class InsufficientPoints(RecoveryError):
    exit_code = 6

    def __init__(self, have: int, need: int):
        self.have = have
        self.need = need
        super().__init__(f"Not enough points provided: have {have}, need {need}")


class DuplicateXValue(RecoveryError, ValueError):
    exit_code = 7

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"Duplicate x value encountered: {x}")


class DivisionByZero(RecoveryError, ZeroDivisionError):
    exit_code = 8


class NonIntegerResult(RecoveryError, ArithmeticError):
    exit_code = 9

    def __init__(self, value):
        self.value = value
        super().__init__(f"Result is not integer: {value}")
