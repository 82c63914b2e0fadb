from __future__ import annotations


class FilipeError(Exception):
    """ Base class for all Filipe runtime diagnostics"""

    kind = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class FilipeNameError(FilipeError):
    """ Raised when a name is undeclared, redeclared or not assignable"""

    kind = "NameError"


class FilipeTypeError(FilipeError):
    """ Raised on operator, argument or assignment type mismatches"""

    kind = "TypeError"


class FilipeValueError(FilipeError):
    """ Raised when an argument is of the right type but out of range"""

    kind = "ValueError"


class FilipeArgumentError(FilipeError):
    """ Raised when a function receives the wrong number of arguments"""

    kind = "ArgumentError"


class FilipeRecursionError(FilipeError):
    """ Raised when calls nest deeper than the host stack allows"""

    kind = "RecursionError"
