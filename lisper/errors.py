
class LisperError(Exception):
    """ Base class for all Lisper errors"""
    pass


class UndefinedVariableError(LisperError):
    """ Raised when a bare symbol is not bound anywhere in the scope chain"""

    def __init__(self, name: str):
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class UndefinedFunctionError(LisperError):
    """ Raised when a call names something that is not a closure"""

    def __init__(self, name: str):
        super().__init__(f"Undefined function: {name}")
        self.name = name


class ArgumentCountError(LisperError):
    """ Raised when the number of arguments passed to a construct is incorrect"""

    def __init__(self, name: str, expected: int):
        super().__init__(f"Invalid argument count for {name}, {expected} needed")
        self.name = name
        self.expected = expected


class IllegalArgumentError(LisperError):
    """ Raised when the runtime type of an argument is not supported"""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Illegal argument in {name}: {reason}")
        self.name = name
        self.reason = reason


class UnimplementedError(LisperError):
    """ Raised for valid syntax the evaluator does not support (yet)"""

    def __init__(self, construct: str = ""):
        message = "Internal error (Unimplemented)"
        if construct:
            message = f"{message}: {construct}"
        super().__init__(message)
        self.construct = construct


class RecursionLimitError(LisperError):
    """ Raised when evaluation nests deeper than the configured limit"""

    def __init__(self, limit: int):
        super().__init__(f"Maximum recursion depth ({limit}) exceeded")
        self.limit = limit


class UnreachableError(LisperError):
    """ Raised for states that should never occur; indicates an interpreter bug"""

    def __init__(self, detail: str = ""):
        message = "Internal error (Unreachable)"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class LisperSyntaxError(LisperError):
    """ Raised by the reader when the source is not a well-formed expression"""
