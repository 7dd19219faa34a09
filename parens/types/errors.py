class ParensError(Exception):
    """ Base class for all Parens errors"""
    pass


class ParensLexError(ParensError):
    """ Raised when the lexer meets input it does not recognize"""

    def __init__(self, message: str, source_name: str | None = None):
        if source_name:
            message = f"{source_name}: {message}"
        super().__init__(message)
        self.source_name = source_name


class ParensSyntaxError(ParensError):
    """ Raised when the token sequence does not form a valid expression"""

    def __init__(self, message: str, source_name: str | None = None):
        if source_name:
            message = f"{source_name}: {message}"
        super().__init__(message)
        self.source_name = source_name


class ParensUnboundSymbol(ParensError):
    """ Raised when a symbol is not bound anywhere in the scope chain"""


class ParensCallError(ParensError):
    """ Raised when a value cannot be invoked, or its invocation failed"""


class ParensArityError(ParensCallError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class ParensTypeError(ParensCallError):
    """ Raised when an argument has no valid conversion to the declared parameter type"""


class ParensMacroError(ParensError):
    """ Raised when a special form receives arguments of the wrong shape"""


UNEXPECTED_EOF = "unexpected end of input"
