class JExpError(Exception):
    """ Base class for all JExp errors"""
    pass

class UndefinedSymbol(JExpError):
    """ Raised when a symbol does not resolve in any frame"""
    pass

class UndefinedFunction(UndefinedSymbol):
    """ Raised when the operator of a call form is unbound"""

class UndefinedMacro(UndefinedSymbol):
    """ Raised when the sigil-prefixed operator of a macro form is unbound"""

class NotCallable(JExpError):
    """ Raised when a call resolves to a value that cannot be invoked"""

class MalformedForm(JExpError):
    """ Raised when a special form is missing a companion key or has the wrong shape"""

class AmbiguousForm(JExpError):
    """ Raised when the operator of a mapping cannot be determined"""

class JExpArityError(JExpError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""

class JExpTypeError(JExpError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""
