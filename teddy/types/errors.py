class TeddyError(Exception):
    """ Base class for all Teddy errors"""
    pass

class TeddySyntaxError(TeddyError):
    """ Raised when source text or a parse tree is malformed"""

class TeddyUnboundSymbol(TeddyError):
    """ Raised when a symbol is used before it is bound"""

class TeddyTypeError(TeddyError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class TeddyArityError(TeddyError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class TeddyEmptyListError(TeddyError):
    """ Raised when an operation needs a non-empty list"""

class TeddyDomainError(TeddyError):
    """ Raised when numeric arguments are outside an operation's domain"""
