"""
iparams error types.

Missing files and missing records are not errors. Only programming errors
(unsupported kinds, bad keys) and recoverable parse failures get a type here;
I/O failures surface as the builtin ``OSError`` untouched.
"""


class ParamsError(Exception):
    """Base class for iparams errors."""


class UnsupportedKindError(ParamsError, TypeError):
    """A value kind (or payload type) outside the closed set of kinds."""


class ValueParseError(ParamsError, ValueError):
    """Stored text could not be parsed as its declared kind."""

    def __init__(self, kind: str, text: str):
        self.kind = kind
        self.text = text
        super().__init__(f"Cannot parse {text!r} as {kind}")
