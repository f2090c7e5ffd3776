class AutomatonError(Exception):
    """Base class for every error raised by the automaton engines."""


class UnknownSymbolError(AutomatonError, ValueError):
    """A character or transition label that does not map to a known Symbol."""

    def __init__(self, label, position=None):
        self.label = label
        self.position = position
        if position is None:
            message = f"Unknown symbol {label!r}"
        else:
            message = f"Unknown symbol {label!r} at position {position}"
        super().__init__(message)


class InvalidAutomatonError(AutomatonError, ValueError):
    """The FSA dictionary does not describe a well-formed automaton."""


class AutomatonTooLargeError(AutomatonError):
    """The automaton exceeds what the configured construction strategy can handle."""


class ExplorationLimitError(AutomatonError):
    """A simulation explored more configurations than allowed."""


class SubsetLookupError(AutomatonError, LookupError):
    """A subset that must exist was missing. Always a bug, never user error."""
