from enum import Enum
from itertools import count
from typing import List, Tuple

from .exceptions import UnknownSymbolError


class Symbol(Enum):
    """
    Transition labels.

    EPSILON is the non-consuming marker. Its value is the empty string, which is
    also how epsilon transitions are written in the FSA dictionary format.
    The remaining members are the consumable input symbols, in alphabet order.
    """
    EPSILON = ''
    A = 'a'
    B = 'b'
    C = 'c'
    D = 'd'

    @property
    def is_epsilon(self) -> bool:
        return self is Symbol.EPSILON

    @property
    def order(self) -> int:
        return _SYMBOL_ORDER[self]

    @classmethod
    def consumable(cls) -> List['Symbol']:
        return [symbol for symbol in cls if not symbol.is_epsilon]

    @classmethod
    def from_label(cls, label: str) -> 'Symbol':
        """
        Look up the symbol written as ``label`` (``''`` for epsilon).

        Raises:
            UnknownSymbolError: If no symbol uses that label
        """
        try:
            return cls(label)
        except ValueError:
            raise UnknownSymbolError(label) from None

    def __str__(self):
        return 'ε' if self.is_epsilon else self.value


_SYMBOL_ORDER = {symbol: position for position, symbol in enumerate(Symbol)}

# Shared by every automaton in the process so that ids are never reused.
_state_ids = count(1)


class State:
    """
    A node in an automaton graph.

    Ids increase strictly with creation order across the whole process.
    ``incoming`` only mirrors the edges stored on the source states.
    """

    def __init__(self, accepting: bool = False):
        self.id = next(_state_ids)
        self.accepting = accepting
        self.outgoing: List['Transition'] = []
        self.incoming: List['Transition'] = []

    def __repr__(self):
        flag = ', accepting' if self.accepting else ''
        return f"State({self.id}{flag})"


class Transition:
    """Immutable directed edge. Equal to any other edge with the same label and endpoints."""

    __slots__ = ('source', 'target', 'symbol')

    def __init__(self, source: State, target: State, symbol: Symbol):
        object.__setattr__(self, 'source', source)
        object.__setattr__(self, 'target', target)
        object.__setattr__(self, 'symbol', symbol)

    def __setattr__(self, name, value):
        raise AttributeError("Transitions are immutable")

    @property
    def key(self) -> Tuple[Symbol, int, int]:
        return self.symbol, self.source.id, self.target.id

    def __eq__(self, other):
        return isinstance(other, Transition) and self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"Transition({self.source.id} -{self.symbol}-> {self.target.id})"


def create_state(accepting: bool = False) -> State:
    """Create a state with a fresh id."""
    return State(accepting)


def connect(source: State, target: State, symbol: Symbol) -> Transition:
    """
    Add a transition from ``source`` to ``target`` labelled ``symbol``.

    Nothing is validated: self-loops, parallel transitions and epsilon
    transitions are all allowed.

    Args:
        source: The state the transition leaves
        target: The state the transition enters
        symbol: The label, possibly Symbol.EPSILON

    Returns:
        Transition: The new transition
    """
    transition = Transition(source, target, symbol)
    source.outgoing.append(transition)
    target.incoming.append(transition)
    return transition


def parse_symbols(text: str) -> List[Symbol]:
    """
    Turn a string of single-character codes into a symbol sequence.

    Args:
        text: Input such as ``'bba'``

    Returns:
        List[Symbol]: One consumable symbol per character

    Raises:
        UnknownSymbolError: If a character is not the code of a consumable symbol
    """
    symbols = []
    for position, character in enumerate(text):
        try:
            symbol = Symbol(character)
        except ValueError:
            raise UnknownSymbolError(character, position) from None
        symbols.append(symbol)
    return symbols
