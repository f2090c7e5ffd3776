from typing import Dict, List, Optional

from .fsa_graph import State, Symbol
from .fsa_traversal import derive_alphabet, flatten


def has_epsilon_transitions(entry: State) -> bool:
    """Checks whether any reachable state has an epsilon transition."""
    return any(
        transition.symbol.is_epsilon
        for state in flatten(entry)
        for transition in state.outgoing
    )


def is_deterministic(entry: State) -> bool:
    """
    Checks if the automaton is deterministic.

    An automaton is deterministic if:
    1. It has no epsilon transitions
    2. No state has more than one transition on the same symbol

    Args:
        entry: Entry state of the automaton

    Returns:
        bool: True if the automaton is deterministic, False otherwise
    """
    for state in flatten(entry):
        labels = set()
        for transition in state.outgoing:
            if transition.symbol.is_epsilon or transition.symbol in labels:
                return False
            labels.add(transition.symbol)
    return True


def is_nondeterministic(entry: State) -> bool:
    return not is_deterministic(entry)


def is_complete(entry: State, alphabet: Optional[List[Symbol]] = None) -> bool:
    """
    Checks if the automaton is complete.

    An automaton is complete if every reachable state has at least one
    transition for each symbol of the alphabet. Epsilon transitions are ignored.

    Args:
        entry: Entry state of the automaton
        alphabet: Symbols to check. Defaults to the symbols the automaton uses.

    Returns:
        bool: True if the automaton is complete, False otherwise
    """
    states = flatten(entry)
    if alphabet is None:
        alphabet = derive_alphabet(states)

    for state in states:
        labels = {transition.symbol for transition in state.outgoing}
        if any(symbol not in labels for symbol in alphabet):
            return False
    return True


def check_all_properties(entry: State) -> Dict:
    """
    Check all automaton properties at once.

    Returns:
        Dict: {'deterministic': bool, 'complete': bool, 'epsilon_free': bool}
    """
    return {
        'deterministic': is_deterministic(entry),
        'complete': is_complete(entry),
        'epsilon_free': not has_epsilon_transitions(entry),
    }
