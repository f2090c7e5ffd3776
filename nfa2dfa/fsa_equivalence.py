from typing import Dict, Optional, Set, Tuple
from collections import deque

from .fsa_graph import State, Symbol
from .fsa_traversal import derive_alphabet, flatten
from .fsa_transformations import subset_construction


def _step(state: Optional[State], symbol: Symbol) -> Optional[State]:
    # None stands for the implicit dead state
    if state is None:
        return None
    for transition in state.outgoing:
        if transition.symbol is symbol:
            return transition.target
    return None


def _accepting(state: Optional[State]) -> bool:
    return state is not None and state.accepting


def are_automata_equivalent(automaton1: State, automaton2: State) -> Tuple[bool, Dict]:
    """
    Check if two automata (NFAs or DFAs) are language-equivalent.

    Both are converted to DFAs, then pairs of DFA states are walked
    breadth-first over the union of their alphabets. The automata differ as
    soon as a pair is reached where exactly one side accepts.

    Args:
        automaton1: Entry state of the first automaton
        automaton2: Entry state of the second automaton

    Returns:
        A tuple of (is_equivalent, details) where details holds the DFA sizes,
        the number of state pairs explored and, when the automata differ, a
        shortest counterexample string.
    """
    dfa1 = subset_construction(automaton1).entry
    dfa2 = subset_construction(automaton2).entry

    alphabet = sorted(
        set(derive_alphabet(flatten(dfa1))) | set(derive_alphabet(flatten(dfa2))),
        key=lambda symbol: symbol.order,
    )
    details = {
        'dfa1_states': len(flatten(dfa1)),
        'dfa2_states': len(flatten(dfa2)),
        'alphabet': [symbol.value for symbol in alphabet],
    }

    start = (dfa1, dfa2)
    seen: Set[Tuple[Optional[int], Optional[int]]] = {(dfa1.id, dfa2.id)}
    queue = deque([(start, '')])

    while queue:
        (left, right), word = queue.popleft()
        if _accepting(left) != _accepting(right):
            details['pairs_explored'] = len(seen)
            details['counterexample'] = word
            details['reason'] = f"Only one automaton accepts {word!r}"
            return False, details

        for symbol in alphabet:
            pair = (_step(left, symbol), _step(right, symbol))
            pair_ids = tuple(state.id if state is not None else None for state in pair)
            if pair_ids in seen:
                continue
            seen.add(pair_ids)
            queue.append((pair, word + symbol.value))

    details['pairs_explored'] = len(seen)
    details['reason'] = 'No distinguishing string exists'
    return True, details
