from typing import Dict, Iterable, List, Set
from collections import deque

from .exceptions import SubsetLookupError
from .fsa_graph import State, Symbol, Transition


def flatten(entry: State) -> List[State]:
    """
    Lists every state reachable from ``entry``.

    Breadth-first: each distinct transition is followed once, and states come
    out in discovery order with the entry first.

    Args:
        entry: The entry state of the automaton

    Returns:
        List[State]: All reachable states, each exactly once
    """
    states = [entry]
    seen_states: Set[int] = {entry.id}
    seen_transitions: Set[Transition] = set()
    queue = deque([entry])

    while queue:
        state = queue.popleft()
        for transition in state.outgoing:
            if transition in seen_transitions:
                continue
            seen_transitions.add(transition)

            target = transition.target
            if target.id not in seen_states:
                seen_states.add(target.id)
                states.append(target)
                queue.append(target)

    return states


class StateIndex:
    """
    Dense numbering of the states of one automaton.

    Positions run from 0 to n-1 in flatten order and are what subset keys are
    built from: bit ``i`` of a key is set when the state at position ``i`` is
    a member.
    """

    def __init__(self, entry: State):
        self.entry = entry
        self.states = flatten(entry)
        self._positions: Dict[int, int] = {state.id: position for position, state in enumerate(self.states)}

    def __len__(self):
        return len(self.states)

    def __contains__(self, state: State):
        return state.id in self._positions

    def position(self, state: State) -> int:
        try:
            return self._positions[state.id]
        except KeyError:
            raise SubsetLookupError(f"{state!r} is not reachable from {self.entry!r}") from None

    def key_of(self, states: Iterable[State]) -> int:
        """Canonical key of a set of states. The empty set has key 0."""
        key = 0
        for state in states:
            key |= 1 << self.position(state)
        return key

    def members_of(self, key: int) -> List[State]:
        """Member states of ``key``, in position order."""
        members = []
        position = 0
        while key:
            if key & 1:
                members.append(self.states[position])
            key >>= 1
            position += 1
        return members


def move_with_epsilon(state: State, symbol: Symbol) -> List[State]:
    """
    States reachable from ``state`` by any chain of epsilon transitions
    followed by exactly one transition labelled ``symbol``.

    For ``Symbol.EPSILON`` this is every state reachable through one or more
    epsilon transitions. Visited states are never expanded twice, so epsilon
    cycles terminate.

    Args:
        state: Where to start
        symbol: The label of the final transition

    Returns:
        List[State]: Each matching state once, in discovery order
    """
    result = []
    found: Set[int] = set()
    expanded: Set[int] = {state.id}
    queue = deque([state])

    while queue:
        current = queue.popleft()
        for transition in current.outgoing:
            target = transition.target
            if transition.symbol is symbol and target.id not in found:
                found.add(target.id)
                result.append(target)
            if transition.symbol.is_epsilon and target.id not in expanded:
                expanded.add(target.id)
                queue.append(target)

    return result


def epsilon_closure(states: Iterable[State]) -> List[State]:
    """The given states plus everything reachable from them through epsilon transitions."""
    closure = []
    seen: Set[int] = set()

    def add(state):
        if state.id not in seen:
            seen.add(state.id)
            closure.append(state)

    # Add the seeds first so they keep their order at the front
    seeds = list(states)
    for state in seeds:
        add(state)
    for state in seeds:
        for reached in move_with_epsilon(state, Symbol.EPSILON):
            add(reached)

    return closure


def entry_closure(entry: State) -> List[State]:
    """Epsilon-closure of a single entry state."""
    return epsilon_closure([entry])


def derive_alphabet(states: Iterable[State]) -> List[Symbol]:
    """The consumable symbols used on transitions leaving ``states``, in alphabet order."""
    used = set()
    for state in states:
        for transition in state.outgoing:
            if not transition.symbol.is_epsilon:
                used.add(transition.symbol)
    return sorted(used, key=lambda symbol: symbol.order)
