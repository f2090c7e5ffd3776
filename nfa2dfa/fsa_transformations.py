import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import Dict, List, Optional
from collections import deque

from . import conf
from .exceptions import AutomatonTooLargeError, SubsetLookupError
from .fsa_graph import State, Symbol, connect, create_state
from .fsa_traversal import StateIndex, derive_alphabet, entry_closure, epsilon_closure, move_with_epsilon

logger = logging.getLogger(__name__)


@dataclass
class SubsetRecord:
    """One DFA state: a set of NFA states and the state that stands for it."""
    key: int
    members: List[State]
    accepting: bool
    representation: State

    @classmethod
    def build(cls, key: int, members: List[State]) -> 'SubsetRecord':
        accepting = any(state.accepting for state in members)
        return cls(key, members, accepting, create_state(accepting))


@dataclass
class SubsetConstruction:
    """Everything produced while converting one NFA."""
    nfa_entry: State
    alphabet: List[Symbol]
    strategy: str
    nfa_states: int
    entry_key: int
    subsets: Dict[int, SubsetRecord] = field(default_factory=dict)
    entry: Optional[State] = None
    dead_state: Optional[State] = None
    transitions_wired: int = 0


def _check_key_capacity(index: StateIndex, key_bits: Optional[int]) -> None:
    if key_bits is not None and len(index) > key_bits:
        raise AutomatonTooLargeError(
            f"Automaton has {len(index)} states but subset keys are limited to {key_bits} bits"
        )


def _successor_key(index: StateIndex, record: SubsetRecord, symbol: Symbol) -> int:
    moved = []
    for member in record.members:
        moved.extend(move_with_epsilon(member, symbol))
    if not moved:
        return 0
    return index.key_of(epsilon_closure(moved))


def _enumerate_powerset(index: StateIndex, max_states: int) -> Dict[int, SubsetRecord]:
    """Create a record for every non-empty subset of the automaton's states."""
    if len(index) > max_states:
        raise AutomatonTooLargeError(
            f"Powerset construction over {len(index)} states exceeds the limit of {max_states}"
        )

    subsets = {}
    for size in range(1, len(index) + 1):
        for members in combinations(index.states, size):
            key = index.key_of(members)
            subsets[key] = SubsetRecord.build(key, list(members))
    return subsets


def subset_construction(nfa_entry: State,
                        strategy: Optional[str] = None,
                        max_dfa_states: Optional[int] = None,
                        powerset_max_states: Optional[int] = None,
                        key_bits: Optional[int] = None) -> SubsetConstruction:
    """
    Converts an NFA to an equivalent DFA using subset construction.

    Every subset is closed under epsilon transitions before it is looked up,
    so a DFA state accepts exactly when some NFA state reachable at that point
    accepts. Missing transitions go to a shared dead state that loops to itself
    on every symbol, so each DFA state has exactly one transition per symbol.

    Args:
        nfa_entry: Entry state of the NFA
        strategy: ``'reachable'`` discovers subsets breadth-first from the entry
            subset, ``'powerset'`` builds every non-empty subset up front.
            Defaults to the ``NFA2DFA_SUBSET_STRATEGY`` setting.
        max_dfa_states: Limit on discovered subsets for the reachable strategy
        powerset_max_states: Limit on NFA states for the powerset strategy
        key_bits: Optional width limit for subset keys

    Returns:
        SubsetConstruction: The DFA entry and the records it was built from

    Raises:
        ValueError: If the strategy is unknown
        AutomatonTooLargeError: If a configured limit is exceeded
    """
    strategy = conf.resolve('SUBSET_STRATEGY', strategy)
    if strategy not in (conf.SUBSET_STRATEGY_REACHABLE, conf.SUBSET_STRATEGY_POWERSET):
        raise ValueError(f"Unknown subset construction strategy: {strategy}")

    index = StateIndex(nfa_entry)
    _check_key_capacity(index, conf.resolve('SUBSET_KEY_BITS', key_bits))

    alphabet = derive_alphabet(index.states)
    start_members = entry_closure(nfa_entry)
    start_key = index.key_of(start_members)

    construction = SubsetConstruction(
        nfa_entry=nfa_entry,
        alphabet=alphabet,
        strategy=strategy,
        nfa_states=len(index),
        entry_key=start_key,
    )

    def dead_state() -> State:
        if construction.dead_state is None:
            dead = create_state(False)
            for symbol in alphabet:
                connect(dead, dead, symbol)
            construction.dead_state = dead
        return construction.dead_state

    if strategy == conf.SUBSET_STRATEGY_POWERSET:
        subsets = _enumerate_powerset(index, conf.resolve('POWERSET_MAX_STATES', powerset_max_states))
        construction.subsets = subsets

        for record in subsets.values():
            for symbol in alphabet:
                target_key = _successor_key(index, record, symbol)
                if not target_key:
                    connect(record.representation, dead_state(), symbol)
                    construction.transitions_wired += 1
                    continue
                if target_key not in subsets:
                    raise SubsetLookupError(f"No subset record for key {target_key:#x}")
                connect(record.representation, subsets[target_key].representation, symbol)
                construction.transitions_wired += 1
    else:
        limit = conf.resolve('MAX_DFA_STATES', max_dfa_states)
        subsets = construction.subsets
        subsets[start_key] = SubsetRecord.build(start_key, index.members_of(start_key))
        queue = deque([subsets[start_key]])

        while queue:
            record = queue.popleft()
            for symbol in alphabet:
                target_key = _successor_key(index, record, symbol)
                if not target_key:
                    connect(record.representation, dead_state(), symbol)
                    construction.transitions_wired += 1
                    continue
                if target_key not in subsets:
                    if len(subsets) >= limit:
                        raise AutomatonTooLargeError(
                            f"Subset construction exceeded the limit of {limit} DFA states"
                        )
                    subsets[target_key] = SubsetRecord.build(target_key, index.members_of(target_key))
                    queue.append(subsets[target_key])
                    logger.debug("Discovered subset %#x with %d members",
                                 target_key, len(subsets[target_key].members))
                connect(record.representation, subsets[target_key].representation, symbol)
                construction.transitions_wired += 1

    if start_key not in construction.subsets:
        raise SubsetLookupError(f"No subset record for the entry closure {start_key:#x}")
    construction.entry = construction.subsets[start_key].representation

    logger.info("Converted NFA with %d states into DFA with %d subsets (strategy=%s, dead state=%s)",
                construction.nfa_states, len(construction.subsets), strategy,
                construction.dead_state is not None)
    return construction


def nfa_to_dfa(nfa_entry: State, **options) -> State:
    """
    Converts an NFA to an equivalent DFA and returns the DFA's entry state.

    Accepts the same keyword options as :func:`subset_construction`.
    """
    return subset_construction(nfa_entry, **options).entry
