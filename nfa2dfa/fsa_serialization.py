from typing import Dict

from .exceptions import InvalidAutomatonError
from .fsa_graph import State, Symbol, connect, create_state
from .fsa_traversal import StateIndex, derive_alphabet


def validate_fsa_structure(fsa: Dict) -> Dict:
    """
    Validates that an FSA dictionary has the structure needed to build a graph.

    Args:
        fsa: The FSA dictionary to validate

    Returns:
        Dict: Validation result with 'valid' boolean and optional 'error' message
    """
    if not isinstance(fsa, dict):
        return {'valid': False, 'error': 'FSA must be a dictionary'}

    required_keys = ['states', 'alphabet', 'transitions', 'startingState', 'acceptingStates']

    for key in required_keys:
        if key not in fsa:
            return {'valid': False, 'error': f'Missing required key: {key}'}

    if not isinstance(fsa['states'], list):
        return {'valid': False, 'error': 'states must be a list'}

    if not isinstance(fsa['alphabet'], list):
        return {'valid': False, 'error': 'alphabet must be a list'}

    if Symbol.EPSILON.value in fsa['alphabet']:
        return {'valid': False, 'error': 'alphabet must not contain the epsilon symbol'}

    if not isinstance(fsa['transitions'], dict):
        return {'valid': False, 'error': 'transitions must be a dictionary'}

    if not isinstance(fsa['acceptingStates'], list):
        return {'valid': False, 'error': 'acceptingStates must be a list'}

    if not fsa['states']:
        return {'valid': False, 'error': 'FSA must have at least one state'}

    if len(set(fsa['states'])) != len(fsa['states']):
        return {'valid': False, 'error': 'states must not contain duplicates'}

    if fsa['startingState'] not in fsa['states']:
        return {'valid': False, 'error': 'Starting state not in states list'}

    for state in fsa['acceptingStates']:
        if state not in fsa['states']:
            return {'valid': False, 'error': f'Accepting state {state} not in states list'}

    for state, state_transitions in fsa['transitions'].items():
        if state not in fsa['states']:
            return {'valid': False, 'error': f'Transition source {state} not in states list'}
        if not isinstance(state_transitions, dict):
            return {'valid': False, 'error': f'Transitions of {state} must be a dictionary'}
        for symbol, targets in state_transitions.items():
            if not isinstance(targets, list):
                return {'valid': False, 'error': f'Targets of {state} on {symbol!r} must be a list'}
            for target in targets:
                if target not in fsa['states']:
                    return {'valid': False, 'error': f'Transition target {target} not in states list'}

    return {'valid': True}


def from_dict(fsa: Dict) -> State:
    """
    Builds an automaton graph from the FSA dictionary format.

    See :func:`build_states` for details.

    Returns:
        State: The entry state of the automaton
    """
    states = build_states(fsa)
    return states[fsa['startingState']]


def build_states(fsa: Dict) -> Dict[str, State]:
    """
    Builds an automaton graph from the FSA dictionary format.

    Epsilon transitions use the empty string as their symbol. States that are
    not reachable from the starting state are created but not part of the
    resulting automaton.

    Args:
        fsa: A dictionary with the following keys:
            - states: List of all state names
            - alphabet: List of symbols in the alphabet (excluding epsilon)
            - transitions: {state: {symbol: [target, ...]}}
            - startingState: The starting state
            - acceptingStates: List of accepting states

    Returns:
        Dict[str, State]: Every state, keyed by its name in the dictionary

    Raises:
        InvalidAutomatonError: If the dictionary is malformed
        UnknownSymbolError: If a symbol has no Symbol counterpart
    """
    validation = validate_fsa_structure(fsa)
    if not validation['valid']:
        raise InvalidAutomatonError(validation['error'])

    for label in fsa['alphabet']:
        Symbol.from_label(label)

    accepting = set(fsa['acceptingStates'])
    states = {name: create_state(name in accepting) for name in fsa['states']}

    for name in fsa['states']:
        for label, targets in fsa['transitions'].get(name, {}).items():
            symbol = Symbol.from_label(label)
            for target in targets:
                connect(states[name], states[target], symbol)

    return states


def state_name(position: int) -> str:
    return f'S{position}'


def to_dict(entry: State) -> Dict:
    """
    Describes the automaton reachable from ``entry`` in the FSA dictionary format.

    States are named ``S0``, ``S1``, ... in flatten order, so the entry is
    always ``S0``.
    """
    index = StateIndex(entry)
    names = [state_name(position) for position in range(len(index))]
    transitions = {}

    for name, state in zip(names, index.states):
        transitions[name] = {}
        for transition in state.outgoing:
            targets = transitions[name].setdefault(transition.symbol.value, [])
            target = names[index.position(transition.target)]
            if target not in targets:
                targets.append(target)

    return {
        'states': names,
        'alphabet': [symbol.value for symbol in derive_alphabet(index.states)],
        'transitions': transitions,
        'startingState': names[0],
        'acceptingStates': [name for name, state in zip(names, index.states) if state.accepting],
    }
