import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union
from collections import deque

from . import conf
from .exceptions import ExplorationLimitError, UnknownSymbolError
from .fsa_graph import State, Symbol, Transition, parse_symbols

logger = logging.getLogger(__name__)

# (state id, input position)
Configuration = Tuple[int, int]


@dataclass
class SimulationResult:
    """
    Outcome of running an automaton on one input.

    ``path`` is the execution path of the accepting branch as
    ``(source_id, label, target_id)`` triples; epsilon moves use the label ``''``.
    It is empty on rejection.
    """
    accepted: bool
    path: List[Tuple[int, str, int]] = field(default_factory=list)
    steps: int = 0
    rejection_reason: Optional[str] = None


def _coerce_input(symbols: Union[str, Sequence[Symbol]]) -> List[Symbol]:
    if isinstance(symbols, str):
        return parse_symbols(symbols)

    symbols = list(symbols)
    for position, symbol in enumerate(symbols):
        if not isinstance(symbol, Symbol) or symbol.is_epsilon:
            raise UnknownSymbolError(getattr(symbol, 'value', symbol), position)
    return symbols


def _rebuild_path(parents: Dict[Configuration, Optional[Tuple[Configuration, Transition]]],
                  final: Configuration) -> List[Tuple[int, str, int]]:
    path = []
    current = final
    while parents[current] is not None:
        previous, transition = parents[current]
        path.append((transition.source.id, transition.symbol.value, transition.target.id))
        current = previous
    path.reverse()
    return path


def simulate(start: State, symbols: Union[str, Sequence[Symbol]],
             max_steps: Optional[int] = None) -> SimulationResult:
    """
    Runs an automaton, deterministic or not, on an input sequence.

    Configurations ``(state, position)`` are explored breadth-first. Epsilon
    transitions keep the position, labelled transitions advance it by one, and
    a configuration at the end of the input in an accepting state accepts.
    Every configuration is queued at most once, so epsilon cycles terminate.

    Args:
        start: Entry state of the automaton
        symbols: Consumable symbols, or a string of their codes
        max_steps: Limit on configurations explored. Defaults to the
            ``NFA2DFA_MAX_SIMULATION_STEPS`` setting.

    Returns:
        SimulationResult: Acceptance, the accepting path and the work done

    Raises:
        UnknownSymbolError: If the input contains something that is not a consumable symbol
        ExplorationLimitError: If more than ``max_steps`` configurations are explored
    """
    symbols = _coerce_input(symbols)
    max_steps = conf.resolve('MAX_SIMULATION_STEPS', max_steps)
    length = len(symbols)

    initial = (start.id, 0)
    parents: Dict[Configuration, Optional[Tuple[Configuration, Transition]]] = {initial: None}
    queue = deque([(start, 0)])
    steps = 0

    while queue:
        steps += 1
        if steps > max_steps:
            raise ExplorationLimitError(f"Simulation explored more than {max_steps} configurations")

        state, position = queue.popleft()
        current = (state.id, position)

        if position == length and state.accepting:
            return SimulationResult(True, _rebuild_path(parents, current), steps)

        next_symbol = symbols[position] if position < length else None

        for transition in state.outgoing:
            if transition.symbol.is_epsilon:
                following = (transition.target.id, position)
            elif transition.symbol is next_symbol:
                following = (transition.target.id, position + 1)
            else:
                continue

            if following in parents:
                continue
            parents[following] = (current, transition)
            queue.append((transition.target, following[1]))
            logger.debug("%d: %d -%s-> %d at position %d",
                         steps, state.id, transition.symbol, transition.target.id, following[1])

    return SimulationResult(False, [], steps, 'No accepting path found')


def accepts(start: State, symbols: Union[str, Sequence[Symbol]], max_steps: Optional[int] = None) -> bool:
    """Whether the automaton entered at ``start`` accepts ``symbols``."""
    return simulate(start, symbols, max_steps).accepted
