from .fsa_graph import State
from .fsa_traversal import StateIndex


def format_automaton(entry: State, name: str = 'Automaton') -> str:
    """
    Renders the states and transitions of an automaton as text.

    States are numbered by their position in flatten order, so the entry is
    state 0. Each transition is shown as ``[target label]``.
    """
    index = StateIndex(entry)
    lines = [name, '=' * 5, f'Total of {len(index)} states']

    for position, state in enumerate(index.states):
        prefix = '(Entry) ' if position == 0 else ''
        if state.accepting:
            prefix += '(Accept) '

        if not state.outgoing:
            lines.append(f'{prefix}State {position} is void')
        else:
            connections = ' '.join(
                f'[{index.position(transition.target)} {transition.symbol}]'
                for transition in state.outgoing
            )
            lines.append(f'{prefix}State {position} connects to {connections}')

    return '\n'.join(lines)
