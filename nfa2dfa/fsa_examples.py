from typing import Callable, Dict

from .fsa_graph import State, Symbol, connect, create_state


def third_from_last_is_a() -> State:
    """
    NFA over {a, b} accepting strings whose third-from-last character is 'a'.

    The entry loops on both symbols and guesses, on an 'a', that exactly two
    more characters follow.
    """
    zero = create_state()
    one = create_state()
    two = create_state()
    three = create_state(accepting=True)

    connect(zero, zero, Symbol.A)
    connect(zero, zero, Symbol.B)
    connect(zero, one, Symbol.A)

    connect(one, two, Symbol.A)
    connect(one, two, Symbol.B)

    connect(two, three, Symbol.A)
    connect(two, three, Symbol.B)

    return zero


def epsilon_example() -> State:
    """
    Three-state NFA with an epsilon edge out of its accepting entry.

    Accepts ``a``, ``bba`` and ``baaaaba`` but not ``b`` or ``bbab``.
    """
    one = create_state(accepting=True)
    two = create_state()
    three = create_state()

    connect(one, two, Symbol.B)
    connect(one, three, Symbol.EPSILON)

    connect(two, two, Symbol.A)
    connect(two, three, Symbol.A)
    connect(two, three, Symbol.B)

    connect(three, one, Symbol.A)

    return one


EXAMPLES: Dict[str, Callable[[], State]] = {
    'third-from-last': third_from_last_is_a,
    'epsilon': epsilon_example,
}
