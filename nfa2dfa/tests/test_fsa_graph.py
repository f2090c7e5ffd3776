import unittest

from nfa2dfa.exceptions import UnknownSymbolError
from nfa2dfa.fsa_graph import Symbol, Transition, connect, create_state, parse_symbols


class TestStates(unittest.TestCase):
    def test_ids_strictly_increase(self):
        """States created later always have larger ids"""
        states = [create_state() for _ in range(5)]
        ids = [state.id for state in states]
        self.assertEqual(ids, sorted(ids))
        self.assertEqual(len(set(ids)), 5)

    def test_accepting_flag_fixed_at_creation(self):
        self.assertTrue(create_state(accepting=True).accepting)
        self.assertFalse(create_state().accepting)


class TestConnect(unittest.TestCase):
    def test_connect_records_both_directions(self):
        source = create_state()
        target = create_state()
        transition = connect(source, target, Symbol.A)

        self.assertEqual(source.outgoing, [transition])
        self.assertEqual(target.incoming, [transition])
        self.assertEqual(source.incoming, [])
        self.assertIs(transition.source, source)
        self.assertIs(transition.target, target)
        self.assertIs(transition.symbol, Symbol.A)

    def test_no_validation_on_connect(self):
        """Self-loops, parallel edges and epsilon edges are all allowed"""
        state = create_state()
        other = create_state()
        connect(state, state, Symbol.A)
        connect(state, other, Symbol.A)
        connect(state, other, Symbol.A)
        connect(state, other, Symbol.EPSILON)

        self.assertEqual(len(state.outgoing), 4)
        self.assertEqual(len(other.incoming), 3)

    def test_transition_equality(self):
        """Transitions are equal when label and endpoints match"""
        source = create_state()
        target = create_state()
        first = connect(source, target, Symbol.B)
        second = connect(source, target, Symbol.B)
        different = connect(source, target, Symbol.A)

        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertNotEqual(first, different)
        self.assertEqual(len({first, second, different}), 2)
        self.assertEqual(first, Transition(source, target, Symbol.B))

    def test_transitions_are_immutable(self):
        transition = connect(create_state(), create_state(), Symbol.A)
        with self.assertRaises(AttributeError):
            transition.symbol = Symbol.B


class TestSymbols(unittest.TestCase):
    def test_consumable_symbols_in_order(self):
        self.assertEqual(Symbol.consumable(), [Symbol.A, Symbol.B, Symbol.C, Symbol.D])
        self.assertLess(Symbol.A.order, Symbol.D.order)

    def test_from_label(self):
        self.assertIs(Symbol.from_label(''), Symbol.EPSILON)
        self.assertIs(Symbol.from_label('c'), Symbol.C)
        with self.assertRaises(UnknownSymbolError):
            Symbol.from_label('z')

    def test_str(self):
        self.assertEqual(str(Symbol.EPSILON), 'ε')
        self.assertEqual(str(Symbol.B), 'b')

    def test_parse_symbols(self):
        self.assertEqual(parse_symbols('abcd'), [Symbol.A, Symbol.B, Symbol.C, Symbol.D])
        self.assertEqual(parse_symbols(''), [])

    def test_parse_unknown_symbol(self):
        """Unmapped characters fail instead of being dropped"""
        with self.assertRaises(UnknownSymbolError) as context:
            parse_symbols('abz')
        self.assertEqual(context.exception.label, 'z')
        self.assertEqual(context.exception.position, 2)
        self.assertIsInstance(context.exception, ValueError)

    def test_epsilon_has_no_input_code(self):
        with self.assertRaises(UnknownSymbolError):
            parse_symbols('e')
