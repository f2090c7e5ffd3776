import unittest

from nfa2dfa.exceptions import ExplorationLimitError, UnknownSymbolError
from nfa2dfa.fsa_examples import epsilon_example, third_from_last_is_a
from nfa2dfa.fsa_graph import Symbol, connect, create_state
from nfa2dfa.fsa_simulation import SimulationResult, accepts, simulate


class TestFsaSimulation(unittest.TestCase):
    def test_third_from_last(self):
        nfa = third_from_last_is_a()
        self.assertTrue(accepts(nfa, 'aaaaaaaa'))
        self.assertFalse(accepts(nfa, 'b'))
        self.assertFalse(accepts(nfa, 'a'))
        self.assertFalse(accepts(nfa, 'bba'))
        self.assertTrue(accepts(nfa, 'baaaaba'))
        self.assertFalse(accepts(nfa, 'bbab'))
        self.assertTrue(accepts(nfa, 'abb'))
        self.assertFalse(accepts(nfa, ''))

    def test_epsilon_example(self):
        nfa = epsilon_example()
        self.assertTrue(accepts(nfa, 'aaaaaaaa'))
        self.assertFalse(accepts(nfa, 'b'))
        self.assertTrue(accepts(nfa, 'a'))
        self.assertTrue(accepts(nfa, 'bba'))
        self.assertTrue(accepts(nfa, 'baaaaba'))
        self.assertFalse(accepts(nfa, 'bbab'))

    def test_symbol_sequence_input(self):
        nfa = third_from_last_is_a()
        self.assertTrue(accepts(nfa, [Symbol.A, Symbol.B, Symbol.B]))
        self.assertFalse(accepts(nfa, (Symbol.B, Symbol.B, Symbol.A)))

    def test_epsilon_edge_accepts_empty_string(self):
        """Two states joined only by an epsilon edge accept the empty string"""
        entry = create_state()
        final = create_state(accepting=True)
        connect(entry, final, Symbol.EPSILON)

        self.assertTrue(accepts(entry, ''))
        self.assertFalse(accepts(entry, 'a'))

    def test_epsilon_does_not_consume_input(self):
        entry = create_state()
        middle = create_state()
        final = create_state(accepting=True)
        connect(entry, middle, Symbol.EPSILON)
        connect(middle, final, Symbol.A)

        self.assertTrue(accepts(entry, 'a'))
        self.assertFalse(accepts(entry, ''))
        self.assertFalse(accepts(entry, 'aa'))

    def test_epsilon_cycle_terminates(self):
        first = create_state()
        second = create_state()
        connect(first, second, Symbol.EPSILON)
        connect(second, first, Symbol.EPSILON)
        connect(first, first, Symbol.EPSILON)

        self.assertFalse(accepts(first, ''))
        self.assertFalse(accepts(first, 'ab'))

    def test_epsilon_cycle_with_accepting_exit(self):
        first = create_state()
        second = create_state()
        final = create_state(accepting=True)
        connect(first, second, Symbol.EPSILON)
        connect(second, first, Symbol.EPSILON)
        connect(second, final, Symbol.B)

        self.assertTrue(accepts(first, 'b'))
        self.assertFalse(accepts(first, 'bb'))

    def test_accepting_path(self):
        entry = create_state()
        middle = create_state()
        final = create_state(accepting=True)
        connect(entry, middle, Symbol.A)
        connect(middle, final, Symbol.EPSILON)

        result = simulate(entry, 'a')
        self.assertIsInstance(result, SimulationResult)
        self.assertTrue(result.accepted)
        self.assertEqual(result.path, [(entry.id, 'a', middle.id), (middle.id, '', final.id)])
        self.assertIsNone(result.rejection_reason)

    def test_empty_path_when_start_accepts(self):
        entry = create_state(accepting=True)
        result = simulate(entry, '')
        self.assertTrue(result.accepted)
        self.assertEqual(result.path, [])
        self.assertEqual(result.steps, 1)

    def test_rejection(self):
        result = simulate(third_from_last_is_a(), 'bbb')
        self.assertFalse(result.accepted)
        self.assertEqual(result.path, [])
        self.assertEqual(result.rejection_reason, 'No accepting path found')
        self.assertGreater(result.steps, 0)

    def test_configurations_explored_once(self):
        """Parallel edges do not multiply the work"""
        entry = create_state()
        for _ in range(10):
            connect(entry, entry, Symbol.A)

        result = simulate(entry, 'aaaa')
        self.assertFalse(result.accepted)
        self.assertEqual(result.steps, 5)

    def test_step_limit(self):
        with self.assertRaises(ExplorationLimitError):
            simulate(third_from_last_is_a(), 'aaaa', max_steps=2)
        self.assertTrue(simulate(third_from_last_is_a(), 'aaaa', max_steps=100).accepted)

    def test_unknown_character(self):
        with self.assertRaises(UnknownSymbolError) as context:
            accepts(third_from_last_is_a(), 'abx')
        self.assertEqual(context.exception.position, 2)

    def test_epsilon_in_sequence_rejected(self):
        with self.assertRaises(UnknownSymbolError):
            accepts(third_from_last_is_a(), [Symbol.A, Symbol.EPSILON])

    def test_debug_logging(self):
        with self.assertLogs('nfa2dfa.fsa_simulation', level='DEBUG') as logs:
            accepts(third_from_last_is_a(), 'a')
        self.assertTrue(logs.output)
