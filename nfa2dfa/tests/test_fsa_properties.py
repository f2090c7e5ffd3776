import unittest

from nfa2dfa.fsa_examples import epsilon_example, third_from_last_is_a
from nfa2dfa.fsa_graph import Symbol, connect, create_state
from nfa2dfa.fsa_properties import (
    check_all_properties,
    has_epsilon_transitions,
    is_complete,
    is_deterministic,
    is_nondeterministic,
)
from nfa2dfa.fsa_transformations import nfa_to_dfa


class TestFsaProperties(unittest.TestCase):
    def setUp(self):
        # Strings ending with 'b'
        self.dfa = create_state()
        accept = create_state(accepting=True)
        connect(self.dfa, self.dfa, Symbol.A)
        connect(self.dfa, accept, Symbol.B)
        connect(accept, self.dfa, Symbol.A)
        connect(accept, accept, Symbol.B)

    def test_deterministic(self):
        self.assertTrue(is_deterministic(self.dfa))
        self.assertFalse(is_nondeterministic(self.dfa))
        self.assertFalse(is_deterministic(third_from_last_is_a()))
        self.assertTrue(is_nondeterministic(third_from_last_is_a()))

    def test_epsilon_makes_nondeterministic(self):
        self.assertTrue(has_epsilon_transitions(epsilon_example()))
        self.assertFalse(is_deterministic(epsilon_example()))
        self.assertFalse(has_epsilon_transitions(self.dfa))

    def test_partial_dfa(self):
        entry = create_state()
        connect(entry, create_state(accepting=True), Symbol.A)

        self.assertTrue(is_deterministic(entry))
        self.assertFalse(is_complete(entry))
        self.assertTrue(is_complete(entry, alphabet=[]))

    def test_complete(self):
        self.assertTrue(is_complete(self.dfa))
        self.assertFalse(is_complete(self.dfa, alphabet=[Symbol.A, Symbol.B, Symbol.C]))
        self.assertTrue(is_complete(create_state()))

    def test_check_all_properties(self):
        self.assertEqual(check_all_properties(nfa_to_dfa(epsilon_example())), {
            'deterministic': True,
            'complete': True,
            'epsilon_free': True,
        })
        self.assertEqual(check_all_properties(epsilon_example()), {
            'deterministic': False,
            'complete': False,
            'epsilon_free': False,
        })
