from django.core.management.base import BaseCommand, CommandError

from nfa2dfa import conf
from nfa2dfa.exceptions import AutomatonError
from nfa2dfa.fsa_examples import EXAMPLES
from nfa2dfa.fsa_printing import format_automaton
from nfa2dfa.fsa_simulation import accepts
from nfa2dfa.fsa_transformations import nfa_to_dfa

DEFAULT_STRINGS = ['aaaaaaaa', 'b', 'a', 'bba', 'baaaaba', 'bbab']


class Command(BaseCommand):
    help = 'Build an example NFA, convert it to a DFA and test strings against both.'

    def add_arguments(self, parser):
        parser.add_argument('strings', nargs='*', help='Input strings to test (default: a fixed set)')
        parser.add_argument('--example', choices=sorted(EXAMPLES), default='third-from-last',
                            help='Which example NFA to build')
        parser.add_argument('--strategy',
                            choices=[conf.SUBSET_STRATEGY_REACHABLE, conf.SUBSET_STRATEGY_POWERSET],
                            help='Subset construction strategy')
        parser.add_argument('--no-print', action='store_true',
                            help='Do not print the transition tables')

    def run_strings(self, entry, strings):
        for string in strings:
            try:
                valid = accepts(entry, string)
            except AutomatonError as e:
                raise CommandError(str(e)) from e
            self.stdout.write(f"{string} is {'valid' if valid else 'invalid'}")

    def handle(self, *args, **options):
        strings = options['strings'] or DEFAULT_STRINGS
        nfa = EXAMPLES[options['example']]()

        self.run_strings(nfa, strings)

        try:
            dfa = nfa_to_dfa(nfa, strategy=options['strategy'])
        except AutomatonError as e:
            raise CommandError(str(e)) from e

        self.stdout.write('=====')
        self.run_strings(dfa, strings)

        if not options['no_print']:
            self.stdout.write('\n\n' + format_automaton(nfa, 'NFA'))
            self.stdout.write('\n\n' + format_automaton(dfa, 'DFA'))
