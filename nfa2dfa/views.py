import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .exceptions import AutomatonTooLargeError, ExplorationLimitError
from .fsa_equivalence import are_automata_equivalent
from .fsa_graph import Symbol
from .fsa_printing import format_automaton
from .fsa_properties import check_all_properties, has_epsilon_transitions, is_deterministic
from .fsa_serialization import build_states, from_dict, to_dict
from .fsa_simulation import simulate
from .fsa_transformations import subset_construction

logger = logging.getLogger(__name__)


def _read_json(request):
    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f'Invalid JSON body: {e}') from e
    if not isinstance(data, dict):
        raise ValueError('JSON body must be an object')
    return data


def _statistics(fsa):
    return {
        'states_count': len(fsa['states']),
        'alphabet_size': len(fsa['alphabet']),
        'transitions_count': sum(
            len(targets) for state_transitions in fsa['transitions'].values()
            for targets in state_transitions.values()
        ),
        'accepting_states_count': len(fsa['acceptingStates']),
    }


def _error_response(e):
    if isinstance(e, (ValueError, AutomatonTooLargeError, ExplorationLimitError)):
        return JsonResponse({'error': str(e)}, status=400)
    logger.exception('Unexpected error while handling automaton request')
    return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def simulate_fsa(request):
    """
    Django view to handle FSA simulation requests.
    Works for both deterministic and non-deterministic FSAs.

    Expects a POST request with a JSON body containing:
    - fsa: The FSA definition in dictionary format
    - input: The input string to simulate

    Returns a JSON response with simulation results.
    """
    try:
        data = _read_json(request)
        fsa = data.get('fsa')
        input_string = data.get('input', '')

        if not fsa:
            return JsonResponse({'error': 'Missing FSA definition'}, status=400)

        if not isinstance(input_string, (str, list)):
            return JsonResponse({'error': 'input must be a string or a list of symbols'}, status=400)

        if isinstance(input_string, list):
            input_string = [Symbol.from_label(label) for label in input_string]

        states = build_states(fsa)
        entry = states[fsa['startingState']]
        result = simulate(entry, input_string)

        # Report paths with the caller's state names rather than internal ids
        names = {state.id: name for name, state in states.items()}
        path = [(names[source], label, names[target]) for source, label, target in result.path]

        response = {
            'accepted': result.accepted,
            'type': 'dfa' if is_deterministic(entry) else 'nfa',
            'path': path,
            'steps': result.steps,
        }
        if not result.accepted:
            response['rejection_reason'] = result.rejection_reason
        return JsonResponse(response)

    except Exception as e:
        return _error_response(e)


@csrf_exempt
@require_POST
def convert_nfa_to_dfa(request):
    """
    Django view to handle NFA to DFA conversion requests.

    Expects a POST request with a JSON body containing:
    - fsa: The FSA definition (can be deterministic or non-deterministic)
    - strategy: Optional subset construction strategy ('reachable' or 'powerset')

    Returns a JSON response with the converted DFA.
    """
    try:
        data = _read_json(request)
        fsa = data.get('fsa')

        if not fsa:
            return JsonResponse({'error': 'Missing FSA definition'}, status=400)

        entry = from_dict(fsa)
        was_deterministic = is_deterministic(entry)
        had_epsilon = has_epsilon_transitions(entry)

        construction = subset_construction(entry, strategy=data.get('strategy'))
        converted_dfa = to_dict(construction.entry)

        original_stats = _statistics(fsa)
        original_stats['has_epsilon_transitions'] = had_epsilon
        original_stats['is_deterministic'] = was_deterministic

        converted_stats = _statistics(converted_dfa)
        converted_stats['has_epsilon_transitions'] = False
        converted_stats['is_deterministic'] = True

        conversion_stats = {
            'strategy': construction.strategy,
            'subsets_created': len(construction.subsets),
            'dead_state_added': construction.dead_state is not None,
            'states_added': converted_stats['states_count'] - original_stats['states_count'],
            'epsilon_transitions_removed': had_epsilon,
            'was_already_deterministic': was_deterministic,
        }

        if was_deterministic:
            message = 'Input was already a DFA, returned equivalent DFA'
        else:
            message = 'NFA successfully converted to DFA'

        return JsonResponse({
            'success': True,
            'original_fsa': fsa,
            'converted_dfa': converted_dfa,
            'statistics': {
                'original': original_stats,
                'converted': converted_stats,
                'conversion': conversion_stats,
            },
            'message': message,
        })

    except Exception as e:
        return _error_response(e)


@csrf_exempt
@require_POST
def check_fsa_properties(request):
    """
    Django view returning the deterministic, complete and epsilon-free
    properties of an FSA.
    """
    try:
        data = _read_json(request)
        fsa = data.get('fsa')

        if not fsa:
            return JsonResponse({'error': 'Missing FSA definition'}, status=400)

        return JsonResponse(check_all_properties(from_dict(fsa)))

    except Exception as e:
        return _error_response(e)


@csrf_exempt
@require_POST
def check_equivalence(request):
    """
    Django view checking whether two FSAs (fsa1, fsa2) accept the same language.
    """
    try:
        data = _read_json(request)
        fsa1 = data.get('fsa1')
        fsa2 = data.get('fsa2')

        if not fsa1 or not fsa2:
            return JsonResponse({'error': 'Two FSA definitions are required'}, status=400)

        equivalent, details = are_automata_equivalent(from_dict(fsa1), from_dict(fsa2))
        return JsonResponse({'equivalent': equivalent, 'details': details})

    except Exception as e:
        return _error_response(e)


@csrf_exempt
@require_POST
def describe_fsa(request):
    """
    Django view returning the pretty-printed transition table of an FSA.
    """
    try:
        data = _read_json(request)
        fsa = data.get('fsa')

        if not fsa:
            return JsonResponse({'error': 'Missing FSA definition'}, status=400)

        name = data.get('name', 'FSA')
        return JsonResponse({'description': format_automaton(from_dict(fsa), name)})

    except Exception as e:
        return _error_response(e)
