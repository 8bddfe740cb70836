import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .conf import get_setting
from .diagnostics import error_code, describe_error
from .exceptions import FSAError
from .fsa_properties import check_all_properties
from .input_format import automaton_from_dict, parse_description
from .regex_conversions import derive_regular_expression

logger = logging.getLogger(__name__)


def _load_automaton(data):
    """Build the automaton from either an 'fsa' dictionary or a 'description' text."""
    if not isinstance(data, dict):
        return None
    if data.get('fsa'):
        return automaton_from_dict(data['fsa'])
    if data.get('description'):
        return parse_description(data['description'])
    return None


def _error_response(error: FSAError):
    return JsonResponse({
        'error': describe_error(error),
        'code': error_code(error),
        'detail': str(error)
    }, status=400)


@csrf_exempt
@require_POST
def fsa_to_regex(request):
    """
    Django view converting a deterministic automaton into a regular expression.

    Expects a POST request with a JSON body containing either:
    - fsa: The FSA definition in dictionary format
    - description: The five-line textual description

    Returns a JSON response with the derived expression, or the numbered
    diagnostic of the first failure.
    """
    try:
        data = json.loads(request.body)
        automaton = _load_automaton(data)

        if automaton is None:
            return JsonResponse({'error': 'Missing FSA definition'}, status=400)

        max_states = get_setting('MAX_STATES')
        if len(automaton.states) > max_states:
            return JsonResponse({
                'error': f'Automaton has {len(automaton.states)} states; at most {max_states} are supported'
            }, status=400)

        regex = derive_regular_expression(automaton)
        logger.info("Derived expression for %d states", len(automaton.states))

        return JsonResponse({
            'regex': regex,
            'states': automaton.ordered_states(),
            'accepting_states': automaton.accepting_states
        })

    except FSAError as e:
        return _error_response(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        logger.exception("Conversion failed")
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def check_fsa_properties(request):
    """
    Django view to check the conversion preconditions of an automaton.

    Expects a POST request with a JSON body containing 'fsa' or 'description'.

    Returns a JSON response with property check results.
    """
    try:
        data = json.loads(request.body)
        automaton = _load_automaton(data)

        if automaton is None:
            return JsonResponse({'error': 'Missing FSA definition'}, status=400)

        properties = check_all_properties(automaton)

        return JsonResponse({
            'properties': properties,
            'convertible': (properties['has_initial_state']
                            and properties['joint']
                            and properties['deterministic']),
            'summary': {
                'total_states': len(automaton.states),
                'alphabet_size': len(automaton.alphabet),
                'starting_state': automaton.initial_state,
                'accepting_states_count': len(set(automaton.accepting_states))
            }
        })

    except FSAError as e:
        return _error_response(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        logger.exception("Property check failed")
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)
