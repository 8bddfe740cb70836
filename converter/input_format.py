import re
from typing import Dict, List

from .automaton import Automaton, EPSILON
from .exceptions import MalformedInputError

# Identifiers are ASCII word characters
STATES_LINE = re.compile(r"states=\[((?:\w+,)*\w+)\]", re.ASCII)
ALPHABET_LINE = re.compile(r"alpha=\[((?:\w+,)*\w+)\]", re.ASCII)
INITIAL_LINE = re.compile(r"initial=\[(\w*)\]", re.ASCII)
ACCEPTING_LINE = re.compile(r"accepting=\[((?:\w+,)*\w+|)\]", re.ASCII)
# Empty entries between commas are allowed and skipped
TRANSITIONS_LINE = re.compile(r"trans=\[((?:(?:\w+>\w+>\w+)?,)*(?:\w+>\w+>\w+)?)\]", re.ASCII)


def _field(lines: List[str], position: int, pattern) -> str:
    """Return the bracketed content of a description line, or raise if malformed."""
    if position >= len(lines):
        raise MalformedInputError(f"Missing line {position + 1}")

    match = pattern.fullmatch(lines[position])
    if match is None:
        raise MalformedInputError(f"Line {position + 1} is malformed: {lines[position]!r}")
    return match.group(1)


def _items(content: str) -> List[str]:
    return [item for item in content.split(',') if item]


def parse_description(text: str) -> Automaton:
    """
    Build an automaton from its five-line textual description:

        states=[q0,q1]
        alpha=[a,b]
        initial=[q0]
        accepting=[q1]
        trans=[q0>a>q1,q1>b>q0]

    Lines are applied one at a time, so an unknown state on the accepting
    line is reported even if the transitions line is malformed. An empty
    initial=[] leaves the initial state unset.

    Raises:
        MalformedInputError: A line is missing or does not fit its grammar
        NoSuchStateError, NoSuchSymbolError: From the automaton construction
    """
    lines = text.splitlines()
    automaton = Automaton()

    for state in _items(_field(lines, 0, STATES_LINE)):
        automaton.add_state(state)

    for symbol in _items(_field(lines, 1, ALPHABET_LINE)):
        automaton.add_symbol_to_alphabet(symbol)

    initial = _field(lines, 2, INITIAL_LINE)
    if initial:
        automaton.set_initial_state(initial)

    for state in _items(_field(lines, 3, ACCEPTING_LINE)):
        automaton.add_accepting_state(state)

    for transition in _items(_field(lines, 4, TRANSITIONS_LINE)):
        source, symbol, target = transition.split('>')
        automaton.add_transition(source, target, symbol)

    return automaton


def format_description(automaton: Automaton) -> str:
    """Write an automaton back in the five-line textual format."""
    transitions = []
    for vertex in automaton.graph.vertices:
        for edge in automaton.graph.edges_from(vertex):
            for symbol in edge.labels:
                transitions.append(f"{vertex.value}>{symbol}>{edge.target.value}")

    return '\n'.join([
        f"states=[{','.join(automaton.states)}]",
        f"alpha=[{','.join(automaton.alphabet)}]",
        f"initial=[{automaton.initial_state or ''}]",
        f"accepting=[{','.join(automaton.accepting_states)}]",
        f"trans=[{','.join(transitions)}]",
    ]) + '\n'


def validate_fsa_structure(fsa: Dict) -> Dict:
    """
    Validates that an FSA dictionary has the shape automaton_from_dict expects.

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

    if not isinstance(fsa['transitions'], dict):
        return {'valid': False, 'error': 'transitions must be a dictionary'}

    if not isinstance(fsa['acceptingStates'], list):
        return {'valid': False, 'error': 'acceptingStates must be a list'}

    for state, moves in fsa['transitions'].items():
        if not isinstance(moves, dict):
            return {'valid': False, 'error': f'Transitions of state {state} must be a dictionary'}
        for symbol, targets in moves.items():
            if not isinstance(targets, list):
                return {'valid': False,
                        'error': f'Targets of {state} on {symbol!r} must be a list'}

    return {'valid': True}


def automaton_from_dict(fsa: Dict) -> Automaton:
    """
    Build an automaton from the JSON dictionary format.

    The '' symbol denotes an epsilon transition.

    Raises:
        MalformedInputError: The dictionary does not have the expected shape
        NoSuchStateError, NoSuchSymbolError: From the automaton construction
    """
    validation = validate_fsa_structure(fsa)
    if not validation['valid']:
        raise MalformedInputError(validation['error'])

    automaton = Automaton()

    for state in fsa['states']:
        automaton.add_state(state)

    for symbol in fsa['alphabet']:
        automaton.add_symbol_to_alphabet(symbol)

    if fsa['startingState']:
        automaton.set_initial_state(fsa['startingState'])

    for state in fsa['acceptingStates']:
        automaton.add_accepting_state(state)

    for source, moves in fsa['transitions'].items():
        for symbol, targets in moves.items():
            for target in targets:
                automaton.add_transition(source, target, symbol or EPSILON)

    return automaton
