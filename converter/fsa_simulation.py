from typing import Dict, List, Sequence, Tuple, Union

from .automaton import Automaton
from .fsa_properties import validate_automaton


def simulate_automaton(automaton: Automaton, word: Sequence[str]) -> Union[List[Tuple[str, str, str]], Dict]:
    """
    Runs a deterministic automaton on a word.

    Args:
        automaton: A deterministic automaton with every state reachable
        word: The input as a sequence of alphabet symbols

    Returns:
        If the word is accepted, returns a list of transitions in the format:
        [(current_state, symbol, next_state), ...].
        If the word is rejected, returns a dictionary with:
        {
            'accepted': False,
            'path': [(current_state, symbol, next_state), ...],  # Path up to rejection
            'rejection_reason': str,
            'rejection_position': int
        }
    """
    validate_automaton(automaton)

    current_state = automaton.initial_state
    alphabet = set(automaton.alphabet)
    execution_path = []

    for position, symbol in enumerate(word):
        if symbol not in alphabet:
            return {
                'accepted': False,
                'path': execution_path,
                'rejection_reason': f"Symbol '{symbol}' not in alphabet",
                'rejection_position': position
            }

        next_state = automaton.next_state(current_state, symbol)
        if next_state is None:
            return {
                'accepted': False,
                'path': execution_path,
                'rejection_reason': f"No transition defined for symbol '{symbol}' from state '{current_state}'",
                'rejection_position': position
            }

        execution_path.append((current_state, symbol, next_state))
        current_state = next_state

    if current_state in automaton.accepting_states:
        return execution_path

    return {
        'accepted': False,
        'path': execution_path,
        'rejection_reason': f"Final state '{current_state}' is not an accepting state",
        'rejection_position': len(word)
    }


def accepts(automaton: Automaton, word: Sequence[str]) -> bool:
    return isinstance(simulate_automaton(automaton, word), list)
