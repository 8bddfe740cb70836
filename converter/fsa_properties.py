from typing import Dict, Optional

from .automaton import Automaton, EPSILON
from .exceptions import NoInitialStateError, DisjointError, NondeterministicError


def has_initial_state(automaton: Automaton) -> bool:
    return automaton.initial_state is not None


def is_joint(automaton: Automaton) -> bool:
    """
    Checks if every state is reachable from the initial state.

    Args:
        automaton: The automaton to check

    Returns:
        bool: True if all states are reachable, False otherwise (including
        when no initial state has been set)
    """
    if not has_initial_state(automaton):
        return False

    graph = automaton.graph
    return graph.is_joint(graph.find_vertex(automaton.initial_state))


def find_nondeterministic_state(automaton: Automaton) -> Optional[str]:
    """
    Finds the first state that breaks determinism.

    A state breaks determinism if:
    1. One of its outgoing edges is labeled with epsilon
    2. The same symbol labels more than one of its outgoing edges

    Returns:
        The state name, or None if the automaton is deterministic
    """
    graph = automaton.graph

    for vertex in graph.vertices:
        seen = set()
        for edge in graph.edges_from(vertex):
            for symbol in edge.labels:
                if symbol == EPSILON or symbol in seen:
                    return vertex.value
                seen.add(symbol)

    return None


def is_deterministic(automaton: Automaton) -> bool:
    return find_nondeterministic_state(automaton) is None


def has_cycle(automaton: Automaton) -> bool:
    """True if some state can be revisited, i.e. the language may be infinite."""
    return automaton.graph.find_cycle() is not None


def check_all_properties(automaton: Automaton) -> Dict:
    """
    Check all automaton properties at once.

    Returns:
        Dict: {
            'has_initial_state': bool,
            'joint': bool,
            'deterministic': bool,
            'has_cycle': bool
        }
    """
    return {
        'has_initial_state': has_initial_state(automaton),
        'joint': is_joint(automaton),
        'deterministic': is_deterministic(automaton),
        'has_cycle': has_cycle(automaton)
    }


def validate_automaton(automaton: Automaton):
    """
    Raise the first precondition violated by the automaton.

    Checked in order: initial state presence, reachability of every state,
    determinism.
    """
    if not has_initial_state(automaton):
        raise NoInitialStateError()

    if not is_joint(automaton):
        raise DisjointError()

    state = find_nondeterministic_state(automaton)
    if state is not None:
        raise NondeterministicError(state)
