import logging
from typing import Dict, List, Optional

from .exceptions import NoSuchStateError, NoSuchSymbolError
from .labeled_graph import LabeledGraph, Vertex

logger = logging.getLogger(__name__)

# Reserved literals: the epsilon transition marker and the empty language
EPSILON = 'eps'
EMPTY_SET = '{}'


class Automaton:
    """
    A finite automaton over a LabeledGraph.

    Build it in this order: states, alphabet, initial state, accepting
    states, transitions. Every step checks its arguments against what has
    already been registered.
    """

    def __init__(self):
        self.graph = LabeledGraph()
        self._states: Dict[str, Vertex] = {}
        self._alphabet: Dict[str, None] = {}
        self.initial_state: Optional[str] = None
        self.accepting_states: List[str] = []

    @property
    def states(self) -> List[str]:
        return list(self._states)

    @property
    def alphabet(self) -> List[str]:
        return list(self._alphabet)

    def add_state(self, name: str) -> Vertex:
        """Register a state. Re-adding a known name returns its existing vertex."""
        vertex = self._states.get(name)
        if vertex is None:
            vertex = self.graph.add_vertex(name)
            self._states[name] = vertex
        else:
            logger.debug("State %r is already registered", name)
        return vertex

    def add_symbol_to_alphabet(self, symbol: str):
        self._alphabet[symbol] = None

    def set_initial_state(self, name: str):
        if name not in self._states:
            raise NoSuchStateError(name)
        self.initial_state = name

    def add_accepting_state(self, name: str):
        if name not in self._states:
            raise NoSuchStateError(name)
        self.accepting_states.append(name)

    def add_transition(self, source: str, target: str, symbol: str):
        if source not in self._states:
            raise NoSuchStateError(source)
        if target not in self._states:
            raise NoSuchStateError(target)
        if symbol != EPSILON and symbol not in self._alphabet:
            raise NoSuchSymbolError(symbol)

        self.graph.add_edge(self._states[source], self._states[target], symbol)

    def vertex(self, name: str) -> Vertex:
        if name not in self._states:
            raise NoSuchStateError(name)
        return self._states[name]

    def ordered_states(self) -> List[str]:
        """State names in insertion order with the initial state moved first."""
        states = self.states
        if self.initial_state is not None:
            states.remove(self.initial_state)
            states.insert(0, self.initial_state)
        return states

    def next_state(self, state: str, symbol: str) -> Optional[str]:
        """The target of the first outgoing edge of state labeled with symbol."""
        for edge in self.graph.edges_from(self.vertex(state)):
            if symbol in edge.labels:
                return edge.target.value
        return None

    def to_dict(self) -> Dict:
        """
        Export in the dictionary format used by the JSON endpoints.

        Epsilon transitions are written under the '' symbol.
        """
        transitions = {}
        for name, vertex in self._states.items():
            moves = {}
            for edge in self.graph.edges_from(vertex):
                for label in edge.labels:
                    symbol = '' if label == EPSILON else label
                    moves.setdefault(symbol, []).append(edge.target.value)
            transitions[name] = moves

        return {
            'states': self.states,
            'alphabet': self.alphabet,
            'transitions': transitions,
            'startingState': self.initial_state,
            'acceptingStates': list(self.accepting_states)
        }

    def __repr__(self) -> str:
        return (f"Automaton(states={self.states!r}, alphabet={self.alphabet!r}, "
                f"initial={self.initial_state!r}, accepting={self.accepting_states!r})")
