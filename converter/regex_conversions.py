import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Pattern, Sequence, Tuple

from .automaton import Automaton, EPSILON, EMPTY_SET
from .fsa_properties import validate_automaton

logger = logging.getLogger(__name__)

# Appended to every symbol when matching words with Python's re module
SYMBOL_SEPARATOR = '\x1f'


@dataclass(frozen=True)
class RegexNotation:
    """The tokens used to spell out a derived regular expression."""
    epsilon: str
    empty_set: str
    alternation: str = '|'
    group_open: str = '('
    group_close: str = ')'
    star: str = '*'
    symbol_format: Callable[[str], str] = str

    def symbol(self, symbol: str) -> str:
        return self.symbol_format(symbol)

    def group(self, expression: str) -> str:
        return f"{self.group_open}{expression}{self.group_close}"

    def union(self, expressions: Iterable[str]) -> str:
        return self.alternation.join(expressions)


def _python_symbol(symbol: str) -> str:
    return re.escape(symbol) + re.escape(SYMBOL_SEPARATOR)


TEXT_NOTATION = RegexNotation(epsilon=EPSILON, empty_set=EMPTY_SET)

PYTHON_NOTATION = RegexNotation(
    epsilon='',
    empty_set=r'[^\w\W]',
    group_open='(?:',
    symbol_format=_python_symbol
)


class RegexBuilder:
    """
    Derives a regular expression from a deterministic automaton by Kleene's
    state elimination.

    paths(i, j, k) is the expression for all inputs leading from state i to
    state j through intermediate states with index <= k. States are indexed
    by Automaton.ordered_states(), so the initial state has index 0. Every
    computed cell is kept in a table scoped to this builder.
    """

    def __init__(self, automaton: Automaton, notation: RegexNotation = TEXT_NOTATION):
        self.automaton = automaton
        self.notation = notation
        self.order = automaton.ordered_states()
        self.positions = {name: index for index, name in enumerate(self.order)}
        self._vertices = [automaton.vertex(name) for name in self.order]
        self._table: Dict[Tuple[int, int, int], str] = {}

    def build(self) -> str:
        if not self.automaton.accepting_states:
            return self.notation.empty_set

        last = len(self.order) - 1
        # Accepting states form a set; repeats in the input add nothing
        targets = list(dict.fromkeys(self.automaton.accepting_states))
        result = self.notation.union(
            self.paths(0, self.positions[state], last) for state in targets
        )

        logger.debug("Derived expression of length %d using %d table cells",
                     len(result), len(self._table))
        return result

    def paths(self, i: int, j: int, k: int) -> str:
        key = (i, j, k)
        expression = self._table.get(key)
        if expression is None:
            if k < 0:
                expression = self._direct(i, j)
            else:
                expression = self._through(i, j, k)
            self._table[key] = expression
        return expression

    def _direct(self, i: int, j: int) -> str:
        """Single hop from i to j, or staying put when i == j."""
        notation = self.notation
        edge = self.automaton.graph.find_edge(self._vertices[i], self._vertices[j])
        symbols = [notation.symbol(label) for label in edge.labels] if edge else []

        if i == j:
            return notation.union(symbols + [notation.epsilon])
        if not symbols:
            return notation.empty_set
        return notation.union(symbols)

    def _through(self, i: int, j: int, k: int) -> str:
        notation = self.notation
        via_k = (notation.group(self.paths(i, k, k - 1))
                 + notation.group(self.paths(k, k, k - 1)) + notation.star
                 + notation.group(self.paths(k, j, k - 1)))
        return notation.union([via_k, notation.group(self.paths(i, j, k - 1))])


def derive_regular_expression(automaton: Automaton,
                              notation: RegexNotation = TEXT_NOTATION) -> str:
    """
    Convert a deterministic automaton into an equivalent regular expression.

    Args:
        automaton: A fully constructed automaton
        notation: Tokens to write the expression with

    Returns:
        str: The expression, or the empty-set literal when nothing is accepted

    Raises:
        NoInitialStateError, DisjointError, NondeterministicError: checked in
        that order before any derivation work happens
    """
    validate_automaton(automaton)

    logger.debug("Deriving expression for %d states, %d accepting",
                 len(automaton.states), len(automaton.accepting_states))
    return RegexBuilder(automaton, notation).build()


def compile_language_pattern(automaton: Automaton) -> Pattern:
    """Compile the derived expression into a Python recognizer for encoded words."""
    return re.compile(derive_regular_expression(automaton, PYTHON_NOTATION))


def encode_word(word: Sequence[str]) -> str:
    return ''.join(symbol + SYMBOL_SEPARATOR for symbol in word)


def word_matches(pattern: Pattern, word: Sequence[str]) -> bool:
    """Check a word, given as a sequence of symbols, against a compiled pattern."""
    return pattern.fullmatch(encode_word(word)) is not None

