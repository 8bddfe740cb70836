import itertools
import random
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from .automaton import Automaton
from .fsa_simulation import accepts
from .regex_conversions import compile_language_pattern, word_matches


def iter_words(alphabet: Sequence[str], max_length: int) -> Iterator[Tuple[str, ...]]:
    """All words over alphabet up to max_length, shortest first."""
    for length in range(max_length + 1):
        yield from itertools.product(alphabet, repeat=length)


def random_words(alphabet: Sequence[str], count: int, max_length: int,
                 rng: Optional[random.Random] = None) -> Iterator[Tuple[str, ...]]:
    rng = rng or random.Random()
    symbols = list(alphabet)

    for _ in range(count):
        length = rng.randint(0, max_length)
        if not symbols:
            length = 0
        yield tuple(rng.choice(symbols) for _ in range(length))


def find_counterexample(automaton: Automaton,
                        words: Optional[Iterable[Sequence[str]]] = None,
                        max_length: int = 5) -> Optional[Tuple[str, ...]]:
    """
    Compare the automaton with the expression derived from it.

    Args:
        automaton: A deterministic automaton with every state reachable
        words: Words to try; defaults to every word up to max_length

    Returns:
        The first word on which the automaton and the expression disagree,
        or None if they agree on every word tried
    """
    pattern = compile_language_pattern(automaton)
    if words is None:
        words = iter_words(automaton.alphabet, max_length)

    for word in words:
        word = tuple(word)
        if accepts(automaton, word) != word_matches(pattern, word):
            return word

    return None
