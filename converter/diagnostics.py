"""Numbered diagnostics reported for failed conversions."""
import logging

from .exceptions import (
    FSAError,
    MalformedInputError,
    NoSuchStateError,
    DisjointError,
    NoSuchSymbolError,
    NoInitialStateError,
    NondeterministicError
)
from .input_format import parse_description
from .regex_conversions import derive_regular_expression

logger = logging.getLogger(__name__)

ERROR_CODES = {
    MalformedInputError: 0,
    NoSuchStateError: 1,
    DisjointError: 2,
    NoSuchSymbolError: 3,
    NoInitialStateError: 4,
    NondeterministicError: 5
}


def error_code(error: FSAError) -> int:
    return ERROR_CODES[type(error)]


def describe_error(error: FSAError) -> str:
    """User-facing message for an error, without its code."""
    if isinstance(error, MalformedInputError):
        return "Input file is malformed"
    if isinstance(error, NoSuchStateError):
        return f"A state '{error.state}' is not in the set of states"
    if isinstance(error, DisjointError):
        return "Some states are disjoint"
    if isinstance(error, NoSuchSymbolError):
        return f"A transition '{error.symbol}' is not represented in the alphabet"
    if isinstance(error, NoInitialStateError):
        return "Initial state is not defined"
    if isinstance(error, NondeterministicError):
        return "FSA is nondeterministic"
    raise TypeError(f"Unknown error kind: {type(error).__name__}")


def format_diagnostic(error: FSAError) -> str:
    return f"Error:\nE{error_code(error)}: {describe_error(error)}"


def convert_description(text: str) -> str:
    """
    Convert a textual automaton description into the output report.

    Returns:
        The derived expression followed by a newline, or the diagnostic of
        the first failure
    """
    try:
        automaton = parse_description(text)
        return derive_regular_expression(automaton) + "\n"
    except FSAError as e:
        logger.info("Conversion failed: %s", e)
        return format_diagnostic(e)
