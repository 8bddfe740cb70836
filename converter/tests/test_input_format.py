from django.test import TestCase
from converter.automaton import EPSILON
from converter.diagnostics import convert_description, format_diagnostic, error_code
from converter.exceptions import (
    MalformedInputError,
    NoSuchStateError,
    NoSuchSymbolError,
    NoInitialStateError,
    DisjointError,
    NondeterministicError
)
from converter.input_format import (
    parse_description,
    format_description,
    automaton_from_dict,
    validate_fsa_structure
)

VALID_DESCRIPTION = (
    "states=[on,off]\n"
    "alpha=[turn_on,turn_off]\n"
    "initial=[off]\n"
    "accepting=[]\n"
    "trans=[off>turn_on>on,on>turn_off>off]\n"
)


def description(states="A,B", alpha="a", initial="A", accepting="B", trans="A>a>B"):
    return (f"states=[{states}]\nalpha=[{alpha}]\ninitial=[{initial}]\n"
            f"accepting=[{accepting}]\ntrans=[{trans}]\n")


class TestParseDescription(TestCase):
    """Test cases for the five-line input format"""

    def test_parse_valid_description(self):
        automaton = parse_description(VALID_DESCRIPTION)
        self.assertEqual(automaton.states, ['on', 'off'])
        self.assertEqual(automaton.alphabet, ['turn_on', 'turn_off'])
        self.assertEqual(automaton.initial_state, 'off')
        self.assertEqual(automaton.accepting_states, [])
        self.assertEqual(automaton.next_state('off', 'turn_on'), 'on')
        self.assertEqual(automaton.next_state('on', 'turn_off'), 'off')

    def test_empty_transitions(self):
        automaton = parse_description(description(states="A", accepting="A", trans=""))
        self.assertEqual(automaton.graph.edges_from(automaton.vertex('A')), [])

    def test_empty_initial_leaves_state_unset(self):
        automaton = parse_description(description(initial=""))
        self.assertIsNone(automaton.initial_state)

    def test_windows_line_endings(self):
        automaton = parse_description(description().replace("\n", "\r\n"))
        self.assertEqual(automaton.states, ['A', 'B'])

    def test_malformed_lines(self):
        malformed = [
            "",
            "states=[A,B]\n",
            description(states=""),
            description(states="A,,B"),
            description(alpha=""),
            description(initial="A,B"),
            description(accepting="A,"),
            description(trans="A>a"),
            description(states="A,\u00e9"),
            description(trans="A>a>\u00e9"),
            description().replace("alpha", "alphabet"),
            description().replace("states=[A,B]", "states=[A,B] "),
        ]
        for text in malformed:
            with self.assertRaises(MalformedInputError, msg=repr(text)):
                parse_description(text)

    def test_unknown_states(self):
        with self.assertRaises(NoSuchStateError) as context:
            parse_description(description(initial="C"))
        self.assertEqual(context.exception.state, 'C')

        with self.assertRaises(NoSuchStateError) as context:
            parse_description(description(accepting="B,D"))
        self.assertEqual(context.exception.state, 'D')

        with self.assertRaises(NoSuchStateError) as context:
            parse_description(description(trans="A>a>E"))
        self.assertEqual(context.exception.state, 'E')

    def test_unknown_symbol(self):
        with self.assertRaises(NoSuchSymbolError) as context:
            parse_description(description(trans="A>b>B"))
        self.assertEqual(context.exception.symbol, 'b')

    def test_epsilon_needs_no_alphabet_entry(self):
        automaton = parse_description(description(trans=f"A>{EPSILON}>B"))
        edge = automaton.graph.find_edge(automaton.vertex('A'), automaton.vertex('B'))
        self.assertEqual(edge.labels, [EPSILON])

    def test_empty_transition_entries_are_skipped(self):
        """Empty entries and trailing commas on the transitions line"""
        for trans in ["A>a>B,", ",A>a>B", "A>a>B,,", ","]:
            automaton = parse_description(description(trans=trans))
            edges = automaton.graph.edges_from(automaton.vertex('A'))
            self.assertEqual(len(edges), (1 if '>' in trans else 0), trans)

        self.assertEqual(convert_description(description(trans="A>a>B,")),
                         convert_description(description(trans="A>a>B")))

    def test_earlier_line_errors_win(self):
        """An unknown accepting state is reported before a malformed transitions line"""
        with self.assertRaises(NoSuchStateError):
            parse_description(description(accepting="Z", trans="garbage"))

    def test_format_description(self):
        automaton = parse_description(description(trans="A>a>B,B>a>B"))
        self.assertEqual(format_description(automaton), description(trans="A>a>B,B>a>B"))


class TestFsaDictionaries(TestCase):
    """Test cases for the JSON dictionary format"""

    def setUp(self):
        self.fsa = {
            'states': ['S0', 'S1'],
            'alphabet': ['a', 'b'],
            'transitions': {
                'S0': {'a': ['S1'], 'b': ['S0']},
                'S1': {'a': ['S0'], 'b': ['S1']}
            },
            'startingState': 'S0',
            'acceptingStates': ['S1']
        }

    def test_round_trip(self):
        automaton = automaton_from_dict(self.fsa)
        self.assertEqual(automaton.to_dict(), self.fsa)

    def test_empty_symbol_is_epsilon(self):
        self.fsa['transitions']['S0'][''] = ['S1']
        automaton = automaton_from_dict(self.fsa)
        edge = automaton.graph.find_edge(automaton.vertex('S0'), automaton.vertex('S1'))
        self.assertEqual(edge.labels, ['a', EPSILON])

    def test_missing_starting_state(self):
        self.fsa['startingState'] = None
        self.assertIsNone(automaton_from_dict(self.fsa).initial_state)

    def test_invalid_structure(self):
        self.assertFalse(validate_fsa_structure([])['valid'])
        self.assertEqual(validate_fsa_structure({'states': []})['error'], 'Missing required key: alphabet')

        self.fsa['transitions']['S0']['a'] = 'S1'
        self.assertFalse(validate_fsa_structure(self.fsa)['valid'])
        with self.assertRaises(MalformedInputError):
            automaton_from_dict(self.fsa)

    def test_unknown_references(self):
        self.fsa['acceptingStates'] = ['S7']
        with self.assertRaises(NoSuchStateError):
            automaton_from_dict(self.fsa)


class TestDiagnostics(TestCase):
    """Test cases for the numbered error report"""

    def test_error_codes(self):
        self.assertEqual(error_code(MalformedInputError()), 0)
        self.assertEqual(error_code(NoSuchStateError('A')), 1)
        self.assertEqual(error_code(DisjointError()), 2)
        self.assertEqual(error_code(NoSuchSymbolError('a')), 3)
        self.assertEqual(error_code(NoInitialStateError()), 4)
        self.assertEqual(error_code(NondeterministicError()), 5)

    def test_format_diagnostic(self):
        self.assertEqual(format_diagnostic(NoSuchStateError('q9')),
                         "Error:\nE1: A state 'q9' is not in the set of states")
        self.assertEqual(format_diagnostic(NoSuchSymbolError('z')),
                         "Error:\nE3: A transition 'z' is not represented in the alphabet")

    def test_convert_success(self):
        self.assertEqual(convert_description(VALID_DESCRIPTION), "{}\n")
        self.assertEqual(
            convert_description(description()),
            "((eps)(eps)*(a)|(a))(({})(eps)*(a)|(eps))*(({})(eps)*(a)|(eps))|((eps)(eps)*(a)|(a))\n"
        )

    def test_convert_failures(self):
        cases = [
            ("nonsense", "Error:\nE0: Input file is malformed"),
            (description(accepting="X"), "Error:\nE1: A state 'X' is not in the set of states"),
            (description(trans=""), "Error:\nE2: Some states are disjoint"),
            (description(trans="A>b>B"), "Error:\nE3: A transition 'b' is not represented in the alphabet"),
            (description(initial=""), "Error:\nE4: Initial state is not defined"),
            (description(states="A,B,C", trans="A>a>B,A>a>C"), "Error:\nE5: FSA is nondeterministic"),
            (description(trans="A>a>B,A>a>A"), "Error:\nE5: FSA is nondeterministic"),
            (description(trans=f"A>{EPSILON}>B"), "Error:\nE5: FSA is nondeterministic"),
        ]
        for text, expected in cases:
            self.assertEqual(convert_description(text), expected, text)
