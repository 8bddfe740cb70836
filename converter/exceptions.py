class FSAError(ValueError):
    """Base class for every failure reported while converting an automaton."""


class MalformedInputError(FSAError):
    """The textual automaton description does not follow the input grammar."""


class NoSuchStateError(FSAError):

    def __init__(self, state: str):
        super().__init__(f"State '{state}' is not registered")
        self.state = state


class NoSuchSymbolError(FSAError):

    def __init__(self, symbol: str):
        super().__init__(f"Symbol '{symbol}' is not in the alphabet")
        self.symbol = symbol


class NoInitialStateError(FSAError):

    def __init__(self):
        super().__init__("Initial state is not set")


class DisjointError(FSAError):

    def __init__(self):
        super().__init__("Some states are not reachable from the initial state")


class NondeterministicError(FSAError):

    def __init__(self, state: str = None):
        message = "Automaton is nondeterministic"
        if state is not None:
            message = f"{message} at state '{state}'"
        super().__init__(message)
        self.state = state
