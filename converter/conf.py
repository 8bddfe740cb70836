from django.conf import settings

DEFAULTS = {
    'INPUT_PATH': 'input.txt',
    'OUTPUT_PATH': 'output.txt',
    # Largest automaton the HTTP endpoint converts; output grows exponentially
    'MAX_STATES': 7,
}


def get_setting(name: str):
    """Look up a converter setting in settings.FSA_REGEX, falling back to DEFAULTS."""
    overrides = getattr(settings, 'FSA_REGEX', {})
    return overrides.get(name, DEFAULTS[name])
