from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

SUBSET_STRATEGY_REACHABLE = 'reachable'
SUBSET_STRATEGY_POWERSET = 'powerset'

DEFAULTS = {
    'SUBSET_STRATEGY': SUBSET_STRATEGY_REACHABLE,
    'POWERSET_MAX_STATES': 16,
    'MAX_DFA_STATES': 10000,
    'SUBSET_KEY_BITS': None,
    'MAX_SIMULATION_STEPS': 1000000,
}


def get_setting(name: str):
    """
    Look up an ``NFA2DFA_*`` setting, falling back to the built-in default.

    The settings module is loaded on first access. The engines are also
    usable without any Django project, in which case every setting has its
    default.

    Args:
        name: Setting name without the ``NFA2DFA_`` prefix

    Returns:
        The configured value or the default
    """
    if name not in DEFAULTS:
        raise KeyError(f"Unknown nfa2dfa setting: {name}")
    try:
        return getattr(settings, f'NFA2DFA_{name}', DEFAULTS[name])
    except ImproperlyConfigured:
        return DEFAULTS[name]


def resolve(name: str, value):
    """Return ``value`` unless it is None, in which case read the setting."""
    return get_setting(name) if value is None else value
