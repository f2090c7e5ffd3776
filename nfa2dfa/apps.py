from django.apps import AppConfig


class Nfa2DfaConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'nfa2dfa'
    verbose_name = 'NFA to DFA conversion'
