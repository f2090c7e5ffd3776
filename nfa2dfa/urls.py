from django.urls import path
from . import views

urlpatterns = [
    # Simulation of deterministic and non-deterministic automata
    path('api/simulate-fsa/', views.simulate_fsa, name='simulate_fsa'),

    # Subset construction
    path('api/nfa-to-dfa/', views.convert_nfa_to_dfa, name='nfa_to_dfa'),

    # Property checking and comparison
    path('api/check-fsa-properties/', views.check_fsa_properties, name='check_fsa_properties'),
    path('api/check-equivalence/', views.check_equivalence, name='check_equivalence'),

    # Human-readable transition table
    path('api/describe-fsa/', views.describe_fsa, name='describe_fsa'),
]
