from django.urls import path
from . import views

urlpatterns = [
    # Automaton to regular expression
    path('api/fsa-to-regex/', views.fsa_to_regex, name='fsa_to_regex'),

    # Conversion preconditions
    path('api/check-fsa-properties/', views.check_fsa_properties, name='check_fsa_properties'),
]
