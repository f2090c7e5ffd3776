from django.urls import include, path

urlpatterns = [
    path('', include('nfa2dfa.urls')),
]
