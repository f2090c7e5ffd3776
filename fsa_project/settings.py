import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-nfa2dfa-development-key')

DEBUG = os.environ.get('DJANGO_DEBUG', '1') == '1'

ALLOWED_HOSTS = ['localhost', '127.0.0.1', 'testserver']

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'nfa2dfa',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
]

ROOT_URLCONF = 'fsa_project.urls'

WSGI_APPLICATION = 'fsa_project.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True

# Subset construction and simulation limits
NFA2DFA_SUBSET_STRATEGY = os.environ.get('NFA2DFA_SUBSET_STRATEGY', 'reachable')
NFA2DFA_POWERSET_MAX_STATES = 12
NFA2DFA_MAX_DFA_STATES = 10000
NFA2DFA_SUBSET_KEY_BITS = None
NFA2DFA_MAX_SIMULATION_STEPS = 1000000

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'nfa2dfa': {
            'handlers': ['console'],
            'level': os.environ.get('NFA2DFA_LOG_LEVEL', 'WARNING'),
            'propagate': False,
        },
    },
}
