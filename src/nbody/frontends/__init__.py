from .frontend import Frontend

FRONTENDS = ('headless', 'matplotlib')
