from .vectorized_backend import Backend
