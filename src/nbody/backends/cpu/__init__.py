from .cpu_backend import Backend
