from .headless_frontend import Frontend
