from .matplotlib_frontend import Frontend, body_label, load_image
