from .backend import Backend

BACKENDS = ('cpu', 'vectorized')


def create_backend(name: str, config: dict) -> Backend:
    if name == 'cpu':
        from nbody.backends import cpu
        return cpu.Backend(config=config)
    elif name == 'vectorized':
        from nbody.backends import vectorized
        return vectorized.Backend(config=config)
    raise ValueError(f'Unknown backend: {name}')
