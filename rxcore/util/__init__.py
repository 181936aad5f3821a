from .pipe import identity, pipe, pipe_from_iterable

__all__ = ["identity", "pipe", "pipe_from_iterable"]
