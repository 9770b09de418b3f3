from .precision import truncate_to_precision

__all__ = ['truncate_to_precision']
