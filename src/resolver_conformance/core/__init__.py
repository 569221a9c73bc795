from .resolver_loader import load_resolver

__all__ = [
    "load_resolver",
]
