"""Swappable infrastructure providers.

Implementations must be imported here so ``__subclasses__()`` sees them.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
