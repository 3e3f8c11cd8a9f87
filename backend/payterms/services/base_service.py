"""
Base service class.
Services contain business logic and coordinate repositories and the engine.
"""

from abc import ABC


class BaseService(ABC):
    """Base service class for all services."""
    pass
