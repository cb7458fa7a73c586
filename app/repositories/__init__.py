from .base import Repository

__all__ = ["Repository"]
