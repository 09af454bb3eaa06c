from .base import ReviewPlatform
from .space import SpaceClient

__all__ = ["ReviewPlatform", "SpaceClient"]
