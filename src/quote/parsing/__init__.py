"""Chart response parsing"""

from .extractor import extract

__all__ = ["extract"]
