"""Domain layer for quote

Pure Python models with no infrastructure dependencies.
"""

from . import models

__all__ = ["models"]
