"""quote - fast, real-time stock quotes in your terminal"""

__version__ = "0.1.0"
