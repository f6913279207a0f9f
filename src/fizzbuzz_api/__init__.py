"""FizzBuzz API.

Generalized FizzBuzz over HTTP — two divisor/replacement rules applied to
1..limit — with a persistent counter of the most requested parameter set.
"""

__version__ = "0.1.0"

from .server import create_app

__all__ = ["create_app"]
