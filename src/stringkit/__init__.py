"""STRINGKIT

Small, pure string helpers (emptiness checks, email shape validation, filename
extraction, joining, truncation) gathered on a single ``StringUtils`` namespace
together with case conversion, padding, pluralization and templating primitives
from well-known third-party libraries.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
