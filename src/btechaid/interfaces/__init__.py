"""Protocol-based interfaces for the roster aid.

These protocols describe the collaborators the domain expects, so callers can
substitute their own implementations in tests or outer layers.
"""

from btechaid.interfaces.logger import ILogger
from btechaid.interfaces.storage import IMechStorage

__all__ = [
    "ILogger",
    "IMechStorage",
]
