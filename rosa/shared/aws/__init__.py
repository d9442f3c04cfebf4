"""AWS client wrapper, ARN helpers and manual-mode command builder."""

from .client import AWSClient, get_region
from .modes import MODES, Mode, get_mode

__all__ = [
    "AWSClient",
    "MODES",
    "Mode",
    "get_mode",
    "get_region",
]
