"""CampaignBot - Minimal Campaign Coordinator

This package provides a coordinator that owns an optional assistant and drives a
short multi-stage workflow through pluggable capabilities (helpers, scanners,
weapons and encoders). Capabilities are structural protocols, so any object with
the right methods can be plugged in without changing core logic.
"""

from campaignbot.assistant import Assistant
from campaignbot.coordinator import Coordinator

__all__ = [
    "Assistant",
    "Coordinator",
    "__version__",
]

__version__ = "0.1.0"
