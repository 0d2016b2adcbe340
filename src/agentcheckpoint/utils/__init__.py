"""
Utility helpers.
"""

from agentcheckpoint.utils.logging import get_logger, set_log_level

__all__ = ["get_logger", "set_log_level"]
