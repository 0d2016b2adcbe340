"""
Chat command handlers for checkpoints.

Each module exposes ``description``, ``execute(remainder, agent, service)``
and ``help()``; the host's command dispatcher routes to them.
"""

from agentcheckpoint.commands import checkpoint, history

__all__ = ["checkpoint", "history"]
