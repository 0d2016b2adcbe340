"""
Capabilities required from the host agent.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable

from agentcheckpoint.models import AgentCheckpointData, StoredAgentCheckpoint


@runtime_checkable
class CheckpointableAgent(Protocol):
    """An agent whose state can be captured and replaced."""

    agent_id: str

    def generate_checkpoint(self) -> AgentCheckpointData:
        """Return a self-contained snapshot of the agent's current state."""
        ...

    def restore_checkpoint(self, checkpoint: StoredAgentCheckpoint) -> None:
        """Replace tools, hooks, custom state, messages and response pointer."""
        ...


@runtime_checkable
class HookManager(Protocol):
    """Host capability for enabling lifecycle hooks per agent."""

    def enable_hooks(self, names: Iterable[str], agent: CheckpointableAgent) -> None:
        ...

    def disable_hooks(self, names: Iterable[str], agent: CheckpointableAgent) -> None:
        ...

    def is_hook_enabled(self, name: str, agent: CheckpointableAgent) -> bool:
        ...


class ChatAgent(CheckpointableAgent, Protocol):
    """An agent that can also talk to the user, as chat commands need."""

    def info_line(self, *parts: Any) -> None:
        ...

    def error_line(self, *parts: Any) -> None:
        ...

    async def ask_human(self, request: dict[str, Any]) -> Any:
        ...
