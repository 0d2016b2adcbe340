"""
Checkpoint data structures.
"""

import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class CheckpointState(BaseModel):
    """Agent runtime state captured by a checkpoint.

    The contents belong to the host agent; this package passes them
    through without interpreting them. Dict and list payloads stay
    mutable containers, so records are handed out as deep copies.
    """
    model_config = ConfigDict(frozen=True)

    tools_enabled: frozenset[str] = Field(default_factory=frozenset)
    hooks_enabled: frozenset[str] = Field(default_factory=frozenset)
    agent_state: dict[str, Any] = Field(default_factory=dict)
    messages: list[dict[str, Any]] = Field(default_factory=list)
    last_response_id: str | None = None


class AgentCheckpointData(BaseModel):
    """Snapshot returned by an agent's ``generate_checkpoint``."""
    model_config = ConfigDict(frozen=True)

    agent_id: str
    created_at: int = Field(default_factory=now_ms)
    state: CheckpointState = Field(default_factory=CheckpointState)


class NamedAgentCheckpoint(AgentCheckpointData):
    """A snapshot with a human-readable name, ready to be stored."""
    name: str


class AgentCheckpointListItem(BaseModel):
    """A stored checkpoint without its state payload."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    agent_id: str
    created_at: int


class StoredAgentCheckpoint(NamedAgentCheckpoint):
    """A checkpoint as persisted by a provider, with its provider-issued id."""
    id: str

    @classmethod
    def from_named(cls, checkpoint: NamedAgentCheckpoint, checkpoint_id: str) -> "StoredAgentCheckpoint":
        """Attach a storage id to a named checkpoint."""
        return cls(id=checkpoint_id, **checkpoint.model_dump())

    def to_list_item(self) -> AgentCheckpointListItem:
        """Drop the state payload for listing."""
        return AgentCheckpointListItem(
            id=self.id,
            name=self.name,
            agent_id=self.agent_id,
            created_at=self.created_at,
        )
