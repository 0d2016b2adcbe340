"""Checkpoint storage provider interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agentcheckpoint.models import (
    AgentCheckpointListItem,
    NamedAgentCheckpoint,
    StoredAgentCheckpoint,
)


class CheckpointProvider(ABC):
    """Abstract base class for checkpoint storage providers.

    Providers own id generation and persistence. Stored checkpoints are
    never updated or deleted through this interface.
    """

    @abstractmethod
    async def store_checkpoint(self, checkpoint: NamedAgentCheckpoint) -> str:
        """Store a checkpoint.

        Args:
            checkpoint: Named checkpoint to persist

        Returns:
            A globally unique, opaque checkpoint id
        """
        pass

    @abstractmethod
    async def retrieve_checkpoint(self, checkpoint_id: str) -> Optional[StoredAgentCheckpoint]:
        """Retrieve a checkpoint by id.

        Args:
            checkpoint_id: Id returned by ``store_checkpoint``

        Returns:
            The stored checkpoint, or None if the id is unknown
        """
        pass

    @abstractmethod
    async def list_checkpoints(self) -> list[AgentCheckpointListItem]:
        """List every stored checkpoint without its state payload."""
        pass
