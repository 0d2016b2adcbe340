"""
AgentCheckpointService - save and restore agent state through a storage provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from agentcheckpoint.exceptions import CheckpointNotFoundError
from agentcheckpoint.hooks.auto_checkpoint import AUTO_CHECKPOINT_HOOK_NAME
from agentcheckpoint.models import (
    AgentCheckpointListItem,
    NamedAgentCheckpoint,
    StoredAgentCheckpoint,
)
from agentcheckpoint.registry import KeyedRegistryWithSingleSelection
from agentcheckpoint.utils.logging import get_logger

if TYPE_CHECKING:
    from agentcheckpoint.agent import CheckpointableAgent, HookManager
    from agentcheckpoint.provider import CheckpointProvider

logger = get_logger(__name__)


class AgentCheckpointService:
    """
    Persists agent state to whichever storage provider is active.

    Providers are registered by name and exactly one is selected at a
    time. Every operation is a single attempt: provider errors reach the
    caller unchanged.
    """

    name = "AgentCheckpointService"
    description = "Persists agent state to a storage provider"

    def __init__(
        self,
        hook_manager: "HookManager | None" = None,
        auto_checkpoint: bool = True,
    ):
        self.hook_manager = hook_manager
        self.auto_checkpoint = auto_checkpoint
        self._providers: KeyedRegistryWithSingleSelection["CheckpointProvider"] = (
            KeyedRegistryWithSingleSelection()
        )

    def register_provider(self, name: str, provider: "CheckpointProvider") -> None:
        """Register a storage provider. Registering does not activate it."""
        self._providers.register(name, provider)

    def set_active_provider_name(self, name: str) -> None:
        """Select the provider used by save, restore and list."""
        self._providers.set_enabled_item(name)

    def get_active_provider(self) -> "CheckpointProvider":
        """Get the active provider (raises NoActiveProviderError if none)."""
        return self._providers.get_active_item()

    def get_active_provider_name(self) -> Optional[str]:
        """Get the active provider's name, or None."""
        return self._providers.get_active_item_name()

    def get_available_providers(self) -> list[str]:
        """Get the names of all registered providers."""
        return self._providers.get_all_item_names()

    async def attach(self, agent: "CheckpointableAgent") -> None:
        """Turn on auto-checkpointing for an agent joining the host."""
        if self.hook_manager is not None and self.auto_checkpoint:
            self.hook_manager.enable_hooks([AUTO_CHECKPOINT_HOOK_NAME], agent)

    def set_auto_checkpoint(self, agent: "CheckpointableAgent", enabled: bool) -> None:
        """Enable or disable auto-checkpointing for one agent.

        Raises:
            RuntimeError: If the service was built without a hook manager
        """
        if self.hook_manager is None:
            raise RuntimeError("No hook manager configured for auto-checkpointing")
        if enabled:
            self.hook_manager.enable_hooks([AUTO_CHECKPOINT_HOOK_NAME], agent)
        else:
            self.hook_manager.disable_hooks([AUTO_CHECKPOINT_HOOK_NAME], agent)

    async def save_agent_checkpoint(self, name: str, agent: "CheckpointableAgent") -> str:
        """
        Capture an agent's state and store it as a named checkpoint.

        Args:
            name: Human-readable checkpoint name
            agent: Agent to snapshot

        Returns:
            The id issued by the active provider

        Raises:
            NoActiveProviderError: If no provider is active
        """
        provider = self._providers.get_active_item()
        data = agent.generate_checkpoint()
        checkpoint = NamedAgentCheckpoint(**{**data.model_dump(), "name": name})

        checkpoint_id = await provider.store_checkpoint(checkpoint)
        logger.info(f"Saved checkpoint {checkpoint_id} ({name!r}) for agent {checkpoint.agent_id}")
        return checkpoint_id

    async def restore_agent_checkpoint(
        self,
        checkpoint_id: str,
        agent: "CheckpointableAgent",
    ) -> StoredAgentCheckpoint:
        """
        Replace an agent's state with a stored checkpoint.

        The agent receives a deep copy, so it may keep and mutate the
        restored containers. The agent is not touched when the checkpoint
        cannot be found. If the agent's own restore step fails, its state
        is indeterminate.

        Args:
            checkpoint_id: Id returned by save_agent_checkpoint
            agent: Agent whose state is replaced

        Returns:
            The restored checkpoint

        Raises:
            NoActiveProviderError: If no provider is active
            CheckpointNotFoundError: If the active provider has no such checkpoint
        """
        provider = self._providers.get_active_item()
        checkpoint = await provider.retrieve_checkpoint(checkpoint_id)
        if checkpoint is None:
            raise CheckpointNotFoundError(checkpoint_id)

        # The provider's record must survive whatever the agent does with it
        agent.restore_checkpoint(checkpoint.model_copy(deep=True))
        logger.info(f"Restored checkpoint {checkpoint_id} ({checkpoint.name!r}) into agent {agent.agent_id}")
        return checkpoint

    async def list_checkpoints(self) -> list[AgentCheckpointListItem]:
        """List checkpoints held by the active provider, in provider order."""
        return await self._providers.get_active_item().list_checkpoints()
