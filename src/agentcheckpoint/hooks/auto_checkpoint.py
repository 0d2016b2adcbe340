"""Auto-checkpoint hook."""

from typing import TYPE_CHECKING

from .base import LifecycleHook

if TYPE_CHECKING:
    from agentcheckpoint.agent import CheckpointableAgent
    from agentcheckpoint.service import AgentCheckpointService

HOOK_PACKAGE = "agent-checkpoint"


class AutoCheckpointHook(LifecycleHook):
    """Save a checkpoint named after each input the agent completes."""

    name = "auto_checkpoint"
    description = "Automatically saves agent checkpoints after input is handled"

    def __init__(self, service: "AgentCheckpointService") -> None:
        self.service = service

    async def after_agent_input_complete(self, agent: "CheckpointableAgent", message: str) -> None:
        await self.service.save_agent_checkpoint(message, agent)


AUTO_CHECKPOINT_HOOK_NAME = f"{HOOK_PACKAGE}/{AutoCheckpointHook.name}"
