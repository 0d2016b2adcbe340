"""Lifecycle hook base class."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agentcheckpoint.agent import CheckpointableAgent


class LifecycleHook(ABC):
    """Abstract base class for agent lifecycle hooks.

    Hooks are registered with a LifecycleHookRegistry under a package
    name and must be enabled per agent before they run.

    Attributes:
        name: Short hook name, unique within its package
        description: Human-readable summary

    Example:
        class EchoHook(LifecycleHook):
            name = "echo"

            async def after_agent_input_complete(self, agent, message):
                print(f"{agent.agent_id} handled: {message}")
    """

    name: str
    description: str = ""

    @abstractmethod
    async def after_agent_input_complete(self, agent: "CheckpointableAgent", message: str) -> None:
        """Called once the host agent has finished processing an input.

        Args:
            agent: The agent that processed the input
            message: The processed input text
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
