"""Lifecycle hook registry with per-agent enablement."""

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from agentcheckpoint.exceptions import HookNotFoundError
from agentcheckpoint.utils.logging import get_logger

from .base import LifecycleHook

if TYPE_CHECKING:
    from agentcheckpoint.agent import CheckpointableAgent

logger = get_logger(__name__)


@dataclass
class HookRegistration:
    """Information about a registered hook.

    Attributes:
        hook: The hook instance
        package: Name of the package that registered it
        name: Fully qualified key, ``"<package>/<hook name>"``
    """

    hook: LifecycleHook
    package: str
    name: str


class LifecycleHookRegistry:
    """Thread-safe registry of lifecycle hooks.

    Hooks are registered once and enabled or disabled per agent. This
    class is the hook-management capability the checkpoint service uses
    to turn auto-checkpointing on for the agents it attaches to.

    Example:
        registry = LifecycleHookRegistry()
        registry.register("my-package", EchoHook())
        registry.enable_hooks(["my-package/echo"], agent)

        # Called by the host after each input
        await registry.after_agent_input_complete(agent, "hello")
    """

    def __init__(self) -> None:
        """Initialize the hook registry."""
        self._hooks: dict[str, HookRegistration] = {}
        self._enabled: dict[str, set[str]] = {}
        self._lock = threading.RLock()
        self.failures = 0

    def register(self, package: str, hook: LifecycleHook) -> str:
        """Register a hook under a package name.

        Args:
            package: Name of the registering package
            hook: The hook instance

        Returns:
            The fully qualified hook name
        """
        name = f"{package}/{hook.name}"
        with self._lock:
            if name in self._hooks:
                logger.warning(f"Overwriting registered hook: {name}")
            self._hooks[name] = HookRegistration(hook=hook, package=package, name=name)
        logger.debug(f"Registered hook: {name}")
        return name

    def register_hooks(self, package: str, hooks: Iterable[LifecycleHook]) -> list[str]:
        """Register several hooks under one package name."""
        return [self.register(package, hook) for hook in hooks]

    def get_registered_hook_names(self) -> list[str]:
        """Get the fully qualified names of all registered hooks."""
        with self._lock:
            return list(self._hooks.keys())

    def enable_hooks(self, names: Iterable[str], agent: "CheckpointableAgent") -> None:
        """Enable hooks for an agent.

        Raises:
            HookNotFoundError: If any name is not registered; nothing is enabled then
        """
        names = list(names)
        with self._lock:
            for name in names:
                if name not in self._hooks:
                    raise HookNotFoundError(name)
            self._enabled.setdefault(agent.agent_id, set()).update(names)
        logger.debug(f"Enabled hooks {names} for agent {agent.agent_id}")

    def disable_hooks(self, names: Iterable[str], agent: "CheckpointableAgent") -> None:
        """Disable hooks for an agent.

        Raises:
            HookNotFoundError: If any name is not registered; nothing is disabled then
        """
        names = list(names)
        with self._lock:
            for name in names:
                if name not in self._hooks:
                    raise HookNotFoundError(name)
            self._enabled.get(agent.agent_id, set()).difference_update(names)
        logger.debug(f"Disabled hooks {names} for agent {agent.agent_id}")

    def is_hook_enabled(self, name: str, agent: "CheckpointableAgent") -> bool:
        """Check whether a hook is enabled for an agent."""
        with self._lock:
            return name in self._enabled.get(agent.agent_id, set())

    def get_enabled_hooks(self, agent: "CheckpointableAgent") -> list[HookRegistration]:
        """Get the hooks enabled for an agent, in registration order."""
        with self._lock:
            enabled = self._enabled.get(agent.agent_id, set())
            return [r for name, r in self._hooks.items() if name in enabled]

    async def after_agent_input_complete(self, agent: "CheckpointableAgent", message: str) -> None:
        """Run every enabled hook for an agent after it handled an input.

        Hooks run in registration order. The first failure propagates
        and the remaining hooks do not run.
        """
        for registration in self.get_enabled_hooks(agent):
            await registration.hook.after_agent_input_complete(agent, message)

    async def after_agent_input_complete_safe(
        self,
        agent: "CheckpointableAgent",
        message: str,
    ) -> list[tuple[str, Exception]]:
        """Run enabled hooks, logging failures instead of raising.

        Returns:
            ``(hook name, error)`` pairs for every hook that failed
        """
        errors: list[tuple[str, Exception]] = []
        for registration in self.get_enabled_hooks(agent):
            try:
                await registration.hook.after_agent_input_complete(agent, message)
            except Exception as e:
                self.failures += 1
                logger.error(f"Hook {registration.name} failed for agent {agent.agent_id}: {e}")
                errors.append((registration.name, e))
        return errors
