"""
Plugin wiring: install the service and hooks, then start from configuration.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from agentcheckpoint import __version__
from agentcheckpoint.config import CheckpointConfig
from agentcheckpoint.exceptions import ProviderNotFoundError
from agentcheckpoint.hooks import HOOK_PACKAGE, AutoCheckpointHook, LifecycleHookRegistry
from agentcheckpoint.provider import CheckpointProvider
from agentcheckpoint.service import AgentCheckpointService
from agentcheckpoint.utils.logging import get_logger

logger = get_logger(__name__)

ProviderFactory = Callable[[dict[str, Any]], CheckpointProvider]


class CheckpointPlugin:
    """
    Installs checkpointing into a host.

    ``install`` creates the service and registers the auto-checkpoint hook;
    ``start`` registers configured providers and activates the default one.
    """

    name = HOOK_PACKAGE
    version = __version__
    description = "Named, restorable snapshots of agent state"

    def __init__(self) -> None:
        self.service: Optional[AgentCheckpointService] = None

    def install(self, hook_registry: LifecycleHookRegistry) -> AgentCheckpointService:
        """Create the checkpoint service and register its hooks."""
        self.service = AgentCheckpointService(hook_manager=hook_registry)
        hook_registry.register(self.name, AutoCheckpointHook(self.service))
        return self.service

    def start(
        self,
        config: CheckpointConfig,
        provider_factories: dict[str, ProviderFactory] | None = None,
    ) -> AgentCheckpointService:
        """
        Register configured providers and activate the default one.

        Each entry of ``config.providers`` is built with the factory named
        by its ``type`` key (or the entry name when absent). Entries with
        no matching factory are skipped; their providers may be registered
        directly on the service instead.

        Raises:
            RuntimeError: If called before install
            ProviderNotFoundError: If the default provider is neither configured
                nor already registered; the service is left unchanged
        """
        if self.service is None:
            raise RuntimeError("CheckpointPlugin.start() called before install()")

        factories = provider_factories or {}
        built: dict[str, CheckpointProvider] = {}
        for provider_name, options in config.providers.items():
            options = options or {}
            provider_type = options.get("type", provider_name)
            factory = factories.get(provider_type)
            if factory is None:
                logger.debug(f"No factory for provider type {provider_type!r}, skipping {provider_name}")
                continue
            built[provider_name] = factory(options)

        # Nothing is registered or changed unless the default resolves
        default = config.default_provider
        if default not in built and default not in self.service.get_available_providers():
            raise ProviderNotFoundError(default)

        for provider_name, provider in built.items():
            self.service.register_provider(provider_name, provider)
        self.service.auto_checkpoint = config.auto_checkpoint
        self.service.set_active_provider_name(default)
        return self.service
