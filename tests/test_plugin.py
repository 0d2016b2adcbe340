"""Tests for plugin install/start wiring."""

import pytest

from agentcheckpoint import (
    AUTO_CHECKPOINT_HOOK_NAME,
    CheckpointConfig,
    CheckpointPlugin,
    LifecycleHookRegistry,
    ProviderNotFoundError,
    __version__,
)

from conftest import FakeAgent, MemoryCheckpointProvider


@pytest.fixture
def factories():
    return {"memory": MemoryCheckpointProvider}


class TestCheckpointPlugin:

    def test_metadata(self):
        plugin = CheckpointPlugin()
        assert plugin.name == "agent-checkpoint"
        assert plugin.version == __version__

    def test_install_registers_hook(self):
        registry = LifecycleHookRegistry()
        service = CheckpointPlugin().install(registry)

        assert AUTO_CHECKPOINT_HOOK_NAME in registry.get_registered_hook_names()
        assert service.hook_manager is registry

    def test_start_before_install(self):
        with pytest.raises(RuntimeError):
            CheckpointPlugin().start(CheckpointConfig(default_provider="memory"))

    def test_start_builds_and_activates_providers(self, factories):
        plugin = CheckpointPlugin()
        plugin.install(LifecycleHookRegistry())
        config = CheckpointConfig(
            default_provider="scratch",
            providers={
                "scratch": {"type": "memory", "label": "tmp"},
                "memory": {},
                "postgres": {"type": "postgres"},
            },
        )

        service = plugin.start(config, factories)

        assert set(service.get_available_providers()) == {"scratch", "memory"}
        assert service.get_active_provider_name() == "scratch"
        assert service.get_active_provider().options == {"type": "memory", "label": "tmp"}

    def test_start_with_unknown_default(self, factories):
        plugin = CheckpointPlugin()
        plugin.install(LifecycleHookRegistry())

        with pytest.raises(ProviderNotFoundError):
            plugin.start(CheckpointConfig(default_provider="postgres"), factories)

    def test_unknown_default_leaves_service_untouched(self, factories):
        """A bad default provider fails before any provider or flag changes."""
        plugin = CheckpointPlugin()
        service = plugin.install(LifecycleHookRegistry())
        config = CheckpointConfig(
            default_provider="postgres",
            providers={"memory": {}},
            auto_checkpoint=False,
        )

        with pytest.raises(ProviderNotFoundError):
            plugin.start(config, factories)

        assert service.get_available_providers() == []
        assert service.get_active_provider_name() is None
        assert service.auto_checkpoint is True

    def test_provider_without_options(self, factories):
        plugin = CheckpointPlugin()
        plugin.install(LifecycleHookRegistry())

        service = plugin.start(CheckpointConfig(default_provider="memory", providers={"memory": None}), factories)

        assert service.get_active_provider().options == {}

    def test_start_with_pre_registered_provider(self):
        plugin = CheckpointPlugin()
        service = plugin.install(LifecycleHookRegistry())
        service.register_provider("external", MemoryCheckpointProvider())

        plugin.start(CheckpointConfig(default_provider="external"))

        assert service.get_active_provider_name() == "external"

    @pytest.mark.asyncio
    async def test_end_to_end(self, factories):
        registry = LifecycleHookRegistry()
        plugin = CheckpointPlugin()
        plugin.install(registry)
        service = plugin.start(CheckpointConfig(default_provider="memory", providers={"memory": {}}), factories)
        agent = FakeAgent()

        await service.attach(agent)
        await registry.after_agent_input_complete(agent, "hello")

        items = await service.list_checkpoints()
        assert [i.name for i in items] == ["hello"]

    @pytest.mark.asyncio
    async def test_auto_checkpoint_disabled_by_config(self, factories):
        registry = LifecycleHookRegistry()
        plugin = CheckpointPlugin()
        plugin.install(registry)
        service = plugin.start(
            CheckpointConfig(default_provider="memory", providers={"memory": {}}, auto_checkpoint=False),
            factories,
        )
        agent = FakeAgent()

        await service.attach(agent)

        assert not registry.is_hook_enabled(AUTO_CHECKPOINT_HOOK_NAME, agent)
