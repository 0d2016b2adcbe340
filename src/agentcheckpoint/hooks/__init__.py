"""Lifecycle hooks for agent checkpointing.

Example:
    from agentcheckpoint.hooks import AutoCheckpointHook, LifecycleHookRegistry

    registry = LifecycleHookRegistry()
    name = registry.register("agent-checkpoint", AutoCheckpointHook(service))
    registry.enable_hooks([name], agent)

Built-in Hooks:
    - AutoCheckpointHook: Save a checkpoint after each completed input
"""

from .auto_checkpoint import AUTO_CHECKPOINT_HOOK_NAME, HOOK_PACKAGE, AutoCheckpointHook
from .base import LifecycleHook
from .registry import HookRegistration, LifecycleHookRegistry

__all__ = [
    "LifecycleHook",
    "HookRegistration",
    "LifecycleHookRegistry",
    "AutoCheckpointHook",
    "AUTO_CHECKPOINT_HOOK_NAME",
    "HOOK_PACKAGE",
]
