"""
agentcheckpoint - Named, restorable snapshots of agent state.
"""

__version__ = "0.1.0"

from agentcheckpoint.agent import ChatAgent, CheckpointableAgent, HookManager
from agentcheckpoint.config import CheckpointConfig, load_config
from agentcheckpoint.exceptions import (
    CheckpointError,
    CheckpointNotFoundError,
    HookNotFoundError,
    NoActiveProviderError,
    NotFoundError,
    ProviderNotFoundError,
)
from agentcheckpoint.hooks import (
    AUTO_CHECKPOINT_HOOK_NAME,
    AutoCheckpointHook,
    HookRegistration,
    LifecycleHook,
    LifecycleHookRegistry,
)
from agentcheckpoint.models import (
    AgentCheckpointData,
    AgentCheckpointListItem,
    CheckpointState,
    NamedAgentCheckpoint,
    StoredAgentCheckpoint,
)
from agentcheckpoint.plugin import CheckpointPlugin
from agentcheckpoint.provider import CheckpointProvider
from agentcheckpoint.registry import KeyedRegistryWithSingleSelection
from agentcheckpoint.service import AgentCheckpointService

__all__ = [
    # Core
    "AgentCheckpointService",
    "KeyedRegistryWithSingleSelection",
    "CheckpointProvider",
    # Models
    "CheckpointState",
    "AgentCheckpointData",
    "NamedAgentCheckpoint",
    "StoredAgentCheckpoint",
    "AgentCheckpointListItem",
    # Capabilities
    "CheckpointableAgent",
    "HookManager",
    "ChatAgent",
    # Errors
    "CheckpointError",
    "NoActiveProviderError",
    "NotFoundError",
    "ProviderNotFoundError",
    "CheckpointNotFoundError",
    "HookNotFoundError",
    # Hooks
    "LifecycleHook",
    "LifecycleHookRegistry",
    "HookRegistration",
    "AutoCheckpointHook",
    "AUTO_CHECKPOINT_HOOK_NAME",
    # Config and plugin
    "CheckpointConfig",
    "load_config",
    "CheckpointPlugin",
]
