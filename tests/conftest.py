"""
Test configuration and fixtures.
"""

import copy
import uuid
from typing import Any, Optional

import pytest

from agentcheckpoint import (
    AgentCheckpointData,
    AgentCheckpointListItem,
    AgentCheckpointService,
    CheckpointProvider,
    CheckpointState,
    LifecycleHookRegistry,
    NamedAgentCheckpoint,
    StoredAgentCheckpoint,
)


class MemoryCheckpointProvider(CheckpointProvider):
    """In-memory checkpoint storage for testing."""

    def __init__(self, options: Optional[dict[str, Any]] = None):
        self.options = options or {}
        self._checkpoints: dict[str, StoredAgentCheckpoint] = {}

    async def store_checkpoint(self, checkpoint: NamedAgentCheckpoint) -> str:
        checkpoint_id = uuid.uuid4().hex
        self._checkpoints[checkpoint_id] = StoredAgentCheckpoint.from_named(checkpoint, checkpoint_id)
        return checkpoint_id

    async def retrieve_checkpoint(self, checkpoint_id: str) -> Optional[StoredAgentCheckpoint]:
        return self._checkpoints.get(checkpoint_id)

    async def list_checkpoints(self) -> list[AgentCheckpointListItem]:
        return [cp.to_list_item() for cp in self._checkpoints.values()]


class FakeAgent:
    """Agent exposing just the capabilities the checkpoint package needs."""

    def __init__(self, agent_id: str = "agent-1"):
        self.agent_id = agent_id
        self.tools_enabled: set[str] = set()
        self.hooks_enabled: set[str] = set()
        self.agent_state: dict[str, Any] = {}
        self.messages: list[dict[str, Any]] = []
        self.last_response_id: Optional[str] = None
        self.info: list[str] = []
        self.errors: list[str] = []
        self.answers: list[Any] = []
        self.questions: list[dict[str, Any]] = []

    def generate_checkpoint(self) -> AgentCheckpointData:
        return AgentCheckpointData(
            agent_id=self.agent_id,
            state=CheckpointState(
                tools_enabled=set(self.tools_enabled),
                hooks_enabled=set(self.hooks_enabled),
                agent_state=copy.deepcopy(self.agent_state),
                messages=copy.deepcopy(self.messages),
                last_response_id=self.last_response_id,
            ),
        )

    def restore_checkpoint(self, checkpoint: StoredAgentCheckpoint) -> None:
        state = checkpoint.state
        self.tools_enabled = set(state.tools_enabled)
        self.hooks_enabled = set(state.hooks_enabled)
        self.agent_state = copy.deepcopy(state.agent_state)
        self.messages = copy.deepcopy(state.messages)
        self.last_response_id = state.last_response_id

    def info_line(self, *parts: Any) -> None:
        self.info.append(" ".join(str(p) for p in parts))

    def error_line(self, *parts: Any) -> None:
        self.errors.append(" ".join(str(p) for p in parts))

    async def ask_human(self, request: dict[str, Any]) -> Any:
        self.questions.append(request)
        return self.answers.pop(0) if self.answers else None


@pytest.fixture
def agent():
    """An agent with some state."""
    a = FakeAgent()
    a.tools_enabled = {"search", "calculator"}
    a.hooks_enabled = {"logging"}
    a.agent_state = {"plan": {"step": 2, "done": ["a", "b"]}}
    a.messages = [
        {"role": "user", "content": "Hello"},
        {"role": "assistant", "content": "Hi there!"},
    ]
    a.last_response_id = "resp_123"
    return a


@pytest.fixture
def provider():
    return MemoryCheckpointProvider()


@pytest.fixture
def service(provider):
    """A service with the memory provider active."""
    svc = AgentCheckpointService()
    svc.register_provider("memory", provider)
    svc.set_active_provider_name("memory")
    return svc


@pytest.fixture
def hook_registry():
    return LifecycleHookRegistry()
