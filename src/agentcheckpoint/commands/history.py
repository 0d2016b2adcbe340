"""
/history - browse agent checkpoints grouped by agent.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from agentcheckpoint.utils.logging import get_logger

if TYPE_CHECKING:
    from agentcheckpoint.agent import ChatAgent
    from agentcheckpoint.models import AgentCheckpointListItem
    from agentcheckpoint.service import AgentCheckpointService

logger = get_logger(__name__)

description = "/history - Browse agent checkpoints"


def _format_time(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).strftime("%H:%M")


def _format_datetime(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def group_checkpoints_by_agent(
    checkpoints: list["AgentCheckpointListItem"],
) -> dict[str, list["AgentCheckpointListItem"]]:
    """Group checkpoints by agent id, newest first within each group."""
    grouped: dict[str, list["AgentCheckpointListItem"]] = {}
    for cp in checkpoints:
        grouped.setdefault(cp.agent_id, []).append(cp)

    for items in grouped.values():
        items.sort(key=lambda cp: cp.created_at, reverse=True)

    return grouped


def build_history_tree(checkpoints: list["AgentCheckpointListItem"]) -> dict[str, Any]:
    """Build the selection tree: one branch per agent, sorted by agent id."""
    grouped = group_checkpoints_by_agent(checkpoints)
    return {
        "name": "Agent Checkpoint History",
        "children": [
            {
                "name": f"🤖 Agent: {agent_id} ({len(grouped[agent_id])} checkpoints)",
                "has_children": True,
                "children": [
                    {
                        "name": f"📋 {cp.name} ({_format_time(cp.created_at)})",
                        "value": cp.id,
                    }
                    for cp in grouped[agent_id]
                ],
            }
            for agent_id in sorted(grouped)
        ],
    }


async def execute(
    remainder: str | None,
    agent: "ChatAgent",
    service: "AgentCheckpointService",
) -> None:
    """Run the /history command for an agent."""
    checkpoints = await service.list_checkpoints()

    if not checkpoints:
        agent.info_line("No checkpoint history found.")
        return

    selected_id = await agent.ask_human({
        "type": "askForSingleTreeSelection",
        "message": "Select checkpoint to view:",
        "tree": build_history_tree(checkpoints),
    })

    if not selected_id:
        agent.info_line("Checkpoint browsing cancelled.")
        return

    selected = next((cp for cp in checkpoints if cp.id == selected_id), None)
    if selected is None:
        agent.error_line(f"Checkpoint {selected_id} could not be retrieved.")
        return

    await display_checkpoint_details(selected, service, agent)


async def display_checkpoint_details(
    item: "AgentCheckpointListItem",
    service: "AgentCheckpointService",
    agent: "ChatAgent",
) -> None:
    """Show a checkpoint's state summary without restoring it."""
    agent.info_line(f"\n=== Checkpoint: {item.name} ===")
    agent.info_line(f"ID: {item.id}")
    agent.info_line(f"Agent ID: {item.agent_id}")
    agent.info_line(f"Created: {_format_datetime(item.created_at)}")

    try:
        full = await service.get_active_provider().retrieve_checkpoint(item.id)
    except Exception as e:
        logger.error(f"Error loading checkpoint {item.id}: {e}")
        agent.error_line(f"Error loading checkpoint {item.id}:", e)
        agent.info_line("\n📋 Checkpoint Information:")
        agent.info_line(f"- Name: {item.name}")
        agent.info_line(f"- Agent ID: {item.agent_id}")
        agent.info_line(f"- Created: {_format_datetime(item.created_at)}")
        agent.info_line("\n--- End of Checkpoint Details ---\n")
        return

    if full is not None:
        state = full.state
        agent.info_line("\n📋 Checkpoint State:")
        agent.info_line(f"- Tools Enabled: {', '.join(sorted(state.tools_enabled)) or 'None'}")
        agent.info_line(f"- Hooks Enabled: {', '.join(sorted(state.hooks_enabled)) or 'None'}")
        agent.info_line(f"- Agent State Keys: {', '.join(state.agent_state) or 'None'}")
        agent.info_line(f"- Messages: {len(state.messages)}")

    agent.info_line("\n--- End of Checkpoint Details ---\n")


def help() -> list[str]:
    return [
        "/history",
        "  - With no arguments: Browse agent checkpoints using interactive tree selection grouped by agent ID",
    ]
