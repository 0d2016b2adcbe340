"""
/checkpoint [create|restore|list] - create or restore conversation checkpoints.

    /checkpoint create [label]   stores the agent's current state
    /checkpoint restore <id>     restores a stored checkpoint
    /checkpoint list             interactive selection of checkpoints
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from agentcheckpoint.exceptions import CheckpointNotFoundError
from agentcheckpoint.utils.logging import get_logger

if TYPE_CHECKING:
    from agentcheckpoint.agent import ChatAgent
    from agentcheckpoint.models import AgentCheckpointListItem
    from agentcheckpoint.service import AgentCheckpointService

logger = get_logger(__name__)

description = "/checkpoint [create|restore|list] - Create or restore conversation checkpoints to resume chat."

DEFAULT_LABEL = "New Checkpoint"


def _utc(timestamp_ms: int) -> datetime:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def build_selection_tree(checkpoints: list["AgentCheckpointListItem"]) -> dict[str, Any]:
    """Group checkpoints by UTC date, newest date and newest checkpoint first."""
    grouped: dict[str, list["AgentCheckpointListItem"]] = {}
    for cp in checkpoints:
        grouped.setdefault(_utc(cp.created_at).strftime("%Y-%m-%d"), []).append(cp)

    children = []
    for date in sorted(grouped, reverse=True):
        items = sorted(grouped[date], key=lambda cp: cp.created_at, reverse=True)
        children.append({
            "name": f"📅 {date} ({len(items)} checkpoints)",
            "value": date,
            "has_children": True,
            "children": [
                {
                    "name": f"⏰ {_utc(cp.created_at).strftime('%H:%M:%S')} - {cp.name}",
                    "value": cp.id,
                }
                for cp in items
            ],
        })

    return {"name": "Checkpoint Selection", "children": children}


async def execute(
    remainder: str | None,
    agent: "ChatAgent",
    service: "AgentCheckpointService",
) -> None:
    """Run the /checkpoint command for an agent."""
    action, *args = (remainder or "").split() or [""]

    if action == "create":
        label = " ".join(args) or DEFAULT_LABEL
        checkpoint_id = await service.save_agent_checkpoint(label, agent)
        agent.info_line(f"Checkpoint created: {checkpoint_id}: {label}")

    elif action == "restore":
        if not args:
            agent.error_line("Usage: /checkpoint restore <id> (see /checkpoint list for ids)")
            return
        try:
            await service.restore_agent_checkpoint(args[0], agent)
        except CheckpointNotFoundError as e:
            agent.error_line(str(e))
            return
        agent.info_line(f"Checkpoint {args[0]} loaded")

    else:
        await _select_and_restore(agent, service)


async def _select_and_restore(agent: "ChatAgent", service: "AgentCheckpointService") -> None:
    saved = await service.list_checkpoints()
    if not saved:
        agent.info_line("No checkpoints saved. Use /checkpoint create to make one.")
        return

    try:
        selected_id = await agent.ask_human({
            "type": "askForSingleTreeSelection",
            "message": "Select a checkpoint to restore:",
            "tree": build_selection_tree(saved),
        })

        if not selected_id:
            agent.info_line("Checkpoint selection cancelled. No changes made.")
            return

        await service.restore_agent_checkpoint(selected_id, agent)
        agent.info_line(f"Checkpoint {selected_id} loaded")
    except Exception as e:
        logger.error(f"Checkpoint selection failed: {e}")
        agent.error_line(f"Error during checkpoint selection: {e}")


def help() -> list[str]:
    return [
        "/checkpoint [action] [args...] - Create or restore conversation checkpoints",
        "  Actions:",
        "    create [label]     - Create checkpoint with optional label",
        "    restore <id>       - Restore specific checkpoint by ID",
        "    list               - Interactive tree selection of checkpoints",
        "",
        "  Examples:",
        "    /checkpoint create           - Create checkpoint with default label",
        "    /checkpoint create My Fix    - Create checkpoint with custom label",
        "    /checkpoint restore abc123   - Restore specific checkpoint",
        "    /checkpoint list             - Show interactive checkpoint browser",
    ]
