"""Dialogue tree integrity checks

Reports problems instead of raising; an empty list means the tree is sound.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .models import DialogueTree

logger = logging.getLogger(__name__)

# --- issue kinds ---
MISSING_START = "missing_start"
DANGLING_REFERENCE = "dangling_reference"
ENDING_WITH_CHOICES = "ending_with_choices"
DEAD_END = "dead_end"
UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class TreeIssue:
    kind: str
    node_id: str
    detail: str = ""


def reachable_nodes(tree: DialogueTree) -> set[str]:
    """Node ids reachable from the start node (breadth first)."""
    if tree.start_id not in tree.nodes:
        return set()
    seen = {tree.start_id}
    queue = [tree.start_id]
    while queue:
        node = tree.nodes[queue.pop(0)]
        for choice in node.choices:
            target = choice.next_node_id
            if target in tree.nodes and target not in seen:
                seen.add(target)
                queue.append(target)
    return seen


def validate_tree(tree: DialogueTree) -> list[TreeIssue]:
    issues: list[TreeIssue] = []

    if tree.start_id not in tree.nodes:
        issues.append(TreeIssue(MISSING_START, tree.start_id))

    for node in tree.nodes.values():
        if node.is_ending and node.choices:
            issues.append(TreeIssue(ENDING_WITH_CHOICES, node.id))
        if not node.is_ending and not node.choices:
            issues.append(TreeIssue(DEAD_END, node.id))
        for index, choice in enumerate(node.choices):
            if choice.next_node_id not in tree.nodes:
                issues.append(
                    TreeIssue(
                        DANGLING_REFERENCE,
                        node.id,
                        f"choice {index} -> {choice.next_node_id}",
                    )
                )

    if tree.start_id in tree.nodes:
        reachable = reachable_nodes(tree)
        for node_id in tree.nodes:
            if node_id not in reachable:
                issues.append(TreeIssue(UNREACHABLE, node_id))

    for issue in issues:
        logger.warning("Dialogue tree issue: %s at %s %s", issue.kind, issue.node_id, issue.detail)
    return issues
