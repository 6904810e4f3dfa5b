"""DialogueWalker - one caller-owned traversal of a dialogue tree"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from framtidsbygget.core.games.models import WelfareOutcome
from framtidsbygget.core.games.outcomes import welfare_outcome

from .models import DialogueError, DialogueNode, DialogueTree, MetricSpec

logger = logging.getLogger(__name__)


class DialogueWalker:
    """
    Starts at the tree's start node and applies choices.
    Metric deltas are clamped to each metric's bounds; reactions overwrite
    the character's current emotional state.
    """

    def __init__(self, tree: DialogueTree, metrics: Mapping[str, MetricSpec]) -> None:
        start = tree.get(tree.start_id)
        if start is None:
            raise DialogueError(f"Start node not found: {tree.start_id}")
        self._tree = tree
        self._bounds = dict(metrics)
        self.current: DialogueNode = start
        self.metrics: dict[str, float] = {
            name: bound.start_value for name, bound in self._bounds.items()
        }
        self.character_states: dict[str, str] = {}
        self.path: list[tuple[str, int]] = []  # (node id, choice index)

    @property
    def is_finished(self) -> bool:
        return self.current.is_ending

    def choose(self, index: int) -> DialogueNode:
        """Apply choice `index` of the current node and move on."""
        node = self.current
        if node.is_ending:
            raise DialogueError(f"Node {node.id} is an ending")
        if not 0 <= index < len(node.choices):
            raise DialogueError(
                f"Choice {index} out of range for node {node.id} "
                f"({len(node.choices)} choices)"
            )

        choice = node.choices[index]
        target = self._tree.get(choice.next_node_id)
        if target is None:
            raise DialogueError(f"Dangling reference {node.id} -> {choice.next_node_id}")

        for name, delta in choice.effects.items():
            bound = self._bounds.get(name)
            if bound is None:
                logger.warning("Unknown dialogue metric %s at node %s", name, node.id)
                continue
            self.metrics[name] = bound.clamp(self.metrics.get(name, bound.start_value) + delta)
        self.character_states.update(choice.character_reactions)

        self.path.append((node.id, index))
        self.current = target
        logger.debug("Dialogue %s -[%d]-> %s", node.id, index, target.id)
        return target

    def outcome(self, outcomes: Mapping[str, Any]) -> Optional[WelfareOutcome]:
        """Outcome tier from current metrics. None until an ending is reached."""
        if not self.is_finished:
            return None
        return welfare_outcome(self.metrics, outcomes)
