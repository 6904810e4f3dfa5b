"""Dialogue Core - tree models, integrity checks, traversal"""

from .models import (
    START_NODE_ID,
    Choice,
    DialogueError,
    DialogueNode,
    DialogueTree,
    MetricSpec,
    metric_specs,
)
from .validation import TreeIssue, reachable_nodes, validate_tree
from .walker import DialogueWalker

__all__ = [
    "START_NODE_ID",
    "Choice",
    "DialogueError",
    "DialogueNode",
    "DialogueTree",
    "MetricSpec",
    "metric_specs",
    "TreeIssue",
    "reachable_nodes",
    "validate_tree",
    "DialogueWalker",
]
