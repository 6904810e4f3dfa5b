"""Dialogue tree domain models (DB independent)"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

START_NODE_ID = "start"


class DialogueError(Exception):
    """Invalid traversal step (choice on an ending, bad index, unknown node)."""


@dataclass(frozen=True)
class Choice:
    text: str
    effects: Mapping[str, float]  # metric -> delta
    character_reactions: Mapping[str, str]  # character id -> emotional state
    next_node_id: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Choice:
        return cls(
            text=raw["text"],
            effects=dict(raw.get("effects") or {}),
            character_reactions=dict(raw.get("character_reactions") or {}),
            next_node_id=raw["next_node_id"],
        )


@dataclass(frozen=True)
class DialogueNode:
    id: str
    character: str
    text: str
    narration: Optional[str] = None
    emotion: Optional[str] = None
    choices: tuple[Choice, ...] = ()

    # ending
    is_ending: bool = False
    outcome: Optional[str] = None
    outcome_description: Optional[str] = None

    @classmethod
    def from_dict(cls, node_id: str, raw: Mapping[str, Any]) -> DialogueNode:
        return cls(
            id=node_id,
            character=raw.get("character", "narrator"),
            text=raw.get("text", ""),
            narration=raw.get("narration"),
            emotion=raw.get("emotion"),
            choices=tuple(Choice.from_dict(c) for c in raw.get("choices") or ()),
            is_ending=bool(raw.get("is_ending", False)),
            outcome=raw.get("outcome"),
            outcome_description=raw.get("outcome_description"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "character": self.character,
            "text": self.text,
            "narration": self.narration,
            "emotion": self.emotion,
            "is_ending": self.is_ending,
            "choices": [
                {
                    "text": c.text,
                    "effects": dict(c.effects),
                    "character_reactions": dict(c.character_reactions),
                    "next_node_id": c.next_node_id,
                }
                for c in self.choices
            ],
        }
        if self.is_ending:
            data["outcome"] = self.outcome
            data["outcome_description"] = self.outcome_description
        return data


@dataclass(frozen=True)
class MetricSpec:
    """Scenario metric. Bounds are optional (budget has none)."""

    name: str
    start_value: float
    min_value: Optional[float] = None
    max_value: Optional[float] = None

    def clamp(self, value: float) -> float:
        if self.min_value is not None and value < self.min_value:
            return self.min_value
        if self.max_value is not None and value > self.max_value:
            return self.max_value
        return value


@dataclass
class DialogueTree:
    nodes: dict[str, DialogueNode] = field(default_factory=dict)
    start_id: str = START_NODE_ID

    @classmethod
    def from_dict(
        cls, raw: Mapping[str, Mapping[str, Any]], start_id: str = START_NODE_ID
    ) -> DialogueTree:
        return cls(
            nodes={nid: DialogueNode.from_dict(nid, n) for nid, n in raw.items()},
            start_id=start_id,
        )

    def get(self, node_id: str) -> Optional[DialogueNode]:
        return self.nodes.get(node_id)

    def endings(self) -> list[DialogueNode]:
        return [n for n in self.nodes.values() if n.is_ending]


def metric_specs(raw: Mapping[str, Mapping[str, Any]]) -> dict[str, MetricSpec]:
    """game_metrics table -> MetricSpec per metric."""
    specs: dict[str, MetricSpec] = {}
    for name, m in raw.items():
        specs[name] = MetricSpec(
            name=name,
            start_value=float(m.get("start_value", 0)),
            min_value=m.get("min_value"),
            max_value=m.get("max_value"),
        )
    return specs
