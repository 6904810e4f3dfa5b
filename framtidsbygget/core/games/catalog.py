"""GameCatalog - read-only view over game_content.json"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from framtidsbygget.core.content import GAME_CONTENT_FILE, freeze, load_json

from .models import GAME_KEYS, Card, CompassNode, SynergyRule, WorldMetadata

logger = logging.getLogger(__name__)


class GameCatalog:
    """Metadata, compass, synergies and per-game tables of the five worlds."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._raw = freeze(dict(data))
        self._worlds: dict[str, WorldMetadata] = {}
        self._game_keys: dict[str, str] = {}
        self._compass: dict[str, CompassNode] = {}
        self._synergies: dict[str, SynergyRule] = {}
        self._action_cards: dict[str, Card] = {}
        self._policy_cards: dict[str, Card] = {}
        self._load()

    @classmethod
    def from_content(cls, content_dir: Optional[str | Path] = None) -> GameCatalog:
        return cls(load_json(GAME_CONTENT_FILE, content_dir))

    def _load(self) -> None:
        for key in GAME_KEYS:
            game = self._raw.get(key)
            if game is None:
                logger.warning("Game content missing: %s", key)
                continue
            meta = game.get("metadata") or {}
            try:
                world = WorldMetadata(
                    id=meta["id"],
                    title=meta["title"],
                    description=meta.get("description", ""),
                    estimated_time=meta.get("estimated_time", ""),
                    difficulty=meta.get("difficulty", ""),
                )
            except KeyError as e:
                logger.warning("Failed to load metadata for %s: %s", key, e)
                continue
            self._worlds[world.id] = world
            self._game_keys[world.id] = key

        compass = self._raw.get("compass") or {}
        for raw in compass.get("nodes") or ():
            try:
                node = CompassNode(
                    id=raw["id"], title=raw["title"], world_id=raw.get("world_id")
                )
            except KeyError as e:
                logger.warning("Failed to load compass node: %s", e)
                continue
            self._compass[node.id] = node

        for raw in self._raw.get("synergies") or ():
            try:
                rule = SynergyRule(
                    id=raw["id"],
                    name=raw["name"],
                    world_id=raw["world_id"],
                    metric=raw["metric"],
                    threshold=float(raw["threshold"]),
                )
            except (KeyError, ValueError) as e:
                logger.warning("Failed to load synergy rule: %s", e)
                continue
            self._synergies[rule.id] = rule

        for target, key in (
            (self._action_cards, ("competence_game", "action_cards")),
            (self._policy_cards, ("ecosystem_game", "policy_cards")),
        ):
            for raw in (self._raw.get(key[0]) or {}).get(key[1]) or ():
                try:
                    card = Card.from_dict(raw)
                except (KeyError, ValueError) as e:
                    logger.warning("Failed to load %s card: %s", key[0], e)
                    continue
                target[card.id] = card

        logger.info(
            "Loaded game catalog: %d worlds, %d compass nodes, %d synergies",
            len(self._worlds),
            len(self._compass),
            len(self._synergies),
        )

    # ── worlds ──

    def worlds(self) -> list[WorldMetadata]:
        return list(self._worlds.values())

    def world(self, world_id: str) -> Optional[WorldMetadata]:
        return self._worlds.get(world_id)

    def game_table(self, world_id: str) -> Mapping[str, Any]:
        """Raw (frozen) content of one game. Empty mapping when unknown."""
        key = self._game_keys.get(world_id)
        if key is None:
            return freeze({})
        return self._raw[key]

    # ── compass & synergies ──

    @property
    def compass_root(self) -> Optional[str]:
        return (self._raw.get("compass") or {}).get("root_node")

    def compass_nodes(self) -> list[CompassNode]:
        return list(self._compass.values())

    def compass_nodes_for(self, world_id: str) -> list[CompassNode]:
        return [n for n in self._compass.values() if n.world_id == world_id]

    def synergy_rules(self) -> list[SynergyRule]:
        return list(self._synergies.values())

    def synergy_rules_for(self, world_id: str) -> list[SynergyRule]:
        return [r for r in self._synergies.values() if r.world_id == world_id]

    # ── per-game tables ──

    def welfare_dialogue(self) -> Mapping[str, Any]:
        return self._raw["welfare_game"]["dialogue_tree"]

    def welfare_metrics(self) -> Mapping[str, Any]:
        return self._raw["welfare_game"]["game_metrics"]

    def welfare_outcomes(self) -> Mapping[str, Any]:
        return self._raw["welfare_game"]["outcomes"]

    def welfare_characters(self) -> Mapping[str, Any]:
        return self._raw["welfare_game"]["characters"]

    def competence_win_conditions(self) -> Mapping[str, Any]:
        return self._raw["competence_game"]["win_conditions"]

    def ecosystem_win_conditions(self) -> Mapping[str, Any]:
        return self._raw["ecosystem_game"]["win_conditions"]

    def action_card(self, card_id: str) -> Optional[Card]:
        return self._action_cards.get(card_id)

    def policy_card(self, card_id: str) -> Optional[Card]:
        return self._policy_cards.get(card_id)

    def action_cards(self) -> list[Card]:
        return list(self._action_cards.values())

    def policy_cards(self) -> list[Card]:
        return list(self._policy_cards.values())
