"""Content API endpoints (dialogue, localization, audio manifest)."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from framtidsbygget.api.schemas import (
    ChoiceInfo,
    DialogueNodeResponse,
    SequenceResponse,
    SequenceStepInfo,
    TranslationResponse,
)
from framtidsbygget.config import settings
from framtidsbygget.core.audio.manifest import SoundManifest
from framtidsbygget.core.dialogue.models import DialogueTree
from framtidsbygget.core.localization.catalog import LocalizationCatalog
from framtidsbygget.core.localization.localizer import Localizer

router = APIRouter(prefix="/content", tags=["content"])

LANG_PARAM = "lang"


def get_dialogue_tree(request: Request) -> DialogueTree:
    tree: DialogueTree = request.app.state.dialogue_tree
    return tree


def get_localization(request: Request) -> LocalizationCatalog:
    catalog: LocalizationCatalog = request.app.state.localization_catalog
    return catalog


def get_manifest(request: Request) -> SoundManifest:
    manifest: SoundManifest = request.app.state.sound_manifest
    return manifest


@router.get("/dialogue/{node_id}", response_model=DialogueNodeResponse)
def dialogue_node(
    node_id: str, tree: DialogueTree = Depends(get_dialogue_tree)
) -> DialogueNodeResponse:
    node = tree.get(node_id)
    if node is None:
        raise HTTPException(status_code=404, detail=f"Dialogue node not found: {node_id}")
    return DialogueNodeResponse(
        id=node.id,
        character=node.character,
        text=node.text,
        narration=node.narration,
        emotion=node.emotion,
        is_ending=node.is_ending,
        outcome=node.outcome,
        outcome_description=node.outcome_description,
        choices=[
            ChoiceInfo(
                text=c.text,
                effects=dict(c.effects),
                character_reactions=dict(c.character_reactions),
                next_node_id=c.next_node_id,
            )
            for c in node.choices
        ],
    )


@router.get("/i18n/{key}", response_model=TranslationResponse)
def translate(
    key: str,
    request: Request,
    lang: Optional[str] = None,
    catalog: LocalizationCatalog = Depends(get_localization),
) -> TranslationResponse:
    """Translate key; remaining query params are interpolation values.

    Unknown keys come back as the key itself with found=false.
    """
    localizer = Localizer(catalog, lang or settings.DEFAULT_LANGUAGE)
    params = {k: v for k, v in request.query_params.items() if k != LANG_PARAM}
    text = localizer.t(key, params)
    return TranslationResponse(
        key=key, language=localizer.language, text=text, found=text != key
    )


@router.get("/audio/sequences/{name}", response_model=SequenceResponse)
def audio_sequence(
    name: str, manifest: SoundManifest = Depends(get_manifest)
) -> SequenceResponse:
    steps = manifest.sequence(name)
    if steps is None:
        raise HTTPException(status_code=404, detail=f"Sound sequence not found: {name}")
    return SequenceResponse(
        name=name,
        steps=[
            SequenceStepInfo(
                sound=s.sound,
                resolved_id=manifest.resolve(s.sound),
                delay=s.delay,
                description=manifest.description(s.sound),
            )
            for s in steps
        ],
    )
