"""HTML pages assembled from the UI primitives."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from framtidsbygget.api.progress import get_progress_service
from framtidsbygget.db.store import ProgressStoreError
from framtidsbygget.services.progress_service import ProgressService, UnknownPlayerError
from framtidsbygget.ui import (
    Align,
    BodySize,
    ButtonVariant,
    CardVariant,
    FooterAlign,
    HeadingVariant,
    IconColor,
    IconSize,
    Markup,
    TextVariant,
    body,
    button,
    caption,
    card,
    card_content,
    card_footer,
    card_header,
    heading,
    icon,
)

router = APIRouter(prefix="/pages", tags=["pages"])


def _achievement_card(view: dict) -> Markup:
    unlocked = bool(view.get("unlocked"))
    return card(
        [
            card_header(
                [
                    icon(
                        view["icon"] or "emoji_events",
                        size=IconSize.LARGE,
                        color=IconColor.PRIMARY if unlocked else IconColor.SECONDARY,
                        aria_label=view["name"],
                    ),
                    heading(view["name"], level=3),
                ]
            ),
            card_content(
                [
                    body(view["description"]),
                    caption(view.get("progress_text") or "", variant=TextVariant.SECONDARY),
                ]
            ),
            card_footer(
                [
                    caption(view["rarity_name"], uppercase=True),
                    caption(f"+{view['fl_score_reward']} FL"),
                ],
                align=FooterAlign.SPACE_BETWEEN,
            ),
        ],
        variant=CardVariant.ELEVATED if unlocked else CardVariant.OUTLINED,
        disabled=not unlocked,
        as_="article",
        attrs={"data-achievement-id": view["id"]},
    )


@router.get("/achievements/{user_id}", response_class=HTMLResponse)
def achievements_page(
    user_id: str,
    service: ProgressService = Depends(get_progress_service),
) -> HTMLResponse:
    try:
        views = service.achievement_overview(user_id)
    except UnknownPlayerError:
        raise HTTPException(status_code=404, detail=f"Player not found: {user_id}")
    except ProgressStoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    progress = service.get_progress(user_id)
    unlocked = sum(1 for v in views if v.get("unlocked"))

    page = Markup(
        "<!DOCTYPE html><html lang=\"sv\"><head><meta charset=\"utf-8\">"
        "<title>Utmärkelser</title></head><body><main>"
        + heading("Utmärkelser", level=1, variant=HeadingVariant.DISPLAY, align=Align.CENTER)
        + body(
            f"{unlocked} / {len(views)} upplåsta, {progress.total_fl_score} FL",
            size=BodySize.LARGE,
            align=Align.CENTER,
        )
        + "".join(_achievement_card(v) for v in views)
        + button("Tillbaka", variant=ButtonVariant.SECONDARY, icon="arrow_back")
        + "</main></body></html>"
    )
    return HTMLResponse(content=page)
