"""
Layout API endpoints.

Lays out a card list as binder pages, either as JSON (placements plus
geometry) or as a printable HTML sheet.
"""

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field

from binderpages.layout import build_binder_layout
from binderpages.models.failure import (
    ApiResponse,
    FailureKind,
    KnownError,
    create_known_failure,
    create_success,
    create_unknown_failure,
)
from binderpages.models.layout import (
    EMPTY_LAYOUT_MESSAGE,
    BinderLayout,
    CellClass,
    GeometryResult,
    PlacedCard,
)
from binderpages.parsers.layout_config import parse_layout_config
from binderpages.parsers.scryfall import parse_card_list
from binderpages.rendering.print_sheet import render_print_sheet

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/layout", tags=["layout"])


class LayoutRequest(BaseModel):
    """Request body shared by the layout endpoints."""

    cards: Any = Field(
        default=None,
        description="Scryfall card objects, or a Scryfall list object",
    )
    config: dict[str, Any] | None = Field(
        default=None,
        description="Layout configuration: margins, rarity_counts, grid",
    )
    title: str | None = None


class GeometryResponse(BaseModel):
    """Page geometry in inches."""

    printable_width: float
    printable_height: float
    visual_margin_lr: float
    visual_margin_tb: float
    shim_left: float
    shim_right: float
    shim_top: float
    shim_bottom: float
    padding_lr: float
    padding_tb: float
    column_widths: dict[CellClass, float]
    row_heights: dict[CellClass, float]


class PlacementResponse(BaseModel):
    """One card cell."""

    name: str
    rarity: str | None
    collector_number: str
    set_code: str | None = None
    index: int
    page: int
    row: int
    column: int
    row_class: CellClass
    column_class: CellClass
    page_break: bool
    width: float
    height: float


class LayoutPayload(BaseModel):
    """Successful layout result."""

    columns: int
    rows: int
    cards_per_page: int
    page_count: int
    geometry: GeometryResponse
    placements: list[PlacementResponse]


def _geometry_response(geometry: GeometryResult) -> GeometryResponse:
    return GeometryResponse(
        printable_width=geometry.printable_width,
        printable_height=geometry.printable_height,
        visual_margin_lr=geometry.visual_margin_lr,
        visual_margin_tb=geometry.visual_margin_tb,
        shim_left=geometry.shim_left,
        shim_right=geometry.shim_right,
        shim_top=geometry.shim_top,
        shim_bottom=geometry.shim_bottom,
        padding_lr=geometry.padding_lr,
        padding_tb=geometry.padding_tb,
        column_widths=dict(geometry.column_widths),
        row_heights=dict(geometry.row_heights),
    )


def _placement_response(layout: BinderLayout, placed: PlacedCard) -> PlacementResponse:
    size = layout.cell_size(placed)
    return PlacementResponse(
        name=placed.card.name,
        rarity=placed.card.rarity,
        collector_number=placed.card.collector_number,
        set_code=placed.card.set_code,
        index=placed.index,
        page=placed.page,
        row=placed.row,
        column=placed.column,
        row_class=placed.row_class,
        column_class=placed.column_class,
        page_break=placed.page_break,
        width=size.width,
        height=size.height,
    )


def layout_to_payload(layout: BinderLayout) -> LayoutPayload:
    grid = layout.config.grid
    return LayoutPayload(
        columns=grid.columns,
        rows=grid.rows,
        cards_per_page=grid.cards_per_page,
        page_count=layout.page_count,
        geometry=_geometry_response(layout.geometry),
        placements=[_placement_response(layout, p) for p in layout.placements],
    )


def _build_layout(request: LayoutRequest) -> BinderLayout:
    cards = parse_card_list(request.cards)
    config = parse_layout_config(request.config)
    return build_binder_layout(cards, config)


@router.post("", response_model=ApiResponse[LayoutPayload])
async def create_layout(request: LayoutRequest) -> Any:
    """
    Lay out cards as binder pages.

    Returns placements in binder order with their cell sizes, plus the page
    geometry. An empty card list is a known failure ("No cards to display.").
    Malformed card objects return the failure envelope with status 400.
    """
    try:
        layout = _build_layout(request)
    except KnownError as e:
        logger.info("Rejected layout request: %s", e.message)
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_response().model_dump(mode="json"),
        )
    except Exception as e:
        logger.exception("Layout request failed")
        return create_unknown_failure(e)

    if layout.is_empty:
        return create_known_failure(FailureKind.EMPTY_RESULT, EMPTY_LAYOUT_MESSAGE)

    return create_success(layout_to_payload(layout))


@router.post("/print", response_class=HTMLResponse)
async def create_print_sheet(request: LayoutRequest) -> Any:
    """
    Render cards as a printable HTML sheet.

    Malformed card objects return the JSON failure envelope with status 400.
    """
    try:
        layout = _build_layout(request)
    except KnownError as e:
        logger.info("Rejected print request: %s", e.message)
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_response().model_dump(mode="json"),
        )

    return HTMLResponse(render_print_sheet(layout, title=request.title or "Binder Pages"))
