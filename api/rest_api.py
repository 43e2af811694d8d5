"""FastAPI-based RESTful service for SGF diagrams.

This module exposes two routes:
 - ``/diagram`` accepts POST requests with JSON ``{"sgf": ...}`` plus optional
   ``move_range``/``move`` selection and returns the labels, caption and a
   text rendering of the diagram.
 - ``/health`` is a simple GET route for health checks.

It also enables CORS and can be run directly with Uvicorn.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from core.diagram import DiagramOptions, build_diagram
from core.show_board import diagram_to_string
from input.sgf_parser import parse_sgf

logger = logging.getLogger(__name__)


class DiagramRequest(BaseModel):
    """Request model for the ``/diagram`` endpoint."""

    sgf: str
    move_range: Optional[Tuple[int, int]] = None
    move: Optional[int] = None
    last_move_label: bool = False
    show_coordinates: bool = True


class Label(BaseModel):
    """A move number drawn on the point ``(x, y)``."""

    x: int
    y: int
    number: int


class DiagramResponse(BaseModel):
    """Response model returned by the ``/diagram`` endpoint."""

    board_size: int
    total_moves: int
    labels: List[Label]
    overwritten_labels: List[str]
    last_move: Optional[Tuple[int, int]] = None
    diagram: str


app = FastAPI(title="SGF Diagram API")

# Configure very permissive CORS by default
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/diagram", response_model=DiagramResponse)
async def diagram(req: DiagramRequest) -> DiagramResponse:
    """Build a diagram for the SGF text in ``req``.

    Malformed SGF data and invalid selection options are reported with
    status 400.
    """

    try:
        options = DiagramOptions(
            move_range=req.move_range,
            move=req.move,
            last_move_label=req.last_move_label,
            show_coordinates=req.show_coordinates,
        )
        game = parse_sgf(req.sgf, from_string=True)
        result = build_diagram(game.board_size, game.moves, options)
    except ValueError as exc:
        logger.info("Rejected diagram request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    labels = [
        Label(x=pos.x, y=pos.y, number=number)
        for pos, number in sorted(result.labels.items(), key=lambda item: item[1])
    ]
    return DiagramResponse(
        board_size=result.board_size,
        total_moves=result.total_moves,
        labels=labels,
        overwritten_labels=result.caption,
        last_move=tuple(result.last_move) if result.last_move else None,
        diagram=diagram_to_string(result),
    )


@app.get("/health")
async def health() -> Dict[str, str]:
    """Simple liveness probe."""

    return {"status": "ok"}


if __name__ == "__main__":  # pragma: no cover - manual start
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
