"""
HTTP routes for the KeySwitch admin view.

Each view request carries the current selection, runs one controller event
and returns the new view state together with notifications and the regions
the page should redraw.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException

from mechdex.controller import KeySwitchCrudController
from mechdex.dependencies import get_key_switch_service
from mechdex.errors import NotFoundError, PersistenceError
from mechdex.schemas import (
    KeySwitchSchema,
    MessageSchema,
    ViewStateRequest,
    ViewStateResponse,
)
from mechdex.service import KeySwitchService

logger = logging.getLogger(__name__)

router = APIRouter()


def _run_event(
    service: KeySwitchService,
    payload: Optional[ViewStateRequest],
    event: Callable[[KeySwitchCrudController], object],
) -> ViewStateResponse:
    selected = payload.selected.to_record() if payload and payload.selected else None
    controller = KeySwitchCrudController(service, selected=selected)
    controller.initialize()
    event(controller)
    return _view_state(controller)


def _view_state(controller: KeySwitchCrudController) -> ViewStateResponse:
    return ViewStateResponse(
        key_switches=[KeySwitchSchema.from_record(k) for k in controller.key_switches],
        selected=(
            KeySwitchSchema.from_record(controller.selected)
            if controller.selected is not None
            else None
        ),
        messages=[
            MessageSchema(severity=m.severity, summary=m.summary, detail=m.detail)
            for m in controller.messages
        ],
        updates=controller.updates,
    )


@router.get("/key-switch-view", response_model=ViewStateResponse)
def load_view(service: KeySwitchService = Depends(get_key_switch_service)):
    return _run_event(service, None, lambda controller: None)


@router.post("/key-switch-view/new", response_model=ViewStateResponse)
def open_new(
    payload: Optional[ViewStateRequest] = None,
    service: KeySwitchService = Depends(get_key_switch_service),
):
    return _run_event(service, payload, KeySwitchCrudController.open_new)


@router.post("/key-switch-view/generate", response_model=ViewStateResponse)
def generate_data(
    payload: ViewStateRequest,
    service: KeySwitchService = Depends(get_key_switch_service),
):
    return _run_event(service, payload, KeySwitchCrudController.generate_data)


@router.post("/key-switch-view/save", response_model=ViewStateResponse)
def save(
    payload: ViewStateRequest,
    service: KeySwitchService = Depends(get_key_switch_service),
):
    return _run_event(service, payload, KeySwitchCrudController.save)


@router.post("/key-switch-view/delete", response_model=ViewStateResponse)
def delete(
    payload: ViewStateRequest,
    service: KeySwitchService = Depends(get_key_switch_service),
):
    return _run_event(service, payload, KeySwitchCrudController.delete)


@router.get("/key-switches/{key_switch_id}", response_model=KeySwitchSchema)
def get_key_switch(
    key_switch_id: str,
    service: KeySwitchService = Depends(get_key_switch_service),
):
    try:
        key_switch = service.get_key_switch_by_id(key_switch_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except PersistenceError as exc:
        logger.warning("Failed to read KeySwitch %s: %s", key_switch_id, exc)
        raise HTTPException(status_code=502, detail=str(exc))
    return KeySwitchSchema.from_record(key_switch)
