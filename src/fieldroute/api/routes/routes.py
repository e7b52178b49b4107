"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.routing import (
    DirectionsRequest,
    DirectionsResponse,
    RouteValidationModel,
    RoutingRequest,
    RoutingResponse,
    ValidationRequest,
)
from ...services.routing.service import optimize_routes, render_directions, validate_route_payload

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/optimize", response_model=RoutingResponse, status_code=status.HTTP_200_OK)
def optimize(payload: RoutingRequest) -> RoutingResponse:
    try:
        return optimize_routes(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error optimizing routes: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize routes: {str(exc)}",
        ) from exc


@router.post("/validate", response_model=RouteValidationModel, status_code=status.HTTP_200_OK)
def validate(payload: ValidationRequest) -> RouteValidationModel:
    """Check previously optimized routes for coverage, balance and urgent placement."""
    try:
        return validate_route_payload(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/directions", response_model=DirectionsResponse, status_code=status.HTTP_200_OK)
def directions(payload: DirectionsRequest) -> DirectionsResponse:
    try:
        return render_directions(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
