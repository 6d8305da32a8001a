"""Nearby spot endpoints for the route planner."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ...models.domain import GeoPoint
from ...schemas.nearby import (
    ClassifiedSpotModel,
    GeoPointModel,
    GroupSpotsRequest,
    GroupSpotsResponse,
    NearbySpotsResponse,
    RouteEndpoints,
    RouteStopModel,
    SearchRadiusResponse,
    SpotGroupModel,
)
from ...services.geospatial import midpoint
from ...services.nearby import (
    build_route_stop,
    display_radius_km,
    estimate_search_radius_km,
    find_nearby_spots,
    group_spots,
)

router = APIRouter(prefix="/nearby", tags=["nearby"])


@router.get("/search-radius", response_model=SearchRadiusResponse, status_code=status.HTTP_200_OK)
def search_radius(
    origin_lat: float | None = Query(default=None),
    origin_lng: float | None = Query(default=None),
    destination_lat: float | None = Query(default=None),
    destination_lng: float | None = Query(default=None),
) -> SearchRadiusResponse:
    origin = GeoPoint(latitude=origin_lat, longitude=origin_lng)
    destination = GeoPoint(latitude=destination_lat, longitude=destination_lng)
    radius_km = estimate_search_radius_km(origin, destination)
    return SearchRadiusResponse(
        search_radius_km=radius_km,
        display_radius_km=display_radius_km(radius_km),
        center=GeoPointModel.from_domain(midpoint(origin, destination)),
    )


@router.post("/spots", response_model=NearbySpotsResponse, status_code=status.HTTP_200_OK)
def nearby_spots(payload: RouteEndpoints) -> NearbySpotsResponse:
    try:
        result = find_nearby_spots(payload.origin.to_domain(), payload.destination.to_domain())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error finding nearby spots: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to find nearby spots: {str(exc)}",
        ) from exc
    return NearbySpotsResponse.from_domain(result)


@router.post("/group", response_model=GroupSpotsResponse, status_code=status.HTTP_200_OK)
def group(payload: GroupSpotsRequest) -> GroupSpotsResponse:
    """Group caller-supplied spots without querying the backend."""
    groups = group_spots(
        [spot.to_domain() for spot in payload.spots],
        payload.origin.to_domain(),
        payload.destination.to_domain(),
    )
    return GroupSpotsResponse(groups=[SpotGroupModel.from_domain(item) for item in groups])


@router.post("/route-stop", response_model=RouteStopModel, status_code=status.HTTP_200_OK)
def route_stop(payload: ClassifiedSpotModel) -> RouteStopModel:
    return RouteStopModel.from_domain(build_route_stop(payload.to_classified()))
