"""서핑 스팟 카탈로그입니다. / Surf spot catalog."""

from __future__ import annotations

from typing import Dict, List, Sequence

from pydantic import Field

from ..base import GlassyBaseModel


class Location(GlassyBaseModel):
    """서핑 스팟 위치입니다. / Surf spot location."""

    id: str
    name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    description: str
    is_favorite: bool = False


SAMPLE_SPOTS: List[Location] = [
    Location(
        id="huntington-beach-cliffs",
        name="Huntington Beach Cliffs",
        latitude=33.6595,
        longitude=-118.0089,
        description=(
            "Consistent beach break with powerful waves. "
            "Good for intermediate to advanced surfers."
        ),
    ),
    Location(
        id="blackies",
        name="Blackies",
        latitude=33.6089,
        longitude=-117.9289,
        description=(
            "Popular longboard spot with mellow, fun waves. Great for beginners."
        ),
    ),
    Location(
        id="san-onofre-state-beach",
        name="San Onofre State Beach",
        latitude=33.3706,
        longitude=-117.5617,
        description=(
            "Classic longboard wave, super fun and intuitive. "
            "Perfect for all skill levels."
        ),
    ),
    Location(
        id="san-clemente",
        name="San Clemente",
        latitude=33.4270,
        longitude=-117.6120,
        description=(
            "Variety of breaks including the pier and Trestles. World-class waves."
        ),
    ),
]


def spots_by_id(spots: Sequence[Location] = SAMPLE_SPOTS) -> Dict[str, Location]:
    """ID로 스팟을 색인합니다. / Index spots by id."""

    return {spot.id: spot for spot in spots}


def find_spot(spot_id: str, spots: Sequence[Location] = SAMPLE_SPOTS) -> Location:
    """ID로 스팟을 찾습니다. / Find spot by id."""

    for spot in spots:
        if spot.id == spot_id:
            return spot
    raise KeyError(f"Unknown spot: {spot_id}")


def favorite_spots(spots: Sequence[Location] = SAMPLE_SPOTS) -> List[Location]:
    """즐겨찾기 스팟만 고릅니다. / Select favourite spots."""

    return [spot for spot in spots if spot.is_favorite]


def mark_favorites(
    favorite_ids: Sequence[str], spots: Sequence[Location] = SAMPLE_SPOTS
) -> List[Location]:
    """즐겨찾기 플래그를 적용합니다. / Apply favourite flags to spot copies."""

    known = spots_by_id(spots)
    unknown = [spot_id for spot_id in favorite_ids if spot_id not in known]
    if unknown:
        raise KeyError(f"Unknown spot: {', '.join(unknown)}")
    chosen = set(favorite_ids)
    return [
        spot.model_copy(update={"is_favorite": spot.id in chosen}) for spot in spots
    ]
