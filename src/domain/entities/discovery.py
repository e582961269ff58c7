"""Discovery value objects and the distance ranking used by the feed."""

import math
from dataclasses import dataclass, field, fields, replace
from typing import Iterable
from uuid import UUID

from domain.entities.profile import Profile

EARTH_RADIUS_KM = 6371.0
KM_PER_DEGREE_LAT = math.pi * EARTH_RADIUS_KM / 180.0


@dataclass(frozen=True)
class DiscoveryFilters:
    """Filters for the discovery feed. ``None`` means "not filtered"."""

    min_age: int | None = None
    max_age: int | None = None
    account_types: tuple[str, ...] | None = None
    genders: tuple[str, ...] | None = None
    max_distance: float | None = None
    only_verified: bool = False
    only_with_photos: bool = False
    interests: tuple[str, ...] | None = None

    @classmethod
    def from_profile(cls, profile: Profile) -> "DiscoveryFilters":
        """Default filters taken from the requester's own preferences."""
        return cls(
            min_age=profile.age_range_min,
            max_age=profile.age_range_max,
            account_types=tuple(profile.seeking_account_types) or None,
            genders=tuple(profile.seeking_genders) or None,
            max_distance=profile.max_distance,
            only_verified=profile.show_only_verified,
            only_with_photos=profile.show_only_with_photos,
        )

    def merged_with(self, overrides: "DiscoveryOverrides") -> "DiscoveryFilters":
        """Apply explicit request values on top of these defaults, field by field."""
        changes = {
            f.name: getattr(overrides, f.name)
            for f in fields(overrides)
            if getattr(overrides, f.name) is not None
        }
        return replace(self, **changes)


@dataclass(frozen=True)
class DiscoveryOverrides:
    """Filter values supplied explicitly with a discovery request."""

    min_age: int | None = None
    max_age: int | None = None
    account_types: tuple[str, ...] | None = None
    genders: tuple[str, ...] | None = None
    max_distance: float | None = None
    only_verified: bool | None = None
    only_with_photos: bool | None = None
    interests: tuple[str, ...] | None = None


@dataclass(frozen=True)
class GeoBounds:
    """Latitude/longitude box enclosing a search radius."""

    min_lat: float
    max_lat: float
    min_lon: float | None = None
    max_lon: float | None = None


@dataclass(frozen=True, slots=True)
class DiscoveryCandidate:
    """A profile in the feed, with its distance from the requester when known."""

    profile: Profile
    distance_km: float | None = None


@dataclass(frozen=True)
class DiscoveryQuery:
    """Everything the profile store needs to fetch raw candidates."""

    exclude_ids: frozenset[UUID] = field(default_factory=frozenset)
    filters: DiscoveryFilters = field(default_factory=DiscoveryFilters)
    bounds: GeoBounds | None = None


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates in kilometres."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def bounding_box(lat: float, lon: float, radius_km: float) -> GeoBounds:
    """Box that contains every point within ``radius_km`` of (lat, lon).

    Used only to narrow the database scan; the exact cut is done with
    :func:`haversine_km`. Longitude bounds are dropped near the poles and
    across the antimeridian.
    """
    d_lat = radius_km / KM_PER_DEGREE_LAT
    min_lat = max(lat - d_lat, -90.0)
    max_lat = min(lat + d_lat, 90.0)

    cos_lat = math.cos(math.radians(lat))
    if cos_lat <= 1e-6 or min_lat <= -90.0 or max_lat >= 90.0:
        return GeoBounds(min_lat=min_lat, max_lat=max_lat)

    d_lon = radius_km / (KM_PER_DEGREE_LAT * cos_lat)
    if d_lon >= 180.0 or lon - d_lon < -180.0 or lon + d_lon > 180.0:
        return GeoBounds(min_lat=min_lat, max_lat=max_lat)

    return GeoBounds(min_lat=min_lat, max_lat=max_lat, min_lon=lon - d_lon, max_lon=lon + d_lon)


def shares_interest(profile: Profile, interests: Iterable[str]) -> bool:
    wanted = {tag.strip().lower() for tag in interests}
    return bool(wanted.intersection(profile.interests))


def rank_candidates(
    requester: Profile,
    profiles: Iterable[Profile],
    filters: DiscoveryFilters,
) -> list[DiscoveryCandidate]:
    """Attach distances, apply the distance and interest cuts, and order the feed.

    Candidates with a distance come first, nearest first. Candidates without
    coordinates are never distance-filtered and keep their store order at the
    end. If the requester has no coordinates the store order is kept as is.
    """
    pool = list(profiles)
    if filters.interests:
        pool = [p for p in pool if shares_interest(p, filters.interests)]

    if not requester.has_coordinates:
        return [DiscoveryCandidate(profile=p) for p in pool]

    located: list[DiscoveryCandidate] = []
    unlocated: list[DiscoveryCandidate] = []
    for profile in pool:
        if not profile.has_coordinates:
            unlocated.append(DiscoveryCandidate(profile=profile))
            continue

        distance = haversine_km(
            requester.latitude,  # type: ignore[arg-type]
            requester.longitude,  # type: ignore[arg-type]
            profile.latitude,  # type: ignore[arg-type]
            profile.longitude,  # type: ignore[arg-type]
        )
        if filters.max_distance is not None and distance > filters.max_distance:
            continue
        located.append(DiscoveryCandidate(profile=profile, distance_km=distance))

    located.sort(key=lambda c: c.distance_km)  # type: ignore[arg-type, return-value]
    return located + unlocated
