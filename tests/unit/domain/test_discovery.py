"""Unit tests for discovery filters, distance and ranking."""

import pytest

from domain.entities.discovery import (
    DiscoveryFilters,
    DiscoveryOverrides,
    bounding_box,
    haversine_km,
    rank_candidates,
    shares_interest,
)
from domain.entities.match import Match, make_pair_key
from domain.entities.swipe import SwipeAction
from tests.unit.conftest import make_profile


class TestHaversine:
    def test_one_degree_of_latitude(self):
        assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19, abs=0.01)

    def test_same_point_is_zero(self):
        assert haversine_km(38.72, -9.14, 38.72, -9.14) == pytest.approx(0.0)

    def test_symmetric(self):
        lisbon_madrid = haversine_km(38.72, -9.14, 40.42, -3.70)
        madrid_lisbon = haversine_km(40.42, -3.70, 38.72, -9.14)
        assert lisbon_madrid == pytest.approx(madrid_lisbon)
        assert 500 < lisbon_madrid < 510


class TestBoundingBox:
    def test_contains_radius(self):
        box = bounding_box(40.0, -3.0, 100.0)
        assert box.min_lat < 40.0 - 0.89 and box.max_lat > 40.0 + 0.89
        assert box.min_lon is not None and box.min_lon < -3.0
        assert box.max_lon is not None and box.max_lon > -3.0

    def test_drops_longitude_near_pole(self):
        box = bounding_box(89.9, 10.0, 50.0)
        assert box.min_lon is None and box.max_lon is None
        assert box.max_lat == 90.0

    def test_drops_longitude_across_antimeridian(self):
        box = bounding_box(0.0, 179.9, 50.0)
        assert box.min_lon is None


class TestFilters:
    def test_defaults_from_profile(self):
        profile = make_profile(
            age_range_min=25,
            age_range_max=35,
            seeking_genders=["female", "non_binary"],
            seeking_account_types=["couple"],
            max_distance=80,
            show_only_with_photos=True,
        )

        filters = DiscoveryFilters.from_profile(profile)

        assert (filters.min_age, filters.max_age) == (25, 35)
        assert filters.genders == ("female", "non_binary")
        assert filters.account_types == ("couple",)
        assert filters.max_distance == 80
        assert filters.only_with_photos is True
        assert filters.only_verified is False

    def test_empty_seeking_lists_mean_unfiltered(self):
        filters = DiscoveryFilters.from_profile(make_profile())
        assert filters.genders is None
        assert filters.account_types is None

    def test_overrides_replace_only_given_fields(self):
        base = DiscoveryFilters(min_age=25, max_age=35, only_verified=True)

        merged = base.merged_with(DiscoveryOverrides(max_age=40, only_verified=False))

        assert merged == DiscoveryFilters(min_age=25, max_age=40, only_verified=False)


class TestRankCandidates:
    def test_distance_sort_and_max_distance_cut(self):
        me = make_profile(latitude=0.0, longitude=0.0)
        near = make_profile(display_name="near", latitude=0.1, longitude=0.0)
        mid = make_profile(display_name="mid", latitude=0.5, longitude=0.0)
        far = make_profile(display_name="far", latitude=2.0, longitude=0.0)

        ranked = rank_candidates(me, [far, mid, near], DiscoveryFilters(max_distance=100))

        assert [c.profile.display_name for c in ranked] == ["near", "mid"]
        assert ranked[0].distance_km == pytest.approx(11.12, abs=0.01)

    def test_unlocated_candidates_go_last_and_are_never_cut(self):
        me = make_profile(latitude=0.0, longitude=0.0)
        ghost = make_profile(display_name="ghost")
        near = make_profile(display_name="near", latitude=0.1, longitude=0.0)

        ranked = rank_candidates(me, [ghost, near], DiscoveryFilters(max_distance=1))

        assert [c.profile.display_name for c in ranked] == ["ghost"]

        ranked = rank_candidates(me, [ghost, near], DiscoveryFilters(max_distance=50))
        assert [c.profile.display_name for c in ranked] == ["near", "ghost"]
        assert ranked[1].distance_km is None

    def test_requester_without_location_keeps_store_order(self):
        me = make_profile()
        a = make_profile(display_name="a", latitude=10.0, longitude=10.0)
        b = make_profile(display_name="b", latitude=0.0, longitude=0.0)

        ranked = rank_candidates(me, [a, b], DiscoveryFilters(max_distance=1))

        assert [c.profile.display_name for c in ranked] == ["a", "b"]
        assert all(c.distance_km is None for c in ranked)

    def test_interest_filter(self):
        me = make_profile()
        hiker = make_profile(display_name="hiker", interests=["Hiking", "wine"])
        gamer = make_profile(display_name="gamer", interests=["games"])

        ranked = rank_candidates(me, [hiker, gamer], DiscoveryFilters(interests=("hiking",)))

        assert [c.profile.display_name for c in ranked] == ["hiker"]
        assert shares_interest(gamer, ["GAMES"])


class TestEntities:
    def test_pair_key_is_order_independent(self):
        a, b = make_profile(), make_profile()
        assert make_pair_key(a.id, b.id) == make_pair_key(b.id, a.id)
        assert Match(profile_a_id=a.id, profile_b_id=b.id).pair_key == make_pair_key(b.id, a.id)

    def test_counterpart_of(self):
        a, b, c = make_profile(), make_profile(), make_profile()
        match = Match(profile_a_id=a.id, profile_b_id=b.id)
        assert match.counterpart_of(a.id) == b.id
        assert match.counterpart_of(b.id) == a.id
        with pytest.raises(ValueError):
            match.counterpart_of(c.id)

    def test_positive_actions(self):
        assert SwipeAction.LIKE.is_positive
        assert SwipeAction.SUPERLIKE.is_positive
        assert not SwipeAction.PASS.is_positive

    def test_completeness_requires_name_age_and_type(self):
        profile = make_profile(is_profile_complete=False)
        profile.refresh_completeness()
        assert profile.is_profile_complete

        profile.account_type = None
        profile.refresh_completeness()
        assert not profile.is_profile_complete
