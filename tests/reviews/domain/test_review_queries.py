"""Tests for the in-memory review query helpers."""

from datetime import UTC, datetime, timedelta

import pytest
from reviews.review.review import (
    SortOrder,
    create,
    filter_by_rating,
    get_average_rating,
    sort_by_date,
    sort_by_rating,
)

BASE = datetime(2025, 10, 1, tzinfo=UTC)


def _review(review_id, rating, day=0):
    return create(
        id=review_id,
        rating=rating,
        title=f"Review {review_id}",
        comment="Some comment",
        created_at=BASE + timedelta(days=day),
    )


def _ids(reviews):
    return [review.id for review in reviews]


class TestAverageRating:
    def test_empty_collection_is_zero(self):
        assert get_average_rating([]) == 0

    def test_mean_of_ratings(self):
        reviews = [_review(str(i), rating) for i, rating in enumerate([5, 4, 2, 3, 5])]
        assert get_average_rating(reviews) == pytest.approx(3.8)

    def test_no_rounding(self):
        reviews = [_review("a", 1), _review("b", 2), _review("c", 2)]
        assert get_average_rating(reviews) == pytest.approx(5 / 3)

    def test_accepts_any_iterable(self):
        assert get_average_rating(r for r in [_review("a", 4)]) == 4


class TestFilterByRating:
    def test_exact_rating_matches_in_input_order(self):
        reviews = [_review("a", 5), _review("b", 3), _review("c", 5)]
        assert _ids(filter_by_rating(reviews, 5)) == ["a", "c"]

    def test_no_matches(self):
        assert filter_by_rating([_review("a", 5)], 1) == []


class TestSortByRating:
    def test_descending_by_default(self):
        reviews = [_review("a", 2), _review("b", 5), _review("c", 3)]
        assert _ids(sort_by_rating(reviews)) == ["b", "c", "a"]

    def test_ascending(self):
        reviews = [_review("a", 2), _review("b", 5), _review("c", 3)]
        assert _ids(sort_by_rating(reviews, SortOrder.ASC)) == ["a", "c", "b"]

    def test_order_accepts_string_value(self):
        reviews = [_review("a", 2), _review("b", 5)]
        assert _ids(sort_by_rating(reviews, "asc")) == ["a", "b"]

    @pytest.mark.parametrize("order", [SortOrder.ASC, SortOrder.DESC])
    def test_equal_ratings_keep_input_order(self, order):
        reviews = [_review("first", 4), _review("x", 1), _review("second", 4), _review("third", 4)]
        ties = [review_id for review_id in _ids(sort_by_rating(reviews, order)) if review_id != "x"]
        assert ties == ["first", "second", "third"]

    def test_input_is_not_mutated(self):
        reviews = [_review("a", 1), _review("b", 5)]
        sort_by_rating(reviews)
        assert _ids(reviews) == ["a", "b"]

    def test_unknown_order_rejected(self):
        with pytest.raises(ValueError):
            sort_by_rating([], "sideways")


class TestSortByDate:
    def test_newest_first_by_default(self):
        reviews = [_review("old", 3, day=0), _review("new", 3, day=2), _review("mid", 3, day=1)]
        assert _ids(sort_by_date(reviews)) == ["new", "mid", "old"]

    def test_ascending(self):
        reviews = [_review("old", 3, day=0), _review("new", 3, day=2), _review("mid", 3, day=1)]
        assert _ids(sort_by_date(reviews, SortOrder.ASC)) == ["old", "mid", "new"]

    @pytest.mark.parametrize("order", ["asc", "desc"])
    def test_equal_timestamps_keep_input_order(self, order):
        reviews = [_review("first", 1, day=1), _review("second", 5, day=1), _review("other", 3, day=4)]
        ties = [review_id for review_id in _ids(sort_by_date(reviews, order)) if review_id != "other"]
        assert ties == ["first", "second"]
