"""BDD tests for review submission."""

import asyncio

from pytest_bdd import given, parsers, scenarios, then, when
from reviews.review.submission import AddReview

scenarios("features/review_submission.feature")


@given(
    parsers.cfparse('a customer submits a review rated {rating:d} titled "{title}" with comment "{comment}"'),
    target_fixture="result",
)
@when(
    parsers.cfparse('a customer submits a review rated {rating:d} titled "{title}" with comment "{comment}"'),
    target_fixture="result",
)
def submit_review(services, rating, title, comment):
    return asyncio.run(services.add_review(AddReview(rating=rating, title=title, comment=comment)))


@when("a customer submits a review with rating 0 and blank title and comment", target_fixture="result")
def submit_blank_review(services):
    return asyncio.run(services.add_review(AddReview(rating=0, title="", comment="")))


@then(parsers.cfparse('the new review has id "{review_id}"'))
def new_review_has_id(result, review_id):
    assert result.review.id == review_id


@then("the new review is stamped with the current time")
def new_review_stamped(result, clock):
    assert result.review.created_at == clock.now
