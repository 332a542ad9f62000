"""Shared BDD fixtures and step definitions for the Reviews context."""

import asyncio

from pytest_bdd import given, parsers, then
from reviews.container import ReviewServices
from reviews.seed import seed_reviews


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty review store", target_fixture="services")
def empty_review_store(repository, id_generator, clock):
    return ReviewServices(repository, generate_id=id_generator, now=clock)


@given(
    parsers.cfparse('a review store that always assigns id "{review_id}"'),
    target_fixture="services",
)
def store_with_fixed_id(repository, clock, review_id):
    return ReviewServices(repository, generate_id=lambda: review_id, now=clock)


@given("an unavailable review store", target_fixture="services")
def unavailable_review_store(failing_repository, id_generator, clock):
    return ReviewServices(failing_repository(), generate_id=id_generator, now=clock)


@given("the sample reviews are stored")
def sample_reviews_stored(services):
    asyncio.run(seed_reviews(services.repository))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the operation succeeds")
def operation_succeeds(result):
    assert result.success is True


@then(parsers.cfparse('the operation fails with kind "{kind}"'))
def operation_fails_with_kind(result, kind):
    assert result.success is False
    assert result.kind.value == kind


@then(parsers.cfparse("the operation reports {count:d} errors"))
def operation_reports_error_count(result, count):
    assert len(result.errors) == count


@then(parsers.cfparse('the operation reports "{message}"'))
def operation_reports_message(result, message):
    assert message in result.errors


@then(parsers.cfparse("the stored review count is {count:d}"))
def store_holds_reviews(services, count):
    assert len(asyncio.run(services.repository.find_all())) == count
