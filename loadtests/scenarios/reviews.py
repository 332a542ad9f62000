"""Reviews load test scenarios.

ReviewJourney submits a review and then lists reviews to find it again.
ReviewBrowser only reads. InvalidReviewUser exercises the validation path,
which must answer 400 without touching storage.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import invalid_review_data, review_data
from loadtests.helpers.response import extract_error_detail


class SubmitAndList(SequentialTaskSet):
    """Submit Review -> List Reviews -> check the new review is listed."""

    def on_start(self):
        self.review_id = None

    @task
    def submit_review(self):
        with self.client.post(
            "/reviews",
            json=review_data(),
            catch_response=True,
            name="POST /reviews",
        ) as resp:
            if resp.status_code == 201:
                self.review_id = resp.json()["review"]["id"]
            else:
                resp.failure(f"Submit review failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def list_reviews(self):
        with self.client.get("/reviews", catch_response=True, name="GET /reviews") as resp:
            if resp.status_code != 200:
                resp.failure(f"List reviews failed: {resp.status_code} {extract_error_detail(resp)}")
                return
            body = resp.json()
            if body["totalCount"] != len(body["reviews"]):
                resp.failure("totalCount does not match the number of reviews")
            elif not any(review["id"] == self.review_id for review in body["reviews"]):
                resp.failure(f"Submitted review {self.review_id} missing from list")

    @task
    def done(self):
        self.interrupt()


class ReviewJourney(HttpUser):
    tasks = [SubmitAndList]
    wait_time = between(0.5, 2)


class ReviewBrowser(HttpUser):
    wait_time = between(0.2, 1)

    @task
    def list_reviews(self):
        self.client.get("/reviews", name="GET /reviews")


class InvalidReviewUser(HttpUser):
    wait_time = between(1, 3)

    @task
    def submit_invalid_review(self):
        with self.client.post(
            "/reviews",
            json=invalid_review_data(),
            catch_response=True,
            name="POST /reviews [invalid]",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Expected 400, got {resp.status_code}")
