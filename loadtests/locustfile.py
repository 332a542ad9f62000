"""Reviews Load Testing: Locust entry point.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py

    # Submit-and-list journey only:
    locust -f loadtests/locustfile.py ReviewJourney

    # Headless (CI mode):
    locust -f loadtests/locustfile.py ReviewJourney ReviewBrowser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.reviews import InvalidReviewUser, ReviewBrowser, ReviewJourney  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Fires globally for all scenarios. Expected
    400s from InvalidReviewUser are skipped.
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400 and "[invalid]" not in name:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker when load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print the final review count when the test ends."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    try:
        resp = requests.get(f"{environment.host.rstrip('/')}/reviews", timeout=5)
        resp.raise_for_status()
        print(f"[LOADTEST] Reviews stored: {resp.json()['totalCount']}\n")
    except Exception as e:
        print(f"[LOADTEST] Could not fetch review count: {e}\n")
