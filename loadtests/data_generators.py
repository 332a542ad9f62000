"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that match the field names of the API's
AddReviewRequest schema. The ``valid_*`` helpers respect the domain rules
(rating 1-5, title up to 200 characters, comment up to 5000); the
``invalid_*`` helpers break them on purpose.
"""

import random

from faker import Faker

fake = Faker()

TITLE_MAX_LENGTH = 200
COMMENT_MAX_LENGTH = 5000


def valid_rating() -> int:
    return random.randint(1, 5)


def review_title() -> str:
    """A short sentence, trimmed to the title limit."""
    return fake.sentence(nb_words=random.randint(2, 8))[:TITLE_MAX_LENGTH]


def review_comment() -> str:
    return fake.paragraph(nb_sentences=random.randint(1, 6))[:COMMENT_MAX_LENGTH]


def review_data() -> dict:
    """Generate an AddReviewRequest payload that passes validation."""
    return {
        "rating": valid_rating(),
        "title": review_title(),
        "comment": review_comment(),
    }


def invalid_review_data() -> dict:
    """Generate a payload that fails one or more validation rules."""
    return random.choice(
        [
            {"rating": 0, "title": review_title(), "comment": review_comment()},
            {"rating": 6, "title": review_title(), "comment": review_comment()},
            {"rating": valid_rating(), "title": "   ", "comment": review_comment()},
            {"rating": valid_rating(), "title": "x" * (TITLE_MAX_LENGTH + 1), "comment": review_comment()},
            {"rating": valid_rating(), "title": review_title(), "comment": ""},
            {"rating": 0, "title": "", "comment": ""},
        ]
    )
