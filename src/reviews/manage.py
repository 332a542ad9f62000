"""Reviews management CLI.

Works against the repository selected by REVIEW_REPOSITORY (see
reviews.config).

Usage:
    python -m reviews.manage seed                       # Save the sample reviews
    python -m reviews.manage list                       # Newest first
    python -m reviews.manage list --sort rating --order asc
"""

import argparse
import asyncio
import sys
from dataclasses import replace

from reviews.config import Settings
from reviews.container import build_services
from reviews.review.review import SortOrder, get_average_rating, sort_by_date, sort_by_rating
from reviews.seed import seed_reviews
from reviews.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


async def seed(settings: Settings) -> int:
    services = build_services(settings)
    try:
        print(f"Seeding {settings.repository} review repository...")
        count = await seed_reviews(services.repository)
        print(f"Seeded {count} reviews.")
        return count
    finally:
        await services.close()


async def list_reviews(settings: Settings, sort: str = "date", order: str = "desc") -> int:
    services = build_services(settings)
    try:
        result = await services.list_reviews()
    finally:
        await services.close()

    if not result.success:
        for error in result.errors:
            print(f"Error: {error}", file=sys.stderr)
        return 1

    reviews = sort_by_rating(result.reviews, order) if sort == "rating" else sort_by_date(result.reviews, order)
    for review in reviews:
        print(f"{review.id}  {review.rating}/5  {review.created_at.isoformat()}  {review.title}")
    print(f"{result.total_count} reviews, average rating {get_average_rating(reviews):.2f}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Reviews management")
    parser.add_argument(
        "--repository",
        choices=["memory", "cosmos"],
        help="Override REVIEW_REPOSITORY",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("seed", help="Save the sample reviews into the repository")

    list_parser = subparsers.add_parser("list", help="Print stored reviews")
    list_parser.add_argument("--sort", choices=["date", "rating"], default="date")
    list_parser.add_argument("--order", choices=[o.value for o in SortOrder], default=SortOrder.DESC.value)

    args = parser.parse_args(argv)

    settings = Settings.from_env()
    if args.repository:
        settings = replace(settings, repository=args.repository)
    configure_logging(settings)

    try:
        if args.command == "seed":
            asyncio.run(seed(settings))
        elif args.command == "list":
            sys.exit(asyncio.run(list_reviews(settings, sort=args.sort, order=args.order)))
    except Exception as exc:
        logger.error("manage_command_failed", command=args.command, error=str(exc), exc_info=True)
        print(f"Error running {args.command}: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
