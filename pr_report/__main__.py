import asyncio
import logging
import sys

import click

import pr_report.app as app

logger = logging.getLogger(__name__)


@click.command()
@click.argument("organization", required=False)
@click.argument("from_date", required=False)
@click.argument("to_date", required=False)
def main(organization: str | None, from_date: str | None, to_date: str | None) -> None:
    """Render pull requests you authored in ORGANIZATION, with their reviews, to prs_and_reviews.html.

    FROM_DATE and TO_DATE optionally bound the pull request creation date.
    """
    settings = app.Settings()

    try:
        application = app.Application.from_settings(settings)
        query = app.ReportQuery.from_args(organization, from_date=from_date, to_date=to_date)
        path = asyncio.run(application.run(query))
    except app.ApplicationError as e:
        logger.error(e.message)
        sys.exit(1)

    click.echo(f"Generated {path}")


if __name__ == "__main__":
    main()
