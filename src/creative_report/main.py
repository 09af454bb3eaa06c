# src/creative_report/main.py
import logging
import click

from creative_report import __version__
from creative_report.config import Settings, load_settings
from creative_report.dates import MonthSpec, parse_month, previous_month
from creative_report.exceptions import ReportError
from creative_report.platforms.base import ReviewPlatform
from creative_report.platforms.space import SpaceClient
from creative_report.report.render import render_document


logger = logging.getLogger(__name__)


def get_platform(settings: Settings) -> ReviewPlatform:
    return SpaceClient(domain=settings.space_domain, token=settings.space_token)


def generate_report(
    settings: Settings,
    month: MonthSpec,
    platform: ReviewPlatform | None = None,
) -> str:
    """Fetch the month's code reviews and render the declaration document."""
    platform = platform or get_platform(settings)
    reviews = platform.fetch_reviews(
        project_id=settings.space_project_id,
        author=settings.space_user_id,
        start_date=month.start_date,
        end_date=month.end_date,
    )
    return render_document(
        reviews,
        month=month,
        percent_creative=settings.percent_creative,
        domain=settings.space_domain,
        author=settings.user_name,
    )


@click.command()
@click.version_option(version=__version__, prog_name="creative-report")
@click.argument("month", required=False)
@click.option(
    "--env-file",
    default=".env",
    show_default=True,
    help="Dotenv file with the SPACE_* settings.",
)
def main(month: str | None, env_file: str):
    """Print the creative-work declaration for MONTH (YYYY-MM, default: previous month)."""
    try:
        month_spec = parse_month(month) if month is not None else previous_month()
        settings = load_settings(env_file)

        logging.basicConfig(level=settings.logging_level)
        logger.info(f"Generating declaration for {month_spec.label}")

        rendered = generate_report(settings, month_spec)
    except ReportError as e:
        raise click.ClickException(str(e)) from e

    click.echo(rendered)


if __name__ == "__main__":
    main()
