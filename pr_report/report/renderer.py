import dataclasses
import html
import logging
import typing

import aiofile

import pr_report.github.models as github_models

logger = logging.getLogger(__name__)

DEFAULT_REPORT_PATH = "prs_and_reviews.html"
REPORT_TITLE = "GitHub PRs and Reviews"
REPORT_HEADING = "Your Pull Requests and Reviews"


def _escape(value: str | None) -> str:
    if value is None:
        return ""

    return html.escape(value, quote=True)


def _render_review(review: github_models.Review) -> str:
    return (
        f"<li><strong>{_escape(review.author)}</strong> ({_escape(review.state)}): {_escape(review.body)}</li>"
    )


def _render_pull_request(pull_request: github_models.PullRequest) -> list[str]:
    lines = [
        "      <li>",
        f'        <a href="{_escape(pull_request.url)}" target="_blank">{_escape(pull_request.title)}</a>',
        "        <ul>",
    ]
    lines.extend(f"          {_render_review(review)}" for review in pull_request.reviews)
    lines.extend(
        [
            "        </ul>",
            "      </li>",
        ]
    )
    return lines


def render_report(pull_requests: typing.Iterable[github_models.PullRequest]) -> str:
    """
    Renders pull requests and their reviews as a standalone HTML document.

    Output depends only on the given sequence, in order. Every interpolated value is HTML-escaped,
    missing authors are rendered as empty strings.
    """
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "  <head>",
        '    <meta charset="UTF-8">',
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"    <title>{REPORT_TITLE}</title>",
        "  </head>",
        "  <body>",
        f"    <h1>{REPORT_HEADING}</h1>",
        "    <ul>",
    ]
    for pull_request in pull_requests:
        lines.extend(_render_pull_request(pull_request))
    lines.extend(
        [
            "    </ul>",
            "  </body>",
            "</html>",
        ]
    )

    return "\n".join(lines) + "\n"


@dataclasses.dataclass(frozen=True)
class ReportRenderer:
    path: str = DEFAULT_REPORT_PATH

    async def render(self, pull_requests: typing.Sequence[github_models.PullRequest]) -> str:
        content = render_report(pull_requests)

        logger.debug("Writing report with %s pull requests to %s", len(pull_requests), self.path)
        async with aiofile.async_open(self.path, "w", encoding="utf-8") as file:
            await file.write(content)

        return self.path


__all__ = [
    "DEFAULT_REPORT_PATH",
    "REPORT_HEADING",
    "REPORT_TITLE",
    "ReportRenderer",
    "render_report",
]
