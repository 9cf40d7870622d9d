import dataclasses
import enum
import logging
import typing

import pr_report.app.errors as app_errors
import pr_report.app.settings as app_settings
import pr_report.github.clients as github_clients
import pr_report.github.models as github_models
import pr_report.report as report
import pr_report.utils.logging as logging_utils

logger = logging.getLogger(__name__)


class RunState(enum.StrEnum):
    START = "START"
    IDENTITY_RESOLVED = "IDENTITY_RESOLVED"
    DATA_FETCHED = "DATA_FETCHED"
    RENDERED = "RENDERED"
    FAILED = "FAILED"


@dataclasses.dataclass(frozen=True)
class ReportQuery:
    organization: github_models.OrganizationName
    from_date: str | None = None
    to_date: str | None = None

    @classmethod
    def from_args(
        cls,
        organization: str | None,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> typing.Self:
        if not organization:
            raise app_errors.ConfigurationError("Please provide an organization name.")

        return cls(
            organization=organization,
            from_date=from_date or None,
            to_date=to_date or None,
        )


@dataclasses.dataclass(frozen=True)
class Application:
    github_client: github_clients.GqlGithubClient
    report_renderer: report.ReportRenderer
    pull_requests_limit: int = 100
    reviews_limit: int = 10

    @classmethod
    def from_settings(cls, settings: app_settings.Settings) -> typing.Self:
        log_level = "DEBUG" if settings.app.is_debug else settings.logs.level
        logging_config = logging_utils.create_config(
            log_level=log_level,
            log_format=settings.logs.format,
            loggers={
                "gql.transport.aiohttp": logging_utils.LoggerConfig(level="WARNING"),
            },
        )
        logging_utils.initialize(config=logging_config)
        logger.debug("Logging has been initialized with config: %s", logging_config)

        if not settings.github_token:
            raise app_errors.ConfigurationError("GitHub token (GH_TOKEN) is missing.")
        logging_utils.register_secret(settings.github_token, "GH_TOKEN")

        logger.debug("Initializing application")
        github_client = github_clients.GqlGithubClient(
            token=settings.github_token,
            url=settings.github.url,
        )
        report_renderer = report.ReportRenderer(path=settings.report.path)

        return cls(
            github_client=github_client,
            report_renderer=report_renderer,
            pull_requests_limit=settings.github.pull_requests_limit,
            reviews_limit=settings.github.reviews_limit,
        )

    async def resolve_identity(self) -> github_models.UserLogin:
        try:
            viewer = await self.github_client.get_viewer()
        except github_clients.GqlGithubClient.RequestError as e:
            raise app_errors.TransportError(f"Error fetching GitHub user data: {e}") from e
        except github_clients.GqlGithubClient.ResponseError as e:
            raise app_errors.ShapeError(f"Error fetching GitHub user data: {e}") from e

        return viewer.login

    async def fetch_report(self, query: ReportQuery, login: github_models.UserLogin) -> list[github_models.PullRequest]:
        request = github_clients.GetPullRequestsRequest(
            organization=query.organization,
            author=login,
            from_date=query.from_date,
            to_date=query.to_date,
            limit=self.pull_requests_limit,
            reviews_limit=self.reviews_limit,
        )
        try:
            return await self.github_client.get_pull_requests(request)
        except github_clients.GqlGithubClient.RequestError as e:
            raise app_errors.TransportError(f"Error fetching data from GitHub: {e}") from e
        except github_clients.GqlGithubClient.ResponseError as e:
            raise app_errors.ShapeError(f"Error fetching data from GitHub: {e}") from e

    async def run(self, query: ReportQuery) -> str:
        """
        Resolves the viewer, fetches their pull requests and writes the report.

        Runs strictly in order, without retries. Nothing is written unless both requests succeed,
        write errors are not handled here.
        """
        state = RunState.START
        logger.debug("Run state: %s, query: %s", state, query)
        try:
            login = await self.resolve_identity()
            state = RunState.IDENTITY_RESOLVED
            logger.info("Resolved GitHub user: %s", login)

            pull_requests = await self.fetch_report(query, login=login)
            state = RunState.DATA_FETCHED
            logger.info("Fetched %s pull requests from %s", len(pull_requests), query.organization)
        except app_errors.ApplicationError:
            logger.debug("Run state: %s -> %s", state, RunState.FAILED)
            raise

        path = await self.report_renderer.render(pull_requests)
        state = RunState.RENDERED
        logger.debug("Run state: %s", state)

        return path


__all__ = [
    "Application",
    "ReportQuery",
    "RunState",
]
