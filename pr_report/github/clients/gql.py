import abc
import asyncio
import contextlib
import dataclasses
import datetime
import logging
import typing

import aiohttp
import gql
import gql.transport.aiohttp as gql_aiohttp
import gql.transport.exceptions as gql_exceptions
import graphql
import pydantic
import pydantic.alias_generators as pydantic_alias_generators

import pr_report.github.models as github_models
import pr_report.utils.json as json_utils
import pr_report.utils.pydantic as pydantic_utils

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"


class BaseRequest(abc.ABC):
    @property
    @abc.abstractmethod
    def document(self) -> graphql.DocumentNode: ...

    @property
    def params(self) -> dict[str, typing.Any]:
        raise NotImplementedError


class BaseModel(pydantic_utils.BaseModel):
    model_config = pydantic.ConfigDict(alias_generator=pydantic_alias_generators.to_camel)


class BaseResponse(BaseModel):
    def to_dataclass(self) -> typing.Any:
        raise NotImplementedError


ResponseT = typing.TypeVar("ResponseT", bound=BaseResponse)


class _Author(BaseModel):
    login: str


@dataclasses.dataclass(frozen=True)
class GetViewerRequest(BaseRequest):
    @property
    def document(self) -> graphql.DocumentNode:
        return gql.gql(
            """
            query getViewer {
                viewer {
                    login
                    name
                    url
                }
            }
            """
        )

    @property
    def params(self) -> dict[str, typing.Any]:
        return {}


class GetViewerResponse(BaseResponse):
    class Viewer(BaseModel):
        login: str
        name: str | None = None
        url: str | None = None

    viewer: Viewer

    def to_dataclass(self) -> github_models.Viewer:
        return github_models.Viewer(
            login=self.viewer.login,
            name=self.viewer.name,
            url=self.viewer.url,
        )


def build_date_filter(from_date: str | None = None, to_date: str | None = None) -> str:
    if not from_date and not to_date:
        return ""

    bounds: list[str] = []
    if from_date:
        bounds.append(f'gte: "{from_date}"')
    if to_date:
        bounds.append(f'lte: "{to_date}"')

    return f"createdAt: {{{', '.join(bounds)}}}"


def build_search_query(
    organization: github_models.OrganizationName,
    login: github_models.UserLogin,
    from_date: str | None = None,
    to_date: str | None = None,
) -> str:
    """
    Builds the search filter for pull requests authored by `login` in `organization`.

    Values are used verbatim. The result always keeps the separator after the author
    qualifier, so without dates it ends with a trailing space.
    """
    return f"org:{organization} is:pr author:{login} {build_date_filter(from_date, to_date)}"


@dataclasses.dataclass(frozen=True)
class GetPullRequestsRequest(BaseRequest):
    organization: github_models.OrganizationName
    author: github_models.UserLogin
    from_date: str | None = None
    to_date: str | None = None
    limit: int = 100
    reviews_limit: int = 10

    @property
    def document(self) -> graphql.DocumentNode:
        return gql.gql(
            """
            query getPullRequestsAndReviews($query: String!, $limit: Int!, $reviewsLimit: Int!) {
                search(query: $query, type: ISSUE, first: $limit) {
                    edges {
                        node {
                            ... on PullRequest {
                                id
                                title
                                url
                                createdAt
                                author {
                                    login
                                }
                                reviews(first: $reviewsLimit) {
                                    edges {
                                        node {
                                            id
                                            author {
                                                login
                                            }
                                            state
                                            body
                                        }
                                    }
                                }
                            }
                        }
                    }
                }
            }
            """
        )

    @property
    def search_query(self) -> str:
        return build_search_query(
            organization=self.organization,
            login=self.author,
            from_date=self.from_date,
            to_date=self.to_date,
        )

    @property
    def params(self) -> dict[str, typing.Any]:
        return {
            "query": self.search_query,
            "limit": self.limit,
            "reviewsLimit": self.reviews_limit,
        }


class GetPullRequestsResponse(BaseResponse):
    class Search(BaseModel):
        class Edge(BaseModel):
            class PR(BaseModel):
                class Reviews(BaseModel):
                    class ReviewEdge(BaseModel):
                        class Review(BaseModel):
                            id: str
                            author: _Author | None
                            state: str
                            body: str

                        node: Review

                    edges: list[ReviewEdge]

                id: str
                title: str
                url: str
                created_at: datetime.datetime
                author: _Author | None
                reviews: Reviews

            node: PR

        edges: list[Edge]

    search: Search

    def to_dataclass(self) -> list[github_models.PullRequest]:
        return [
            github_models.PullRequest(
                id=edge.node.id,
                author=edge.node.author.login if edge.node.author else None,
                url=edge.node.url,
                title=edge.node.title,
                created_at=edge.node.created_at,
                reviews=tuple(
                    github_models.Review(
                        id=review_edge.node.id,
                        author=review_edge.node.author.login if review_edge.node.author else None,
                        state=review_edge.node.state,
                        body=review_edge.node.body,
                    )
                    for review_edge in edge.node.reviews.edges
                ),
            )
            for edge in self.search.edges
        ]


@dataclasses.dataclass(frozen=True)
class GqlGithubClient:
    token: str
    url: str = GITHUB_GRAPHQL_URL

    class BaseError(Exception): ...

    class RequestError(BaseError): ...

    class ResponseError(BaseError): ...

    @contextlib.asynccontextmanager
    async def _gql_client(self) -> typing.AsyncGenerator[gql.Client, None]:
        gql_transport = gql_aiohttp.AIOHTTPTransport(
            url=self.url,
            headers={
                "Authorization": f"Bearer {self.token}",
                "Content-Type": "application/json",
            },
            ssl=True,
            json_serialize=json_utils.dumps_str,
        )
        gql_client = gql.Client(
            transport=gql_transport,
            fetch_schema_from_transport=False,
            execute_timeout=None,
        )
        try:
            yield gql_client
        finally:
            await gql_transport.close()

    async def _request(
        self,
        request: BaseRequest,
        response_model: type[ResponseT],
    ) -> ResponseT:
        document = request.document
        logger.debug("Requesting document(%s) params(%s)", document, request.params)
        try:
            async with self._gql_client() as gql_client:
                response = await gql_client.execute_async(
                    document=document,
                    variable_values=request.params,
                )
        except gql_exceptions.TransportQueryError as e:
            if e.data is None:
                logger.error("GitHub API request failed: %r", e)
                raise self.RequestError(f"GitHub API request failed: {e!r}") from e

            logger.warning("GitHub API returned partial data with errors: %s", e.errors)
            response = e.data
        except gql_exceptions.TransportServerError as e:
            logger.error("GitHub API request failed with status: %s", e.code)
            raise self.RequestError(f"GitHub API request failed with status: {e.code}") from e
        except (gql_exceptions.TransportError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("GitHub API request failed: %r", e)
            raise self.RequestError(f"GitHub API request failed: {e!r}") from e

        try:
            parsed_response = response_model.model_validate(response)
        except pydantic.ValidationError as e:
            logger.error("GitHub API response has unexpected shape: %s", e)
            raise self.ResponseError(f"Unexpected {response_model.__name__} shape") from e

        return parsed_response

    async def get_viewer(self) -> github_models.Viewer:
        response = await self._request(GetViewerRequest(), GetViewerResponse)
        return response.to_dataclass()

    async def get_pull_requests(
        self,
        request: GetPullRequestsRequest,
    ) -> list[github_models.PullRequest]:
        response = await self._request(request, GetPullRequestsResponse)
        return response.to_dataclass()


__all__ = [
    "GITHUB_GRAPHQL_URL",
    "GetPullRequestsRequest",
    "GetViewerRequest",
    "GqlGithubClient",
    "build_date_filter",
    "build_search_query",
]
