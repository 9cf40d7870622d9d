from .gql import (
    GITHUB_GRAPHQL_URL,
    GetPullRequestsRequest,
    GetViewerRequest,
    GqlGithubClient,
    build_date_filter,
    build_search_query,
)

__all__ = [
    "GITHUB_GRAPHQL_URL",
    "GetPullRequestsRequest",
    "GetViewerRequest",
    "GqlGithubClient",
    "build_date_filter",
    "build_search_query",
]
