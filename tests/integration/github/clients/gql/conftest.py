import pytest

import pr_report.github.clients as github_clients
import tests.settings as test_settings


@pytest.fixture(name="github_gql_client")
def github_gql_client_fixture(settings: test_settings.Settings) -> github_clients.GqlGithubClient:
    if not settings.github_token:
        pytest.skip("GH_TOKEN is not set")

    return github_clients.GqlGithubClient(token=settings.github_token)
