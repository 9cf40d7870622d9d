import pathlib
import unittest.mock

import click.testing
import gql
import gql.transport.exceptions as gql_exceptions
import pytest
import pytest_mock

import pr_report.__main__ as main_module

VIEWER_RESPONSE = {"viewer": {"login": "alice", "name": "Alice", "url": "https://github.com/alice"}}
SEARCH_RESPONSE = {
    "search": {
        "edges": [
            {
                "node": {
                    "id": "PR_1",
                    "title": "Add health endpoint",
                    "url": "https://github.com/acme/api/pull/1",
                    "createdAt": "2024-03-01T10:00:00Z",
                    "author": {"login": "alice"},
                    "reviews": {
                        "edges": [
                            {
                                "node": {
                                    "id": "PRR_1",
                                    "author": {"login": "bob"},
                                    "state": "APPROVED",
                                    "body": "LGTM",
                                },
                            },
                        ],
                    },
                },
            },
        ],
    },
}


@pytest.fixture(name="execute_async")
def execute_async_fixture(mocker: pytest_mock.MockerFixture) -> unittest.mock.AsyncMock:
    return mocker.patch.object(gql.Client, "execute_async", new_callable=mocker.AsyncMock)


@pytest.fixture(name="workdir")
def workdir_fixture(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PR_REPORT_REPORT__PATH", raising=False)
    return tmp_path


@pytest.fixture(name="runner")
def runner_fixture() -> click.testing.CliRunner:
    return click.testing.CliRunner()


def test_success(
    runner: click.testing.CliRunner,
    execute_async: unittest.mock.AsyncMock,
    workdir: pathlib.Path,
):
    execute_async.side_effect = [VIEWER_RESPONSE, SEARCH_RESPONSE]

    result = runner.invoke(main_module.main, ["acme", "2024-01-01"], env={"GH_TOKEN": "test_token"})

    assert result.exit_code == 0, result.output
    assert result.stdout == "Generated prs_and_reviews.html\n"
    assert execute_async.await_count == 2
    assert execute_async.call_args.kwargs["variable_values"]["query"] == (
        'org:acme is:pr author:alice createdAt: {gte: "2024-01-01"}'
    )

    document = (workdir / "prs_and_reviews.html").read_text(encoding="utf-8")
    assert '<a href="https://github.com/acme/api/pull/1" target="_blank">Add health endpoint</a>' in document
    assert "<li><strong>bob</strong> (APPROVED): LGTM</li>" in document


def test_missing_token(
    runner: click.testing.CliRunner,
    execute_async: unittest.mock.AsyncMock,
    workdir: pathlib.Path,
):
    result = runner.invoke(main_module.main, ["acme"], env={"GH_TOKEN": None})

    assert result.exit_code == 1
    assert "GitHub token (GH_TOKEN) is missing." in result.stderr
    assert execute_async.await_count == 0
    assert not (workdir / "prs_and_reviews.html").exists()


def test_missing_organization(
    runner: click.testing.CliRunner,
    execute_async: unittest.mock.AsyncMock,
    workdir: pathlib.Path,
):
    result = runner.invoke(main_module.main, [], env={"GH_TOKEN": "test_token"})

    assert result.exit_code == 1
    assert "Please provide an organization name." in result.stderr
    assert execute_async.await_count == 0
    assert not (workdir / "prs_and_reviews.html").exists()


def test_identity_failure(
    runner: click.testing.CliRunner,
    execute_async: unittest.mock.AsyncMock,
    workdir: pathlib.Path,
):
    execute_async.side_effect = gql_exceptions.TransportServerError("401, message='Unauthorized'", 401)

    result = runner.invoke(main_module.main, ["acme"], env={"GH_TOKEN": "test_token"})

    assert result.exit_code == 1
    assert "Error fetching GitHub user data" in result.stderr
    assert execute_async.await_count == 1
    assert not (workdir / "prs_and_reviews.html").exists()


def test_search_failure_leaves_previous_report(
    runner: click.testing.CliRunner,
    execute_async: unittest.mock.AsyncMock,
    workdir: pathlib.Path,
):
    (workdir / "prs_and_reviews.html").write_text("previous report", encoding="utf-8")
    execute_async.side_effect = [
        VIEWER_RESPONSE,
        gql_exceptions.TransportServerError("502, message='Bad Gateway'", 502),
    ]

    result = runner.invoke(main_module.main, ["acme"], env={"GH_TOKEN": "test_token"})

    assert result.exit_code == 1
    assert "status: 502" in result.stderr
    assert result.stdout == ""
    assert (workdir / "prs_and_reviews.html").read_text(encoding="utf-8") == "previous report"


def test_malformed_search_response(
    runner: click.testing.CliRunner,
    execute_async: unittest.mock.AsyncMock,
    workdir: pathlib.Path,
):
    execute_async.side_effect = [VIEWER_RESPONSE, {"search": None}]

    result = runner.invoke(main_module.main, ["acme"], env={"GH_TOKEN": "test_token"})

    assert result.exit_code == 1
    assert not (workdir / "prs_and_reviews.html").exists()


def test_token_is_masked_in_logs(
    runner: click.testing.CliRunner,
    execute_async: unittest.mock.AsyncMock,
    workdir: pathlib.Path,
):
    execute_async.side_effect = gql_exceptions.TransportQueryError("Bad credentials: ghp_secret_token")

    result = runner.invoke(main_module.main, ["acme"], env={"GH_TOKEN": "ghp_secret_token"})

    assert result.exit_code == 1
    assert "ghp_secret_token" not in result.stderr
    assert "***GH_TOKEN***" in result.stderr
