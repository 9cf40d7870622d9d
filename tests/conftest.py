import datetime
import logging
import typing

import pytest

import pr_report.github.models as github_models
import pr_report.utils.logging as logging_utils
import tests.settings as test_settings


@pytest.fixture(name="settings")
def settings_fixture() -> test_settings.Settings:
    return test_settings.Settings()


@pytest.fixture(name="clear_secrets", autouse=True)
def clear_secrets_fixture() -> None:
    logging_utils.clear_secrets()


@pytest.fixture(name="restore_root_logger", autouse=True)
def restore_root_logger_fixture() -> typing.Generator[None, None, None]:
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)


@pytest.fixture(name="pull_requests")
def pull_requests_fixture() -> list[github_models.PullRequest]:
    return [
        github_models.PullRequest(
            id="PR_1",
            author="alice",
            url="https://github.com/acme/api/pull/1",
            title="Add health endpoint",
            created_at=datetime.datetime(2024, 3, 1, 10, 0, tzinfo=datetime.UTC),
            reviews=(
                github_models.Review(
                    id="PRR_1",
                    author="bob",
                    state="CHANGES_REQUESTED",
                    body="Please add tests",
                ),
                github_models.Review(
                    id="PRR_2",
                    author="bob",
                    state="APPROVED",
                    body="",
                ),
            ),
        ),
        github_models.PullRequest(
            id="PR_2",
            author="alice",
            url="https://github.com/acme/web/pull/7",
            title="Bump dependencies",
            created_at=datetime.datetime(2024, 3, 2, 12, 30, tzinfo=datetime.UTC),
        ),
    ]
