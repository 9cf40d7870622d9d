import warnings

import pydantic
import pydantic_settings

import pr_report.github.clients as github_clients
import pr_report.report as report
import pr_report.utils.logging as logging_utils
import pr_report.utils.pydantic as pydantic_utils


class AppSettings(pydantic_utils.BaseModel):
    env: str = "production"
    debug: bool = False

    @property
    def is_development(self) -> bool:
        return self.env == "development"

    @property
    def is_debug(self) -> bool:
        if self.debug and not self.is_development:
            warnings.warn("PR_REPORT_APP__DEBUG is True in non-development environment", UserWarning)

        return self.debug


class LoggingSettings(pydantic_utils.BaseModel):
    level: logging_utils.LogLevel = "INFO"
    format: str = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class GithubSettings(pydantic_utils.BaseModel):
    url: str = github_clients.GITHUB_GRAPHQL_URL
    pull_requests_limit: int = pydantic.Field(default=100, gt=0, le=100)
    reviews_limit: int = pydantic.Field(default=10, gt=0, le=100)


class ReportSettings(pydantic_utils.BaseModel):
    path: str = report.DEFAULT_REPORT_PATH


class Settings(pydantic_utils.BaseSettings):
    app: AppSettings = pydantic.Field(default_factory=AppSettings)
    logs: LoggingSettings = pydantic.Field(default_factory=LoggingSettings)
    github: GithubSettings = pydantic.Field(default_factory=GithubSettings)
    report: ReportSettings = pydantic.Field(default_factory=ReportSettings)

    github_token: str = pydantic.Field(default="", validation_alias="GH_TOKEN")

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix="PR_REPORT_",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[pydantic_settings.BaseSettings],
        init_settings: pydantic_settings.PydanticBaseSettingsSource,
        env_settings: pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[pydantic_settings.PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
        )


__all__ = [
    "AppSettings",
    "GithubSettings",
    "LoggingSettings",
    "ReportSettings",
    "Settings",
]
