import dataclasses
import datetime
import typing

UserLogin: typing.TypeAlias = str
OrganizationName: typing.TypeAlias = str
ReviewState: typing.TypeAlias = str


@dataclasses.dataclass(frozen=True)
class Viewer:
    login: UserLogin
    name: str | None
    url: str | None = None


@dataclasses.dataclass(frozen=True)
class Review:
    id: str
    author: UserLogin | None
    state: ReviewState
    body: str


@dataclasses.dataclass(frozen=True)
class PullRequest:
    id: str
    author: UserLogin | None
    url: str
    title: str
    created_at: datetime.datetime
    reviews: tuple[Review, ...] = ()


__all__ = [
    "OrganizationName",
    "PullRequest",
    "Review",
    "ReviewState",
    "UserLogin",
    "Viewer",
]
