"""Development information models for Jira's dev-status integration.

Covers the summary endpoint (``/rest/dev-status/latest/issue/summary``) and
the per-data-type detail endpoint (``/rest/dev-status/latest/issue/detail``).
"""

from dataclasses import dataclass

from pydantic import Field

from ..base import ApiModel


class DevInfoOverall(ApiModel):
    count: int = 0
    last_updated: str | None = None
    state: str | None = None


class DevInfoSummaryEntry(ApiModel):
    overall: DevInfoOverall | None = None

    @property
    def count(self) -> int:
        return self.overall.count if self.overall else 0


class DevInfoSummary(ApiModel):
    repository: DevInfoSummaryEntry | None = None
    branch: DevInfoSummaryEntry | None = None
    pullrequest: DevInfoSummaryEntry | None = None


class DevInfoSummaryResponse(ApiModel):
    """Counts of repositories, branches and pull requests linked to an issue."""

    summary: DevInfoSummary | None = None

    @property
    def has_data(self) -> bool:
        if not self.summary:
            return False
        return any(
            entry is not None and entry.count
            for entry in (
                self.summary.repository,
                self.summary.branch,
                self.summary.pullrequest,
            )
        )


class DevInfoAuthor(ApiModel):
    name: str | None = None
    avatar: str | None = None


class DevInfoCommit(ApiModel):
    id: str | None = None
    display_id: str = ""
    message: str = ""
    author: DevInfoAuthor | None = None
    author_timestamp: str | None = None
    url: str | None = None
    file_count: int = 0
    merge: bool = False

    @property
    def headline(self) -> str:
        return self.message.split("\n", 1)[0]


class DevInfoRepository(ApiModel):
    id: str | None = None
    name: str = ""
    url: str | None = None
    commits: list[DevInfoCommit] = Field(default_factory=list)


class DevInfoBranch(ApiModel):
    name: str = ""
    url: str | None = None
    create_pull_request_url: str | None = None
    repository: DevInfoRepository | None = None
    last_commit: DevInfoCommit | None = None


class DevInfoRef(ApiModel):
    branch: str | None = None
    url: str | None = None


class DevInfoReviewer(ApiModel):
    name: str = ""
    approved: bool = False


class DevInfoPullRequest(ApiModel):
    id: str | None = None
    name: str = ""
    comment_count: int = 0
    source: DevInfoRef | None = None
    destination: DevInfoRef | None = None
    reviewers: list[DevInfoReviewer] = Field(default_factory=list)
    status: str = ""
    url: str | None = None
    last_update: str | None = None
    repository_name: str | None = None
    author: DevInfoAuthor | None = None


class DevInfoDetail(ApiModel):
    repositories: list[DevInfoRepository] = Field(default_factory=list)
    branches: list[DevInfoBranch] = Field(default_factory=list)
    pull_requests: list[DevInfoPullRequest] = Field(default_factory=list)


class DevInfoResponse(ApiModel):
    """Detail payload for one data type (repository, branch or pullrequest)."""

    errors: list = Field(default_factory=list)
    detail: list[DevInfoDetail] = Field(default_factory=list)


@dataclass
class DevelopmentInformation:
    """All development data linked to an issue, fetched together."""

    summary: DevInfoSummaryResponse | None = None
    commits: DevInfoResponse | None = None
    branches: DevInfoResponse | None = None
    pull_requests: DevInfoResponse | None = None

    @property
    def has_data(self) -> bool:
        return self.summary is not None and self.summary.has_data
