"""Immutable description of the machine and session a request runs in."""

from pydantic import BaseModel, ConfigDict, Field

UNAVAILABLE = "unavailable"


class VcsInfo(BaseModel):
    """Git state of the working directory."""

    model_config = ConfigDict(frozen=True)

    is_repository: bool = False
    branch: str | None = None
    recent_status_lines: tuple[str, ...] = ()


class ProjectHints(BaseModel):
    """Contents of an optional ``.ask.json`` project descriptor."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    stack: str | None = None
    package_manager: str | None = Field(default=None, alias="packageManager")
    tags: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not (self.stack or self.package_manager or self.tags)


class EnvironmentSnapshot(BaseModel):
    """Captured once per invocation and never mutated afterwards."""

    model_config = ConfigDict(frozen=True)

    platform: str
    shell: str
    user: str | None = None
    cwd: str
    files: tuple[str, ...] = ()
    files_truncated: bool = False
    files_available: bool = True
    tools: tuple[str, ...] = ()
    vcs: VcsInfo | None = None
    project: ProjectHints | None = None
