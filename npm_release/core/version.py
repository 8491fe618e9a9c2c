"""
Version resolver — the release version from the command line.

Runs before anything touches the filesystem.  The version string is
passed through untouched: no trimming, no semver parsing.
"""
from dataclasses import dataclass
from typing import Optional


class MissingVersionError(ValueError):
    """No (or an empty) version argument was supplied."""

    def __init__(self, message: str = "Please specify a version."):
        super().__init__(message)


@dataclass(frozen=True)
class BuildRequest:
    """One release build, identified by its version."""

    version: str

    def __post_init__(self):
        if not self.version:
            raise MissingVersionError()


def resolve_version(value: Optional[str]) -> BuildRequest:
    """
    Turn the positional version argument into a BuildRequest.

    Raises MissingVersionError when *value* is None or "".
    """
    if value is None or value == "":
        raise MissingVersionError()
    return BuildRequest(version=value)
