"""
Schema — Pydantic models crossing the compiler boundary.

  1. PackageManifest   — the npm package.json handed to dnt.
  2. BuildOptions      — the full dnt ``build()`` options object.
  3. ReleaseReport     — in-memory receipt of a finished release.

Models sent to dnt dump with its camelCase keys (``by_alias=True``).
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from npm_release import BUILDER_VERSION, PACKAGE_NAME, SCHEMA_VERSION


# ── Manifest parts ───────────────────────────────────────────────────────────

class Repository(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = "git"
    url: str


class Bugs(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str


class Person(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: Optional[str] = None
    url: Optional[str] = None


# ── Manifest ─────────────────────────────────────────────────────────────────

class ManifestTemplate(BaseModel):
    """Everything in package.json that is fixed at design time."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str = ""
    license: str
    repository: Optional[Repository] = None
    bugs: Optional[Bugs] = None
    engines: Dict[str, str] = Field(default_factory=dict)
    author: Optional[Person] = None
    contributors: List[str] = Field(default_factory=list)
    dev_dependencies: Dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )
    keywords: List[str] = Field(default_factory=list)


class PackageManifest(ManifestTemplate):
    """Template plus the release version."""

    version: str = Field(..., min_length=1)

    def to_package_json(self) -> Dict[str, Any]:
        """package.json mapping, ``name`` and ``version`` first."""
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        head = {"name": data.pop("name"), "version": data.pop("version")}
        return {**head, **data}


# ── Compiler options ─────────────────────────────────────────────────────────

class CompilerOptions(BaseModel):
    """TypeScript lib surface the emitted code may assume."""

    model_config = ConfigDict(frozen=True)

    lib: List[str] = Field(default_factory=list)


class BuildOptions(BaseModel):
    """Options object for dnt's ``build()``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    entry_points: List[str] = Field(..., min_length=1, alias="entryPoints")
    out_dir: str = Field(..., alias="outDir")
    test_pattern: Optional[str] = Field(default=None, alias="testPattern")
    shims: Dict[str, Any] = Field(default_factory=dict)
    compiler_options: CompilerOptions = Field(
        default_factory=CompilerOptions, alias="compilerOptions"
    )
    mappings: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    package: PackageManifest

    def to_dnt_options(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        data["package"] = self.package.to_package_json()
        return data


# ── Release report ───────────────────────────────────────────────────────────

class ArtifactEntry(BaseModel):
    """One file in the finished output directory."""

    path_rel: str
    sha256: str
    size_bytes: int


class ReleaseReport(BaseModel):
    """What a successful run left in the output directory."""

    package_name: str = PACKAGE_NAME
    builder_version: str = BUILDER_VERSION
    schema_version: str = SCHEMA_VERSION
    profile_id: str

    version: str
    package: str            # npm package name
    out_dir: str

    artifacts: List[ArtifactEntry] = Field(default_factory=list)
    auxiliary_files: List[str] = Field(default_factory=list)

    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
