"""
Release runner — top-level orchestration: version → npm package on disk.

This module ties the core stages together into a single ``run_release``
function that can be called from the CLI or programmatically.  Stages run
strictly in order and the first failure aborts the rest:

    resolve version → stage out dir → shims → manifest → build → finalize

The version is checked before anything touches the filesystem.
"""
from __future__ import annotations

import argparse
import logging
import sys
from enum import Enum, unique
from pathlib import Path
from typing import List, Optional

from npm_release.config import settings
from npm_release.core.catalog import catalog_output
from npm_release.core.compiler import CompilationError, Compiler, DntCompiler
from npm_release.core.finalize import copy_auxiliary_files
from npm_release.core.manifest import synthesize_manifest
from npm_release.core.orchestrator import assemble_build_options, run_build
from npm_release.core.shims import configure_shims
from npm_release.core.staging import empty_dir
from npm_release.core.version import MissingVersionError, resolve_version
from npm_release.io.schema import ReleaseReport
from npm_release.policy.profile import ReleaseProfile

logger = logging.getLogger(__name__)


@unique
class Stage(str, Enum):
    RESOLVE_VERSION = "RESOLVE_VERSION"
    STAGE_OUTPUT = "STAGE_OUTPUT"
    CONFIGURE_SHIMS = "CONFIGURE_SHIMS"
    SYNTHESIZE_MANIFEST = "SYNTHESIZE_MANIFEST"
    BUILD = "BUILD"
    FINALIZE = "FINALIZE"
    REPORT = "REPORT"


def run_release(
    version: Optional[str],
    profile: ReleaseProfile | None = None,
    project_root: Path | None = None,
    compiler: Compiler | None = None,
) -> ReleaseReport:
    """
    Build the npm package for *version*.

    Parameters
    ----------
    version : str or None
        Release version, copied verbatim into package.json.
    profile : ReleaseProfile, optional
        Release description.  Defaults to ReleaseProfile.v0().
    project_root : Path, optional
        Directory holding the entry points and auxiliary files.
        Defaults to the current working directory.
    compiler : Compiler, optional
        Build backend.  Defaults to DntCompiler().

    Returns
    -------
    ReleaseReport

    Raises
    ------
    MissingVersionError, OSError, CompilationError
        Whatever the failing stage raised, unchanged.
    """
    # ── Step 1: version (no side effects before this passes) ─────────
    try:
        request = resolve_version(version)
    except MissingVersionError:
        logger.error("Release aborted at %s", Stage.RESOLVE_VERSION.value)
        raise

    if profile is None:
        profile = ReleaseProfile.v0()
    if project_root is None:
        project_root = Path.cwd()
    if compiler is None:
        compiler = DntCompiler()

    out_dir = project_root / profile.out_dir
    stage = Stage.STAGE_OUTPUT

    try:
        # ── Step 2: stage output directory ───────────────────────────
        empty_dir(out_dir)

        # ── Step 3: shims and module mappings ────────────────────────
        stage = Stage.CONFIGURE_SHIMS
        shims = configure_shims(profile.deno_shims, profile.mappings)

        # ── Step 4: manifest ─────────────────────────────────────────
        stage = Stage.SYNTHESIZE_MANIFEST
        manifest = synthesize_manifest(profile.manifest, request)

        # ── Step 5: build ────────────────────────────────────────────
        stage = Stage.BUILD
        options = assemble_build_options(profile, shims, manifest)
        run_build(compiler, options, project_root)

        # ── Step 6: auxiliary files ──────────────────────────────────
        stage = Stage.FINALIZE
        copied = copy_auxiliary_files(profile.auxiliary_files, project_root, out_dir)

    except Exception:
        logger.error("Release %s aborted at %s", request.version, stage.value)
        raise

    # ── Step 7: report ──────────────────────────────────────────
    try:
        artifacts = catalog_output(out_dir)
    except OSError as e:
        logger.warning("%s failed, package is complete: %s", Stage.REPORT.value, e)
        artifacts = []

    report = ReleaseReport(
        profile_id=profile.profile_id,
        version=request.version,
        package=manifest.name,
        out_dir=str(out_dir),
        artifacts=artifacts,
        auxiliary_files=[p.relative_to(out_dir).as_posix() for p in copied],
    )
    logger.info(
        "Release %s@%s complete: %d files in %s",
        report.package, report.version, len(report.artifacts), out_dir,
    )
    return report


# ── CLI ──────────────────────────────────────────────────────────────────────

def main(argv: List[str] | None = None) -> int:
    """CLI entry point: ``npm-release <version>``."""
    parser = argparse.ArgumentParser(
        prog="npm-release",
        description="Build the npm package for a release of this Deno module",
    )
    parser.add_argument(
        "version",
        nargs="?",
        default=None,
        help="Release version, written verbatim into package.json",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    profile = ReleaseProfile.v0()
    compiler = DntCompiler(deno_bin=settings.DENO_BIN, dnt_module=settings.DNT_MODULE)

    try:
        run_release(args.version, profile=profile, compiler=compiler)
    except CompilationError as e:
        logger.error("%s", e)
        if e.stdout:
            print(e.stdout, file=sys.stderr)
        if e.stderr:
            print(e.stderr, file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        logger.error("%s", e)
        return 1

    print(f"Build complete. Run `{profile.publish_hint}`.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
