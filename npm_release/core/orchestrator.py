"""
Build orchestrator — assemble the compiler options and run the build.

Compilation either fully succeeds or raises; CompilationError reaches
the caller exactly as the compiler raised it.
"""
import logging
from pathlib import Path

from npm_release.core.compiler import Compiler
from npm_release.core.shims import ShimConfig
from npm_release.io.schema import BuildOptions, CompilerOptions, PackageManifest
from npm_release.policy.profile import ReleaseProfile

logger = logging.getLogger(__name__)


def assemble_build_options(
    profile: ReleaseProfile,
    shims: ShimConfig,
    manifest: PackageManifest,
) -> BuildOptions:
    """Combine profile, shim config and manifest into one BuildOptions."""
    return BuildOptions(
        entry_points=list(profile.entry_points),
        out_dir=profile.out_dir,
        test_pattern=profile.test_pattern,
        shims=shims.to_shim_options(),
        compiler_options=CompilerOptions(lib=list(profile.compiler_lib)),
        mappings=shims.to_mapping_options(),
        package=manifest,
    )


def run_build(
    compiler: Compiler,
    options: BuildOptions,
    project_root: Path,
) -> None:
    """Delegate to *compiler*; errors propagate unchanged."""
    logger.info(
        "Building %s@%s from %s into %s",
        options.package.name,
        options.package.version,
        ", ".join(options.entry_points),
        options.out_dir,
    )
    compiler.build(options, project_root)
