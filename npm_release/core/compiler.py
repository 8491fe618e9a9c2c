"""
Compiler — the cross-runtime build step, behind a one-method interface.

``DntCompiler`` hands the options to dnt (Deno-to-npm transform) through
a generated driver script:

    deno run -A <tmp>/build_npm.ts <tmp>/build_options.json

run from the project root, so entry points and outDir resolve against it.
dnt emits ESM/CJS modules, .d.ts declarations and package.json into
outDir and runs the Deno.test suite under Node with the declared shims.
"""
from __future__ import annotations

import logging
import subprocess
import tempfile
import textwrap
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from npm_release.io.schema import BuildOptions
from npm_release.io.writer import write_build_options

logger = logging.getLogger(__name__)

DEFAULT_DNT_MODULE = "https://deno.land/x/dnt@0.40.0/mod.ts"

DRIVER_TEMPLATE = textwrap.dedent("""\
    import {{ build }} from "{dnt_module}";

    const options = JSON.parse(await Deno.readTextFile(Deno.args[0]));
    await build(options);
""")


def _as_text(data) -> str:
    """Partial output from TimeoutExpired may be bytes, str or None."""
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


class CompilationError(RuntimeError):
    """The compiler failed; nothing about the output directory is promised."""

    def __init__(
        self,
        message: str,
        exit_code: int = -1,
        stderr: str = "",
        stdout: str = "",
    ):
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr
        self.stdout = stdout


class Compiler(ABC):
    """Turns BuildOptions into a package in ``options.out_dir``."""

    @abstractmethod
    def build(self, options: BuildOptions, project_root: Path) -> None:
        """Compile or raise CompilationError.  No partial success."""


class DntCompiler(Compiler):
    """Runs dnt's ``build()`` in a Deno subprocess."""

    def __init__(
        self,
        deno_bin: str = "deno",
        dnt_module: str = DEFAULT_DNT_MODULE,
        timeout: Optional[int] = None,
    ):
        self.deno_bin = deno_bin
        self.dnt_module = dnt_module
        self.timeout = timeout

    def render_driver(self) -> str:
        return DRIVER_TEMPLATE.format(dnt_module=self.dnt_module)

    def command(self, driver_path: Path, options_path: Path) -> List[str]:
        return [self.deno_bin, "run", "-A", str(driver_path), str(options_path)]

    def build(self, options: BuildOptions, project_root: Path) -> None:
        with tempfile.TemporaryDirectory(prefix="npm_release_") as tmp:
            tmp_dir = Path(tmp)
            options_path = write_build_options(options, tmp_dir / "build_options.json")
            driver_path = tmp_dir / "build_npm.ts"
            driver_path.write_text(self.render_driver(), encoding="utf-8")

            cmd = self.command(driver_path, options_path)
            logger.info("Running %s", " ".join(cmd))

            t0 = time.monotonic()
            try:
                result = subprocess.run(
                    cmd,
                    cwd=str(project_root),
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                )
            except FileNotFoundError as e:
                raise CompilationError(
                    f"Deno executable not found: {self.deno_bin}",
                    stderr=str(e),
                ) from e
            except subprocess.TimeoutExpired as e:
                raise CompilationError(
                    f"dnt build timed out after {self.timeout}s",
                    stdout=_as_text(e.stdout),
                    stderr=_as_text(e.stderr),
                ) from e

        duration = int((time.monotonic() - t0) * 1000)

        if result.returncode != 0:
            # dnt runs the Node test suite on stdout; failing assertions land there
            for line in result.stdout.splitlines():
                logger.error("dnt: %s", line)
            raise CompilationError(
                f"dnt build failed with exit code {result.returncode}",
                exit_code=result.returncode,
                stderr=result.stderr,
                stdout=result.stdout,
            )

        for line in result.stdout.splitlines():
            logger.debug("dnt: %s", line)

        logger.info("dnt build finished in %d ms", duration)
