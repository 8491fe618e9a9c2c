"""
Shared pytest fixtures for npm_release tests.

Provides a throwaway Deno project tree and a fake compiler that emits
the files dnt would (ESM module, type declarations, package.json), so
the pipeline can be exercised without Deno installed.
"""
import json
import textwrap
from pathlib import Path

import pytest

from npm_release.core.compiler import CompilationError, Compiler

MOD_TS = textwrap.dedent("""\
    export class S3Client {
      constructor(readonly endPoint: string) {}
    }
""")

MOD_TEST_TS = textwrap.dedent("""\
    import { S3Client } from "./mod.ts";

    Deno.test("client keeps endpoint", () => {
      new S3Client("localhost");
    });
""")


class FakeCompiler(Compiler):
    """
    Stands in for dnt.

    Writes esm/mod.js, types/mod.d.ts and package.json into outDir.
    With ``fail=True`` it writes the module, then raises CompilationError
    before the declarations and manifest exist.  ``extra_files`` (relative
    paths, subdirectories allowed) are written into outDir after a
    successful build.
    """

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.extra_files = {}
        self.calls = []

    def build(self, options, project_root: Path) -> None:
        self.calls.append(options)
        out = project_root / options.out_dir

        esm = out / "esm"
        esm.mkdir(parents=True, exist_ok=True)
        (esm / "mod.js").write_text("export class S3Client {}\n")

        if self.fail:
            raise CompilationError(
                "dnt build failed with exit code 1",
                exit_code=1,
                stdout="mod.test.ts => client keeps endpoint ... FAILED",
                stderr="error: TS2307 [ERROR]: Cannot find module 'node:fs'.",
            )

        types = out / "types"
        types.mkdir(parents=True, exist_ok=True)
        (types / "mod.d.ts").write_text("export declare class S3Client {}\n")

        (out / "package.json").write_text(
            json.dumps(options.package.to_package_json(), indent=2) + "\n"
        )
        for name, content in self.extra_files.items():
            path = out / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)


@pytest.fixture
def project(tmp_path) -> Path:
    """A Deno project root with mod.ts, a test file, LICENSE and README.md."""
    root = tmp_path / "s3-lite-client"
    root.mkdir()
    (root / "mod.ts").write_text(MOD_TS)
    (root / "mod.test.ts").write_text(MOD_TEST_TS)
    (root / "LICENSE").write_text("MIT License\n")
    (root / "README.md").write_text("# s3-lite-client\n")
    return root


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()


@pytest.fixture
def failing_compiler() -> FakeCompiler:
    return FakeCompiler(fail=True)
