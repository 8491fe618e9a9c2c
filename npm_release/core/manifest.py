"""
Manifest synthesizer — static package metadata plus the release version.

The result goes to the build orchestrator; package.json on disk is
written by the compiler, not here.
"""
import logging

from npm_release.core.version import BuildRequest
from npm_release.io.schema import ManifestTemplate, PackageManifest

logger = logging.getLogger(__name__)


def synthesize_manifest(
    template: ManifestTemplate,
    request: BuildRequest,
) -> PackageManifest:
    """Bind *request.version* verbatim into *template*."""
    manifest = PackageManifest(**template.model_dump(), version=request.version)
    logger.info("Manifest %s@%s", manifest.name, manifest.version)
    return manifest
