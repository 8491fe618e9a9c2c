"""
npm_release — package a Deno module as an npm package, once per release.

Stages: resolve version → stage ./npm → shims → manifest → dnt build →
copy LICENSE/README.  No tagging, no publishing.
"""

__version__ = "0.1.0"
PACKAGE_NAME = "npm_release"
BUILDER_VERSION = "v0"
SCHEMA_VERSION = "0.1"
