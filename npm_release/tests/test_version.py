"""
test_version — the release version is required and passed through verbatim.
"""
import pytest

from npm_release.core.version import BuildRequest, MissingVersionError, resolve_version


class TestResolveVersion:

    @pytest.mark.parametrize("value", ["1.0.0", "2.3.1-beta.4", "v7", " 1.0.0 "])
    def test_returned_unchanged(self, value):
        """No trimming, no semver coercion."""
        assert resolve_version(value).version == value

    def test_none_rejected(self):
        with pytest.raises(MissingVersionError, match="Please specify a version"):
            resolve_version(None)

    def test_empty_rejected(self):
        with pytest.raises(MissingVersionError):
            resolve_version("")

    def test_missing_version_is_value_error(self):
        assert issubclass(MissingVersionError, ValueError)


class TestBuildRequest:

    def test_empty_request_rejected(self):
        with pytest.raises(MissingVersionError):
            BuildRequest(version="")

    def test_frozen(self):
        req = BuildRequest(version="1.0.0")
        with pytest.raises(AttributeError):
            req.version = "2.0.0"
