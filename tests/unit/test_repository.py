"""Unit tests for repository URL parsing."""

import pytest

from deploy_reporter.core.exceptions import RepositoryURLError
from deploy_reporter.core.repository import parse_repository_url
from deploy_reporter.models.deployment import RepositoryRef


class TestParseRepositoryURL:
    """Tests for parse_repository_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/acme/widgets.git",
            "https://github.com/acme/widgets",
            "https://github.example.com/acme/widgets.git/",
        ],
    )
    def test_https_form(self, url: str):
        """Test HTTPS remotes yield owner and repository."""
        assert parse_repository_url(url) == RepositoryRef(owner="acme", name="widgets")

    @pytest.mark.parametrize(
        "url",
        [
            "git@github.com:acme/widgets.git",
            "git@github.com:acme/widgets",
            "deploy@git.example.org:acme/widgets.git",
        ],
    )
    def test_ssh_form(self, url: str):
        """Test SSH shorthand remotes yield owner and repository."""
        assert parse_repository_url(url) == RepositoryRef(owner="acme", name="widgets")

    def test_keeps_dots_and_dashes_in_names(self):
        """Test only the trailing .git suffix is stripped."""
        ref = parse_repository_url("https://github.com/my-org/site.github.io.git")
        assert ref.owner == "my-org"
        assert ref.name == "site.github.io"

    def test_surrounding_whitespace_ignored(self):
        """Test stray whitespace from env files does not break parsing."""
        ref = parse_repository_url("  git@github.com:acme/widgets.git\n")
        assert str(ref) == "acme/widgets"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "https://github.com",
            "https://github.com/acme",
            "git@github.com:acme",
            "git@github.com:acme/.git",
            "https://github.com/acme/widgets/tree/main",
            "http://github.com/acme/widgets.git",
            "ssh://git@github.com/acme/widgets.git",
            "acme/widgets",
            "git@github.com/acme/widgets.git",
            "https://github.com:acme/widgets.git",
            "https://github.com//acme/widgets.git",
        ],
    )
    def test_invalid_urls_raise(self, url: str):
        """Test malformed URLs fail with an explicit error."""
        with pytest.raises(RepositoryURLError) as exc_info:
            parse_repository_url(url)

        assert "invalid repository URL" in exc_info.value.message
        assert exc_info.value.details["repository_url"] == url
