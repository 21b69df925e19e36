from .base import GitHubResponse


class SocialAccount(GitHubResponse):
    """A social account linked to a profile, e.g. `twitter`"""

    provider: str | None = None
    url: str | None = None
