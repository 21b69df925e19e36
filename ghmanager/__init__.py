"""
gh-manager, a typed client for the GitHub REST API
"""

from .api import *  # noqa: F401,F403
from .config import APP_VERSION as __version__
from .config import ReturnFormat
from .exceptions import GitHubException
