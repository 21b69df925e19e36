"""
One manager per GitHub REST API resource group.
"""

from .billing import GitHubBillingManager
from .codescanning import GitHubCodeScanningManager
from .commits import (
    GitHubCommitCommentsManager,
    GitHubCommitsManager,
    GitHubCommitStatusesManager,
)
from .deliveries import GitHubRepoDeliveriesManager
from .dependabot import GitHubDependabotAlertsManager
from .forks import GitHubForksManager
from .gpgkeys import GitHubGPGKeysManager
from .interactions import (
    GitHubOrganizationInteractionsManager,
    GitHubRepositoryInteractionsManager,
    GitHubUserInteractionsManager,
)
from .members import GitHubMembersManager
from .meta import GitHubMetaManager
from .permissions import GitHubPermissionsManager
from .references import GitHubReferencesManager
from .socialaccounts import GitHubSocialAccountsManager
from .users import GitHubUsersManager
