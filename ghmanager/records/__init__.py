"""
Passive records mirroring the JSON objects returned by the GitHub REST API.
"""

from .base import GitHubResponse, Record, convert_json
from .billing import (
    ActionsBilling,
    AdvancedSecurityCommitters,
    PackagesBilling,
    SharedStorageBilling,
)
from .codescanning import (
    CodeQLDatabase,
    SARIFData,
    SARIFUpload,
    ScanningAlert,
    ScanningAnalysis,
    ScanningAnalysisDeletion,
)
from .commits import (
    BranchHead,
    CombinedStatus,
    Commit,
    CommitComment,
    CommitStatus,
    CommitsComparison,
    PullRequest,
)
from .deliveries import Delivery
from .dependabot import DependabotAlert
from .git import GitReference
from .gpgkeys import GPGKey
from .interactions import Interaction
from .members import OrganizationInvitation, OrganizationMembership
from .meta import GitHubAPIRoot, GitHubMetaInformation
from .organizations import Organization, OrganizationsList, Team
from .permissions import (
    AARW,
    DefaultWorkflowPermissions,
    EnterpriseActionsPermissions,
    OrganizationActionsPermissions,
    RepositoryActionsPermissions,
)
from .repositories import RepositoriesList, Repository
from .socialaccounts import SocialAccount
from .users import ContextualInformation, User
