"""
Walkham Valley Scouts - OSM API client

Typed, read-only client for the Online Scout Manager (OSM) API, which
supplies the programme and badge data shown on the site.

Usage:
------
    from scoutsite.osm import create_client_from_env

    client = create_client_from_env()
    summary = client.get_programme_summary(sectionid="1", termid="1")
    limits = client.get_rate_limit_info()

Configuration:
--------------
    OSM_API_ID       - API identifier (required for live mode)
    OSM_API_TOKEN    - API secret token (required for live mode)
    OSM_BASE_URL     - Override the production host
    OSM_TIMEOUT_SEC  - Request timeout (default: 15)
    USE_MOCK_DATA    - "true" answers every call from canned data

Every failure raises OSMApiError; inspect ``kind`` to tell rate limiting,
HTTP, transport, decode and configuration problems apart.
"""

# -----------------------------------------------------------------------------
# Client selection (the entry point pages should use)
# -----------------------------------------------------------------------------
from .factory import AnyOSMClient, create_client, create_client_from_env

# -----------------------------------------------------------------------------
# Clients
# -----------------------------------------------------------------------------
from .client_base import BaseOSMClient
from .client import OSMClient
from .mock_client import MockOSMClient
from .protocols import OSMClientProtocol

# -----------------------------------------------------------------------------
# Configuration, errors, rate limiting
# -----------------------------------------------------------------------------
from .config import OSMConfig, load_config_from_env
from .errors import ErrorKind, OSMApiError
from .rate_limit import RateLimitInfo

# -----------------------------------------------------------------------------
# Parameter bundles and report records
# -----------------------------------------------------------------------------
from .schema import (
    BadgeTagCloud,
    BadgeTagCloudParams,
    CensusParams,
    CensusResponse,
    DeletableMembersResponse,
    FlexiRecordsParams,
    FlexiRecordsResponse,
    IndividualMemberInfo,
    IndividualMemberParams,
    MemberListParams,
    MemberListResponse,
    MemberTransfersParams,
    MemberTransfersResponse,
    PatrolsParams,
    PatrolsResponse,
    ProgrammeAttachmentsParams,
    ProgrammeDetailParams,
    ProgrammeDetailResponse,
    ProgrammeSummaryItem,
    ProgrammeSummaryParams,
    ProgrammeSummaryResponse,
    RiskAssessmentResponse,
    StartupData,
    Term,
)


__all__ = [
    # Selection
    "AnyOSMClient",
    "create_client",
    "create_client_from_env",
    # Clients
    "BaseOSMClient",
    "OSMClient",
    "MockOSMClient",
    "OSMClientProtocol",
    # Config / errors
    "OSMConfig",
    "load_config_from_env",
    "ErrorKind",
    "OSMApiError",
    "RateLimitInfo",
    # Params
    "BadgeTagCloudParams",
    "CensusParams",
    "FlexiRecordsParams",
    "IndividualMemberParams",
    "MemberListParams",
    "MemberTransfersParams",
    "PatrolsParams",
    "ProgrammeAttachmentsParams",
    "ProgrammeDetailParams",
    "ProgrammeSummaryParams",
    # Records
    "BadgeTagCloud",
    "CensusResponse",
    "DeletableMembersResponse",
    "FlexiRecordsResponse",
    "IndividualMemberInfo",
    "MemberListResponse",
    "MemberTransfersResponse",
    "PatrolsResponse",
    "ProgrammeDetailResponse",
    "ProgrammeSummaryItem",
    "ProgrammeSummaryResponse",
    "RiskAssessmentResponse",
    "StartupData",
    "Term",
]
