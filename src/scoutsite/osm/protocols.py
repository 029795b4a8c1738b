"""Capability interface shared by the live OSM client and its offline double."""

from typing import Any, Optional, Protocol, runtime_checkable

from .rate_limit import RateLimitInfo
from .schema import (
    BadgeTagCloud,
    CensusResponse,
    DeletableMembersResponse,
    FlexiRecordsResponse,
    IndividualMemberInfo,
    MemberListResponse,
    MemberTransfersResponse,
    PatrolsResponse,
    ProgrammeDetailResponse,
    ProgrammeSummaryResponse,
    RiskAssessmentResponse,
    StartupData,
)


@runtime_checkable
class OSMClientProtocol(Protocol):
    """
    The closed set of OSM reports the site can ask for.

    Parameter bundles may be passed as the matching params model or as
    keyword arguments.
    """

    def get_rate_limit_info(self) -> Optional[RateLimitInfo]: ...

    def get_startup_data(self) -> StartupData: ...

    def get_member_list(self, params: Any = None, **kwargs: Any) -> MemberListResponse: ...

    def get_individual_member(self, params: Any = None, **kwargs: Any) -> IndividualMemberInfo: ...

    def get_patrols(self, params: Any = None, **kwargs: Any) -> PatrolsResponse: ...

    def get_census_details(self, params: Any = None, **kwargs: Any) -> CensusResponse: ...

    def get_flexi_records(self, params: Any = None, **kwargs: Any) -> FlexiRecordsResponse: ...

    def get_member_transfers(self, params: Any = None, **kwargs: Any) -> MemberTransfersResponse: ...

    def get_deletable_members(self, section_id: str) -> DeletableMembersResponse: ...

    def get_programme_summary(self, params: Any = None, **kwargs: Any) -> ProgrammeSummaryResponse: ...

    def get_badge_tag_cloud(self, params: Any = None, **kwargs: Any) -> BadgeTagCloud: ...

    def get_risk_assessment_categories(self, section_id: str) -> RiskAssessmentResponse: ...

    def get_programme_detail(self, params: Any = None, **kwargs: Any) -> ProgrammeDetailResponse: ...

    def get_programme_attachments(self, params: Any = None, **kwargs: Any) -> Any: ...

    def close(self) -> None: ...
