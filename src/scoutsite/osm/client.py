from __future__ import annotations

import logging
from typing import Any, Optional

from .client_base import BaseOSMClient
from .config import OSMConfig
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
    ProgrammeSummaryParams,
    ProgrammeSummaryResponse,
    RiskAssessmentResponse,
    StartupData,
    build_params,
)


logger = logging.getLogger(__name__)


class OSMClient(BaseOSMClient):
    """
    Live client for the Online Scout Manager API.

    One method per OSM report. Every method issues exactly one GET and
    returns the report as a pydantic record; any failure raises
    OSMApiError. No filtering or sorting happens here.

    Reference: https://opensource.newcastlescouts.org.uk/
    """

    STARTUP_ENDPOINT = "/ext/generic/startup/?action=getData"
    MEMBER_LIST_ENDPOINT = "/ext/members/contact/?action=getListOfMembers"
    INDIVIDUAL_MEMBER_ENDPOINT = "/ext/members/contact/?action=getIndividual"
    PATROLS_ENDPOINT = "/ext/members/patrols/?action=getPatrolsWithPeople"
    CENSUS_ENDPOINT = "/ext/members/census/?action=getDetails"
    # OSM really does reuse the patrols action name for flexi-records
    FLEXI_RECORDS_ENDPOINT = "/ext/members/flexirecords/?action=getPatrolsWithPeople"
    MEMBER_TRANSFERS_ENDPOINT = "/ext/members/contact/?action=getMemberTransfers"
    DELETABLE_MEMBERS_ENDPOINT = "/v3/members/review/deletion/{section_id}"
    PROGRAMME_SUMMARY_ENDPOINT = "/ext/programme/?action=getProgrammeSummary"
    BADGE_TAG_CLOUD_ENDPOINT = "/ext/programme/clouds/?action=getBadgeTagCloud"
    RISK_ASSESSMENT_ENDPOINT = "/v3/risk_assessments/{section_id}/categories"
    PROGRAMME_DETAIL_ENDPOINT = "/ext/programme/?action=getProgramme"
    PROGRAMME_ATTACHMENTS_ENDPOINT = "/ext/programme/?action=programmeAttachmentsManifest"

    @classmethod
    def from_config(cls, config: OSMConfig) -> "OSMClient":
        return cls(
            api_id=config.api_id,
            api_token=config.api_token,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    # -------------------------------------------------
    # General
    # -------------------------------------------------
    def get_startup_data(self) -> StartupData:
        """User profile, section access and terms."""
        return self.request(self.STARTUP_ENDPOINT, response_model=StartupData)

    # -------------------------------------------------
    # Members
    # -------------------------------------------------
    def get_member_list(
        self, params: Optional[MemberListParams] = None, **kwargs: Any
    ) -> MemberListResponse:
        """All members in a section for a term."""
        p = build_params(MemberListParams, params, kwargs)
        return self.request(
            self.MEMBER_LIST_ENDPOINT, self._query(p), response_model=MemberListResponse
        )

    def get_individual_member(
        self, params: Optional[IndividualMemberParams] = None, **kwargs: Any
    ) -> IndividualMemberInfo:
        p = build_params(IndividualMemberParams, params, kwargs)
        return self.request(
            self.INDIVIDUAL_MEMBER_ENDPOINT,
            self._query(p),
            response_model=IndividualMemberInfo,
        )

    def get_patrols(
        self, params: Optional[PatrolsParams] = None, **kwargs: Any
    ) -> PatrolsResponse:
        """Patrols (sixes, lodges) with their members."""
        p = build_params(PatrolsParams, params, kwargs)
        return self.request(
            self.PATROLS_ENDPOINT, self._query(p), response_model=PatrolsResponse
        )

    def get_census_details(
        self, params: Optional[CensusParams] = None, **kwargs: Any
    ) -> CensusResponse:
        """Members with missing census data."""
        p = build_params(CensusParams, params, kwargs)
        return self.request(
            self.CENSUS_ENDPOINT, self._query(p), response_model=CensusResponse
        )

    def get_flexi_records(
        self, params: Optional[FlexiRecordsParams] = None, **kwargs: Any
    ) -> FlexiRecordsResponse:
        p = build_params(FlexiRecordsParams, params, kwargs)
        return self.request(
            self.FLEXI_RECORDS_ENDPOINT,
            self._query(p),
            response_model=FlexiRecordsResponse,
        )

    def get_member_transfers(
        self, params: Optional[MemberTransfersParams] = None, **kwargs: Any
    ) -> MemberTransfersResponse:
        """Members pending transfer in or out of a section."""
        p = build_params(MemberTransfersParams, params, kwargs)
        return self.request(
            self.MEMBER_TRANSFERS_ENDPOINT,
            self._query(p),
            response_model=MemberTransfersResponse,
        )

    def get_deletable_members(self, section_id: str) -> DeletableMembersResponse:
        """Former members eligible for removal."""
        return self.request(
            self.DELETABLE_MEMBERS_ENDPOINT.format(section_id=section_id),
            response_model=DeletableMembersResponse,
        )

    # -------------------------------------------------
    # Programme
    # -------------------------------------------------
    def get_programme_summary(
        self, params: Optional[ProgrammeSummaryParams] = None, **kwargs: Any
    ) -> ProgrammeSummaryResponse:
        """All meetings in a term, in whatever order OSM returns them."""
        p = build_params(ProgrammeSummaryParams, params, kwargs)
        summary = self.request(
            self.PROGRAMME_SUMMARY_ENDPOINT,
            self._query(p),
            response_model=ProgrammeSummaryResponse,
        )
        logger.debug(f"Programme summary for section {p.sectionid}: {len(summary.items)} items")
        return summary

    def get_badge_tag_cloud(
        self, params: Optional[BadgeTagCloudParams] = None, **kwargs: Any
    ) -> BadgeTagCloud:
        """Badge coverage weight per badge for a term."""
        p = build_params(BadgeTagCloudParams, params, kwargs)
        return self.request(
            self.BADGE_TAG_CLOUD_ENDPOINT, self._query(p), response_model=BadgeTagCloud
        )

    def get_risk_assessment_categories(self, section_id: str) -> RiskAssessmentResponse:
        return self.request(
            self.RISK_ASSESSMENT_ENDPOINT.format(section_id=section_id),
            response_model=RiskAssessmentResponse,
        )

    def get_programme_detail(
        self, params: Optional[ProgrammeDetailParams] = None, **kwargs: Any
    ) -> ProgrammeDetailResponse:
        """Full detail for one meeting, including badge links."""
        p = build_params(ProgrammeDetailParams, params, kwargs)
        return self.request(
            self.PROGRAMME_DETAIL_ENDPOINT,
            self._query(p),
            response_model=ProgrammeDetailResponse,
        )

    def get_programme_attachments(
        self, params: Optional[ProgrammeAttachmentsParams] = None, **kwargs: Any
    ) -> Any:
        """
        Attachment manifest for a meeting.

        OSM answers with its upload acceptance settings rather than a
        documented record, so the decoded JSON is returned as-is.
        """
        p = build_params(ProgrammeAttachmentsParams, params, kwargs)
        query = self._query(p)
        query["upload_mode"] = "programme"
        return self.request(self.PROGRAMME_ATTACHMENTS_ENDPOINT, query)
