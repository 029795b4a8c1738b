from __future__ import annotations

import copy
import time
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel

from . import mock_data
from .config import DEFAULT_MOCK_DELAY_SEC
from .rate_limit import RateLimitInfo
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

ModelT = TypeVar("ModelT", bound=BaseModel)


class MockOSMClient:
    """
    Offline stand-in for OSMClient.

    Answers every report from the canned data in ``mock_data`` after a
    short sleep, so callers see the same call shape as the live client.
    Never touches the network and never raises OSMApiError. Parameter
    bundles are still validated, then ignored.
    """

    MOCK_RATE_LIMIT = "1000"
    MOCK_RATE_REMAINING = "999"

    def __init__(self, delay: float = DEFAULT_MOCK_DELAY_SEC) -> None:
        self.delay = delay
        # Reset one hour out, in epoch milliseconds like the upstream header
        reset_ms = int(time.time() * 1000) + 3_600_000
        self._rate_limit_info = RateLimitInfo(
            limit=self.MOCK_RATE_LIMIT,
            remaining=self.MOCK_RATE_REMAINING,
            reset=str(reset_ms),
        )

    def close(self) -> None:
        pass

    def __enter__(self) -> "MockOSMClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def get_rate_limit_info(self) -> RateLimitInfo:
        return self._rate_limit_info

    def _respond(self, model: Type[ModelT], payload: Dict[str, Any]) -> ModelT:
        if self.delay > 0:
            time.sleep(self.delay)
        # Fresh object per call so callers can't alter the canned data
        return model.model_validate(copy.deepcopy(payload))

    # -------------------------------------------------
    # General
    # -------------------------------------------------
    def get_startup_data(self) -> StartupData:
        return self._respond(StartupData, mock_data.MOCK_STARTUP_DATA)

    # -------------------------------------------------
    # Members
    # -------------------------------------------------
    def get_member_list(
        self, params: Optional[MemberListParams] = None, **kwargs: Any
    ) -> MemberListResponse:
        build_params(MemberListParams, params, kwargs)
        return self._respond(MemberListResponse, mock_data.MOCK_MEMBER_LIST)

    def get_individual_member(
        self, params: Optional[IndividualMemberParams] = None, **kwargs: Any
    ) -> IndividualMemberInfo:
        build_params(IndividualMemberParams, params, kwargs)
        return self._respond(IndividualMemberInfo, mock_data.MOCK_INDIVIDUAL_MEMBER)

    def get_patrols(
        self, params: Optional[PatrolsParams] = None, **kwargs: Any
    ) -> PatrolsResponse:
        build_params(PatrolsParams, params, kwargs)
        return self._respond(PatrolsResponse, mock_data.MOCK_PATROLS)

    def get_census_details(
        self, params: Optional[CensusParams] = None, **kwargs: Any
    ) -> CensusResponse:
        build_params(CensusParams, params, kwargs)
        return self._respond(CensusResponse, mock_data.MOCK_CENSUS)

    def get_flexi_records(
        self, params: Optional[FlexiRecordsParams] = None, **kwargs: Any
    ) -> FlexiRecordsResponse:
        build_params(FlexiRecordsParams, params, kwargs)
        return self._respond(FlexiRecordsResponse, mock_data.MOCK_FLEXI_RECORDS)

    def get_member_transfers(
        self, params: Optional[MemberTransfersParams] = None, **kwargs: Any
    ) -> MemberTransfersResponse:
        build_params(MemberTransfersParams, params, kwargs)
        return self._respond(MemberTransfersResponse, mock_data.MOCK_MEMBER_TRANSFERS)

    def get_deletable_members(self, section_id: str) -> DeletableMembersResponse:
        return self._respond(DeletableMembersResponse, mock_data.MOCK_DELETABLE_MEMBERS)

    # -------------------------------------------------
    # Programme
    # -------------------------------------------------
    def get_programme_summary(
        self, params: Optional[ProgrammeSummaryParams] = None, **kwargs: Any
    ) -> ProgrammeSummaryResponse:
        build_params(ProgrammeSummaryParams, params, kwargs)
        return self._respond(ProgrammeSummaryResponse, mock_data.MOCK_PROGRAMME_SUMMARY)

    def get_badge_tag_cloud(
        self, params: Optional[BadgeTagCloudParams] = None, **kwargs: Any
    ) -> BadgeTagCloud:
        build_params(BadgeTagCloudParams, params, kwargs)
        return self._respond(BadgeTagCloud, mock_data.MOCK_BADGE_TAG_CLOUD)

    def get_risk_assessment_categories(self, section_id: str) -> RiskAssessmentResponse:
        return self._respond(RiskAssessmentResponse, mock_data.MOCK_RISK_ASSESSMENT)

    def get_programme_detail(
        self, params: Optional[ProgrammeDetailParams] = None, **kwargs: Any
    ) -> ProgrammeDetailResponse:
        build_params(ProgrammeDetailParams, params, kwargs)
        return self._respond(ProgrammeDetailResponse, mock_data.MOCK_PROGRAMME_DETAIL)

    def get_programme_attachments(
        self, params: Optional[ProgrammeAttachmentsParams] = None, **kwargs: Any
    ) -> Any:
        build_params(ProgrammeAttachmentsParams, params, kwargs)
        if self.delay > 0:
            time.sleep(self.delay)
        return copy.deepcopy(mock_data.MOCK_PROGRAMME_ATTACHMENTS)
