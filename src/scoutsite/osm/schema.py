"""
Parameter bundles and report records for the OSM API.

Records mirror the upstream JSON closely but smooth over the encoding
quirks OSM is known for:
- identifiers arrive as either numbers or strings -> always str
- flags arrive as true/false, 0/1, "0"/"1" or "" -> always bool
- empty objects are sometimes serialised as [] (PHP) -> {}

Unknown fields are kept on the model (``extra="allow"``) so nothing the
upstream sends is lost.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Type, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator


SectionType = Literal["squirrels", "beavers", "cubs", "scouts", "explorers"]
SortOption = Literal["dob", "firstname", "lastname", "patrol"]
YesNo = Literal["y", "n"]


def _to_str(v: Any) -> Any:
    if v is None:
        return ""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


def _to_bool(v: Any) -> Any:
    if v is None or v == "":
        return False
    return v


def _to_int(v: Any) -> Any:
    if v is None or v == "":
        return 0
    return v


def _empty_list_to_dict(v: Any) -> Any:
    if v is None or (isinstance(v, list) and not v):
        return {}
    return v


OSMId = Annotated[str, BeforeValidator(_to_str)]
OSMText = Annotated[str, BeforeValidator(_to_str)]
OSMFlag = Annotated[bool, BeforeValidator(_to_bool)]
OSMCount = Annotated[int, BeforeValidator(_to_int)]
# Shape varies between sections; only the empty PHP list is normalised
OSMLoose = Annotated[Any, BeforeValidator(_empty_list_to_dict)]


class OSMRecord(BaseModel):
    """Base for all upstream records."""

    model_config = ConfigDict(extra="allow")


# ============================================
# REQUEST PARAMETERS
# ============================================


class OSMParams(BaseModel):
    """Base for per-endpoint parameter bundles. Field order is query order."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class MemberListParams(OSMParams):
    sectionid: OSMId
    termid: OSMId
    sort: Optional[SortOption] = None
    section: Optional[SectionType] = None


class IndividualMemberParams(OSMParams):
    sectionid: OSMId
    scoutid: OSMId
    termid: OSMId
    context: Optional[str] = None


class PatrolsParams(OSMParams):
    sectionid: OSMId
    termid: OSMId
    include_no_patrol: Optional[YesNo] = None


class CensusParams(OSMParams):
    sectionid: OSMId
    termid: OSMId


class FlexiRecordsParams(OSMParams):
    sectionid: OSMId
    archived: Optional[YesNo] = None


class MemberTransfersParams(OSMParams):
    mode: str
    section_id: OSMId


class ProgrammeSummaryParams(OSMParams):
    sectionid: OSMId
    termid: OSMId


class BadgeTagCloudParams(OSMParams):
    sectionid: OSMId
    termid: OSMId
    section: SectionType


class ProgrammeDetailParams(OSMParams):
    sectionid: OSMId
    termid: OSMId
    eveningid: OSMId


class ProgrammeAttachmentsParams(OSMParams):
    section_id: OSMId
    id: OSMId
    evening_id: OSMId
    path: str = "/"
    temp: bool = False


# ============================================
# GENERAL
# ============================================


class Term(OSMRecord):
    termid: OSMId
    sectionid: OSMId
    name: OSMText = ""
    startdate: OSMText = ""
    enddate: OSMText = ""
    past: OSMFlag = False


class StartupGlobals(OSMRecord):
    email: OSMText = ""
    firstname: OSMText = ""
    lastname: OSMText = ""
    member_access: Any = None
    notepads: Any = None
    sectionConfig: Any = None
    terms: List[Term] = Field(default_factory=list)

    @field_validator("terms", mode="before")
    @classmethod
    def flatten_terms(cls, v):
        # OSM keys terms by section id: {"1": [term, ...], "2": [...]}
        if v is None:
            return []
        if isinstance(v, dict):
            flat: List[Any] = []
            for section_terms in v.values():
                if isinstance(section_terms, list):
                    flat.extend(section_terms)
            return flat
        return v


class StartupData(OSMRecord):
    globals: StartupGlobals = Field(default_factory=StartupGlobals)


# ============================================
# MEMBERS
# ============================================


class Member(OSMRecord):
    scoutid: OSMId
    firstname: OSMText = ""
    lastname: OSMText = ""
    full_name: OSMText = ""
    photo_guid: OSMText = ""
    patrolid: OSMId = ""
    patrol: OSMText = ""
    sectionid: OSMId = ""
    enddate: OSMText = ""
    # OSM reports ages either as a number or as "10 / 05" (years / months)
    age: Union[int, str] = 0
    active: OSMFlag = False


class MemberListResponse(OSMRecord):
    identifier: OSMText = ""
    photos: Any = None
    items: List[Member] = Field(default_factory=list)


class IndividualMemberData(OSMRecord):
    scoutid: OSMId
    firstname: OSMText = ""
    lastname: OSMText = ""
    dob: OSMText = ""
    started: OSMText = ""
    patrolid: OSMId = ""
    sectionid: OSMId = ""
    active: OSMFlag = False
    age: Union[int, str] = 0
    meetings: OSMCount = 0


class IndividualMemberInfo(OSMRecord):
    ok: OSMFlag = False
    read_only: List[str] = Field(default_factory=list)
    data: IndividualMemberData
    meta: Any = None


class PatrolMember(OSMRecord):
    scoutid: OSMId
    scout_id: OSMId = ""
    firstname: OSMText = ""
    lastname: OSMText = ""
    patrolid: OSMId = ""
    active: OSMFlag = False


class Patrol(OSMRecord):
    patrolid: OSMId
    sectionid: OSMId = ""
    name: OSMText = ""
    active: OSMFlag = False
    points: OSMCount = 0
    census_costs: Any = None
    members: List[PatrolMember] = Field(default_factory=list)


class PatrolsResponse(OSMRecord):
    patrols: List[Patrol] = Field(default_factory=list)

    @field_validator("patrols", mode="before")
    @classmethod
    def patrols_as_list(cls, v):
        # Some OSM versions key patrols by patrolid
        if v is None:
            return []
        if isinstance(v, dict):
            return list(v.values())
        return v


class CensusMember(OSMRecord):
    scoutid: OSMId
    firstname: OSMText = ""
    lastname: OSMText = ""
    joined: OSMText = ""
    sex: OSMText = ""
    ethnicity: OSMText = ""
    disabilities: OSMText = ""
    myscout: OSMFlag = False
    raw_disabilities: Any = None


class CensusResponse(OSMRecord):
    identifier: OSMText = ""
    items: List[CensusMember] = Field(default_factory=list)


class FlexiRecord(OSMRecord):
    extraid: OSMId
    name: OSMText = ""


class FlexiRecordsResponse(OSMRecord):
    identifier: OSMText = ""
    label: OSMText = ""
    items: List[FlexiRecord] = Field(default_factory=list)


class MemberTransfer(OSMRecord):
    id: OSMId
    direction: OSMText = ""
    member_id: OSMId = ""
    firstname: OSMText = ""
    lastname: OSMText = ""
    type: OSMText = ""
    date: OSMText = ""
    section_id: OSMId = ""
    section_name: OSMText = ""
    mode: OSMText = ""


class MemberTransfersResponse(OSMRecord):
    status: OSMFlag = False
    error: Optional[str] = None
    data: List[MemberTransfer] = Field(default_factory=list)
    meta: Any = None


class DeletableMember(OSMRecord):
    id: OSMId
    firstname: OSMText = ""
    lastname: OSMText = ""
    date_deleted: OSMText = ""


class DeletableMembersResponse(OSMRecord):
    status: OSMFlag = False
    error: Optional[str] = None
    data: List[DeletableMember] = Field(default_factory=list)
    meta: Any = None


# ============================================
# PROGRAMME
# ============================================


class ProgrammeSummaryItem(OSMRecord):
    eveningid: OSMId
    sectionid: OSMId = ""
    title: OSMText = ""
    notesforparents: OSMText = ""
    parentsrequired: OSMFlag = False
    meetingdate: OSMText = Field("", description="ISO date, YYYY-MM-DD")
    starttime: OSMText = ""
    endtime: OSMText = ""
    parentsattendingcount: OSMCount = 0


class ProgrammeSummaryResponse(OSMRecord):
    items: List[ProgrammeSummaryItem] = Field(default_factory=list)


class BadgeTagCloud(OSMRecord):
    """
    Badge coverage for a term.

    ``tags`` maps a badge label to its coverage weight (usually a meeting
    count, but OSM does not promise an integer);
    ``badges`` maps a badge key to its label.
    """

    tags: Dict[str, Any] = Field(default_factory=dict)
    tag_count: Any = None
    badges: OSMLoose = Field(default_factory=dict)

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v):
        return _empty_list_to_dict(v)


class RiskAssessmentCategory(OSMRecord):
    name: OSMText = ""


class RiskAssessmentResponse(OSMRecord):
    status: OSMFlag = False
    error: Optional[str] = None
    data: List[RiskAssessmentCategory] = Field(default_factory=list)
    meta: Any = None


class ProgrammeDetailItem(OSMRecord):
    eveningid: OSMId
    sectionid: OSMId = ""
    title: OSMText = ""
    meetingdate: OSMText = ""
    starttime: OSMText = ""
    endtime: OSMText = ""
    help: List[Any] = Field(default_factory=list)
    unavailableleaders: List[Any] = Field(default_factory=list)


class ProgrammeDetailResponse(OSMRecord):
    items: List[ProgrammeDetailItem] = Field(default_factory=list)
    badgelinks: OSMLoose = Field(default_factory=dict)


ParamsT = TypeVar("ParamsT", bound=OSMParams)


def build_params(cls: Type[ParamsT], params: Optional[ParamsT], kwargs: Dict[str, Any]) -> ParamsT:
    """Accept either a ready-made bundle or its fields as keyword arguments."""
    if params is not None:
        if kwargs:
            raise TypeError("pass either a params object or keyword arguments, not both")
        return params
    return cls(**kwargs)
