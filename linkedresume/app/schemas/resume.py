"""
Resume Pydantic schemas - matches the JSON Resume document layout.
Models are frozen and repeated fields are tuples: built once by the extractor,
never mutated afterwards.
"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Nested schemas ---
class Profile(_Frozen):
    network: str = ""
    url: str = ""


class Location(_Frozen):
    region: str = ""


class BasicInfo(_Frozen):
    name: str = ""
    label: str = ""
    picture: str = ""
    summary: str = ""
    location: Location = Field(default_factory=Location)
    profiles: Tuple[Profile, ...] = ()


class WorkEntry(_Frozen):
    company: str = ""
    position: str = ""
    startDate: str = ""
    endDate: str = ""
    summary: str = ""
    highlights: Tuple[str, ...] = ()


class EducationEntry(_Frozen):
    institution: str = ""
    area: str = ""
    studyType: str = ""
    startDate: str = ""
    endDate: str = ""


class Skill(_Frozen):
    name: str = ""


class Language(_Frozen):
    name: str = ""
    level: str = ""


class Interest(_Frozen):
    name: str = ""


# Theme-compatibility placeholders. Never populated, only emitted as [].
class Volunteer(_Frozen):
    organization: str = ""


class Award(_Frozen):
    title: str = ""


class Publication(_Frozen):
    name: str = ""


class ResumeDocument(_Frozen):
    """Full resume document - what themes receive under the "resume" key."""
    basics: BasicInfo = Field(default_factory=BasicInfo)
    work: Tuple[WorkEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[Skill, ...] = ()
    languages: Tuple[Language, ...] = ()
    interests: Tuple[Interest, ...] = ()
    volunteer: Tuple[Volunteer, ...] = ()
    awards: Tuple[Award, ...] = ()
    publications: Tuple[Publication, ...] = ()


class ErrorOut(BaseModel):
    error: str
