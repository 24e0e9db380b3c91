"""
Map a parsed profile page into a ResumeDocument.

Flow (fixed order, first error aborts):
1. Basic info (name, headline, picture, summary, region)
2. Work history
3. Education
4. Skills
5. Languages
6. Interests

Required fields go through find_one(), which raises MissingFieldError naming
the field. Repeated sections never return partial results: one bad record
fails the whole section, and one bad section fails the whole document.
"""
from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from linkedresume.app.core import config
from linkedresume.app.core.config import settings
from linkedresume.app.core.exceptions import (
    MalformedTextError,
    MissingAttributeError,
    MissingFieldError,
)
from linkedresume.app.core.logging_config import get_logger
from linkedresume.app.schemas.resume import (
    BasicInfo,
    EducationEntry,
    Interest,
    Language,
    Location,
    Profile,
    ResumeDocument,
    Skill,
    WorkEntry,
)
from linkedresume.app.services.document_fetcher import fetch_document

logger = get_logger("services.profile_extractor")


# ---------------------------------------------------------------------------
# Lookup primitives
# ---------------------------------------------------------------------------

def find_one(scope: Tag, selector: str, field: str) -> Tag:
    """First node matching `selector` under `scope`, or MissingFieldError(field)."""
    node = scope.select_one(selector)
    if node is None:
        raise MissingFieldError(field)
    return node


def find_text(scope: Tag, selector: str, field: str) -> str:
    """Trimmed text of the first `selector` match, or MissingFieldError(field)."""
    return find_one(scope, selector, field).get_text().strip()


def require_attr(node: Tag, attr: str, field: str) -> str:
    """Value of `attr` on `node`, or MissingAttributeError(field, attr)."""
    value = node.get(attr)
    if value is None:
        raise MissingAttributeError(field, attr)
    return value


def split_date_range(text: str) -> tuple[str, str]:
    """Split "start – end" on the en dash. Segments are returned untrimmed."""
    pieces = text.split(config.DATE_RANGE_SEP)
    if len(pieces) != 2:
        raise MalformedTextError("date range", text, pieces)
    return pieces[0], pieces[1]


def split_degree(text: str) -> tuple[str, str]:
    """
    Degree is free-form; assume "StudyType, Area",
    e.g. "Bachelor's Degree, Computer Engineering". Extra segments are ignored.
    """
    pieces = text.split(config.DEGREE_SEP)
    if len(pieces) < 2:
        raise MalformedTextError("degree", text, pieces)
    return pieces[0].strip(), pieces[1].strip()


def _summary_text(node: Tag) -> str:
    markup = node.decode_contents()
    return markup.replace(config.LINE_BREAK_TAG, "\n").strip()


# ---------------------------------------------------------------------------
# Section extractors
# ---------------------------------------------------------------------------

def extract_basic_info(doc: BeautifulSoup) -> BasicInfo:
    name = find_text(doc, config.NAME_SELECTOR, "name")
    label = find_text(doc, config.LABEL_SELECTOR, "label")

    picture_node = find_one(doc, config.PICTURE_SELECTOR, "picture")
    picture = require_attr(picture_node, config.PICTURE_ATTR, "picture location")

    summary = _summary_text(find_one(doc, config.SUMMARY_SELECTOR, "summary"))
    region = find_text(doc, config.REGION_SELECTOR, "region")

    return BasicInfo(
        name=name,
        label=label,
        picture=picture,
        summary=summary,
        location=Location(region=region),
        profiles=(),
    )


def extract_work(record: Tag) -> WorkEntry:
    company = find_text(record, config.COMPANY_SELECTOR, "company")
    position = find_text(record, config.POSITION_SELECTOR, "position")

    start, end = split_date_range(find_one(record, config.DATE_RANGE_SELECTOR, "date range").get_text())
    # Drop the "(3 yrs)" duration suffix
    end = end.split(config.DURATION_OPEN)[0]

    summary = find_text(record, config.WORK_SUMMARY_SELECTOR, "summary")

    return WorkEntry(
        company=company,
        position=position,
        startDate=start.strip(),
        endDate=end.strip(),
        summary=summary,
        highlights=(),
    )


def extract_education(record: Tag) -> EducationEntry:
    institution = find_text(record, config.INSTITUTION_SELECTOR, "institution")

    # End date keeps any parenthesized suffix, unlike work entries
    start, end = split_date_range(find_one(record, config.DATE_RANGE_SELECTOR, "date range").get_text())

    study_type, area = split_degree(find_one(record, config.DEGREE_SELECTOR, "degree").get_text())

    return EducationEntry(
        institution=institution,
        area=area,
        studyType=study_type,
        startDate=start.strip(),
        endDate=end.strip(),
    )


def extract_language(record: Tag) -> Language:
    return Language(
        name=find_text(record, config.LANGUAGE_NAME_SELECTOR, "language name"),
        level=find_text(record, config.PROFICIENCY_SELECTOR, "language proficiency"),
    )


def extract_works(doc: BeautifulSoup) -> List[WorkEntry]:
    return [extract_work(r) for r in doc.select(config.WORK_RECORD_SELECTOR)]


def extract_educations(doc: BeautifulSoup) -> List[EducationEntry]:
    return [extract_education(r) for r in doc.select(config.EDUCATION_RECORD_SELECTOR)]


def extract_languages(doc: BeautifulSoup) -> List[Language]:
    return [extract_language(r) for r in doc.select(config.LANGUAGE_RECORD_SELECTOR)]


def extract_skills(doc: BeautifulSoup) -> List[Skill]:
    """Raw node text, no validation. No matches is an empty list."""
    return [Skill(name=s.get_text()) for s in doc.select(config.SKILL_SELECTOR)]


def extract_interests(doc: BeautifulSoup) -> List[Interest]:
    """Raw node text, no validation. No matches is an empty list."""
    return [Interest(name=s.get_text()) for s in doc.select(config.INTEREST_SELECTOR)]


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------

def build_resume(doc: BeautifulSoup, source_url: str, network: str | None = None) -> ResumeDocument:
    """
    Run every section extractor in order and compose the document.
    Appends the source profile and sets the empty volunteer/awards/publications
    lists some themes require.
    """
    basics = extract_basic_info(doc)
    work = extract_works(doc)
    education = extract_educations(doc)
    skills = extract_skills(doc)
    languages = extract_languages(doc)
    interests = extract_interests(doc)

    source = Profile(network=network or settings.profile_network, url=source_url)
    basics = basics.model_copy(update={"profiles": (*basics.profiles, source)})

    return ResumeDocument(
        basics=basics,
        work=work,
        education=education,
        skills=skills,
        languages=languages,
        interests=interests,
        volunteer=(),
        awards=(),
        publications=(),
    )


def resume_for_url(url: str) -> ResumeDocument:
    """Fetch `url` and extract its resume. Raises any ResumeError."""
    doc = fetch_document(url)
    resume = build_resume(doc, url)
    logger.info(
        "Extracted resume url=%s work=%d education=%d skills=%d languages=%d interests=%d",
        url,
        len(resume.work),
        len(resume.education),
        len(resume.skills),
        len(resume.languages),
        len(resume.interests),
    )
    return resume
