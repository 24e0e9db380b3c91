"""
Pytest fixtures for linkedresume tests.
Provides profile page markup builders and a TestClient. No test touches the network.
"""
import os

import pytest
from fastapi.testclient import TestClient

# Keep the index page offline regardless of any local .env
os.environ["THEMES_CATALOG_URL"] = ""

from linkedresume.main import app

PROFILE_URL = "https://www.linkedin.com/in/jane-doe"

BASICS_HTML = """
<h1 id="name"> Jane Doe </h1>
<p class="headline title">Staff Engineer at Acme</p>
<div class="profile-picture">
  <img src="/spacer.gif" data-delayed-url="https://media.example.com/jane.jpg">
</div>
<section id="summary">
  <div class="description"><p>
    Builds things.<br/>Ships things.
  </p></div>
</section>
<dl id="demographics"><dd class="locality">Greater Seattle Area</dd></dl>
"""

WORK_HTML = """
<li class="position">
  <header>
    <h4 class="item-title"><span>{position}</span></h4>
    <h5 class="item-subtitle"><span>{company}</span></h5>
  </header>
  <div class="meta"><span class="date-range">{dates}</span></div>
  <p class="description">{summary}</p>
</li>
"""

SCHOOL_HTML = """
<li class="school">
  <header>
    <h4 class="item-title"><span>{institution}</span></h4>
    <h5 class="item-subtitle"><span>{degree}</span></h5>
  </header>
  <div class="meta"><span class="date-range">{dates}</span></div>
</li>
"""

LANGUAGE_HTML = """
<li class="language"><h4 class="name">{name}</h4><p class="proficiency">{level}</p></li>
"""


def work_html(
    position="Staff Engineer",
    company="Acme",
    dates="Jan 2015 – Mar 2017 (2 yrs 3 mos)",
    summary="Platform work.",
):
    return WORK_HTML.format(position=position, company=company, dates=dates, summary=summary)


def school_html(
    institution="State University",
    degree="Bachelor's Degree, Computer Engineering",
    dates="2008 – 2012",
):
    return SCHOOL_HTML.format(institution=institution, degree=degree, dates=dates)


def language_html(name="French", level="Professional working proficiency"):
    return LANGUAGE_HTML.format(name=name, level=level)


def profile_html(
    basics=BASICS_HTML,
    works=None,
    schools=None,
    skills=("Python", "Go"),
    languages=None,
    interests=("Climbing",),
):
    """Assemble a full profile page from parts. None means the default records."""
    works = [work_html()] if works is None else works
    schools = [school_html()] if schools is None else schools
    languages = [language_html()] if languages is None else languages
    return (
        "<html><body>"
        + basics
        + '<section id="experience"><ul>' + "".join(works) + "</ul></section>"
        + '<section id="education"><ul>' + "".join(schools) + "</ul></section>"
        + '<section id="skills"><ul>'
        + "".join(f'<li class="skill">{s}</li>' for s in skills)
        + "</ul></section>"
        + '<section id="languages"><ul>' + "".join(languages) + "</ul></section>"
        + '<section id="interests"><ul>'
        + "".join(f'<li class="interest">{i}</li>' for i in interests)
        + "</ul></section>"
        + "</body></html>"
    )


@pytest.fixture
def profile_page():
    """Default, fully valid profile page markup."""
    return profile_html()


@pytest.fixture
def client():
    return TestClient(app)
