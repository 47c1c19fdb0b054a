"""Pydantic models for the resume document.

Every model is frozen and every sequence is a tuple, so an edit always
produces a new Resume and earlier instances stay valid to read.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Website(BaseModel):
    """Personal or project link shown under contact details."""

    label: str = ""
    url: str = ""

    class Config:
        frozen = True
        extra = "ignore"


class Education(BaseModel):
    """Education entry."""

    school: str = ""
    degree: str = ""
    start: str = ""
    end: str = ""
    details: str = ""

    class Config:
        frozen = True
        extra = "ignore"


class Experience(BaseModel):
    """Work experience entry. ``details`` holds one achievement per line."""

    role: str = ""
    company: str = ""
    start: str = ""
    end: str = ""
    details: str = ""

    class Config:
        frozen = True
        extra = "ignore"


class Preferences(BaseModel):
    """Display flags saved alongside the resume."""

    dark: bool = False
    compact: bool = False

    class Config:
        frozen = True
        extra = "ignore"


class Resume(BaseModel):
    """Root resume aggregate."""

    name: str = ""
    title: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    linkedin: str = ""
    github: str = ""
    websites: tuple[Website, ...] = ()
    photo: Optional[str] = None
    course: str = ""
    gpa: str = ""
    summary: str = ""
    skills_input: str = Field("", alias="skillsInput")
    skills: tuple[str, ...] = ()
    education: tuple[Education, ...] = (Education(),)
    experience: tuple[Experience, ...] = (Experience(),)
    certifications: tuple[str, ...] = ("",)

    class Config:
        frozen = True
        extra = "ignore"
        populate_by_name = True


# Record type used when a list field grows by one blank element.
LIST_ITEMS = {
    "education": Education,
    "experience": Experience,
    "websites": Website,
    "certifications": str,
}


def blank_resume() -> Resume:
    return Resume()


def sample_resume() -> Resume:
    """Filled-in resume used by the ``sample`` command."""
    return Resume(
        name="Alex Student",
        title="Software Engineer Intern",
        phone="+1 555 123 4567",
        email="alex@example.com",
        address="123 Main St, City",
        linkedin="linkedin.com/in/alex",
        github="github.com/alex",
        course="Computer Science",
        gpa="3.8",
        summary=(
            "Motivated computer science student with internship experience "
            "building web applications."
        ),
        skills_input="JavaScript, React, Node.js, SQL",
        skills=("JavaScript", "React", "Node.js", "SQL"),
        education=(
            Education(
                school="State University",
                degree="BSc Computer Science",
                start="2021",
                end="2024",
                details="Relevant coursework: Algorithms, Databases",
            ),
        ),
        experience=(
            Experience(
                role="Research Intern",
                company="Acme Labs",
                start="Jun 2023",
                end="Aug 2023",
                details="Built data pipeline\nImproved performance by 20%",
            ),
        ),
        certifications=("AWS Certified Cloud Practitioner",),
    )
