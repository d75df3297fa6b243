"""Resume data models matching the editor structure."""
from typing import List, Optional, Union
from pydantic import BaseModel, Field, field_validator


def _none_to_empty_list(v):
    """Treat a missing list as empty and drop null entries."""
    if v is None:
        return []
    if isinstance(v, list):
        return [item for item in v if item is not None]
    return v


def _none_to_empty_string(v):
    return "" if v is None else v


class Experience(BaseModel):
    """Work experience or leadership entry."""
    id: Optional[str] = Field(None, description="Unique identifier")
    role: str = Field("", description="Job title/role")
    company: str = Field("", description="Company or organization name")
    location: Optional[str] = Field(None, description="Job location")
    start_date: str = Field("", alias="startDate", description="Start date (e.g., '2020-01')")
    end_date: str = Field("", alias="endDate", description="End date or 'Present'")
    description: Union[str, List[str]] = Field(
        "",
        description="Bullet points, either newline-delimited text or a list",
    )

    class Config:
        populate_by_name = True

    @field_validator("role", "company", "start_date", "end_date", "description", mode="before")
    @classmethod
    def coerce_missing_text(cls, v):
        return _none_to_empty_string(v)

    @field_validator("description", mode="before")
    @classmethod
    def drop_null_bullets(cls, v):
        if isinstance(v, list):
            return [item for item in v if isinstance(item, str)]
        return v


class Education(BaseModel):
    """Education entry."""
    id: Optional[str] = Field(None, description="Unique identifier")
    school: str = Field("", description="School/University name")
    degree: str = Field("", description="Degree name and major")
    year: str = Field("", description="Graduation year")
    gpa: Optional[str] = Field(None, description="GPA (optional)")

    @field_validator("school", "degree", "year", mode="before")
    @classmethod
    def coerce_missing_text(cls, v):
        return _none_to_empty_string(v)


class Certification(BaseModel):
    """Certification entry."""
    id: Optional[str] = Field(None, description="Unique identifier")
    name: str = Field("", description="Certification name")
    issuer: str = Field("", description="Issuing organization")
    date: str = Field("", description="Date obtained")
    link: Optional[str] = Field(None, description="Verification URL")

    @field_validator("name", "issuer", "date", mode="before")
    @classmethod
    def coerce_missing_text(cls, v):
        return _none_to_empty_string(v)


class Project(BaseModel):
    """Project entry."""
    id: Optional[str] = Field(None, description="Unique identifier")
    name: str = Field("", description="Project name")
    description: str = Field("", description="Project description")
    link: Optional[str] = Field(None, description="Project URL")
    technologies: Optional[str] = Field(None, description="Technologies used, comma separated")

    @field_validator("name", "description", mode="before")
    @classmethod
    def coerce_missing_text(cls, v):
        return _none_to_empty_string(v)


class ResumeData(BaseModel):
    """Complete resume data structure matching the editor format."""
    full_name: Optional[str] = Field(None, alias="fullName")
    job_title: Optional[str] = Field(None, alias="jobTitle")
    email: Optional[str] = Field(None, description="Email address")
    phone: Optional[str] = Field(None, description="Phone number")
    location: Optional[str] = Field(None, description="Location (City, Country)")
    linkedin: Optional[str] = Field(None, description="LinkedIn profile URL or username")
    summary: str = Field("", description="Professional summary")
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: str = Field("", description="Comma separated skills")
    certifications: List[Certification] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    leadership: List[Experience] = Field(default_factory=list)
    key_achievements: Union[str, List[str]] = Field(
        "",
        alias="keyAchievements",
        description="Achievements, either newline-delimited text or a list",
    )
    job_description: Optional[str] = Field(
        None,
        alias="jobDescription",
        description="Target job description for job-match scoring",
    )

    class Config:
        populate_by_name = True

    @field_validator(
        "experience", "education", "certifications", "projects", "leadership", mode="before"
    )
    @classmethod
    def coerce_missing_lists(cls, v):
        return _none_to_empty_list(v)

    @field_validator("summary", "key_achievements", mode="before")
    @classmethod
    def coerce_missing_text(cls, v):
        if isinstance(v, list):
            return [item for item in v if isinstance(item, str)]
        return _none_to_empty_string(v)

    @field_validator("skills", mode="before")
    @classmethod
    def join_skill_list(cls, v):
        """Accept a list of skills and store the canonical comma separated form."""
        if isinstance(v, list):
            return ", ".join(item for item in v if isinstance(item, str))
        return _none_to_empty_string(v)
