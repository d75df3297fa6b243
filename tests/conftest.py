from __future__ import annotations

import pytest

from app.config import get_settings
from app.models.resume import ResumeData
from app.models.templates import default_resume
from app.services.cache import get_redis_client


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Run every test without Gemini or Redis unless a test opts in."""
    monkeypatch.delenv("RESUME_ANALYTICS_GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("RESUME_ANALYTICS_REDIS_URL", raising=False)
    get_settings.cache_clear()
    get_redis_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_redis_client.cache_clear()


@pytest.fixture
def template_resume() -> ResumeData:
    return default_resume()


@pytest.fixture
def minimal_resume() -> ResumeData:
    return ResumeData(fullName="Jane Doe")


@pytest.fixture
def strong_resume_data() -> dict:
    return {
        "fullName": "Jane Doe",
        "jobTitle": "Senior Backend Engineer",
        "email": "jane@example.com",
        "phone": "+1 555 222 1111",
        "linkedin": "linkedin.com/in/janedoe",
        "location": "Toronto, Canada",
        "summary": (
            "Senior backend engineer with 8 years of experience designing and scaling "
            "distributed systems. Built cloud platforms on AWS and Kubernetes, mentored "
            "engineers, and partnered with product teams to ship reliable, high-impact features."
        ),
        "experience": [
            {
                "role": "Senior Backend Engineer",
                "company": "Acme",
                "startDate": "2021-03",
                "endDate": "Present",
                "description": [
                    "Spearheaded migration of 12 Python services to Kubernetes, reducing hosting costs by 30%",
                    "Architected a GraphQL API serving 2M requests per day",
                    "Led a team of 6 engineers and mentored 3 junior developers",
                    "Optimized PostgreSQL queries, cutting p95 latency by 45%",
                ],
            },
            {
                "role": "Backend Engineer",
                "company": "Globex",
                "startDate": "2017-06",
                "endDate": "2021-02",
                "description": (
                    "• Developed React dashboards used by 500 enterprise customers\n"
                    "• Implemented CI/CD pipelines with Jenkins and Docker for 20 repositories\n"
                    "• Launched a serverless billing service on AWS Lambda\n"
                    "• Delivered 4 major releases ahead of schedule"
                ),
            },
        ],
        "education": [{"school": "University of Toronto", "degree": "BSc Computer Science", "year": "2017"}],
        "skills": "Python, Kubernetes, Docker, AWS, React, PostgreSQL, GraphQL",
        "certifications": [{"name": "AWS Solutions Architect", "issuer": "Amazon", "date": "2022"}],
        "projects": [
            {
                "name": "logscope",
                "description": "Built an open-source CLI for log analysis used by 200 developers",
                "technologies": "Python, Click",
            }
        ],
        "keyAchievements": [
            "Achieved 99.9% uptime across 40 services",
            "Reduced onboarding time by 50%",
            "Designed an internal training program adopted by 3 offices",
        ],
    }


@pytest.fixture
def strong_resume(strong_resume_data: dict) -> ResumeData:
    return ResumeData.model_validate(strong_resume_data)
