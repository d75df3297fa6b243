"""Built-in placeholder resume shown to new users in the editor."""
from app.models.resume import ResumeData


DEFAULT_RESUME = {
    "fullName": "YOUR NAME",
    "jobTitle": "PROFESSIONAL ROLE",
    "email": "your.email@example.com",
    "phone": "+1 (555) 123-4567",
    "linkedin": "linkedin.com/in/yourprofile",
    "location": "City, Country",
    "summary": (
        "A brief professional summary highlighting your key strengths, experience, "
        "and career objectives. This should be 2-3 sentences that capture your "
        "professional identity and value proposition."
    ),
    "experience": [
        {
            "id": "1",
            "company": "Company Name",
            "role": "Job Title",
            "location": "City, Country",
            "startDate": "2020-01",
            "endDate": "Present",
            "description": [
                "Key responsibility or achievement",
                "Another important accomplishment",
                "Quantifiable result or impact",
                "Additional contribution or success",
            ],
        }
    ],
    "education": [
        {
            "id": "1",
            "school": "University Name",
            "degree": "Degree Name, Major",
            "year": "2020",
        }
    ],
    "skills": "Skill 1, Skill 2, Skill 3, Skill 4, Skill 5, Skill 6",
    "certifications": [],
    "projects": [],
    "leadership": [],
    "keyAchievements": [
        "Major achievement or award",
        "Significant project or milestone",
        "Recognition or accomplishment",
    ],
    "jobDescription": "",
}


def default_resume() -> ResumeData:
    """Return a fresh copy of the placeholder resume."""
    return ResumeData.model_validate(DEFAULT_RESUME)
