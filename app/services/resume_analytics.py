"""
Resume scoring and analysis engine.

Deterministically computes, from a single resume:
- An ATS-compatibility score
- A completeness score over the eight resume sections
- A job-match score when a job description is supplied
- Keyword statistics against fixed lexicons
- Bullet-level readability metrics
- Strengths and improvement suggestions

The engine is a pure function of its input. It performs no I/O, holds no
mutable state and never raises for a valid ResumeData instance, so callers
can run it on every edit.
"""

import re
import logging
from dataclasses import asdict, dataclass
from typing import Optional

from app.models.resume import ResumeData
from app.services.lexicons import (
    ACTION_VERB,
    SOFT_SKILL,
    TECHNICAL_SKILL,
    WEAK_PHRASES,
)
from app.services.nlp_utils import NLPProcessor, get_description_bullets, lemmatize

logger = logging.getLogger(__name__)


# A job description must be longer than this (trimmed) to enable job matching
JOB_DESCRIPTION_MIN_LENGTH = 20
MAX_MISSING_KEYWORDS = 10

# Digits, percentages and currency amounts
METRIC_PATTERN = re.compile(r"[$€£]\s?\d|\d+|%")

SUMMARY_TARGET_CHARS = 200
SKILLS_TARGET = 6
ACHIEVEMENTS_TARGET = 3

ACTION_VERB_CAP = 15
METRIC_DENSITY_TARGET = 0.30
TECHNICAL_SKILL_TARGET = 5

# Impact score components (sum to 100)
IMPACT_POINTS = {
    "action_verbs": 35,
    "metrics": 35,
    "technical_skills": 20,
    "clarity": 10,
}
WEAK_WORD_PENALTY = 2

# Keyword weights for job matching
CRITICAL_KEYWORD_WEIGHT = 3.0
BONUS_KEYWORD_WEIGHT = 1.0
MINOR_KEYWORD_WEIGHT = 0.5

# Strength/improvement thresholds
STRONG_SUMMARY_SCORE = 80
STRONG_ACTION_VERBS = 10
STRONG_COMPLETENESS = 85
STRONG_JOB_MATCH = 80


@dataclass(frozen=True)
class SectionScores:
    """Quality score per resume section, 0-100 and unrounded."""
    personal_info: float = 0.0
    summary: float = 0.0
    experience: float = 0.0
    education: float = 0.0
    skills: float = 0.0
    achievements: float = 0.0
    projects: float = 0.0
    certifications: float = 0.0

    def values(self) -> list[float]:
        return list(asdict(self).values())


@dataclass(frozen=True)
class KeywordStats:
    """Lexicon hit counts across the whole resume."""
    action_verbs: int = 0
    technical_skills: int = 0
    soft_skills: int = 0
    missing_keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReadabilityStats:
    """Bullet-level writing statistics."""
    avg_word_count: float = 0.0
    bullet_points: int = 0
    metric_density: float = 0.0  # 0-1
    quantifiable_achievements: int = 0
    weak_words: int = 0


@dataclass(frozen=True)
class AnalyticsResult:
    """Complete analytics for one resume."""
    ats_score: int  # 0-100
    completeness: int  # 0-100
    job_match_score: int  # 0 outside job-match mode
    strengths: tuple[str, ...]
    improvements: tuple[str, ...]
    section_scores: SectionScores
    keywords: KeywordStats
    readability: ReadabilityStats

    def to_dict(self) -> dict:
        return asdict(self)


def has_job_description(resume: ResumeData) -> bool:
    """Whether the resume carries a job description long enough to match against."""
    return len((resume.job_description or "").strip()) > JOB_DESCRIPTION_MIN_LENGTH


class ResumeAnalyzer:
    """
    Resume analytics engine.

    Runs five stages over the resume:
    1. Text aggregation into per-section chunks
    2. Keyword classification against the lexicons
    3. Readability analysis of every bullet
    4. Section scoring
    5. Composite scoring and recommendations
    """

    def __init__(self):
        self.nlp = NLPProcessor()

    def analyze(self, resume: ResumeData) -> AnalyticsResult:
        """
        Compute analytics for a resume.

        Args:
            resume: The resume to analyze. It is never modified.

        Returns:
            AnalyticsResult with scores, statistics and recommendations
        """
        sections = self._collect_section_text(resume)
        bullets = self._collect_bullets(resume)

        counts = self.nlp.classify(chunk for chunks in sections.values() for chunk in chunks)
        readability = self._analyze_readability(bullets)
        section_scores = self._score_sections(resume)

        structure = sum(section_scores.values()) / len(section_scores.values())
        completeness = int(round(structure))

        keywords = KeywordStats(
            action_verbs=counts[ACTION_VERB],
            technical_skills=counts[TECHNICAL_SKILL],
            soft_skills=counts[SOFT_SKILL],
        )
        impact = self._impact_score(keywords, readability)

        job_mode = has_job_description(resume)
        job_match_score = 0
        if job_mode:
            job_match_score, missing = self._analyze_job_match(resume, sections, impact)
            keywords = KeywordStats(
                action_verbs=keywords.action_verbs,
                technical_skills=keywords.technical_skills,
                soft_skills=keywords.soft_skills,
                missing_keywords=tuple(missing),
            )

        ats_score = self._calculate_ats_score(structure, impact, job_match_score if job_mode else None)

        strengths, improvements = self._generate_recommendations(
            resume, section_scores, keywords, readability, completeness, job_match_score, job_mode
        )

        logger.debug(
            f"Analyzed resume: ats={ats_score} completeness={completeness} "
            f"job_match={job_match_score} bullets={readability.bullet_points}"
        )

        return AnalyticsResult(
            ats_score=ats_score,
            completeness=completeness,
            job_match_score=job_match_score,
            strengths=tuple(strengths),
            improvements=tuple(improvements),
            section_scores=section_scores,
            keywords=keywords,
            readability=readability,
        )

    def _collect_section_text(self, resume: ResumeData) -> dict[str, list[str]]:
        """Gather the free text of each section as independent chunks."""
        sections: dict[str, list[str]] = {
            "summary": [resume.summary] if resume.summary else [],
            "experience": [],
            "leadership": [],
            "projects": [],
            "achievements": get_description_bullets(resume.key_achievements),
            "skills": self._skill_list(resume),
        }

        for exp in (resume.experience or []):
            sections["experience"].extend(get_description_bullets(exp.description))

        for entry in (resume.leadership or []):
            sections["leadership"].extend(get_description_bullets(entry.description))

        for proj in (resume.projects or []):
            sections["projects"].extend(get_description_bullets(proj.description))
            sections["projects"].extend(
                tech.strip() for tech in (proj.technologies or "").split(",") if tech.strip()
            )

        return sections

    def _collect_bullets(self, resume: ResumeData) -> list[str]:
        bullets: list[str] = []
        for entry in (resume.experience or []) + (resume.leadership or []):
            bullets.extend(get_description_bullets(entry.description))
        for proj in (resume.projects or []):
            bullets.extend(get_description_bullets(proj.description))
        bullets.extend(get_description_bullets(resume.key_achievements))
        return bullets

    @staticmethod
    def _skill_list(resume: ResumeData) -> list[str]:
        return [s.strip() for s in (resume.skills or "").split(",") if s.strip()]

    def _analyze_readability(self, bullets: list[str]) -> ReadabilityStats:
        """Word counts, metric usage and weak phrasing across all bullets."""
        if not bullets:
            return ReadabilityStats()

        word_counts = [len(bullet.split()) for bullet in bullets]
        quantified = sum(1 for bullet in bullets if METRIC_PATTERN.search(bullet))
        weak_words = sum(
            bullet.lower().count(phrase) for bullet in bullets for phrase in WEAK_PHRASES
        )

        return ReadabilityStats(
            avg_word_count=sum(word_counts) / len(word_counts),
            bullet_points=len(bullets),
            metric_density=quantified / len(bullets),
            quantifiable_achievements=quantified,
            weak_words=weak_words,
        )

    def _score_sections(self, resume: ResumeData) -> SectionScores:
        skill_count = len(self._skill_list(resume))
        achievement_lines = len(get_description_bullets(resume.key_achievements))

        return SectionScores(
            personal_info=self._score_personal_info(resume),
            summary=min(100.0, max(0.0, len(resume.summary or "") / SUMMARY_TARGET_CHARS * 100)),
            experience=self._score_experience(resume),
            education=100.0 if resume.education else 0.0,
            skills=min(100.0, skill_count / SKILLS_TARGET * 100),
            achievements=min(100.0, achievement_lines / ACHIEVEMENTS_TARGET * 100),
            # Optional sections are only mildly penalized when absent
            projects=100.0 if resume.projects else 50.0,
            certifications=100.0 if resume.certifications else 50.0,
        )

    @staticmethod
    def _score_personal_info(resume: ResumeData) -> float:
        fields = (resume.full_name, resume.email, resume.phone, resume.linkedin, resume.location)
        return float(sum(20 for value in fields if value and value.strip()))

    @staticmethod
    def _score_experience(resume: ResumeData) -> float:
        experiences = resume.experience or []
        if not experiences:
            return 0.0

        total_length = sum(
            len(" ".join(get_description_bullets(exp.description))) for exp in experiences
        )
        avg_length = total_length / len(experiences)

        score = 50.0
        if avg_length > 100:
            score += 25
        if avg_length > 200:
            score += 25
        return min(100.0, score)

    def _impact_score(self, keywords: KeywordStats, readability: ReadabilityStats) -> float:
        """Writing quality on a 0-100 scale."""
        score = min(ACTION_VERB_CAP, keywords.action_verbs) / ACTION_VERB_CAP * IMPACT_POINTS["action_verbs"]
        score += min(1.0, readability.metric_density / METRIC_DENSITY_TARGET) * IMPACT_POINTS["metrics"]
        score += (
            min(TECHNICAL_SKILL_TARGET, keywords.technical_skills) / TECHNICAL_SKILL_TARGET
            * IMPACT_POINTS["technical_skills"]
        )
        if readability.bullet_points > 0:
            score += max(0, IMPACT_POINTS["clarity"] - WEAK_WORD_PENALTY * readability.weak_words)
        return max(0.0, min(100.0, score))

    def _keyword_weight(self, term: str, count: int) -> float:
        if count >= 3 or self.nlp.category_of(term) in (TECHNICAL_SKILL, SOFT_SKILL):
            return CRITICAL_KEYWORD_WEIGHT
        if count == 2:
            return BONUS_KEYWORD_WEIGHT
        return MINOR_KEYWORD_WEIGHT

    def _analyze_job_match(
        self,
        resume: ResumeData,
        sections: dict[str, list[str]],
        impact: float,
    ) -> tuple[int, list[str]]:
        """
        Score how well the resume covers the job description.

        Returns:
            Tuple of (match_score, missing_keywords)
        """
        frequency, order = self.nlp.signal_terms(resume.job_description or "")

        chunks = [chunk for section in sections.values() for chunk in section]
        chunks.append(resume.job_title or "")
        chunks.extend(exp.role for exp in (resume.experience or []))
        vocabulary = self.nlp.vocabulary(chunks)

        total_weight = 0.0
        matched_weight = 0.0
        missing: list[str] = []

        for term in order:
            weight = self._keyword_weight(term, frequency[term])
            total_weight += weight
            if term in vocabulary or lemmatize(term) in vocabulary:
                matched_weight += weight
            elif weight == CRITICAL_KEYWORD_WEIGHT and len(missing) < MAX_MISSING_KEYWORDS:
                missing.append(term)

        if matched_weight == 0:
            return 0, missing

        overlap = matched_weight / total_weight
        score = max(1, int(round(overlap * 70 + impact * 0.3)))

        return max(0, min(100, score)), missing

    def _calculate_ats_score(
        self,
        structure: float,
        impact: float,
        job_match_score: Optional[int],
    ) -> int:
        """Blend structure, impact and (in job-match mode) relevance."""
        if job_match_score is None:
            total = structure * 0.5 + impact * 0.5
        else:
            total = job_match_score * 0.4 + impact * 0.3 + structure * 0.3
        return max(0, min(100, int(round(total))))

    def _generate_recommendations(
        self,
        resume: ResumeData,
        section_scores: SectionScores,
        keywords: KeywordStats,
        readability: ReadabilityStats,
        completeness: int,
        job_match_score: int,
        job_mode: bool,
    ) -> tuple[list[str], list[str]]:
        strengths: list[str] = []
        improvements: list[str] = []

        if job_mode and job_match_score >= STRONG_JOB_MATCH:
            strengths.append("Excellent match with the job description")

        if readability.metric_density >= METRIC_DENSITY_TARGET:
            strengths.append("Strong use of metrics (numbers/%) in your bullets")
        else:
            improvements.append(
                f"Add more quantifiable metrics to your experience bullets "
                f"(only {int(round(readability.metric_density * 100))}% include numbers, aim for 30%)"
            )

        if keywords.action_verbs >= STRONG_ACTION_VERBS:
            strengths.append("Strong action verbs throughout your experience")
        else:
            improvements.append("Start more bullets with strong action verbs (Spearheaded, Orchestrated, etc.)")

        if readability.weak_words > 0:
            improvements.append(
                f"Replace weak phrases like 'responsible for' or 'helped' ({readability.weak_words} found)"
            )
        elif readability.bullet_points > 0:
            strengths.append("Confident writing with no weak phrases")

        if keywords.technical_skills >= TECHNICAL_SKILL_TARGET:
            strengths.append("Good coverage of technical skills and tools")
        else:
            improvements.append("Mention the specific technologies and tools you use")

        if section_scores.summary >= STRONG_SUMMARY_SCORE:
            strengths.append("Professional summary is well developed")
        else:
            improvements.append("Expand your professional summary to 2-3 sentences (about 200 characters)")

        if completeness >= STRONG_COMPLETENESS:
            strengths.append("Resume structure is comprehensive")
        else:
            improvements.append("Fill in the missing sections to make your resume more complete")

        if section_scores.personal_info < 100:
            improvements.append("Complete your contact details (name, email, phone, LinkedIn, location)")
        if section_scores.experience == 0:
            improvements.append("Add at least one work experience entry")
        if section_scores.education == 0:
            improvements.append("Add your educational background")
        if section_scores.skills < 100:
            improvements.append(f"List at least {SKILLS_TARGET} relevant skills")
        if section_scores.achievements < 100:
            improvements.append(f"Highlight at least {ACHIEVEMENTS_TARGET} key achievements")

        if job_mode:
            if job_match_score < STRONG_JOB_MATCH:
                improvements.append("Critical keywords missing. Check the missing keywords list.")
            if keywords.missing_keywords:
                improvements.append(f"Try to include: {', '.join(keywords.missing_keywords[:3])}")
        else:
            improvements.append("Add a job description to see your job match score")

        return strengths, improvements


# Singleton instance
_resume_analyzer: Optional[ResumeAnalyzer] = None


def get_resume_analyzer() -> ResumeAnalyzer:
    """Get or create the resume analyzer singleton."""
    global _resume_analyzer
    if _resume_analyzer is None:
        _resume_analyzer = ResumeAnalyzer()
    return _resume_analyzer


def analyze(resume: ResumeData) -> AnalyticsResult:
    """Compute analytics for a resume with the shared analyzer."""
    return get_resume_analyzer().analyze(resume)
