"""Fixed word lists used by the resume analytics engine.

All entries are lower case. Multi-word entries are matched as phrases over the
token stream, so they are tokenized with the same rules as resume text.
"""

STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "if", "because", "as", "what", "when", "where", "how",
    "of", "at", "by", "for", "with", "about", "against", "between", "into", "through", "during",
    "before", "after", "above", "below", "to", "from", "up", "down", "in", "out", "on", "off",
    "over", "under", "again", "further", "then", "once", "here", "there", "all", "any", "both",
    "each", "few", "more", "most", "other", "some", "such", "no", "nor", "not", "only", "own",
    "same", "so", "than", "too", "very", "can", "will", "just", "should", "now", "are", "was",
    "were", "have", "has", "had", "having", "do", "does", "did", "doing", "your", "ours", "items",
    "stuff", "being", "going", "would", "could", "their", "they", "them", "this", "that", "these",
    "those", "am", "is", "be", "been", "my", "me", "we", "us", "our", "it", "its", "you", "he",
    "him", "his", "she", "her", "hers", "work", "job", "role", "position", "experience", "year",
    "years", "team", "company", "business", "client", "clients", "project", "projects",
})

ACTION_VERBS = frozenset({
    "achieved", "improved", "trained", "managed", "created", "designed", "developed",
    "implemented", "increased", "decreased", "reduced", "led", "launched", "established",
    "generated", "delivered", "optimized", "streamlined", "coordinated", "executed",
    "spearheaded", "initiated", "built", "enhanced", "transformed", "drove", "accelerated",
    "orchestrated", "pioneered", "engineered", "architected", "deployed", "resolved",
    "negotiated", "mentored", "supervised", "directed", "formulated", "conceptualized",
})

TECHNICAL_KEYWORDS = frozenset({
    "javascript", "python", "java", "react", "angular", "vue", "node", "sql", "aws",
    "azure", "docker", "kubernetes", "api", "database", "agile", "scrum", "git",
    "typescript", "html", "css", "mongodb", "postgresql", "redis", "graphql",
    "rest", "soap", "ci/cd", "jenkins", "terraform", "linux", "unix", "bash",
    "shell", "c++", "c#", ".net", "django", "flask", "spring", "hibernate",
    "redux", "mobx", "next.js", "nuxt", "express", "fastapi", "pandas", "numpy",
    "tensorflow", "pytorch", "scikit-learn", "machine learning", "ai", "cloud",
    "microservices", "serverless", "lambda", "s3", "ec2", "gcp", "firebase",
})

SOFT_SKILLS = frozenset({
    "leadership", "communication", "teamwork", "problem-solving", "analytical",
    "creative", "organized", "detail-oriented", "collaborative", "adaptable",
    "strategic", "innovative", "motivated", "reliable", "professional",
    "time management", "critical thinking", "emotional intelligence", "flexibility",
    "interpersonal", "presentation", "negotiation", "conflict resolution",
})

# Hedging phrases, matched as case-insensitive substrings of a bullet
WEAK_PHRASES = (
    "responsible for", "helped", "worked on", "assisted", "participated in",
    "duties included", "handled", "tried", "attempted",
)

# Category names in classification priority order
ACTION_VERB = "action_verbs"
TECHNICAL_SKILL = "technical_skills"
SOFT_SKILL = "soft_skills"

LEXICON_CATEGORIES = (
    (ACTION_VERB, ACTION_VERBS),
    (TECHNICAL_SKILL, TECHNICAL_KEYWORDS),
    (SOFT_SKILL, SOFT_SKILLS),
)
