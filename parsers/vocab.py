"""Fixed vocabularies used by the text extractors."""

STOP_WORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'by', 'as', 'is', 'was', 'are', 'were', 'be', 'been',
    'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would', 'could',
    'should', 'may', 'might', 'must', 'can',
])

# Declaration order matters: extracted skills are reported in this order.
SKILLS_DB = {
    'programming_languages': [
        'javascript', 'typescript', 'python', 'java', 'c++', 'c#', 'php', 'ruby',
        'swift', 'kotlin', 'go', 'rust', 'scala', 'r', 'matlab',
    ],
    'web_technologies': [
        'html', 'css', 'sass', 'less', 'bootstrap', 'tailwind',
    ],
    'frameworks': [
        'react', 'angular', 'vue', 'node.js', 'express', 'django', 'flask',
        'spring', 'laravel', 'ruby on rails',
    ],
    'databases': [
        'mysql', 'postgresql', 'mongodb', 'redis', 'sqlite', 'oracle',
    ],
    'cloud_devops': [
        'aws', 'azure', 'docker', 'kubernetes', 'jenkins', 'git', 'linux',
    ],
    'mobile': [
        'react native', 'flutter', 'android', 'ios',
    ],
    'ai_ml': [
        'tensorflow', 'pytorch', 'machine learning', 'data science',
    ],
    'soft_skills': [
        'leadership', 'communication', 'teamwork', 'problem solving',
    ],
}

# Flattened, in category then declaration order
SKILL_CATALOG = tuple(skill for skills in SKILLS_DB.values() for skill in skills)

# Seniority words -> implied years, checked top to bottom
SENIORITY_TIERS = (
    (('senior', 'lead', 'principal'), 5),
    (('mid', 'intermediate'), 3),
    (('junior', 'entry'), 1),
)
