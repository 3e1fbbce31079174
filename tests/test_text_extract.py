from parsers.text_extract import (
    MAX_KEYWORDS,
    extract_experience_years,
    extract_keywords,
    extract_skills,
    tokenize,
)
from parsers.vocab import SKILL_CATALOG, SKILLS_DB, STOP_WORDS


# -------------------- keywords --------------------
def test_tokenize_treats_punctuation_as_space():
    assert tokenize("Node.js, C++ & React!") == ["node", "js", "c", "react"]


def test_keywords_ranked_by_frequency():
    text = "Python python PYTHON developer developer engineer"
    assert extract_keywords(text) == ["python", "developer", "engineer"]


def test_keyword_ties_keep_first_seen_order():
    assert extract_keywords("zeta alpha beta alpha beta") == ["alpha", "beta", "zeta"]
    assert extract_keywords("delta gamma omega") == ["delta", "gamma", "omega"]


def test_keywords_drop_stop_words_and_short_tokens():
    text = "The cat and the dog is on a mat with an ox"
    assert extract_keywords(text) == ["cat", "dog", "mat"]


def test_keywords_capped_and_distinct():
    words = [f"term{i:02d}" for i in range(30)]
    keywords = extract_keywords(" ".join(words * 2))
    assert len(keywords) == MAX_KEYWORDS
    assert keywords == words[:MAX_KEYWORDS]
    assert len(set(keywords)) == len(keywords)


def test_keywords_properties_on_prose():
    text = ("We are looking for a backend engineer who has built APIs, has shipped "
            "services to production and can mentor others. The engineer will own "
            "APIs and services end to end, on call included.")
    keywords = extract_keywords(text)
    assert keywords[0] in {"engineer", "apis", "services"}
    assert all(len(k) > 2 for k in keywords)
    assert not set(keywords) & STOP_WORDS
    assert all(k == k.lower() for k in keywords)


def test_keywords_custom_stop_words():
    assert extract_keywords("python rocks python", stop_words=["python"]) == ["rocks"]


def test_keywords_empty_text():
    assert extract_keywords("") == []
    assert extract_keywords("   \n\t ") == []


# -------------------- skills --------------------
def test_catalog_flattens_categories_in_order():
    assert SKILL_CATALOG[0] == "javascript"
    assert SKILL_CATALOG[-1] == "problem solving"
    assert len(SKILL_CATALOG) == sum(len(v) for v in SKILLS_DB.values())
    assert len(set(SKILL_CATALOG)) == len(SKILL_CATALOG)


def test_skills_substring_match():
    # "java" and "r" are found inside longer words
    assert extract_skills("Experienced in JavaScript and Docker") == ["javascript", "java", "r", "docker"]


def test_skills_case_insensitive_and_catalog_order():
    skills = extract_skills("DOCKER first, then Python and KUBERNETES")
    assert "kubernetes" in skills
    assert skills.index("python") < skills.index("docker")


def test_skills_multi_word_labels():
    skills = extract_skills("Worked on machine learning and React Native apps")
    assert "machine learning" in skills
    assert "react native" in skills
    assert "react" in skills


def test_skills_only_catalog_members_present_in_text():
    text = "Senior engineer: Go, Rust, PostgreSQL, Terraform, strong communication"
    skills = extract_skills(text)
    assert set(skills) <= set(SKILL_CATALOG)
    assert all(s in text.lower() for s in skills)
    assert "terraform" not in skills


def test_skills_custom_catalog():
    assert extract_skills("Uses Terraform daily", catalog=["terraform", "ansible"]) == ["terraform"]


def test_skills_empty_text():
    assert extract_skills("") == []


# -------------------- experience --------------------
def test_experience_plus_pattern():
    assert extract_experience_years("Requires 10+ years in backend work") == 10


def test_experience_takes_maximum_of_all_mentions():
    assert extract_experience_years("2 years at Acme, then 7 years at Globex") == 7


def test_experience_range_also_hits_plain_pattern():
    # the range pattern contributes 3, the plain pattern still sees "5 years"
    assert extract_experience_years("3 - 5 years of experience") == 5
    assert extract_experience_years("3-5 yrs") == 0


def test_experience_singular_year():
    assert extract_experience_years("1 year internship") == 1


def test_experience_numbers_win_over_seniority():
    assert extract_experience_years("Senior developer with 2 years of Python") == 2


def test_experience_seniority_fallback():
    assert extract_experience_years("Senior engineer") == 5
    assert extract_experience_years("Team lead for payments") == 5
    assert extract_experience_years("Principal architect") == 5
    assert extract_experience_years("Mid-level developer") == 3
    assert extract_experience_years("Intermediate analyst") == 3
    assert extract_experience_years("Junior developer") == 1
    assert extract_experience_years("Entry position") == 1


def test_experience_no_signal():
    assert extract_experience_years("Software developer") == 0
    assert extract_experience_years("") == 0


def test_experience_survives_oversized_digit_run():
    huge = "9" * 5000
    years = extract_experience_years(huge + " years")
    assert isinstance(years, int)
    assert years >= 0
    assert extract_experience_years(f"{huge} years of python, then 4 years of go") >= 4


def test_experience_monotonic_in_explicit_mentions():
    more = extract_experience_years("Python developer, 10+ years")
    less = extract_experience_years("Python developer, 5 years")
    assert more >= less
