# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import streamlit as st
import requests
import pandas as pd
import config
from ui.results_store import (
    load_last_result,
    save_last_result,
    score_band,
    score_feedback,
    validate_file_inputs,
    validate_text_inputs,
)
# -------------------- CONFIG --------------------
st.set_page_config(page_title="NeuroHire Resume Matcher", page_icon="🧠", layout="wide")
st.title("🧠 NeuroHire: Resume ↔ Job Description Matcher")

st.markdown(
    "Paste your resume or upload it, add the job description, and get a fit score with "
    "keyword, skill and experience breakdowns plus suggestions to improve your match."
)

# -------------------- SESSION STATE --------------------
if "api_url" not in st.session_state:
    st.session_state.api_url = config.API_URL

# Last analysis survives reruns (session) and page reloads (cache file)
if "last_analysis" not in st.session_state:
    st.session_state.last_analysis = load_last_result(config.LAST_RESULT_PATH)

if "last_message" not in st.session_state:
    st.session_state.last_message = None


def _store(analysis: dict, message: str | None = None):
    st.session_state.last_analysis = analysis
    st.session_state.last_message = message
    try:
        save_last_result(analysis, config.LAST_RESULT_PATH)
    except OSError as e:
        st.warning(f"Could not cache the result locally: {e}")


def _post(path: str, **kwargs):
    """POST to the API; returns the JSON body or None after showing the error."""
    try:
        r = requests.post(f"{st.session_state.api_url}{path}", timeout=60, **kwargs)
    except requests.exceptions.RequestException as e:
        st.error(f"❌ Connection error: {e}. Make sure the backend server is running.")
        return None
    try:
        body = r.json()
    except ValueError:
        body = {}
    if r.status_code != 200 or not body.get("success"):
        st.error(f"❌ {body.get('error') or f'Analysis failed ({r.status_code})'}")
        return None
    return body


# -------------------- SIDEBAR: BACKEND STATUS --------------------
with st.sidebar:
    st.subheader("Backend")
    try:
        health = requests.get(f"{st.session_state.api_url}/health", timeout=5)
        health.raise_for_status()
        st.success(f"🟢 Connected (v{health.json().get('version', '?')})")
    except requests.exceptions.RequestException:
        st.error("🔴 Backend server is not running. Please start the backend server.")

# -------------------- TABS --------------------
tab1, tab2, tab3 = st.tabs(["📝 Paste Text", "📤 Upload File", "📊 Results"])

# ==================== TAB 1: Text analysis ====================
with tab1:
    with st.form("text_form", clear_on_submit=False):
        resume_text = st.text_area("Resume Text", height=250)
        job_text = st.text_area("Job Description", height=200)
        submitted = st.form_submit_button("Analyze Resume")

    if submitted:
        problem = validate_text_inputs(resume_text, job_text)
        if problem:
            st.warning(problem)
        else:
            with st.spinner("⏳ Analyzing..."):
                body = _post("/analyze/text", json={
                    "resumeText": resume_text.strip(),
                    "jobDescription": job_text.strip(),
                })
            if body:
                _store(body["analysis"])
                st.success("✅ Analysis complete! Open the Results tab.")

# ==================== TAB 2: File upload ====================
with tab2:
    with st.form("file_form", clear_on_submit=False):
        resume_file = st.file_uploader("Upload Resume (PDF, DOC, DOCX, or TXT)", type=["pdf", "doc", "docx", "txt"])
        job_text_file = st.text_area("Job Description", height=200, key="file_job_description")
        submitted_file = st.form_submit_button("Upload & Analyze")

    if submitted_file:
        problem = validate_file_inputs(resume_file.name if resume_file else None, job_text_file)
        if problem:
            st.warning(problem)
        else:
            files = {"resume": (resume_file.name, resume_file, resume_file.type)}
            with st.spinner("⏳ Uploading and analyzing..."):
                body = _post("/analyze/file", files=files, data={"jobDescription": job_text_file.strip()})
            if body:
                _store(body["analysis"], body.get("message"))
                st.success("✅ Analysis complete! Open the Results tab.")

# ==================== TAB 3: Results ====================
with tab3:
    analysis = st.session_state.get("last_analysis")
    if not analysis:
        st.info("No analysis yet. Submit a resume in one of the other tabs.")
    else:
        if st.session_state.get("last_message"):
            st.info(st.session_state.last_message)

        fit = analysis.get("fitScore", 0)
        band = score_band(fit)
        col1, col2 = st.columns([1, 3])
        col1.metric("Fit Score", f"{fit}%")
        col1.progress(min(max(fit, 0), 100) / 100)
        {"excellent": col2.success, "good": col2.warning, "poor": col2.error}[band](score_feedback(fit))

        kw = analysis.get("keywordAnalysis", {})
        sk = analysis.get("skillsAnalysis", {})
        ex = analysis.get("experienceAnalysis", {})

        st.markdown("### 🧩 Breakdown")
        st.table(pd.DataFrame({
            "Metric": ["Keyword Match Rate", "Skills Match Rate", "Resume Experience", "Required Experience", "Experience Gap"],
            "Value": [
                f"{kw.get('matchRate', 0)}% ({kw.get('totalMatches', 0)}/{kw.get('totalRequired', 0)})",
                f"{sk.get('matchRate', 0)}%",
                f"{ex.get('resumeExperience', 0)} years",
                f"{ex.get('jobRequiredExperience', 0)} years",
                f"{ex.get('experienceGap', 0)} years",
            ],
        }))

        c1, c2 = st.columns(2)
        with c1:
            st.markdown("**✅ Matched Keywords:** " + (", ".join(kw.get("matched", [])) or "No keywords matched"))
            st.markdown("**🧠 Matched Skills:** " + (", ".join(sk.get("matched", [])) or "—"))
            st.markdown("**📄 Resume Skills:** " + (", ".join(sk.get("resumeSkills", [])) or "—"))
        with c2:
            st.markdown("**❌ Missing Keywords:** " + (", ".join(kw.get("missing", [])) or "No missing keywords"))
            st.markdown("**📚 Missing Skills:** " + (", ".join(sk.get("missing", [])) or "—"))
            st.markdown("**🧾 Job Skills:** " + (", ".join(sk.get("jobSkills", [])) or "—"))

        for heading, key in (("💡 Suggestions", "suggestions"), ("💪 Strengths", "strengths"), ("🛠️ Improvements", "improvements")):
            st.markdown(f"### {heading}")
            items = analysis.get(key, [])
            if items:
                for item in items:
                    st.markdown(f"- {item}")
            else:
                st.caption("Nothing to show.")
