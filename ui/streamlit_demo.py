import os
from typing import Any, Dict, List, Optional

import pandas as pd
import requests
import streamlit as st
from dotenv import load_dotenv

load_dotenv()

st.set_page_config(page_title="Health Companion Demo", layout="wide")

# ---------------------------
# Config
# ---------------------------
DEFAULT_API_BASE = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
API_BASE = st.sidebar.text_input("API Base URL", value=DEFAULT_API_BASE)
INTERNAL_KEY = st.sidebar.text_input("X-Internal-Key (audit/share)", value=os.getenv("INTERNAL_SERVICE_SECRET", ""), type="password")

# ---------------------------
# Helpers (API)
# ---------------------------
def api_post(path: str, payload: Dict[str, Any]) -> Any:
    url = f"{API_BASE}{path}"
    r = requests.post(url, json=payload, timeout=20)
    if r.status_code >= 400:
        raise RuntimeError(f"{r.status_code} {r.text}")
    return r.json()

def api_get(path: str, params: Optional[Dict[str, Any]] = None, headers: Optional[Dict[str, str]] = None) -> Any:
    url = f"{API_BASE}{path}"
    r = requests.get(url, params=params or {}, headers=headers or {}, timeout=20)
    if r.status_code >= 400:
        raise RuntimeError(f"{r.status_code} {r.text}")
    return r.json()

def api_upload(path: str, name: str, data: bytes, content_type: str) -> Any:
    url = f"{API_BASE}{path}"
    r = requests.post(url, files={"file": (name, data, content_type)}, timeout=60)
    if r.status_code >= 400:
        raise RuntimeError(f"{r.status_code} {r.text}")
    return r.json()

def split_lines(raw: str) -> List[str]:
    return [x.strip() for x in (raw or "").replace(",", "\n").splitlines() if x.strip()]

# ---------------------------
# Session state
# ---------------------------
if "assessment" not in st.session_state:
    st.session_state.assessment = None
if "document" not in st.session_state:
    st.session_state.document = None
if "chat" not in st.session_state:
    st.session_state.chat = []

@st.cache_data(ttl=300)
def load_symptoms(api_base: str) -> List[str]:
    try:
        r = requests.get(f"{api_base}/conditions/symptoms", timeout=10)
        r.raise_for_status()
        return r.json()
    except requests.RequestException:
        return []

def render_assessment(result: Dict[str, Any]) -> None:
    top = result.get("top_condition")
    if not top:
        st.info("No matching condition found for these symptoms.")
        return

    st.write(f"### {top['name']} - {top['confidence']}% match")
    st.progress(top["confidence"] / 100)

    info = result.get("condition_info") or {}
    if info:
        st.caption(info.get("description", ""))
        c1, c2 = st.columns(2)
        with c1:
            st.write("**Diet**")
            for d in info.get("diet", []):
                st.write(f"- {d}")
        with c2:
            st.write("**Precautions**")
            for p in info.get("precautions", []):
                st.write(f"- {p}")

    alts = result.get("alternatives") or []
    if alts:
        st.write("**Other possibilities**")
        st.dataframe(pd.DataFrame(alts)[["name", "confidence"]], use_container_width=True)

    safety = result.get("safety") or []
    if safety:
        st.write("**Medicine safety screen**")
        df = pd.DataFrame(safety)[["medicine", "category", "price", "is_safe", "reason"]]
        st.dataframe(df, use_container_width=True)

        stats = result.get("stats") or {}
        st.bar_chart(pd.DataFrame({"count": [stats.get("safe", 0), stats.get("unsafe", 0)]}, index=["safe", "unsafe"]))

    st.warning(result.get("safety_note", ""))

    with st.expander("Share text"):
        st.code(result.get("share_text", ""), language=None)

# ---------------------------
# UI
# ---------------------------
st.title("Health Companion - Symptom Check Demo (Streamlit)")

tab_check, tab_doc, tab_chat = st.tabs(["Symptom check", "Document analysis", "Assistant"])

with tab_check:
    col_left, col_right = st.columns([1, 1.2])

    with col_left:
        st.subheader("1) Input")
        options = load_symptoms(API_BASE)
        selected = st.multiselect("Symptoms", options, default=[s for s in ["cough", "fatigue"] if s in options])
        extra = st.text_input("Other symptoms (comma separated, optional)", value="")
        allergies = st.text_area("Allergies (one per line)", value="", height=70)
        current_meds = st.text_area("Current medications (one per line)", value="", height=70)

        if st.button("Run assessment (/assessments)"):
            symptoms = selected + split_lines(extra)
            if not symptoms:
                st.warning("Please select at least one symptom.")
            else:
                payload = {
                    "symptoms": symptoms,
                    "allergies": split_lines(allergies),
                    "current_medications": split_lines(current_meds),
                }
                try:
                    st.session_state.assessment = api_post("/assessments", payload)
                    st.success("Assessment complete.")
                except Exception as e:
                    st.error(str(e))

    with col_right:
        st.subheader("2) Results")
        if st.session_state.assessment:
            render_assessment(st.session_state.assessment)
        else:
            st.caption("No assessment yet.")

    st.divider()
    st.subheader("3) Audit trail")
    aid = (st.session_state.assessment or {}).get("assessment_id", "")
    if aid:
        st.code(aid)
        if st.button("Load audit (/assessments/audit)"):
            try:
                st.json(api_get("/assessments/audit", {"assessment_id": aid}, {"X-Internal-Key": INTERNAL_KEY}))
            except Exception as e:
                st.error(str(e))

with tab_doc:
    st.subheader("Upload a medical document")
    st.caption("Plain-text (.txt) files are analyzed. Other formats are reported as unsupported.")
    uploaded = st.file_uploader("Document", type=None)

    if uploaded is not None and st.button("Analyze (/documents/upload)"):
        try:
            st.session_state.document = api_upload(
                "/documents/upload", uploaded.name, uploaded.getvalue(), uploaded.type or "application/octet-stream",
            )
        except Exception as e:
            st.error(str(e))

    doc = st.session_state.document
    if doc:
        if doc.get("status") != "OK":
            st.error(f"{doc.get('status')}: {doc.get('message')}")
        else:
            ex = doc.get("extraction") or {}
            st.success(doc.get("message", ""))
            st.write(ex.get("summary", ""))
            kw = ex.get("keywords") or []
            if kw:
                st.dataframe(pd.DataFrame(kw), use_container_width=True)
            if ex.get("vital_signs"):
                st.json(ex["vital_signs"])

            if ex.get("symptoms") and st.button("Assess extracted symptoms"):
                try:
                    st.session_state.assessment = api_post("/assessments", {"symptoms": ex["symptoms"]})
                    st.success("Assessment complete. See the Symptom check tab.")
                except Exception as e:
                    st.error(str(e))

with tab_chat:
    st.subheader("Health assistant (rule-based)")
    try:
        quick = api_get("/assistant/quick-questions")
    except Exception:
        quick = []
    if quick:
        st.caption("Try: " + " · ".join(quick))

    message = st.text_input("Message", value="")
    if st.button("Send (/assistant/query)") and message.strip():
        try:
            resp = api_post("/assistant/query", {"message": message})
            st.session_state.chat.append(("you", message))
            st.session_state.chat.append(("assistant", resp["answer"]))
        except Exception as e:
            st.error(str(e))

    for who, text in st.session_state.chat:
        st.write(f"**{who}:** {text}")
