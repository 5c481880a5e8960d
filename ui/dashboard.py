# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import streamlit as st
import pandas as pd

from config import API_URL, DOCX_MEDIA_TYPE, MAX_UPLOAD_MB, PDF_MEDIA_TYPE
from catalog.skills import SKILL_PROFILE
from catalog.testimonials import TESTIMONIALS
from ui.api_client import PortfolioAPI
from ui.render import analysis_panel, format_file_size, get_initials, recommendation_card
from ui.widgets import Chatbot, ProjectRecommender, ResumeAnalyzer

# -------------------- CONFIG --------------------
st.set_page_config(page_title="Olabode Olusegun - Portfolio", page_icon="✨", layout="wide")
st.title("✨ Olabode Olusegun · Full-Stack Engineer")

st.markdown(
    "Real-time systems, payment integrations and AI features. "
    "Explore the projects with the AI tools below."
)

# -------------------- SESSION STATE --------------------
# one widget instance per browser session; each owns its own state
if "api" not in st.session_state:
    st.session_state.api = PortfolioAPI(API_URL)
if "recommender" not in st.session_state:
    st.session_state.recommender = ProjectRecommender(st.session_state.api)
if "analyzer" not in st.session_state:
    st.session_state.analyzer = ResumeAnalyzer(st.session_state.api)
if "chatbot" not in st.session_state:
    st.session_state.chatbot = Chatbot(st.session_state.api)

recommender: ProjectRecommender = st.session_state.recommender
analyzer: ResumeAnalyzer = st.session_state.analyzer
chatbot: Chatbot = st.session_state.chatbot

tab1, tab2, tab3, tab4 = st.tabs(["🎯 Project Recommender", "📄 Collaboration Finder", "💬 AI Assistant", "📊 Skills"])

# ==================== TAB 1: Project Recommender ====================
with tab1:
    st.subheader("AI Project Recommender")
    st.caption("Tell me what interests you and I'll find the most relevant project from my portfolio.")

    st.markdown("**Try:** " + " · ".join(f"`{s}`" for s in ProjectRecommender.SUGGESTIONS))

    with st.form("recommend_form", clear_on_submit=False):
        interest = st.text_input(
            "Your interest",
            value=recommender.state.interest,
            placeholder="e.g., distributed systems, payment integration...",
        )
        submitted = st.form_submit_button("Recommend", disabled=recommender.state.loading)

    if submitted:
        recommender.set_interest(interest)
        with st.spinner("Analyzing..."):
            recommender.submit()

    rs = recommender.state
    if rs.error:
        st.error(f"⚠️ {rs.error}")
    if rs.result:
        with st.container(border=True):
            st.markdown(recommendation_card(rs.result))

# ==================== TAB 2: Resume Analyzer ====================
with tab2:
    st.subheader("AI Collaboration Finder")
    st.caption(f"Upload your resume (PDF or DOCX, max {MAX_UPLOAD_MB}MB) to find collaboration opportunities.")

    # bumping the key clears the uploader after "Remove"
    st.session_state.setdefault("upload_key", 0)
    upload = st.file_uploader("Drop your resume here", type=["pdf", "docx"], key=f"resume_{st.session_state.upload_key}")
    if upload is not None:
        # browsers are not consistent about docx mime types
        media_type = upload.type
        if upload.name.lower().endswith(".docx"):
            media_type = DOCX_MEDIA_TYPE
        elif upload.name.lower().endswith(".pdf"):
            media_type = PDF_MEDIA_TYPE
        current = analyzer.state.file
        if current is None or current.name != upload.name or current.size != upload.size:
            analyzer.stage(upload.name, media_type, upload.getvalue())

    a = analyzer.state
    if a.file:
        st.markdown(f"✅ **{a.file.name}** · {format_file_size(a.file.size)}")
        col1, col2 = st.columns([1, 1])
        with col1:
            if st.button("Analyze Resume", disabled=a.loading):
                with st.spinner("Analyzing with AI..."):
                    analyzer.submit()
        with col2:
            if st.button("Remove"):
                analyzer.reset()
                st.session_state.upload_key += 1
                st.rerun()

    a = analyzer.state
    if a.error:
        st.error(f"❌ {a.error}")
    if a.result:
        with st.container(border=True):
            st.markdown(analysis_panel(a.result))

# ==================== TAB 3: Chat ====================
with tab3:
    st.subheader("AI Assistant")

    for msg in chatbot.state.messages:
        with st.chat_message(msg.role):
            st.markdown(msg.content)

    if chatbot.show_quick_actions:
        st.caption("Quick questions:")
        cols = st.columns(len(Chatbot.QUICK_ACTIONS))
        for col, action in zip(cols, Chatbot.QUICK_ACTIONS):
            if col.button(action, key=f"qa_{action}"):
                chatbot.set_input(action)
                with st.spinner("Thinking..."):
                    chatbot.send()
                st.rerun()

    prompt = st.chat_input("Ask me anything...", disabled=chatbot.state.awaiting_reply)
    if prompt:
        chatbot.set_input(prompt)
        with st.spinner("Thinking..."):
            chatbot.send()
        st.rerun()

    if chatbot.state.error:
        st.caption(f"⚠️ {chatbot.state.error}")

# ==================== TAB 4: Skills & testimonials ====================
with tab4:
    st.subheader("Technical Proficiency")
    radar = pd.DataFrame(SKILL_PROFILE.datasets, index=SKILL_PROFILE.axes)
    st.bar_chart(radar)

    for group in SKILL_PROFILE.breakdown:
        st.markdown(f"#### {group.category}")
        for skill in group.skills:
            st.progress(skill.level / 100, text=f"{skill.name} · {skill.level}%")

    st.subheader("What Clients Say")
    for t in TESTIMONIALS:
        with st.container(border=True):
            st.markdown(f"**{get_initials(t.name)}** · **{t.name}**, {t.role} at {t.company}")
            st.markdown("⭐" * t.rating)
            st.write(t.content)
