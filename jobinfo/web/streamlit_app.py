import asyncio
from typing import Dict, List

import streamlit as st

from jobinfo.chat.rag import RAGService
from jobinfo.config import get_settings
from jobinfo.logs import configure_logging


# ---------- Service ----------
@st.cache_resource(show_spinner=True)
def build_service() -> RAGService:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    return RAGService.from_settings(settings)


def ask(service: RAGService, question: str) -> str:
    return asyncio.run(service.answer(question))


def clear_chat() -> None:
    st.session_state["messages"] = []


# ---------- UI ----------
st.set_page_config(page_title="Job Information Assistant", page_icon="💼", layout="centered")

header, clear_col = st.columns([4, 1])
header.title("Job Information Assistant")

# Transcript lives in this browser session only.
messages: List[Dict] = st.session_state.setdefault("messages", [])

service = build_service()

for message in messages:
    with st.chat_message("assistant" if message["isAI"] else "user"):
        if message["isAI"]:
            st.caption("AI Assistant")
        st.write(message["text"])

question = st.chat_input("Ask about a job (e.g., What is the salary for Assistant Sheriff?)")
if question and question.strip():
    question = question.strip()
    messages.append({"text": question, "isAI": False})
    with st.chat_message("user"):
        st.write(question)

    with st.chat_message("assistant"):
        st.caption("AI Assistant")
        with st.spinner("Thinking..."):
            answer = ask(service, question)
        st.write(answer)
    messages.append({"text": answer, "isAI": True})

# Drawn last so it reflects this run's transcript.
clear_col.button("Clear Chat", on_click=clear_chat, disabled=not messages)
