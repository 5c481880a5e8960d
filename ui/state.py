"""
Widget state and its transitions.

Every function here is pure: it takes a state record and returns a new one,
so the rules (no overlapping requests, what a failure does to the screen)
can be tested without a rendering layer. The widgets in ``ui.widgets`` only
call these and perform the network request in between.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from errors import ValidationError, user_message
from parsers.upload import StagedFile, admit
from schemas import AnalysisResult, Message, RecommendationResult

GREETING = "Hi! I'm Olabode's AI assistant. Ask me anything about his projects, skills, or experience!"
CHAT_FALLBACK = (
    "Sorry, I'm having trouble responding right now. "
    "Please try again or contact Olabode directly."
)
RECOMMEND_FAILED = "Failed to get recommendation"
ANALYSIS_FAILED = "Failed to analyze resume"
CHAT_FAILED = "Failed to get response"


# -------------------------------------------------------------------
# Project recommender
# -------------------------------------------------------------------
@dataclass(frozen=True)
class RecommenderState:
    interest: str = ""
    result: Optional[RecommendationResult] = None
    loading: bool = False
    error: Optional[str] = None


def set_interest(state: RecommenderState, interest: str) -> RecommenderState:
    if state.loading:
        return state
    return replace(state, interest=interest)


def start_recommendation(state: RecommenderState) -> Tuple[RecommenderState, Optional[str]]:
    """Returns the new state and the interest to send, or None when nothing should be sent."""
    interest = state.interest.strip()
    if state.loading or not interest:
        return state, None
    return replace(state, loading=True, error=None), interest


def finish_recommendation(state: RecommenderState, result: RecommendationResult) -> RecommenderState:
    return replace(state, result=result, loading=False, error=None)


def fail_recommendation(state: RecommenderState, error: Exception) -> RecommenderState:
    # the previous card stays; a failed call never renders a partial result
    return replace(state, loading=False, error=user_message(error, RECOMMEND_FAILED))


# -------------------------------------------------------------------
# Resume analyzer
# -------------------------------------------------------------------
@dataclass(frozen=True)
class AnalyzerState:
    file: Optional[StagedFile] = None
    result: Optional[AnalysisResult] = None
    loading: bool = False
    error: Optional[str] = None


def stage_file(state: AnalyzerState, staged: StagedFile) -> AnalyzerState:
    """Run the upload gate; a valid file replaces the previous one and clears old output."""
    if state.loading:
        return state
    try:
        admit(staged)
    except ValidationError as e:
        return replace(state, file=None, result=None, error=e.message)
    return AnalyzerState(file=staged)


def reset_analyzer(state: AnalyzerState) -> AnalyzerState:
    if state.loading:
        return state
    return AnalyzerState()


def start_analysis(state: AnalyzerState) -> Tuple[AnalyzerState, Optional[StagedFile]]:
    if state.loading or state.file is None:
        return state, None
    return replace(state, loading=True, error=None), state.file


def finish_analysis(state: AnalyzerState, result: AnalysisResult) -> AnalyzerState:
    return replace(state, result=result, loading=False, error=None)


def fail_analysis(state: AnalyzerState, error: Exception) -> AnalyzerState:
    return replace(state, loading=False, error=user_message(error, ANALYSIS_FAILED))


# -------------------------------------------------------------------
# Chat transcript
# -------------------------------------------------------------------
class ChatStatus(Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


@dataclass(frozen=True)
class ChatState:
    messages: Tuple[Message, ...] = (Message(role="assistant", content=GREETING),)
    input: str = ""
    status: ChatStatus = ChatStatus.IDLE
    error: Optional[str] = None

    @property
    def awaiting_reply(self) -> bool:
        return self.status is ChatStatus.AWAITING_REPLY


def set_input(state: ChatState, text: str) -> ChatState:
    return replace(state, input=text)


def begin_send(state: ChatState) -> Tuple[ChatState, Optional[Tuple[Message, ...]]]:
    """Idle -> AwaitingReply. Returns the transcript to dispatch, or None for a no-op."""
    if state.awaiting_reply or not state.input.strip():
        return state, None
    messages = state.messages + (Message(role="user", content=state.input),)
    return replace(state, messages=messages, input="", status=ChatStatus.AWAITING_REPLY, error=None), messages


def receive_reply(state: ChatState, reply: str) -> ChatState:
    if not state.awaiting_reply:
        return state
    messages = state.messages + (Message(role="assistant", content=reply),)
    return replace(state, messages=messages, status=ChatStatus.IDLE)


def receive_failure(state: ChatState, error: Exception) -> ChatState:
    if not state.awaiting_reply:
        return state
    messages = state.messages + (Message(role="assistant", content=CHAT_FALLBACK),)
    return replace(state, messages=messages, status=ChatStatus.IDLE, error=user_message(error, CHAT_FAILED))
