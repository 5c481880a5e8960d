import logging

from errors import PortfolioAIError
from parsers.upload import StagedFile
from ui import state as s
from ui.api_client import PortfolioAPI

logger = logging.getLogger(__name__)


class ProjectRecommender:
    """AI project recommender widget."""

    SUGGESTIONS = [
        "real-time systems",
        "payment integration",
        "AI chatbots",
        "e-commerce platforms",
        "distributed systems",
    ]

    def __init__(self, api: PortfolioAPI):
        self.api = api
        self.state = s.RecommenderState()

    def set_interest(self, interest: str) -> None:
        self.state = s.set_interest(self.state, interest)

    def submit(self) -> s.RecommenderState:
        self.state, interest = s.start_recommendation(self.state)
        if interest is None:
            return self.state
        try:
            result = self.api.recommend_project(interest)
        except PortfolioAIError as e:
            logger.warning("Recommendation failed: %s", e.message)
            self.state = s.fail_recommendation(self.state, e)
        else:
            self.state = s.finish_recommendation(self.state, result)
        return self.state


class ResumeAnalyzer:
    """Resume upload + collaboration analysis widget."""

    def __init__(self, api: PortfolioAPI):
        self.api = api
        self.state = s.AnalyzerState()

    def stage(self, name: str, media_type: str, data: bytes) -> s.AnalyzerState:
        self.state = s.stage_file(self.state, StagedFile(name=name, media_type=media_type, data=data))
        return self.state

    def reset(self) -> s.AnalyzerState:
        self.state = s.reset_analyzer(self.state)
        return self.state

    def submit(self) -> s.AnalyzerState:
        self.state, staged = s.start_analysis(self.state)
        if staged is None:
            return self.state
        try:
            result = self.api.analyze_resume(staged)
        except PortfolioAIError as e:
            logger.warning("Resume analysis failed: %s", e.message)
            self.state = s.fail_analysis(self.state, e)
        else:
            self.state = s.finish_analysis(self.state, result)
        return self.state


class Chatbot:
    """Floating chat assistant widget."""

    QUICK_ACTIONS = [
        "What projects have you built?",
        "Tell me about your AI experience",
        "What tech stack do you use?",
        "Are you available for hire?",
    ]

    def __init__(self, api: PortfolioAPI):
        self.api = api
        self.state = s.ChatState()

    @property
    def show_quick_actions(self) -> bool:
        return len(self.state.messages) == 1

    def set_input(self, text: str) -> None:
        self.state = s.set_input(self.state, text)

    def send(self) -> s.ChatState:
        self.state, transcript = s.begin_send(self.state)
        if transcript is None:
            return self.state
        try:
            reply = self.api.chat(list(transcript))
        except PortfolioAIError as e:
            logger.warning("Chat request failed: %s", e.message)
            self.state = s.receive_failure(self.state, e)
        else:
            self.state = s.receive_reply(self.state, reply)
        return self.state
