from conftest import ANALYSIS, SERVICEBRIDGE
from errors import RateLimitError, SchemaError, TransportError
from schemas import AnalysisResult, RecommendationResult
from ui import state as s
from ui.render import analysis_panel, format_file_size, get_initials, recommendation_card
from ui.widgets import Chatbot, ProjectRecommender, ResumeAnalyzer


class FakeAPI:
    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def _next(self, call):
        self.calls.append(call)
        outcome = self.outcomes.pop(0)
        if callable(outcome) and not isinstance(outcome, Exception):
            outcome = outcome()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def recommend_project(self, interest):
        return self._next(("recommend", interest))

    def analyze_resume(self, staged):
        return self._next(("analyze", staged.name))

    def chat(self, messages):
        return self._next(("chat", len(messages)))


def test_recommender_scenario_renders_servicebridge_card():
    api = FakeAPI(RecommendationResult.model_validate(dict(SERVICEBRIDGE, liveUrl="https://servicebridge.netlify.app/")))
    widget = ProjectRecommender(api)
    widget.set_interest("real-time systems")
    st = widget.submit()

    assert api.calls == [("recommend", "real-time systems")]
    card = recommendation_card(st.result)
    assert "servicebridge" in card
    assert "92%" in card
    assert "[Live Demo](https://servicebridge.netlify.app/)" in card


def test_recommender_rate_limit_leaves_result_unchanged():
    first = RecommendationResult.model_validate(SERVICEBRIDGE)
    api = FakeAPI(first, RateLimitError())
    widget = ProjectRecommender(api)
    widget.set_interest("real-time systems")
    widget.submit()

    widget.set_interest("payments")
    st = widget.submit()
    assert st.result == first
    assert "Rate limit" in st.error


def test_recommender_malformed_response_shows_generic_failure():
    widget = ProjectRecommender(FakeAPI(SchemaError("bad")))
    widget.set_interest("real-time systems")
    st = widget.submit()
    assert st.result is None
    assert st.error == "Failed to get recommendation"


def test_analyzer_oversize_upload_makes_no_call():
    api = FakeAPI()
    widget = ResumeAnalyzer(api)
    widget.stage("big.pdf", "application/pdf", b"0" * (6 * 1024 * 1024))
    st = widget.submit()

    assert st.error == "File size must be less than 5MB"
    assert api.calls == []


def test_analyzer_success_and_reset():
    api = FakeAPI(AnalysisResult.model_validate(ANALYSIS))
    widget = ResumeAnalyzer(api)
    widget.stage("cv.pdf", "application/pdf", b"%PDF-1.4")
    st = widget.submit()

    assert st.result.match_score == 78
    assert "Real-time dashboards" in analysis_panel(st.result)
    assert widget.reset() == s.AnalyzerState()


def test_analyzer_transport_error_is_visible():
    widget = ResumeAnalyzer(FakeAPI(TransportError("Connection error")))
    widget.stage("cv.pdf", "application/pdf", b"%PDF-1.4")
    st = widget.submit()
    assert st.error.startswith("The request timed out")
    assert not st.loading


def test_chat_round_trip():
    api = FakeAPI("I build real-time systems.")
    bot = Chatbot(api)
    assert bot.show_quick_actions
    bot.set_input(Chatbot.QUICK_ACTIONS[0])
    st = bot.send()

    assert len(st.messages) == 3
    assert st.messages[-1].content == "I build real-time systems."
    assert api.calls == [("chat", 2)]
    assert not bot.show_quick_actions


def test_chat_submit_while_awaiting_reply_is_ignored():
    bot = Chatbot(None)

    def reenter():
        # a second submit arrives while the first request is still in flight
        bot.set_input("are you there?")
        during = bot.send()
        assert during.awaiting_reply
        assert len(during.messages) == 2
        return "yes"

    api = FakeAPI(reenter)
    bot.api = api
    bot.set_input("hello")
    st = bot.send()

    assert len(api.calls) == 1
    assert [m.content for m in st.messages[1:]] == ["hello", "yes"]


def test_chat_failure_appends_fallback():
    bot = Chatbot(FakeAPI(RateLimitError()))
    bot.set_input("hi")
    st = bot.send()
    assert st.messages[-1].content == s.CHAT_FALLBACK
    assert "Rate limit" in st.error


def test_render_helpers():
    assert format_file_size(2048) == "2.00 KB"
    assert get_initials("Olabode Olusegun") == "OO"
