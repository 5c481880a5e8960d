from typing import Iterable, List

from schemas import AnalysisResult, RecommendationResult


def format_file_size(size: int) -> str:
    return f"{size / 1024:.2f} KB"


def get_initials(name: str) -> str:
    """get_initials("Olabode Olusegun") -> "OO" """
    return "".join(word[0] for word in name.split() if word).upper()[:2]


def recommendation_card(result: RecommendationResult) -> str:
    """Markdown for the BEST MATCH card."""
    lines = [
        "`BEST MATCH`",
        f"### {result.title}",
        f"*{result.category}*",
        f"**{result.match_score}%** Match Score",
        "",
        result.reasoning,
    ]
    if result.tech_overlap:
        lines += ["", "**Tech Stack Overlap:** " + ", ".join(f"`{t}`" for t in result.tech_overlap)]
    links = [f"[View Full Case Study](/case-studies/{result.project_id})"]
    if result.live_url:
        links.append(f"[Live Demo]({result.live_url})")
    lines += ["", " · ".join(links)]
    return "\n".join(lines)


def _bullets(items: Iterable[str]) -> List[str]:
    items = list(items)
    return [f"- {i}" for i in items] if items else ["- None"]


def analysis_panel(result: AnalysisResult) -> str:
    lines = [f"## {result.match_score}% Match", "", result.reasoning, "", "**Strengths**"]
    lines += _bullets(result.strengths)
    lines += ["", "**Gaps**"]
    lines += _bullets(result.gaps)
    lines += ["", "**Collaboration Opportunities**"]
    lines += _bullets(result.collaboration_opportunities)
    return "\n".join(lines)

