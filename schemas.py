from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Fields are snake_case in Python and camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -------------------------------------------------------------------
# Chat
# -------------------------------------------------------------------
class Message(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: List[Message]


class ChatResponse(BaseModel):
    reply: str


# -------------------------------------------------------------------
# AI results
# -------------------------------------------------------------------
class ScoredResult(CamelModel):
    match_score: int = Field(ge=0, le=100)

    @field_validator("match_score", mode="before")
    @classmethod
    def reject_bool_score(cls, v):
        # bool is an int subclass; a true/false score is a broken contract
        if isinstance(v, bool):
            raise ValueError("matchScore must be an integer")
        return v


class RecommendationResult(ScoredResult):
    project_id: str
    title: str
    category: str
    reasoning: str
    tech_overlap: Optional[List[str]] = None
    live_url: Optional[str] = None

    @field_validator("tech_overlap")
    @classmethod
    def dedupe_overlap(cls, v):
        if v is None:
            return v
        return list(dict.fromkeys(v))


class AnalysisResult(ScoredResult):
    strengths: List[str]
    gaps: List[str]
    collaboration_opportunities: List[str]
    reasoning: str


class RecommendRequest(BaseModel):
    interest: str


class RecommendationResponse(BaseModel):
    recommendation: RecommendationResult


class AnalysisResponse(BaseModel):
    analysis: AnalysisResult


class ErrorOut(BaseModel):
    detail: str
    kind: str
    message: str


# -------------------------------------------------------------------
# Static content
# -------------------------------------------------------------------
class ProjectMetrics(BaseModel):
    users: Optional[str] = None
    uptime: Optional[str] = None
    performance: Optional[str] = None
    transactions: Optional[str] = None


class Project(CamelModel):
    id: str
    title: str
    description: str
    long_description: str
    category: str
    tags: List[str] = []
    image: str
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    metrics: Optional[ProjectMetrics] = None
    tech: List[str] = []
    featured: bool = False
    year: int


class Testimonial(CamelModel):
    id: str
    name: str
    role: str
    company: str
    image: Optional[str] = None
    content: str
    rating: int
    date: str
    project_related: Optional[str] = None


class BlogPost(CamelModel):
    slug: str
    title: str
    excerpt: str
    date: str
    category: str
    featured: bool = False
    body: str = ""
    read_time: int = 1


class SkillLevel(BaseModel):
    name: str
    level: int = Field(ge=0, le=100)


class SkillGroup(BaseModel):
    category: str
    skills: List[SkillLevel]


class SkillProfile(BaseModel):
    axes: List[str]
    datasets: Dict[str, List[int]]
    breakdown: List[SkillGroup]
