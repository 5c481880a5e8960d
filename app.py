from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from catalog.blog import get_post_by_slug, list_posts
from catalog.projects import (
    PROJECTS,
    get_featured_projects,
    get_project_by_id,
    get_projects_by_category,
    get_related_projects,
    search_projects,
)
from catalog.skills import SKILL_PROFILE
from catalog.testimonials import (
    TESTIMONIALS,
    get_testimonials_by_project,
    get_testimonials_by_rating,
)
from errors import PortfolioAIError, user_message
from matching.analyzer import analyze_resume
from matching.chat import chat_reply
from matching.completion import CompletionClient
from matching.recommender import recommend_project
from parsers.upload import validate_upload
from schemas import (
    AnalysisResponse,
    BlogPost,
    ChatRequest,
    ChatResponse,
    Project,
    RecommendationResponse,
    RecommendRequest,
    SkillProfile,
    Testimonial,
)

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

RECOMMEND_PATH = "/api/recommend-project"
ANALYZE_PATH = "/api/analyze-resume"
CHAT_PATH = "/api/chat"

# generic text shown when the model's answer could not be used
FALLBACKS = {
    RECOMMEND_PATH: "Failed to get recommendation",
    ANALYZE_PATH: "Failed to analyze resume",
    CHAT_PATH: "Failed to get response",
}

STATUS_BY_KIND = {
    "transport": 504,
    "rate_limit": 429,
    "auth": 502,
    "upstream": 502,
    "parse": 502,
    "schema": 502,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the completion client once; routes receive it through a dependency."""
    if getattr(app.state, "completion_client", None) is None:
        app.state.completion_client = CompletionClient(
            api_key=config.OPENAI_API_KEY,
            model=config.OPENAI_MODEL,
            base_url=config.OPENAI_BASE_URL,
            timeout=config.COMPLETION_TIMEOUT,
            max_retries=config.COMPLETION_MAX_RETRIES,
        )
    logger.info("Completion client ready (model=%s)", app.state.completion_client.model)
    yield
    logger.info("Application shutting down.")


app = FastAPI(title="Portfolio AI Assistant", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_completion_client(request: Request) -> CompletionClient:
    client = getattr(request.app.state, "completion_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Completion service is not configured.")
    return client


@app.exception_handler(PortfolioAIError)
async def portfolio_error_handler(request: Request, exc: PortfolioAIError):
    status = getattr(exc, "status_code", 400) if exc.kind == "validation" else STATUS_BY_KIND.get(exc.kind, 500)
    fallback = FALLBACKS.get(request.url.path)
    logger.warning("%s failed with %s: %s", request.url.path, exc.kind, exc.message)
    return JSONResponse(
        status_code=status,
        content={"detail": user_message(exc, fallback), "kind": exc.kind, "message": exc.message},
    )


# -------------------------------------------------------------------
# AI routes
# -------------------------------------------------------------------
@app.post(RECOMMEND_PATH, response_model=RecommendationResponse)
def recommend(body: RecommendRequest, client: CompletionClient = Depends(get_completion_client)):
    return {"recommendation": recommend_project(client, body.interest)}


@app.post(ANALYZE_PATH, response_model=AnalysisResponse)
def analyze(resume: UploadFile = File(...), client: CompletionClient = Depends(get_completion_client)):
    if resume.size is not None:
        validate_upload(resume.filename, resume.content_type, resume.size)
    # never buffer more than one byte past the limit; the gate reports the 413
    data = resume.file.read(config.MAX_UPLOAD_BYTES + 1)
    analysis = analyze_resume(client, data, resume.content_type, resume.filename or "resume")
    return {"analysis": analysis}


@app.post(CHAT_PATH, response_model=ChatResponse)
def chat(body: ChatRequest, client: CompletionClient = Depends(get_completion_client)):
    return {"reply": chat_reply(client, body.messages)}


# -------------------------------------------------------------------
# Content routes
# -------------------------------------------------------------------
@app.get("/api/projects", response_model=List[Project])
def list_projects(category: Optional[str] = None, featured: Optional[bool] = None, q: Optional[str] = None):
    projects = search_projects(q) if q else PROJECTS
    if category:
        projects = get_projects_by_category(category, projects)
    if featured is not None:
        projects = get_featured_projects(projects, featured)
    return projects


@app.get("/api/case-studies/{project_id}", response_model=dict)
def case_study(project_id: str):
    project = get_project_by_id(project_id)
    if not project:
        raise HTTPException(status_code=404, detail=f"Case study {project_id} not found.")
    return {
        "project": project.model_dump(by_alias=True),
        "related": [p.model_dump(by_alias=True) for p in get_related_projects(project_id)],
        "testimonials": [t.model_dump(by_alias=True) for t in get_testimonials_by_project(project.title)],
    }


@app.get("/api/testimonials", response_model=List[Testimonial])
def list_testimonials(min_rating: Optional[int] = None, project: Optional[str] = None):
    items = get_testimonials_by_rating(min_rating) if min_rating is not None else TESTIMONIALS
    if project:
        related = {t.id for t in get_testimonials_by_project(project)}
        items = [t for t in items if t.id in related]
    return items


@app.get("/api/blog", response_model=List[BlogPost])
def blog_index(featured: Optional[bool] = None):
    return list_posts(featured)


@app.get("/api/blog/{slug}", response_model=BlogPost)
def blog_post(slug: str):
    post = get_post_by_slug(slug)
    if not post:
        raise HTTPException(status_code=404, detail=f"Post {slug} not found.")
    return post


@app.get("/api/skills", response_model=SkillProfile)
def skills():
    return SKILL_PROFILE


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=8000)
