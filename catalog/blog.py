from typing import List, Optional

from schemas import BlogPost

EDGE_COMPUTING_BODY = """\
Edge computing is no longer a distant future. It's reshaping how we build web applications
today. As someone who's been deploying to edge networks since 2023, I've witnessed firsthand
how this architectural shift enables experiences that were simply impossible with traditional
cloud-only approaches.

## The Latency Problem

Traditional cloud architectures route every request through centralized data centers. For a
user in Lagos accessing a server in Virginia, this means:

- **~150ms** base latency just from geographic distance
- **Additional 50-100ms** for database queries and processing
- **Unpredictable spikes** during high traffic periods

## How Edge Computing Solves This

Edge functions run in hundreds of locations worldwide, serving users from the nearest
geographic point. Here's what I've achieved in production:

- **P50 latency: 45ms** (down from 180ms)
- **P99 latency: 120ms** (down from 450ms)
- **99.99% uptime** through automatic failover

## Real-World Implementation: ServiceBridge

In my ServiceBridge project, migrating the matching endpoint to edge functions cut API
response times dramatically while keeping the same PostgreSQL source of truth.

## Key Takeaways for 2026

1. **Edge-first architecture** should be the default for user-facing applications
2. **Database replication** at the edge is becoming cost-effective (see Turso, Neon)
3. **Middleware at the edge** enables personalization without backend roundtrips
4. **A/B testing, auth, and routing** all benefit from edge execution

Start small: move your most latency-sensitive endpoints to the edge first. Profile your
application to identify which endpoints have the highest latency and migrate those incrementally.
"""

_POSTS = [
    {
        "slug": "edge-computing-2026",
        "title": "Why Edge Computing Will Define Web Development in 2026",
        "excerpt": (
            "Exploring how edge computing is transforming application architecture, reducing latency, "
            "and enabling new use cases for distributed systems."
        ),
        "date": "2024-12-15",
        "read_time": 8,
        "category": "System Design",
        "featured": True,
        "body": EDGE_COMPUTING_BODY,
    },
    {
        "slug": "ai-agents-production",
        "title": "Building Production-Ready AI Agents: Lessons Learned",
        "excerpt": (
            "A practical guide to integrating AI agents into web applications, covering prompt "
            "engineering, error handling, and cost optimization."
        ),
        "date": "2024-11-28",
        "read_time": 12,
        "category": "AI/ML",
        "featured": True,
    },
    {
        "slug": "green-coding-practices",
        "title": "Green Coding: Writing Sustainable Software for 2026",
        "excerpt": (
            "How to measure and reduce the carbon footprint of your applications through efficient "
            "algorithms, optimized queries, and smart caching."
        ),
        "date": "2024-10-10",
        "read_time": 10,
        "category": "Performance",
        "featured": False,
    },
]

BLOG_POSTS: List[BlogPost] = [BlogPost(**p) for p in _POSTS]


def get_post_by_slug(slug: str) -> Optional[BlogPost]:
    return next((p for p in BLOG_POSTS if p.slug == slug), None)


def list_posts(featured: Optional[bool] = None) -> List[BlogPost]:
    """Newest first; ``featured`` filters when given."""
    posts = BLOG_POSTS if featured is None else [p for p in BLOG_POSTS if p.featured == featured]
    return sorted(posts, key=lambda p: p.date, reverse=True)
