from schemas import SkillProfile

SKILL_PROFILE = SkillProfile(
    axes=[
        "Frontend (React/Next.js)",
        "Backend (Node.js/Express)",
        "Databases (PostgreSQL/Redis)",
        "System Design & Architecture",
        "AI/ML Integration",
        "DevOps & Cloud (Vercel/AWS)",
    ],
    datasets={
        "Core Mastery": [95, 90, 85, 80, 75, 70],
        "Actively Learning": [50, 45, 55, 70, 85, 60],
    },
    breakdown=[
        {
            "category": "Core Mastery",
            "skills": [
                {"name": "React & Next.js", "level": 95},
                {"name": "TypeScript", "level": 90},
                {"name": "Node.js & Express", "level": 90},
                {"name": "PostgreSQL", "level": 85},
                {"name": "Redis", "level": 80},
                {"name": "REST APIs", "level": 95},
                {"name": "WebSockets", "level": 85},
            ],
        },
        {
            "category": "Currently Exploring",
            "skills": [
                {"name": "Edge Computing", "level": 60},
                {"name": "AI Agents", "level": 70},
                {"name": "WebAssembly", "level": 50},
                {"name": "Rust", "level": 45},
                {"name": "GraphQL", "level": 65},
                {"name": "Microservices", "level": 75},
            ],
        },
    ],
)
