"""Portfolio projects. Single source of truth for the recommender prompt and the case-study routes."""
from typing import List, Optional

from schemas import Project

_PROJECTS = [
    {
        "id": "servicebridge",
        "title": "ServiceBridge",
        "description": "Real-time service marketplace connecting 10,000+ users",
        "long_description": (
            "Architected a high-scale marketplace platform connecting service providers with customers "
            "in real-time. Implemented WebSocket-based matching, Redis caching for 40% latency reduction, "
            "and PostgreSQL with read replicas for high-traffic queries."
        ),
        "category": "Web Application",
        "tags": ["Real-time", "Marketplace", "WebSockets", "Redis"],
        "image": "/projects/servicebridge.jpg",
        "live_url": "https://servicebridge.netlify.app/",
        "metrics": {"users": "10,000+", "uptime": "99.9%", "performance": "40% faster", "transactions": "$500K+"},
        "tech": ["React", "Node.js", "PostgreSQL", "Redis", "Socket.io", "TensorFlow.js"],
        "featured": True,
        "year": 2023,
    },
    {
        "id": "teenspray",
        "title": "TeensPray",
        "description": "Community platform with modern responsive design",
        "long_description": (
            "Built a responsive community website focused on youth engagement. Implemented modern frontend "
            "practices with performance optimization and SEO best practices."
        ),
        "category": "Website",
        "tags": ["Community", "Responsive", "Frontend"],
        "image": "/projects/teenspray.jpg",
        "live_url": "https://teenspray.netlify.app/",
        "tech": ["HTML5", "CSS3", "JavaScript", "Responsive Design"],
        "featured": False,
        "year": 2022,
    },
    {
        "id": "subscription-manager",
        "title": "Subscription Manager",
        "description": "Automated recurring payment system with API integration",
        "long_description": (
            "Developed a robust backend system for managing recurring subscriptions. Integrated payment "
            "gateway APIs, implemented webhook handlers, and built automated billing cycles."
        ),
        "category": "Backend System",
        "tags": ["Payments", "API", "Automation"],
        "image": "/projects/checkout.jpg",
        "github_url": "https://github.com/thewebguyy/seerbit-subscription-manager",
        "tech": ["Node.js", "Express", "PostgreSQL", "Payment APIs"],
        "featured": True,
        "year": 2023,
    },
    {
        "id": "55lounge",
        "title": "55Lounge",
        "description": "Full-stack booking platform for hospitality services",
        "long_description": (
            "Created a comprehensive booking system with real-time availability, payment processing, and "
            "customer management. Focused on user experience and performance optimization."
        ),
        "category": "Web Application",
        "tags": ["Booking System", "Full-Stack", "Payments"],
        "image": "/projects/55lounge.jpg",
        "live_url": "https://55lounge.ng/",
        "tech": ["React", "Node.js", "MongoDB", "Payment Integration"],
        "featured": True,
        "year": 2024,
    },
    {
        "id": "checkout-system",
        "title": "Checkout System",
        "description": "Secure payment gateway integration for e-commerce",
        "long_description": (
            "Implemented a secure checkout system with multiple payment gateway support. Built with PCI "
            "compliance in mind and optimized for conversion rates."
        ),
        "category": "API Integration",
        "tags": ["Payments", "Security", "API"],
        "image": "/projects/checkout.jpg",
        "github_url": "https://github.com/thewebguyy/simpleseerbitcheckout",
        "tech": ["JavaScript", "Payment APIs", "Security"],
        "featured": False,
        "year": 2023,
    },
    {
        "id": "laverita-hair",
        "title": "La Verita Hair",
        "description": "E-commerce platform for hair products",
        "long_description": (
            "Developed a modern e-commerce website with product catalog, shopping cart, and checkout flow. "
            "Optimized for mobile users and search engines."
        ),
        "category": "E-commerce",
        "tags": ["E-commerce", "Frontend", "SEO"],
        "image": "/projects/laveritahair.png",
        "live_url": "http://laveritahair.com/",
        "tech": ["HTML5", "CSS3", "JavaScript", "E-commerce"],
        "featured": False,
        "year": 2022,
    },
]

PROJECTS: List[Project] = [Project(**p) for p in _PROJECTS]


def get_project_by_id(project_id: str, projects: Optional[List[Project]] = None) -> Optional[Project]:
    for p in projects if projects is not None else PROJECTS:
        if p.id == project_id:
            return p
    return None


def get_featured_projects(projects: Optional[List[Project]] = None, featured: bool = True) -> List[Project]:
    return [p for p in (projects if projects is not None else PROJECTS) if p.featured == featured]


def get_projects_by_category(category: str, projects: Optional[List[Project]] = None) -> List[Project]:
    return [p for p in (projects if projects is not None else PROJECTS) if p.category == category]


def search_projects(query: str) -> List[Project]:
    """Case-insensitive keyword search over title, description, tags and tech."""
    q = query.lower()
    return [
        p for p in PROJECTS
        if q in p.title.lower()
        or q in p.description.lower()
        or any(q in tag.lower() for tag in p.tags)
        or any(q in t.lower() for t in p.tech)
    ]


def get_related_projects(project_id: str, limit: int = 2) -> List[Project]:
    """Other case studies shown under a project page."""
    return [p for p in PROJECTS if p.id != project_id][:limit]
