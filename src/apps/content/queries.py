"""GROQ queries for projects and services.

Each page re-runs its query whenever the route is entered; nothing here
caches between requests.
"""

from .client import get_client
from .records import Project, Service

PROJECT_FIELDS = """
  _id,
  title,
  slug,
  client,
  description,
  mainImage,
  category,
  completedDate,
  tools,
  websiteUrl,
  featured
"""

SERVICE_FIELDS = """
  _id,
  title,
  slug,
  shortDescription,
  fullDescription,
  icon,
  features,
  pricing,
  order
"""

FEATURED_PROJECTS_LIMIT = 3

PROJECTS_QUERY = f'*[_type == "project"] | order(_createdAt desc) {{{PROJECT_FIELDS}}}'

FEATURED_PROJECTS_QUERY = (
    f'*[_type == "project" && featured == true] | order(_createdAt desc) '
    f"[0...{FEATURED_PROJECTS_LIMIT}] {{{PROJECT_FIELDS}}}"
)

PROJECT_BY_SLUG_QUERY = f'*[_type == "project" && slug.current == $slug][0] {{{PROJECT_FIELDS}, gallery}}'

SERVICES_QUERY = f'*[_type == "service"] | order(order asc) {{{SERVICE_FIELDS}}}'

SERVICE_BY_SLUG_QUERY = f'*[_type == "service" && slug.current == $slug][0] {{{SERVICE_FIELDS}}}'

# Which query each public route runs on entry.
ROUTE_QUERIES = {
    "core:index": ("get_featured_projects", "get_services"),
    "core:services": ("get_services",),
    "core:service_detail": ("get_service_by_slug",),
    "core:projects": ("get_projects",),
    "core:project_detail": ("get_project_by_slug",),
}


async def get_projects() -> list[Project]:
    """All projects, newest first."""
    docs = await get_client().fetch(PROJECTS_QUERY)
    return [Project.from_document(doc) for doc in docs or []]


async def get_featured_projects() -> list[Project]:
    """Up to three featured projects for the home page, newest first."""
    docs = await get_client().fetch(FEATURED_PROJECTS_QUERY)
    return [Project.from_document(doc) for doc in (docs or [])[:FEATURED_PROJECTS_LIMIT]]


async def get_project_by_slug(slug: str) -> Project | None:
    doc = await get_client().fetch(PROJECT_BY_SLUG_QUERY, {"slug": slug})
    return Project.from_document(doc) if doc else None


async def get_services() -> list[Service]:
    """All services in display order."""
    docs = await get_client().fetch(SERVICES_QUERY)
    return [Service.from_document(doc) for doc in docs or []]


async def get_service_by_slug(slug: str) -> Service | None:
    doc = await get_client().fetch(SERVICE_BY_SLUG_QUERY, {"slug": slug})
    return Service.from_document(doc) if doc else None
