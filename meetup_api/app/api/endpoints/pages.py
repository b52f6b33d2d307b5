"""
Informational HTML pages.

The site root serves a small static welcome page.  It carries no
business logic; the only dynamic value is the project name from
settings, which is escaped before it is placed in the markup.
"""

import html

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from meetup_api.app.core.config import Settings
from meetup_api.app.api.deps import get_settings

router = APIRouter()

INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
    <head>
        <meta charset="utf-8">
        <title>{title}</title>
    </head>
    <body>
        <h1>{title}</h1>
        <p>Welcome to the {title} community site.</p>
        <p>Meetups are available as JSON at <a href="/api/meetups">/api/meetups</a>.</p>
    </body>
</html>
"""


def render_index(project_name: str) -> str:
    return INDEX_TEMPLATE.format(title=html.escape(project_name))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(settings: Settings = Depends(get_settings)) -> HTMLResponse:
    return HTMLResponse(render_index(settings.project_name))
