import logging
import os

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from gallery.catalog import CatalogClient
from gallery.conf.config import Configuration
from gallery.display import copyright_year, present
from gallery.utils import RenderError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'templates')
ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']

templates = Jinja2Templates(directory=TEMPLATES_DIR)
router = APIRouter()


def get_config(request: Request) -> Configuration:
    return request.app.state.config


def get_catalog(request: Request) -> CatalogClient:
    return request.app.state.catalog


def render_home(photos, config: Configuration) -> str:
    try:
        return templates.get_template('home.html').render(
            photos=[present(photo, config) for photo in photos],
            year=copyright_year())
    except TemplateError as e:
        raise RenderError(f'failed to render home page: {e}') from e


@router.get('/', response_class=HTMLResponse)
async def home(config: Configuration = Depends(get_config), catalog: CatalogClient = Depends(get_catalog)):
    photos = await catalog.fetch_photos()
    return HTMLResponse(render_home(photos, config))


# Must stay the last route: anything not matched above is either the wrong
# method or an unknown page.
@router.api_route('/{path:path}', methods=ALL_METHODS, include_in_schema=False)
async def fallback(request: Request, path: str):
    if request.method != 'GET':
        raise HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED, detail='Method Not Allowed')
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Not Found')
