import logging
import os

import httpx
import uvicorn
import asyncio

from typing import Optional
from fastapi import FastAPI, status, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from gallery.api import api_router
from gallery.catalog import CatalogClient
from gallery.conf.config import Configuration
from gallery.utils import GalleryException

logger = logging.getLogger(__name__)

ASSETS_DIR = os.path.join(os.path.dirname(__file__), 'gallery', 'assets')


async def gallery_exception_handler(_: Request, err: GalleryException):
    logger.error('Failed to serve gallery: %s', err.message)
    return PlainTextResponse(err.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def http_exception_handler(_: Request, err: StarletteHTTPException):
    return PlainTextResponse(str(err.detail), status_code=err.status_code, headers=getattr(err, 'headers', None))


def create_app(config: Configuration, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    app.state.config = config
    app.state.catalog = CatalogClient(config, transport=transport)

    app.add_exception_handler(GalleryException, gallery_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # before the router, whose last route catches every other path
    app.mount('/assets', StaticFiles(directory=ASSETS_DIR), name='assets')
    app.include_router(api_router)
    return app


config = Configuration()
app = create_app(config)


async def main():
    logging.basicConfig(level=config.get_log_level().upper())
    server_conf = uvicorn.Config(app,
                                 host=config.get_host(),
                                 port=config.get_port(),
                                 log_level=config.get_log_level())
    server = uvicorn.Server(server_conf)
    logger.info('Starting server on port %s', config.get_port())
    await server.serve()

if __name__ == '__main__':
    asyncio.run(main())
