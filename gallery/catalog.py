import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from gallery.conf.config import Configuration
from gallery.data.schemas import Photo, PhotoEnvelope
from gallery.utils import DecodeError, NetworkError, RemoteServiceError

logger = logging.getLogger(__name__)

PHOTO_FIELDS = 'id,title,description,metadata,width,height'


def sort_by_date_taken(photos: List[Photo]) -> List[Photo]:
    """Newest first; photos without a capture time go last."""
    dated = [p for p in photos if p.metadata.exposure.date_time_original is not None]
    undated = [p for p in photos if p.metadata.exposure.date_time_original is None]
    dated.sort(key=lambda p: p.metadata.exposure.date_time_original, reverse=True)
    return dated + undated


class CatalogClient:

    def __init__(self, config: Configuration, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.config = config
        self.transport = transport

    def get_params(self) -> dict:
        return {
            'fields': PHOTO_FIELDS,
            'filter[folder][_eq]': self.config.get_folder_id(),
        }

    def get_headers(self) -> dict:
        token = self.config.get_token()
        if token == '':
            return {}
        return {'Authorization': f'Bearer {token}'}

    async def fetch_photos(self) -> List[Photo]:
        url = self.config.get_files_api_url()
        logger.debug('Fetching photos of folder %s from %s', self.config.get_folder_id(), url)

        async with httpx.AsyncClient(transport=self.transport) as http:
            try:
                response: httpx.Response = await http.get(url, follow_redirects=True,
                                                          params=self.get_params(), headers=self.get_headers())
            except httpx.RequestError as e:
                raise NetworkError(f'failed to reach {url}: {e}') from e

        if response.status_code != httpx.codes.OK:
            raise RemoteServiceError(response.status_code)

        try:
            envelope = PhotoEnvelope.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f'malformed catalog response: {e}') from e

        photos = sort_by_date_taken(envelope.data)
        logger.info('Fetched %d photos', len(photos))
        return photos
