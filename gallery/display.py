"""
Presentation labels for catalog photos.

Every ``display_*`` function maps one piece of a photo's EXIF metadata to the
string shown under it in the gallery. A tag the camera never recorded yields an
empty string. All of them are pure; ``copyright_year`` is the only helper here
that looks at the clock.
"""
import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from gallery.conf.config import Configuration
from gallery.data.schemas import Photo

# Month names are fixed so the page reads the same under any process locale.
MONTHS = ('January', 'February', 'March', 'April', 'May', 'June', 'July',
          'August', 'September', 'October', 'November', 'December')

PREVIEW_KEY = 'card'
ASSET_KEY = 'web'


def format_decimal(value: float) -> str:
    # shortest round-tripping digits, never scientific notation
    return np.format_float_positional(float(value), trim='-')


def display_camera(photo: Photo) -> str:
    camera = photo.metadata.camera
    if camera.make == '':
        return ''
    return f'{camera.make} {camera.model}'


def display_lens(photo: Photo) -> str:
    exposure = photo.metadata.exposure
    if exposure.lens_make == '':
        return ''

    name = f'{exposure.lens_make} {exposure.lens_model}'

    # Some lens firmware (Viltrox) pads its strings with NUL bytes.
    return name.replace('\x00', '')


def display_focal_length(photo: Photo) -> str:
    exposure = photo.metadata.exposure
    if exposure.focal_length == 0:
        return ''

    focal_length = format_decimal(exposure.focal_length)
    if exposure.focal_length_in_35mm != 0:
        return f'{focal_length}mm ({format_decimal(exposure.focal_length_in_35mm)}mm FFE)'

    return f'{focal_length}mm'


def display_exposure(photo: Photo) -> str:
    exposure_time = photo.metadata.exposure.exposure_time
    if exposure_time == 0 or not math.isfinite(exposure_time):
        return ''

    if exposure_time >= 1:
        return f'{int(exposure_time)} sec'

    # subnormal exposure times overflow the reciprocal
    reciprocal = 1 / exposure_time
    if not math.isfinite(reciprocal):
        return ''

    return f'1/{int(reciprocal)} sec'


def display_aperture(photo: Photo) -> str:
    f_number = photo.metadata.exposure.f_number
    if f_number == 0:
        return ''
    return f'f/{f_number:.1f}'


def display_iso(photo: Photo) -> str:
    iso_speed = photo.metadata.exposure.iso_speed
    if iso_speed == 0:
        return ''
    return f'ISO {iso_speed}'


def display_time(photo: Photo) -> str:
    taken_at = photo.metadata.exposure.date_time_original
    if taken_at is None:
        return ''

    hour = taken_at.hour % 12 or 12
    meridiem = 'AM' if taken_at.hour < 12 else 'PM'
    return f'{MONTHS[taken_at.month - 1]} {taken_at.day}, {taken_at.year} {hour}:{taken_at.minute:02d} {meridiem}'


def _asset_url(config: Configuration, photo: Photo, key: str) -> str:
    url = f'{config.get_assets_url(photo.id)}?key={key}'

    token = config.get_token()
    if token != '':
        url += '&access_token=' + token

    return url


def get_preview_url(config: Configuration, photo: Photo) -> str:
    return _asset_url(config, photo, PREVIEW_KEY)


def get_asset_url(config: Configuration, photo: Photo) -> str:
    return _asset_url(config, photo, ASSET_KEY)


def copyright_year() -> str:
    return str(datetime.now().year)


@dataclass(frozen=True)
class PhotoLabels:
    photo: Photo
    preview_url: str
    asset_url: str
    camera: str
    lens: str
    focal_length: str
    exposure: str
    aperture: str
    iso: str
    taken_at: str


def present(photo: Photo, config: Configuration) -> PhotoLabels:
    """Compute every label the gallery page shows for ``photo``."""
    return PhotoLabels(
        photo=photo,
        preview_url=get_preview_url(config, photo),
        asset_url=get_asset_url(config, photo),
        camera=display_camera(photo),
        lens=display_lens(photo),
        focal_length=display_focal_length(photo),
        exposure=display_exposure(photo),
        aperture=display_aperture(photo),
        iso=display_iso(photo),
        taken_at=display_time(photo),
    )
