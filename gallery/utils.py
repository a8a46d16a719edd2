from datetime import datetime, timezone


EXIF_DATETIME_FORMAT = '%Y:%m:%d %H:%M:%S'


def parse_exif_datetime(value: str) -> datetime | None:
    """
    Parse a capture timestamp as the catalog reports it.

    Both ISO 8601 (``2023-05-14T12:34:56Z``) and the raw EXIF form
    (``2023:05:14 12:34:56``) are accepted. Naive values are taken as UTC.
    An empty value and the zero instant yield ``None``; anything else that
    is not a timestamp raises ``ValueError``.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        try:
            parsed = datetime.strptime(value, EXIF_DATETIME_FORMAT)
        except ValueError:
            raise ValueError(f'invalid capture timestamp: {value!r}')
    return normalize_datetime(parsed)


def normalize_datetime(value: datetime | None) -> datetime | None:
    if value is None or value.year <= 1:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


class GalleryException(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NetworkError(GalleryException):
    """The remote catalog could not be reached."""


class RemoteServiceError(GalleryException):
    """The remote catalog answered with a non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f'unexpected status code: {status_code}')
        self.status_code = status_code


class DecodeError(GalleryException):
    """The remote catalog answered with a body that is not a photo envelope."""


class RenderError(GalleryException):
    """The gallery page could not be rendered."""
