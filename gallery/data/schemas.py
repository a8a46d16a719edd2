from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from gallery.utils import normalize_datetime, parse_exif_datetime


class CatalogModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    @field_validator('*', mode='before')
    @classmethod
    def null_as_absent(cls, value: Any, info: ValidationInfo) -> Any:
        # The catalog sends null for tags a camera never wrote.
        field = cls.model_fields[info.field_name]
        if value is None and not field.is_required():
            return field.get_default(call_default_factory=True)
        return value


class CameraInfo(CatalogModel):
    make: str = Field(default='', alias='Make')
    model: str = Field(default='', alias='Model')


class ExposureInfo(CatalogModel):
    exposure_time: float = Field(default=0, alias='ExposureTime')
    f_number: float = Field(default=0, alias='FNumber')
    iso_speed: int = Field(default=0, alias='ISOSpeedRatings')
    date_time_original: datetime | None = Field(default=None, alias='DateTimeOriginal')
    focal_length: float = Field(default=0, alias='FocalLength')
    focal_length_in_35mm: float = Field(default=0, alias='FocalLengthIn35mmFilm')
    lens_make: str = Field(default='', alias='LensMake')
    lens_model: str = Field(default='', alias='LensModel')

    @model_validator(mode='before')
    @classmethod
    def iso_alias(cls, data: Any) -> Any:
        # Newer catalog exports name the ISO tag "ISO".
        if isinstance(data, dict) and 'ISO' in data \
                and 'ISOSpeedRatings' not in data and 'iso_speed' not in data:
            data = dict(data)
            data['ISOSpeedRatings'] = data.pop('ISO')
        return data

    @field_validator('iso_speed', mode='before')
    @classmethod
    def first_iso(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return value[0] if value else 0
        return value

    @field_validator('date_time_original', mode='before')
    @classmethod
    def parse_date_time_original(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_exif_datetime(value)
        return value

    @field_validator('date_time_original')
    @classmethod
    def normalize_date_time_original(cls, value: datetime | None) -> datetime | None:
        return normalize_datetime(value)


class Metadata(CatalogModel):
    camera: CameraInfo = Field(default_factory=CameraInfo, alias='ifd0')
    exposure: ExposureInfo = Field(default_factory=ExposureInfo, alias='exif')


class Photo(CatalogModel):
    id: str
    title: str = ''
    description: str = ''
    width: int = 0
    height: int = 0
    metadata: Metadata = Field(default_factory=Metadata)


class PhotoEnvelope(CatalogModel):
    data: List[Photo] = Field(default_factory=list)
