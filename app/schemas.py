"""
Request/response models for the mobile client.

The app sends camelCase keys; models accept either camelCase or snake_case.
"""
from __future__ import annotations

import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from core.feed import format_distance, has_distance
from core.models import RankedJobPosting

YesNo = Literal["si", "no"]
# Single choice; the older multi-select form variant is not accepted.
EnglishLevel = Literal["Bajo", "Medio", "Alto"]

EXPERIENCE_OPTIONS = [
    "Housekeeping",
    "Houseperson",
    "Assembly Line",
    "Packing",
    "Lumper",
    "Operador de maquinaria - High-reach",
    "Operador de maquinaria - Forklift",
    "Operador de Pallet Jack",
    "Mantenimiento de Jardineria",
    "Installacion de Jardineria",
    "Irrigation en Jardineria",
    "Mantenimiento en Campo de golf",
    "Dishwasher",
    "Cook",
]

_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApplicationSubmission(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    email: EmailStr
    phone: str = Field(pattern=r"^[0-9]{10,15}$")
    full_name: str = Field(min_length=3)
    birth_date: str = Field(pattern=r"^\d{1,2}/\d{1,2}/\d{4}$")
    address: str = Field(min_length=5)
    has_transport: YesNo
    has_documents: YesNo
    has_experience: YesNo
    english_level: EnglishLevel
    experience_details: Optional[str] = None
    work_experience: list[str] = Field(default_factory=list)
    experience_location: Optional[str] = None
    experience_period: Optional[str] = None
    additional_notes: Optional[str] = None
    job_id: str = Field(min_length=1)
    # Accepted for older clients; the stored posting title is what gets saved.
    job_title: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _strict_email_format(cls, v: str) -> str:
        if not _EMAIL_RE.fullmatch(v):
            raise ValueError("invalid email format")
        return v

    @field_validator(
        "full_name",
        "birth_date",
        "address",
        "experience_location",
        "experience_period",
        "job_id",
        "job_title",
    )
    @classmethod
    def _single_line(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and ("\r" in v or "\n" in v):
            raise ValueError("line breaks are not allowed")
        return v

    @field_validator(
        "experience_details",
        "experience_location",
        "experience_period",
        "additional_notes",
        "job_title",
    )
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_validator("work_experience")
    @classmethod
    def _known_experience(cls, v: list[str]) -> list[str]:
        unknown = [item for item in v if item not in EXPERIENCE_OPTIONS]
        if unknown:
            raise ValueError(f"unknown experience options: {', '.join(unknown)}")
        return list(dict.fromkeys(v))


class ApplicationCreated(_CamelModel):
    id: str
    status: str


class JobFeedItem(_CamelModel):
    id: str
    title: str
    description: str
    company: str
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    salary: Optional[str] = None
    requirements: list[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    distance_miles: Optional[float] = None
    distance_label: Optional[str] = None

    @classmethod
    def from_ranked(cls, ranked: RankedJobPosting) -> "JobFeedItem":
        p = ranked.posting
        distance = ranked.distance_miles if has_distance(ranked.distance_miles) else None
        return cls(
            id=p.id,
            title=p.title,
            description=p.description,
            company=p.company,
            location=p.location,
            latitude=p.latitude,
            longitude=p.longitude,
            salary=p.salary,
            requirements=p.requirements,
            image_url=p.image_url,
            distance_miles=distance,
            distance_label=format_distance(ranked.distance_miles),
        )


class JobFeed(_CamelModel):
    jobs: list[JobFeedItem]
    ranked: bool
