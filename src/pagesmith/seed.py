"""Starter content: a handful of section templates and the pages using them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

from pagesmith.pages.models import Page, PageSEO, PageStatus
from pagesmith.sections.models import FieldSchema, FieldType, SectionTemplate
from pagesmith.site import Site

logger = logging.getLogger(__name__)


def _at(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=UTC)


def starter_templates() -> list[SectionTemplate]:
    hero = SectionTemplate(
        id="hero",
        name="Hero Banner",
        description="A full-width banner with heading, subheading, and call-to-action button",
        type="hero",
        fields=[
            FieldSchema(id="hero-1", name="heading", type=FieldType.TEXT, label="Heading", required=True),
            FieldSchema(id="hero-2", name="subheading", type=FieldType.TEXTAREA, label="Subheading"),
            FieldSchema(id="hero-3", name="buttonText", type=FieldType.TEXT, label="Button Text"),
            FieldSchema(id="hero-4", name="buttonUrl", type=FieldType.LINK, label="Button URL"),
            FieldSchema(
                id="hero-5", name="backgroundImage", type=FieldType.IMAGE, label="Background Image"
            ),
        ],
        created_at=_at("2023-06-15T10:30:00"),
        updated_at=_at("2023-06-15T10:30:00"),
    )
    testimonials = SectionTemplate(
        id="testimonials",
        name="Testimonials",
        description="A section to display customer testimonials with images and quotes",
        type="testimonials",
        fields=[
            FieldSchema(id="testimonials-1", name="heading", label="Section Heading"),
            FieldSchema(
                id="testimonials-2",
                name="testimonials",
                type=FieldType.REPEATER,
                label="Testimonials",
            ),
        ],
        created_at=_at("2023-06-16T14:20:00"),
        updated_at=_at("2023-06-16T14:20:00"),
    )
    features = SectionTemplate(
        id="features",
        name="Feature Grid",
        description="A grid layout to showcase features or services with icons",
        type="features",
        fields=[
            FieldSchema(id="features-1", name="heading", label="Section Heading"),
            FieldSchema(
                id="features-2",
                name="subheading",
                type=FieldType.TEXTAREA,
                label="Section Subheading",
            ),
            FieldSchema(id="features-3", name="features", type=FieldType.REPEATER, label="Features"),
        ],
        created_at=_at("2023-06-17T09:45:00"),
        updated_at=_at("2023-06-17T09:45:00"),
    )
    # Blocks referenced by the starter pages that have no fields yet.
    stubs = [
        ("team", "Team Members", "gallery"),
        ("mission", "Mission Statement", "text"),
        ("values", "Company Values", "list"),
        ("contact-form", "Contact Form", "form"),
        ("map", "Location Map", "map"),
        ("office-locations", "Office Locations", "cards"),
    ]
    return [hero, testimonials, features] + [
        SectionTemplate(id=sid, name=name, type=kind, description="") for sid, name, kind in stubs
    ]


def starter_pages() -> list[Page]:
    return [
        Page(
            id="home",
            title="Home Page",
            slug="home",
            status=PageStatus.PUBLISHED,
            sections=["hero", "features", "testimonials"],
            seo=PageSEO(
                title="Welcome to Our Website",
                description="Our amazing website homepage",
                keywords="home, welcome, main",
            ),
        ),
        Page(
            id="about",
            title="About Us",
            slug="about",
            status=PageStatus.PUBLISHED,
            sections=["team", "mission", "values"],
            seo=PageSEO(
                title="About Our Company",
                description="Learn about our company history and values",
                keywords="about, company, history, values",
            ),
        ),
        Page(
            id="contact",
            title="Contact Page",
            slug="contact",
            status=PageStatus.DRAFT,
            sections=["contact-form", "map", "office-locations"],
            seo=PageSEO(
                title="Contact Us",
                description="Get in touch with our team",
                keywords="contact, email, phone, location",
            ),
        ),
    ]


@dataclass
class SeedResult:
    sections: list[str] = field(default_factory=list)
    pages: list[str] = field(default_factory=list)


def seed_site(site: Site) -> SeedResult:
    """Add and save the starter templates and pages that are not present yet.

    Existing templates and pages with the same ids are left alone. A starter
    template is also skipped when another template already has its type.
    """
    result = SeedResult()
    used_types = {t.type for t in site.sections.list()}
    for template in starter_templates():
        if template.id in site.sections or template.type in used_types:
            continue
        site.sections.add(template)
        site.sections.save(template.id)
        result.sections.append(template.id)
    for page in starter_pages():
        if page.id in site.pages:
            continue
        site.pages.save(page)
        result.pages.append(page.id)
    logger.info("Seeded %d sections and %d pages", len(result.sections), len(result.pages))
    return result
