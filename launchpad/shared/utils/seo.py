# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Page metadata for search engines and link previews."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Literal

DEFAULT_DESCRIPTION = (
    "A production-ready Flask starter with session authentication, a database, "
    "health checks and deployment configuration, all set up and ready to go."
)
DEFAULT_IMAGE = "/favicon.svg"
DEFAULT_KEYWORDS = "Flask, Python, SQLAlchemy, pydantic, authentication, starter"


@dataclass(slots=True, frozen=True)
class SeoProps:
    title: str | None = None
    description: str = DEFAULT_DESCRIPTION
    image: str = DEFAULT_IMAGE
    url: str | None = None
    type: Literal["website", "article", "profile"] = "website"
    noindex: bool = False
    nofollow: bool = False
    keywords: str = DEFAULT_KEYWORDS


@dataclass(slots=True, frozen=True)
class SeoTags:
    title: str
    description: str
    keywords: str
    og_title: str
    og_description: str
    og_image: str
    og_url: str
    og_type: str
    twitter_card: str
    twitter_title: str
    twitter_description: str
    twitter_image: str
    robots: str
    canonical: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def build_seo_tags(props: SeoProps | None = None, *, site_url: str, site_name: str) -> SeoTags:
    props = props or SeoProps()
    site_url = site_url.rstrip("/")

    default_title = f"{site_name} - Production-Ready Starter"
    title = props.title or default_title
    full_title = title if site_name in title else f"{title} | {site_name}"
    full_url = f"{site_url}{props.url}" if props.url else site_url
    full_image = props.image if props.image.startswith("http") else f"{site_url}{props.image}"

    robots = ", ".join(
        [
            "noindex" if props.noindex else "index",
            "nofollow" if props.nofollow else "follow",
            "max-snippet:-1",
            "max-image-preview:large",
            "max-video-preview:-1",
        ]
    )

    return SeoTags(
        title=full_title,
        description=props.description,
        keywords=props.keywords,
        og_title=full_title,
        og_description=props.description,
        og_image=full_image,
        og_url=full_url,
        og_type=props.type,
        twitter_card="summary_large_image",
        twitter_title=full_title,
        twitter_description=props.description,
        twitter_image=full_image,
        robots=robots,
        canonical=full_url,
    )


__all__ = ["SeoProps", "SeoTags", "build_seo_tags"]
