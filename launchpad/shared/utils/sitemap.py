# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from xml.sax.saxutils import escape


@dataclass(slots=True, frozen=True)
class SitemapRoute:
    url: str
    changefreq: str = "monthly"
    priority: float = 0.5


# public routes only
PUBLIC_ROUTES: tuple[SitemapRoute, ...] = (
    SitemapRoute("", "weekly", 1.0),
    SitemapRoute("/sign-in", "monthly", 0.5),
    SitemapRoute("/sign-up", "monthly", 0.5),
)


def render_sitemap(site_url: str, routes: Iterable[SitemapRoute] = PUBLIC_ROUTES) -> str:
    site_url = site_url.rstrip("/")
    entries = "\n".join(
        "  <url>\n"
        f"    <loc>{escape(site_url + route.url)}</loc>\n"
        f"    <changefreq>{escape(route.changefreq)}</changefreq>\n"
        f"    <priority>{route.priority:.1f}</priority>\n"
        "  </url>"
        for route in routes
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{entries}\n"
        "</urlset>"
    )


__all__ = ["PUBLIC_ROUTES", "SitemapRoute", "render_sitemap"]
