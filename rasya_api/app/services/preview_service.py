"""
Metadata for the service preview pages and the crawler files of the
public site (``robots.txt`` and ``sitemap.xml``).
"""

from datetime import datetime, timezone
from typing import List, Optional
from xml.etree import ElementTree

from ..core.catalog import CUSTOM_PREVIEWS, SERVICE_PREVIEW_META, SERVICE_TITLE_TO_SLUG, SLUG_TO_TITLE
from ..schemas.preview import PreviewMeta

FITUR_LANE_TAG = "Web & Digital"

_SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _custom_previews() -> List[PreviewMeta]:
    return [PreviewMeta(**preview) for preview in CUSTOM_PREVIEWS]


def get_service_preview_meta(slug: str) -> Optional[PreviewMeta]:
    """Preview metadata of one of the catalogue services, ``None`` if unknown."""
    meta = SERVICE_PREVIEW_META.get(slug)
    title = SLUG_TO_TITLE.get(slug)
    if meta is None or title is None:
        return None
    tag, description, preview_type = meta
    return PreviewMeta(slug=slug, title=title, description=description, tag=tag, preview_type=preview_type)


def _service_previews() -> List[PreviewMeta]:
    # catalogue order
    return [get_service_preview_meta(slug) for slug in SERVICE_TITLE_TO_SLUG.values()]


def get_all_previews() -> List[PreviewMeta]:
    """Custom showcase pages first, then one preview per catalogue service."""
    return _custom_previews() + _service_previews()


def get_preview(slug: str) -> Optional[PreviewMeta]:
    for preview in _custom_previews():
        if preview.slug == slug:
            return preview
    return get_service_preview_meta(slug)


def is_custom_preview_slug(slug: str) -> bool:
    return any(preview["slug"] == slug for preview in CUSTOM_PREVIEWS)


def get_previews_by_tag(tag: str) -> List[PreviewMeta]:
    """Service previews of one lane; custom pages are not included."""
    return [preview for preview in _service_previews() if preview.tag == tag]


def get_fitur_demo_options_by_category(category: str) -> List[PreviewMeta]:
    """Options of the "Fitur & Demo" selector.

    Only the Web & Digital lane has options: the Fitur & Demo slide, the
    website themes and then the lane's services.
    """
    if category != FITUR_LANE_TAG:
        return []
    return _custom_previews() + get_previews_by_tag(FITUR_LANE_TAG)


def robots_txt(site_url: str) -> str:
    site_url = site_url.rstrip("/")
    return "\n".join([
        "User-agent: *",
        "Allow: /",
        "Disallow: /admin",
        "Disallow: /taper",
        "",
        f"Sitemap: {site_url}/sitemap.xml",
        f"Host: {site_url}",
        "",
    ])


def sitemap_xml(site_url: str, now: Optional[datetime] = None) -> str:
    site_url = site_url.rstrip("/")
    lastmod = (now or datetime.now(timezone.utc)).strftime("%Y-%m-%dT%H:%M:%S+00:00")
    urlset = ElementTree.Element("urlset", xmlns=_SITEMAP_NS)
    for loc, changefreq, priority in (
        (site_url, "weekly", "1.0"),
        (f"{site_url}/cookies", "monthly", "0.5"),
    ):
        url = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(url, "loc").text = loc
        ElementTree.SubElement(url, "lastmod").text = lastmod
        ElementTree.SubElement(url, "changefreq").text = changefreq
        ElementTree.SubElement(url, "priority").text = priority
    body = ElementTree.tostring(urlset, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
