"""
Page Metadata

Builds the <head> metadata of the rendered page from the document's meta block:
title, description and keywords, Open Graph and Twitter card tags, and a
schema.org Person record as JSON-LD.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class MetaTag:
    """
    One <meta> element.

    Attributes:
        attribute: "name" or "property"
        key: Attribute value (e.g., "og:title")
        content: Tag content
    """

    attribute: str
    key: str
    content: str


def _get(mapping: Any, key: str) -> Any:
    return mapping.get(key) if isinstance(mapping, dict) else None


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None, recursing into nested objects."""
    compacted = {}
    for key, value in data.items():
        if isinstance(value, dict):
            value = _compact(value)
        if value is not None:
            compacted[key] = value
    return compacted


def build_meta_tags(meta: Dict[str, Any]) -> List[MetaTag]:
    """
    Build description, keyword, Open Graph and Twitter card tags.

    Tags whose content is missing or empty are left out. The fixed og:type and
    twitter:card tags are emitted only when a social block exists.

    Args:
        meta: The document's meta object

    Returns:
        Tags in document order
    """
    social = _get(meta, "social")
    candidates = [
        ("name", "description", _get(meta, "description")),
        ("name", "keywords", _get(meta, "keywords")),
        ("property", "og:title", _get(social, "ogTitle")),
        ("property", "og:description", _get(social, "ogDescription")),
        ("property", "og:image", _get(social, "imageUrl")),
        ("property", "og:url", _get(social, "resumeUrl")),
        ("property", "og:type", "website" if isinstance(social, dict) else None),
        ("name", "twitter:card", "summary_large_image" if isinstance(social, dict) else None),
        ("name", "twitter:title", _get(social, "ogTitle")),
        ("name", "twitter:description", _get(social, "twitterDescription")),
        ("name", "twitter:image", _get(social, "imageUrl")),
    ]
    return [
        MetaTag(attribute=attribute, key=key, content=str(content))
        for attribute, key, content in candidates
        if content not in (None, "")
    ]


def build_structured_data(meta: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Build the schema.org Person record for JSON-LD.

    Args:
        meta: The document's meta object

    Returns:
        JSON-LD object, or None when the meta block has no structuredData
    """
    sd = _get(meta, "structuredData")
    if not isinstance(sd, dict):
        return None

    return _compact(
        {
            "@context": "https://schema.org/",
            "@type": "Person",
            "name": sd.get("name"),
            "jobTitle": sd.get("jobTitle"),
            "url": _get(_get(meta, "social"), "resumeUrl"),
            "image": sd.get("image"),
            "address": {
                "@type": "PostalAddress",
                "addressLocality": sd.get("addressLocality"),
                "addressCountry": sd.get("addressCountry"),
            },
            "email": sd.get("email"),
            "telephone": sd.get("telephone"),
            "sameAs": sd.get("sameAs"),
            "knowsAbout": sd.get("knowsAbout"),
        }
    )
