"""
Derived identifiers for catalog rows.

Slugs and SKUs are a slugified base name plus a short random suffix, e.g.
``red-m-000000-k3x9qa``. The suffix keeps them practically unique without a
coordinated sequence; collisions are possible but not retried.
"""

import re
import string

from django.utils.crypto import get_random_string
from django.utils.text import slugify

SUFFIX_LENGTH = 6
SUFFIX_ALPHABET = string.ascii_lowercase + string.digits

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def strict_slugify(value) -> str:
    """Lowercase ASCII slug made only of ``[a-z0-9]`` runs joined by single hyphens."""
    return _NON_ALNUM.sub("-", slugify(str(value))).strip("-")


def random_suffix(length: int = SUFFIX_LENGTH) -> str:
    return get_random_string(length, allowed_chars=SUFFIX_ALPHABET)


def unique_slug(value) -> str:
    """Slug of ``value`` with a random suffix appended."""
    base = strict_slugify(value)
    suffix = random_suffix()
    return f"{base}-{suffix}" if base else suffix


def variant_sku(name: str, size: str, color: str) -> str:
    return unique_slug(f"{name}-{size}-{color}")
