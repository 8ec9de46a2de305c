"""String filters that turn free-text input into canonical identifiers.

Package and app names are dash-case (``"Blog Posts"`` -> ``"blog-posts"``),
module names are camel-case (``"blog posts"`` -> ``"blogPosts"``), and
collection and GraphQL type names are Pascal-case (``"BlogPosts"``).

The store never normalizes names itself; callers run input through these
filters before querying or dispatching.
"""

from __future__ import annotations

import re

_HUMP_RE = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]+")


def split_words(value: str) -> list[str]:
    """Split ``value`` on separators and camel-case humps.

    Examples::

        split_words("blogPosts")     -> ["blog", "Posts"]
        split_words("  blog_posts ") -> ["blog", "posts"]
    """
    spaced = _HUMP_RE.sub(r"\1 \2", value.strip())
    return [word for word in _SEPARATOR_RE.split(spaced) if word]


def dash_case(value: str) -> str:
    """Convert ``Some Thing`` or ``someThing`` to ``some-thing``."""
    return "-".join(word.lower() for word in split_words(value))


def camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``Some Thing`` to ``someThing``."""
    words = split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    return "".join(word.capitalize() for word in split_words(value))


def filter_package_name(package_name: str) -> str:
    return dash_case(package_name)


def filter_app_name(app_name: str) -> str:
    return dash_case(app_name)


def filter_module_name(module_name: str) -> str:
    return camel_case(module_name)
