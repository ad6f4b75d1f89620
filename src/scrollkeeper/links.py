"""Link detection for click-driven navigation.

A click counts as an internal navigation when its target, or the
nearest ancestor whose tag is link-like, carries an ``href`` that is a
path on the same origin and is not opened elsewhere.

Usage::

    from scrollkeeper.links import internal_href

    href = internal_href(event.target)
    if href is not None:
        schedule_reset()
"""

import re

from scrollkeeper.host import Element

_QUERY_OR_FRAGMENT = re.compile(r"[?#]")


def is_internal_path(href: str | None) -> bool:
    """Whether *href* names a path on this origin.

    The location must begin with a single ``/``. A second ``/`` or a
    ``\\`` there would make browsers read it as a host. Only the path part
    is checked for a scheme, so a redirect target carried in the query
    (``/login?next=https://example.com/``) still counts as internal::

        >>> is_internal_path("/services?page=2#top")
        True
        >>> is_internal_path("/login?next=https://example.com/")
        True
        >>> is_internal_path("//cdn.example.com/app.js")
        False
        >>> is_internal_path("https://example.com/")
        False
    """
    if not href or not isinstance(href, str):
        return False
    if not href.startswith("/") or href[1:2] in ("/", "\\"):
        return False
    path = _QUERY_OR_FRAGMENT.split(href, maxsplit=1)[0]
    return "://" not in path


def closest_link(element: Element | None, tags: tuple[str, ...] = ("a",)) -> Element | None:
    """Return *element* or its nearest ancestor whose tag is in *tags*."""
    wanted = {tag.lower() for tag in tags}
    node = element
    while node is not None:
        if node.tag.lower() in wanted:
            return node
        node = node.parent
    return None


def internal_href(element: Element | None, tags: tuple[str, ...] = ("a",)) -> str | None:
    """The internal ``href`` a click on *element* would follow, if any.

    Returns ``None`` when there is no link-like ancestor, when the link
    points off-site, or when it opens in another browsing context
    (``target`` other than ``_self``) or downloads instead of navigating.
    """
    link = closest_link(element, tags)
    if link is None:
        return None
    href = link.get_attribute("href")
    if not is_internal_path(href):
        return None
    target = link.get_attribute("target")
    if target and target.lower() != "_self":
        return None
    if link.get_attribute("download") is not None:
        return None
    return href
