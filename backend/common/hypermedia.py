"""
HAL rendering helpers.
Turns link descriptors into `_links` objects with absolute URLs.
"""
from dataclasses import dataclass
from typing import Dict, Iterable
from django.urls import reverse

SELF = 'self'
COLLECTION = 'collection'


@dataclass(frozen=True)
class LinkDescriptor:
    """A named link: relation plus the resource id or collection it points at."""
    relation: str
    target: object


def absolute_url(request, viewname: str, args=None) -> str:
    """Reverse a view name, absolute when a request is available."""
    url = reverse(viewname, args=args)
    if request is None:
        return url
    return request.build_absolute_uri(url)


def render_links(
    descriptors: Iterable[LinkDescriptor],
    routes: Dict[str, str],
    request=None
) -> Dict[str, dict]:
    """
    Render descriptors as a HAL `_links` mapping.

    Args:
        descriptors: Links in the order they should appear
        routes: relation -> URL name; the collection route takes no args
        request: Current request, used for absolute URLs

    Returns:
        {"<relation>": {"href": "<url>"}, ...} in descriptor order
    """
    links = {}
    for link in descriptors:
        args = None if link.relation == COLLECTION else [link.target]
        links[link.relation] = {
            'href': absolute_url(request, routes[link.relation], args)
        }
    return links


def hal_collection(name: str, items: list, self_href: str) -> dict:
    """Wrap serialized items as a HAL collection resource."""
    return {
        '_embedded': {name: items},
        '_links': {SELF: {'href': self_href}},
    }


class HypermediaSerializerMixin:
    """
    Appends a `_links` object to each serialized instance.

    Subclasses set `link_routes` and implement `get_link_descriptors`.
    """
    link_routes: Dict[str, str] = {}

    def get_link_descriptors(self, instance) -> Iterable[LinkDescriptor]:
        raise NotImplementedError

    def to_representation(self, instance):
        data = super().to_representation(instance)
        request = self.context.get('request')
        data['_links'] = render_links(
            self.get_link_descriptors(instance),
            self.link_routes,
            request
        )
        return data
