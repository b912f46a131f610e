"""
API entry point.
"""
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from common.hypermedia import absolute_url


@extend_schema(tags=['Root'], summary='List top-level resources', responses={200: OpenApiTypes.OBJECT})
@api_view(['GET'])
def api_root(request):
    """
    Links to every top-level collection.
    Clients start here and follow links instead of building URLs.
    """
    return Response({
        '_links': {
            'self': {'href': absolute_url(request, 'root')},
            'employees': {'href': absolute_url(request, 'employees:list-create')},
            'orders': {'href': absolute_url(request, 'orders:list-create')},
        }
    })
