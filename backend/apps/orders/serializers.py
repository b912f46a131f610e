"""
Order serializers.
Handles API input/output for order operations.
"""
from rest_framework import serializers
from apps.orders.models import Order
from common.hypermedia import HypermediaSerializerMixin


class OrderSerializer(HypermediaSerializerMixin, serializers.ModelSerializer):
    """
    Order with its `_links`.
    Expects `link_policy` in the serializer context.
    """
    link_routes = {
        'self': 'orders:detail',
        'collection': 'orders:list-create',
        'complete': 'orders:complete',
        'cancel': 'orders:cancel',
    }

    class Meta:
        model = Order
        fields = ['id', 'description', 'status']
        read_only_fields = ['id', 'status']

    def get_link_descriptors(self, instance):
        return self.context['link_policy'].links_for(instance)


class CreateOrderSerializer(serializers.Serializer):
    """Serializer for creating a new order."""
    description = serializers.CharField(max_length=255)
