"""
Order views and API endpoints.
Collaborators are passed in through as_view() in urls.py.
"""
from rest_framework import status, generics
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse
from apps.orders.serializers import OrderSerializer, CreateOrderSerializer
from apps.orders.services.state_machine import Action
from common.hypermedia import absolute_url, hal_collection
from common.schema_examples import (
    ORDER_IN_PROGRESS_EXAMPLE,
    ORDER_CANCELLED_EXAMPLE,
    TRANSITION_ERROR_EXAMPLE,
    NOT_FOUND_EXAMPLE,
)


class OrderViewMixin:
    """Holds the injected collaborators and feeds the link policy to serializers."""
    link_policy = None
    order_service = None

    def get_queryset(self):
        return self.order_service.list_orders()

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['link_policy'] = self.link_policy
        return context

    def order_response(self, order, status_code=status.HTTP_200_OK, headers=None):
        serializer = OrderSerializer(order, context=self.get_serializer_context())
        return Response(serializer.data, status=status_code, headers=headers)


class OrderListCreateView(OrderViewMixin, generics.GenericAPIView):
    """
    List all orders and create new ones.
    """
    serializer_class = OrderSerializer

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return CreateOrderSerializer
        return OrderSerializer

    @extend_schema(
        tags=['Orders'],
        summary='List orders',
        responses={200: OrderSerializer(many=True)},
    )
    def get(self, request, *args, **kwargs):
        serializer = OrderSerializer(
            self.get_queryset(),
            many=True,
            context=self.get_serializer_context()
        )
        return Response(hal_collection(
            'orders',
            serializer.data,
            absolute_url(request, 'orders:list-create')
        ))

    @extend_schema(
        tags=['Orders'],
        summary='Create an order',
        description='New orders always start IN_PROGRESS.',
        request=CreateOrderSerializer,
        responses={201: OpenApiResponse(
            response=OrderSerializer,
            examples=[ORDER_IN_PROGRESS_EXAMPLE]
        )},
    )
    def post(self, request, *args, **kwargs):
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = self.order_service.create_order(
            description=serializer.validated_data['description']
        )

        location = absolute_url(request, 'orders:detail', [order.pk])
        return self.order_response(
            order,
            status_code=status.HTTP_201_CREATED,
            headers={'Location': location}
        )


class OrderDetailView(OrderViewMixin, generics.GenericAPIView):
    """
    Get a single order with its currently valid links.
    """
    serializer_class = OrderSerializer

    @extend_schema(
        tags=['Orders'],
        summary='Get an order',
        responses={
            200: OpenApiResponse(
                response=OrderSerializer,
                examples=[ORDER_IN_PROGRESS_EXAMPLE, ORDER_CANCELLED_EXAMPLE]
            ),
            404: OpenApiResponse(description='Unknown order', examples=[NOT_FOUND_EXAMPLE]),
        },
    )
    def get(self, request, pk):
        return self.order_response(self.order_service.get_order(pk))


class OrderTransitionView(OrderViewMixin, generics.GenericAPIView):
    """
    Base view for lifecycle actions.
    TransitionError becomes 405 in common.exceptions.
    """
    serializer_class = OrderSerializer
    lifecycle_action = None

    def perform_transition(self, pk):
        order = self.order_service.transition(pk, self.lifecycle_action)
        return self.order_response(order)


TRANSITION_RESPONSES = {
    200: OrderSerializer,
    404: OpenApiResponse(description='Unknown order', examples=[NOT_FOUND_EXAMPLE]),
    405: OpenApiResponse(
        description='Action not allowed in the current status',
        examples=[TRANSITION_ERROR_EXAMPLE]
    ),
}


class CompleteOrderView(OrderTransitionView):
    """
    Complete an order.
    Transitions: IN_PROGRESS → COMPLETED
    """
    lifecycle_action = Action.COMPLETE

    @extend_schema(tags=['Orders'], summary='Complete an order', request=None,
                   responses=TRANSITION_RESPONSES)
    def put(self, request, pk):
        return self.perform_transition(pk)


class CancelOrderView(OrderTransitionView):
    """
    Cancel an order.
    Transitions: IN_PROGRESS → CANCELLED
    """
    lifecycle_action = Action.CANCEL

    @extend_schema(tags=['Orders'], summary='Cancel an order', request=None,
                   responses=TRANSITION_RESPONSES)
    def delete(self, request, pk):
        return self.perform_transition(pk)
