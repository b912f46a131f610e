"""
Order service - persistence side of order management.
Loads and saves orders; lifecycle rules live in OrderLifecycle.
"""
import logging
from django.db import transaction
from apps.orders.models import Order
from apps.orders.services.state_machine import Action, OrderLifecycle
from common.exceptions import ResourceNotFound

logger = logging.getLogger('orders')


class OrderNotFound(ResourceNotFound):
    resource = 'order'


class OrderService:
    """
    Main service for order operations.
    Coordinates the order store with the lifecycle state machine.
    """

    def __init__(self, lifecycle: OrderLifecycle):
        self.lifecycle = lifecycle

    def list_orders(self):
        return Order.objects.all()

    def get_order(self, order_id) -> Order:
        try:
            return Order.objects.get(pk=order_id)
        except Order.DoesNotExist:
            raise OrderNotFound(order_id)

    def create_order(self, description: str) -> Order:
        """
        Create a new order.
        Always starts IN_PROGRESS, whatever the client asked for.
        """
        order = Order.objects.create(
            description=description,
            status=Order.Status.IN_PROGRESS
        )
        logger.info(f"Created order {order.id}")
        return order

    @transaction.atomic
    def transition(self, order_id, action: Action) -> Order:
        """
        Apply a lifecycle action to a stored order.

        Security:
        - Uses select_for_update so two concurrent transitions on the
          same order cannot both succeed

        Args:
            order_id: Order primary key
            action: Action to apply

        Returns:
            Updated and saved order

        Raises:
            OrderNotFound: If no order has this id
            TransitionError: If the action is not permitted
        """
        try:
            locked_order = Order.objects.select_for_update().get(pk=order_id)
        except Order.DoesNotExist:
            raise OrderNotFound(order_id)

        old_status = locked_order.status
        updated = self.lifecycle.attempt_transition(locked_order, action)
        updated.save(update_fields=['status', 'updated_at'])

        logger.info(
            f"Order {updated.id}: {old_status} -> {updated.status} ({Action(action).value})"
        )
        return updated
