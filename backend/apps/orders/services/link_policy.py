"""
Link policy for orders.
Derives the hypermedia links an order exposes from its permitted actions.
"""
from typing import Tuple
from apps.orders.models import Order
from apps.orders.services.state_machine import Action, OrderLifecycle
from common.hypermedia import COLLECTION, SELF, LinkDescriptor

ORDERS = 'orders'


class OrderLinkPolicy:
    """
    Maps an order's status to the links a client should receive.
    Action links come only from OrderLifecycle.permitted_actions, so a
    link is advertised exactly when the transition would succeed.
    """

    def __init__(self, lifecycle: OrderLifecycle):
        self.lifecycle = lifecycle

    def links_for(self, order: Order) -> Tuple[LinkDescriptor, ...]:
        """
        Links for one order, in a fixed order:
        self, collection, then permitted actions as declared on Action.
        """
        permitted = self.lifecycle.permitted_actions(order)

        links = [
            LinkDescriptor(SELF, order.pk),
            LinkDescriptor(COLLECTION, ORDERS),
        ]
        links.extend(
            LinkDescriptor(action.value, order.pk)
            for action in Action
            if action in permitted
        )
        return tuple(links)
