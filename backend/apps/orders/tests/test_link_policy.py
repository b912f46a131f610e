"""
Tests for order link derivation.
"""
from django.test import SimpleTestCase
from apps.orders.models import Order
from apps.orders.services.link_policy import OrderLinkPolicy
from apps.orders.services.state_machine import OrderLifecycle
from common.hypermedia import LinkDescriptor


class OrderLinkPolicyTestCase(SimpleTestCase):
    """Test links exposed for each order status."""

    def setUp(self):
        self.lifecycle = OrderLifecycle()
        self.policy = OrderLinkPolicy(self.lifecycle)

    def relations(self, order):
        return [link.relation for link in self.policy.links_for(order)]

    def test_in_progress_order_links(self):
        order = Order(id=7, description='iPhone', status=Order.Status.IN_PROGRESS)

        self.assertEqual(
            self.policy.links_for(order),
            (
                LinkDescriptor('self', 7),
                LinkDescriptor('collection', 'orders'),
                LinkDescriptor('complete', 7),
                LinkDescriptor('cancel', 7),
            )
        )

    def test_cancelled_order_links(self):
        order = Order(id=4, description='MacBook Pro', status=Order.Status.CANCELLED)

        self.assertEqual(
            self.policy.links_for(order),
            (
                LinkDescriptor('self', 4),
                LinkDescriptor('collection', 'orders'),
            )
        )

    def test_completed_order_has_no_action_links(self):
        order = Order(id=5, description='Desk', status=Order.Status.COMPLETED)

        self.assertEqual(self.relations(order), ['self', 'collection'])

    def test_links_are_deterministic(self):
        order = Order(id=7, description='iPhone', status=Order.Status.IN_PROGRESS)

        first = self.policy.links_for(order)
        second = self.policy.links_for(order)

        self.assertEqual(first, second)

    def test_action_links_match_permitted_actions(self):
        for status in Order.Status:
            with self.subTest(status=status):
                order = Order(id=3, description='Desk', status=status)
                advertised = set(self.relations(order)) - {'self', 'collection'}
                permitted = {action.value for action in self.lifecycle.permitted_actions(order)}
                self.assertEqual(advertised, permitted)
