"""
Tests for the order lifecycle state machine.
No database: orders are unsaved instances.
"""
from django.test import SimpleTestCase
from apps.orders.models import Order
from apps.orders.services.state_machine import Action, OrderLifecycle, TransitionError

TERMINAL_STATUSES = [Order.Status.COMPLETED, Order.Status.CANCELLED]


class PermittedActionsTestCase(SimpleTestCase):
    """Test which actions each status allows."""

    def setUp(self):
        self.lifecycle = OrderLifecycle()

    def test_in_progress_allows_complete_and_cancel(self):
        order = Order(id=1, description='iPhone', status=Order.Status.IN_PROGRESS)
        self.assertEqual(
            self.lifecycle.permitted_actions(order),
            {Action.COMPLETE, Action.CANCEL}
        )

    def test_terminal_statuses_allow_nothing(self):
        for status in TERMINAL_STATUSES:
            with self.subTest(status=status):
                order = Order(id=1, description='iPhone', status=status)
                self.assertEqual(self.lifecycle.permitted_actions(order), frozenset())

    def test_plain_string_status_is_accepted(self):
        """Statuses loaded from the database are plain strings."""
        order = Order(id=1, description='iPhone', status='IN_PROGRESS')
        self.assertIn(Action.CANCEL, self.lifecycle.permitted_actions(order))


class AttemptTransitionTestCase(SimpleTestCase):
    """Test applying actions."""

    def setUp(self):
        self.lifecycle = OrderLifecycle()

    def test_cancel_in_progress_order(self):
        order = Order(id=4, description='MacBook Pro', status=Order.Status.IN_PROGRESS)

        updated = self.lifecycle.attempt_transition(order, Action.CANCEL)

        self.assertEqual(updated.status, Order.Status.CANCELLED)
        self.assertEqual(updated.id, 4)
        self.assertEqual(updated.description, 'MacBook Pro')

    def test_complete_in_progress_order(self):
        order = Order(id=4, description='MacBook Pro', status=Order.Status.IN_PROGRESS)

        updated = self.lifecycle.attempt_transition(order, 'complete')

        self.assertEqual(updated.status, Order.Status.COMPLETED)

    def test_input_order_is_not_mutated(self):
        order = Order(id=4, description='MacBook Pro', status=Order.Status.IN_PROGRESS)

        self.lifecycle.attempt_transition(order, Action.COMPLETE)

        self.assertEqual(order.status, Order.Status.IN_PROGRESS)

    def test_cancel_cancelled_order_fails(self):
        order = Order(id=4, description='MacBook Pro', status=Order.Status.CANCELLED)

        with self.assertRaises(TransitionError) as ctx:
            self.lifecycle.attempt_transition(order, Action.CANCEL)

        error = ctx.exception
        self.assertEqual(error.order_id, 4)
        self.assertEqual(error.action, Action.CANCEL)
        self.assertEqual(error.current_status, Order.Status.CANCELLED)
        self.assertEqual(
            str(error),
            "You can't cancel an order that is in the Cancelled status"
        )

    def test_unknown_action_is_rejected(self):
        order = Order(id=4, description='MacBook Pro', status=Order.Status.IN_PROGRESS)

        with self.assertRaises(ValueError):
            self.lifecycle.attempt_transition(order, 'ship')

    def test_success_iff_action_permitted(self):
        """attempt_transition and permitted_actions never disagree."""
        for status in Order.Status:
            for action in Action:
                with self.subTest(status=status, action=action):
                    order = Order(id=9, description='Desk', status=status)
                    permitted = action in self.lifecycle.permitted_actions(order)
                    try:
                        self.lifecycle.attempt_transition(order, action)
                        succeeded = True
                    except TransitionError:
                        succeeded = False
                    self.assertEqual(succeeded, permitted)

    def test_terminal_statuses_never_change(self):
        for status in TERMINAL_STATUSES:
            order = Order(id=9, description='Desk', status=status)
            for action in [Action.COMPLETE, Action.CANCEL, Action.COMPLETE]:
                with self.subTest(status=status, action=action):
                    with self.assertRaises(TransitionError):
                        self.lifecycle.attempt_transition(order, action)
                    self.assertEqual(order.status, status)

    def test_completed_order_cannot_be_cancelled_after_completion(self):
        order = Order(id=9, description='Desk', status=Order.Status.IN_PROGRESS)

        completed = self.lifecycle.attempt_transition(order, Action.COMPLETE)

        with self.assertRaises(TransitionError):
            self.lifecycle.attempt_transition(completed, Action.CANCEL)
