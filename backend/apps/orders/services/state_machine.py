"""
Order lifecycle state machine.
Decides which actions an order allows and applies them.
Pure: no database access, no logging.
"""
import copy
from enum import Enum
from typing import FrozenSet
from apps.orders.models import Order


class Action(str, Enum):
    """Actions a client can request on an order, in link order."""
    COMPLETE = 'complete'
    CANCEL = 'cancel'


class TransitionError(Exception):
    """
    Raised when an action is not permitted from the order's current status.
    Not transient: retrying with the same arguments fails the same way.
    """

    def __init__(self, order_id, action: Action, current_status: Order.Status):
        self.order_id = order_id
        self.action = action
        self.current_status = current_status
        super().__init__(
            f"You can't {action.value} an order that is in the "
            f"{current_status.label} status"
        )


class OrderLifecycle:
    """
    Order state machine with strict transition rules.
    Stateless; one instance is shared by every caller.
    """

    # status -> {action: resulting status}
    TRANSITIONS = {
        Order.Status.IN_PROGRESS: {
            Action.COMPLETE: Order.Status.COMPLETED,
            Action.CANCEL: Order.Status.CANCELLED,
        },
        Order.Status.COMPLETED: {},  # Terminal state
        Order.Status.CANCELLED: {},  # Terminal state
    }

    def permitted_actions(self, order: Order) -> FrozenSet[Action]:
        """Actions allowed from the order's current status."""
        status = Order.Status(order.status)
        return frozenset(self.TRANSITIONS[status])

    def attempt_transition(self, order: Order, action) -> Order:
        """
        Apply an action to an order.

        Args:
            order: Order in its current status (left untouched)
            action: Action or its string value ('complete', 'cancel')

        Returns:
            A copy of the order carrying the new status. Persisting it is
            up to the caller.

        Raises:
            TransitionError: If the action is not permitted
            ValueError: If the action is unknown
        """
        action = Action(action)
        status = Order.Status(order.status)

        if action not in self.permitted_actions(order):
            raise TransitionError(order.pk, action, status)

        updated = copy.copy(order)
        updated.status = self.TRANSITIONS[status][action]
        return updated
