"""
Common schema examples and responses for Swagger documentation.
"""
from drf_spectacular.utils import OpenApiExample

# Order Examples
ORDER_IN_PROGRESS_EXAMPLE = OpenApiExample(
    'Order In Progress',
    value={
        'id': 7,
        'description': 'iPhone',
        'status': 'IN_PROGRESS',
        '_links': {
            'self': {'href': 'http://localhost:8000/api/orders/7/'},
            'collection': {'href': 'http://localhost:8000/api/orders/'},
            'complete': {'href': 'http://localhost:8000/api/orders/7/complete/'},
            'cancel': {'href': 'http://localhost:8000/api/orders/7/cancel/'},
        }
    },
    response_only=True,
)

ORDER_CANCELLED_EXAMPLE = OpenApiExample(
    'Order Cancelled',
    value={
        'id': 4,
        'description': 'MacBook Pro',
        'status': 'CANCELLED',
        '_links': {
            'self': {'href': 'http://localhost:8000/api/orders/4/'},
            'collection': {'href': 'http://localhost:8000/api/orders/'},
        }
    },
    response_only=True,
    status_codes=['200'],
)

TRANSITION_ERROR_EXAMPLE = OpenApiExample(
    'Action Not Allowed',
    value={
        'logref': 'Method not allowed',
        'message': "You can't cancel an order that is in the Cancelled status"
    },
    response_only=True,
    status_codes=['405'],
)

# Employee Examples
EMPLOYEE_REQUEST_EXAMPLE = OpenApiExample(
    'Employee Request',
    value={
        'name': 'Samwise Gamgee',
        'role': 'gardener'
    },
    request_only=True,
)

EMPLOYEE_RESPONSE_EXAMPLE = OpenApiExample(
    'Employee',
    value={
        'id': 1,
        'name': 'Bilbo Baggins',
        'first_name': 'Bilbo',
        'last_name': 'Baggins',
        'role': 'burglar',
        '_links': {
            'self': {'href': 'http://localhost:8000/api/employees/1/'},
            'collection': {'href': 'http://localhost:8000/api/employees/'},
        }
    },
    response_only=True,
)

# Error Examples
NOT_FOUND_EXAMPLE = OpenApiExample(
    'Not Found',
    value={
        'logref': 'Not found',
        'message': 'Could not find order 99'
    },
    response_only=True,
    status_codes=['404'],
)
