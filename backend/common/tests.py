"""
Tests for shared API plumbing: root links, error mapping, sample data.
"""
from io import StringIO
from django.core.management import call_command
from django.test import TestCase, SimpleTestCase
from rest_framework.test import APIClient, APIRequestFactory
from rest_framework import status
from apps.employees.models import Employee
from apps.orders.models import Order
from apps.orders.services.state_machine import Action, TransitionError
from common.exceptions import ResourceNotFound, api_exception_handler
from common.hypermedia import LinkDescriptor, hal_collection, render_links


class RootAPITestCase(TestCase):
    """Test the API entry point."""

    def test_root_links(self):
        response = APIClient().get('/api/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data['_links'],
            {
                'self': {'href': 'http://testserver/api/'},
                'employees': {'href': 'http://testserver/api/employees/'},
                'orders': {'href': 'http://testserver/api/orders/'},
            }
        )


class HypermediaTestCase(SimpleTestCase):
    """Test HAL rendering helpers."""

    routes = {
        'self': 'orders:detail',
        'collection': 'orders:list-create',
        'cancel': 'orders:cancel',
    }

    def test_relative_links_without_request(self):
        links = render_links(
            [LinkDescriptor('self', 3), LinkDescriptor('collection', 'orders')],
            self.routes
        )
        self.assertEqual(
            links,
            {
                'self': {'href': '/api/orders/3/'},
                'collection': {'href': '/api/orders/'},
            }
        )

    def test_absolute_links_with_request(self):
        request = APIRequestFactory().get('/api/orders/3/')
        links = render_links([LinkDescriptor('cancel', 3)], self.routes, request)
        self.assertEqual(links['cancel']['href'], 'http://testserver/api/orders/3/cancel/')

    def test_hal_collection(self):
        self.assertEqual(
            hal_collection('orders', [], '/api/orders/'),
            {'_embedded': {'orders': []}, '_links': {'self': {'href': '/api/orders/'}}}
        )


class ExceptionHandlerTestCase(SimpleTestCase):
    """Test domain error mapping."""

    def test_transition_error_maps_to_405(self):
        error = TransitionError(4, Action.COMPLETE, Order.Status.CANCELLED)

        response = api_exception_handler(error, {})

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(
            response.data,
            {
                'logref': 'Method not allowed',
                'message': "You can't complete an order that is in the Cancelled status",
            }
        )

    def test_not_found_maps_to_404(self):
        response = api_exception_handler(ResourceNotFound(8), {})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Could not find resource 8')

    def test_other_errors_are_left_unhandled(self):
        self.assertIsNone(api_exception_handler(RuntimeError('boom'), {}))


class LoadSampleDataTestCase(TestCase):
    """Test the load_sample_data management command."""

    def test_loads_employees_and_orders(self):
        call_command('load_sample_data', stdout=StringIO())

        self.assertEqual(
            sorted(employee.name for employee in Employee.objects.all()),
            ['Bilbo Baggins', 'Frodo Baggins']
        )
        self.assertEqual(
            dict(Order.objects.values_list('description', 'status')),
            {'MacBook Pro': 'COMPLETED', 'iPhone': 'IN_PROGRESS'}
        )

    def test_flush_replaces_existing_rows(self):
        Employee.objects.create(first_name='Gollum', last_name='', role='guide')

        call_command('load_sample_data', '--flush', stdout=StringIO())

        self.assertEqual(Employee.objects.count(), 2)
        self.assertEqual(Order.objects.count(), 2)
