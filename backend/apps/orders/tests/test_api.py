"""
Tests for the Order API endpoints.
"""
from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework import status
from apps.orders.models import Order


class OrderAPITestCase(TestCase):
    """Test Order API endpoints."""

    def setUp(self):
        """Set up test data."""
        self.client = APIClient()

        self.in_progress = Order.objects.create(
            description='iPhone',
            status=Order.Status.IN_PROGRESS
        )
        self.completed = Order.objects.create(
            description='MacBook Pro',
            status=Order.Status.COMPLETED
        )

    def href(self, path):
        return f'http://testserver{path}'

    def test_list_orders(self):
        response = self.client.get('/api/orders/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        orders = response.data['_embedded']['orders']
        self.assertEqual(len(orders), 2)
        self.assertEqual(
            [order['description'] for order in orders],
            ['iPhone', 'MacBook Pro']
        )
        self.assertEqual(
            response.data['_links']['self']['href'],
            self.href('/api/orders/')
        )

    def test_get_in_progress_order_advertises_actions(self):
        order_id = self.in_progress.id

        response = self.client.get(f'/api/orders/{order_id}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'IN_PROGRESS')
        self.assertEqual(
            response.data['_links'],
            {
                'self': {'href': self.href(f'/api/orders/{order_id}/')},
                'collection': {'href': self.href('/api/orders/')},
                'complete': {'href': self.href(f'/api/orders/{order_id}/complete/')},
                'cancel': {'href': self.href(f'/api/orders/{order_id}/cancel/')},
            }
        )
        self.assertEqual(
            list(response.data['_links']),
            ['self', 'collection', 'complete', 'cancel']
        )

    def test_get_completed_order_has_no_action_links(self):
        response = self.client.get(f'/api/orders/{self.completed.id}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(list(response.data['_links']), ['self', 'collection'])

    def test_get_unknown_order(self):
        response = self.client.get('/api/orders/999/')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['logref'], 'Not found')
        self.assertEqual(response.data['message'], 'Could not find order 999')

    def test_create_order(self):
        response = self.client.post(
            '/api/orders/',
            {'description': 'Standing desk'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'IN_PROGRESS')
        order = Order.objects.get(id=response.data['id'])
        self.assertEqual(order.description, 'Standing desk')
        self.assertEqual(
            response['Location'],
            self.href(f'/api/orders/{order.id}/')
        )

    def test_create_order_ignores_requested_status(self):
        response = self.client.post(
            '/api/orders/',
            {'description': 'Standing desk', 'status': 'COMPLETED'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'IN_PROGRESS')

    def test_create_order_requires_description(self):
        response = self.client.post('/api/orders/', {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('description', response.data)

    def test_complete_order(self):
        response = self.client.put(f'/api/orders/{self.in_progress.id}/complete/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'COMPLETED')
        self.assertEqual(list(response.data['_links']), ['self', 'collection'])

        self.in_progress.refresh_from_db()
        self.assertEqual(self.in_progress.status, Order.Status.COMPLETED)

    def test_cancel_order(self):
        response = self.client.delete(f'/api/orders/{self.in_progress.id}/cancel/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'CANCELLED')

        self.in_progress.refresh_from_db()
        self.assertEqual(self.in_progress.status, Order.Status.CANCELLED)

    def test_cancel_cancelled_order_not_allowed(self):
        cancelled = Order.objects.create(
            description='Keyboard',
            status=Order.Status.CANCELLED
        )

        response = self.client.delete(f'/api/orders/{cancelled.id}/cancel/')

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(response.data['logref'], 'Method not allowed')
        self.assertEqual(
            response.data['message'],
            "You can't cancel an order that is in the Cancelled status"
        )

        cancelled.refresh_from_db()
        self.assertEqual(cancelled.status, Order.Status.CANCELLED)

    def test_complete_completed_order_not_allowed(self):
        response = self.client.put(f'/api/orders/{self.completed.id}/complete/')

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(
            response.data['message'],
            "You can't complete an order that is in the Completed status"
        )

    def test_transition_unknown_order(self):
        response = self.client.put('/api/orders/999/complete/')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_wrong_verb_on_transition_route(self):
        """Complete is PUT only; DRF rejects other verbs itself."""
        response = self.client.post(f'/api/orders/{self.in_progress.id}/complete/')

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.in_progress.refresh_from_db()
        self.assertEqual(self.in_progress.status, Order.Status.IN_PROGRESS)

    def test_advertised_links_can_be_followed(self):
        response = self.client.get(f'/api/orders/{self.in_progress.id}/')
        cancel_href = response.data['_links']['cancel']['href']

        response = self.client.delete(cancel_href)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertNotIn('cancel', response.data['_links'])
