"""
Tests for Employees app.
Tests CRUD endpoints and the legacy `name` field.
"""
from django.test import TestCase, SimpleTestCase
from rest_framework.test import APIClient
from rest_framework import status
from apps.employees.models import Employee, split_name


class EmployeeNameTestCase(SimpleTestCase):
    """Test the full-name property."""

    def test_name_joins_first_and_last(self):
        employee = Employee(first_name='Bilbo', last_name='Baggins', role='burglar')
        self.assertEqual(employee.name, 'Bilbo Baggins')

    def test_setting_name_splits_on_first_space(self):
        employee = Employee(role='wizard')
        employee.name = 'Gandalf the Grey'
        self.assertEqual(employee.first_name, 'Gandalf')
        self.assertEqual(employee.last_name, 'the Grey')

    def test_single_word_name(self):
        self.assertEqual(split_name('Gollum'), ('Gollum', ''))


class EmployeeAPITestCase(TestCase):
    """Test Employee API endpoints."""

    def setUp(self):
        """Set up test data."""
        self.client = APIClient()

        self.bilbo = Employee.objects.create(
            first_name='Bilbo',
            last_name='Baggins',
            role='burglar'
        )
        self.frodo = Employee.objects.create(
            first_name='Frodo',
            last_name='Baggins',
            role='thief'
        )

    def test_list_employees(self):
        response = self.client.get('/api/employees/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        employees = response.data['_embedded']['employees']
        self.assertEqual(
            [employee['name'] for employee in employees],
            ['Bilbo Baggins', 'Frodo Baggins']
        )
        self.assertEqual(
            response.data['_links']['self']['href'],
            'http://testserver/api/employees/'
        )

    def test_get_employee(self):
        response = self.client.get(f'/api/employees/{self.bilbo.id}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], 'Bilbo Baggins')
        self.assertEqual(response.data['first_name'], 'Bilbo')
        self.assertEqual(response.data['role'], 'burglar')
        self.assertEqual(
            response.data['_links'],
            {
                'self': {'href': f'http://testserver/api/employees/{self.bilbo.id}/'},
                'collection': {'href': 'http://testserver/api/employees/'},
            }
        )

    def test_get_unknown_employee(self):
        response = self.client.get('/api/employees/999/')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Could not find employee 999')

    def test_create_employee_with_name(self):
        response = self.client.post(
            '/api/employees/',
            {'name': 'Samwise Gamgee', 'role': 'gardener'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        employee = Employee.objects.get(id=response.data['id'])
        self.assertEqual(employee.first_name, 'Samwise')
        self.assertEqual(employee.last_name, 'Gamgee')
        self.assertEqual(
            response['Location'],
            f'http://testserver/api/employees/{employee.id}/'
        )

    def test_create_employee_with_split_names(self):
        response = self.client.post(
            '/api/employees/',
            {'first_name': 'Peregrin', 'last_name': 'Took', 'role': 'guard'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['name'], 'Peregrin Took')

    def test_create_employee_without_name(self):
        response = self.client.post(
            '/api/employees/',
            {'role': 'gardener'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('name', response.data)

    def test_replace_existing_employee(self):
        response = self.client.put(
            f'/api/employees/{self.frodo.id}/',
            {'name': 'Frodo Baggins', 'role': 'ring bearer'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.frodo.refresh_from_db()
        self.assertEqual(self.frodo.role, 'ring bearer')
        self.assertEqual(Employee.objects.count(), 2)

    def test_replace_missing_employee_creates_it(self):
        response = self.client.put(
            '/api/employees/42/',
            {'name': 'Meriadoc Brandybuck', 'role': 'squire'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['id'], 42)
        self.assertTrue(Employee.objects.filter(id=42, first_name='Meriadoc').exists())

    def test_put_back_single_name_employee(self):
        created = self.client.post(
            '/api/employees/',
            {'name': 'Gollum', 'role': 'guide'},
            format='json'
        ).data
        body = {key: value for key, value in created.items() if key != '_links'}
        body['role'] = 'ring finder'

        response = self.client.put(f'/api/employees/{created["id"]}/', body, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], 'Gollum')
        self.assertEqual(response.data['last_name'], '')
        self.assertEqual(response.data['role'], 'ring finder')

    def test_put_back_unchanged_representation(self):
        employee = Employee.objects.create(first_name='Mary Ann', last_name='Took', role='cook')
        body = self.client.get(f'/api/employees/{employee.id}/').data
        body.pop('_links')

        response = self.client.put(f'/api/employees/{employee.id}/', body, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        employee.refresh_from_db()
        self.assertEqual(employee.first_name, 'Mary Ann')
        self.assertEqual(employee.last_name, 'Took')

    def test_name_conflicting_with_split_names(self):
        response = self.client.put(
            f'/api/employees/{self.frodo.id}/',
            {
                'name': 'Samwise Gamgee',
                'first_name': 'Frodo',
                'last_name': 'Baggins',
                'role': 'gardener'
            },
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('name', response.data)
        self.frodo.refresh_from_db()
        self.assertEqual(self.frodo.role, 'thief')

    def test_create_after_replace_with_explicit_id(self):
        self.client.put(
            '/api/employees/500/',
            {'name': 'Meriadoc Brandybuck', 'role': 'squire'},
            format='json'
        )

        response = self.client.post(
            '/api/employees/',
            {'name': 'Fredegar Bolger', 'role': 'lookout'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertNotEqual(response.data['id'], 500)
        self.assertEqual(Employee.objects.count(), 4)

    def test_delete_employee(self):
        response = self.client.delete(f'/api/employees/{self.bilbo.id}/')

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Employee.objects.filter(id=self.bilbo.id).exists())

    def test_delete_unknown_employee(self):
        response = self.client.delete('/api/employees/999/')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
