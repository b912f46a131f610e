"""
Employee service - CRUD over the employee store.
"""
import logging
from typing import Tuple
from django.core.management.color import no_style
from django.db import connection
from apps.employees.models import Employee
from common.exceptions import ResourceNotFound

logger = logging.getLogger('employees')


class EmployeeNotFound(ResourceNotFound):
    resource = 'employee'


class EmployeeService:
    """Employee operations used by the API views."""

    def list_employees(self):
        return Employee.objects.all()

    def get_employee(self, employee_id) -> Employee:
        try:
            return Employee.objects.get(pk=employee_id)
        except Employee.DoesNotExist:
            raise EmployeeNotFound(employee_id)

    def create_employee(self, first_name: str, last_name: str, role: str) -> Employee:
        employee = Employee.objects.create(
            first_name=first_name,
            last_name=last_name,
            role=role
        )
        logger.info(f"Created employee {employee.id}")
        return employee

    def replace_employee(
        self,
        employee_id,
        first_name: str,
        last_name: str,
        role: str
    ) -> Tuple[Employee, bool]:
        """
        Replace an employee's fields, creating it under this id if missing.

        Returns:
            (employee, created)
        """
        employee, created = Employee.objects.update_or_create(
            id=employee_id,
            defaults={
                'first_name': first_name,
                'last_name': last_name,
                'role': role,
            }
        )
        if created:
            self._reset_id_sequence()
        logger.info(f"{'Created' if created else 'Replaced'} employee {employee.id}")
        return employee, created

    def _reset_id_sequence(self) -> None:
        """
        Move the id sequence past explicitly inserted ids so later POSTs
        do not collide. No-op on backends without sequences (sqlite).
        """
        statements = connection.ops.sequence_reset_sql(no_style(), [Employee])
        with connection.cursor() as cursor:
            for sql in statements:
                cursor.execute(sql)

    def delete_employee(self, employee_id) -> None:
        deleted, _ = Employee.objects.filter(pk=employee_id).delete()
        if not deleted:
            raise EmployeeNotFound(employee_id)
        logger.info(f"Deleted employee {employee_id}")
