"""
Employee model.
"""
from django.db import models


def split_name(value):
    """Split on the first space: 'Bilbo Baggins' -> ('Bilbo', 'Baggins')."""
    first_name, _, last_name = value.strip().partition(' ')
    return first_name, last_name.strip()


class Employee(models.Model):
    """
    Payroll employee.
    `name` is kept for clients that still send a single full name.
    """
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100, blank=True)
    role = models.CharField(max_length=100)

    class Meta:
        ordering = ['id']
        verbose_name = 'Employee'
        verbose_name_plural = 'Employees'

    def __str__(self):
        return f"{self.name} ({self.role})"

    @property
    def name(self):
        return f"{self.first_name} {self.last_name}".strip()

    @name.setter
    def name(self, value):
        self.first_name, self.last_name = split_name(value)
