"""
Management command to preload a few employees and orders.

Usage:
    python manage.py load_sample_data           # Add sample rows
    python manage.py load_sample_data --flush   # Wipe employees and orders first
"""
from django.core.management.base import BaseCommand
from django.db import transaction
from apps.employees.models import Employee
from apps.orders.models import Order

EMPLOYEES = [
    ('Bilbo', 'Baggins', 'burglar'),
    ('Frodo', 'Baggins', 'thief'),
]

ORDERS = [
    ('MacBook Pro', Order.Status.COMPLETED),
    ('iPhone', Order.Status.IN_PROGRESS),
]


class Command(BaseCommand):
    help = 'Preload sample employees and orders'

    def add_arguments(self, parser):
        parser.add_argument(
            '--flush',
            action='store_true',
            help='Delete existing employees and orders before loading',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['flush']:
            employees_deleted, _ = Employee.objects.all().delete()
            orders_deleted, _ = Order.objects.all().delete()
            self.stdout.write(
                self.style.WARNING(
                    f'Deleted {employees_deleted} employees and {orders_deleted} orders'
                )
            )

        for first_name, last_name, role in EMPLOYEES:
            employee = Employee.objects.create(
                first_name=first_name,
                last_name=last_name,
                role=role
            )
            self.stdout.write(f'Preloaded {employee}')

        # Seeded directly: sample data may start in any status
        for description, status in ORDERS:
            order = Order.objects.create(description=description, status=status)
            self.stdout.write(f'Preloaded {order}')

        self.stdout.write(
            self.style.SUCCESS(
                f'Loaded {len(EMPLOYEES)} employees and {len(ORDERS)} orders'
            )
        )
