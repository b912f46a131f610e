"""
Employee admin configuration.
"""
from django.contrib import admin
from apps.employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['id', 'first_name', 'last_name', 'role']
    search_fields = ['first_name', 'last_name', 'role']
