"""
Order admin configuration.
"""
from django.contrib import admin
from apps.orders.models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['id', 'description', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['id', 'description']
    # Status only changes through the API lifecycle endpoints
    readonly_fields = ['status', 'created_at', 'updated_at']
