"""
Employee URL patterns.
"""
from django.urls import path
from apps.employees import views

app_name = 'employees'

urlpatterns = [
    path('', views.employee_list, name='list-create'),
    path('<int:pk>/', views.employee_detail, name='detail'),
]
