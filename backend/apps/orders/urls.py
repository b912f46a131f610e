"""
Order URL patterns.
Lifecycle, link policy and service are built once here and handed to
the views.
"""
from django.urls import path
from apps.orders import views
from apps.orders.services.link_policy import OrderLinkPolicy
from apps.orders.services.order_service import OrderService
from apps.orders.services.state_machine import OrderLifecycle

app_name = 'orders'

lifecycle = OrderLifecycle()
collaborators = {
    'link_policy': OrderLinkPolicy(lifecycle),
    'order_service': OrderService(lifecycle),
}

urlpatterns = [
    # Order CRUD
    path('', views.OrderListCreateView.as_view(**collaborators), name='list-create'),
    path('<int:pk>/', views.OrderDetailView.as_view(**collaborators), name='detail'),

    # State transitions
    path('<int:pk>/complete/', views.CompleteOrderView.as_view(**collaborators), name='complete'),
    path('<int:pk>/cancel/', views.CancelOrderView.as_view(**collaborators), name='cancel'),
]
