"""
Root URL configuration.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from common.views import api_root

urlpatterns = [
    path('admin/', admin.site.urls),

    # Hypermedia entry point
    path('api/', api_root, name='root'),
    path('api/employees/', include('apps.employees.urls')),
    path('api/orders/', include('apps.orders.urls')),

    # OpenAPI schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
