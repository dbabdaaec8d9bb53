"""
URL configuration for the garment storefront project.

Every app mounts its routes under ``/api/``; auth lives under ``/api/auth/`` and the customer's
profile and address book under ``/api/user/``.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('accounts.urls')),
    path('api/user/', include('accounts.user_urls')),
    path('api/', include('products.urls')),
    path('api/', include('variants.urls')),
    path('api/', include('invoices.urls')),
    path('api/', include('marketing.urls')),
    path('api/', include('cart.urls')),
    path('api/', include('orders.urls')),
    # API docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
