"""
URL Configuration for the practice portal
"""
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.views.generic import RedirectView
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView
from apps.core.admin_site import custom_admin_site


urlpatterns = [
    path('', RedirectView.as_view(url='/dashboard', permanent=False), name='home'),

    # Gated pages: /login, /dashboard, /admin
    path('', include('apps.core.urls')),
    path('payments/', include('apps.payments.urls')),

    # /admin belongs to the portal's admin area
    path('django-admin/', custom_admin_site.urls),

    # API v1 endpoints
    path('api/v1/', include('practice_portal.api_urls')),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'),
         name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'),
         name='redoc'),
]

# Serve static files in development
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL,
                          document_root=settings.STATIC_ROOT)
