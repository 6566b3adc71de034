# config/urls.py
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from content.views import SeedView
from leads.views import SendConsultationEmailView


@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    return Response({
        'status': 'healthy',
        'message': 'Dream Edge API is running'
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def api_root(request):
    return Response({
        'message': 'Welcome to the Dream Edge API',
        'version': '1.0.0',
        'endpoints': {
            'auth': '/api/auth/',
            'content': '/api/content/',
            'seed': '/api/seed',
            'send_consultation_email': '/api/send-consultation-email',
        }
    })


urlpatterns = [
    # Django's own admin; /admin/ is the CMS
    path('django-admin/', admin.site.urls),

    # Admin CMS (protected area)
    path('admin/', include('dashboard.urls')),

    # API Routes
    path('api/', api_root, name='api-root'),
    path('api/auth/', include('accounts.urls')),
    path('api/content/', include('content.urls')),
    path('api/seed', SeedView.as_view(), name='seed'),
    path('api/send-consultation-email', SendConsultationEmailView.as_view(), name='send-consultation-email'),

    # Health check
    path('health/', health_check, name='health-check'),

    # Landing pages - This should be last as catch-all
    path('', include('landing.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
