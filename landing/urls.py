# landing/urls.py
from django.urls import path
from django.views.generic import RedirectView
from . import views

app_name = 'landing'

urlpatterns = [
    path('', views.home, name='home'),
    path('about/', views.about, name='about'),
    path('services/', views.services, name='services'),
    path('services/<slug:slug>/', views.service_detail, name='service_detail'),
    # Older student-services links
    path('student-services/', RedirectView.as_view(pattern_name='landing:services', permanent=True)),
    path('student-services/<slug:slug>/', RedirectView.as_view(pattern_name='landing:service_detail', permanent=True)),

    path('study-abroad/', views.destinations, name='destinations'),
    path('study-abroad/universities/', views.universities, name='universities'),
    path('study-abroad/universities/<slug:slug>/', views.university_detail, name='university_detail'),
    path('study-abroad/<slug:country_slug>/', views.destination_detail, name='destination_detail'),

    path('test-preparation/', views.test_prep, name='test_prep'),
    path('test-preparation/pte/', RedirectView.as_view(
        pattern_name='landing:test_prep_detail', permanent=True,
    ), {'slug': 'pte-academic'}),
    path('test-preparation/<slug:slug>/', views.test_prep_detail, name='test_prep_detail'),
    path('faq/', views.faq, name='faq'),

    path('contact/', views.contact, name='contact'),
    path('book-consultation/', views.book_consultation, name='book_consultation'),
]
