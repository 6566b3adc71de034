from django.urls import path

from . import views

app_name = 'content'

urlpatterns = [
    path('services/', views.ServiceListView.as_view(), name='service-list'),
    path('services/<slug:slug>/', views.ServiceDetailView.as_view(), name='service-detail'),

    path('universities/', views.UniversityListView.as_view(), name='university-list'),
    path('universities/<slug:slug>/', views.UniversityDetailView.as_view(), name='university-detail'),

    path('testimonials/', views.TestimonialListView.as_view(), name='testimonial-list'),
    path('testimonials/<uuid:pk>/', views.TestimonialDetailView.as_view(), name='testimonial-detail'),

    path('faqs/', views.FAQListView.as_view(), name='faq-list'),
    path('faqs/<uuid:pk>/', views.FAQDetailView.as_view(), name='faq-detail'),

    path('test-prep/', views.TestPrepCourseListView.as_view(), name='test-prep-list'),
    path('test-prep/<slug:slug>/', views.TestPrepCourseDetailView.as_view(), name='test-prep-detail'),

    path('destinations/', views.StudyDestinationListView.as_view(), name='destination-list'),
    path('destinations/<slug:country_slug>/', views.StudyDestinationDetailView.as_view(), name='destination-detail'),

    path('process-steps/', views.ProcessStepListView.as_view(), name='process-step-list'),
    path('process-steps/<uuid:pk>/', views.ProcessStepDetailView.as_view(), name='process-step-detail'),

    path('site-settings/', views.SiteSettingsView.as_view(), name='site-settings'),
]
