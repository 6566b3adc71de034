from django.conf import settings
from django.db.models import F, Q
from django.http import Http404
from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import ReadOnlyOrSiteAdmin, is_site_admin
from .filters import UniversityFilter
from .models import (
    FAQ, HomepageProcessStep, Service, SiteSettings, StudyDestination, TestPrepCourse,
    Testimonial, University,
)
from .seed import run_seed
from .serializers import (
    FAQSerializer, HomepageProcessStepSerializer, ServiceSerializer, SiteSettingsSerializer,
    StudyDestinationSerializer, TestimonialSerializer, TestPrepCourseSerializer,
    UniversitySerializer,
)


class ContentListView(generics.ListCreateAPIView):
    """Public list; admins may create."""
    permission_classes = [ReadOnlyOrSiteAdmin]
    pagination_class = None


class ContentDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Public detail; admins may update and delete."""
    permission_classes = [ReadOnlyOrSiteAdmin]


# ============================================
# SERVICES
# ============================================

class ServiceListView(ContentListView):
    serializer_class = ServiceSerializer
    queryset = Service.objects.order_by(F('display_order').asc(nulls_last=True), 'name')


class ServiceDetailView(ContentDetailView):
    serializer_class = ServiceSerializer
    queryset = Service.objects.all()
    lookup_field = 'slug'


# ============================================
# UNIVERSITIES
# ============================================

class UniversityListView(ContentListView):
    serializer_class = UniversitySerializer
    queryset = University.objects.order_by(F('ranking').asc(nulls_last=True), 'name')
    filterset_class = UniversityFilter


class UniversityDetailView(ContentDetailView):
    serializer_class = UniversitySerializer
    queryset = University.objects.all()
    lookup_field = 'slug'


# ============================================
# TESTIMONIALS
# ============================================

class TestimonialQuerysetMixin:
    """Visitors only see published testimonials."""

    def get_queryset(self):
        queryset = Testimonial.objects.order_by('-created_at')
        if not is_site_admin(self.request.user):
            queryset = queryset.filter(status='published')
        return queryset


class TestimonialListView(TestimonialQuerysetMixin, ContentListView):
    serializer_class = TestimonialSerializer


class TestimonialDetailView(TestimonialQuerysetMixin, ContentDetailView):
    serializer_class = TestimonialSerializer


# ============================================
# FAQS
# ============================================

class FAQListView(ContentListView):
    serializer_class = FAQSerializer

    def get_queryset(self):
        queryset = FAQ.objects.order_by(F('display_order').asc(nulls_last=True), 'question')

        category = self.request.query_params.get('category')
        if category and category != 'all':
            queryset = queryset.filter(category=category)

        country = self.request.query_params.get('country')
        if country and country != 'all':
            queryset = queryset.filter(Q(country=country) | Q(country='general'))

        return queryset


class FAQDetailView(ContentDetailView):
    serializer_class = FAQSerializer
    queryset = FAQ.objects.all()


# ============================================
# TEST PREPARATION
# ============================================

class TestPrepCourseListView(ContentListView):
    serializer_class = TestPrepCourseSerializer
    queryset = TestPrepCourse.objects.order_by(F('display_order').asc(nulls_last=True), 'test_name')


class TestPrepCourseDetailView(ContentDetailView):
    serializer_class = TestPrepCourseSerializer
    queryset = TestPrepCourse.objects.all()
    lookup_field = 'slug'


# ============================================
# STUDY DESTINATIONS
# ============================================

class StudyDestinationQuerysetMixin:
    """Inactive destinations are hidden from visitors."""

    def get_queryset(self):
        queryset = StudyDestination.objects.order_by(
            F('display_order').asc(nulls_last=True), 'display_name'
        )
        if not is_site_admin(self.request.user):
            queryset = queryset.filter(is_active=True)
        return queryset


class StudyDestinationListView(StudyDestinationQuerysetMixin, ContentListView):
    serializer_class = StudyDestinationSerializer


class StudyDestinationDetailView(StudyDestinationQuerysetMixin, ContentDetailView):
    serializer_class = StudyDestinationSerializer
    lookup_field = 'country_slug'


# ============================================
# HOMEPAGE / SITE SETTINGS
# ============================================

class ProcessStepListView(ContentListView):
    serializer_class = HomepageProcessStepSerializer
    queryset = HomepageProcessStep.objects.order_by('step_number')


class ProcessStepDetailView(ContentDetailView):
    serializer_class = HomepageProcessStepSerializer
    queryset = HomepageProcessStep.objects.all()


class SiteSettingsView(generics.RetrieveUpdateAPIView):
    serializer_class = SiteSettingsSerializer
    permission_classes = [ReadOnlyOrSiteAdmin]

    def get_object(self):
        settings_row = SiteSettings.objects.filter(pk=SiteSettings.SINGLETON_ID).first()
        if settings_row is None:
            raise Http404('Site settings not found. Please ensure they are seeded.')
        return settings_row


# ============================================
# DEVELOPMENT SEED
# ============================================

class SeedView(APIView):
    """Populate demo content. Only available with DEBUG on."""

    permission_classes = [permissions.AllowAny]

    def get(self, request):
        if not settings.DEBUG:
            return Response(
                {'success': False, 'message': 'Seeding is only allowed in development mode.'},
                status=status.HTTP_403_FORBIDDEN
            )

        result = run_seed()
        code = status.HTTP_200_OK if result['success'] else status.HTTP_500_INTERNAL_SERVER_ERROR
        return Response(result, status=code)
