import pytest
from datetime import timedelta
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from rest_framework.test import APIClient


# 1x1 transparent GIF; small enough for any upload limit
TINY_GIF = (
    b'\x47\x49\x46\x38\x39\x61\x01\x00\x01\x00\x00\x00\x00\x21\xf9\x04'
    b'\x01\x0a\x00\x01\x00\x2c\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02'
    b'\x02\x4c\x01\x00\x3b'
)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(db):
    from accounts.models import User, AdminUser

    user = User.objects.create_user(
        email='admin@dreamedge.test',
        password='adminpass123',
        first_name='Site',
        last_name='Admin',
    )
    AdminUser.objects.create(user=user, email=user.email, role='admin')
    return user


@pytest.fixture
def regular_user(db):
    """Signed-up account without an admin role row."""
    from accounts.models import User

    return User.objects.create_user(
        email='visitor@test.com',
        password='visitorpass123',
        first_name='Regular',
        last_name='Visitor',
    )


@pytest.fixture
def admin_client(client, admin_user):
    """Django test client with an admin session."""
    client.force_login(admin_user)
    return client


@pytest.fixture
def admin_api_client(api_client, admin_user):
    api_client.force_authenticate(user=admin_user)
    return api_client


@pytest.fixture
def site_settings(db):
    from content.models import SiteSettings

    return SiteSettings.objects.create(
        site_name='Dream Edge',
        primary_phone='+977-1-4412345',
        primary_email='info@dreamedge.test',
        primary_address_line1='Putalisadak, Kathmandu',
        office_hours='Sun - Fri, 10:00 AM - 6:00 PM',
        footer_about_text='Overseas education consultancy.',
        copyright_year_start=2015,
        hero_title='Study Abroad with Dream Edge',
        hero_subtitle='Expert guidance from application to arrival.',
        about_us_story_title='Our Story',
        about_us_story_content='Founded to help students study abroad.',
    )


@pytest.fixture
def service(db):
    from content.models import Service

    return Service.objects.create(
        name='Visa Consultancy',
        slug='visa-consultancy',
        short_description='Visa help',
        full_description='Step by step help with your student visa.',
        benefits=['Document checklist', 'Mock interviews'],
        display_order=1,
    )


@pytest.fixture
def universities(db):
    from content.models import University

    rows = [
        ('University of Oxford', 'university-of-oxford', 'Oxford, United Kingdom', 1),
        ('Imperial College London', 'imperial-college-london', 'London, United Kingdom', 8),
        ('University of Melbourne', 'university-of-melbourne', 'Melbourne, Australia', 14),
        ('University of Toronto', 'university-of-toronto', 'Toronto, Canada', 21),
        ('Unranked College', 'unranked-college', 'Toronto, Canada', None),
    ]
    return [
        University.objects.create(name=name, slug=slug, location=location, ranking=ranking)
        for name, slug, location, ranking in rows
    ]


@pytest.fixture
def testimonials(db):
    from content.models import Testimonial

    published = Testimonial.objects.create(
        name='Anisha Shrestha', quote='Dream Edge made my UK application easy.',
        university='University of Leeds', program='MSc Data Science', status='published',
    )
    draft = Testimonial.objects.create(
        name='Draft Student', quote='Not ready to publish yet.', status='draft',
    )
    return published, draft


@pytest.fixture
def faqs(db):
    from content.models import FAQ

    return [
        FAQ.objects.create(question='Do I need IELTS?', answer='Usually yes.', category='application', country='general', display_order=2),
        FAQ.objects.create(question='How long is a UK visa?', answer='Course length plus a few months.', category='visa', country='uk', display_order=1),
        FAQ.objects.create(question='Can I work in Canada?', answer='Up to 20 hours a week.', category='visa', country='canada', display_order=3),
    ]


@pytest.fixture
def destination(db):
    from content.models import StudyDestination

    return StudyDestination.objects.create(
        country_slug='uk',
        display_name='United Kingdom',
        meta_title='Study in UK',
        intro_text='World-class universities.',
        quick_facts={'Capital': 'London'},
        why_study_here_content='<ul><li>Short degrees</li></ul>',
        is_active=True,
        display_order=1,
    )


@pytest.fixture
def test_prep_course(db):
    from content.models import TestPrepCourse

    return TestPrepCourse.objects.create(
        test_name='IELTS Academic',
        slug='ielts-academic',
        description='Band 7+ preparation.',
        duration='6 weeks',
        price='NPR 15,000',
        features=['Mock tests'],
        schedule_options=['Morning'],
    )


@pytest.fixture
def form_options(db):
    from content.models import ConsultationTimeSlot, EducationLevelOption, StudyInterestOption

    ConsultationTimeSlot.objects.create(time_range_display='10:00 AM - 11:00 AM', display_order=1)
    ConsultationTimeSlot.objects.create(time_range_display='02:00 PM - 03:00 PM', display_order=2)
    ConsultationTimeSlot.objects.create(time_range_display='07:00 PM - 08:00 PM', is_active=False, display_order=3)
    EducationLevelOption.objects.create(level_name="Bachelor's Degree", display_order=1)
    EducationLevelOption.objects.create(level_name='Other', is_active=False, display_order=2)
    StudyInterestOption.objects.create(interest_name='Computer Science & IT', display_order=1)


@pytest.fixture
def booking_data():
    """A valid public booking form submission."""
    return {
        'name': 'Sita Sharma',
        'email': 'sita@example.com',
        'phone': '+977 9812345678',
        'preferred_date': (timezone.localdate() + timedelta(days=3)).isoformat(),
        'preferred_time': '10:00 AM - 11:00 AM',
        'alt_date': '',
        'alt_time': '',
        'education_level': "Bachelor's Degree",
        'study_interests': 'Computer Science & IT',
        'preferred_location': 'online',
        'message': 'Interested in a master in the UK.',
    }


@pytest.fixture
def tiny_image():
    return SimpleUploadedFile('photo.gif', TINY_GIF, content_type='image/gif')
