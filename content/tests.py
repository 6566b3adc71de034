import uuid
from datetime import timedelta
from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from django.conf import settings
from django.core import mail
from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management import call_command
from django.test import override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from content import api
from content.models import (
    FAQ, ConsultationTimeSlot, Service, SiteSettings, StudyDestination, University,
)
from content.seed import run_seed, seed_services
from content.serializers import StudyDestinationSerializer
from content.uploads import ImageTooLarge, ImageUploadError, ImageUploader
from leads.models import Consultation, ContactInquiry


# ============================================
# RESULT ENVELOPE
# ============================================

@pytest.mark.django_db
class TestContentTable:
    """CRUD helpers never raise; they return success/error dicts"""

    def test_get_by_id_returns_row(self, service):
        result = api.get_service_by_id(service.pk)

        assert result['success'] is True
        assert result['data'] == service

    def test_missing_row_is_flagged_not_found(self):
        result = api.get_service_by_id(uuid.uuid4())

        assert result == {'success': False, 'error': 'Service not found', 'not_found': True}

    def test_malformed_id_is_not_found(self):
        result = api.get_university_by_id('not-a-uuid')

        assert result['success'] is False
        assert result['not_found'] is True

    def test_missing_slug_is_not_found(self):
        result = api.get_service_by_slug('no-such-service')

        assert result['not_found'] is True

    def test_create_returns_saved_row(self):
        result = api.create_service({
            'name': 'Career Counselling',
            'slug': 'career-counselling',
            'benefits': ['One-to-one sessions'],
        })

        assert result['success'] is True
        assert Service.objects.filter(slug='career-counselling').exists()

    def test_create_drops_unknown_and_read_only_keys(self):
        result = api.create_faq({
            'id': 'bogus', 'question': 'Is housing included?', 'answer': 'No.', 'colour': 'blue',
        })

        assert result['success'] is True
        assert result['data'].question == 'Is housing included?'

    def test_duplicate_slug_fails_without_raising(self, service):
        result = api.create_service({'name': 'Visa Again', 'slug': service.slug})

        assert result['success'] is False
        assert 'slug' in result['error']
        assert 'not_found' not in result

    def test_update_without_id_fails(self):
        result = api.update_service(None, {'name': 'Nameless'})

        assert result == {'success': False, 'error': 'Missing service ID for update'}

    def test_update_changes_fields(self, service):
        result = api.update_service(service.pk, {'name': 'Student Visa Help'})

        service.refresh_from_db()
        assert result['success'] is True
        assert service.name == 'Student Visa Help'

    def test_update_missing_row_is_not_found(self):
        result = api.update_faq(uuid.uuid4(), {'answer': 'Yes'})

        assert result['not_found'] is True

    def test_empty_string_clears_nullable_fields(self, universities):
        oxford = universities[0]
        oxford.logo_url = 'https://example.com/logo.png'
        oxford.save()

        result = api.update_university(oxford.pk, {'logo_url': '', 'ranking': ''})

        oxford.refresh_from_db()
        assert result['success'] is True
        assert oxford.logo_url is None
        assert oxford.ranking is None

    def test_delete_removes_row(self, service):
        result = api.delete_service(service.pk)

        assert result == {'success': True, 'data': None}
        assert not Service.objects.filter(pk=service.pk).exists()

    def test_delete_missing_row_is_not_found(self):
        assert api.delete_testimonial(uuid.uuid4())['not_found'] is True

    def test_database_error_becomes_failure(self):
        from django.db import DatabaseError

        with patch.object(api.services, 'queryset', side_effect=DatabaseError('connection lost')):
            result = api.get_service_by_id(uuid.uuid4())

        assert result == {'success': False, 'error': 'connection lost'}


# ============================================
# ORDERING AND FILTERS
# ============================================

@pytest.mark.django_db
class TestUniversityQueries:

    def test_ordered_by_ranking_with_unranked_last(self, universities):
        names = [u.name for u in api.get_universities()['data']]

        assert names[0] == 'University of Oxford'
        assert names[-1] == 'Unranked College'

    def test_limit(self, universities):
        assert len(api.get_universities(limit=2)['data']) == 2

    def test_search_matches_name(self, universities):
        result = api.get_universities(filters={'search': 'oxford'})

        assert [u.slug for u in result['data']] == ['university-of-oxford']

    def test_location_is_exact(self, universities):
        result = api.get_universities(filters={'location': 'Toronto, Canada'})

        assert {u.slug for u in result['data']} == {'university-of-toronto', 'unranked-college'}

    def test_country_matches_part_of_location(self, universities):
        result = api.get_universities(filters={'country': 'united kingdom'})

        assert {u.slug for u in result['data']} == {'university-of-oxford', 'imperial-college-london'}

    def test_top_10_group(self, universities):
        result = api.get_universities(filters={'ranking_group': 'Top 10'})

        assert [u.ranking for u in result['data']] == [1, 8]

    def test_top_20_group_excludes_top_10(self, universities):
        result = api.get_universities(filters={'ranking_group': 'Top 20'})

        assert [u.ranking for u in result['data']] == [14]

    def test_top_30_group(self, universities):
        result = api.get_universities(filters={'ranking_group': 'Top 30'})

        assert [u.ranking for u in result['data']] == [21]

    def test_unknown_group_is_ignored(self, universities):
        result = api.get_universities(filters={'ranking_group': 'Top 5000'})

        assert len(result['data']) == len(universities)


@pytest.mark.django_db
class TestTestimonialQueries:

    def test_public_list_is_published_only(self, testimonials):
        published, _draft = testimonials

        assert api.get_testimonials()['data'] == [published]

    def test_admin_list_has_every_status(self, testimonials):
        assert len(api.get_all_testimonials()['data']) == 2

    def test_create_defaults_to_draft(self):
        result = api.create_testimonial({'name': 'New Student', 'quote': 'Great support.'})

        assert result['data'].status == 'draft'

    def test_create_keeps_given_status(self):
        result = api.create_testimonial({'name': 'Ram', 'quote': 'Thanks!', 'status': 'published'})

        assert result['data'].status == 'published'


@pytest.mark.django_db
class TestFAQQueries:

    def test_ordered_by_display_order(self, faqs):
        questions = [f.question for f in api.get_faqs()['data']]

        assert questions[0] == 'How long is a UK visa?'

    def test_country_includes_general(self, faqs):
        result = api.get_faqs(country='uk')

        assert {f.country for f in result['data']} == {'uk', 'general'}

    def test_category_filter(self, faqs):
        result = api.get_faqs(category='visa')

        assert all(f.category == 'visa' for f in result['data'])
        assert len(result['data']) == 2

    def test_all_disables_filter(self, faqs):
        assert len(api.get_faqs(category='all', country='all')['data']) == 3

    def test_limit(self, faqs):
        assert len(api.get_faqs(limit=1)['data']) == 1


@pytest.mark.django_db
class TestStudyDestinationQueries:

    def test_inactive_hidden_from_public_list(self, destination):
        StudyDestination.objects.create(country_slug='japan', display_name='Japan', is_active=False)

        public = api.get_study_destinations()['data']
        admin = api.get_study_destinations(admin_view=True)['data']

        assert [d.country_slug for d in public] == ['uk']
        assert len(admin) == 2

    def test_by_slug_requires_active(self, destination):
        destination.is_active = False
        destination.save()

        assert api.get_study_destination_by_slug('uk')['not_found'] is True

    def test_content_sections_skip_empty(self, destination):
        titles = [title for _anchor, title, _html in destination.content_sections]

        assert titles == ['Why Study Here']


@pytest.mark.django_db
class TestFormOptions:

    def test_public_options_are_active_only(self, form_options):
        slots = api.get_consultation_time_slots()['data']

        assert [s.label for s in slots] == ['10:00 AM - 11:00 AM', '02:00 PM - 03:00 PM']

    def test_admin_sees_inactive_options(self, form_options):
        assert len(api.get_consultation_time_slots(admin=True)['data']) == 3
        assert len(api.get_education_level_options(admin=True)['data']) == 2

    def test_crud_on_lookup_table(self):
        created = api.create_study_interest_option({'interest_name': 'Nursing', 'display_order': ''})
        option = created['data']

        api.update_study_interest_option(option.pk, {'is_active': False})
        option.refresh_from_db()

        assert option.display_order is None
        assert option.is_active is False
        assert api.delete_study_interest_option(option.pk)['success'] is True


# ============================================
# SITE SETTINGS
# ============================================

@pytest.mark.django_db
class TestSiteSettings:

    def test_missing_row_is_none(self):
        assert api.get_site_settings() == {'success': True, 'data': None}

    def test_update_requires_seeded_row(self):
        result = api.update_site_settings({'site_name': 'Dream Edge'})

        assert result == {
            'success': False,
            'error': 'Site settings not found. Please ensure they are seeded.',
        }

    def test_update_merges_fields(self, site_settings):
        result = api.update_site_settings({'hero_title': 'Fly High', 'id': 99})

        site_settings.refresh_from_db()
        assert result['success'] is True
        assert site_settings.hero_title == 'Fly High'
        assert site_settings.site_name == 'Dream Edge'
        assert SiteSettings.objects.count() == 1


# ============================================
# LEADS
# ============================================

@pytest.mark.django_db
class TestContactInquiries:

    def test_submit_maps_subject_to_interest(self):
        result = api.submit_contact_form({
            'name': 'Hari', 'email': 'hari@example.com', 'phone': '',
            'subject': 'Study in Canada', 'message': 'Please call me back.',
        })

        inquiry = result['data']
        assert result['success'] is True
        assert inquiry.interest == 'Study in Canada'
        assert inquiry.phone is None
        assert inquiry.status == 'new'

    def test_update_only_changes_status_and_notes(self):
        inquiry = ContactInquiry.objects.create(name='Hari', email='hari@example.com', message='Hello there!')

        api.update_contact_inquiry(inquiry.pk, {'status': 'replied', 'admin_notes': 'Called', 'name': 'Changed'})

        inquiry.refresh_from_db()
        assert inquiry.status == 'replied'
        assert inquiry.admin_notes == 'Called'
        assert inquiry.name == 'Hari'

    def test_list_filters_by_status(self):
        ContactInquiry.objects.create(name='A', email='a@example.com', message='m', status='new')
        ContactInquiry.objects.create(name='B', email='b@example.com', message='m', status='closed')

        assert len(api.get_contact_inquiries()['data']) == 2
        assert [i.name for i in api.get_contact_inquiries(status='new')['data']] == ['A']


@pytest.mark.django_db
class TestBookConsultation:

    def _data(self, booking_data):
        data = dict(booking_data)
        data['preferred_date'] = timezone.localdate() + timedelta(days=3)
        data['alt_date'] = None
        return data

    def test_creates_scheduled_booking_and_sends_emails(self, booking_data):
        result = api.book_consultation(self._data(booking_data))

        booking = result['data']
        assert result['success'] is True
        assert result['email_sent'] is True
        assert booking.status == 'scheduled'
        assert booking.study_interest == 'Computer Science & IT'
        assert booking.alt_time is None
        assert len(mail.outbox) == 2

    def test_email_failure_does_not_fail_booking(self, booking_data):
        with patch('notifications.services.EmailService.send_consultation_emails',
                   side_effect=RuntimeError('SMTP down')):
            result = api.book_consultation(self._data(booking_data))

        assert result['success'] is True
        assert result['email_sent'] is False
        assert Consultation.objects.count() == 1

    def test_invalid_booking_sends_nothing(self, booking_data):
        data = self._data(booking_data)
        data['preferred_time'] = ''

        result = api.book_consultation(data)

        assert result['success'] is False
        assert len(mail.outbox) == 0

    def test_update_only_changes_status_and_notes(self, booking_data):
        booking = api.book_consultation(self._data(booking_data))['data']

        api.update_consultation(booking.pk, {'status': 'completed', 'notes': 'Done', 'email': 'x@y.com'})

        booking.refresh_from_db()
        assert booking.status == 'completed'
        assert booking.notes == 'Done'
        assert booking.email == 'sita@example.com'


# ============================================
# SEEDING
# ============================================

@pytest.mark.django_db
class TestSeed:

    def test_seed_populates_every_table(self):
        result = run_seed()

        assert result == {'success': True, 'message': 'Database seeded successfully.'}
        assert Service.objects.count() == 5
        assert University.objects.count() == 5
        assert len(api.get_testimonials()['data']) == 5
        assert FAQ.objects.count() == 11
        assert SiteSettings.objects.get().site_name == 'Dream Edge'
        assert StudyDestination.objects.filter(is_active=True).count() == 3
        assert ConsultationTimeSlot.objects.count() == 5

    def test_seed_twice_keeps_one_copy(self):
        run_seed()
        run_seed()

        assert Service.objects.count() == 5
        assert FAQ.objects.count() == 11
        assert SiteSettings.objects.count() == 1

    def test_seeded_destination_has_navigation(self):
        run_seed()

        uk = StudyDestination.objects.get(country_slug='uk')
        assert uk.why_study_here_content.startswith('<ul><li>')
        assert uk.sidebar_nav_links[0] == {'label': 'Why Study Here', 'anchor': 'why-study'}

    def test_inactive_seed_options_hidden(self):
        run_seed()

        levels = [o.label for o in api.get_education_level_options()['data']]
        assert 'Other' not in levels

    def test_failed_seeder_reports_failure(self):
        from django.db import DatabaseError

        def broken_seeder():
            raise DatabaseError('boom')

        with patch('content.seed.SEEDERS', [broken_seeder, seed_services]):
            result = run_seed()

        assert result == {'success': False, 'message': 'Failed to seed database.'}
        assert Service.objects.count() == 5

    def test_management_command(self):
        call_command('seed_content')

        assert Service.objects.count() == 5


@pytest.mark.django_db
class TestSeedEndpoint:

    def test_refused_outside_debug(self, api_client):
        response = api_client.get(reverse('seed'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data == {'success': False, 'message': 'Seeding is only allowed in development mode.'}
        assert Service.objects.count() == 0

    @override_settings(DEBUG=True)
    def test_seeds_in_debug(self, api_client):
        response = api_client.get(reverse('seed'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert Service.objects.count() == 5


bucket_settings = override_settings(
    USE_SPACES=True,
    AWS_ACCESS_KEY_ID='key',
    AWS_SECRET_ACCESS_KEY='secret',
    AWS_S3_ENDPOINT_URL='https://project.supabase.co/storage/v1/s3',
    AWS_S3_REGION_NAME='ap-south-1',
    STORAGE_BUCKETS=['service-images', 'site-assets'],
)


class TestInitBuckets:

    @bucket_settings
    @patch('content.management.commands.init_buckets.boto3.client')
    def test_creates_missing_buckets(self, client_factory):
        s3 = client_factory.return_value
        s3.list_buckets.return_value = {'Buckets': [{'Name': 'service-images'}]}
        out = StringIO()

        call_command('init_buckets', stdout=out)

        assert client_factory.call_args.kwargs['config'].signature_version == 's3v4'
        assert client_factory.call_args.kwargs['endpoint_url'] == 'https://project.supabase.co/storage/v1/s3'
        s3.create_bucket.assert_called_once_with(Bucket='site-assets')
        assert 'Bucket exists: service-images' in out.getvalue()
        assert 'Created bucket: site-assets' in out.getvalue()

    @bucket_settings
    @override_settings(USE_SPACES=False)
    @patch('content.management.commands.init_buckets.boto3.client')
    def test_noop_without_object_storage(self, client_factory):
        out = StringIO()

        call_command('init_buckets', stdout=out)

        client_factory.assert_not_called()
        assert 'nothing to do' in out.getvalue()


# ============================================
# IMAGE UPLOADS
# ============================================

class TestImageUploader:

    def test_rejects_oversized_file_before_storage(self):
        uploader = ImageUploader('service-images', 'services', max_size_mb=1)
        uploader._storage = MagicMock()
        big = SimpleUploadedFile('big.png', b'0' * (2 * 1024 * 1024), content_type='image/png')

        with pytest.raises(ImageTooLarge, match='Maximum size is 1MB'):
            uploader.upload(big)

        uploader._storage.save.assert_not_called()

    def test_build_name_keeps_extension(self):
        name = ImageUploader('site-assets', 'about').build_name('Office Photo.JPG')

        folder, filename = name.split('/')
        stamp, rest = filename.split('_')
        assert folder == 'about'
        assert stamp.isdigit()
        assert rest.endswith('.jpg')

    def test_upload_to_local_bucket(self, tiny_image):
        uploader = ImageUploader('testimonial-photos', 'photos')

        url, name = uploader.upload(tiny_image)

        assert url.startswith(settings.SITE_URL.rstrip('/') + '/media/testimonial-photos/photos/')
        assert uploader.storage.exists(name)
        assert uploader.owns(url)

        uploader.remove(url)
        assert not uploader.storage.exists(name)

    def test_does_not_own_external_urls(self):
        uploader = ImageUploader('university-assets', 'logos')

        assert uploader.owns('https://upload.wikimedia.org/logo.png') is False
        assert uploader.owns('') is False

    def test_storage_error_is_wrapped(self, tiny_image):
        uploader = ImageUploader('service-images', 'services')
        uploader._storage = MagicMock()
        uploader._storage.save.side_effect = OSError('bucket unavailable')

        with pytest.raises(ImageUploadError, match='bucket unavailable'):
            uploader.upload(tiny_image)


# ============================================
# JSON ENDPOINTS
# ============================================

@pytest.mark.django_db
class TestContentEndpoints:

    def test_public_service_list(self, api_client, service):
        response = api_client.get(reverse('content:service-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['slug'] == 'visa-consultancy'

    def test_service_detail_by_slug(self, api_client, service):
        response = api_client.get(reverse('content:service-detail', args=[service.slug]))

        assert response.data['benefits'] == ['Document checklist', 'Mock interviews']

    def test_anonymous_cannot_create(self, api_client):
        response = api_client.post(reverse('content:service-list'), {'name': 'X', 'slug': 'x'}, format='json')

        assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)
        assert response.data['success'] is False

    def test_non_admin_cannot_create(self, api_client, regular_user):
        api_client.force_authenticate(user=regular_user)

        response = api_client.post(reverse('content:faq-list'), {'question': 'Q?', 'answer': 'A'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_can_create(self, admin_api_client):
        response = admin_api_client.post(
            reverse('content:service-list'),
            {'name': 'Loans', 'slug': 'education-loans', 'benefits': ['Low rates']},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert Service.objects.filter(slug='education-loans').exists()

    def test_missing_detail_is_envelope_404(self, api_client):
        response = api_client.get(reverse('content:university-detail', args=['nowhere']))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['not_found'] is True

    def test_university_ranking_group_filter(self, api_client, universities):
        response = api_client.get(reverse('content:university-list'), {'ranking_group': 'Top 10'})

        assert [u['ranking'] for u in response.data] == [1, 8]

    def test_testimonials_hide_drafts_from_visitors(self, api_client, testimonials):
        response = api_client.get(reverse('content:testimonial-list'))

        assert [t['name'] for t in response.data] == ['Anisha Shrestha']

    def test_admin_sees_draft_testimonials(self, admin_api_client, testimonials):
        response = admin_api_client.get(reverse('content:testimonial-list'))

        assert len(response.data) == 2

    def test_faq_country_filter(self, api_client, faqs):
        response = api_client.get(reverse('content:faq-list'), {'country': 'canada'})

        assert {f['country'] for f in response.data} == {'canada', 'general'}

    def test_inactive_destination_hidden(self, api_client, destination):
        destination.is_active = False
        destination.save()

        response = api_client.get(reverse('content:destination-detail', args=['uk']))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_site_settings_missing(self, api_client):
        response = api_client.get(reverse('content:site-settings'))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_site_settings_update_by_admin(self, admin_api_client, site_settings):
        response = admin_api_client.patch(
            reverse('content:site-settings'), {'hero_title': 'New Hero'}, format='json'
        )

        site_settings.refresh_from_db()
        assert response.status_code == status.HTTP_200_OK
        assert site_settings.hero_title == 'New Hero'


@pytest.mark.django_db
class TestDestinationSerializer:

    def test_quick_facts_must_be_object(self):
        serializer = StudyDestinationSerializer(data={
            'country_slug': 'nz', 'display_name': 'New Zealand', 'quick_facts': ['Wellington'],
        })

        assert not serializer.is_valid()
        assert serializer.errors['quick_facts'] == ['Must be a JSON object']

    def test_sections_must_be_array(self):
        serializer = StudyDestinationSerializer(data={
            'country_slug': 'nz', 'display_name': 'New Zealand', 'additional_sections': {'title': 'x'},
        })

        assert not serializer.is_valid()
        assert serializer.errors['additional_sections'] == ['Must be a JSON array']


@pytest.mark.django_db
class TestPlatformEndpoints:

    def test_health_check(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'healthy'

    def test_api_root_lists_endpoints(self, api_client):
        response = api_client.get(reverse('api-root'))

        assert response.data['endpoints']['seed'] == '/api/seed'
