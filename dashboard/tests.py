import uuid
from unittest.mock import patch

import pytest
from django.conf import settings
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from django.urls import NoReverseMatch, reverse

from content.models import (
    FAQ, ConsultationTimeSlot, Service, SiteSettings, StudyDestination, University,
)
from content import models as content_models
from content.uploads import ImageUploader
from dashboard.forms import JSONTextField, LineListField, UniversityForm
from dashboard.sections import SECTIONS, SECTIONS_BY_KEY
from leads.models import Consultation, ContactInquiry


# ============================================
# AUTHENTICATION
# ============================================

@pytest.mark.django_db
class TestAdminAuthentication:

    def test_anonymous_redirected_to_login(self, client):
        response = client.get(reverse('dashboard:index'))

        assert response.status_code == 302
        assert response.url == f"{reverse('dashboard:login')}?next={reverse('dashboard:index')}"

    def test_login_page_loads(self, client):
        response = client.get(reverse('dashboard:login'))

        assert response.status_code == 200
        assert b'Admin Sign In' in response.content

    def test_admin_login(self, client, admin_user):
        response = client.post(reverse('dashboard:login'), {
            'email': 'ADMIN@dreamedge.test',
            'password': 'adminpass123',
        })

        assert response.status_code == 302
        assert response.url == reverse('dashboard:index')

    def test_login_honours_next(self, client, admin_user):
        response = client.post(reverse('dashboard:login'), {
            'email': 'admin@dreamedge.test',
            'password': 'adminpass123',
            'next': reverse('dashboard:faqs_list'),
        })

        assert response.url == reverse('dashboard:faqs_list')

    def test_login_ignores_offsite_next(self, client, admin_user):
        response = client.post(reverse('dashboard:login'), {
            'email': 'admin@dreamedge.test',
            'password': 'adminpass123',
            'next': 'https://evil.example.com/',
        })

        assert response.url == reverse('dashboard:index')

    def test_wrong_password(self, client, admin_user):
        response = client.post(reverse('dashboard:login'), {
            'email': 'admin@dreamedge.test',
            'password': 'wrong',
        })

        assert response.status_code == 200
        assert b'Invalid email or password.' in response.content

    def test_login_without_admin_row_refused(self, client, regular_user):
        response = client.post(reverse('dashboard:login'), {
            'email': 'visitor@test.com',
            'password': 'visitorpass123',
        })

        assert b'Access denied. This account does not have admin access.' in response.content
        assert '_auth_user_id' not in client.session

    def test_session_without_admin_row_is_signed_out(self, client, regular_user):
        client.force_login(regular_user)

        response = client.get(reverse('dashboard:services_list'), follow=True)

        assert response.redirect_chain[-1][0] == reverse('dashboard:login')
        assert b'Access denied. This account does not have admin access.' in response.content
        assert '_auth_user_id' not in client.session

    def test_revoked_admin_is_signed_out(self, admin_client, admin_user):
        admin_user.admin_role.delete()

        response = admin_client.get(reverse('dashboard:index'))

        assert response.status_code == 302
        assert '_auth_user_id' not in admin_client.session

    def test_signed_in_admin_skips_login_page(self, admin_client):
        response = admin_client.get(reverse('dashboard:login'))

        assert response.url == reverse('dashboard:index')

    def test_logout(self, admin_client):
        response = admin_client.get(reverse('dashboard:logout'), follow=True)

        assert b'You have been logged out successfully.' in response.content
        assert '_auth_user_id' not in admin_client.session


# ============================================
# DASHBOARD PAGES
# ============================================

@pytest.mark.django_db
class TestDashboardIndex:

    def test_counts(self, admin_client, service, faqs):
        ContactInquiry.objects.create(name='A', email='a@example.com', message='Hello there', status='new')

        response = admin_client.get(reverse('dashboard:index'))

        counts = {section.key: count for section, count in response.context['counts']}
        assert counts['services'] == 1
        assert counts['faqs'] == 3
        assert response.context['new_inquiries'] == 1
        assert response.context['scheduled_consultations'] == 0

    def test_sidebar_lists_every_section(self, admin_client):
        response = admin_client.get(reverse('dashboard:index'))

        for section in SECTIONS:
            assert section.plural.encode() in response.content


@pytest.mark.django_db
class TestSectionList:

    def test_list_shows_rows(self, admin_client, universities):
        response = admin_client.get(reverse('dashboard:universities_list'))

        assert response.status_code == 200
        assert b'Imperial College London' in response.content

    def test_list_is_paginated(self, admin_client):
        for i in range(30):
            ConsultationTimeSlot.objects.create(time_range_display=f'Slot {i:02d}', display_order=i)

        response = admin_client.get(reverse('dashboard:time_slots_list'), {'page': 2})

        assert response.context['page_obj'].number == 2
        assert len(response.context['page_obj']) == 5

    def test_lead_list_filters_by_status(self, admin_client):
        ContactInquiry.objects.create(name='Open', email='o@example.com', message='m', status='new')
        ContactInquiry.objects.create(name='Done', email='d@example.com', message='m', status='closed')

        response = admin_client.get(reverse('dashboard:inquiries_list'), {'status': 'closed'})

        names = [obj.name for obj, _cells, _edit, _delete in response.context['page_obj']]
        assert names == ['Done']

    def test_load_failure_is_flashed(self, admin_client):
        section = SECTIONS_BY_KEY['faqs']
        with patch.object(section, 'list_rows', return_value={'success': False, 'error': 'timeout'}):
            response = admin_client.get(reverse('dashboard:faqs_list'))

        assert b'Error loading faqs: timeout' in response.content


# ============================================
# CREATE / EDIT / DELETE
# ============================================

@pytest.mark.django_db
class TestContentCrud:

    def test_create_service(self, admin_client):
        response = admin_client.post(reverse('dashboard:services_create'), {
            'name': 'Education Loans',
            'slug': '',
            'short_description': 'Help with loans',
            'benefits': 'Low rates\n\nFast approval\n',
            'display_order': '3',
        }, follow=True)

        service = Service.objects.get(slug='education-loans')
        assert service.benefits == ['Low rates', 'Fast approval']
        assert b'Service created successfully!' in response.content

    def test_slug_derived_from_name(self, admin_client):
        admin_client.post(reverse('dashboard:universities_create'), {
            'name': 'University Of Oxford!!',
            'slug': '',
            'ranking': '1',
        })

        assert University.objects.get().slug == 'university-of-oxford'

    def test_explicit_slug_kept(self, admin_client):
        admin_client.post(reverse('dashboard:universities_create'), {
            'name': 'University of Oxford',
            'slug': 'oxford',
        })

        assert University.objects.get().slug == 'oxford'

    def test_duplicate_slug_rejected(self, admin_client, service):
        response = admin_client.post(reverse('dashboard:services_create'), {
            'name': 'Visa Consultancy',
            'slug': '',
        })

        assert response.status_code == 200
        assert Service.objects.count() == 1

    def test_edit_service(self, admin_client, service):
        response = admin_client.post(reverse('dashboard:services_edit', args=[service.pk]), {
            'name': 'Student Visa Services',
            'slug': service.slug,
            'benefits': 'Mock interviews',
        }, follow=True)

        service.refresh_from_db()
        assert service.name == 'Student Visa Services'
        assert service.benefits == ['Mock interviews']
        assert b'Service updated successfully!' in response.content

    def test_edit_form_shows_current_values(self, admin_client, service):
        response = admin_client.get(reverse('dashboard:services_edit', args=[service.pk]))

        assert b'Document checklist\nMock interviews' in response.content

    def test_edit_missing_row_is_404(self, admin_client):
        response = admin_client.get(reverse('dashboard:faqs_edit', args=[uuid.uuid4()]))

        assert response.status_code == 404

    def test_delete_confirmation_then_delete(self, admin_client, faqs):
        faq = faqs[0]
        url = reverse('dashboard:faqs_delete', args=[faq.pk])

        confirm = admin_client.get(url)
        response = admin_client.post(url, follow=True)

        assert b'Do I need IELTS?' in confirm.content
        assert b'FAQ deleted successfully!' in response.content
        assert not FAQ.objects.filter(pk=faq.pk).exists()

    def test_api_failure_is_flashed(self, admin_client):
        section = SECTIONS_BY_KEY['faqs']
        with patch.object(section, 'create', return_value={'success': False, 'error': 'insert failed'}):
            response = admin_client.post(reverse('dashboard:faqs_create'), {
                'question': 'New?', 'answer': 'Yes', 'country': 'general',
            })

        assert response.status_code == 200
        assert b'insert failed' in response.content


@pytest.mark.django_db
class TestDestinationForm:

    def _data(self, **overrides):
        data = {
            'display_name': 'New Zealand',
            'country_slug': '',
            'quick_facts': '{"Capital": "Wellington"}',
            'country_specific_faqs': '',
            'additional_sections': '[]',
            'sidebar_nav_links': '',
            'is_active': 'on',
        }
        data.update(overrides)
        return data

    def test_create_destination(self, admin_client):
        admin_client.post(reverse('dashboard:destinations_create'), self._data())

        destination = StudyDestination.objects.get()
        assert destination.country_slug == 'new-zealand'
        assert destination.quick_facts == {'Capital': 'Wellington'}
        assert destination.country_specific_faqs == []

    def test_invalid_json(self, admin_client):
        response = admin_client.post(reverse('dashboard:destinations_create'), self._data(quick_facts='{bad'))

        errors = response.context['form'].errors['quick_facts']
        assert errors[0].startswith('Invalid JSON format:')
        assert not StudyDestination.objects.exists()

    def test_wrong_json_shape(self, admin_client):
        response = admin_client.post(
            reverse('dashboard:destinations_create'), self._data(sidebar_nav_links='{"label": "x"}')
        )

        assert response.context['form'].errors['sidebar_nav_links'] == ['Must be a JSON array']


@pytest.mark.django_db
class TestImageFields:

    def test_upload_sets_public_url(self, admin_client, tiny_image):
        admin_client.post(reverse('dashboard:testimonials_create'), {
            'name': 'Ram Karki',
            'quote': 'Great help with my visa.',
            'status': 'published',
            'photo_url_upload': tiny_image,
        })

        testimonial = content_models.Testimonial.objects.get()
        expected = f"{settings.SITE_URL.rstrip('/')}/media/testimonial-photos/photos/"
        assert testimonial.photo_url.startswith(expected)

    @override_settings(IMAGE_UPLOAD_MAX_MB=0.00001)
    def test_oversized_upload_rejected(self, admin_client, tiny_image):
        response = admin_client.post(reverse('dashboard:testimonials_create'), {
            'name': 'Ram Karki',
            'quote': 'Great help with my visa.',
            'status': 'draft',
            'photo_url_upload': tiny_image,
        })

        errors = response.context['form'].errors['photo_url_upload']
        assert errors[0].startswith('Image is too large.')
        assert not content_models.Testimonial.objects.exists()

    def test_remove_clears_external_url(self, admin_client):
        testimonial = content_models.Testimonial.objects.create(
            name='Ram', quote='Thanks!', status='published', photo_url='https://example.com/ram.jpg',
        )

        admin_client.post(reverse('dashboard:testimonials_edit', args=[testimonial.pk]), {
            'name': 'Ram',
            'quote': 'Thanks!',
            'status': 'published',
            'photo_url': 'https://example.com/ram.jpg',
            'photo_url_remove': 'on',
        })

        testimonial.refresh_from_db()
        assert testimonial.photo_url is None

    @pytest.fixture
    def stored_photo(self):
        uploader = ImageUploader('testimonial-photos', 'photos')
        url, name = uploader.upload(SimpleUploadedFile('old.gif', b'GIF89a', content_type='image/gif'))
        testimonial = content_models.Testimonial.objects.create(
            name='Ram', quote='Thanks!', status='published', photo_url=url,
        )
        return testimonial, uploader.storage, name

    def _edit(self, admin_client, testimonial, **extra):
        data = {
            'name': 'Ram',
            'quote': 'Thanks!',
            'status': 'published',
            'photo_url': testimonial.photo_url,
        }
        data.update(extra)
        return admin_client.post(reverse('dashboard:testimonials_edit', args=[testimonial.pk]), data)

    def _stored_files(self, storage):
        return set(storage.listdir('photos')[1])

    def test_replacing_image_deletes_old_object(self, admin_client, stored_photo, tiny_image):
        testimonial, storage, old_name = stored_photo
        old_url = testimonial.photo_url

        self._edit(admin_client, testimonial, photo_url_upload=tiny_image)

        testimonial.refresh_from_db()
        assert testimonial.photo_url != old_url
        assert not storage.exists(old_name)

    def test_removing_image_deletes_object(self, admin_client, stored_photo):
        testimonial, storage, old_name = stored_photo

        self._edit(admin_client, testimonial, photo_url_remove='on')

        testimonial.refresh_from_db()
        assert testimonial.photo_url is None
        assert not storage.exists(old_name)

    def test_failed_save_keeps_current_image(self, admin_client, stored_photo):
        testimonial, storage, old_name = stored_photo
        old_url = testimonial.photo_url
        failed = {'success': False, 'error': 'Database unavailable'}

        with patch.object(SECTIONS_BY_KEY['testimonials'], 'update', return_value=failed):
            response = self._edit(admin_client, testimonial, photo_url_remove='on')

        testimonial.refresh_from_db()
        assert b'Database unavailable' in response.content
        assert testimonial.photo_url == old_url
        assert storage.exists(old_name)

    def test_failed_save_discards_new_upload(self, admin_client, stored_photo, tiny_image):
        testimonial, storage, old_name = stored_photo
        before = self._stored_files(storage)
        failed = {'success': False, 'error': 'Database unavailable'}

        with patch.object(SECTIONS_BY_KEY['testimonials'], 'update', return_value=failed):
            self._edit(admin_client, testimonial, photo_url_upload=tiny_image)

        assert self._stored_files(storage) == before
        assert storage.exists(old_name)


# ============================================
# LEADS
# ============================================

@pytest.mark.django_db
class TestLeadSections:

    def test_inquiries_cannot_be_created_or_deleted(self):
        with pytest.raises(NoReverseMatch):
            reverse('dashboard:inquiries_create')
        with pytest.raises(NoReverseMatch):
            reverse('dashboard:consultations_delete', args=['00000000-0000-0000-0000-000000000000'])

    def test_update_inquiry_status(self, admin_client):
        inquiry = ContactInquiry.objects.create(name='Hari', email='hari@example.com', message='Call me please')

        response = admin_client.post(reverse('dashboard:inquiries_edit', args=[inquiry.pk]), {
            'status': 'replied',
            'admin_notes': 'Called back on Sunday',
        }, follow=True)

        inquiry.refresh_from_db()
        assert inquiry.status == 'replied'
        assert inquiry.admin_notes == 'Called back on Sunday'
        assert b'Contact inquiry updated successfully!' in response.content

    def test_consultation_details_shown(self, admin_client):
        booking = Consultation.objects.create(
            name='Sita Sharma', email='sita@example.com', phone='9812345678',
            preferred_date='2030-01-05', preferred_time='10:00 AM - 11:00 AM',
            education_level="Bachelor's Degree", study_interest='Nursing',
        )

        response = admin_client.get(reverse('dashboard:consultations_edit', args=[booking.pk]))

        labels = [label for label, _value in response.context['details']]
        assert 'Preferred date' in labels
        assert b'Nursing' in response.content


# ============================================
# SITE SETTINGS
# ============================================

@pytest.mark.django_db
class TestSiteSettingsPage:

    def test_missing_settings_warning(self, admin_client):
        response = admin_client.get(reverse('dashboard:site_settings'))

        assert b'Site settings not found. Please ensure they are seeded.' in response.content

    def test_update_settings(self, admin_client, site_settings):
        response = admin_client.post(reverse('dashboard:site_settings'), {
            'site_name': 'Dream Edge Nepal',
            'primary_email': 'hello@dreamedge.test',
        }, follow=True)

        assert SiteSettings.objects.get().site_name == 'Dream Edge Nepal'
        assert b'Site settings updated successfully!' in response.content


# ============================================
# FORM FIELDS
# ============================================

@pytest.mark.django_db
class TestCustomFields:

    def test_line_list_drops_blank_lines(self):
        assert LineListField().clean('One\n\n  Two  \n') == ['One', 'Two']

    def test_line_list_renders_one_per_line(self):
        assert LineListField().prepare_value(['One', 'Two']) == 'One\nTwo'

    def test_json_object(self):
        assert JSONTextField(shape=dict).clean('{"a": 1}') == {'a': 1}

    def test_json_empty_is_shape(self):
        assert JSONTextField(shape=list).clean('') == []

    def test_unsluggable_name(self):
        form = UniversityForm({'name': '!!!', 'slug': ''})

        assert form.errors['slug'] == ['Could not generate a slug from the name. Please enter one.']
