import pytest
from datetime import timedelta
from unittest.mock import patch
from django.core import mail
from django.urls import reverse
from django.utils import timezone

from leads.models import Consultation, ContactInquiry


FAILED = {'success': False, 'error': 'Database unavailable'}


# ============================================
# LANDING PAGE TESTS (Public Pages)
# ============================================

@pytest.mark.django_db
class TestLandingPages:
    """Test all landing/public pages load correctly"""

    def test_home_page_loads_on_empty_database(self, client):
        response = client.get(reverse('landing:home'))

        assert response.status_code == 200
        assert b'Dream Edge' in response.content

    def test_home_page_shows_content(self, client, site_settings, service, testimonials, destination):
        response = client.get(reverse('landing:home'))

        content = response.content.decode()
        assert 'Study Abroad with Dream Edge' in content
        assert 'Visa Consultancy' in content
        assert 'Anisha Shrestha' in content
        assert 'Draft Student' not in content
        assert 'Study in United Kingdom' in content

    def test_footer_uses_site_settings(self, client, site_settings):
        response = client.get(reverse('landing:about'))

        content = response.content.decode()
        assert 'Putalisadak, Kathmandu' in content
        assert f'2015-{timezone.now().year}' in content

    def test_about_page_loads(self, client, site_settings):
        response = client.get(reverse('landing:about'))

        assert response.status_code == 200
        assert b'Founded to help students study abroad.' in response.content

    def test_services_page(self, client, service):
        response = client.get(reverse('landing:services'))

        assert response.status_code == 200
        assert b'Visa Consultancy' in response.content

    def test_service_detail(self, client, service):
        response = client.get(reverse('landing:service_detail', args=[service.slug]))

        assert response.status_code == 200
        assert b'Mock interviews' in response.content

    def test_unknown_service_is_404(self, client):
        response = client.get(reverse('landing:service_detail', args=['no-such-service']))

        assert response.status_code == 404

    def test_destinations_page(self, client, destination):
        response = client.get(reverse('landing:destinations'))

        assert response.status_code == 200
        assert b'United Kingdom' in response.content

    def test_destination_detail(self, client, destination, faqs):
        response = client.get(reverse('landing:destination_detail', args=['uk']))

        content = response.content.decode()
        assert response.status_code == 200
        assert 'Quick Facts' in content
        assert '<li>Short degrees</li>' in content
        assert 'How long is a UK visa?' in content
        assert 'Can I work in Canada?' not in content

    def test_inactive_destination_is_404(self, client, destination):
        destination.is_active = False
        destination.save()

        response = client.get(reverse('landing:destination_detail', args=['uk']))

        assert response.status_code == 404

    def test_universities_page_filters(self, client, universities):
        response = client.get(reverse('landing:universities'), {'ranking_group': 'Top 10'})

        content = response.content.decode()
        assert 'University of Oxford' in content
        assert 'University of Melbourne</h2>' not in content
        # location dropdown lists every location, not only the filtered ones
        assert 'Melbourne, Australia' in content

    def test_university_detail(self, client, universities):
        response = client.get(reverse('landing:university_detail', args=['university-of-oxford']))

        assert response.status_code == 200
        assert b'Rank #1' in response.content

    def test_universities_route_is_not_a_destination(self, client, universities):
        response = client.get('/study-abroad/universities/')

        assert response.status_code == 200
        assert response.templates[0].name == 'landing/universities.html'

    def test_test_prep_pages(self, client, test_prep_course):
        listing = client.get(reverse('landing:test_prep'))
        detail = client.get(reverse('landing:test_prep_detail', args=['ielts-academic']))

        assert b'IELTS Academic' in listing.content
        assert b'Mock tests' in detail.content

    def test_faq_category_filter(self, client, faqs):
        response = client.get(reverse('landing:faq'), {'category': 'visa'})

        content = response.content.decode()
        assert 'How long is a UK visa?' in content
        assert 'Do I need IELTS?' not in content
        assert response.context['active_category'] == 'visa'

    def test_student_services_links_redirect(self, client):
        listing = client.get('/student-services/')
        detail = client.get('/student-services/visa-consultancy/')

        assert listing.status_code == 301
        assert listing.url == reverse('landing:services')
        assert detail.url == reverse('landing:service_detail', args=['visa-consultancy'])

    def test_pte_link_redirects_to_course(self, client):
        response = client.get('/test-preparation/pte/')

        assert response.status_code == 301
        assert response.url == reverse('landing:test_prep_detail', args=['pte-academic'])


@pytest.mark.django_db
class TestErrorPanel:
    """A required section that fails shows the retry panel"""

    def test_failed_required_section(self, client):
        with patch('content.api.get_services', return_value=FAILED):
            response = client.get(reverse('landing:services'))

        content = response.content.decode()
        assert response.status_code == 503
        assert 'Database unavailable' in content
        assert 'Try again' in content
        assert response.context['retry_url'] == reverse('landing:services')

    def test_failed_optional_section_is_skipped(self, client, faqs):
        with patch('content.api.get_testimonials', return_value=FAILED):
            response = client.get(reverse('landing:home'))

        assert response.status_code == 200
        assert 'testimonials' in response.context['section_errors']
        assert b'Do I need IELTS?' in response.content


# ============================================
# CONTACT PAGE
# ============================================

@pytest.mark.django_db
class TestContactPage:

    def _data(self, **overrides):
        data = {
            'name': 'Hari Thapa',
            'email': 'hari@example.com',
            'phone': '9841000000',
            'subject': 'Study in Japan',
            'message': 'What are the intakes for Japan?',
        }
        data.update(overrides)
        return data

    def test_page_loads(self, client, site_settings):
        response = client.get(reverse('landing:contact'))

        assert response.status_code == 200
        assert b'Send Message' in response.content

    def test_submit_saves_inquiry(self, client):
        response = client.post(reverse('landing:contact'), self._data(), follow=True)

        inquiry = ContactInquiry.objects.get()
        assert inquiry.interest == 'Study in Japan'
        assert inquiry.status == 'new'
        assert "Thank you for your message! We&#x27;ll get back to you soon." in response.content.decode()

    def test_invalid_submission_shows_errors(self, client):
        response = client.post(reverse('landing:contact'), self._data(message='short'))

        assert response.status_code == 200
        assert b'Message should be at least 10 characters' in response.content
        assert not ContactInquiry.objects.exists()

    def test_save_failure_is_flashed(self, client):
        with patch('content.api.submit_contact_form', return_value=FAILED):
            response = client.post(reverse('landing:contact'), self._data())

        assert response.status_code == 200
        assert b'Failed to send message: Database unavailable' in response.content


# ============================================
# BOOKING PAGE
# ============================================

@pytest.mark.django_db
class TestBookConsultationPage:

    def test_page_lists_active_options(self, client, form_options):
        response = client.get(reverse('landing:book_consultation'))

        content = response.content.decode()
        assert '10:00 AM - 11:00 AM' in content
        assert '07:00 PM - 08:00 PM' not in content

    def test_booking_redirects_to_success_panel(self, client, form_options, booking_data):
        response = client.post(reverse('landing:book_consultation'), booking_data)

        booking = Consultation.objects.get()
        assert response.status_code == 302
        assert response.url == reverse('landing:book_consultation')
        assert booking.status == 'scheduled'
        assert len(mail.outbox) == 2

        panel = client.get(response.url)
        assert b'Consultation Booked!' in panel.content
        assert b'Sita Sharma' in panel.content

    def test_reload_after_booking_does_not_book_again(self, client, form_options, booking_data):
        client.post(reverse('landing:book_consultation'), booking_data, follow=True)

        response = client.get(reverse('landing:book_consultation'))

        assert b'Consultation Booked!' not in response.content
        assert b'Book Consultation' in response.content
        assert Consultation.objects.count() == 1

    def test_inactive_option_rejected(self, client, form_options, booking_data):
        booking_data['preferred_time'] = '07:00 PM - 08:00 PM'

        response = client.post(reverse('landing:book_consultation'), booking_data)

        assert response.status_code == 200
        assert b'Please select one of the available time slots' in response.content
        assert not Consultation.objects.exists()

    def test_invalid_booking(self, client, form_options, booking_data):
        booking_data['preferred_date'] = (timezone.localdate() - timedelta(days=1)).isoformat()

        response = client.post(reverse('landing:book_consultation'), booking_data)

        content = response.content.decode()
        assert 'Please fix the errors in the form.' in content
        assert 'Date cannot be in the past' in content
        assert not Consultation.objects.exists()

    def test_option_load_failure_warns(self, client):
        with patch('content.api.get_consultation_time_slots', return_value=FAILED):
            response = client.get(reverse('landing:book_consultation'))

        assert b'Some form options could not be loaded' in response.content
