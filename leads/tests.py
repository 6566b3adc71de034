import pytest
from datetime import timedelta
from unittest.mock import patch
from django.core import mail
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from content import api
from leads.forms import ConsultationBookingForm, ContactForm


# ============================================
# CONTACT FORM
# ============================================

class TestContactForm:
    """Validation messages shown on the public contact page"""

    def _form(self, **overrides):
        data = {
            'name': 'Hari Thapa',
            'email': 'hari@example.com',
            'phone': '',
            'subject': 'Study in Australia',
            'message': 'Please tell me about intakes.',
        }
        data.update(overrides)
        return ContactForm(data)

    def test_valid_submission(self):
        form = self._form()

        assert form.is_valid()
        assert form.cleaned_data['subject'] == 'Study in Australia'

    def test_required_fields(self):
        form = ContactForm({})

        assert not form.is_valid()
        assert form.errors['name'] == ['Name is required']
        assert form.errors['email'] == ['Email is required']
        assert form.errors['message'] == ['Message is required']
        assert 'phone' not in form.errors
        assert 'subject' not in form.errors

    def test_short_name(self):
        form = self._form(name='H')

        assert form.errors['name'] == ['Name must be at least 2 characters']

    @pytest.mark.parametrize('email', ['hari', 'hari@example', 'hari @example.com'])
    def test_invalid_email(self, email):
        form = self._form(email=email)

        assert form.errors['email'] == ['Please enter a valid email address']

    def test_invalid_phone(self):
        form = self._form(phone='call me')

        assert form.errors['phone'] == ['Please enter a valid phone number']

    def test_phone_formats_accepted(self):
        assert self._form(phone='+977 (1) 441-2345').is_valid()

    def test_short_message(self):
        form = self._form(message='Hi there')

        assert form.errors['message'] == ['Message should be at least 10 characters']


# ============================================
# BOOKING FORM
# ============================================

@pytest.mark.django_db
class TestConsultationBookingForm:

    def _form(self, data):
        return ConsultationBookingForm(
            data,
            time_slots=api.get_consultation_time_slots()['data'],
            education_levels=api.get_education_level_options()['data'],
            study_interests=api.get_study_interest_options()['data'],
        )

    def test_valid_booking(self, form_options, booking_data):
        form = self._form(booking_data)

        assert form.is_valid(), form.errors
        assert form.cleaned_data['preferred_location'] == 'online'

    def test_dropdowns_use_active_options(self, form_options, booking_data):
        form = self._form(booking_data)

        slot_labels = [label for _value, label in form.fields['preferred_time'].widget.choices]
        level_labels = [label for _value, label in form.fields['education_level'].widget.choices]
        assert slot_labels == ['Select a time slot', '10:00 AM - 11:00 AM', '02:00 PM - 03:00 PM']
        assert 'Other' not in level_labels

    def test_required_messages(self, form_options):
        form = self._form({})

        assert not form.is_valid()
        assert form.errors['name'] == ['Full name is required']
        assert form.errors['email'] == ['Email address is required']
        assert form.errors['phone'] == ['Phone number is required']
        assert form.errors['preferred_date'] == ['Preferred date is required']
        assert form.errors['preferred_time'] == ['Preferred time slot is required']
        assert form.errors['education_level'] == ['Current education level is required']
        assert form.errors['study_interests'] == ['Area of study interest is required']

    def test_short_name(self, form_options, booking_data):
        booking_data['name'] = 'Jo'

        assert self._form(booking_data).errors['name'] == ['Name must be at least 3 characters']

    def test_past_date_rejected(self, form_options, booking_data):
        booking_data['preferred_date'] = (timezone.localdate() - timedelta(days=1)).isoformat()

        assert self._form(booking_data).errors['preferred_date'] == ['Date cannot be in the past']

    def test_today_is_allowed(self, form_options, booking_data):
        booking_data['preferred_date'] = timezone.localdate().isoformat()

        assert self._form(booking_data).is_valid()

    def test_past_alternate_date_rejected(self, form_options, booking_data):
        booking_data['alt_date'] = (timezone.localdate() - timedelta(days=2)).isoformat()

        assert self._form(booking_data).errors['alt_date'] == ['Date cannot be in the past']

    def test_alternate_time_needs_alternate_date(self, form_options, booking_data):
        booking_data['alt_time'] = '02:00 PM - 03:00 PM'

        form = self._form(booking_data)

        assert form.errors['alt_date'] == ['Alternate date is required if you specify an alternate time']

    def test_alternate_date_alone_is_fine(self, form_options, booking_data):
        booking_data['alt_date'] = (timezone.localdate() + timedelta(days=5)).isoformat()

        assert self._form(booking_data).is_valid()

    def test_invalid_phone(self, form_options, booking_data):
        booking_data['phone'] = '12'

        assert self._form(booking_data).errors['phone'] == ['Please enter a valid phone number']

    def test_inactive_time_slot_rejected(self, form_options, booking_data):
        booking_data['preferred_time'] = '07:00 PM - 08:00 PM'

        assert self._form(booking_data).errors['preferred_time'] == ['Please select one of the available time slots']

    def test_unlisted_options_rejected(self, form_options, booking_data):
        booking_data['education_level'] = 'Other'
        booking_data['study_interests'] = 'Astrology'

        errors = self._form(booking_data).errors
        assert errors['education_level'] == ['Please select one of the listed education levels']
        assert errors['study_interests'] == ['Please select one of the listed study areas']


# ============================================
# SEND CONSULTATION EMAIL ENDPOINT
# ============================================

@pytest.mark.django_db
class TestSendConsultationEmailView:

    @pytest.fixture
    def payload(self, booking_data):
        data = dict(booking_data)
        del data['alt_date']
        del data['alt_time']
        return data

    def test_sends_both_emails(self, api_client, payload):
        response = api_client.post(reverse('send-consultation-email'), payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True, 'message': 'Emails sent successfully'}
        assert len(mail.outbox) == 2
        assert {m.to[0] for m in mail.outbox} == {'admin@dreamedge.test', 'sita@example.com'}

    def test_send_failure_is_500(self, api_client, payload):
        with patch('notifications.services.EmailService.send_email', return_value=False):
            response = api_client.post(reverse('send-consultation-email'), payload, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {
            'success': False,
            'error': 'Failed to send email',
            'admin_sent': False,
            'student_sent': False,
        }

    def test_invalid_payload_is_400(self, api_client, payload):
        payload['email'] = 'not-an-email'

        response = api_client.post(reverse('send-consultation-email'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert len(mail.outbox) == 0

    def test_get_not_allowed(self, api_client):
        response = api_client.get(reverse('send-consultation-email'))

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
