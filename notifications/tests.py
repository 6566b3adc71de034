import pytest
from datetime import date, datetime
from unittest.mock import patch
from django.core import mail

from notifications.services import EmailService


@pytest.fixture
def booking():
    return {
        'name': 'Sita Sharma',
        'email': 'sita@example.com',
        'phone': '+977 9812345678',
        'preferred_date': date(2026, 1, 5),
        'preferred_time': '10:00 AM - 11:00 AM',
        'alt_date': None,
        'alt_time': None,
        'education_level': "Bachelor's Degree",
        'study_interest': 'Computer Science & IT',
        'preferred_location': 'office',
        'message': 'Looking at UK masters.',
    }


class TestDateFormatting:

    def test_date(self):
        assert EmailService._format_date(date(2026, 1, 5)) == 'Monday, January 05, 2026'

    def test_iso_string(self):
        assert EmailService._format_date('2026-01-05') == 'Monday, January 05, 2026'

    def test_datetime(self):
        assert EmailService._format_date(datetime(2026, 1, 5, 9, 30)) == 'Monday, January 05, 2026'

    def test_missing(self):
        assert EmailService._format_date(None) == 'Not specified'
        assert EmailService._format_date('') == 'Not specified'

    def test_unparseable_string_returned_as_is(self):
        assert EmailService._format_date('next week') == 'next week'


class TestBookingContext:

    def test_location_label(self, booking):
        context = EmailService._booking_context(booking)

        assert context['location_label'] == 'In-Office Visit'
        assert context['is_online'] is False

    def test_online_default(self, booking):
        booking['preferred_location'] = None

        context = EmailService._booking_context(booking)

        assert context['location_label'] == 'Online (Zoom/Google Meet)'

    def test_form_field_name_for_interest(self, booking):
        del booking['study_interest']
        booking['study_interests'] = 'Engineering & Technology'

        assert EmailService._booking_context(booking)['study_interest'] == 'Engineering & Technology'

    def test_no_alternate_date(self, booking):
        assert EmailService._booking_context(booking)['alt_date'] == ''

    def test_site_url_from_settings(self, booking, settings):
        settings.SITE_URL = 'https://dreamedge.test/'

        assert EmailService._booking_context(booking)['site_url'] == 'https://dreamedge.test'


class TestConsultationEmails:

    def test_admin_notification(self, booking):
        sent = EmailService.send_consultation_admin_notification(booking)

        message = mail.outbox[0]
        assert sent is True
        assert message.subject == 'New Consultation Booking - Sita Sharma'
        assert message.to == ['admin@dreamedge.test']
        assert 'Monday, January 05, 2026' in message.body
        assert message.alternatives[0][1] == 'text/html'

    def test_admin_notification_falls_back_to_contact_email(self, booking, settings):
        settings.ADMIN_EMAIL = ''

        EmailService.send_consultation_admin_notification(booking)

        assert mail.outbox[0].to == [settings.CONTACT_EMAIL]

    def test_student_confirmation(self, booking):
        sent = EmailService.send_consultation_confirmation(booking)

        message = mail.outbox[0]
        assert sent is True
        assert message.subject == 'Your Consultation is Booked - Dream Edge'
        assert message.to == ['sita@example.com']
        assert 'In-Office Visit' in message.body

    def test_both_emails(self, booking):
        result = EmailService.send_consultation_emails(booking)

        assert result == {'success': True, 'admin_sent': True, 'student_sent': True}
        assert len(mail.outbox) == 2

    def test_one_failure_still_attempts_the_other(self, booking):
        with patch.object(EmailService, 'send_consultation_admin_notification', return_value=False):
            result = EmailService.send_consultation_emails(booking)

        assert result == {'success': False, 'admin_sent': False, 'student_sent': True}
        assert len(mail.outbox) == 1

    def test_backend_error_returns_false(self, booking):
        with patch('notifications.services.EmailMultiAlternatives.send', side_effect=ConnectionError('refused')):
            sent = EmailService.send_consultation_confirmation(booking)

        assert sent is False
        assert len(mail.outbox) == 0
