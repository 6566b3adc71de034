# tests/integration/test_booking_flow.py
"""
Integration tests for the consultation booking flow:
- Student books from the public page
- Both notification emails go out
- Admin reviews the booking and updates its status
"""

import pytest
from unittest.mock import patch
from django.core import mail
from django.test import Client
from django.urls import reverse

from leads.models import Consultation


@pytest.mark.django_db
class TestPublicBookingFlow:
    """Student books a consultation"""

    def test_booking_is_saved_and_emailed(self, client, form_options, booking_data):
        response = client.post(reverse('landing:book_consultation'), booking_data, follow=True)

        booking = Consultation.objects.get(email='sita@example.com')
        assert response.status_code == 200
        assert booking.study_interest == 'Computer Science & IT'
        assert booking.alt_date is None

        recipients = sorted(message.to[0] for message in mail.outbox)
        assert recipients == ['admin@dreamedge.test', 'sita@example.com']

    def test_email_failure_still_confirms_booking(self, client, form_options, booking_data):
        with patch('notifications.services.EmailService.send_email', return_value=False) as send:
            response = client.post(reverse('landing:book_consultation'), booking_data, follow=True)

        assert send.call_count == 2
        assert b'Consultation Booked!' in response.content
        assert Consultation.objects.count() == 1

    def test_rejected_booking_sends_nothing(self, client, form_options, booking_data):
        booking_data['email'] = 'not-an-email'

        client.post(reverse('landing:book_consultation'), booking_data)

        assert not Consultation.objects.exists()
        assert len(mail.outbox) == 0


@pytest.mark.django_db
class TestAdminFollowUpFlow:
    """Admin picks up a new booking in the dashboard"""

    def test_booking_appears_and_is_completed(self, admin_client, form_options, booking_data):
        Client().post(reverse('landing:book_consultation'), booking_data)
        booking = Consultation.objects.get()

        index = admin_client.get(reverse('dashboard:index'))
        assert index.context['scheduled_consultations'] == 1

        listing = admin_client.get(reverse('dashboard:consultations_list'), {'status': 'scheduled'})
        assert b'Sita Sharma' in listing.content

        admin_client.post(reverse('dashboard:consultations_edit', args=[booking.pk]), {
            'status': 'completed',
            'notes': 'Shortlisted three UK universities',
        })

        booking.refresh_from_db()
        assert booking.status == 'completed'
        assert booking.notes == 'Shortlisted three UK universities'

        index = admin_client.get(reverse('dashboard:index'))
        assert index.context['scheduled_consultations'] == 0

    def test_visitor_cannot_reach_bookings(self, client, form_options, booking_data):
        client.post(reverse('landing:book_consultation'), booking_data)

        response = client.get(reverse('dashboard:consultations_list'))

        assert response.status_code == 302
        assert reverse('dashboard:login') in response.url
