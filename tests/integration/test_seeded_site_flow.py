# tests/integration/test_seeded_site_flow.py
"""
End-to-end: a fresh database is seeded, then a visitor browses the public
site and books a consultation with the seeded form options.
"""

import pytest
from io import StringIO
from django.core import mail
from django.core.management import call_command
from django.urls import reverse

from leads.models import Consultation


@pytest.fixture
def seeded(db):
    call_command('seed_content', stdout=StringIO())


@pytest.mark.django_db
class TestSeededSite:

    @pytest.mark.parametrize('name', [
        'home', 'about', 'services', 'destinations', 'universities', 'test_prep', 'faq', 'contact',
        'book_consultation',
    ])
    def test_every_page_renders(self, client, seeded, name):
        response = client.get(reverse(f'landing:{name}'))

        assert response.status_code == 200

    def test_home_uses_seeded_settings(self, client, seeded):
        response = client.get(reverse('landing:home'))

        content = response.content.decode()
        assert 'Study Abroad from Nepal with Dream Edge' in content
        assert 'Initial Consultation &amp; Profile Assessment' in content

    def test_destination_and_university_pages(self, client, seeded):
        destination = client.get(reverse('landing:destination_detail', args=['uk']))
        university = client.get(reverse('landing:university_detail', args=['university-of-cambridge']))

        assert b'World-renowned universities with global recognition' in destination.content
        assert university.status_code == 200

    def test_book_with_seeded_options(self, client, seeded, booking_data):
        booking_data['study_interests'] = 'Engineering & Technology'

        response = client.post(reverse('landing:book_consultation'), booking_data, follow=True)

        assert b'Consultation Booked!' in response.content
        assert Consultation.objects.get().study_interest == 'Engineering & Technology'
        assert len(mail.outbox) == 2
