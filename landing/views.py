# landing/views.py
import logging

from django.contrib import messages
from django.shortcuts import redirect, render

from content import api
from content.models import FAQ
from leads.forms import ConsultationBookingForm, ContactForm
from .loaders import load_sections, render_page

logger = logging.getLogger(__name__)

BOOKED_SESSION_KEY = 'booked_consultation'


def home(request):
    """Home/Landing page. Sections that fail to load are simply left out."""
    page = load_sections(
        services=lambda: api.get_services(limit=6),
        universities=lambda: api.get_universities(limit=6),
        testimonials=lambda: api.get_testimonials(limit=6),
        process_steps=api.get_homepage_process_steps,
        faqs=lambda: api.get_faqs(limit=6),
        destinations=api.get_study_destinations,
    )
    return render_page(request, 'landing/home.html', page, context={
        'page_title': 'Study Abroad Consultancy',
    })


def about(request):
    page = load_sections(testimonials=lambda: api.get_testimonials(limit=3))
    return render_page(request, 'landing/about.html', page, context={
        'page_title': 'About Us',
    })


def services(request):
    page = load_sections(services=api.get_services)
    return render_page(request, 'landing/services.html', page, required=['services'], context={
        'page_title': 'Our Services',
    })


def service_detail(request, slug):
    page = load_sections(
        service=lambda: api.get_service_by_slug(slug),
        other_services=api.get_services,
    )
    service = page.data.get('service')
    return render_page(request, 'landing/service_detail.html', page, required=['service'], context={
        'page_title': service.name if service else 'Service',
        'other_services': [s for s in page.data.get('other_services', []) if s != service],
    })


# ============================================
# STUDY ABROAD
# ============================================

def destinations(request):
    page = load_sections(destinations=api.get_study_destinations)
    return render_page(request, 'landing/destinations.html', page, required=['destinations'], context={
        'page_title': 'Study Abroad',
    })


def destination_detail(request, country_slug):
    page = load_sections(
        destination=lambda: api.get_study_destination_by_slug(country_slug),
        faqs=lambda: api.get_faqs(country=country_slug),
    )
    destination = page.data.get('destination')
    return render_page(request, 'landing/destination_detail.html', page, required=['destination'], context={
        'page_title': (destination.meta_title or f'Study in {destination.display_name}') if destination else '',
    })


def universities(request):
    filters = {
        key: request.GET.get(key, '').strip()
        for key in ('search', 'location', 'ranking_group', 'country')
    }
    page = load_sections(
        universities=lambda: api.get_universities(filters=filters),
        all_universities=api.get_universities,
    )
    locations = sorted({u.location for u in page.data.get('all_universities', []) if u.location})
    return render_page(request, 'landing/universities.html', page, required=['universities'], context={
        'page_title': 'Universities',
        'filters': filters,
        'locations': locations,
        'ranking_groups': list(api.RANKING_GROUPS),
    })


def university_detail(request, slug):
    page = load_sections(university=lambda: api.get_university_by_slug(slug))
    university = page.data.get('university')
    return render_page(request, 'landing/university_detail.html', page, required=['university'], context={
        'page_title': university.name if university else 'University',
    })


# ============================================
# TEST PREPARATION
# ============================================

def test_prep(request):
    page = load_sections(courses=api.get_test_prep_courses)
    return render_page(request, 'landing/test_prep.html', page, required=['courses'], context={
        'page_title': 'Test Preparation',
    })


def test_prep_detail(request, slug):
    page = load_sections(course=lambda: api.get_test_prep_course_by_slug(slug))
    course = page.data.get('course')
    return render_page(request, 'landing/test_prep_detail.html', page, required=['course'], context={
        'page_title': course.test_name if course else 'Test Preparation',
    })


def faq(request):
    category = request.GET.get('category', 'all')
    page = load_sections(faqs=lambda: api.get_faqs(category=category))
    return render_page(request, 'landing/faq.html', page, required=['faqs'], context={
        'page_title': 'Frequently Asked Questions',
        'categories': FAQ.CATEGORY_CHOICES,
        'active_category': category,
    })


# ============================================
# LEAD FORMS
# ============================================

def contact(request):
    """Contact page"""
    form = ContactForm(request.POST or None)

    if request.method == 'POST' and form.is_valid():
        result = api.submit_contact_form(form.cleaned_data)
        if result['success']:
            messages.success(request, "Thank you for your message! We'll get back to you soon.")
            return redirect('landing:contact')
        messages.error(request, f"Failed to send message: {result['error']}")

    return render(request, 'landing/contact.html', {
        'page_title': 'Contact Us',
        'form': form,
    })


def book_consultation(request):
    """Booking page. A saved booking shows the success panel even if the emails failed.

    A successful POST redirects back here, and the page then shows the
    success panel once for the booking kept in the session.
    """
    if request.method == 'GET' and BOOKED_SESSION_KEY in request.session:
        result = api.get_consultation_by_id(request.session.pop(BOOKED_SESSION_KEY))
        if result['success']:
            return render(request, 'landing/book_consultation.html', {
                'page_title': 'Consultation Booked',
                'booked': result['data'],
            })
        logger.warning("Booked consultation could not be reloaded: %s", result['error'])

    page = load_sections(
        time_slots=api.get_consultation_time_slots,
        education_levels=api.get_education_level_options,
        study_interests=api.get_study_interest_options,
    )
    if not page.ok:
        messages.warning(request, 'Some form options could not be loaded. Please refresh the page.')

    form = ConsultationBookingForm(
        request.POST or None,
        time_slots=page.data.get('time_slots', []),
        education_levels=page.data.get('education_levels', []),
        study_interests=page.data.get('study_interests', []),
    )

    if request.method == 'POST':
        if form.is_valid():
            result = api.book_consultation(form.cleaned_data)
            if result['success']:
                booked = result['data']
                if not result.get('email_sent'):
                    logger.warning("Booking %s saved but confirmation emails failed", booked.pk)
                request.session[BOOKED_SESSION_KEY] = str(booked.pk)
                return redirect('landing:book_consultation')
            messages.error(request, f"Failed to book consultation: {result['error']}")
        else:
            messages.error(request, 'Please fix the errors in the form.')

    return render(request, 'landing/book_consultation.html', {
        'page_title': 'Book a Consultation',
        'form': form,
    })
