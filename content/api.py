"""
Content API layer.

Every function runs one query against one table and returns an envelope
dict instead of raising:

    {'success': True, 'data': ...}
    {'success': False, 'error': 'message'}
    {'success': False, 'error': 'Service not found', 'not_found': True}

Callers (public views, admin views, the JSON endpoints) branch on
``result['success']``. Nothing is retried and nothing spans more than one
table, except ``book_consultation`` which also sends the booking emails.
"""
import logging

from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.db import DatabaseError
from django.db.models import F, Q

from leads.models import Consultation, ContactInquiry
from .models import (
    FAQ, ConsultationTimeSlot, EducationLevelOption, HomepageProcessStep, Service,
    SiteSettings, StudyDestination, StudyInterestOption, TestPrepCourse, Testimonial,
    University,
)

logger = logging.getLogger(__name__)

# Columns managed by the database, never taken from a payload
READ_ONLY_FIELDS = {'id', 'created_at', 'updated_at'}

RANKING_GROUPS = {
    'Top 10': (None, 10),
    'Top 20': (10, 20),
    'Top 30': (20, 30),
    'Top 100': (30, 100),
}


# ============================================
# ENVELOPE HELPERS
# ============================================

def ok(data=None):
    return {'success': True, 'data': data}


def failure(error):
    return {'success': False, 'error': error}


def not_found(label):
    return {'success': False, 'error': f'{label} not found', 'not_found': True}


def validation_message(exc):
    """Flatten a model ValidationError into one readable line."""
    if hasattr(exc, 'message_dict'):
        return '; '.join(
            f"{field}: {' '.join(messages)}" if field != '__all__' else ' '.join(messages)
            for field, messages in exc.message_dict.items()
        )
    return ' '.join(exc.messages)


class ContentTable:
    """CRUD for one model, each operation wrapped in the result envelope."""

    def __init__(self, model, label, nullable_fields=(), editable_fields=None):
        self.model = model
        self.label = label
        # Fields where an empty string from a form means "no value"
        self.nullable_fields = set(nullable_fields)
        # Restricts what update() may change; None means every column
        self.editable_fields = set(editable_fields) if editable_fields else None

    @property
    def field_names(self):
        return {
            f.name for f in self.model._meta.concrete_fields
            if f.name not in READ_ONLY_FIELDS
        }

    def clean_payload(self, data, editable_only=False):
        allowed = self.field_names
        if editable_only and self.editable_fields is not None:
            allowed &= self.editable_fields

        payload = {}
        for key, value in (data or {}).items():
            if key not in allowed:
                logger.debug("Dropping unknown %s field %r", self.label, key)
                continue
            if key in self.nullable_fields and value == '':
                value = None
            payload[key] = value
        return payload

    def _guard(self, action, fn):
        try:
            return ok(fn())
        except ObjectDoesNotExist:
            logger.warning("%s not found during %s", self.label, action)
            return not_found(self.label)
        except ValidationError as exc:
            message = validation_message(exc)
            logger.warning("Invalid %s data during %s: %s", self.label, action, message)
            return failure(message)
        except DatabaseError as exc:
            logger.error("Database error during %s of %s: %s", action, self.label, exc)
            return failure(str(exc))

    def queryset(self):
        return self.model.objects.all()

    def list(self, queryset=None):
        qs = self.queryset() if queryset is None else queryset
        return self._guard('list', lambda: list(qs))

    def _get(self, **lookup):
        try:
            return self.queryset().get(**lookup)
        except ValidationError:
            # A malformed primary key can never match a row
            raise self.model.DoesNotExist
        except ValueError:
            raise self.model.DoesNotExist

    def get(self, pk):
        return self._guard('fetch', lambda: self._get(pk=pk))

    def get_by(self, **lookup):
        return self._guard('fetch', lambda: self._get(**lookup))

    def create(self, data):
        def _create():
            obj = self.model(**self.clean_payload(data))
            obj.full_clean()
            obj.save()
            logger.info("Created %s %s", self.label, obj.pk)
            return obj

        return self._guard('create', _create)

    def update(self, pk, data):
        if not pk:
            message = f'Missing {self.label.lower()} ID for update'
            logger.error(message)
            return failure(message)

        def _update():
            obj = self._get(pk=pk)
            for key, value in self.clean_payload(data, editable_only=True).items():
                setattr(obj, key, value)
            obj.full_clean()
            obj.save()
            logger.info("Updated %s %s", self.label, obj.pk)
            return obj

        return self._guard('update', _update)

    def delete(self, pk):
        def _delete():
            obj = self._get(pk=pk)
            obj.delete()
            logger.info("Deleted %s %s", self.label, pk)
            return None

        return self._guard('delete', _delete)


services = ContentTable(Service, 'Service', nullable_fields={'image_url', 'display_order'})
universities = ContentTable(University, 'University', nullable_fields={'logo_url', 'banner_image_url', 'ranking'})
testimonials = ContentTable(Testimonial, 'Testimonial', nullable_fields={'photo_url'})
faqs = ContentTable(FAQ, 'FAQ', nullable_fields={'display_order'})
test_prep_courses = ContentTable(TestPrepCourse, 'Test preparation course', nullable_fields={'display_order'})
study_destinations = ContentTable(StudyDestination, 'Study destination', nullable_fields={'hero_image_url', 'display_order'})
process_steps = ContentTable(HomepageProcessStep, 'Homepage process step')
time_slots = ContentTable(ConsultationTimeSlot, 'Consultation time slot', nullable_fields={'display_order'})
education_levels = ContentTable(EducationLevelOption, 'Education level option', nullable_fields={'display_order'})
study_interests = ContentTable(StudyInterestOption, 'Study interest option', nullable_fields={'display_order'})
contact_inquiries = ContentTable(ContactInquiry, 'Contact inquiry', editable_fields={'status', 'admin_notes'})
consultations = ContentTable(Consultation, 'Consultation', editable_fields={'status', 'notes'})


# ============================================
# SERVICES
# ============================================

def get_services(limit=None):
    qs = services.queryset().order_by(F('display_order').asc(nulls_last=True), 'name')
    if limit:
        qs = qs[:limit]
    return services.list(qs)


def get_service_by_id(service_id):
    return services.get(service_id)


def get_service_by_slug(slug):
    return services.get_by(slug=slug)


def create_service(data):
    return services.create(data)


def update_service(service_id, data):
    return services.update(service_id, data)


def delete_service(service_id):
    return services.delete(service_id)


# ============================================
# UNIVERSITIES
# ============================================

def get_universities(admin_view=False, filters=None, limit=None):
    """Universities by ranking (unranked last), optionally filtered.

    Filters: ``search`` (name contains), ``location`` (exact),
    ``ranking_group`` ('Top 10', 'Top 20', 'Top 30', 'Top 100'),
    ``country`` (location contains).
    """
    filters = filters or {}
    qs = universities.queryset().order_by(F('ranking').asc(nulls_last=True), 'name')

    if filters.get('search'):
        qs = qs.filter(name__icontains=filters['search'])
    if filters.get('location'):
        qs = qs.filter(location=filters['location'])

    group = RANKING_GROUPS.get(filters.get('ranking_group'))
    if group:
        lower, upper = group
        qs = qs.filter(ranking__lte=upper)
        if lower is not None:
            qs = qs.filter(ranking__gt=lower)

    if filters.get('country'):
        qs = qs.filter(location__icontains=filters['country'])

    if limit:
        qs = qs[:limit]
    return universities.list(qs)


def get_university_by_id(university_id):
    return universities.get(university_id)


def get_university_by_slug(slug):
    return universities.get_by(slug=slug)


def create_university(data):
    return universities.create(data)


def update_university(university_id, data):
    return universities.update(university_id, data)


def delete_university(university_id):
    return universities.delete(university_id)


# ============================================
# TESTIMONIALS
# ============================================

def get_testimonials(limit=None):
    """Published testimonials only, for the public site."""
    qs = testimonials.queryset().filter(status='published')
    if limit:
        qs = qs[:limit]
    return testimonials.list(qs)


def get_all_testimonials():
    return testimonials.list(testimonials.queryset().order_by('-created_at'))


def get_testimonial_by_id(testimonial_id):
    return testimonials.get(testimonial_id)


def create_testimonial(data):
    data = dict(data)
    data['status'] = data.get('status') or 'draft'
    return testimonials.create(data)


def update_testimonial(testimonial_id, data):
    return testimonials.update(testimonial_id, data)


def delete_testimonial(testimonial_id):
    return testimonials.delete(testimonial_id)


# ============================================
# FAQS
# ============================================

def get_faqs(category=None, country=None, limit=None):
    """FAQs by display order.

    A country filter also returns the FAQs marked ``general``; ``all``
    disables either filter.
    """
    qs = faqs.queryset().order_by(F('display_order').asc(nulls_last=True), 'question')

    if category and category != 'all':
        qs = qs.filter(category=category)
    if country and country != 'all':
        qs = qs.filter(Q(country=country) | Q(country='general'))
    if limit:
        qs = qs[:limit]
    return faqs.list(qs)


def get_faq_by_id(faq_id):
    return faqs.get(faq_id)


def create_faq(data):
    return faqs.create(data)


def update_faq(faq_id, data):
    return faqs.update(faq_id, data)


def delete_faq(faq_id):
    return faqs.delete(faq_id)


# ============================================
# TEST PREPARATION COURSES
# ============================================

def get_test_prep_courses():
    return test_prep_courses.list(
        test_prep_courses.queryset().order_by(F('display_order').asc(nulls_last=True), 'test_name')
    )


def get_test_prep_course_by_id(course_id):
    return test_prep_courses.get(course_id)


def get_test_prep_course_by_slug(slug):
    return test_prep_courses.get_by(slug=slug)


def create_test_prep_course(data):
    return test_prep_courses.create(data)


def update_test_prep_course(course_id, data):
    return test_prep_courses.update(course_id, data)


def delete_test_prep_course(course_id):
    return test_prep_courses.delete(course_id)


# ============================================
# STUDY DESTINATIONS
# ============================================

def get_study_destinations(admin_view=False):
    qs = study_destinations.queryset().order_by(F('display_order').asc(nulls_last=True), 'display_name')
    if not admin_view:
        qs = qs.filter(is_active=True)
    return study_destinations.list(qs)


def get_study_destination_by_slug(slug):
    return study_destinations.get_by(country_slug=slug, is_active=True)


def get_study_destination_by_id(destination_id):
    return study_destinations.get(destination_id)


def create_study_destination(data):
    return study_destinations.create(data)


def update_study_destination(destination_id, data):
    return study_destinations.update(destination_id, data)


def delete_study_destination(destination_id):
    return study_destinations.delete(destination_id)


# ============================================
# HOMEPAGE PROCESS STEPS
# ============================================

def get_homepage_process_steps():
    return process_steps.list(process_steps.queryset().order_by('step_number'))


def get_homepage_process_step_by_id(step_id):
    return process_steps.get(step_id)


def create_homepage_process_step(data):
    return process_steps.create(data)


def update_homepage_process_step(step_id, data):
    return process_steps.update(step_id, data)


def delete_homepage_process_step(step_id):
    return process_steps.delete(step_id)


# ============================================
# SITE SETTINGS
# ============================================

def get_site_settings():
    """The settings row, or None in ``data`` when it has not been seeded."""
    try:
        return ok(SiteSettings.objects.filter(pk=SiteSettings.SINGLETON_ID).first())
    except DatabaseError as exc:
        logger.error("Error fetching site settings: %s", exc)
        return failure(str(exc))


def update_site_settings(data):
    """Merge ``data`` into the existing settings row (id=1)."""
    try:
        current = SiteSettings.objects.get(pk=SiteSettings.SINGLETON_ID)
    except SiteSettings.DoesNotExist:
        logger.error("Site settings row missing; run the seed first")
        return failure('Site settings not found. Please ensure they are seeded.')
    except DatabaseError as exc:
        logger.error("Error fetching current site settings for update: %s", exc)
        return failure(str(exc))

    editable = {f.name for f in SiteSettings._meta.concrete_fields} - {'id', 'updated_at'}
    for key, value in (data or {}).items():
        if key in editable:
            setattr(current, key, value)

    try:
        current.full_clean()
        current.save()
    except ValidationError as exc:
        return failure(validation_message(exc))
    except DatabaseError as exc:
        logger.error("Error updating site settings: %s", exc)
        return failure(str(exc))

    logger.info("Site settings updated")
    return ok(current)


# ============================================
# FORM OPTIONS (booking dropdowns)
# ============================================

def _options(table, admin):
    qs = table.queryset().order_by(F('display_order').asc(nulls_last=True))
    if not admin:
        qs = qs.filter(is_active=True)
    return table.list(qs)


def get_consultation_time_slots(admin=False):
    return _options(time_slots, admin)


def get_consultation_time_slot_by_id(slot_id):
    return time_slots.get(slot_id)


def create_consultation_time_slot(data):
    return time_slots.create(data)


def update_consultation_time_slot(slot_id, data):
    return time_slots.update(slot_id, data)


def delete_consultation_time_slot(slot_id):
    return time_slots.delete(slot_id)


def get_education_level_options(admin=False):
    return _options(education_levels, admin)


def get_education_level_option_by_id(option_id):
    return education_levels.get(option_id)


def create_education_level_option(data):
    return education_levels.create(data)


def update_education_level_option(option_id, data):
    return education_levels.update(option_id, data)


def delete_education_level_option(option_id):
    return education_levels.delete(option_id)


def get_study_interest_options(admin=False):
    return _options(study_interests, admin)


def get_study_interest_option_by_id(option_id):
    return study_interests.get(option_id)


def create_study_interest_option(data):
    return study_interests.create(data)


def update_study_interest_option(option_id, data):
    return study_interests.update(option_id, data)


def delete_study_interest_option(option_id):
    return study_interests.delete(option_id)


# ============================================
# LEADS
# ============================================

def submit_contact_form(data):
    payload = {
        'name': data.get('name'),
        'email': data.get('email'),
        'phone': data.get('phone') or None,
        'message': data.get('message'),
        'interest': data.get('subject') or data.get('interest') or None,
        'status': 'new',
    }
    return contact_inquiries.create(payload)


def book_consultation(data):
    """Save a booking, then send the admin and student emails.

    The booking succeeds once the row is written; a failed email send is
    logged and reported in ``email_sent`` but never fails the booking.
    """
    from notifications.services import EmailService

    payload = {
        'name': data.get('name'),
        'email': data.get('email'),
        'phone': data.get('phone'),
        'preferred_date': data.get('preferred_date'),
        'preferred_time': data.get('preferred_time'),
        'alt_date': data.get('alt_date') or None,
        'alt_time': data.get('alt_time') or None,
        'education_level': data.get('education_level'),
        'study_interest': data.get('study_interests') or data.get('study_interest'),
        'preferred_location': data.get('preferred_location') or 'online',
        'message': data.get('message') or None,
        'status': 'scheduled',
    }
    result = consultations.create(payload)
    if not result['success']:
        return result

    try:
        email_result = EmailService.send_consultation_emails(payload)
        email_sent = email_result['success']
    except Exception as exc:
        logger.error("Failed to send consultation email notification: %s", exc)
        email_sent = False

    result['email_sent'] = email_sent
    return result


def get_contact_inquiries(status=None):
    qs = contact_inquiries.queryset().order_by('-created_at')
    if status:
        qs = qs.filter(status=status)
    return contact_inquiries.list(qs)


def get_contact_inquiry_by_id(inquiry_id):
    return contact_inquiries.get(inquiry_id)


def update_contact_inquiry(inquiry_id, data):
    """Only ``status`` and ``admin_notes`` can change."""
    return contact_inquiries.update(inquiry_id, data)


def get_consultations(status=None):
    qs = consultations.queryset().order_by('-created_at')
    if status:
        qs = qs.filter(status=status)
    return consultations.list(qs)


def get_consultation_by_id(consultation_id):
    return consultations.get(consultation_id)


def update_consultation(consultation_id, data):
    """Only ``status`` and ``notes`` can change."""
    return consultations.update(consultation_id, data)
