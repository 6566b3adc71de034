# dashboard/sections.py
"""
One entry per content type managed from the admin panel: which form edits
it, which content API functions read and write it, and which columns its
list page shows.
"""
from django.urls import reverse

from content import api
from . import forms


class AdminSection:

    def __init__(self, key, label, plural, form_class, list_rows, get_row,
                 create=None, update=None, delete=None, columns=(), title_field=None):
        self.key = key
        self.label = label
        self.plural = plural
        self.form_class = form_class
        self.list_rows = list_rows
        self.get_row = get_row
        self.create = create
        self.update = update
        self.delete = delete
        self.columns = columns
        self.title_field = title_field or columns[0][0]

    @property
    def can_create(self):
        return self.create is not None

    @property
    def can_delete(self):
        return self.delete is not None

    def url_name(self, action):
        return f'dashboard:{self.key}_{action}'

    @property
    def list_url(self):
        return reverse(self.url_name('list'))

    @property
    def create_url(self):
        return reverse(self.url_name('create')) if self.can_create else None

    def edit_url(self, obj):
        return reverse(self.url_name('edit'), args=[obj.pk])

    def delete_url(self, obj):
        return reverse(self.url_name('delete'), args=[obj.pk]) if self.can_delete else None

    def cells(self, obj):
        row = []
        for field, _heading in self.columns:
            display = getattr(obj, f'get_{field}_display', None)
            value = display() if display else getattr(obj, field)
            if isinstance(value, bool):
                value = 'Yes' if value else 'No'
            row.append('' if value is None else value)
        return row


SECTIONS = [
    AdminSection(
        'services', 'Service', 'Services', forms.ServiceForm,
        list_rows=api.get_services,
        get_row=api.get_service_by_id,
        create=api.create_service,
        update=api.update_service,
        delete=api.delete_service,
        columns=[('name', 'Name'), ('slug', 'Slug'), ('display_order', 'Order')],
    ),
    AdminSection(
        'universities', 'University', 'Universities', forms.UniversityForm,
        list_rows=lambda: api.get_universities(admin_view=True),
        get_row=api.get_university_by_id,
        create=api.create_university,
        update=api.update_university,
        delete=api.delete_university,
        columns=[('name', 'Name'), ('location', 'Location'), ('ranking', 'Ranking')],
    ),
    AdminSection(
        'testimonials', 'Testimonial', 'Testimonials', forms.TestimonialForm,
        list_rows=api.get_all_testimonials,
        get_row=api.get_testimonial_by_id,
        create=api.create_testimonial,
        update=api.update_testimonial,
        delete=api.delete_testimonial,
        columns=[('name', 'Name'), ('university', 'University'), ('status', 'Status')],
    ),
    AdminSection(
        'faqs', 'FAQ', 'FAQs', forms.FAQForm,
        list_rows=api.get_faqs,
        get_row=api.get_faq_by_id,
        create=api.create_faq,
        update=api.update_faq,
        delete=api.delete_faq,
        columns=[('question', 'Question'), ('category', 'Category'), ('country', 'Country')],
    ),
    AdminSection(
        'test_prep', 'Test preparation course', 'Test Preparation', forms.TestPrepForm,
        list_rows=api.get_test_prep_courses,
        get_row=api.get_test_prep_course_by_id,
        create=api.create_test_prep_course,
        update=api.update_test_prep_course,
        delete=api.delete_test_prep_course,
        columns=[('test_name', 'Test'), ('duration', 'Duration'), ('price', 'Price')],
    ),
    AdminSection(
        'destinations', 'Study destination', 'Study Destinations', forms.StudyDestinationForm,
        list_rows=lambda: api.get_study_destinations(admin_view=True),
        get_row=api.get_study_destination_by_id,
        create=api.create_study_destination,
        update=api.update_study_destination,
        delete=api.delete_study_destination,
        columns=[('display_name', 'Country'), ('country_slug', 'Slug'), ('is_active', 'Active')],
    ),
    AdminSection(
        'process_steps', 'Process step', 'Homepage Process Steps', forms.ProcessStepForm,
        list_rows=api.get_homepage_process_steps,
        get_row=api.get_homepage_process_step_by_id,
        create=api.create_homepage_process_step,
        update=api.update_homepage_process_step,
        delete=api.delete_homepage_process_step,
        columns=[('step_number', 'Step'), ('title', 'Title')],
        title_field='title',
    ),
    AdminSection(
        'time_slots', 'Time slot', 'Consultation Time Slots', forms.TimeSlotForm,
        list_rows=lambda: api.get_consultation_time_slots(admin=True),
        get_row=api.get_consultation_time_slot_by_id,
        create=api.create_consultation_time_slot,
        update=api.update_consultation_time_slot,
        delete=api.delete_consultation_time_slot,
        columns=[('time_range_display', 'Time range'), ('is_active', 'Active'), ('display_order', 'Order')],
    ),
    AdminSection(
        'education_levels', 'Education level', 'Education Levels', forms.EducationLevelForm,
        list_rows=lambda: api.get_education_level_options(admin=True),
        get_row=api.get_education_level_option_by_id,
        create=api.create_education_level_option,
        update=api.update_education_level_option,
        delete=api.delete_education_level_option,
        columns=[('level_name', 'Level'), ('is_active', 'Active'), ('display_order', 'Order')],
    ),
    AdminSection(
        'study_interests', 'Study interest', 'Study Interests', forms.StudyInterestForm,
        list_rows=lambda: api.get_study_interest_options(admin=True),
        get_row=api.get_study_interest_option_by_id,
        create=api.create_study_interest_option,
        update=api.update_study_interest_option,
        delete=api.delete_study_interest_option,
        columns=[('interest_name', 'Interest'), ('is_active', 'Active'), ('display_order', 'Order')],
    ),
    AdminSection(
        'inquiries', 'Contact inquiry', 'Contact Inquiries', forms.ContactInquiryForm,
        list_rows=api.get_contact_inquiries,
        get_row=api.get_contact_inquiry_by_id,
        update=api.update_contact_inquiry,
        columns=[('name', 'Name'), ('email', 'Email'), ('interest', 'Interest'), ('status', 'Status'), ('created_at', 'Received')],
    ),
    AdminSection(
        'consultations', 'Consultation', 'Consultations', forms.ConsultationForm,
        list_rows=api.get_consultations,
        get_row=api.get_consultation_by_id,
        update=api.update_consultation,
        columns=[
            ('name', 'Name'), ('email', 'Email'), ('preferred_date', 'Date'),
            ('preferred_time', 'Time'), ('status', 'Status'),
        ],
    ),
]

SECTIONS_BY_KEY = {section.key: section for section in SECTIONS}

# Read-only booking details shown above the status/notes form
LEAD_DETAIL_FIELDS = {
    'inquiries': ['name', 'email', 'phone', 'interest', 'message', 'created_at'],
    'consultations': [
        'name', 'email', 'phone', 'preferred_date', 'preferred_time', 'alt_date', 'alt_time',
        'education_level', 'study_interest', 'preferred_location', 'message', 'created_at',
    ],
}
