# dashboard/forms.py

import json

from django import forms
from django.utils.text import slugify

from content.models import (
    FAQ, ConsultationTimeSlot, EducationLevelOption, HomepageProcessStep, Service,
    SiteSettings, StudyDestination, StudyInterestOption, TestPrepCourse, Testimonial,
    University,
)
from content.uploads import ImageTooLarge, ImageUploadError, ImageUploader
from leads.models import Consultation, ContactInquiry


# ============================================
# CUSTOM FIELDS
# ============================================

class LineListField(forms.CharField):
    """A list of strings edited one item per line. Blank lines are dropped."""

    widget = forms.Textarea

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('help_text', 'One item per line.')
        super().__init__(*args, **kwargs)
        self.widget.attrs.setdefault('rows', 5)

    def prepare_value(self, value):
        if isinstance(value, (list, tuple)):
            return '\n'.join(str(item) for item in value)
        return value

    def to_python(self, value):
        value = super().to_python(value)
        return [line.strip() for line in value.splitlines() if line.strip()]


class JSONTextField(forms.CharField):
    """Raw JSON edited as text; must parse and be an object or an array."""

    widget = forms.Textarea

    def __init__(self, *args, shape=dict, **kwargs):
        self.shape = shape
        kwargs.setdefault('required', False)
        super().__init__(*args, **kwargs)
        self.widget.attrs.setdefault('rows', 8)
        self.widget.attrs.setdefault('class', 'form-control font-monospace')

    def prepare_value(self, value):
        if isinstance(value, (dict, list)):
            return json.dumps(value, indent=2, ensure_ascii=False)
        return value

    def to_python(self, value):
        value = super().to_python(value)
        if not value:
            return self.shape()

        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as exc:
            raise forms.ValidationError(f'Invalid JSON format: {exc}')

        if not isinstance(parsed, self.shape):
            raise forms.ValidationError(
                'Must be a JSON object' if self.shape is dict else 'Must be a JSON array'
            )
        return parsed


# ============================================
# MIXINS
# ============================================

class StyledFormMixin:
    """Bootstrap classes on every widget."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            widget = field.widget
            if isinstance(widget, (forms.CheckboxInput, forms.RadioSelect)):
                widget.attrs.setdefault('class', 'form-check-input')
            elif isinstance(widget, forms.Select):
                widget.attrs.setdefault('class', 'form-select')
            else:
                widget.attrs.setdefault('class', 'form-control')


class SlugFromNameMixin:
    """Derive the slug from the display name when it is left blank."""

    slug_field = 'slug'
    slug_source = 'name'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields[self.slug_field].required = False
        self.fields[self.slug_field].help_text = 'Leave blank to generate it from the name.'

    def clean(self):
        cleaned_data = super().clean()
        if not cleaned_data.get(self.slug_field) and self.slug_field not in self.errors:
            slug = slugify(cleaned_data.get(self.slug_source) or '')
            if slug:
                cleaned_data[self.slug_field] = slug
            elif self.slug_source not in self.errors:
                self.add_error(self.slug_field, 'Could not generate a slug from the name. Please enter one.')
        return cleaned_data


class ImageSlotsMixin:
    """Adds an upload input and a remove checkbox for each image URL field.

    ``image_slots`` maps the URL field to ``(bucket, folder)``. The size is
    checked during validation; the upload itself happens in
    ``apply_images`` once the view is ready to save.
    """

    image_slots = {}

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field_name in self.image_slots:
            label = self.fields[field_name].label
            self.fields[f'{field_name}_upload'] = forms.ImageField(
                required=False,
                label=f'Upload {label.lower()}',
                widget=forms.ClearableFileInput(attrs={'class': 'form-control', 'accept': 'image/*'}),
            )
            self.fields[f'{field_name}_remove'] = forms.BooleanField(
                required=False,
                label='Remove current image',
                widget=forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            )
            self.fields[field_name].required = False

    def uploader(self, field_name):
        bucket, folder = self.image_slots[field_name]
        return ImageUploader(bucket, folder)

    def clean(self):
        cleaned_data = super().clean()
        for field_name in self.image_slots:
            upload = cleaned_data.get(f'{field_name}_upload')
            if upload:
                try:
                    self.uploader(field_name).check_size(upload)
                except ImageTooLarge as exc:
                    self.add_error(f'{field_name}_upload', str(exc))
        return cleaned_data

    def apply_images(self, payload):
        """Upload new images and clear removed ones, writing URLs into ``payload``.

        Stored objects are not deleted here. The old object of a replaced or
        removed image goes to ``replaced_images`` and each new upload to
        ``uploaded_images``, for ``finish_images`` once the save has run.
        Raises ``ImageUploadError`` when an upload fails.
        """
        self.replaced_images = []
        self.uploaded_images = []
        for field_name in self.image_slots:
            uploader = self.uploader(field_name)
            upload = self.cleaned_data.get(f'{field_name}_upload')
            current = self.initial.get(field_name)

            if upload:
                payload[field_name], name = uploader.upload(upload)
                self.uploaded_images.append((uploader, name))
            elif self.cleaned_data.get(f'{field_name}_remove'):
                payload[field_name] = ''
            else:
                continue

            if uploader.owns(current):
                self.replaced_images.append((uploader, current))
        return payload

    def finish_images(self, saved):
        """Delete the objects the save left unreferenced.

        After a successful save that is the replaced images; after a failed
        one, the files uploaded for it. A failed delete is logged by the
        uploader and does not undo the save.
        """
        leftovers = self.replaced_images if saved else self.uploaded_images
        for uploader, name in leftovers:
            try:
                uploader.remove(name)
            except ImageUploadError:
                continue


class ContentForm(StyledFormMixin, forms.ModelForm):
    """Model form whose cleaned values are handed to the content API."""

    def payload(self):
        model_fields = {f.name for f in self._meta.model._meta.concrete_fields}
        data = {
            name: self.cleaned_data.get(name)
            for name in self.fields if name in model_fields
        }
        return self.apply_images(data)

    def apply_images(self, payload):
        return payload

    def finish_images(self, saved):
        pass


# ============================================
# CONTENT FORMS
# ============================================

class ServiceForm(ImageSlotsMixin, SlugFromNameMixin, ContentForm):
    benefits = LineListField(label='Benefits')

    image_slots = {'image_url': ('service-images', 'services')}

    class Meta:
        model = Service
        fields = [
            'name', 'slug', 'short_description', 'full_description', 'icon_name',
            'image_url', 'benefits', 'display_order',
        ]
        widgets = {
            'short_description': forms.Textarea(attrs={'rows': 2}),
            'full_description': forms.Textarea(attrs={'rows': 6}),
        }


class UniversityForm(ImageSlotsMixin, SlugFromNameMixin, ContentForm):
    popular_courses = LineListField(label='Popular courses')

    image_slots = {
        'logo_url': ('university-assets', 'logos'),
        'banner_image_url': ('university-assets', 'banners'),
    }

    class Meta:
        model = University
        fields = [
            'name', 'slug', 'description', 'location', 'ranking', 'tuition_fees_range',
            'website_url', 'logo_url', 'banner_image_url', 'popular_courses',
            'accommodation_info',
        ]
        widgets = {
            'description': forms.Textarea(attrs={'rows': 5}),
            'accommodation_info': forms.Textarea(attrs={'rows': 3}),
        }


class TestimonialForm(ImageSlotsMixin, ContentForm):
    image_slots = {'photo_url': ('testimonial-photos', 'photos')}

    class Meta:
        model = Testimonial
        fields = ['name', 'quote', 'photo_url', 'university', 'program', 'category', 'status']
        widgets = {
            'quote': forms.Textarea(attrs={'rows': 4}),
        }


class FAQForm(ContentForm):
    class Meta:
        model = FAQ
        fields = ['question', 'answer', 'category', 'country', 'display_order']
        widgets = {
            'answer': forms.Textarea(attrs={'rows': 5}),
        }


class TestPrepForm(SlugFromNameMixin, ContentForm):
    slug_source = 'test_name'

    features = LineListField(label='Features')
    schedule_options = LineListField(label='Schedule options')

    class Meta:
        model = TestPrepCourse
        fields = [
            'test_name', 'slug', 'description', 'duration', 'price', 'features',
            'schedule_options', 'display_order',
        ]
        widgets = {
            'description': forms.Textarea(attrs={'rows': 4}),
        }


class StudyDestinationForm(ImageSlotsMixin, SlugFromNameMixin, ContentForm):
    slug_field = 'country_slug'
    slug_source = 'display_name'

    quick_facts = JSONTextField(shape=dict, help_text='JSON object, e.g. {"Capital": "London"}')
    country_specific_faqs = JSONTextField(shape=list, help_text='JSON array of {"question", "answer"} objects')
    additional_sections = JSONTextField(shape=list, help_text='JSON array of {"title", "content"} objects')
    sidebar_nav_links = JSONTextField(shape=list, help_text='JSON array of {"label", "anchor"} objects')

    image_slots = {'hero_image_url': ('destination-assets', 'heroes')}

    class Meta:
        model = StudyDestination
        fields = [
            'country_slug', 'display_name', 'meta_title', 'meta_description', 'seo_keywords',
            'hero_image_url', 'intro_text', 'quick_facts',
            'why_study_here_content', 'education_system_content', 'popular_courses_content',
            'admission_requirements_content', 'cost_studying_living_content',
            'visa_requirements_content', 'scholarships_content',
            'country_specific_faqs', 'additional_sections', 'sidebar_nav_links',
            'is_active', 'display_order',
        ]
        widgets = {
            'meta_description': forms.Textarea(attrs={'rows': 2}),
            'seo_keywords': forms.Textarea(attrs={'rows': 2}),
            'intro_text': forms.Textarea(attrs={'rows': 4}),
        }


class SiteSettingsForm(ImageSlotsMixin, ContentForm):
    image_slots = {
        'hero_background_image_url': ('homepage-assets', 'hero'),
        'about_us_image_url': ('site-assets', 'about'),
    }

    class Meta:
        model = SiteSettings
        exclude = ['id', 'updated_at']
        widgets = {
            'footer_about_text': forms.Textarea(attrs={'rows': 3}),
            'hero_subtitle': forms.Textarea(attrs={'rows': 2}),
            'why_choose_us_subtitle': forms.Textarea(attrs={'rows': 2}),
            'about_hero_subtitle': forms.Textarea(attrs={'rows': 2}),
            'about_us_story_content': forms.Textarea(attrs={'rows': 5}),
            'about_us_mission_content': forms.Textarea(attrs={'rows': 3}),
            'about_us_vision_content': forms.Textarea(attrs={'rows': 3}),
        }


class ProcessStepForm(ContentForm):
    class Meta:
        model = HomepageProcessStep
        fields = ['step_number', 'title', 'description', 'icon_name']
        widgets = {
            'description': forms.Textarea(attrs={'rows': 3}),
        }


class TimeSlotForm(ContentForm):
    class Meta:
        model = ConsultationTimeSlot
        fields = ['time_range_display', 'is_active', 'display_order']
        labels = {'time_range_display': 'Time range'}


class EducationLevelForm(ContentForm):
    class Meta:
        model = EducationLevelOption
        fields = ['level_name', 'is_active', 'display_order']


class StudyInterestForm(ContentForm):
    class Meta:
        model = StudyInterestOption
        fields = ['interest_name', 'is_active', 'display_order']


# ============================================
# LEAD FORMS (status and notes only)
# ============================================

class ContactInquiryForm(ContentForm):
    class Meta:
        model = ContactInquiry
        fields = ['status', 'admin_notes']
        widgets = {
            'admin_notes': forms.Textarea(attrs={'rows': 4}),
        }


class ConsultationForm(ContentForm):
    class Meta:
        model = Consultation
        fields = ['status', 'notes']
        widgets = {
            'notes': forms.Textarea(attrs={'rows': 4}),
        }
