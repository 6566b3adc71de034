# leads/forms.py

import re

from django import forms
from django.utils import timezone

from .models import Consultation

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PHONE_RE = re.compile(r'^\+?[0-9\s\-()]{7,}$')


def _text_input(placeholder, input_type='text'):
    return forms.TextInput(attrs={
        'class': 'form-control',
        'placeholder': placeholder,
        'type': input_type,
    })


class ContactForm(forms.Form):
    """Public contact form."""

    name = forms.CharField(
        max_length=100,
        error_messages={'required': 'Name is required'},
        widget=_text_input('Your full name'),
    )
    email = forms.CharField(
        max_length=254,
        error_messages={'required': 'Email is required'},
        widget=_text_input('you@example.com', 'email'),
    )
    phone = forms.CharField(
        max_length=30,
        required=False,
        widget=_text_input('+977 98XXXXXXXX', 'tel'),
    )
    subject = forms.CharField(
        max_length=200,
        required=False,
        widget=_text_input('What would you like to ask about?'),
    )
    message = forms.CharField(
        error_messages={'required': 'Message is required'},
        widget=forms.Textarea(attrs={
            'class': 'form-control',
            'rows': 5,
            'placeholder': 'How can we help you?'
        }),
    )

    def clean_name(self):
        name = self.cleaned_data['name'].strip()
        if len(name) < 2:
            raise forms.ValidationError('Name must be at least 2 characters')
        return name

    def clean_email(self):
        email = self.cleaned_data['email'].strip()
        if not EMAIL_RE.match(email):
            raise forms.ValidationError('Please enter a valid email address')
        return email

    def clean_phone(self):
        phone = self.cleaned_data.get('phone', '').strip()
        if phone and not PHONE_RE.match(phone):
            raise forms.ValidationError('Please enter a valid phone number')
        return phone

    def clean_message(self):
        message = self.cleaned_data['message'].strip()
        if len(message) < 10:
            raise forms.ValidationError('Message should be at least 10 characters')
        return message


class ConsultationBookingForm(forms.Form):
    """Public booking form.

    The three dropdowns are filled from the lookup option tables; pass the
    option rows in as ``time_slots``, ``education_levels`` and
    ``study_interests``. Values outside those rows are rejected.
    """

    name = forms.CharField(
        max_length=100,
        error_messages={'required': 'Full name is required'},
        widget=_text_input('Your full name'),
    )
    email = forms.CharField(
        max_length=254,
        error_messages={'required': 'Email address is required'},
        widget=_text_input('you@example.com', 'email'),
    )
    phone = forms.CharField(
        max_length=30,
        error_messages={'required': 'Phone number is required'},
        widget=_text_input('+977 98XXXXXXXX', 'tel'),
    )
    preferred_date = forms.DateField(
        error_messages={
            'required': 'Preferred date is required',
            'invalid': 'Please enter a valid date',
        },
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
    )
    preferred_time = forms.ChoiceField(
        error_messages={
            'required': 'Preferred time slot is required',
            'invalid_choice': 'Please select one of the available time slots',
        },
        widget=forms.Select(attrs={'class': 'form-select'}),
    )
    alt_date = forms.DateField(
        required=False,
        error_messages={'invalid': 'Please enter a valid date'},
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
    )
    alt_time = forms.ChoiceField(
        required=False,
        error_messages={'invalid_choice': 'Please select one of the available time slots'},
        widget=forms.Select(attrs={'class': 'form-select'}),
    )
    education_level = forms.ChoiceField(
        error_messages={
            'required': 'Current education level is required',
            'invalid_choice': 'Please select one of the listed education levels',
        },
        widget=forms.Select(attrs={'class': 'form-select'}),
    )
    study_interests = forms.ChoiceField(
        error_messages={
            'required': 'Area of study interest is required',
            'invalid_choice': 'Please select one of the listed study areas',
        },
        widget=forms.Select(attrs={'class': 'form-select'}),
    )
    preferred_location = forms.ChoiceField(
        choices=Consultation.LOCATION_CHOICES,
        initial='online',
        widget=forms.RadioSelect,
    )
    message = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={
            'class': 'form-control',
            'rows': 4,
            'placeholder': 'Anything you would like us to know before the consultation?'
        }),
    )

    def __init__(self, *args, time_slots=(), education_levels=(), study_interests=(), **kwargs):
        super().__init__(*args, **kwargs)
        slot_choices = [(slot.label, slot.label) for slot in time_slots]

        self.fields['preferred_time'].choices = [('', 'Select a time slot')] + slot_choices
        self.fields['alt_time'].choices = [('', 'No alternate time')] + slot_choices
        self.fields['education_level'].choices = [('', 'Select your education level')] + [
            (level.label, level.label) for level in education_levels
        ]
        self.fields['study_interests'].choices = [('', 'Select an area of study')] + [
            (interest.label, interest.label) for interest in study_interests
        ]

    def clean_name(self):
        name = self.cleaned_data['name'].strip()
        if len(name) < 3:
            raise forms.ValidationError('Name must be at least 3 characters')
        return name

    def clean_email(self):
        email = self.cleaned_data['email'].strip()
        if not EMAIL_RE.match(email):
            raise forms.ValidationError('Please enter a valid email address')
        return email

    def clean_phone(self):
        phone = self.cleaned_data['phone'].strip()
        if not PHONE_RE.match(phone):
            raise forms.ValidationError('Please enter a valid phone number')
        return phone

    def clean_preferred_date(self):
        value = self.cleaned_data['preferred_date']
        if value < timezone.localdate():
            raise forms.ValidationError('Date cannot be in the past')
        return value

    def clean_alt_date(self):
        value = self.cleaned_data.get('alt_date')
        if value and value < timezone.localdate():
            raise forms.ValidationError('Date cannot be in the past')
        return value

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('alt_time') and not cleaned_data.get('alt_date') and 'alt_date' not in self.errors:
            self.add_error('alt_date', 'Alternate date is required if you specify an alternate time')
        return cleaned_data
