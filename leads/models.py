import uuid

from django.db import models


class ContactInquiry(models.Model):
    STATUS_CHOICES = [
        ('new', 'New'),
        ('read', 'Read'),
        ('replied', 'Replied'),
        ('closed', 'Closed'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    email = models.EmailField()
    phone = models.CharField(max_length=30, null=True, blank=True)
    interest = models.CharField(max_length=200, null=True, blank=True)
    message = models.TextField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='new')
    admin_notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'contact_inquiries'
        verbose_name_plural = 'contact inquiries'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} <{self.email}>"


class Consultation(models.Model):
    """A consultation booked through the public booking form."""

    STATUS_CHOICES = [
        ('scheduled', 'Scheduled'),
        ('completed', 'Completed'),
        ('cancelled', 'Cancelled'),
        ('rescheduled', 'Rescheduled'),
    ]
    LOCATION_CHOICES = [
        ('online', 'Online (video call)'),
        ('office', 'In person at our office'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    email = models.EmailField()
    phone = models.CharField(max_length=30)
    preferred_date = models.DateField()
    preferred_time = models.CharField(max_length=100)
    alt_date = models.DateField(null=True, blank=True)
    alt_time = models.CharField(max_length=100, null=True, blank=True)
    education_level = models.CharField(max_length=150)
    study_interest = models.CharField(max_length=150)
    preferred_location = models.CharField(max_length=10, choices=LOCATION_CHOICES, default='online')
    message = models.TextField(null=True, blank=True)
    status = models.CharField(max_length=12, choices=STATUS_CHOICES, default='scheduled')
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'consultations'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} - {self.preferred_date} {self.preferred_time}"
