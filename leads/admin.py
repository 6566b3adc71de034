from django.contrib import admin

from .models import Consultation, ContactInquiry


@admin.register(ContactInquiry)
class ContactInquiryAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'interest', 'status', 'created_at')
    list_filter = ('status',)
    search_fields = ('name', 'email')


@admin.register(Consultation)
class ConsultationAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'preferred_date', 'preferred_time', 'status')
    list_filter = ('status', 'preferred_location')
    search_fields = ('name', 'email')
