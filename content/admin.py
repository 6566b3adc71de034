from django.contrib import admin

from .models import (
    FAQ, ConsultationTimeSlot, EducationLevelOption, HomepageProcessStep, Service,
    SiteSettings, StudyDestination, StudyInterestOption, TestPrepCourse, Testimonial,
    University,
)


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'display_order')
    ordering = ('display_order',)
    prepopulated_fields = {'slug': ('name',)}


@admin.register(University)
class UniversityAdmin(admin.ModelAdmin):
    list_display = ('name', 'location', 'ranking')
    search_fields = ('name', 'location')
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Testimonial)
class TestimonialAdmin(admin.ModelAdmin):
    list_display = ('name', 'university', 'status', 'created_at')
    list_filter = ('status',)


@admin.register(FAQ)
class FAQAdmin(admin.ModelAdmin):
    list_display = ('question', 'category', 'country', 'display_order')
    list_filter = ('category', 'country')


@admin.register(TestPrepCourse)
class TestPrepCourseAdmin(admin.ModelAdmin):
    list_display = ('test_name', 'duration', 'price', 'display_order')
    prepopulated_fields = {'slug': ('test_name',)}


@admin.register(StudyDestination)
class StudyDestinationAdmin(admin.ModelAdmin):
    list_display = ('display_name', 'country_slug', 'is_active', 'display_order')
    list_filter = ('is_active',)


@admin.register(HomepageProcessStep)
class HomepageProcessStepAdmin(admin.ModelAdmin):
    list_display = ('step_number', 'title')


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    list_display = ('site_name', 'primary_email', 'updated_at')

    def has_add_permission(self, request):
        return not SiteSettings.objects.exists()


@admin.register(ConsultationTimeSlot, EducationLevelOption, StudyInterestOption)
class LookupOptionAdmin(admin.ModelAdmin):
    list_display = ('__str__', 'is_active', 'display_order')
    list_filter = ('is_active',)
