from rest_framework import serializers

from .models import (
    FAQ, HomepageProcessStep, Service, SiteSettings, StudyDestination, TestPrepCourse,
    Testimonial, University,
)


class StringListField(serializers.ListField):
    child = serializers.CharField(allow_blank=False)


class ServiceSerializer(serializers.ModelSerializer):
    benefits = StringListField(required=False)

    class Meta:
        model = Service
        fields = [
            'id', 'name', 'slug', 'short_description', 'full_description', 'icon_name',
            'image_url', 'benefits', 'display_order', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class UniversitySerializer(serializers.ModelSerializer):
    popular_courses = StringListField(required=False)

    class Meta:
        model = University
        fields = [
            'id', 'name', 'slug', 'description', 'location', 'ranking', 'tuition_fees_range',
            'website_url', 'logo_url', 'banner_image_url', 'popular_courses',
            'accommodation_info', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class TestimonialSerializer(serializers.ModelSerializer):
    class Meta:
        model = Testimonial
        fields = [
            'id', 'name', 'quote', 'photo_url', 'university', 'program', 'category',
            'status', 'created_at',
        ]
        read_only_fields = ['id', 'created_at']


class FAQSerializer(serializers.ModelSerializer):
    class Meta:
        model = FAQ
        fields = ['id', 'question', 'answer', 'category', 'country', 'display_order']
        read_only_fields = ['id']


class TestPrepCourseSerializer(serializers.ModelSerializer):
    features = StringListField(required=False)
    schedule_options = StringListField(required=False)

    class Meta:
        model = TestPrepCourse
        fields = [
            'id', 'test_name', 'slug', 'description', 'duration', 'price', 'features',
            'schedule_options', 'display_order',
        ]
        read_only_fields = ['id']


class StudyDestinationSerializer(serializers.ModelSerializer):
    class Meta:
        model = StudyDestination
        exclude = ['created_at']
        read_only_fields = ['id', 'updated_at']

    def validate_quick_facts(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError('Must be a JSON object')
        return value

    def _validate_array(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError('Must be a JSON array')
        return value

    validate_country_specific_faqs = _validate_array
    validate_additional_sections = _validate_array
    validate_sidebar_nav_links = _validate_array


class HomepageProcessStepSerializer(serializers.ModelSerializer):
    class Meta:
        model = HomepageProcessStep
        fields = ['id', 'step_number', 'title', 'description', 'icon_name']
        read_only_fields = ['id']


class SiteSettingsSerializer(serializers.ModelSerializer):
    class Meta:
        model = SiteSettings
        fields = '__all__'
        read_only_fields = ['id', 'updated_at']
