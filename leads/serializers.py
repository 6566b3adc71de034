from rest_framework import serializers

from .models import Consultation


class ConsultationEmailSerializer(serializers.Serializer):
    """Booking fields accepted by the send-consultation-email endpoint."""

    name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=30)
    preferred_date = serializers.DateField()
    preferred_time = serializers.CharField(max_length=100)
    alt_date = serializers.DateField(required=False, allow_null=True)
    alt_time = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    education_level = serializers.CharField(max_length=150)
    study_interests = serializers.CharField(max_length=150)
    preferred_location = serializers.ChoiceField(
        choices=[c for c, _ in Consultation.LOCATION_CHOICES], default='online'
    )
    message = serializers.CharField(required=False, allow_blank=True, allow_null=True)
