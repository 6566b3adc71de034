# notifications/services.py

import logging
from datetime import date, datetime

from django.conf import settings
from django.core.mail import send_mail, EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)

LOCATION_LABELS = {
    'online': 'Online (Zoom/Google Meet)',
    'office': 'In-Office Visit',
}


class EmailService:
    """Service for sending emails."""

    @staticmethod
    def _get_base_url():
        """Get the base URL for the site."""
        return getattr(settings, 'SITE_URL', 'http://localhost:8000').rstrip('/')

    @staticmethod
    def _format_date(value):
        """'2026-01-05' -> 'Monday, January 05, 2026'."""
        if not value:
            return 'Not specified'
        if isinstance(value, str):
            try:
                value = date.fromisoformat(value[:10])
            except ValueError:
                return value
        if isinstance(value, datetime):
            value = value.date()
        return value.strftime('%A, %B %d, %Y')

    @staticmethod
    def send_email(subject, template_name, context, recipient_email):
        """Send an email using HTML template."""
        try:
            html_content = render_to_string(f'emails/{template_name}.html', context)
            text_content = strip_tags(html_content)
        except Exception as e:
            logger.warning("Template error rendering %s: %s", template_name, e)
            text_content = context.get('message', '')
            html_content = None

        try:
            if html_content:
                email = EmailMultiAlternatives(
                    subject=subject,
                    body=text_content,
                    from_email=settings.DEFAULT_FROM_EMAIL,
                    to=[recipient_email]
                )
                email.attach_alternative(html_content, "text/html")
                email.send()
            else:
                send_mail(
                    subject=subject,
                    message=text_content,
                    from_email=settings.DEFAULT_FROM_EMAIL,
                    recipient_list=[recipient_email],
                    fail_silently=False
                )
            logger.info("Sent '%s' to %s", subject, recipient_email)
            return True
        except Exception as e:
            logger.error("Email error sending '%s' to %s: %s", subject, recipient_email, e)
            return False

    @staticmethod
    def _booking_context(booking):
        location = booking.get('preferred_location') or 'online'
        return {
            'name': booking.get('name', ''),
            'email': booking.get('email', ''),
            'phone': booking.get('phone', ''),
            'preferred_date': EmailService._format_date(booking.get('preferred_date')),
            'preferred_time': booking.get('preferred_time', ''),
            'alt_date': EmailService._format_date(booking.get('alt_date')) if booking.get('alt_date') else '',
            'alt_time': booking.get('alt_time') or '',
            'education_level': booking.get('education_level', ''),
            'study_interest': booking.get('study_interest') or booking.get('study_interests', ''),
            'location_label': LOCATION_LABELS.get(location, location),
            'is_online': location == 'online',
            'message': booking.get('message') or '',
            'site_url': EmailService._get_base_url(),
            'contact_email': settings.CONTACT_EMAIL,
            'contact_phone': settings.CONTACT_PHONE,
        }

    @staticmethod
    def send_consultation_admin_notification(booking):
        """Tell the consultancy about a new booking."""
        context = EmailService._booking_context(booking)
        recipient = settings.ADMIN_EMAIL or settings.CONTACT_EMAIL

        return EmailService.send_email(
            subject=f"New Consultation Booking - {context['name']}",
            template_name='consultation_admin',
            context=context,
            recipient_email=recipient
        )

    @staticmethod
    def send_consultation_confirmation(booking):
        """Confirm the booking to the student."""
        context = EmailService._booking_context(booking)

        return EmailService.send_email(
            subject="Your Consultation is Booked - Dream Edge",
            template_name='consultation_student',
            context=context,
            recipient_email=context['email']
        )

    @staticmethod
    def send_consultation_emails(booking):
        """Send both booking emails.

        Both sends are always attempted. ``success`` is True only when both
        went out.
        """
        admin_sent = EmailService.send_consultation_admin_notification(booking)
        student_sent = EmailService.send_consultation_confirmation(booking)

        if not (admin_sent and student_sent):
            logger.error(
                "Consultation emails for %s incomplete (admin=%s, student=%s)",
                booking.get('email'), admin_sent, student_sent,
            )

        return {
            'success': admin_sent and student_sent,
            'admin_sent': admin_sent,
            'student_sent': student_sent,
        }
