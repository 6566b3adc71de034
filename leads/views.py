import logging

from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from notifications.services import EmailService
from .serializers import ConsultationEmailSerializer

logger = logging.getLogger(__name__)


class SendConsultationEmailView(APIView):
    """Send the admin notification and student confirmation for a booking."""

    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = ConsultationEmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = EmailService.send_consultation_emails(serializer.validated_data)

        if not result['success']:
            logger.error("Error sending consultation emails for %s", serializer.validated_data['email'])
            return Response(
                {
                    'success': False,
                    'error': 'Failed to send email',
                    'admin_sent': result['admin_sent'],
                    'student_sent': result['student_sent'],
                },
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response({'success': True, 'message': 'Emails sent successfully'})
