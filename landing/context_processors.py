from django.utils import timezone

from content import api


def site_settings(request):
    """Site settings row (or None) for the header and footer of every page."""
    result = api.get_site_settings()
    return {
        'site_settings': result['data'] if result['success'] else None,
        'current_year': timezone.now().year,
    }
