# dashboard/decorators.py

from functools import wraps

from django.contrib import messages
from django.contrib.auth import logout
from django.contrib.auth.views import redirect_to_login
from django.shortcuts import redirect
from django.urls import reverse

from accounts.permissions import is_site_admin


def redirect_authenticated_user(view_func):
    """Send signed-in admins straight to the dashboard from the login page."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if is_site_admin(request.user):
            return redirect('dashboard:index')
        return view_func(request, *args, **kwargs)
    return wrapper


def admin_required(view_func):
    """Require a session and a row in the admin role table.

    Checked on every request, so a revoked role or a sign-out elsewhere
    takes effect on the next admin page load.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path(), reverse('dashboard:login'))

        if not is_site_admin(request.user):
            logout(request)
            messages.error(request, 'Access denied. This account does not have admin access.')
            return redirect('dashboard:login')

        return view_func(request, *args, **kwargs)
    return wrapper
