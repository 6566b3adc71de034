# dashboard/views.py

import logging

from django.contrib import messages
from django.contrib.auth import authenticate, login, logout
from django.core.paginator import Paginator
from django.http import Http404
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.csrf import ensure_csrf_cookie

from accounts.permissions import is_site_admin
from content import api
from content.uploads import ImageUploadError
from .decorators import admin_required, redirect_authenticated_user
from .forms import SiteSettingsForm
from .sections import LEAD_DETAIL_FIELDS, SECTIONS, SECTIONS_BY_KEY

logger = logging.getLogger(__name__)

PAGE_SIZE = 25


# ============================================
# HELPER FUNCTIONS
# ============================================

def get_section(key, action=None):
    section = SECTIONS_BY_KEY.get(key)
    if section is None:
        raise Http404('Unknown section')
    if action == 'create' and not section.can_create:
        raise Http404('Rows of this type cannot be created here')
    if action == 'delete' and not section.can_delete:
        raise Http404('Rows of this type cannot be deleted here')
    return section


def load_row(request, section, pk):
    """Fetch one row or raise 404; None (with a flash) on any other failure."""
    result = section.get_row(pk)
    if result['success']:
        return result['data']
    if result.get('not_found'):
        raise Http404(result['error'])
    messages.error(request, f"Error loading {section.label.lower()}: {result['error']}")
    return None


def save_form(request, form, save):
    """Upload images, hand the payload to the API and flash the outcome.

    Old image objects are deleted only once the row has been written; new
    uploads are deleted again when it was not. Returns True when the row
    was written.
    """
    try:
        payload = form.payload()
    except ImageUploadError as exc:
        form.finish_images(saved=False)
        messages.error(request, str(exc))
        return False

    result = save(payload)
    form.finish_images(saved=result['success'])
    if not result['success']:
        messages.error(request, result['error'])
        return False
    return True


def render_admin(request, template_name, context):
    """Render a page inside the admin layout, which lists every section."""
    return render(request, template_name, {'sections': SECTIONS, **context})


def lead_details(section, obj):
    fields = LEAD_DETAIL_FIELDS.get(section.key, [])
    details = []
    for name in fields:
        field = obj._meta.get_field(name)
        display = getattr(obj, f'get_{name}_display', None)
        details.append((field.verbose_name.capitalize(), display() if display else getattr(obj, name)))
    return details


# ============== AUTH VIEWS ==============

@redirect_authenticated_user
@ensure_csrf_cookie
def login_page(request):
    """Admin sign-in. Only users with an admin role row get in."""
    next_url = request.GET.get('next') or request.POST.get('next') or ''

    if request.method == 'POST':
        email = request.POST.get('email', '').strip().lower()
        password = request.POST.get('password')

        user = authenticate(request, email=email, password=password)

        if user is None:
            logger.info("Failed admin login for %s", email)
            messages.error(request, 'Invalid email or password.')
        elif not is_site_admin(user):
            logger.warning("Login by %s refused: no admin role", email)
            messages.error(request, 'Access denied. This account does not have admin access.')
        else:
            login(request, user)
            logger.info("Admin %s signed in", email)
            if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
                return redirect(next_url)
            return redirect('dashboard:index')

        return render(request, 'dashboard/login.html', {'email': email, 'next': next_url})

    return render(request, 'dashboard/login.html', {'next': next_url})


def logout_page(request):
    """Logout and redirect to login page."""
    storage = messages.get_messages(request)
    storage.used = True

    logout(request)
    messages.success(request, 'You have been logged out successfully.')
    return redirect('dashboard:login')


# ==========================
# DASHBOARD VIEWS
# ==========================

@admin_required
def index(request):
    """Counts of content rows and open leads."""
    counts = []
    for section in SECTIONS:
        result = section.list_rows()
        counts.append((section, len(result['data']) if result['success'] else None))

    new_inquiries = api.get_contact_inquiries(status='new')
    upcoming = api.get_consultations(status='scheduled')

    return render_admin(request, 'dashboard/index.html', {
        'page_title': 'Dashboard',
        'counts': counts,
        'new_inquiries': len(new_inquiries['data']) if new_inquiries['success'] else None,
        'scheduled_consultations': len(upcoming['data']) if upcoming['success'] else None,
    })


@admin_required
def section_list(request, section):
    section = get_section(section)
    status = request.GET.get('status', '')

    if section.key in LEAD_DETAIL_FIELDS:
        result = section.list_rows(status=status or None)
    else:
        result = section.list_rows()

    rows = []
    if result['success']:
        rows = [
            (obj, section.cells(obj), section.edit_url(obj), section.delete_url(obj))
            for obj in result['data']
        ]
    else:
        messages.error(request, f"Error loading {section.plural.lower()}: {result['error']}")

    page_obj = Paginator(rows, PAGE_SIZE).get_page(request.GET.get('page'))

    status_choices = []
    if section.key in LEAD_DETAIL_FIELDS:
        status_choices = section.form_class._meta.model._meta.get_field('status').choices

    return render_admin(request, 'dashboard/object_list.html', {
        'page_title': section.plural,
        'section': section,
        'page_obj': page_obj,
        'status': status,
        'status_choices': status_choices,
    })


@admin_required
def section_create(request, section):
    section = get_section(section, 'create')
    form = section.form_class(request.POST or None, request.FILES or None)

    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, section.create):
            messages.success(request, f'{section.label} created successfully!')
            return redirect(section.url_name('list'))

    return render_admin(request, 'dashboard/object_form.html', {
        'page_title': f'New {section.label.lower()}',
        'section': section,
        'form': form,
    })


@admin_required
def section_edit(request, section, pk):
    section = get_section(section)
    obj = load_row(request, section, pk)
    if obj is None:
        return redirect(section.url_name('list'))

    form = section.form_class(request.POST or None, request.FILES or None, instance=obj)

    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, lambda payload: section.update(pk, payload)):
            messages.success(request, f'{section.label} updated successfully!')
            return redirect(section.url_name('list'))

    return render_admin(request, 'dashboard/object_form.html', {
        'page_title': f'Edit {section.label.lower()}',
        'section': section,
        'form': form,
        'object': obj,
        'details': lead_details(section, obj),
    })


@admin_required
def section_delete(request, section, pk):
    section = get_section(section, 'delete')
    obj = load_row(request, section, pk)
    if obj is None:
        return redirect(section.url_name('list'))

    if request.method == 'POST':
        result = section.delete(pk)
        if result['success']:
            messages.success(request, f'{section.label} deleted successfully!')
        else:
            messages.error(request, f"Failed to delete {section.label.lower()}: {result['error']}")
        return redirect(section.url_name('list'))

    return render_admin(request, 'dashboard/object_confirm_delete.html', {
        'page_title': f'Delete {section.label.lower()}',
        'section': section,
        'object': obj,
        'title': getattr(obj, section.title_field),
    })


@admin_required
def site_settings_edit(request):
    result = api.get_site_settings()
    current = result['data'] if result['success'] else None
    if current is None:
        messages.warning(request, 'Site settings not found. Please ensure they are seeded.')

    form = SiteSettingsForm(request.POST or None, request.FILES or None, instance=current)

    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, api.update_site_settings):
            messages.success(request, 'Site settings updated successfully!')
            return redirect('dashboard:site_settings')

    return render_admin(request, 'dashboard/site_settings.html', {
        'page_title': 'Site Settings',
        'form': form,
    })
