"""
Fetch-then-render helper shared by the public pages.

A page names its sections and the content API call behind each one:

    page = load_sections(
        services=lambda: api.get_services(limit=6),
        faqs=lambda: api.get_faqs(limit=6),
    )

Each call returns an envelope; successful sections land in ``page.data``,
failed ones in ``page.errors``.
"""
import logging

from django.http import Http404
from django.shortcuts import render

logger = logging.getLogger(__name__)


class PageData:

    def __init__(self):
        self.data = {}
        self.errors = {}
        self.missing = set()

    @property
    def ok(self):
        return not self.errors

    def failed(self, *sections):
        return [name for name in sections if name in self.errors]


def load_sections(**loaders):
    """Run each loader in turn and sort the results into data and errors."""
    page = PageData()
    for name, loader in loaders.items():
        result = loader()
        if result['success']:
            page.data[name] = result['data']
            continue

        page.errors[name] = result['error']
        if result.get('not_found'):
            page.missing.add(name)
        else:
            logger.warning("Section %s failed to load: %s", name, result['error'])
    return page


def render_page(request, template_name, page, required=(), context=None):
    """Render ``template_name`` with the loaded sections.

    A missing required row is a 404; any other failure of a required
    section shows the error panel instead of the page.
    """
    if any(name in page.missing for name in required):
        raise Http404('Page not found')

    failed = page.failed(*required)
    if failed:
        return render(request, 'landing/error.html', {
            'error': page.errors[failed[0]],
            'retry_url': request.get_full_path(),
        }, status=503)

    full_context = dict(page.data)
    full_context['section_errors'] = page.errors
    full_context.update(context or {})
    return render(request, template_name, full_context)
