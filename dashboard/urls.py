# dashboard/urls.py

from django.urls import path
from . import views
from .sections import SECTIONS

app_name = 'dashboard'

urlpatterns = [
    # AUTH URLS (Public)
    path('login/', views.login_page, name='login'),
    path('logout/', views.logout_page, name='logout'),

    path('', views.index, name='index'),
    path('settings/', views.site_settings_edit, name='site_settings'),
]

# List / new / edit / delete pages for every managed content type
for section in SECTIONS:
    kwargs = {'section': section.key}
    prefix = section.key.replace('_', '-')
    urlpatterns += [
        path(f'{prefix}/', views.section_list, kwargs, name=f'{section.key}_list'),
        path(f'{prefix}/<uuid:pk>/edit/', views.section_edit, kwargs, name=f'{section.key}_edit'),
    ]
    if section.can_create:
        urlpatterns.append(path(f'{prefix}/new/', views.section_create, kwargs, name=f'{section.key}_create'))
    if section.can_delete:
        urlpatterns.append(path(f'{prefix}/<uuid:pk>/delete/', views.section_delete, kwargs, name=f'{section.key}_delete'))
