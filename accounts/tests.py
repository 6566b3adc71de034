import pytest
from io import StringIO
from django.contrib.auth.models import AnonymousUser
from django.core.management import call_command, CommandError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIRequestFactory

from accounts.models import User, AdminUser
from accounts.permissions import IsSiteAdmin, ReadOnlyOrSiteAdmin, is_site_admin


# ============================================
# USER MODEL TESTS
# ============================================

@pytest.mark.django_db
class TestUserModel:
    """Email login identity"""

    def test_create_user(self):
        user = User.objects.create_user(
            email='newuser@test.com',
            password='securepass123',
            first_name='John',
            last_name='Doe',
        )

        assert user.pk is not None
        assert user.check_password('securepass123')
        assert user.full_name == 'John Doe'
        assert is_site_admin(user) is False

    def test_full_name_falls_back_to_email(self):
        user = User.objects.create_user(email='noname@test.com', password='pass12345')

        assert user.full_name == 'noname@test.com'

    def test_email_is_required(self):
        with pytest.raises(ValueError, match='Email is required'):
            User.objects.create_user(email='', password='test')

    def test_create_superuser(self):
        admin = User.objects.create_superuser(email='root@test.com', password='rootpass123')

        assert admin.is_staff is True
        assert admin.is_superuser is True

    def test_admin_row_copies_email(self, regular_user):
        row = AdminUser.objects.create(user=regular_user)

        assert row.email == 'visitor@test.com'
        assert is_site_admin(regular_user) is True


# ============================================
# PERMISSIONS
# ============================================

@pytest.mark.django_db
class TestPermissions:
    """Admin access means a row in the admin role table"""

    def _request(self, method, user=None):
        factory = APIRequestFactory()
        request = getattr(factory, method)('/api/content/services/')
        request.user = user or AnonymousUser()
        return request

    def test_is_site_admin(self, admin_user, regular_user):
        assert is_site_admin(admin_user) is True
        assert is_site_admin(regular_user) is False
        assert is_site_admin(AnonymousUser()) is False
        assert is_site_admin(None) is False

    def test_superuser_without_row_is_not_site_admin(self):
        root = User.objects.create_superuser(email='root@test.com', password='rootpass123')

        assert is_site_admin(root) is False

    def test_row_without_admin_role_is_not_site_admin(self, admin_user):
        AdminUser.objects.filter(user=admin_user).update(role='suspended')

        assert is_site_admin(admin_user) is False

    def test_read_only_or_site_admin(self, admin_user, regular_user):
        permission = ReadOnlyOrSiteAdmin()

        assert permission.has_permission(self._request('get'), None) is True
        assert permission.has_permission(self._request('post'), None) is False
        assert permission.has_permission(self._request('post', regular_user), None) is False
        assert permission.has_permission(self._request('post', admin_user), None) is True

    def test_is_site_admin_permission(self, admin_user):
        permission = IsSiteAdmin()

        assert permission.has_permission(self._request('get'), None) is False
        assert permission.has_permission(self._request('get', admin_user), None) is True


# ============================================
# TOKEN ENDPOINTS
# ============================================

@pytest.mark.django_db
class TestTokenLogin:

    def test_token_for_admin(self, api_client, admin_user):
        response = api_client.post(reverse('accounts:token'), {
            'email': 'admin@dreamedge.test',
            'password': 'adminpass123',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data
        assert response.data['user']['is_admin'] is True

    def test_token_for_non_admin_reports_role(self, api_client, regular_user):
        response = api_client.post(reverse('accounts:token'), {
            'email': 'visitor@test.com',
            'password': 'visitorpass123',
        }, format='json')

        assert response.data['user']['is_admin'] is False

    def test_wrong_password(self, api_client, admin_user):
        response = api_client.post(reverse('accounts:token'), {
            'email': 'admin@dreamedge.test',
            'password': 'nope',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False

    def test_bearer_token_grants_admin_writes(self, api_client, admin_user):
        token = api_client.post(reverse('accounts:token'), {
            'email': 'admin@dreamedge.test',
            'password': 'adminpass123',
        }, format='json').data['access']

        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        response = api_client.post(reverse('content:faq-list'), {
            'question': 'Do you charge for consultations?',
            'answer': 'No, the first one is free.',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED

    def test_current_user(self, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)

        response = api_client.get(reverse('accounts:current-user'))

        assert response.data['email'] == 'admin@dreamedge.test'
        assert response.data['admin_role']['role'] == 'admin'


# ============================================
# CREATE ADMIN COMMAND
# ============================================

@pytest.mark.django_db
class TestCreateAdminCommand:

    def test_creates_user_and_role(self):
        out = StringIO()

        call_command('create_admin', '--email', 'Owner@DreamEdge.test', '--password', 'ownerpass123', stdout=out)

        user = User.objects.get(email='owner@dreamedge.test')
        assert user.check_password('ownerpass123')
        assert is_site_admin(user)
        assert 'Granted admin access' in out.getvalue()

    def test_promotes_existing_user(self, regular_user):
        out = StringIO()

        call_command('create_admin', '--email', 'visitor@test.com', stdout=out)

        assert AdminUser.objects.get(user=regular_user).role == 'admin'
        assert regular_user.check_password('visitorpass123')
        assert 'Created user' not in out.getvalue()

    def test_rerun_restores_admin_role(self, admin_user):
        AdminUser.objects.filter(user=admin_user).update(role='suspended')
        out = StringIO()

        call_command('create_admin', '--email', 'admin@dreamedge.test', stdout=out)

        assert is_site_admin(admin_user)
        assert 'Updated admin access' in out.getvalue()

    def test_new_user_needs_password(self):
        with pytest.raises(CommandError, match='--password is required'):
            call_command('create_admin', '--email', 'nobody@test.com', stdout=StringIO())


@pytest.mark.django_db
class TestDjangoAdminRegistration:

    def test_superuser_can_browse_admin_roles(self, client, admin_user):
        root = User.objects.create_superuser(email='root@test.com', password='rootpass123')
        client.force_login(root)

        response = client.get('/django-admin/accounts/adminuser/')

        assert response.status_code == 200
        assert b'admin@dreamedge.test' in response.content
