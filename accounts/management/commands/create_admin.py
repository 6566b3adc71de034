from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.models import AdminUser, User


class Command(BaseCommand):
    help = 'Create (or promote) a user and grant access to the admin CMS'

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True)
        parser.add_argument('--password', help='Required when the user does not exist yet')

    @transaction.atomic
    def handle(self, *args, **options):
        email = options['email'].strip().lower()
        user = User.objects.filter(email=email).first()

        if user is None:
            if not options['password']:
                raise CommandError('--password is required to create a new user')
            user = User.objects.create_user(email=email, password=options['password'])
            self.stdout.write(f'Created user: {email}')

        admin_row, created = AdminUser.objects.update_or_create(
            user=user,
            defaults={'email': email, 'role': AdminUser.ADMIN},
        )

        verb = 'Granted' if created else 'Updated'
        self.stdout.write(self.style.SUCCESS(f'{verb} {admin_row.role} access for {email}'))
