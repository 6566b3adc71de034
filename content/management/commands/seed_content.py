from django.core.management.base import BaseCommand, CommandError

from content.seed import run_seed


class Command(BaseCommand):
    help = 'Seeds the database with demo site content'

    def handle(self, *args, **options):
        self.stdout.write('Seeding content...')

        result = run_seed()
        if not result['success']:
            raise CommandError(result['message'])

        self.stdout.write(self.style.SUCCESS(result['message']))
