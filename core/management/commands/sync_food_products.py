from django.core.management.base import BaseCommand, CommandError

from core.options import is_commerce_active


class Command(BaseCommand):
    help = "Create or update the commerce product of every published food product"

    def handle(self, *args, **options):
        if not is_commerce_active():
            raise CommandError("Commerce integration is not active")

        from commerce.sync import food_sync

        results = food_sync.bulk_sync()
        self.stdout.write(self.style.SUCCESS(
            f"Synced: {results['success']}, errors: {results['errors']}, skipped: {results['skipped']}"
        ))
