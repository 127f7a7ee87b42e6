from django.core.management.base import BaseCommand, CommandError

from core.options import is_commerce_active


class Command(BaseCommand):
    help = "Delete commerce products left behind by deleted food products"

    def handle(self, *args, **options):
        if not is_commerce_active():
            raise CommandError("Commerce integration is not active")

        from commerce.sync import food_sync

        cleaned_up = food_sync.cleanup_orphaned()
        self.stdout.write(self.style.SUCCESS(f"Removed {cleaned_up} orphaned products"))
