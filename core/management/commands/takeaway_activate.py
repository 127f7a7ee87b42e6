import logging

from django.core.management.base import BaseCommand, CommandError

from core.checks import requirement_errors
from core.options import is_commerce_active, set_default_options

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Prepare the takeaway system: placeholder product and default options"

    def handle(self, *args, **options):
        errors = requirement_errors()
        if errors:
            raise CommandError("\n".join(error.msg for error in errors))

        if is_commerce_active():
            from commerce.virtual import create_placeholder_product

            placeholder_id = create_placeholder_product()
            self.stdout.write(f"Placeholder product: #{placeholder_id}")
        else:
            self.stdout.write(self.style.WARNING(
                "Commerce integration is not active, skipping the placeholder product"
            ))

        set_default_options()

        logger.info("Takeaway system activated")
        self.stdout.write(self.style.SUCCESS("Takeaway system activated"))
