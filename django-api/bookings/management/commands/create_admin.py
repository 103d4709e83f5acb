from django.core.management.base import BaseCommand, CommandError

from bookings.domain.errors import DomainError
from bookings.handlers.dependencies import get_auth_service


class Command(BaseCommand):
    help = "Creates an administrator account (admins cannot self-register)"

    def add_arguments(self, parser):
        parser.add_argument("--name", required=True)
        parser.add_argument("--email", required=True)
        parser.add_argument("--password", required=True)

    def handle(self, *args, **options):
        try:
            identity = get_auth_service().create_admin(
                name=options["name"],
                email=options["email"],
                password=options["password"],
            )
        except DomainError as exc:
            raise CommandError(exc.message) from exc
        self.stdout.write(self.style.SUCCESS(f"Created admin {identity.email} ({identity.id})"))
