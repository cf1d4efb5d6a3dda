from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.models import User


class Command(BaseCommand):
    help = "Create a back-office admin, or reset the password of an existing one."

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True)
        parser.add_argument("--password", required=True)
        parser.add_argument("--name", default="")

    def handle(self, *args, **options):
        email = options["email"].strip().lower()
        password = options["password"]
        if len(password) < 6:
            raise CommandError("Password must be at least 6 characters.")

        with transaction.atomic():
            user = User.objects.filter(email__iexact=email).first()
            if user is None:
                User.objects.create_admin(email=email, password=password, name=options["name"])
                self.stdout.write(self.style.SUCCESS(f"Created admin {email}"))
                return

            user.is_staff = True
            user.is_active = True
            if options["name"]:
                user.name = options["name"].strip()
            user.set_password(password)
            user.save()
            self.stdout.write(self.style.SUCCESS(f"Updated admin {email}"))
