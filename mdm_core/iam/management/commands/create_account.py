# mdm_core/iam/management/commands/create_account.py
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from mdm_core.iam.models import Role
from mdm_core.iam.services.accounts import AccountService


class Command(BaseCommand):
    help = "Create a login with its role profile (Physician, Staff or Attorney)."

    def add_arguments(self, parser):
        parser.add_argument("email")
        parser.add_argument("--password", required=True)
        parser.add_argument("--role", choices=Role.values, default=Role.PHYSICIAN)
        parser.add_argument("--first-name", default="")
        parser.add_argument("--last-name", default="")
        parser.add_argument("--physician", help="Email of the physician a Staff/Attorney account works for.")

    def handle(self, *args, **options):
        physician_id = None
        if options["physician"]:
            physician = get_user_model().objects.filter(
                username=AccountService.normalize_email(options["physician"]),
                profile__role=Role.PHYSICIAN,
            ).first()
            if physician is None:
                raise CommandError(f"No physician account for {options['physician']}")
            physician_id = physician.pk

        user = AccountService.create_user(
            email=options["email"],
            password=options["password"],
            first_name=options["first_name"],
            last_name=options["last_name"],
            role=options["role"],
            physician_id=physician_id,
        )
        self.stdout.write(self.style.SUCCESS(f"Created {options['role']} account {user.email} (id={user.pk})"))
