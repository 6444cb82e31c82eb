"""
初始化工作空间角色
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from ...conf import auth_settings
from ...constants import Roles
from ...models import Role


class Command(BaseCommand):
    help = 'Seed workspace roles (owner, admin, member) - 开户前必须执行'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Overwrite permissions of roles that already exist'
        )

    def handle(self, *args, **options):
        """执行初始化"""
        role_permissions = auth_settings.DEFAULT_ROLES

        missing = [role for role in Roles.values if role not in role_permissions]
        if missing:
            raise CommandError(f"DEFAULT_ROLES is missing permissions for: {', '.join(missing)}")

        self.stdout.write("🌱 Seeding roles...")
        created_count = 0
        updated_count = 0

        with transaction.atomic():
            for name in Roles.values:
                permissions = list(role_permissions[name])
                role = Role.objects.find_by_name(name)

                if role is None:
                    Role.objects.create(name=name, permissions=permissions)
                    created_count += 1
                    self.stdout.write(f"  ✅ Created role '{name}' ({len(permissions)} permissions)")
                elif options['reset']:
                    role.permissions = permissions
                    role.save(update_fields=['permissions', 'updated_at'])
                    updated_count += 1
                    self.stdout.write(f"  🔄 Reset role '{name}' ({len(permissions)} permissions)")
                else:
                    self.stdout.write(f"  ⏭️  Role '{name}' already exists")

        self.stdout.write(
            self.style.SUCCESS(f'✅ Roles seeded: {created_count} created, {updated_count} reset')
        )
