"""
检查Workspace Auth配置
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError

from ...conf import auth_settings
from ...constants import Roles
from ...exceptions import ConfigurationError
from ...models import Role


class Command(BaseCommand):
    help = 'Check Workspace Auth configuration'

    def handle(self, *args, **options):
        """执行配置检查"""
        self.stdout.write("🔍 Checking Workspace Auth configuration...")
        self.stdout.write("=" * 60)

        # 检查配置项
        self.stdout.write("\n📋 Settings:")
        self.stdout.write(f"  🏠 Default Workspace Name: {auth_settings.DEFAULT_WORKSPACE_NAME}")
        self.stdout.write(f"  📝 Description Template: {auth_settings.WORKSPACE_DESCRIPTION_TEMPLATE}")
        self.stdout.write(f"  👑 Owner Role: {auth_settings.OWNER_ROLE}")
        self.stdout.write(f"  🔑 Default Provider: {auth_settings.DEFAULT_PROVIDER}")
        self.stdout.write(f"  🔐 Password Min Length: {auth_settings.PASSWORD_MIN_LENGTH}")
        self.stdout.write(f"  🧾 Atomic Provisioning: {'✅ On' if auth_settings.ATOMIC_PROVISIONING else '⚠️  Off'}")

        try:
            auth_settings.validate()
        except ConfigurationError as e:
            self.stdout.write(f"\n❌ {e.message}")
            raise CommandError(f"Configuration check failed: {e.message}")

        # 检查角色是否已初始化
        self.stdout.write("\n👥 Roles:")
        try:
            seeded = set(Role.objects.values_list('name', flat=True))
        except DatabaseError as e:
            raise CommandError(f"Database check failed: {e}")

        for name in Roles.values:
            status = "✅" if name in seeded else "❌"
            self.stdout.write(f"    {status} {name}")

        if auth_settings.OWNER_ROLE not in seeded:
            self.stdout.write("  💡 Run 'python manage.py seed_roles' before users can sign up")
            raise CommandError(f"Role '{auth_settings.OWNER_ROLE}' is not seeded")

        self.stdout.write(f"\n{'=' * 60}")
        self.stdout.write(self.style.SUCCESS('✅ Configuration check completed!'))
