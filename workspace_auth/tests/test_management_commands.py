"""
测试管理命令
"""

from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase, override_settings

from ..constants import Roles, ROLE_PERMISSIONS
from ..models import User, Workspace, Role


class SeedRolesCommandTest(TestCase):
    """测试 seed_roles 命令"""

    def test_seed_roles_creates_all_roles(self):
        """测试创建全部角色"""
        out = StringIO()
        call_command('seed_roles', stdout=out)

        self.assertEqual(set(Role.objects.values_list('name', flat=True)), set(Roles.values))
        owner = Role.objects.get(name=Roles.OWNER)
        self.assertEqual(owner.permissions, ROLE_PERMISSIONS[Roles.OWNER])
        self.assertIn('3 created', out.getvalue())

    def test_seed_roles_is_idempotent(self):
        """测试重复执行不重复创建"""
        call_command('seed_roles', stdout=StringIO())
        out = StringIO()
        call_command('seed_roles', stdout=out)

        self.assertEqual(Role.objects.count(), 3)
        self.assertIn('0 created', out.getvalue())

    def test_seed_roles_reset(self):
        """测试 --reset 覆盖权限"""
        Role.objects.create(name=Roles.MEMBER, permissions=['view_only'])

        call_command('seed_roles', '--reset', stdout=StringIO())

        member = Role.objects.get(name=Roles.MEMBER)
        self.assertEqual(member.permissions, ROLE_PERMISSIONS[Roles.MEMBER])

    @override_settings(WORKSPACE_AUTH={'DEFAULT_ROLES': {'owner': ['view_only']}})
    def test_seed_roles_missing_permissions(self):
        """测试配置缺少角色"""
        with self.assertRaises(CommandError):
            call_command('seed_roles', stdout=StringIO())

        self.assertEqual(Role.objects.count(), 0)


class CreateAuthUserCommandTest(TestCase):
    """测试 create_auth_user 命令"""

    def test_create_user(self):
        """测试创建用户和工作空间"""
        call_command('seed_roles', stdout=StringIO())
        out = StringIO()

        call_command(
            'create_auth_user',
            email='cli@example.com',
            name='CLI User',
            password='password123',
            stdout=out
        )

        user = User.objects.get(email='cli@example.com')
        self.assertTrue(user.compare_password('password123'))
        self.assertEqual(Workspace.objects.get(owner=user).id, user.current_workspace_id)
        self.assertIn(str(user.id), out.getvalue())

    def test_create_user_without_roles(self):
        """测试角色未初始化"""
        with self.assertRaises(CommandError) as ctx:
            call_command(
                'create_auth_user',
                email='cli@example.com',
                name='CLI User',
                password='password123',
                stdout=StringIO()
            )

        self.assertIn('seed_roles', str(ctx.exception))
        self.assertFalse(User.objects.exists())

    def test_create_duplicate_user(self):
        """测试邮箱已存在"""
        call_command('seed_roles', stdout=StringIO())
        options = dict(email='cli@example.com', name='CLI User', password='password123', stdout=StringIO())
        call_command('create_auth_user', **options)

        with self.assertRaises(CommandError):
            call_command('create_auth_user', **options)

    def test_create_user_invalid_email(self):
        """测试无效邮箱"""
        call_command('seed_roles', stdout=StringIO())

        with self.assertRaises(CommandError):
            call_command(
                'create_auth_user',
                email='not-an-email',
                name='CLI User',
                password='password123',
                stdout=StringIO()
            )


class CheckAuthConfigCommandTest(TestCase):
    """测试 check_auth_config 命令"""

    def test_check_passes_when_seeded(self):
        """测试角色已初始化时检查通过"""
        call_command('seed_roles', stdout=StringIO())
        out = StringIO()

        call_command('check_auth_config', stdout=out)

        self.assertIn('Configuration check completed', out.getvalue())

    def test_check_fails_without_owner_role(self):
        """测试缺少 owner 角色"""
        with self.assertRaises(CommandError):
            call_command('check_auth_config', stdout=StringIO())

    @override_settings(WORKSPACE_AUTH={'OWNER_ROLE': 'superuser'})
    def test_check_fails_on_invalid_settings(self):
        """测试配置无效"""
        with self.assertRaises(CommandError):
            call_command('check_auth_config', stdout=StringIO())
