"""
创建邮箱登录用户 (含默认工作空间)
"""

from getpass import getpass

from django.core.management.base import BaseCommand, CommandError

from ...services import AuthService
from ...exceptions import BadRequestError, NotFoundError, ValidationError


class Command(BaseCommand):
    help = 'Register an email/password user together with their default workspace'

    def add_arguments(self, parser):
        parser.add_argument(
            '--email',
            type=str,
            help='Email address of the user'
        )
        parser.add_argument(
            '--password',
            type=str,
            help='Password of the user'
        )
        parser.add_argument(
            '--name',
            type=str,
            help='Display name of the user'
        )

    def handle(self, *args, **options):
        """执行创建"""
        email = options.get('email')
        password = options.get('password')
        name = options.get('name')

        # 交互式输入
        if not email:
            email = input('Email: ').strip()

        if not name:
            name = input('Name: ').strip()

        if not password:
            password = getpass('Password: ')
            confirm_password = getpass('Confirm password: ')
            if password != confirm_password:
                raise CommandError("Passwords do not match")

        self.stdout.write(f"🚀 Creating user: {email}")

        try:
            result = AuthService().register_user({
                'email': email,
                'name': name,
                'password': password,
            })
        except ValidationError as e:
            raise CommandError(f"Validation error: {e.errors}")
        except BadRequestError:
            raise CommandError(f'User with email "{email}" already exists')
        except NotFoundError as e:
            raise CommandError(f"{e.message}. Run 'python manage.py seed_roles' first")

        self.stdout.write(self.style.SUCCESS('✅ User created successfully!'))
        self.stdout.write(f"   User ID: {result['user_id']}")
        self.stdout.write(f"   Workspace ID: {result['workspace_id']}")
