"""
认证服务 - 第三方登录开户、邮箱注册、凭据验证
"""

import logging
from typing import Dict, Optional

from asgiref.sync import sync_to_async

from ..conf import auth_settings
from ..constants import Providers, ErrorCode, INVALID_CREDENTIALS_MESSAGE
from ..exceptions import (
    BadRequestError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from ..models import User, Account
from ..models.base import normalize_email
from ..serializers import RegisterSerializer, LoginOrCreateSerializer
from .role_directory import RoleDirectory
from .unit_of_work import ProvisioningUnitOfWork


logger = logging.getLogger(__name__)


class AuthService:
    """认证服务"""

    def __init__(self, role_directory: Optional[RoleDirectory] = None, unit_of_work_class=ProvisioningUnitOfWork):
        self.role_directory = role_directory
        self.unit_of_work_class = unit_of_work_class

    def login_or_create_account(self, data: Dict[str, any]) -> Dict[str, User]:
        """
        第三方登录，用户不存在时开户

        Args:
            data: {provider, display_name, provider_id, picture?, email?}

        Returns:
            Dict[str, User]: {'user': 用户对象}

        Raises:
            ValidationError: 输入无效
            NotFoundError: owner 角色未初始化
        """
        validated = self._validate(LoginOrCreateSerializer, data)
        provider = validated['provider']
        provider_id = validated['provider_id']
        email = validated.get('email')

        user = self._find_existing_user(email, provider, provider_id)
        if user is not None:
            # 已存在的用户原样返回，不关联新的登录方式
            return {'user': user}

        with self.unit_of_work_class() as uow:
            user = uow.users.create_user(
                email=email,
                name=validated['display_name'],
                profile_picture=validated.get('picture') or None,
            )
            uow.accounts.create(
                user=user,
                provider=provider,
                provider_id=provider_id,
            )
            workspace = self._bootstrap_workspace(uow, user)

        logger.info(f"Provisioned user {user.id} via {provider} with workspace {workspace.id}")
        return {'user': user}

    def register_user(self, body: Dict[str, any]) -> Dict[str, any]:
        """
        邮箱注册

        Args:
            body: {email, name, password}

        Returns:
            Dict[str, any]: {'user_id', 'workspace_id'}

        Raises:
            ValidationError: 输入无效
            BadRequestError: 邮箱已存在
            NotFoundError: owner 角色未初始化
        """
        validated = self._validate(RegisterSerializer, body)
        email = validated['email']

        if User.objects.find_by_email(email) is not None:
            raise BadRequestError("Email already exists", ErrorCode.AUTH_EMAIL_ALREADY_EXISTS)

        with self.unit_of_work_class() as uow:
            user = uow.users.create_user(
                email=email,
                name=validated['name'],
                password=validated['password'],
            )
            uow.accounts.create(
                user=user,
                provider=Providers.EMAIL,
                provider_id=email,
            )
            workspace = self._bootstrap_workspace(uow, user)

        logger.info(f"Registered user {user.id} with workspace {workspace.id}")
        return {
            'user_id': user.id,
            'workspace_id': workspace.id,
        }

    def verify_user(self, email: str, password: str, provider: Optional[str] = None) -> Dict[str, any]:
        """
        验证邮箱密码

        账号不存在和密码错误使用相同的提示，不暴露具体哪一项错误

        Returns:
            Dict[str, any]: 不包含密码的用户数据

        Raises:
            NotFoundError: 账号不存在或账号关联的用户不存在
            UnauthorizedError: 密码错误
        """
        provider = provider or auth_settings.DEFAULT_PROVIDER
        # 只有邮箱登录的标识统一小写，第三方标识可能区分大小写
        provider_id = normalize_email(email) if provider == Providers.EMAIL else email

        account = Account.objects.find_by_provider(provider, provider_id)
        if account is None:
            logger.info(f"Verification failed: no {provider} account")
            raise NotFoundError(INVALID_CREDENTIALS_MESSAGE, ErrorCode.AUTH_NOT_FOUND)

        user = User.objects.find_by_id(account.user_id)
        if user is None:
            logger.error(f"Account {account.id} references missing user {account.user_id}")
            raise NotFoundError("User not found for the given account", ErrorCode.AUTH_USER_NOT_FOUND)

        if not user.compare_password(password):
            logger.info(f"Verification failed: wrong password for user {user.id}")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE, ErrorCode.AUTH_UNAUTHORIZED_ACCESS)

        return user.omit_password()

    async def alogin_or_create_account(self, data: Dict[str, any]) -> Dict[str, User]:
        """login_or_create_account 的异步版本"""
        return await sync_to_async(self.login_or_create_account)(data)

    async def aregister_user(self, body: Dict[str, any]) -> Dict[str, any]:
        """register_user 的异步版本"""
        return await sync_to_async(self.register_user)(body)

    async def averify_user(self, email: str, password: str, provider: Optional[str] = None) -> Dict[str, any]:
        """verify_user 的异步版本"""
        return await sync_to_async(self.verify_user)(email, password, provider)

    def _find_existing_user(self, email, provider, provider_id):
        """先按邮箱查找，找不到再按登录方式查找"""
        if email:
            user = User.objects.find_by_email(email)
            if user is not None:
                return user

        # 已有的登录账号总是指向它的用户
        account = Account.objects.find_by_provider(provider, provider_id)
        if account is None:
            return None
        return User.objects.find_by_id(account.user_id)

    def _bootstrap_workspace(self, uow, user):
        """创建默认工作空间，授予 owner 角色并设为当前工作空间"""
        workspace = uow.workspaces.create_for_owner(user)

        role_directory = self.role_directory or RoleDirectory(uow.roles)
        owner_role = role_directory.resolve(auth_settings.OWNER_ROLE)

        uow.members.create(
            user=user,
            workspace=workspace,
            role=owner_role,
        )

        user.current_workspace = workspace
        user.save(update_fields=['current_workspace', 'updated_at'])
        return workspace

    @staticmethod
    def _validate(serializer_class, data):
        serializer = serializer_class(data=data or {})
        if not serializer.is_valid():
            raise ValidationError("Invalid input", errors=serializer.errors)
        return serializer.validated_data


def login_or_create_account(data):
    """便捷函数：第三方登录开户"""
    return AuthService().login_or_create_account(data)


def register_user(body):
    """便捷函数：邮箱注册"""
    return AuthService().register_user(body)


def verify_user(email, password, provider=None):
    """便捷函数：验证邮箱密码"""
    return AuthService().verify_user(email, password, provider)
