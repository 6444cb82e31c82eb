"""
Workspace Auth 业务逻辑服务
"""

from .auth_service import (
    AuthService,
    login_or_create_account,
    register_user,
    verify_user,
)
from .role_directory import RoleDirectory
from .unit_of_work import ProvisioningUnitOfWork

__all__ = [
    'AuthService',
    'RoleDirectory',
    'ProvisioningUnitOfWork',
    'login_or_create_account',
    'register_user',
    'verify_user',
]
