"""
Workspace Auth 常量定义

所有枚举值在代码层面约束，角色权限作为种子数据写入数据库
"""

from typing import List, Dict

from django.db import models


class Providers(models.TextChoices):
    """登录方式"""
    GOOGLE = 'GOOGLE', 'Google'
    GITHUB = 'GITHUB', 'GitHub'
    FACEBOOK = 'FACEBOOK', 'Facebook'
    EMAIL = 'EMAIL', 'Email'


class Roles(models.TextChoices):
    """工作空间角色"""
    OWNER = 'owner', 'Owner'
    ADMIN = 'admin', 'Admin'
    MEMBER = 'member', 'Member'


# 角色权限定义 (seed_roles 命令写入 Role 表)
ROLE_PERMISSIONS: Dict[str, List[str]] = {
    Roles.OWNER: [
        'create_workspace', 'delete_workspace', 'edit_workspace',
        'manage_workspace_settings',
        'add_member', 'change_member_role', 'remove_member',
        'create_project', 'edit_project', 'delete_project',
        'create_task', 'edit_task', 'delete_task',
        'view_only',
    ],
    Roles.ADMIN: [
        'add_member',
        'create_project', 'edit_project', 'delete_project',
        'create_task', 'edit_task', 'delete_task',
        'manage_workspace_settings',
        'view_only',
    ],
    Roles.MEMBER: [
        'view_only',
        'create_task', 'edit_task',
    ],
}

# 默认设置
DEFAULT_WORKSPACE_NAME = 'My Workspace'
DEFAULT_WORKSPACE_DESCRIPTION = 'Workspace created for {name}'
DEFAULT_INVITE_CODE_LENGTH = 8
DEFAULT_PASSWORD_MIN_LENGTH = 4

# 凭据错误统一提示，不区分是邮箱还是密码错误
INVALID_CREDENTIALS_MESSAGE = 'Invalid email or password'


# HTTP 状态码
class HttpStatus:
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500


# 错误代码
class ErrorCode:
    # 认证错误
    AUTH_EMAIL_ALREADY_EXISTS = 'AUTH_EMAIL_ALREADY_EXISTS'
    AUTH_USER_NOT_FOUND = 'AUTH_USER_NOT_FOUND'
    AUTH_NOT_FOUND = 'AUTH_NOT_FOUND'
    AUTH_UNAUTHORIZED_ACCESS = 'AUTH_UNAUTHORIZED_ACCESS'

    # 资源错误
    RESOURCE_NOT_FOUND = 'RESOURCE_NOT_FOUND'

    # 验证错误
    VALIDATION_ERROR = 'VALIDATION_ERROR'

    # 系统错误
    INTERNAL_SERVER_ERROR = 'INTERNAL_SERVER_ERROR'
    CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
