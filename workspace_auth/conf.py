"""
Workspace Auth Library - 极简配置
所有配置都有默认值，按需在 settings.WORKSPACE_AUTH 中覆盖
"""

from decouple import config, UndefinedValueError
from django.conf import settings

from .constants import (
    Providers,
    Roles,
    ROLE_PERMISSIONS,
    DEFAULT_WORKSPACE_NAME,
    DEFAULT_WORKSPACE_DESCRIPTION,
    DEFAULT_INVITE_CODE_LENGTH,
    DEFAULT_PASSWORD_MIN_LENGTH,
)
from .exceptions import ConfigurationError


class WorkspaceAuthSettings:
    """
    极简配置类 - 查找顺序:
    1. settings.WORKSPACE_AUTH 中的显式配置
    2. 环境变量 WORKSPACE_AUTH_<NAME> (通过 python-decouple 读取，支持 .env)
    3. DEFAULTS 默认值
    """

    ENV_PREFIX = 'WORKSPACE_AUTH_'

    DEFAULTS = {
        # 工作空间初始化
        'DEFAULT_WORKSPACE_NAME': DEFAULT_WORKSPACE_NAME,
        'WORKSPACE_DESCRIPTION_TEMPLATE': DEFAULT_WORKSPACE_DESCRIPTION,
        'INVITE_CODE_LENGTH': DEFAULT_INVITE_CODE_LENGTH,

        # 角色配置
        'OWNER_ROLE': Roles.OWNER.value,
        'DEFAULT_ROLES': {str(role): list(perms) for role, perms in ROLE_PERMISSIONS.items()},

        # 认证配置
        'DEFAULT_PROVIDER': Providers.EMAIL.value,
        'PASSWORD_MIN_LENGTH': DEFAULT_PASSWORD_MIN_LENGTH,

        # 开户流程在一个事务内完成，关闭后恢复逐条写入
        'ATOMIC_PROVISIONING': True,
    }

    @property
    def user_settings(self):
        """每次读取，保证 override_settings 生效"""
        return getattr(settings, 'WORKSPACE_AUTH', None) or {}

    def __getattr__(self, name):
        if name not in self.DEFAULTS:
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

        # 1. 显式配置
        if name in self.user_settings:
            return self.user_settings[name]

        # 2. 环境变量
        default_value = self.DEFAULTS[name]
        env_value = self._from_env(name, default_value)
        if env_value is not None:
            return env_value

        # 3. 默认值
        return default_value

    def _from_env(self, name, default_value):
        """从环境变量读取，按默认值类型转换"""
        key = f'{self.ENV_PREFIX}{name}'
        if isinstance(default_value, (dict, list)):
            return None
        cast = type(default_value) if isinstance(default_value, (bool, int)) else str
        try:
            return config(key, cast=cast)
        except UndefinedValueError:
            return None
        except ValueError as e:
            raise ConfigurationError(f"Invalid value for {key}: {e}")

    def validate(self):
        """验证配置，在应用启动和 check_auth_config 时调用"""
        if not self.DEFAULT_WORKSPACE_NAME:
            raise ConfigurationError("WORKSPACE_AUTH.DEFAULT_WORKSPACE_NAME must not be empty")

        if '{name}' not in self.WORKSPACE_DESCRIPTION_TEMPLATE:
            raise ConfigurationError(
                "WORKSPACE_AUTH.WORKSPACE_DESCRIPTION_TEMPLATE must contain a '{name}' placeholder"
            )

        if self.OWNER_ROLE not in Roles.values:
            raise ConfigurationError(
                f"WORKSPACE_AUTH.OWNER_ROLE must be one of {', '.join(Roles.values)}"
            )

        if self.DEFAULT_PROVIDER not in Providers.values:
            raise ConfigurationError(
                f"WORKSPACE_AUTH.DEFAULT_PROVIDER must be one of {', '.join(Providers.values)}"
            )

        if not isinstance(self.ATOMIC_PROVISIONING, bool):
            raise ConfigurationError("WORKSPACE_AUTH.ATOMIC_PROVISIONING must be a boolean")

        try:
            invite_code_length = int(self.INVITE_CODE_LENGTH)
        except (TypeError, ValueError):
            raise ConfigurationError("WORKSPACE_AUTH.INVITE_CODE_LENGTH must be an integer")
        if invite_code_length < 4:
            raise ConfigurationError("WORKSPACE_AUTH.INVITE_CODE_LENGTH must be at least 4")

        unknown_roles = set(self.DEFAULT_ROLES) - set(Roles.values)
        if unknown_roles:
            raise ConfigurationError(
                f"WORKSPACE_AUTH.DEFAULT_ROLES contains unknown roles: {', '.join(sorted(unknown_roles))}"
            )
        return True

    def as_dict(self):
        """当前生效的全部配置"""
        return {name: getattr(self, name) for name in self.DEFAULTS}


# 全局配置实例
auth_settings = WorkspaceAuthSettings()


# 便捷函数
def get_auth_setting(name, default=None):
    """便捷函数：获取配置项"""
    try:
        return getattr(auth_settings, name)
    except AttributeError:
        return default


def get_default_permissions(role):
    """便捷函数：获取角色的默认权限"""
    return auth_settings.DEFAULT_ROLES.get(role, [])
