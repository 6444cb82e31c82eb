"""
角色目录 - 把 Roles 枚举解析为数据库中的 Role
"""

from ..constants import Roles, ErrorCode
from ..exceptions import NotFoundError
from ..models import Role


class RoleDirectory:
    """按名称查找角色，不做缓存"""

    def __init__(self, store=None):
        self.store = store if store is not None else Role.objects

    def resolve(self, role):
        """
        解析角色

        Args:
            role: Roles 枚举或角色名称

        Returns:
            Role: 角色对象

        Raises:
            NotFoundError: 角色未初始化 (需要先运行 seed_roles)
        """
        role = Roles(role)
        found = self.store.find_by_name(role.value)
        if found is None:
            raise NotFoundError(f"{role.label} role not found", ErrorCode.RESOURCE_NOT_FOUND)
        return found
