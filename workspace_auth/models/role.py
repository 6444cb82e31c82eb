"""
角色模型 - 静态参考数据，由 seed_roles 命令写入
"""

from django.db import models

from .base import BaseModel
from ..constants import Roles


class RoleManager(models.Manager):
    """角色存储"""

    def find_by_name(self, name):
        """按名称查找角色"""
        return self.filter(name=name).first()


class Role(BaseModel):
    """角色模型"""

    name = models.CharField(
        max_length=20,
        choices=Roles.choices,
        unique=True,
        help_text="角色名称"
    )
    permissions = models.JSONField(
        default=list,
        help_text="角色权限列表"
    )

    objects = RoleManager()

    class Meta:
        db_table = 'workspace_auth_role'
        ordering = ['name']

    def __str__(self):
        return self.name
