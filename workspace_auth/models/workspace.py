"""
工作空间模型
"""

import string

from django.db import models
from django.utils.crypto import get_random_string

from .base import BaseModel


INVITE_CODE_CHARS = string.ascii_lowercase + string.digits


def generate_invite_code():
    """生成工作空间邀请码"""
    from ..conf import auth_settings
    return get_random_string(int(auth_settings.INVITE_CODE_LENGTH), allowed_chars=INVITE_CODE_CHARS)


class WorkspaceManager(models.Manager):
    """工作空间存储"""

    def create_for_owner(self, owner, name=None, description=None):
        """为新用户创建默认工作空间"""
        from ..conf import auth_settings

        return self.create(
            name=name or auth_settings.DEFAULT_WORKSPACE_NAME,
            description=description if description is not None
            else auth_settings.WORKSPACE_DESCRIPTION_TEMPLATE.format(name=owner.display_name),
            owner=owner,
        )


class Workspace(BaseModel):
    """工作空间模型"""

    name = models.CharField(
        max_length=255,
        help_text="工作空间名称"
    )
    description = models.TextField(
        blank=True,
        default='',
        help_text="工作空间描述"
    )
    owner = models.ForeignKey(
        'User',
        on_delete=models.CASCADE,
        related_name='owned_workspaces',
        help_text="工作空间所有者"
    )
    invite_code = models.CharField(
        max_length=32,
        unique=True,
        default=generate_invite_code,
        help_text="邀请码"
    )

    objects = WorkspaceManager()

    class Meta:
        db_table = 'workspace_auth_workspace'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['owner'], name='ws_owner_idx'),
        ]

    def __str__(self):
        return self.name
