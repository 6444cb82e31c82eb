"""
工作空间成员模型
"""

from django.db import models
from django.utils import timezone

from .base import BaseModel


class Member(BaseModel):
    """成员模型 - 用户在工作空间中的角色"""

    user = models.ForeignKey(
        'User',
        on_delete=models.CASCADE,
        related_name='memberships',
        help_text="成员用户"
    )
    workspace = models.ForeignKey(
        'Workspace',
        on_delete=models.CASCADE,
        related_name='members',
        help_text="所属工作空间"
    )
    role = models.ForeignKey(
        'Role',
        on_delete=models.PROTECT,
        related_name='members',
        help_text="成员角色"
    )
    joined_at = models.DateTimeField(
        default=timezone.now,
        help_text="加入时间"
    )

    class Meta:
        db_table = 'workspace_auth_member'
        unique_together = ['user', 'workspace']
        indexes = [
            models.Index(fields=['workspace', 'role'], name='member_ws_role_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.workspace} ({self.role})"
