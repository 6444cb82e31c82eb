"""
登录账号模型 - 用户与登录方式的关联
"""

from django.db import models

from .base import BaseModel
from ..constants import Providers


class AccountManager(models.Manager):
    """账号存储"""

    def find_by_provider(self, provider, provider_id):
        """按登录方式查找账号"""
        return self.filter(provider=provider, provider_id=provider_id).first()


class Account(BaseModel):
    """账号模型"""

    user = models.ForeignKey(
        'User',
        on_delete=models.CASCADE,
        related_name='accounts',
        help_text="所属用户"
    )
    provider = models.CharField(
        max_length=20,
        choices=Providers.choices,
        help_text="登录方式"
    )
    provider_id = models.CharField(
        max_length=255,
        help_text="登录方式内的唯一标识，邮箱登录时为邮箱"
    )

    objects = AccountManager()

    class Meta:
        db_table = 'workspace_auth_account'
        constraints = [
            models.UniqueConstraint(
                fields=['provider', 'provider_id'],
                name='uq_account_provider_id'
            ),
            models.UniqueConstraint(
                fields=['user', 'provider'],
                name='uq_account_user_provider'
            ),
        ]

    def __str__(self):
        return f"{self.provider}:{self.provider_id}"
