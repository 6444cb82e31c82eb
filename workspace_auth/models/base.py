"""
基础模型类
"""

import uuid
from django.db import models


class BaseModel(models.Model):
    """基础模型类"""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    created_at = models.DateTimeField(
        auto_now_add=True
    )
    updated_at = models.DateTimeField(
        auto_now=True
    )

    class Meta:
        abstract = True
        ordering = ['-created_at']


def normalize_email(email):
    """邮箱统一小写存储，空值返回 None"""
    if not email:
        return None
    return email.strip().lower() or None
