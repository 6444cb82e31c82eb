"""
用户模型
"""

from django.db import models
from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager

from .base import BaseModel, normalize_email


class UserManager(BaseUserManager):
    """用户存储"""

    def find_by_email(self, email):
        """按邮箱查找用户，邮箱为空时不查询"""
        email = normalize_email(email)
        if email is None:
            return None
        return self.filter(email=email).first()

    def find_by_id(self, user_id):
        """按ID查找用户"""
        if user_id is None:
            return None
        return self.filter(id=user_id).first()

    def create_user(self, email=None, name='', password=None, **extra_fields):
        """
        创建用户

        没有密码的用户 (第三方登录) 设置为不可用密码，compare_password 永远返回 False
        """
        user = self.model(
            email=normalize_email(email),
            name=name,
            **extra_fields
        )
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user


class User(BaseModel, AbstractBaseUser):
    """用户模型"""

    email = models.EmailField(
        max_length=255,
        unique=True,
        null=True,
        blank=True,
        help_text="登录邮箱，第三方登录可能没有"
    )
    name = models.CharField(
        max_length=255,
        blank=True,
        default=''
    )
    profile_picture = models.CharField(
        max_length=1024,
        null=True,
        blank=True,
        help_text="头像URL"
    )
    current_workspace = models.ForeignKey(
        'Workspace',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        help_text="当前工作空间"
    )
    is_active = models.BooleanField(
        default=True,
        db_index=True
    )

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'workspace_auth_user'
        ordering = ['-created_at']

    def __str__(self):
        return self.email or self.name or str(self.id)

    def compare_password(self, raw_password):
        """验证密码，哈希方案由 PASSWORD_HASHERS 决定"""
        return self.check_password(raw_password)

    def omit_password(self):
        """去掉密码字段后的用户数据"""
        from ..serializers import SanitizedUserSerializer
        return SanitizedUserSerializer(self).data

    @property
    def display_name(self):
        """显示名称"""
        return self.name or self.email or ''
