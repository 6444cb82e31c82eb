"""
Workspace Auth 序列化器 - 服务层输入验证与用户数据输出
"""

from rest_framework import serializers

from .conf import auth_settings
from .constants import Providers
from .models import User


class RegisterSerializer(serializers.Serializer):
    """邮箱注册输入"""

    email = serializers.EmailField(max_length=255)
    name = serializers.CharField(min_length=1, max_length=255)
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate_email(self, value):
        return value.strip().lower()

    def validate_password(self, value):
        min_length = int(auth_settings.PASSWORD_MIN_LENGTH)
        if len(value) < min_length:
            raise serializers.ValidationError(
                f"Password must be at least {min_length} characters long"
            )
        return value


class LoginOrCreateSerializer(serializers.Serializer):
    """第三方登录输入"""

    provider = serializers.ChoiceField(choices=Providers.choices)
    display_name = serializers.CharField(max_length=255, allow_blank=True)
    provider_id = serializers.CharField(max_length=255)
    picture = serializers.CharField(max_length=1024, required=False, allow_null=True, allow_blank=True)
    email = serializers.EmailField(max_length=255, required=False, allow_null=True, allow_blank=True)

    def validate_email(self, value):
        if not value:
            return None
        return value.strip().lower()


class SanitizedUserSerializer(serializers.ModelSerializer):
    """不包含密码的用户数据"""

    current_workspace = serializers.PrimaryKeyRelatedField(
        read_only=True,
        pk_field=serializers.UUIDField(format='hex_verbose')
    )

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'name',
            'profile_picture',
            'current_workspace',
            'is_active',
            'last_login',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
