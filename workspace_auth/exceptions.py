"""
Workspace Auth 自定义异常
"""

from typing import Optional

from .constants import ErrorCode, HttpStatus


class WorkspaceAuthError(Exception):
    """Workspace Auth 基础异常"""

    default_error_code = ErrorCode.INTERNAL_SERVER_ERROR
    status_code = HttpStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code or self.default_error_code
        super().__init__(message)

    def to_dict(self):
        """转换为响应体"""
        return {
            'message': self.message,
            'error_code': self.error_code,
        }


class NotFoundError(WorkspaceAuthError):
    """资源不存在错误"""
    default_error_code = ErrorCode.RESOURCE_NOT_FOUND
    status_code = HttpStatus.NOT_FOUND


class BadRequestError(WorkspaceAuthError):
    """请求错误"""
    default_error_code = ErrorCode.VALIDATION_ERROR
    status_code = HttpStatus.BAD_REQUEST


class ValidationError(BadRequestError):
    """输入验证错误"""

    def __init__(self, message: str, errors: Optional[dict] = None, error_code: Optional[str] = None):
        self.errors = errors or {}
        super().__init__(message, error_code)

    def to_dict(self):
        data = super().to_dict()
        data['errors'] = self.errors
        return data


class UnauthorizedError(WorkspaceAuthError):
    """认证失败错误"""
    default_error_code = ErrorCode.AUTH_UNAUTHORIZED_ACCESS
    status_code = HttpStatus.UNAUTHORIZED


class ConfigurationError(WorkspaceAuthError):
    """配置错误"""
    default_error_code = ErrorCode.CONFIGURATION_ERROR
