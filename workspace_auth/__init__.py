"""
Workspace Auth Library

多租户应用的账号开户与凭据验证。

核心流程:
- 第三方登录: 用户不存在时创建 用户 + 登录账号 + 工作空间 + owner 成员
- 邮箱注册: 同样的开户流程，登录方式为 EMAIL
- 凭据验证: 按登录方式查账号，比对密码，返回去掉密码的用户数据
"""

__version__ = "1.0.0"
__author__ = "Workspace Auth Team"
__description__ = "多租户账号开户与凭据验证库"
