"""
Workspace Auth 数据模型
"""

from .user import User
from .account import Account
from .workspace import Workspace
from .role import Role
from .member import Member

__all__ = [
    'User',
    'Account',
    'Workspace',
    'Role',
    'Member'
]
