"""
开户工作单元
"""

import logging
from contextlib import nullcontext

from django.db import transaction

from ..conf import auth_settings
from ..models import User, Account, Workspace, Role, Member


logger = logging.getLogger(__name__)


class ProvisioningUnitOfWork:
    """
    开户写操作的工作单元

    在一个数据库事务内暴露五个存储 (users, accounts, workspaces, roles, members)，
    任意一步失败则整体回滚。ATOMIC_PROVISIONING 关闭时逐条提交，失败不回滚。

    使用示例:
        with ProvisioningUnitOfWork() as uow:
            user = uow.users.create_user(email=email, name=name)
            uow.accounts.create(user=user, provider=provider, provider_id=email)
    """

    def __init__(self, atomic=None, using=None):
        self.atomic = auth_settings.ATOMIC_PROVISIONING if atomic is None else atomic
        self.using = using
        self._context = None

        self.users = User.objects.db_manager(using)
        self.accounts = Account.objects.db_manager(using)
        self.workspaces = Workspace.objects.db_manager(using)
        self.roles = Role.objects.db_manager(using)
        self.members = Member.objects.db_manager(using)

    def __enter__(self):
        self._context = transaction.atomic(using=self.using) if self.atomic else nullcontext()
        self._context.__enter__()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is not None:
            if self.atomic:
                logger.warning("Provisioning rolled back: %s", exc_value)
            else:
                logger.warning("Provisioning failed without rollback, earlier writes are kept: %s", exc_value)
        return self._context.__exit__(exc_type, exc_value, traceback)
