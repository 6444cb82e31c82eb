import logging

from django.apps import AppConfig


logger = logging.getLogger(__name__)


class WorkspaceAuthConfig(AppConfig):
    """Workspace Auth 应用配置"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'workspace_auth'
    verbose_name = 'Workspace Auth'

    def ready(self):
        """应用初始化时检查配置"""
        from .conf import auth_settings
        from .exceptions import ConfigurationError

        try:
            auth_settings.validate()
        except ConfigurationError as e:
            logger.warning(f"Workspace Auth configuration issue: {e.message}")
            logger.warning("Run 'python manage.py check_auth_config' for details")
