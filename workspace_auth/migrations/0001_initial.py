import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import workspace_auth.models.workspace


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('email', models.EmailField(blank=True, help_text='登录邮箱，第三方登录可能没有', max_length=255, null=True, unique=True)),
                ('name', models.CharField(blank=True, default='', max_length=255)),
                ('profile_picture', models.CharField(blank=True, help_text='头像URL', max_length=1024, null=True)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
            ],
            options={
                'db_table': 'workspace_auth_user',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Role',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(choices=[('owner', 'Owner'), ('admin', 'Admin'), ('member', 'Member')], help_text='角色名称', max_length=20, unique=True)),
                ('permissions', models.JSONField(default=list, help_text='角色权限列表')),
            ],
            options={
                'db_table': 'workspace_auth_role',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Workspace',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(help_text='工作空间名称', max_length=255)),
                ('description', models.TextField(blank=True, default='', help_text='工作空间描述')),
                ('invite_code', models.CharField(default=workspace_auth.models.workspace.generate_invite_code, help_text='邀请码', max_length=32, unique=True)),
                ('owner', models.ForeignKey(help_text='工作空间所有者', on_delete=django.db.models.deletion.CASCADE, related_name='owned_workspaces', to='workspace_auth.user')),
            ],
            options={
                'db_table': 'workspace_auth_workspace',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['owner'], name='ws_owner_idx')],
            },
        ),
        migrations.AddField(
            model_name='user',
            name='current_workspace',
            field=models.ForeignKey(blank=True, help_text='当前工作空间', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='workspace_auth.workspace'),
        ),
        migrations.CreateModel(
            name='Account',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('provider', models.CharField(choices=[('GOOGLE', 'Google'), ('GITHUB', 'GitHub'), ('FACEBOOK', 'Facebook'), ('EMAIL', 'Email')], help_text='登录方式', max_length=20)),
                ('provider_id', models.CharField(help_text='登录方式内的唯一标识，邮箱登录时为邮箱', max_length=255)),
                ('user', models.ForeignKey(help_text='所属用户', on_delete=django.db.models.deletion.CASCADE, related_name='accounts', to='workspace_auth.user')),
            ],
            options={
                'db_table': 'workspace_auth_account',
            },
        ),
        migrations.AddConstraint(
            model_name='account',
            constraint=models.UniqueConstraint(fields=('provider', 'provider_id'), name='uq_account_provider_id'),
        ),
        migrations.AddConstraint(
            model_name='account',
            constraint=models.UniqueConstraint(fields=('user', 'provider'), name='uq_account_user_provider'),
        ),
        migrations.CreateModel(
            name='Member',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('joined_at', models.DateTimeField(default=django.utils.timezone.now, help_text='加入时间')),
                ('role', models.ForeignKey(help_text='成员角色', on_delete=django.db.models.deletion.PROTECT, related_name='members', to='workspace_auth.role')),
                ('user', models.ForeignKey(help_text='成员用户', on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='workspace_auth.user')),
                ('workspace', models.ForeignKey(help_text='所属工作空间', on_delete=django.db.models.deletion.CASCADE, related_name='members', to='workspace_auth.workspace')),
            ],
            options={
                'db_table': 'workspace_auth_member',
                'indexes': [models.Index(fields=['workspace', 'role'], name='member_ws_role_idx')],
                'unique_together': {('user', 'workspace')},
            },
        ),
    ]
