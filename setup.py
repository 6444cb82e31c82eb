"""
Workspace Auth Library
多租户账号开户与凭据验证库
"""

from setuptools import setup, find_packages
import os

# 读取 README 文件
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "Workspace Auth Library - 多租户账号开户与凭据验证库"

setup(
    name="workspace-auth",
    version="1.0.0",
    author="Workspace Auth Team",
    description="多租户账号开户与凭据验证库 - 第三方登录开户、邮箱注册、密码验证",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["docs*"]),
    include_package_data=True,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Web Environment",
        "Framework :: Django",
        "Framework :: Django :: 4.2",
        "Framework :: Django :: 5.0",
        "Framework :: Django :: 5.1",
        "Framework :: Django :: 5.2",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Systems Administration :: Authentication/Directory",
    ],
    keywords="django multi-tenant authentication oauth registration workspace",
    python_requires=">=3.10",
    install_requires=[
        "Django>=4.2,<6.0",
        "djangorestframework>=3.14.0",
        "python-decouple>=3.8",
        "asgiref>=3.6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-django>=4.5.0",
            "pytest-cov>=4.1.0",
            "black>=23.3.0",
            "flake8>=6.0.0",
            "isort>=5.12.0",
        ],
        "postgres": [
            "psycopg2-binary>=2.9.0",
        ],
    },
    zip_safe=False,
    platforms=["any"],
    license="MIT",
)
