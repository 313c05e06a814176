#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
subwatch包的安装脚本
"""

from setuptools import setup, find_packages
import os

# 获取包的版本号
try:
    with open(os.path.join('subwatch', '__init__.py'), 'r', encoding='utf-8') as f:
        for line in f:
            if line.startswith('__version__'):
                version = line.strip().split('=')[1].strip().strip('"').strip("'")
                break
        else:
            version = '0.1.0'
except Exception:
    version = '0.1.0'

# 读取README文件内容
try:
    with open('README.md', 'r', encoding='utf-8') as f:
        long_description = f.read()
except Exception:
    long_description = "子域名与HTTP服务变化监控工具"

# 定义依赖项
install_requires = [
    'PyYAML>=5.4',
    'requests>=2.25.0',
]

extras_require = {
    'test': ['pytest>=7.0'],
}

# 设置包的配置
setup(
    name='subwatch',
    version=version,
    description='子域名与HTTP服务变化监控工具',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='PyHack-Lab',
    author_email='',
    url='',
    packages=find_packages(include=['subwatch', 'subwatch.*']),
    package_data={'subwatch': ['config/*.yaml']},
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires='>=3.9',
    entry_points={
        'console_scripts': [
            'subwatch=subwatch.main:run',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Topic :: Security',
        'Topic :: Internet :: Name Service (DNS)',
        'Topic :: Utilities',
    ],
    keywords='subdomain, monitoring, recon, shuffledns, httpx, webhook',
)
