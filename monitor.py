#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
子域名变化监控 - 入口脚本

用法: python monitor.py <wordlist_file> <website_address>
适合放进 cron 定期执行。
"""

import sys
import os

# 添加当前目录到Python路径，确保可以导入subwatch包
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == '__main__':
    try:
        from subwatch.main import run
    except ImportError as e:
        print(f"错误: 无法导入subwatch包 - {str(e)}")
        print("请确保subwatch包已正确安装或位于当前目录下")
        sys.exit(1)
    run()
