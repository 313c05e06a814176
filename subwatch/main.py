# -*- coding: utf-8 -*-
"""
主入口模块

用法:
  subwatch <wordlist_file> <website_address>
  subwatch words.txt example.com -c myconfig.yaml -v
"""

import argparse
import sys

from .core.config import Config
from .core.monitor import build_monitor
from .exceptions import ExternalToolError
from .utils.logger import get_logger, setup_logging

logger = get_logger('subwatch.main')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='subwatch',
        description='子域名与 HTTP 服务变化监控（shuffledns + dnsx + httpx + webhook）')
    parser.add_argument('wordlist', nargs='?', help='字典文件路径')
    parser.add_argument('website', nargs='?', help='目标域名，例如 example.com')
    parser.add_argument('-c', '--config', help='YAML 配置文件路径', default=None)
    parser.add_argument('-v', '--verbose', action='store_true', help='输出调试日志')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config(args.config)
    level = 'DEBUG' if args.verbose else config.get('log_level', 'INFO')
    setup_logging(level, config.get('log_file'))

    if not args.wordlist or not args.website:
        parser.print_usage()
        return 0

    website = args.website.strip()
    monitor = build_monitor(config, args.wordlist, website)
    try:
        monitor.run(website)
    except ExternalToolError as e:
        logger.error(f"{e.tool} command failed: exit status {e.exit_code}")
        if e.stderr.strip():
            logger.debug(e.stderr.strip())
        return 1
    finally:
        monitor.notifier.close()
    return 0


def run():
    """控制台脚本入口"""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.warning("程序被用户中断")
        sys.exit(0)


if __name__ == '__main__':
    run()
