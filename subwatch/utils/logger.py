"""日志封装：模块内用 get_logger 取 logger，入口处用 setup_logging 统一配置"""
import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
ROOT_LOGGER = 'subwatch'


def _to_level(level):
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def get_logger(name=__name__, level=None):
    """返回挂在 subwatch 根 logger 下的子 logger，处理器由根 logger 统一提供"""
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_to_level(level))
    return logger


def setup_logging(level=logging.INFO, log_file=None):
    """配置 subwatch 根 logger：控制台输出，可选同时写入日志文件。

    重复调用只会调整级别，不会重复挂载处理器。
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(_to_level(level))
    if not root.handlers:
        fmt = logging.Formatter(LOG_FORMAT)
        h = logging.StreamHandler()
        h.setFormatter(fmt)
        root.addHandler(h)
        if log_file:
            fh = logging.FileHandler(log_file, encoding='utf-8', errors='backslashreplace')
            fh.setFormatter(fmt)
            root.addHandler(fh)
    return root
