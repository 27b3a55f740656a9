# logger.py
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from config import LOG_FILE, ERROR_LOG_FILE, LOG_DIR_ENV, DEBUG_ENV

def setup_logger(log_dir: Optional[str] = None, log_file=LOG_FILE, level=logging.INFO, debug=False):
    log_dir = log_dir or os.getenv(LOG_DIR_ENV)
    debug = debug or os.getenv(DEBUG_ENV, "0") == "1"

    logger = logging.getLogger("SimplePage")
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.setLevel(logging.DEBUG if debug else level)
    logger.propagate = False

    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')

    # 控制台
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if debug else logging.INFO)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # 只有配置了日志目录时才写文件
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        # 主日志文件 - 使用轮转日志
        fh = RotatingFileHandler(os.path.join(log_dir, log_file), maxBytes=5 * 1024 * 1024, backupCount=3)
        fh.setLevel(logging.DEBUG if debug else level)
        fh.setFormatter(formatter)

        # 错误日志文件 - 使用轮转日志
        eh = RotatingFileHandler(os.path.join(log_dir, ERROR_LOG_FILE), maxBytes=2 * 1024 * 1024, backupCount=2)
        eh.setLevel(logging.ERROR)
        eh.setFormatter(formatter)

        logger.addHandler(fh)
        logger.addHandler(eh)

    logger.debug("SimplePage 日志初始化完成")
    return logger

logger = setup_logger(debug=False)


class ErrorTracker:
    """错误追踪和统计"""

    def __init__(self):
        self.error_count = 0
        self.warning_count = 0
        self.error_types = {}
        self.warning_types = {}
        self.warned_keys = set()

    def track_error(self, error_type: str, message: str, exception: Optional[Exception] = None):
        """追踪错误"""
        self.error_count += 1
        self.error_types[error_type] = self.error_types.get(error_type, 0) + 1

        if exception:
            logger.error(f"[{error_type}] {message}", exc_info=True)
        else:
            logger.error(f"[{error_type}] {message}")

    def track_warning(self, warning_type: str, message: str):
        """追踪警告"""
        self.warning_count += 1
        self.warning_types[warning_type] = self.warning_types.get(warning_type, 0) + 1

        logger.warning(f"[{warning_type}] {message}")

    def track_warning_once(self, warning_type: str, key, message: str):
        """同一 key 只追踪一次警告，reset() 后重新计数"""
        if key in self.warned_keys:
            return
        self.warned_keys.add(key)
        self.track_warning(warning_type, message)

    def get_summary(self) -> dict:
        """获取错误统计摘要"""
        return {
            'total_errors': self.error_count,
            'total_warnings': self.warning_count,
            'error_types': self.error_types.copy(),
            'warning_types': self.warning_types.copy()
        }

    def reset(self):
        """重置统计"""
        self.error_count = 0
        self.warning_count = 0
        self.error_types.clear()
        self.warning_types.clear()
        self.warned_keys.clear()

# 全局错误追踪器
error_tracker = ErrorTracker()

def track_error(error_type: str, message: str, exception: Optional[Exception] = None):
    error_tracker.track_error(error_type, message, exception)

def track_warning(warning_type: str, message: str):
    error_tracker.track_warning(warning_type, message)

def track_warning_once(warning_type: str, key, message: str):
    error_tracker.track_warning_once(warning_type, key, message)

def get_error_summary() -> dict:
    return error_tracker.get_summary()

def reset_error_tracking():
    error_tracker.reset()

# 性能监控功能
import time
from functools import wraps

def log_performance(operation: str, context: str = ""):
    """性能日志装饰器"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                duration = time.time() - start_time
                logger.info(f"性能 [{context}]: {operation} 耗时 {duration:.3f}秒")
                return result
            except Exception as e:
                duration = time.time() - start_time
                logger.error(f"性能 [{context}]: {operation} 失败，耗时 {duration:.3f}秒，错误: {e}")
                raise
        return wrapper
    return decorator
