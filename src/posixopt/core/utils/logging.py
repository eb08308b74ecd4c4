"""
Lightweight logging helpers with masking of option values.
"""
# 说明：轻量级日志工具，提供对选项值友好的默认配置与统一的 logger 获取入口。
# 职责：
# - OptionValueFilter：根据运行时配置对日志记录中的选项值（如 -p 后面的密码）进行掩码处理
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载掩码过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 是否掩码选项值由 RuntimeConfig.mask_option_values 控制
# - 日志级别优先级：显式参数 level > 环境变量 POSIXOPT_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config

MASK = "***"


class OptionValueFilter(logging.Filter):
    """Filter that hides option values carried by log records if configured."""
    # 掩码过滤器：记录上带有 optarg 属性时，将该属性以及消息参数中相同的值统一替换为 ***

    def filter(self, record: logging.LogRecord) -> bool:
        config = get_config()
        if not config.mask_option_values:
            return True
        value = getattr(record, "optarg", None)
        if value is None:
            return True
        record.optarg = MASK
        # 位置参数中与选项值相同的项同样需要替换，否则会经由 %-格式化泄露到消息文本
        if isinstance(record.args, tuple):
            record.args = tuple(MASK if arg == value else arg for arg in record.args)
        return True


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别、设置格式，并挂载 OptionValueFilter
    log_level = level or os.environ.get("POSIXOPT_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if not any(isinstance(f, OptionValueFilter) for f in root.filters):
        root.addFilter(OptionValueFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    # 根 logger 上的过滤器不会作用于子 logger 产生的记录，这里直接挂在当前 logger 上
    if not any(isinstance(f, OptionValueFilter) for f in logger.filters):
        logger.addFilter(OptionValueFilter())
    return logger
