import math

LOG_HIERARCHY = {'info': 0, 'debug': 1, 'full': 2}


def round_half_up(value):
    """四舍五入到整数（0.5 向上取整，不使用 Python 的银行家舍入）"""
    return int(math.floor(value + 0.5))


class _Logger:
    """简单的日志服务，可以把 info 级别的消息推送到界面状态栏"""

    def __init__(self):
        self.log_level = 'info'
        self.status_callback = None

    def configure(self, log_level='info', status_callback=None):
        self.log_level = log_level if log_level in LOG_HIERARCHY else 'info'
        self.status_callback = status_callback

    def log(self, level, message):
        # info 消息总是同步到状态栏
        if level == 'info' and self.status_callback:
            self.status_callback(message)

        if LOG_HIERARCHY.get(level, 99) <= LOG_HIERARCHY[self.log_level]:
            print(f"[{level}] {message}")


_logger_instance = _Logger()


def configure_logger(log_level='info', status_callback=None):
    """配置全局日志：输出级别和状态栏回调"""
    _logger_instance.configure(log_level, status_callback)


def log_message(level, message):
    _logger_instance.log(level, message)
