from task_priority.config.settings import LoggingConfig, PriorityConfig, TaskPriorityConfig, get_config

__all__ = ["LoggingConfig", "PriorityConfig", "TaskPriorityConfig", "get_config"]
