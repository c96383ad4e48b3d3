from poap.application.queries.handlers.get_count_handler import GetCountHandler

__all__ = ["GetCountHandler"]
