from meetgrid.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
