from app.common.middleware.cors_middleware import register_cors_middleware

__all__ = ['register_cors_middleware']
