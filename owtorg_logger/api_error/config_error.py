# owtorg_logger/api_error/config_error.py
class ConfigurationError(RuntimeError):
    """
    Raised when logger configuration is invalid.
    """

    pass


__all__ = ["ConfigurationError"]
