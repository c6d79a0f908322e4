"""
rotating_jwt – signed access / refresh tokens with rotating asymmetric keys.

Import path convention::

    from rotating_jwt.security import create_auth_handler, Algorithm
    from rotating_jwt.security.jwt import TokenExpiredError, ValidatorErrorKind
    from rotating_jwt.config import AuthConfig, EnvSettingsLoader, AuthSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
