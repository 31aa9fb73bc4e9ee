"""Exceptions raised by shadow-build."""


class ShadowError(Exception):
    """Raised when the generated constants file cannot be created or written.

    This is the only failure that aborts a build step. Missing VCS data,
    missing toolchains and absent environment variables are recovered with
    fallback values instead.
    """

    pass
