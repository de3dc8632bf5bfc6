from . import api, admin_api  # noqa: F401
