from .admin_gate import verify_admin

__all__ = ["verify_admin"]
