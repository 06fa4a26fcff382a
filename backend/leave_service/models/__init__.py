from leave_service.models.enums import RegimeKind, Role

__all__ = [
    "RegimeKind",
    "Role",
]
