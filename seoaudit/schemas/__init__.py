from seoaudit.schemas.audit import AuditRequest

__all__ = ["AuditRequest"]
