"""
Audit Recorder

Appends privileged actions to the audit trail on a best-effort basis.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError

from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.domain.entities import AuditLog
from trendradar_auth.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class AuditRecorder:
    """
    Writes one AuditLog entry per call in its own unit of work.

    Business Rules:
    - Called by the code performing the action, after it succeeded
    - Entries are never updated or deleted
    - A failed write is logged and swallowed; the audited operation has
      already completed and must not be reported as failed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record(
        self,
        user_id: Optional[int],
        action: str,
        resource: str,
        resource_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Optional[AuditLog]:
        """
        Append an audit entry.

        Returns:
            The stored entry, or None if the write failed
        """
        entry = AuditLog(
            user_id=user_id,
            action=action,
            resource=resource,
            resource_id=resource_id,
            details=details,
            ip_address=ip_address,
            user_agent=user_agent[:500] if user_agent else None,
        )

        try:
            async with self.uow:
                entry = await self.uow.audit_logs.create(entry)
                await self.uow.commit()
        except (StorageError, SQLAlchemyError):
            logger.exception(
                "Audit write failed: user %s %s %s %s", user_id, action, resource, resource_id
            )
            return None

        logger.info("Audit: user %s %s %s %s", user_id, action, resource, resource_id or "")
        return entry
