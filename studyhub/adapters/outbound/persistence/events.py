# studyhub/adapters/outbound/persistence/events.py

"""
Event listeners for SQLAlchemy ORM lifecycle.

Fills created_at/updated_at with naive UTC values on insert and update.
"""

import logging
from sqlalchemy import event

from studyhub.shared.utils.datetime_utils import DateTimeUtil

logger = logging.getLogger(__name__)


def register_datetime_events():
    """
    Register event listeners for datetime fields in SQLAlchemy models.
    """
    from studyhub.adapters.outbound.persistence.models.base_model import Base

    @event.listens_for(Base, 'before_insert', propagate=True)
    def set_created_at(mapper, connection, target):
        """
        Set created_at and updated_at before insert.
        """
        if hasattr(target, 'created_at') and (target.created_at is None):
            target.created_at = DateTimeUtil.for_storage()

        if hasattr(target, 'updated_at'):
            target.updated_at = DateTimeUtil.for_storage()

    @event.listens_for(Base, 'before_update', propagate=True)
    def set_updated_at(mapper, connection, target):
        if hasattr(target, 'updated_at'):
            target.updated_at = DateTimeUtil.for_storage()

    logger.info("DateTime event listeners registered for SQLAlchemy models")
