"""
Data access for the portfolio content tables.

Every operation is a single statement against the store; there is no update,
so an edit is a delete followed by a fresh insert.
"""
import logging

from django.core.exceptions import ValidationError

from .models import Project, ResumeEntry

logger = logging.getLogger(__name__)


class ContentRepository:
    """List, insert and delete rows of one content model."""

    def __init__(self, model, fields):
        self.model = model
        self.fields = tuple(fields)

    def list_all(self):
        # Natural store order, no ORDER BY.
        return list(self.model.objects.all())

    def insert(self, fields):
        """
        Store one row built from the editable fields found in `fields`.

        Keys outside the model's editable fields are ignored and missing ones
        are stored as NULL. Returns the id assigned by the store.
        """
        values = {name: fields.get(name) for name in self.fields}
        row = self.model.objects.create(**values)
        logger.info(f"Inserted {self.model._meta.db_table} row {row.pk}")
        return row.pk

    def delete_by_id(self, pk):
        try:
            deleted, _ = self.model.objects.filter(pk=pk).delete()
        except (ValueError, TypeError, ValidationError):
            # An id the key column cannot hold matches no row.
            deleted = 0
        logger.info(f"Deleted {deleted} {self.model._meta.db_table} row(s) for id {pk}")
        return True


projects = ContentRepository(
    Project, ('title', 'description', 'image_url', 'link', 'category')
)
resume_entries = ContentRepository(
    ResumeEntry, ('title', 'company', 'duration', 'description', 'type')
)
