from django.db import models
from django.db.models.functions import Now
from django.utils import timezone


class Task(models.Model):
    """
    A discrete unit of work.

    `id` and `created_at` are assigned on insert and never change.
    """
    id = models.BigAutoField(primary_key=True)
    title = models.TextField()
    completed = models.BooleanField(default=False, db_default=False)
    created_at = models.DateTimeField(default=timezone.now, db_default=Now(), editable=False)

    class Meta:
        db_table = 'tasks'
        ordering = ['id']

    def __str__(self):
        return f"#{self.id} {self.title}"
