from django.db import models


class SiteOption(models.Model):
    """Named site-wide setting holding a JSON value."""
    name = models.CharField(max_length=191, unique=True)
    value = models.JSONField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    class Meta:
        ordering = ['name']
