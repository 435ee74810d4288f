from django.db import models

# Advisory only; any string is stored.
RECOGNIZED_CATEGORIES = ('Featured', 'Web', 'Creative')
RESUME_TYPES = ('experience', 'education')


class Project(models.Model):
    title = models.TextField(null=True)
    description = models.TextField(null=True)
    image_url = models.TextField(null=True)
    link = models.TextField(null=True)
    category = models.TextField(null=True)

    class Meta:
        db_table = 'projects'

    def __str__(self):
        return self.title or f"Project {self.pk}"


class ResumeEntry(models.Model):
    title = models.TextField(null=True)
    company = models.TextField(null=True)
    duration = models.TextField(null=True)
    description = models.TextField(null=True)
    type = models.TextField(null=True)  # 'experience' or 'education'

    class Meta:
        db_table = 'resume_entries'

    def __str__(self):
        return f"{self.title} at {self.company}"


class Setting(models.Model):
    key = models.TextField(primary_key=True)
    value = models.TextField(null=True)

    class Meta:
        db_table = 'settings'

    def __str__(self):
        return self.key
