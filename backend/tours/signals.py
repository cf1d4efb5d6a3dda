from django.db.models.signals import pre_save
from django.dispatch import receiver

from .models import Tour


@receiver(pre_save, sender=Tour)
def remember_previous_slug(sender, instance, **kwargs):
    """Keep old slugs so links to a renamed tour can redirect."""
    if not instance.pk:
        return
    previous_slug = Tour.objects.filter(pk=instance.pk).values_list("slug", flat=True).first()
    if not previous_slug or previous_slug == instance.slug:
        return
    history = [slug for slug in (instance.previous_slugs or []) if slug != instance.slug]
    if previous_slug not in history:
        history.append(previous_slug)
    instance.previous_slugs = history
