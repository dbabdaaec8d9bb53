"""Signals keeping order fulfilment timestamps in step with its status."""

import logging

from django.db.models.signals import pre_save
from django.dispatch import receiver
from django.utils import timezone

from .models import Order

logger = logging.getLogger(__name__)


@receiver(pre_save, sender=Order)
def stamp_fulfilment_dates(sender, instance, **kwargs):
    """Set ``shipped_at`` / ``delivered_at`` the first time an order reaches them."""
    now = timezone.now()
    if instance.status in (Order.STATUS_SHIPPED, Order.STATUS_DELIVERED) and instance.shipped_at is None:
        instance.shipped_at = now
    if instance.status == Order.STATUS_DELIVERED and instance.delivered_at is None:
        instance.delivered_at = now

    if instance.pk is None:
        return
    previous = sender.objects.filter(pk=instance.pk).values_list('status', flat=True).first()
    if previous is not None and previous != instance.status:
        logger.info('Order %s moved from %s to %s', instance.order_id, previous, instance.status)
