# bssreport/collectors/subscriptions.py
import logging

from bssreport.exceptions import NotFoundError
from bssreport.models import Subscription
from bssreport.rpc import RpcClient

LOG = logging.getLogger("bssreport.collectors.subscriptions")

SERVICE = "bss.subscription.SubscriptionService"


def get_subscription(client: RpcClient, subscription_id: str) -> Subscription:
    data = client.call(SERVICE, "GetByID", {"id": subscription_id})
    # GetByID answers with the subscription message itself
    if not data:
        raise NotFoundError(
            f"subscription {subscription_id} not found",
            service=SERVICE,
            method="GetByID",
        )
    sub = Subscription.from_json(data)
    LOG.debug("subscription %s: externalId=%s accesspointId=%s", sub.id, sub.external_id, sub.access_point_id)
    return sub
