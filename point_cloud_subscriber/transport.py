#!/usr/bin/env python3
"""
transport.py

Minimal point-cloud transport wrapper for rclpy nodes.

Why this module exists
----------------------
Point-cloud consumers should not care how a cloud travels on the wire. The
wrapper decouples "subscribe to a base topic" from the encoding actually used
on the graph: the selected transport decides the concrete topic name, and the
callback always receives a plain sensor_msgs/PointCloud2.

Transport selection
-------------------
1) Explicit ``transport=`` argument of ``PointCloudTransport.subscribe()``.
2) Otherwise the node parameter ``point_cloud_transport`` (default: "raw").

Topic naming
------------
  raw        -> <base_topic>
  <name>     -> <base_topic>/<name>

Only the "raw" transport is loadable here: encoding/decoding of compressed
clouds is left to the middleware plugins. Requesting any other transport
raises TransportLoadError when subscribing.

QoS strategy
------------
Same as a plain rclpy subscription created with an integer depth:
KEEP_LAST(queue_size), RELIABLE, VOLATILE.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from rclpy.node import Node
from rclpy.qos import QoSProfile, ReliabilityPolicy, DurabilityPolicy, HistoryPolicy
from sensor_msgs.msg import PointCloud2

RAW_TRANSPORT = "raw"
TRANSPORT_PARAMETER = "point_cloud_transport"


class TransportLoadError(RuntimeError):
    """Raised when a requested point-cloud transport is not available."""


def make_qos(depth: int) -> QoSProfile:
    """Create the QoSProfile used for point-cloud subscriptions."""
    return QoSProfile(
        reliability=ReliabilityPolicy.RELIABLE,
        durability=DurabilityPolicy.VOLATILE,
        history=HistoryPolicy.KEEP_LAST,
        depth=depth,
    )


def get_topic_name(base_topic: str, transport: str) -> str:
    """Return the topic carrying ``base_topic`` encoded with ``transport``."""
    if transport == RAW_TRANSPORT:
        return base_topic
    return f"{base_topic.rstrip('/')}/{transport}"


class Subscriber:
    """
    Handle returned by PointCloudTransport.subscribe().

    Keeps the underlying rclpy subscription alive for as long as the handle
    (or its node) exists.
    """

    def __init__(self, node: Node, subscription, base_topic: str, transport: str) -> None:
        self._node = node
        self._sub = subscription
        self._base_topic = base_topic
        self._transport = transport

    def get_topic(self) -> str:
        """Fully resolved topic name of the subscription (base topic for raw)."""
        if self._sub is None:
            return ""
        return self._sub.topic_name

    def get_base_topic(self) -> str:
        return self._base_topic

    def get_transport(self) -> str:
        return self._transport

    def get_num_publishers(self) -> int:
        if self._sub is None:
            return 0
        return self._node.count_publishers(self._sub.topic_name)

    def shutdown(self) -> None:
        """Destroy the underlying subscription. Safe to call more than once."""
        if self._sub is None:
            return
        self._node.destroy_subscription(self._sub)
        self._sub = None

    def __bool__(self) -> bool:
        return self._sub is not None


class PointCloudTransport:
    """Factory for point-cloud subscribers bound to a single node."""

    def __init__(self, node: Node) -> None:
        self._node = node

    @staticmethod
    def get_loadable_transports() -> List[str]:
        return [RAW_TRANSPORT]

    def _transport_from_parameter(self) -> str:
        if not self._node.has_parameter(TRANSPORT_PARAMETER):
            self._node.declare_parameter(TRANSPORT_PARAMETER, RAW_TRANSPORT)
        return str(self._node.get_parameter(TRANSPORT_PARAMETER).value)

    def subscribe(
        self,
        base_topic: str,
        queue_size: int,
        callback: Callable[[PointCloud2], None],
        transport: Optional[str] = None,
    ) -> Subscriber:
        """
        Subscribe to ``base_topic`` through the selected transport.

        The callback is invoked by the executor once per delivered message.
        No error is raised if nobody publishes on the topic.
        """
        if transport is None:
            transport = self._transport_from_parameter()

        if transport not in self.get_loadable_transports():
            raise TransportLoadError(
                f"Unable to load point cloud transport '{transport}' for topic '{base_topic}'. "
                f"Loadable transports: {', '.join(self.get_loadable_transports())}"
            )

        topic = get_topic_name(base_topic, transport)
        sub = self._node.create_subscription(PointCloud2, topic, callback, make_qos(queue_size))

        self._node.get_logger().debug(
            f"Subscribed to {topic} (transport={transport}, depth={queue_size})"
        )
        return Subscriber(self._node, sub, base_topic, transport)
