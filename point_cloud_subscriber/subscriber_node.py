#!/usr/bin/env python3
"""
subscriber_node.py

Subscribe to a PointCloud2 stream through the point-cloud transport wrapper
and log how many points every message carries.

Typical usage
-------------
1) Default (raw transport):
   ros2 run point_cloud_subscriber point_cloud_subscriber

2) Remap the input topic:
   ros2 run point_cloud_subscriber point_cloud_subscriber --ros-args -r pct/point_cloud:=/lidar/points

Outputs
-------
One INFO line per message:
  Message received, number of points is: <width*height>
"""

from __future__ import annotations

import rclpy
from rclpy.executors import ExternalShutdownException
from rclpy.logging import get_logger
from rclpy.node import Node
from sensor_msgs.msg import PointCloud2

from point_cloud_subscriber.cloud_info import format_point_count, point_count
from point_cloud_subscriber.transport import PointCloudTransport

NODE_NAME = "point_cloud_subscriber"
LOGGER_NAME = "point_cloud_subscriber"
POINT_CLOUD_TOPIC = "pct/point_cloud"
QUEUE_SIZE = 100


def on_point_cloud(msg: PointCloud2) -> None:
    """Log the point count of a received cloud. The message is only read."""
    get_logger(LOGGER_NAME).info(format_point_count(point_count(msg)))


class PointCloudSubscriber(Node):
    """Node owning one point-cloud subscription for its whole lifetime."""

    def __init__(self) -> None:
        super().__init__(NODE_NAME)

        self.transport = PointCloudTransport(self)
        self.sub = self.transport.subscribe(POINT_CLOUD_TOPIC, QUEUE_SIZE, on_point_cloud)

        self.get_logger().debug(
            f"Waiting for PointCloud2 on {self.sub.get_topic()} "
            f"(transport={self.sub.get_transport()}, depth={QUEUE_SIZE})"
        )


def main(args=None) -> None:
    rclpy.init(args=args)
    node = PointCloudSubscriber()
    try:
        rclpy.spin(node)
    except (KeyboardInterrupt, ExternalShutdownException):
        pass
    finally:
        node.destroy_node()
        if rclpy.ok():
            rclpy.shutdown()


if __name__ == "__main__":
    main()
