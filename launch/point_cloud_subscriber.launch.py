"""
point_cloud_subscriber.launch.py

Starts the point-cloud subscriber node.

Launch arguments
----------------
point_cloud_transport : transport used to receive pct/point_cloud (default: raw)
use_sim_time          : use /clock instead of wall time (default: false)

Example
-------
ros2 launch point_cloud_subscriber point_cloud_subscriber.launch.py
"""

from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node


def generate_launch_description():

    point_cloud_transport = LaunchConfiguration("point_cloud_transport")
    use_sim_time = LaunchConfiguration("use_sim_time")

    subscriber = Node(
        package="point_cloud_subscriber",
        executable="point_cloud_subscriber",
        name="point_cloud_subscriber",
        output="screen",
        parameters=[{
            "use_sim_time": use_sim_time,
            "point_cloud_transport": point_cloud_transport,
        }],
    )

    declared_args = [
        DeclareLaunchArgument(
            "point_cloud_transport",
            default_value="raw",
            description=(
                "Point cloud transport used by the subscriber. "
                "Only raw is loadable; anything else aborts at startup."
            ),
        ),
        DeclareLaunchArgument("use_sim_time", default_value="false"),
    ]

    return LaunchDescription(declared_args + [subscriber])
