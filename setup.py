import os
from glob import glob

from setuptools import find_packages, setup

package_name = "point_cloud_subscriber"

setup(
    name=package_name,
    version="0.1.0",
    packages=find_packages(exclude=["test"]),
    data_files=[
        ("share/ament_index/resource_index/packages", ["resource/" + package_name]),
        ("share/" + package_name, ["package.xml"]),
        (os.path.join("share", package_name, "launch"), glob("launch/*.launch.py")),
    ],
    install_requires=["setuptools"],
    zip_safe=True,
    maintainer="Jean Chrysostome Mayoko Biong",
    maintainer_email="icmayoko18@gmail.com",
    description=(
        "ROS 2 example node: subscribe to a PointCloud2 topic through a "
        "point cloud transport and log the number of points per message"
    ),
    license="Apache-2.0",
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "point_cloud_subscriber = point_cloud_subscriber.subscriber_node:main",
        ],
    },
)
