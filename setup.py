# setup.py
from setuptools import setup

setup(
    name="BlockBoxes",
    version="0.1.1",
    packages=["engine", "world"],
    python_requires=">=3.8",
    install_requires=["panda3d"],
    extras_require={"test": ["pytest"]},
)
